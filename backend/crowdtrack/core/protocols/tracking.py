"""Protocol for tracking-client adapters."""

from typing import Any, Callable, Dict, Protocol, runtime_checkable

# (event name, final property bag); invoked synchronously before the sinks.
LogEventCallback = Callable[[str, Dict[str, Any]], None]


@runtime_checkable
class TrackingClient(Protocol):
    """Fire-and-forget event sink.

    Adapter boundary between the dispatcher and an analytics backend
    (PostHog and the data lake collector today).
    """

    def track(self, event: str, properties: Dict[str, Any]) -> None:
        """Record a single event.

        Implementations must be safe to call in fire-and-forget style:
        errors are logged, never raised.
        """
        ...
