"""No-op tracking client used when a sink is disabled."""

from typing import Any, Dict


class NullTrackingClient:
    """Discards every event."""

    def track(self, event: str, properties: Dict[str, Any]) -> None:
        return None
