"""Fake tracking client for testing."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TrackedEvent:
    """Single recorded tracking call."""

    event: str
    properties: Dict[str, Any]


class FakeTrackingClient:
    """In-memory test double for TrackingClient.

    Records all tracked events for assertions.

    Usage:
        client = FakeTrackingClient()
        tracker = Tracker(client, FakeTrackingClient(), ...)
        tracker.track_login_success(AuthType.EMAIL)
        assert client.has("Logged In")
    """

    def __init__(self) -> None:
        """Initialize with empty event list."""
        self.events: list[TrackedEvent] = []
        self.closed = False

    def track(self, event: str, properties: Dict[str, Any]) -> None:
        """Record the event for later assertions."""
        self.events.append(TrackedEvent(event=event, properties=dict(properties)))

    def close(self) -> None:
        self.closed = True

    @property
    def names(self) -> list[str]:
        """Tracked event names, in order."""
        return [e.event for e in self.events]

    def has(self, event: str) -> bool:
        """Return True if an event with the given name was tracked."""
        return any(e.event == event for e in self.events)

    def get(self, event: str) -> TrackedEvent:
        """Return the first tracked event matching name, or raise AssertionError."""
        for e in self.events:
            if e.event == event:
                return e
        raise AssertionError(f"No event '{event}' tracked. Tracked: {self.names}")

    def get_all(self, event: str) -> list[TrackedEvent]:
        """Return all tracked events matching name."""
        return [e for e in self.events if e.event == event]

    def clear(self) -> None:
        """Reset tracked events."""
        self.events.clear()
