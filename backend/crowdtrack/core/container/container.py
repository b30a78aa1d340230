"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that belongs in the factory.

Design principles:
- Container serves, factory builds
- Fail fast: all construction at startup
- Type safety: fields are protocol types
- Testing: construct directly with fakes
"""

from dataclasses import dataclass, replace
from typing import Any

from crowdtrack.core.config import Settings
from crowdtrack.core.protocols import DeviceInfoProvider, NotificationCenter, TrackingClient


@dataclass(frozen=True)
class Container:
    """Everything a ``Tracker`` needs from its environment.

    Usage:
        container = create_container(settings)
        tracker = create_tracker(container)
    """

    client: TrackingClient
    data_lake_client: TrackingClient
    device_provider: DeviceInfoProvider
    notification_center: NotificationCenter
    settings: Settings

    def replace(self, **changes: Any) -> "Container":
        """Return a copy with some dependencies swapped, e.g. fakes in tests."""
        return replace(self, **changes)
