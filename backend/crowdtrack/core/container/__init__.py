"""Dependency Injection Container Module.

Usage:
------
    # Initialize at startup (call once)
    from crowdtrack.core.config import settings
    from crowdtrack.core.container import initialize_container
    initialize_container(settings)

    # Build the tracker from the global container
    import crowdtrack.core.container as di
    tracker = di.create_tracker(di.container)

    # In tests (construct directly with fakes, don't use global)
    test_container = Container(
        client=FakeTrackingClient(),
        data_lake_client=FakeTrackingClient(),
        device_provider=StaticDeviceInfoProvider(),
        notification_center=InMemoryNotificationCenter(),
        settings=Settings(),
    )

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container(), create_tracker() (builds)
"""

from typing import TYPE_CHECKING

from crowdtrack.core.container.container import Container
from crowdtrack.core.container.factory import create_container, create_tracker

if TYPE_CHECKING:
    from crowdtrack.core.config import Settings

__all__ = [
    "Container",
    "container",
    "create_container",
    "create_tracker",
    "initialize_container",
    "reset_container",
]


container: Container | None = None
"""Global container instance, set by ``initialize_container()``."""


def initialize_container(settings: "Settings") -> None:
    """Initialize the global container. Call once at startup.

    Raises:
        RuntimeError: If called more than once (container already initialized)
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once at startup."
        )

    container = create_container(settings)


def reset_container() -> None:
    """Reset the global container to None. For testing only."""
    global container
    container = None
