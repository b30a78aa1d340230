"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container with environment-appropriate implementations.

Design principles:
- Single place for all wiring decisions
- Environment-aware: local and test never reach real backends
- Fail fast: an enabled sink without its settings crashes at startup
"""

from typing import Any, Optional

from crowdtrack.adapters.device import HostDeviceInfoProvider
from crowdtrack.adapters.notifications import InMemoryNotificationCenter
from crowdtrack.adapters.tracking import (
    HttpDataLakeClient,
    NullTrackingClient,
    PostHogTrackingClient,
)
from crowdtrack.analytics.tracker import Tracker
from crowdtrack.core.config import Settings
from crowdtrack.core.container.container import Container
from crowdtrack.core.exceptions import SinkConfigurationError
from crowdtrack.core.logging import logger
from crowdtrack.core.protocols import DeviceInfoProvider, NotificationCenter, TrackingClient


def create_container(
    settings: Settings,
    *,
    device_provider: Optional[DeviceInfoProvider] = None,
    notification_center: Optional[NotificationCenter] = None,
) -> Container:
    """Build container with environment-appropriate implementations.

    Args:
        settings: Application settings (from core/config)
        device_provider: Host device bridge; defaults to the Python host.
        notification_center: Host notification bridge; defaults to in-memory.

    Returns:
        Fully constructed Container ready for use

    Raises:
        SinkConfigurationError: If an enabled sink lacks its settings.
    """
    # -----------------------------------------------------------------
    # Sinks
    # Both are null clients unless analytics is on outside local/test.
    # -----------------------------------------------------------------
    client = _create_primary_client(settings)
    data_lake_client = _create_data_lake_client(settings)

    # -----------------------------------------------------------------
    # Host bridges
    # -----------------------------------------------------------------
    return Container(
        client=client,
        data_lake_client=data_lake_client,
        device_provider=device_provider or HostDeviceInfoProvider(),
        notification_center=notification_center or InMemoryNotificationCenter(),
        settings=settings,
    )


def create_tracker(container: Container, **kwargs: Any) -> Tracker:
    """Build a Tracker that owns the container's sinks.

    Extra keyword arguments (``distinct_id``, ``log_event_callback``, ...)
    are passed through to the Tracker.
    """
    return Tracker(
        container.client,
        container.data_lake_client,
        device_provider=container.device_provider,
        notification_center=container.notification_center,
        settings=container.settings,
        owns_clients=True,
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Private factory functions
# ---------------------------------------------------------------------------


def _create_primary_client(settings: Settings) -> TrackingClient:
    """PostHog when sinks are enabled, otherwise a null client."""
    if not settings.sinks_enabled:
        logger.info(
            f"Primary tracking disabled (env={settings.ENVIRONMENT.value}, "
            f"enabled={settings.ANALYTICS_ENABLED})"
        )
        return NullTrackingClient()

    if not settings.POSTHOG_API_KEY:
        raise SinkConfigurationError("posthog", "POSTHOG_API_KEY is required when analytics is enabled")

    return PostHogTrackingClient(settings)


def _create_data_lake_client(settings: Settings) -> TrackingClient:
    """HTTP data lake client when enabled, otherwise a null client."""
    if not (settings.sinks_enabled and settings.DATA_LAKE_ENABLED):
        logger.info("Data lake tracking disabled")
        return NullTrackingClient()

    if not settings.DATA_LAKE_URL:
        raise SinkConfigurationError(
            "data_lake", "DATA_LAKE_URL is required when the data lake is enabled"
        )

    return HttpDataLakeClient(settings)
