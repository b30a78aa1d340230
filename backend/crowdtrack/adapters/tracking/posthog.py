"""PostHog tracking client adapter."""

import logging
from typing import Any, Dict, Optional

from posthog import Posthog

from crowdtrack.core.config import Settings

logger = logging.getLogger(__name__)

# Property keys that identify the actor, in order of preference.
_DISTINCT_ID_KEYS = ("user_uid", "session_device_distinct_id")
_ANONYMOUS_DISTINCT_ID = "anonymous"


def distinct_id_for(properties: Dict[str, Any]) -> str:
    """Pick the PostHog distinct id out of a composed property bag."""
    for key in _DISTINCT_ID_KEYS:
        value = properties.get(key)
        if value is not None:
            return str(value)
    return _ANONYMOUS_DISTINCT_ID


class PostHogTrackingClient:
    """Wraps the PostHog SDK behind the TrackingClient protocol.

    The logged-in user's id is the distinct id when present, otherwise the
    per-install device id, so anonymous and identified activity line up the
    same way they do in the app.
    """

    def __init__(self, settings: Settings, client: Optional[Posthog] = None) -> None:
        """Configure the PostHog SDK from settings.

        Args:
            settings: Application settings.
            client: Pre-built SDK client; built from settings when omitted.
        """
        self._client = client or Posthog(settings.POSTHOG_API_KEY, host=settings.POSTHOG_HOST)
        logger.info("PostHog tracking client initialized (env=%s)", settings.ENVIRONMENT.value)

    def track(self, event: str, properties: Dict[str, Any]) -> None:
        """Send event to PostHog. Errors are logged, never raised."""
        try:
            self._client.capture(
                distinct_id=distinct_id_for(properties),
                event=event,
                properties=dict(properties),
            )
        except Exception as e:
            logger.error("Failed to track event '%s' to PostHog: %s", event, e)

    def close(self) -> None:
        """Flush queued events and stop the SDK's consumer thread."""
        try:
            self._client.shutdown()
        except Exception as e:
            logger.error("Failed to shut down PostHog client: %s", e)
