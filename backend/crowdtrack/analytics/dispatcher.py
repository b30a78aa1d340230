"""Event composition and dual dispatch.

Every tracked event is composed from three bags, merged so that later
sources win:

    session context  <  user context  <  caller properties

and then handed to the optional ``log_event_callback``, always to the
primary client, and to the data lake client when the event name is
allow-listed.
"""

import threading
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from crowdtrack.analytics.allow_list import is_data_lake_event
from crowdtrack.analytics.content_size import ContentSizeCategoryObserver
from crowdtrack.analytics.context import project_properties, session_properties, user_properties
from crowdtrack.analytics.properties import Properties, merge
from crowdtrack.core.config import Settings
from crowdtrack.core.config import settings as default_settings
from crowdtrack.core.logging import logger
from crowdtrack.core.protocols import (
    DeviceInfoProvider,
    LogEventCallback,
    NotificationCenter,
    TrackingClient,
)
from crowdtrack.schemas.project import Project
from crowdtrack.schemas.user import RemoteConfig, User


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Identity:
    """Host-supplied identity state, swapped as a whole on every change."""

    logged_in_user: Optional[User] = None
    config: Optional[RemoteConfig] = None


class EventDispatcher:
    """Composes event properties and routes events to the sinks.

    Identity is held in an immutable ``Identity`` snapshot. Writers replace
    it under a lock; readers take the current reference without locking,
    so a tracking call always sees a consistent user/config pair.

    The dispatcher subscribes to content size changes on construction;
    call ``close`` (or use it as a context manager) to unsubscribe.
    """

    def __init__(
        self,
        client: TrackingClient,
        data_lake_client: TrackingClient,
        *,
        device_provider: DeviceInfoProvider,
        notification_center: NotificationCenter,
        settings: Optional[Settings] = None,
        distinct_id: Optional[str] = None,
        config: Optional[RemoteConfig] = None,
        logged_in_user: Optional[User] = None,
        clock: Callable[[], datetime] = _utc_now,
        log_event_callback: Optional[LogEventCallback] = None,
        owns_clients: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            client: Primary sink, receives every event.
            data_lake_client: Secondary sink, receives allow-listed events.
            device_provider: Source of the per-event device snapshot.
            notification_center: Delivers content size change notifications.
            settings: Client constants; defaults to the process settings.
            distinct_id: Stable per-install id; a random UUID if omitted.
            config: Initial remote config.
            logged_in_user: Initial logged-in user.
            clock: Returns the current time for event timestamps.
            log_event_callback: Called with every final event before the sinks.
            owns_clients: Close the sinks when the dispatcher is closed.
        """
        self._client = client
        self._data_lake_client = data_lake_client
        self._device_provider = device_provider
        self._settings = settings or default_settings
        self._distinct_id = distinct_id or str(uuid.uuid4()).upper()
        self._clock = clock
        self._owns_clients = owns_clients
        self.log_event_callback = log_event_callback

        self._identity_lock = threading.Lock()
        self._identity = Identity(logged_in_user=logged_in_user, config=config)

        self._content_size = ContentSizeCategoryObserver(
            notification_center, device_provider.preferred_content_size_category
        )
        self._content_size.start()

        self._logger = logger.with_context(component="event_dispatcher")

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def distinct_id(self) -> str:
        return self._distinct_id

    @property
    def logged_in_user(self) -> Optional[User]:
        return self._identity.logged_in_user

    @property
    def config(self) -> Optional[RemoteConfig]:
        return self._identity.config

    def set_logged_in_user(self, user: Optional[User]) -> None:
        """Replace the logged-in user (``None`` on logout)."""
        with self._identity_lock:
            self._identity = replace(self._identity, logged_in_user=user)

    def set_config(self, config: Optional[RemoteConfig]) -> None:
        """Replace the remote config."""
        with self._identity_lock:
            self._identity = replace(self._identity, config=config)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def track(
        self,
        event: str,
        properties: Optional[Mapping[str, Any]] = None,
        ref_tag: Optional[str] = None,
        referrer_credit: Optional[str] = None,
    ) -> None:
        """Compose the final bag for ``event`` and send it to the sinks.

        Args:
            event: Event name.
            properties: Caller properties; they win every key collision.
            ref_tag: Recorded as ``session_ref_tag``.
            referrer_credit: Recorded as ``session_referrer_credit``.
        """
        identity = self._identity
        session = session_properties(
            self._device_provider.snapshot(),
            distinct_id=self._distinct_id,
            settings=self._settings,
            now=self._clock(),
            config=identity.config,
            logged_in_user=identity.logged_in_user,
            content_size_category=self._content_size.category,
            ref_tag=ref_tag,
            referrer_credit=referrer_credit,
        )
        props = merge(session, user_properties(identity.logged_in_user, identity.config), properties)

        if self.log_event_callback is not None:
            self.log_event_callback(event, props)

        self._client.track(event, props)

        to_data_lake = is_data_lake_event(event)
        if to_data_lake:
            self._data_lake_client.track(event, props)

        self._logger.debug(
            f"Tracked '{event}' with {len(props)} properties"
            f"{' (mirrored to data lake)' if to_data_lake else ''}"
        )

    def _project_properties(self, project: Project) -> Properties:
        return project_properties(project, self.logged_in_user, self._clock())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Stop observing content size changes and, if owned, close the sinks."""
        self._content_size.close()
        if not self._owns_clients:
            return
        for client in (self._client, self._data_lake_client):
            close = getattr(client, "close", None)
            if close is not None:
                close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
