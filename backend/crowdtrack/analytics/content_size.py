"""Cached preferred content size category.

The preferred text size changes rarely (the user changes a system
setting) but is read on every event, possibly from another thread than
the one delivering the change notification. The observer owns the cached
value and its lock; ``start`` subscribes and ``close`` unsubscribes.
"""

import threading
from typing import Any, Callable, Dict, Hashable, Optional

from crowdtrack.core.logging import logger
from crowdtrack.core.protocols.notifications import (
    CONTENT_SIZE_CATEGORY_DID_CHANGE,
    NotificationCenter,
)

# Payload key carrying the new category, when the poster includes it.
CATEGORY_PAYLOAD_KEY = "category"


class ContentSizeCategoryObserver:
    """Caches the preferred content size category and keeps it current.

    Usage:
        with ContentSizeCategoryObserver(center, provider.preferred_content_size_category) as obs:
            obs.category
    """

    def __init__(
        self,
        notification_center: NotificationCenter,
        read_category: Callable[[], Optional[str]],
    ) -> None:
        """Create an observer; nothing is subscribed until ``start``.

        Args:
            notification_center: Where change notifications are posted.
            read_category: Reads the current category from the platform.
        """
        self._center = notification_center
        self._read_category = read_category
        self._lock = threading.Lock()
        self._category: Optional[str] = None
        self._token: Optional[Hashable] = None

    @property
    def category(self) -> Optional[str]:
        with self._lock:
            return self._category

    @property
    def is_observing(self) -> bool:
        with self._lock:
            return self._token is not None

    def start(self) -> "ContentSizeCategoryObserver":
        """Subscribe to change notifications and read the initial value."""
        with self._lock:
            if self._token is not None:
                return self
            self._token = self._center.add_observer(CONTENT_SIZE_CATEGORY_DID_CHANGE, self._on_change)
        self._store(self._read_category())
        return self

    def close(self) -> None:
        """Unsubscribe. Safe to call more than once."""
        with self._lock:
            token, self._token = self._token, None
        if token is not None:
            self._center.remove_observer(token)

    def _on_change(self, payload: Optional[Dict[str, Any]]) -> None:
        if payload and CATEGORY_PAYLOAD_KEY in payload:
            self._store(payload[CATEGORY_PAYLOAD_KEY])
        else:
            self._store(self._read_category())

    def _store(self, category: Optional[str]) -> None:
        with self._lock:
            self._category = category
        logger.debug(f"Preferred content size category is now '{category}'")

    def __enter__(self) -> "ContentSizeCategoryObserver":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.close()
