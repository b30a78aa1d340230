"""In-memory notification center.

Delivers notifications synchronously on the posting thread. Hosts that own
a platform notification system bridge it by calling ``post``.
"""

import logging
import threading
import uuid
from typing import Any, Dict, Hashable, Optional

from crowdtrack.core.protocols.notifications import NotificationCallback

logger = logging.getLogger(__name__)


class InMemoryNotificationCenter:
    """Thread-safe name-keyed observer registry.

    Implements the NotificationCenter protocol. Callbacks run outside the
    registry lock, so an observer may add or remove observers while being
    notified.

    Usage:
        center = InMemoryNotificationCenter()
        token = center.add_observer(CONTENT_SIZE_CATEGORY_DID_CHANGE, on_change)
        center.post(CONTENT_SIZE_CATEGORY_DID_CHANGE, {"category": "large"})
        center.remove_observer(token)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._observers: Dict[str, tuple[str, NotificationCallback]] = {}

    def add_observer(self, name: str, callback: NotificationCallback) -> Hashable:
        token = uuid.uuid4().hex
        with self._lock:
            self._observers[token] = (name, callback)
        logger.debug(f"NotificationCenter: observer {token} added for '{name}'")
        return token

    def remove_observer(self, token: Hashable) -> None:
        with self._lock:
            removed = self._observers.pop(token, None)
        if removed is not None:
            logger.debug(f"NotificationCenter: observer {token} removed")

    def post(self, name: str, payload: Optional[Dict[str, Any]] = None) -> None:
        """Call every observer registered for ``name`` with ``payload``.

        Observer exceptions propagate to the poster.
        """
        with self._lock:
            callbacks = [cb for observed, cb in self._observers.values() if observed == name]
        for callback in callbacks:
            callback(payload)

    def observer_count(self, name: Optional[str] = None) -> int:
        """Number of registered observers, optionally for one name."""
        with self._lock:
            if name is None:
                return len(self._observers)
            return sum(1 for observed, _ in self._observers.values() if observed == name)
