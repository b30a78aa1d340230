"""NotificationCenter protocol for system-level change notifications.

The tracker only needs one notification today: the user changing the
preferred text size. Hosts bridge their platform's notification mechanism
onto this protocol.
"""

from typing import Any, Callable, Dict, Hashable, Optional, Protocol, runtime_checkable

CONTENT_SIZE_CATEGORY_DID_CHANGE = "content_size_category.did_change"

NotificationCallback = Callable[[Optional[Dict[str, Any]]], None]


@runtime_checkable
class NotificationCenter(Protocol):
    """Publish/subscribe by notification name."""

    def add_observer(self, name: str, callback: NotificationCallback) -> Hashable:
        """Register ``callback`` for ``name`` and return a removal token."""
        ...

    def remove_observer(self, token: Hashable) -> None:
        """Unregister the observer identified by ``token``. Unknown tokens are ignored."""
        ...

    def post(self, name: str, payload: Optional[Dict[str, Any]] = None) -> None:
        """Deliver ``payload`` to every observer of ``name``."""
        ...
