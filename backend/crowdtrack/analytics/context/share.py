"""Share context."""

from datetime import datetime
from typing import Optional, Union

from crowdtrack.analytics.context.entities import update_properties
from crowdtrack.analytics.context.project import project_properties
from crowdtrack.analytics.properties import Properties, merge
from crowdtrack.schemas.share import ShareActivityType, ShareContext
from crowdtrack.schemas.user import User

_SHARE_TYPES = {
    ShareActivityType.POST_TO_FACEBOOK.value: "facebook",
    ShareActivityType.MESSAGE.value: "message",
    ShareActivityType.MAIL.value: "email",
    ShareActivityType.COPY_TO_PASTEBOARD.value: "copy link",
    ShareActivityType.POST_TO_TWITTER.value: "twitter",
    ShareActivityType.NOTES.value: "notes",
    ShareActivityType.SAFARI.value: "safari",
}


def _raw(activity_type: Union[ShareActivityType, str, None]) -> Optional[str]:
    if isinstance(activity_type, ShareActivityType):
        return activity_type.value
    return activity_type


def share_type_label(activity_type: Union[ShareActivityType, str, None]) -> Optional[str]:
    """Short label for a share target; unknown targets keep their raw value."""
    raw = _raw(activity_type)
    if raw is None:
        return None
    return _SHARE_TYPES.get(raw, raw)


def share_properties(
    share_context: ShareContext,
    logged_in_user: Optional[User],
    share_activity_type: Union[ShareActivityType, str, None] = None,
    now: Optional[datetime] = None,
) -> Properties:
    """Bag for a share: share target, project, update (for update shares) and context."""
    update_props = update_properties(share_context.update) if share_context.update is not None else {}
    return merge(
        {
            "share_activity_type": _raw(share_activity_type),
            "share_type": share_type_label(share_activity_type),
        },
        project_properties(share_context.project, logged_in_user, now),
        update_props,
        {"context": share_context.kind.value},
    )
