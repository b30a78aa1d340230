"""User context."""

from typing import Optional

from crowdtrack.analytics.properties import Properties, prefix
from crowdtrack.schemas.user import RemoteConfig, User

USER_PREFIX = "user_"


def user_properties(user: Optional[User], config: Optional[RemoteConfig]) -> Properties:
    """Build the ``user_``-prefixed bag.

    Every field is ``None`` without a user, except ``user_country`` which
    falls back to the remote config's country code.
    """
    stats = user.stats if user is not None else None
    location_country = user.location.country if user is not None and user.location else None
    if location_country is None and config is not None:
        location_country = config.country_code

    props: Properties = {
        "is_admin": user.is_admin if user is not None else None,
        "backed_projects_count": stats.backed_projects_count if stats else None,
        "country": location_country,
        "facebook_account": user.facebook_connected if user is not None else None,
        "watched_projects_count": stats.starred_projects_count if stats else None,
        "launched_projects_count": stats.created_projects_count if stats else None,
        "uid": user.id if user is not None else None,
    }
    return prefix(props, USER_PREFIX)
