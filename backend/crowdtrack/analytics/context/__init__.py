"""Context providers: pure functions from domain objects to prefixed bags."""

from crowdtrack.analytics.context.discovery import discovery_properties
from crowdtrack.analytics.context.entities import (
    category_properties,
    comment_properties,
    reward_properties,
    update_properties,
    user_activity_properties,
)
from crowdtrack.analytics.context.project import project_properties
from crowdtrack.analytics.context.session import session_properties
from crowdtrack.analytics.context.share import share_properties, share_type_label
from crowdtrack.analytics.context.user import user_properties

__all__ = [
    "category_properties",
    "comment_properties",
    "discovery_properties",
    "project_properties",
    "reward_properties",
    "session_properties",
    "share_properties",
    "share_type_label",
    "update_properties",
    "user_activity_properties",
    "user_properties",
]
