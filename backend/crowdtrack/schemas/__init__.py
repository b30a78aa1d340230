"""Domain schemas the tracker reads context from."""

from crowdtrack.schemas.activity import Comment, Update
from crowdtrack.schemas.device import DeviceIdiom, DeviceInfo, DeviceOrientation
from crowdtrack.schemas.discovery import DiscoveryParams, DiscoverySort
from crowdtrack.schemas.preferences import Currency, Newsletter, ProjectNotificationProject
from crowdtrack.schemas.project import (
    Category,
    Country,
    Creator,
    Location,
    Personalization,
    Project,
    ProjectDates,
    ProjectState,
    ProjectStats,
    Video,
)
from crowdtrack.schemas.ref_tag import RefTag
from crowdtrack.schemas.reward import (
    NO_REWARD_ID,
    Backing,
    Reward,
    RewardItem,
    RewardShipping,
    ShippingPreference,
)
from crowdtrack.schemas.share import ShareActivityType, ShareContext, ShareContextKind
from crowdtrack.schemas.user import RemoteConfig, User, UserLocation, UserStats
from crowdtrack.schemas.user_activity import UserActivity

__all__ = [
    "NO_REWARD_ID",
    "Backing",
    "Category",
    "Comment",
    "Country",
    "Creator",
    "Currency",
    "DeviceIdiom",
    "DeviceInfo",
    "DeviceOrientation",
    "DiscoveryParams",
    "DiscoverySort",
    "Location",
    "Newsletter",
    "Personalization",
    "Project",
    "ProjectDates",
    "ProjectNotificationProject",
    "ProjectState",
    "ProjectStats",
    "RefTag",
    "RemoteConfig",
    "Reward",
    "RewardItem",
    "RewardShipping",
    "ShareActivityType",
    "ShareContext",
    "ShareContextKind",
    "ShippingPreference",
    "Update",
    "User",
    "UserActivity",
    "UserLocation",
    "UserStats",
    "Video",
]
