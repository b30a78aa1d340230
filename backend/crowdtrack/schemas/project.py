"""Project schemas.

Timestamps are seconds since the epoch, as delivered by the API.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from crowdtrack.schemas.reward import Reward

_SECONDS_PER_HOUR = 60 * 60
_SECONDS_PER_DAY = 24 * _SECONDS_PER_HOUR


class ProjectState(str, Enum):
    """Lifecycle state of a project."""

    CANCELED = "canceled"
    FAILED = "failed"
    LIVE = "live"
    PURGED = "purged"
    STARTED = "started"
    SUBMITTED = "submitted"
    SUCCESSFUL = "successful"
    SUSPENDED = "suspended"


class Category(BaseModel):
    """A project category; subcategories point at their parent."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    parent: Optional["Category"] = None


class Country(BaseModel):
    """Country a project is launched from."""

    model_config = ConfigDict(frozen=True)

    country_code: str
    currency_code: str


class Location(BaseModel):
    """Project location."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: Optional[str] = None


class Creator(BaseModel):
    """Project creator."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None


class Video(BaseModel):
    """Project video."""

    model_config = ConfigDict(frozen=True)

    id: int
    high: Optional[str] = None


class Personalization(BaseModel):
    """Viewer-specific project state. ``None`` means unknown."""

    model_config = ConfigDict(frozen=True)

    is_starred: Optional[bool] = None
    is_backing: Optional[bool] = None


class ProjectStats(BaseModel):
    """Funding statistics."""

    model_config = ConfigDict(frozen=True)

    backers_count: int = 0
    comments_count: Optional[int] = None
    updates_count: Optional[int] = None
    goal: float = 0.0
    pledged: float = 0.0
    static_usd_rate: float = 1.0

    @property
    def funding_progress(self) -> float:
        """Fraction of the goal pledged so far."""
        if self.goal == 0:
            return 0.0
        return self.pledged / self.goal

    @property
    def pledged_usd(self) -> float:
        return self.pledged * self.static_usd_rate

    @property
    def goal_usd(self) -> float:
        return self.goal * self.static_usd_rate


class ProjectDates(BaseModel):
    """Launch and deadline timestamps."""

    model_config = ConfigDict(frozen=True)

    launched_at: float
    deadline: float

    def hours_remaining(self, now: datetime) -> int:
        """Whole hours from ``now`` until the deadline, never negative."""
        return max(0, int((self.deadline - now.timestamp()) // _SECONDS_PER_HOUR))

    def duration(self) -> int:
        """Whole days between launch and deadline."""
        return int((self.deadline - self.launched_at) / _SECONDS_PER_DAY)


class Project(BaseModel):
    """A crowdfunding project."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    state: ProjectState
    category: Category
    country: Country
    creator: Creator
    dates: ProjectDates
    location: Location = Field(default_factory=Location)
    personalization: Personalization = Field(default_factory=Personalization)
    stats: ProjectStats = Field(default_factory=ProjectStats)
    video: Optional[Video] = None
    prelaunch_activated: Optional[bool] = None
    rewards: List[Reward] = Field(default_factory=list)
