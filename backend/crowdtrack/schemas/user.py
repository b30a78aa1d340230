"""User and remote config schemas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserLocation(BaseModel):
    """Where a user says they are."""

    model_config = ConfigDict(frozen=True)

    country: Optional[str] = None
    name: Optional[str] = None


class UserStats(BaseModel):
    """Project counts for a user. ``None`` means the API did not send it."""

    model_config = ConfigDict(frozen=True)

    backed_projects_count: Optional[int] = None
    starred_projects_count: Optional[int] = None
    created_projects_count: Optional[int] = None


class User(BaseModel):
    """The authenticated user."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    is_admin: Optional[bool] = None
    facebook_connected: Optional[bool] = None
    location: Optional[UserLocation] = None
    stats: UserStats = Field(default_factory=UserStats)


class RemoteConfig(BaseModel):
    """Remote feature-flag and experiment config pushed by the host."""

    model_config = ConfigDict(frozen=True)

    country_code: str
    features: Dict[str, bool] = Field(default_factory=dict)
    ab_experiments: Dict[str, str] = Field(default_factory=dict)

    @property
    def ab_experiments_array(self) -> List[str]:
        """Experiments rendered as ``name[variant]`` strings."""
        return [f"{name}[{variant}]" for name, variant in self.ab_experiments.items()]
