"""Handoff / deep-link user activity schema."""

from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserActivity(BaseModel):
    """A continued user activity (universal link, handoff, spotlight)."""

    model_config = ConfigDict(frozen=True)

    activity_type: str
    title: Optional[str] = None
    webpage_url: Optional[str] = None
    keywords: FrozenSet[str] = Field(default_factory=frozenset)
