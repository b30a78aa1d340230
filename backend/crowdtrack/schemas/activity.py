"""Update and comment schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Update(BaseModel):
    """A creator's project update."""

    model_config = ConfigDict(frozen=True)

    id: int
    project_id: int
    sequence: int
    title: Optional[str] = None
    comments_count: Optional[int] = None
    has_liked: Optional[bool] = None
    likes_count: Optional[int] = None
    published_at: Optional[float] = None


class Comment(BaseModel):
    """A comment on a project or update."""

    model_config = ConfigDict(frozen=True)

    id: int
    body: str
