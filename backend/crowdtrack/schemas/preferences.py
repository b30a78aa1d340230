"""Account preference schemas: newsletters, currency, project notifications."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Newsletter(str, Enum):
    """Newsletters a user can subscribe to; values are the tracked labels."""

    ARTS = "arts"
    FILMS = "films"
    GAMES = "games"
    HAPPENING = "happening"
    INVENT = "invent"
    MUSIC = "music"
    PROMO = "promo"
    PUBLISHING = "publishing"
    WEEKLY = "weekly"
    ALUMNI = "alumni"


class Currency(BaseModel):
    """A display currency choice."""

    model_config = ConfigDict(frozen=True)

    code: str
    description_text: str


class ProjectNotificationProject(BaseModel):
    """The project a notification preference belongs to."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
