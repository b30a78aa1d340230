"""Discovery search parameters."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from crowdtrack.schemas.project import Category


class DiscoverySort(str, Enum):
    """Sort orders; values are the API and tracking strings."""

    ENDING_SOON = "end_date"
    MAGIC = "magic"
    NEWEST = "newest"
    POPULAR = "popularity"
    DISTANCE = "distance"


class DiscoveryParams(BaseModel):
    """Filters and sort of a discovery page.

    Every filter field must be considered by ``is_everything``.
    """

    model_config = ConfigDict(frozen=True)

    recommended: Optional[bool] = None
    social: Optional[bool] = None
    staff_picks: Optional[bool] = None
    starred: Optional[bool] = None
    tag_id: Optional[str] = None
    category: Optional[Category] = None
    sort: Optional[DiscoverySort] = None
    query: Optional[str] = None

    @property
    def is_everything(self) -> bool:
        """True when no filter, sort or query is set."""
        return all(
            value is None
            for value in (
                self.recommended,
                self.social,
                self.staff_picks,
                self.starred,
                self.tag_id,
                self.category,
                self.sort,
                self.query,
            )
        )
