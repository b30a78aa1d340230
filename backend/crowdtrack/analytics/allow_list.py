"""Events mirrored to the data lake.

The data lake only receives the events named here; every other event goes
to the primary sink alone. The set is fixed for the life of the process.
"""

from enum import Enum
from typing import FrozenSet


class DataLakeEvent(str, Enum):
    """Allow-listed event names."""

    EXPLORE_PAGE_VIEWED = "Explore Page Viewed"
    EXPLORE_SORT_CLICKED = "Explore Sort Clicked"
    ACTIVITY_FEED_VIEWED = "Activity Feed Viewed"
    EDITORIAL_CARD_CLICKED = "Editorial Card Clicked"
    COLLECTION_VIEWED = "Collection Viewed"
    FILTER_CLICKED = "Filter Clicked"
    TAB_BAR_CLICKED = "Tab Bar Clicked"
    SEARCH_PAGE_VIEWED = "Search Page Viewed"
    SEARCH_RESULTS_LOADED = "Search Results Loaded"
    PROJECT_SWIPED = "Project Swiped"
    PROJECT_PAGE_VIEWED = "Project Page Viewed"


DATA_LAKE_EVENTS: FrozenSet[str] = frozenset(event.value for event in DataLakeEvent)


def is_data_lake_event(event: str) -> bool:
    """Whether ``event`` should also be sent to the data lake."""
    return event in DATA_LAKE_EVENTS
