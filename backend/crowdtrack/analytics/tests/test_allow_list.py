"""Tests for the data lake allow-list."""

import pytest

from crowdtrack.analytics.allow_list import DATA_LAKE_EVENTS, DataLakeEvent, is_data_lake_event


def test_allow_list_has_exactly_the_mirrored_events():
    assert DATA_LAKE_EVENTS == {
        "Explore Page Viewed",
        "Explore Sort Clicked",
        "Activity Feed Viewed",
        "Editorial Card Clicked",
        "Collection Viewed",
        "Filter Clicked",
        "Tab Bar Clicked",
        "Search Page Viewed",
        "Search Results Loaded",
        "Project Swiped",
        "Project Page Viewed",
    }


@pytest.mark.parametrize("event", list(DataLakeEvent), ids=[e.name for e in DataLakeEvent])
def test_allow_listed_events_match(event: DataLakeEvent):
    assert is_data_lake_event(event.value)


@pytest.mark.parametrize("name", ["Logged In", "explore page viewed", "", "Project Page Viewed "])
def test_other_names_do_not_match(name: str):
    assert not is_data_lake_event(name)
