"""Tests for discovery context."""

from dataclasses import dataclass, field
from typing import Any, Dict

import pytest

from crowdtrack.analytics.context import discovery_properties
from crowdtrack.schemas.discovery import DiscoveryParams, DiscoverySort
from crowdtrack.schemas.project import Category

ART = Category(id=1, name="Art")
ILLUSTRATION = Category(id=22, name="Illustration", parent=ART)


@dataclass
class DiscoveryCase:
    id: str
    params: DiscoveryParams
    expected: Dict[str, Any] = field(default_factory=dict)


CASES = [
    DiscoveryCase(
        id="everything",
        params=DiscoveryParams(),
        expected={"discover_everything": True, "discover_ref_tag": "discovery", "discover_sort": None},
    ),
    DiscoveryCase(
        id="sort_only_is_not_everything",
        params=DiscoveryParams(sort=DiscoverySort.NEWEST),
        expected={
            "discover_everything": False,
            "discover_sort": "newest",
            "discover_ref_tag": "discovery_newest",
        },
    ),
    DiscoveryCase(
        id="query_only_is_not_everything",
        params=DiscoveryParams(query="robots"),
        expected={"discover_everything": False, "discover_search_term": "robots"},
    ),
    DiscoveryCase(
        id="tag_only_is_not_everything",
        params=DiscoveryParams(tag_id="lgbtq"),
        expected={"discover_everything": False, "discover_tag": "lgbtq"},
    ),
    DiscoveryCase(
        id="staff_picks",
        params=DiscoveryParams(staff_picks=True, sort=DiscoverySort.POPULAR),
        expected={
            "discover_pwl": True,
            "discover_everything": False,
            "discover_ref_tag": "recommended_popular",
        },
    ),
    DiscoveryCase(
        id="starred",
        params=DiscoveryParams(starred=True),
        expected={"discover_watched": True, "discover_ref_tag": "starred"},
    ),
    DiscoveryCase(
        id="subcategory",
        params=DiscoveryParams(category=ILLUSTRATION),
        expected={
            "discover_subcategory_id": 22,
            "discover_subcategory_name": "Illustration",
            "discover_category_id": 1,
            "discover_category_name": "Art",
            "discover_ref_tag": "category",
        },
    ),
    DiscoveryCase(
        id="root_category",
        params=DiscoveryParams(category=ART),
        expected={
            "discover_subcategory_id": 1,
            "discover_subcategory_name": "Art",
            "discover_category_id": None,
            "discover_category_name": None,
        },
    ),
]


@pytest.mark.parametrize("case", CASES, ids=[c.id for c in CASES])
def test_discovery_properties(case: DiscoveryCase):
    props = discovery_properties(case.params)

    for key, value in case.expected.items():
        assert props[key] == value, key


def test_discovery_has_every_key_when_empty():
    assert set(discovery_properties(DiscoveryParams())) == {
        "discover_recommended",
        "discover_social",
        "discover_pwl",
        "discover_watched",
        "discover_tag",
        "discover_subcategory_id",
        "discover_subcategory_name",
        "discover_category_id",
        "discover_category_name",
        "discover_everything",
        "discover_sort",
        "discover_ref_tag",
        "discover_search_term",
    }


def test_explicit_false_filter_is_not_everything():
    assert discovery_properties(DiscoveryParams(recommended=False))["discover_everything"] is False
