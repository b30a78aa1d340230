"""Tests for RefTag derivation from discovery params."""

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from crowdtrack.schemas.discovery import DiscoveryParams, DiscoverySort
from crowdtrack.schemas.project import Category
from crowdtrack.schemas.ref_tag import RefTag

ART = Category(id=1, name="Art")


@dataclass
class RefTagCase:
    id: str
    params: DiscoveryParams
    expected: str


CASES = [
    RefTagCase(id="plain", params=DiscoveryParams(), expected="discovery"),
    RefTagCase(id="magic_has_no_suffix", params=DiscoveryParams(sort=DiscoverySort.MAGIC), expected="discovery"),
    RefTagCase(
        id="ending_soon",
        params=DiscoveryParams(sort=DiscoverySort.ENDING_SOON),
        expected="discovery_ending_soon",
    ),
    RefTagCase(
        id="category_wins",
        params=DiscoveryParams(category=ART, recommended=True, sort=DiscoverySort.NEWEST),
        expected="category_newest",
    ),
    RefTagCase(
        id="recommended_over_staff_picks",
        params=DiscoveryParams(recommended=True, staff_picks=True, sort=DiscoverySort.DISTANCE),
        expected="recs_distance",
    ),
    RefTagCase(
        id="staff_picks_over_social",
        params=DiscoveryParams(staff_picks=True, social=True),
        expected="recommended",
    ),
    RefTagCase(
        id="social_popular",
        params=DiscoveryParams(social=True, sort=DiscoverySort.POPULAR),
        expected="social_popular",
    ),
    RefTagCase(
        id="starred_ignores_sort",
        params=DiscoveryParams(starred=True, sort=DiscoverySort.NEWEST),
        expected="starred",
    ),
    RefTagCase(
        id="false_flags_fall_through",
        params=DiscoveryParams(recommended=False, social=False),
        expected="discovery",
    ),
]


@pytest.mark.parametrize("case", CASES, ids=[c.id for c in CASES])
def test_from_params(case: RefTagCase):
    assert RefTag.from_params(case.params).string_tag == case.expected


def test_named_tags():
    assert RefTag.activity().string_tag == "activity"
    assert RefTag.search().string_tag == "search"
    assert RefTag.push().string_tag == "push"
    assert RefTag.messages().string_tag == "messages"


def test_empty_tag_is_rejected():
    with pytest.raises(ValidationError):
        RefTag(string_tag="")
