"""Tests for reward, update, comment, category and user activity context."""

from crowdtrack.analytics.context import (
    category_properties,
    comment_properties,
    reward_properties,
    update_properties,
    user_activity_properties,
)
from crowdtrack.schemas.activity import Comment, Update
from crowdtrack.schemas.project import Category
from crowdtrack.schemas.reward import (
    Reward,
    RewardItem,
    RewardShipping,
    ShippingPreference,
)
from crowdtrack.schemas.user_activity import UserActivity


def test_no_reward_contributes_nothing():
    assert reward_properties(Reward.no_reward()) == {}


def test_reward_properties():
    reward = Reward(
        id=9,
        minimum=25.0,
        limit=100,
        shipping=RewardShipping(enabled=True, preference=ShippingPreference.RESTRICTED),
        rewards_items=[RewardItem(id=1, name="Mug")],
    )

    assert reward_properties(reward) == {
        "backer_reward_id": 9,
        "backer_reward_is_limited_quantity": False,
        "backer_reward_minimum": 25.0,
        "backer_reward_shipping_enabled": True,
        "backer_reward_shipping_preference": "restricted",
        "backer_reward_has_items": True,
    }


def test_unlimited_reward_is_flagged_limited_quantity():
    props = reward_properties(Reward(id=9))

    assert props["backer_reward_is_limited_quantity"] is True
    assert props["backer_reward_shipping_preference"] is None
    assert props["backer_reward_has_items"] is False


def test_update_properties():
    update = Update(
        id=3, project_id=1, sequence=4, comments_count=2, has_liked=True, likes_count=8, published_at=1.5
    )

    assert update_properties(update) == {
        "update_comments_count": 2,
        "update_user_has_liked": True,
        "update_likes_count": 8,
        "update_published_at": 1.5,
        "update_sequence": 4,
    }


def test_comment_properties_report_length_only():
    assert comment_properties(Comment(id=1, body="hello")) == {"comment_body_length": 5}


def test_category_properties_with_custom_prefix():
    category = Category(id=22, name="Illustration")

    assert category_properties(category) == {"category_id": 22, "category_name": "Illustration"}
    assert category_properties(category, "subcategory_") == {
        "subcategory_id": 22,
        "subcategory_name": "Illustration",
    }


def test_user_activity_keywords_are_sorted():
    activity = UserActivity(
        activity_type="NSUserActivityTypeBrowsingWeb",
        title="A project",
        webpage_url="https://www.kickstarter.com/projects/1",
        keywords=frozenset({"zine", "art"}),
    )

    assert user_activity_properties(activity) == {
        "user_activity_type": "NSUserActivityTypeBrowsingWeb",
        "user_activity_title": "A project",
        "user_activity_webpage_url": "https://www.kickstarter.com/projects/1",
        "user_activity_keywords": ["art", "zine"],
    }
