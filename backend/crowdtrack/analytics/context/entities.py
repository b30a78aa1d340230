"""Context for the smaller domain objects: rewards, updates, comments, categories."""

from crowdtrack.analytics.properties import Properties, prefix
from crowdtrack.schemas.activity import Comment, Update
from crowdtrack.schemas.project import Category
from crowdtrack.schemas.reward import Reward
from crowdtrack.schemas.user_activity import UserActivity


def reward_properties(reward: Reward, key_prefix: str = "backer_reward_") -> Properties:
    """Reward bag; the no-reward option contributes nothing."""
    if reward.is_no_reward:
        return {}

    preference = reward.shipping.preference
    props: Properties = {
        "id": reward.id,
        # Inverted: true when the reward has no limit.
        "is_limited_quantity": reward.limit is None,
        "minimum": reward.minimum,
        "shipping_enabled": reward.shipping.enabled,
        "shipping_preference": preference.value if preference is not None else None,
        "has_items": bool(reward.rewards_items),
    }
    return prefix(props, key_prefix)


def update_properties(update: Update, key_prefix: str = "update_") -> Properties:
    props: Properties = {
        "comments_count": update.comments_count,
        "user_has_liked": update.has_liked,
        "likes_count": update.likes_count,
        "published_at": update.published_at,
        "sequence": update.sequence,
    }
    return prefix(props, key_prefix)


def comment_properties(comment: Comment, key_prefix: str = "comment_") -> Properties:
    return prefix({"body_length": len(comment.body)}, key_prefix)


def category_properties(category: Category, key_prefix: str = "category_") -> Properties:
    return prefix({"id": category.id, "name": category.name}, key_prefix)


def user_activity_properties(activity: UserActivity) -> Properties:
    """Bag for a continued user activity. Keys are already namespaced."""
    return {
        "user_activity_type": activity.activity_type,
        "user_activity_title": activity.title,
        "user_activity_webpage_url": activity.webpage_url,
        "user_activity_keywords": sorted(activity.keywords),
    }
