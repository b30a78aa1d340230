"""Tests for project context."""

from conftest import FIXED_NOW
from crowdtrack.analytics.context import project_properties
from crowdtrack.schemas.project import Creator, Personalization, Video

PROJECT_KEYS = {
    "project_backers_count",
    "project_subcategory",
    "project_country",
    "project_comments_count",
    "project_currency",
    "project_creator_uid",
    "project_deadline",
    "project_goal",
    "project_launched_at",
    "project_location",
    "project_name",
    "project_pid",
    "project_category",
    "project_percent_raised",
    "project_state",
    "project_static_usd_rate",
    "project_current_pledge_amount",
    "project_current_pledge_amount_usd",
    "project_goal_usd",
    "project_has_video",
    "project_updates_count",
    "project_prelaunch_activated",
    "project_rewards_count",
    "project_hours_remaining",
    "project_duration",
    "project_user_has_watched",
    "project_user_is_backer",
    "project_user_is_project_creator",
}


def test_project_has_every_key(project):
    assert set(project_properties(project, None, FIXED_NOW)) == PROJECT_KEYS


def test_project_values(project):
    props = project_properties(project, None, FIXED_NOW)

    assert props["project_pid"] == 1
    assert props["project_subcategory"] == "Illustration"
    assert props["project_category"] == "Art"
    assert props["project_country"] == "US"
    assert props["project_currency"] == "USD"
    assert props["project_state"] == "live"
    assert props["project_percent_raised"] == 0.5
    assert props["project_hours_remaining"] == 50
    assert props["project_duration"] == 12
    assert props["project_rewards_count"] == 1
    assert props["project_has_video"] is False
    assert props["project_location"] == "Brooklyn, NY"
    assert props["project_user_has_watched"] is True
    assert props["project_user_is_backer"] is False
    assert props["project_user_is_project_creator"] is False


def test_root_category_has_no_parent_name(project):
    root = project.category.parent
    props = project_properties(project.model_copy(update={"category": root}), None, FIXED_NOW)

    assert props["project_subcategory"] == "Art"
    assert props["project_category"] is None


def test_hours_remaining_never_negative(project):
    ended = project.model_copy(
        update={"dates": project.dates.model_copy(update={"deadline": FIXED_NOW.timestamp() - 3600})}
    )

    assert project_properties(ended, None, FIXED_NOW)["project_hours_remaining"] == 0


def test_is_project_creator_when_user_created_it(project, user):
    own = project.model_copy(update={"creator": Creator(id=user.id)})

    assert project_properties(own, user, FIXED_NOW)["project_user_is_project_creator"] is True
    assert project_properties(project, user, FIXED_NOW)["project_user_is_project_creator"] is False


def test_unknown_personalization_is_none(project):
    props = project_properties(
        project.model_copy(update={"personalization": Personalization()}), None, FIXED_NOW
    )

    assert props["project_user_has_watched"] is None
    assert props["project_user_is_backer"] is None


def test_video_and_missing_counts(project):
    props = project_properties(
        project.model_copy(
            update={
                "video": Video(id=3),
                "stats": project.stats.model_copy(update={"comments_count": None}),
            }
        ),
        None,
        FIXED_NOW,
    )

    assert props["project_has_video"] is True
    assert props["project_comments_count"] == 0
