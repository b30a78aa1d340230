"""Project context."""

from datetime import datetime, timezone
from typing import Optional

from crowdtrack.analytics.properties import Properties, merge, prefix
from crowdtrack.schemas.project import Project
from crowdtrack.schemas.user import User

PROJECT_PREFIX = "project_"


def project_properties(
    project: Project,
    logged_in_user: Optional[User] = None,
    now: Optional[datetime] = None,
) -> Properties:
    """Build the ``project_``-prefixed bag for ``project``.

    ``hours_remaining`` is measured from ``now`` (defaults to the current
    time). Viewer-specific fields are nested as ``project_user_*``.
    """
    now = now or datetime.now(timezone.utc)
    stats = project.stats
    parent = project.category.parent

    props: Properties = {
        "backers_count": stats.backers_count,
        "subcategory": project.category.name,
        "country": project.country.country_code,
        "comments_count": stats.comments_count or 0,
        "currency": project.country.currency_code,
        "creator_uid": project.creator.id,
        "deadline": project.dates.deadline,
        "goal": stats.goal,
        "launched_at": project.dates.launched_at,
        "location": project.location.name,
        "name": project.name,
        "pid": project.id,
        "category": parent.name if parent is not None else None,
        "percent_raised": stats.funding_progress,
        "state": project.state.value,
        "static_usd_rate": stats.static_usd_rate,
        "current_pledge_amount": stats.pledged,
        "current_pledge_amount_usd": stats.pledged_usd,
        "goal_usd": stats.goal_usd,
        "has_video": project.video is not None,
        "updates_count": stats.updates_count,
        "prelaunch_activated": project.prelaunch_activated,
        "rewards_count": len(project.rewards),
        "hours_remaining": project.dates.hours_remaining(now),
        "duration": project.dates.duration(),
    }

    viewer: Properties = {
        "has_watched": project.personalization.is_starred,
        "is_backer": project.personalization.is_backing,
        "is_project_creator": logged_in_user is not None and project.creator.id == logged_in_user.id,
    }

    return prefix(merge(props, prefix(viewer, "user_")), PROJECT_PREFIX)
