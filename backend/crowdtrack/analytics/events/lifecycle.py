"""Application lifecycle, navigation and deep-link events."""

from typing import Mapping

from crowdtrack.analytics.allow_list import DataLakeEvent
from crowdtrack.analytics.context import user_activity_properties
from crowdtrack.analytics.properties import deprecated
from crowdtrack.analytics.vocabulary import TabBarItemLabel
from crowdtrack.schemas.user_activity import UserActivity


class LifecycleEvents:
    """App open/close, notifications, deep links and the tab bar."""

    def track_activities(self, count: int) -> None:
        """Call when the activity feed is shown."""
        self.track(DataLakeEvent.ACTIVITY_FEED_VIEWED.value, {"activities_count": count})

    def track_app_open(self, badge_count: int = 0) -> None:
        """Call when the app launches or enters the foreground."""
        self.track("App Open", deprecated({"badge_count": badge_count}))
        self.track("Opened App")

    def track_app_close(self) -> None:
        """Call when the app enters the background."""
        self.track("App Close", deprecated())
        self.track("Closed App")

    def track_memory_warning(self) -> None:
        self.track("App Memory Warning")

    def track_crashed_app(self) -> None:
        self.track("Crashed App")

    def track_notification_opened(self) -> None:
        props = {"notification_type": "push"}

        self.track("Notification Opened", deprecated(props))
        self.track("Opened Notification", props)

    def track_opened_app_banner(self, query_params: Mapping[str, str]) -> None:
        """Call when the app is opened from the smart app banner.

        Args:
            query_params: Query parameters of the banner link, sent as-is.
        """
        props = dict(query_params)

        self.track("Smart App Banner Opened", deprecated(props))
        self.track("Opened App Banner", props)

    def track_user_activity(self, user_activity: UserActivity) -> None:
        """Call when the app continues a user activity (universal link, handoff)."""
        props = user_activity_properties(user_activity)

        self.track("Continue User Activity", deprecated(props))
        self.track("Opened Deep Link", props)

    def track_tab_bar_clicked(self, label: TabBarItemLabel) -> None:
        self.track(DataLakeEvent.TAB_BAR_CLICKED.value, {"tab_bar_label": label.value})
