"""The public tracker: every catalogue method on top of the dispatcher."""

from crowdtrack.analytics.dispatcher import EventDispatcher
from crowdtrack.analytics.events import (
    AccountEvents,
    AuthEvents,
    CheckoutEvents,
    CommentEvents,
    CreatorEvents,
    DiscoveryEvents,
    LifecycleEvents,
    MessageEvents,
    ProjectEvents,
    SharingEvents,
)


class Tracker(
    LifecycleEvents,
    DiscoveryEvents,
    AuthEvents,
    CheckoutEvents,
    CommentEvents,
    SharingEvents,
    ProjectEvents,
    CreatorEvents,
    MessageEvents,
    AccountEvents,
    EventDispatcher,
):
    """Typed tracking API.

    Construct directly with any ``TrackingClient`` pair, or via
    ``crowdtrack.core.container.create_tracker`` for settings-driven sinks.

    Usage:
        tracker = Tracker(client, data_lake_client, device_provider=..., notification_center=...)
        tracker.set_logged_in_user(user)
        tracker.track_project_viewed(project, ref_tag=RefTag.search())
    """
