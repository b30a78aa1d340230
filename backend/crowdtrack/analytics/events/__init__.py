"""Event catalogue, one mixin per product area.

Mixins rely on the ``EventDispatcher`` API (``track``,
``_project_properties``, ``logged_in_user``) and are only meaningful once
composed into ``crowdtrack.analytics.tracker.Tracker``.
"""

from crowdtrack.analytics.events.account import AccountEvents
from crowdtrack.analytics.events.auth import AuthEvents
from crowdtrack.analytics.events.checkout import CheckoutEvents
from crowdtrack.analytics.events.comments import CommentEvents
from crowdtrack.analytics.events.creator import CreatorEvents
from crowdtrack.analytics.events.discovery import DiscoveryEvents
from crowdtrack.analytics.events.lifecycle import LifecycleEvents
from crowdtrack.analytics.events.messages import MessageEvents
from crowdtrack.analytics.events.project import ProjectEvents
from crowdtrack.analytics.events.sharing import SharingEvents

__all__ = [
    "AccountEvents",
    "AuthEvents",
    "CheckoutEvents",
    "CommentEvents",
    "CreatorEvents",
    "DiscoveryEvents",
    "LifecycleEvents",
    "MessageEvents",
    "ProjectEvents",
    "SharingEvents",
]
