"""Event composition, dispatch and the typed event catalogue."""

from crowdtrack.analytics.dispatcher import EventDispatcher, Identity
from crowdtrack.analytics.tracker import Tracker

__all__ = ["EventDispatcher", "Identity", "Tracker"]
