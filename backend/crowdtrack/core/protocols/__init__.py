"""Protocols for crowdtrack's external collaborators."""

from crowdtrack.core.protocols.device import DeviceInfoProvider
from crowdtrack.core.protocols.notifications import (
    CONTENT_SIZE_CATEGORY_DID_CHANGE,
    NotificationCallback,
    NotificationCenter,
)
from crowdtrack.core.protocols.tracking import LogEventCallback, TrackingClient

__all__ = [
    "CONTENT_SIZE_CATEGORY_DID_CHANGE",
    "DeviceInfoProvider",
    "LogEventCallback",
    "NotificationCallback",
    "NotificationCenter",
    "TrackingClient",
]
