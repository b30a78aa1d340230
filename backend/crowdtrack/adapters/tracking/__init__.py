"""Tracking client adapters."""

from crowdtrack.adapters.tracking.data_lake import HttpDataLakeClient
from crowdtrack.adapters.tracking.null import NullTrackingClient
from crowdtrack.adapters.tracking.posthog import PostHogTrackingClient

__all__ = ["HttpDataLakeClient", "NullTrackingClient", "PostHogTrackingClient"]
