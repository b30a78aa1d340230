"""Share sheet and share dialog events.

Each call emits the current event first, then a deprecated event whose
name depends on where the share started: the thanks page ("Checkout"),
an update ("Update") or anywhere else ("Project").
"""

from typing import Union

from crowdtrack.analytics.context import share_properties
from crowdtrack.analytics.properties import deprecated
from crowdtrack.schemas.share import ShareActivityType, ShareContext

ActivityType = Union[ShareActivityType, str, None]


def _deprecated_event(share_context: ShareContext, action: str) -> str:
    if share_context.is_thanks_context:
        return f"Checkout {action}"
    if share_context.update is not None:
        return f"Update {action}"
    return f"Project {action}"


class SharingEvents:
    """Share sheet (the activity picker) and share dialogs (the chosen target)."""

    def _track_share(
        self,
        event: str,
        deprecated_action: str,
        share_context: ShareContext,
        share_activity_type: ActivityType = None,
    ) -> None:
        props = share_properties(
            share_context, self.logged_in_user, share_activity_type, self._clock()
        )

        self.track(event, props)
        self.track(_deprecated_event(share_context, deprecated_action), deprecated(props))

    def track_showed_share_sheet(self, share_context: ShareContext) -> None:
        """Call when the share sheet is shown."""
        self._track_share("Showed Share Sheet", "Show Share Sheet", share_context)

    def track_canceled_share_sheet(self, share_context: ShareContext) -> None:
        """Call when the share sheet is dismissed without choosing a target."""
        self._track_share("Canceled Share Sheet", "Cancel Share Sheet", share_context)

    def track_showed_share(
        self, share_context: ShareContext, share_activity_type: ActivityType
    ) -> None:
        """Call when a share dialog is shown.

        This is the dialog of the chosen share target, not the share sheet.

        Args:
            share_context: What is being shared and from where.
            share_activity_type: The share target that was chosen.
        """
        self._track_share("Showed Share", "Show Share", share_context, share_activity_type)

    def track_canceled_share(
        self, share_context: ShareContext, share_activity_type: ActivityType
    ) -> None:
        """Call when a share dialog is canceled."""
        self._track_share("Canceled Share", "Cancel Share", share_context, share_activity_type)

    def track_shared(self, share_context: ShareContext, share_activity_type: ActivityType) -> None:
        """Call when a share completed."""
        self._track_share("Shared", "Share", share_context, share_activity_type)
