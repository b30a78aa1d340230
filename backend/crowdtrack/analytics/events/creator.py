"""Creator tools: dashboard, project activity and update drafts."""

from crowdtrack.analytics.properties import Properties, deprecated, merge
from crowdtrack.analytics.vocabulary import AttachmentSource
from crowdtrack.schemas.project import Project


def _visibility(is_public: bool) -> str:
    return "public" if is_public else "backers_only"


class CreatorEvents:
    """Events only creators can trigger."""

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def track_dashboard_closed_project_switcher(self, project: Project) -> None:
        self.track("Closed Project Switcher", self._project_properties(project))

    def track_dashboard_see_all_rewards(self, project: Project) -> None:
        self.track("Showed All Rewards", self._project_properties(project))

    def track_dashboard_see_more_referrers(self, project: Project) -> None:
        self.track("Showed All Referrers", self._project_properties(project))

    def track_dashboard_show_project_switcher(self, project: Project) -> None:
        self.track("Showed Project Switcher", self._project_properties(project))

    def track_dashboard_switch_project(self, project: Project) -> None:
        props = self._project_properties(project)

        self.track("Switched Projects", props)
        self.track("Creator Project Navigate", deprecated(props))

    def track_dashboard_view(self, project: Project) -> None:
        props = self._project_properties(project)

        self.track("Viewed Project Dashboard", props)
        self.track("Dashboard View", deprecated(props))

    # ------------------------------------------------------------------
    # Project activity
    # ------------------------------------------------------------------

    def track_viewed_project_activity(self, project: Project) -> None:
        props = self._project_properties(project)

        self.track("Viewed Project Activity", props)
        self.track("Creator Activity View", deprecated(props))

    def track_loaded_newer_project_activity(self, project: Project) -> None:
        props = self._project_properties(project)

        self.track("Loaded Newer Project Activity", props)
        self.track("Creator Activity View Load Newer", deprecated(props))

    def track_loaded_older_project_activity(self, project: Project, page: int) -> None:
        props = merge(self._project_properties(project), {"page_count": page})

        self.track("Loaded Older Project Activity", props)
        self.track("Creator Activity View Load Older", deprecated(props))

    # ------------------------------------------------------------------
    # Update drafts
    # ------------------------------------------------------------------

    def _update_draft_properties(self, project: Project) -> Properties:
        return merge(self._project_properties(project), {"context": "update_draft"})

    def track_viewed_update_draft(self, project: Project) -> None:
        self.track("Viewed Draft", self._update_draft_properties(project))

    def track_closed_update_draft(self, project: Project) -> None:
        self.track("Closed Draft", self._update_draft_properties(project))

    def track_edited_update_draft_title(self, project: Project) -> None:
        self.track("Edited Title", self._update_draft_properties(project))

    def track_edited_update_draft_body(self, project: Project) -> None:
        self.track("Edited Body", self._update_draft_properties(project))

    def track_started_add_update_draft_attachment(self, project: Project) -> None:
        self.track("Started Add Attachment", self._update_draft_properties(project))

    def track_completed_add_update_draft_attachment(
        self, project: Project, source: AttachmentSource
    ) -> None:
        props = merge(self._update_draft_properties(project), {"type": source.value})

        self.track("Completed Add Attachment", props)

    def track_canceled_add_update_draft_attachment(self, project: Project) -> None:
        self.track("Canceled Add Attachment", self._update_draft_properties(project))

    def track_failed_add_update_draft_attachment(self, project: Project) -> None:
        self.track("Failed Add Attachment", self._update_draft_properties(project))

    def track_started_remove_update_draft_attachment(self, project: Project) -> None:
        self.track("Started Remove Attachment", self._update_draft_properties(project))

    def track_canceled_remove_update_draft_attachment(self, project: Project) -> None:
        self.track("Canceled Remove Attachment", self._update_draft_properties(project))

    def track_completed_remove_update_draft_attachment(self, project: Project) -> None:
        self.track("Completed Remove Attachment", self._update_draft_properties(project))

    def track_failed_remove_update_draft_attachment(self, project: Project) -> None:
        self.track("Failed Remove Attachment", self._update_draft_properties(project))

    def track_changed_update_draft_visibility(self, project: Project, is_public: bool) -> None:
        # No update_draft context on this one.
        props = merge(self._project_properties(project), {"type": _visibility(is_public)})

        self.track("Changed Visibility", props)

    def track_previewed_update(self, project: Project) -> None:
        props = self._update_draft_properties(project)

        self.track("Previewed Update", props)
        self.track("Update Preview", deprecated(props))

    def track_triggered_publish_confirmation_modal(self, project: Project) -> None:
        self.track("Triggered Publish Confirmation Modal", self._update_draft_properties(project))

    def track_canceled_publish_update(self, project: Project) -> None:
        self.track("Canceled Publish", merge(self._update_draft_properties(project), {"context": "modal"}))

    def track_confirmed_publish_update(self, project: Project) -> None:
        self.track(
            "Confirmed Publish", merge(self._update_draft_properties(project), {"context": "modal"})
        )

    def track_published_update(self, project: Project, is_public: bool) -> None:
        props = merge(self._update_draft_properties(project), {"type": _visibility(is_public)})

        self.track("Published Update", props)
        self.track("Update Published", deprecated(props))
