"""Messaging events."""

from typing import Optional

from crowdtrack.analytics.properties import Properties, deprecated, merge
from crowdtrack.analytics.vocabulary import Mailbox, MessageDialogContext
from crowdtrack.schemas.project import Project
from crowdtrack.schemas.ref_tag import RefTag

_MAILBOX_EVENTS = {
    Mailbox.INBOX: "Viewed Message Inbox",
    Mailbox.SENT: "Viewed Sent Messages",
}


class MessageEvents:
    """Inbox, message search and message threads.

    Mailbox screens can be scoped to one of a creator's projects; without
    a project no project context is added.
    """

    def _optional_project_properties(self, project: Optional[Project]) -> Properties:
        return self._project_properties(project) if project is not None else {}

    def track_message_threads_view(
        self, mailbox: Mailbox, project: Optional[Project], ref_tag: RefTag
    ) -> None:
        props = merge(self._optional_project_properties(project), {"ref_tag": ref_tag.string_tag})

        self.track(_MAILBOX_EVENTS[mailbox], props)

        legacy = deprecated(props)
        self.track("Message Threads View", merge(legacy, {"mailbox": mailbox.value}))
        self.track("Message Inbox View", legacy)

    def track_viewed_message_search(self, project: Optional[Project]) -> None:
        self.track("Viewed Message Search", self._optional_project_properties(project))

    def track_viewed_message_search_results(
        self, term: str, project: Optional[Project], has_results: bool
    ) -> None:
        props = merge(self._optional_project_properties(project), {"term": term})
        legacy = deprecated(props)

        self.track("Message Threads Search", legacy)
        self.track("Message Inbox Search", legacy)
        self.track("Viewed Message Search Results", merge(props, {"has_results": has_results}))

    def track_cleared_message_search_term(self, project: Optional[Project]) -> None:
        self.track("Cleared Message Search Term", self._optional_project_properties(project))

    def track_message_thread_view(self, project: Project) -> None:
        props = self._project_properties(project)

        self.track("Message Thread View", deprecated(props))
        self.track("Viewed Message Thread", props)

    def track_viewed_message_editor(self, project: Project, context: MessageDialogContext) -> None:
        props = merge(
            self._project_properties(project),
            {"message_type": "single", "context": context.value},
        )

        self.track("Viewed Message Editor", props)

    def track_message_sent(self, project: Project, context: MessageDialogContext) -> None:
        """Call when a message has been sent.

        Args:
            project: The project the message is about.
            context: The screen the message was sent from.
        """
        props = merge(
            self._project_properties(project),
            {"message_type": "single", "context": context.value},
        )

        self.track("Message Sent", deprecated(props))
        self.track("Sent Message", props)
