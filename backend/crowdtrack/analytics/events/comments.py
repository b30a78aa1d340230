"""Comment list and comment editor events."""

from typing import Optional

from crowdtrack.analytics.context import comment_properties, update_properties
from crowdtrack.analytics.properties import Properties, deprecated, merge
from crowdtrack.analytics.vocabulary import CommentDialogContext, CommentDialogType, CommentsContext
from crowdtrack.schemas.activity import Comment, Update
from crowdtrack.schemas.project import Project

_LOAD_NEWER_DEPRECATED = {
    CommentsContext.PROJECT: "Project Comment Load New",
    CommentsContext.UPDATE: "Update Comment Load New",
}

_LOAD_OLDER_DEPRECATED = {
    CommentsContext.PROJECT: "Project Comment Load Older",
    CommentsContext.UPDATE: "Update Comment Load Older",
}

_VIEW_DEPRECATED = {
    CommentsContext.PROJECT: "Project Comment View",
    CommentsContext.UPDATE: "Update Comment View",
}


class CommentEvents:
    """Viewing, paging and writing comments on projects and updates."""

    def _comments_properties(self, project: Project, update: Optional[Update]) -> Properties:
        return merge(
            self._project_properties(project),
            update_properties(update) if update is not None else None,
        )

    def _comment_dialog_properties(
        self, project: Project, update: Optional[Update], context: CommentDialogContext
    ) -> Properties:
        dialog_type = CommentDialogType.PROJECT if update is None else CommentDialogType.UPDATE
        return merge(
            self._comments_properties(project, update),
            {"context": context.value, "type": dialog_type.value},
        )

    def track_load_newer_comments(
        self, project: Project, update: Optional[Update], context: CommentsContext
    ) -> None:
        props = merge(self._comments_properties(project, update), {"context": context.value})

        self.track(_LOAD_NEWER_DEPRECATED[context], deprecated(props))
        self.track("Loaded Newer Comments", props)

    def track_load_older_comments(
        self, project: Project, update: Optional[Update], page: int, context: CommentsContext
    ) -> None:
        props = merge(
            self._comments_properties(project, update),
            {"page_count": page, "context": context.value},
        )

        self.track(_LOAD_OLDER_DEPRECATED[context], deprecated(props))
        self.track("Loaded Older Comments", props)

    def track_opened_comment_editor(
        self, project: Project, update: Optional[Update], context: CommentDialogContext
    ) -> None:
        self.track(
            "Opened Comment Editor", self._comment_dialog_properties(project, update, context)
        )

    def track_canceled_comment_editor(
        self, project: Project, update: Optional[Update], context: CommentDialogContext
    ) -> None:
        self.track(
            "Canceled Comment Editor", self._comment_dialog_properties(project, update, context)
        )

    def track_posted_comment(
        self, project: Project, update: Optional[Update], context: CommentDialogContext
    ) -> None:
        self.track("Posted Comment", self._comment_dialog_properties(project, update, context))

    def track_comment_create(
        self, comment: Comment, project: Project, update: Optional[Update] = None
    ) -> None:
        """Deprecated-only event for a created comment on a project or an update."""
        props = deprecated(merge(self._comments_properties(project, update), comment_properties(comment)))

        self.track("Project Comment Create" if update is None else "Update Comment Create", props)

    def track_comments_view(
        self, project: Project, update: Optional[Update], context: CommentsContext
    ) -> None:
        props = merge(self._comments_properties(project, update), {"context": context.value})

        self.track(_VIEW_DEPRECATED[context], deprecated(props))
        self.track("Viewed Comments", props)
