"""Project page, save and video events."""

from typing import Optional

from crowdtrack.analytics.allow_list import DataLakeEvent
from crowdtrack.analytics.properties import deprecated, merge
from crowdtrack.analytics.vocabulary import ExternalLinkContext, SaveContext
from crowdtrack.schemas.project import Project
from crowdtrack.schemas.ref_tag import RefTag


def _tag(ref_tag: Optional[RefTag]) -> Optional[str]:
    return ref_tag.string_tag if ref_tag is not None else None


class ProjectEvents:
    """Viewing, swiping, saving a project and watching its video."""

    def track_project_viewed(
        self,
        project: Project,
        ref_tag: Optional[RefTag] = None,
        cookie_ref_tag: Optional[RefTag] = None,
    ) -> None:
        """Call when a project page is viewed.

        Args:
            project: The project being viewed.
            ref_tag: The ref tag used when opening the project.
            cookie_ref_tag: The ref tag pulled from cookie storage for this project.
        """
        self.track(
            DataLakeEvent.PROJECT_PAGE_VIEWED.value,
            self._project_properties(project),
            ref_tag=_tag(ref_tag),
            referrer_credit=_tag(cookie_ref_tag),
        )

    def track_swiped_project(self, project: Project, ref_tag: Optional[RefTag]) -> None:
        """Call when the project page is swiped to ``project``."""
        self.track(
            DataLakeEvent.PROJECT_SWIPED.value,
            self._project_properties(project),
            ref_tag=_tag(ref_tag),
        )

    def track_project_save(self, project: Project, context: SaveContext) -> None:
        """Call after a project was saved or unsaved.

        Nothing is tracked while the saved state is unknown.
        """
        is_starred = project.personalization.is_starred
        if is_starred is None:
            return

        props = merge(self._project_properties(project), {"context": context.value})

        self.track("Project Star" if is_starred else "Project Unstar", deprecated(props))
        self.track("Starred Project" if is_starred else "Unstarred Project", deprecated(props))
        self.track("Saved Project" if is_starred else "Unsaved Project", props)

    def track_opened_external_link(self, project: Project, context: ExternalLinkContext) -> None:
        props = merge(self._project_properties(project), {"context": context.value})

        self.track("Opened External Link", props)

    def track_video_completed(self, project: Project) -> None:
        self.track("Project Video Complete", deprecated())
        self.track("Completed Project Video", self._project_properties(project))

    def track_video_paused(self, project: Project) -> None:
        self.track("Project Video Pause", deprecated())
        self.track("Paused Project Video", self._project_properties(project))

    def track_video_resume(self, project: Project) -> None:
        self.track("Project Video Resume", deprecated())
        self.track("Resumed Project Video", self._project_properties(project))

    def track_video_start(self, project: Project) -> None:
        self.track("Project Video Start", deprecated())
        self.track("Started Project Video", self._project_properties(project))
