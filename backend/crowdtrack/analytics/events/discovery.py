"""Discovery and search events. All of these are mirrored to the data lake."""

from crowdtrack.analytics.allow_list import DataLakeEvent
from crowdtrack.analytics.context import discovery_properties
from crowdtrack.analytics.properties import merge
from crowdtrack.schemas.discovery import DiscoveryParams, DiscoverySort
from crowdtrack.schemas.ref_tag import RefTag


class DiscoveryEvents:
    """Explore page, filters, sorts, collections and search."""

    def track_discovery(self, params: DiscoveryParams) -> None:
        """Call when a discovery page is viewed and its first page has loaded.

        Args:
            params: The params used for the discovery search.
        """
        self.track(DataLakeEvent.EXPLORE_PAGE_VIEWED.value, discovery_properties(params))

    def track_discovery_modal_selected_filter(self, params: DiscoveryParams) -> None:
        """Call when a filter is selected from the explore modal."""
        self.track(DataLakeEvent.FILTER_CLICKED.value, discovery_properties(params))

    def track_discovery_selected_sort(self, next_sort: DiscoverySort, params: DiscoveryParams) -> None:
        """Call when the user swipes between sorts or selects one.

        Args:
            next_sort: The newly selected sort.
            params: The params in effect when the sort was changed.
        """
        props = merge(discovery_properties(params), {"discover_sort": next_sort.value})

        self.track(DataLakeEvent.EXPLORE_SORT_CLICKED.value, props)

    def track_editorial_header_tapped(self, ref_tag: RefTag) -> None:
        """Call when the editorial header at the top of discovery is tapped."""
        self.track(DataLakeEvent.EDITORIAL_CARD_CLICKED.value, {}, ref_tag=ref_tag.string_tag)

    def track_collection_viewed(self, params: DiscoveryParams) -> None:
        self.track(DataLakeEvent.COLLECTION_VIEWED.value, discovery_properties(params))

    def track_project_search_view(self) -> None:
        """Call once when the search view is first shown."""
        self.track(DataLakeEvent.SEARCH_PAGE_VIEWED.value)

    def track_search_results(
        self, query: str, params: DiscoveryParams, ref_tag: RefTag, has_results: bool
    ) -> None:
        """Call when a search has returned projects."""
        props = merge(
            discovery_properties(params),
            {
                "discover_ref_tag": ref_tag.string_tag,
                "search_term": query,
                "has_results": has_results,
            },
        )

        self.track(DataLakeEvent.SEARCH_RESULTS_LOADED.value, props)
