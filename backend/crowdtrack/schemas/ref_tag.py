"""Ref tags: opaque strings naming the navigation path that led to an event."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from crowdtrack.schemas.discovery import DiscoveryParams, DiscoverySort

_SORT_SUFFIXES = {
    DiscoverySort.ENDING_SOON: "_ending_soon",
    DiscoverySort.MAGIC: "",
    DiscoverySort.NEWEST: "_newest",
    DiscoverySort.POPULAR: "_popular",
    DiscoverySort.DISTANCE: "_distance",
}


def _sort_suffix(sort: Optional[DiscoverySort]) -> str:
    return _SORT_SUFFIXES[sort or DiscoverySort.MAGIC]


class RefTag(BaseModel):
    """A ref tag. Construct directly for tags that arrive as strings."""

    model_config = ConfigDict(frozen=True)

    string_tag: str = Field(min_length=1)

    @classmethod
    def activity(cls) -> "RefTag":
        return cls(string_tag="activity")

    @classmethod
    def search(cls) -> "RefTag":
        return cls(string_tag="search")

    @classmethod
    def push(cls) -> "RefTag":
        return cls(string_tag="push")

    @classmethod
    def messages(cls) -> "RefTag":
        return cls(string_tag="messages")

    @classmethod
    def from_params(cls, params: DiscoveryParams) -> "RefTag":
        """Derive the ref tag a discovery page attaches to the projects it shows.

        Precedence is category, recommended (``recs``), staff picks
        (``recommended``), social, starred; anything else is plain discovery.
        Sorted variants carry a suffix (``category_newest``), the default
        sort carries none.
        """
        suffix = _sort_suffix(params.sort)
        if params.category is not None:
            return cls(string_tag=f"category{suffix}")
        if params.recommended:
            return cls(string_tag=f"recs{suffix}")
        if params.staff_picks:
            return cls(string_tag=f"recommended{suffix}")
        if params.social:
            return cls(string_tag=f"social{suffix}")
        if params.starred:
            return cls(string_tag="starred")
        return cls(string_tag=f"discovery{suffix}")
