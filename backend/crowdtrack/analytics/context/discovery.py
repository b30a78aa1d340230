"""Discovery context."""

from crowdtrack.analytics.context.entities import category_properties
from crowdtrack.analytics.properties import Properties, merge, prefix
from crowdtrack.schemas.discovery import DiscoveryParams
from crowdtrack.schemas.ref_tag import RefTag

DISCOVERY_PREFIX = "discover_"

_EMPTY_SUBCATEGORY = {"subcategory_id": None, "subcategory_name": None}
_EMPTY_CATEGORY = {"category_id": None, "category_name": None}


def discovery_properties(params: DiscoveryParams) -> Properties:
    """Build the ``discover_``-prefixed bag.

    The selected category is reported as ``subcategory_*`` and its parent,
    when it has one, as ``category_*``. ``everything`` is true only when
    no filter, sort or query is set.
    """
    category = params.category
    subcategory_props = (
        category_properties(category, "subcategory_") if category is not None else _EMPTY_SUBCATEGORY
    )
    parent_props = (
        category_properties(category.parent)
        if category is not None and category.parent is not None
        else _EMPTY_CATEGORY
    )

    props = merge(
        {
            "recommended": params.recommended,
            "social": params.social,
            "pwl": params.staff_picks,
            "watched": params.starred,
            "tag": params.tag_id,
        },
        subcategory_props,
        parent_props,
        {
            "everything": params.is_everything,
            "sort": params.sort.value if params.sort is not None else None,
            "ref_tag": RefTag.from_params(params).string_tag,
            "search_term": params.query,
        },
    )
    return prefix(props, DISCOVERY_PREFIX)
