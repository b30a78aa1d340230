"""Property bag helpers.

A property bag is a flat ``Dict[str, Any]`` of scalar (or list-of-scalar)
values. Every helper returns a new dict and never mutates its inputs.
``None`` values are kept as explicit keys so consumers can tell "no value"
from "key omitted".
"""

from typing import Any, Dict, Mapping, Optional

Properties = Dict[str, Any]

DEPRECATED_KEY = "DEPRECATED"


def merge(*bags: Optional[Mapping[str, Any]]) -> Properties:
    """Merge bags left to right; on key collision the later bag wins.

    ``None`` arguments are treated as empty bags.
    """
    merged: Properties = {}
    for bag in bags:
        if bag:
            merged.update(bag)
    return merged


def prefix(bag: Mapping[str, Any], key_prefix: str) -> Properties:
    """Return ``bag`` with ``key_prefix`` prepended to every key."""
    return {f"{key_prefix}{key}": value for key, value in bag.items()}


def deprecated(bag: Optional[Mapping[str, Any]] = None) -> Properties:
    """Return ``bag`` carrying the deprecated-event marker."""
    return merge(bag, {DEPRECATED_KEY: True})
