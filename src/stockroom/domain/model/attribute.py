"""Qualifier tags that describe an item (organic, vegan, ...)."""

from __future__ import annotations

from enum import Enum


class Attribute(Enum):
    ORGANIC = "organic"
    GRASS_FED = "grass-fed"
    VEGAN = "vegan"
    LOCALLY_SOURCED = "locally-sourced"
    GLUTEN_FREE = "gluten-free"
    NON_GMO = "non-gmo"
    FREE_RANGE = "free-range"
    FAIR_TRADE = "fair-trade"
    KOSHER = "kosher"
    HALAL = "halal"


def sorted_values(attributes: frozenset[Attribute]) -> list[str]:
    """Stable wire order for an unordered tag set."""
    return sorted(a.value for a in attributes)
