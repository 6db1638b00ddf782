"""
Enumeration Types
------------------

Enum classes for the day catalog.

Enums:
    - CategoryId: The eight fixed categories a day can belong to
    - MonthMatch: How a month lookup was satisfied

Source files store categories either by short name ("Fun") or by the
long display form ("Fun & Weird"). Both are resolved to a CategoryId once,
when records are loaded; queries compare ids only.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class CategoryId(str, Enum):
    """
    Enumeration of day categories.
    - FOOD: Culinary celebrations
    - AWARENESS: Health awareness and causes ("Awareness & Health")
    - ANIMALS: Animals and pets ("Animals & Pets")
    - FUN: Quirky and weird days ("Fun & Weird")
    - HOLIDAY: Traditional holidays
    - SHOPPING: Shopping events ("Shopping & Deals")
    - NATIONAL: National observances
    - INTERNATIONAL: Global observances
    """

    FOOD = "Food"
    AWARENESS = "Awareness"
    ANIMALS = "Animals"
    FUN = "Fun"
    HOLIDAY = "Holiday"
    SHOPPING = "Shopping"
    NATIONAL = "National"
    INTERNATIONAL = "International"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available category choices."""
        return [category.value for category in cls]

    @property
    def display_name(self) -> str:
        """Long human-readable name, as used on category pages."""
        return CATEGORY_ALIASES[self][-1]

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Every stored string accepted for this category."""
        return CATEGORY_ALIASES[self]


class MonthMatch(str, Enum):
    """
    Enumeration of month lookup outcomes.
    - EXACT: Records exist for the requested month and year
    - PROJECTED: Base-year records re-dated to a later requested year
    - FALLBACK: Base-year records returned as-is for an earlier year
    - EMPTY: No records for the month in any year
    """

    EXACT = "exact"
    PROJECTED = "projected"
    FALLBACK = "fallback"
    EMPTY = "empty"


CATEGORY_ALIASES: Dict[CategoryId, Tuple[str, ...]] = {
    CategoryId.FOOD: ("Food",),
    CategoryId.AWARENESS: ("Awareness", "Awareness & Health"),
    CategoryId.ANIMALS: ("Animals", "Animals & Pets"),
    CategoryId.FUN: ("Fun", "Fun & Weird"),
    CategoryId.HOLIDAY: ("Holiday",),
    CategoryId.SHOPPING: ("Shopping", "Shopping & Deals"),
    CategoryId.NATIONAL: ("National",),
    CategoryId.INTERNATIONAL: ("International",),
}

_ALIAS_LOOKUP: Dict[str, CategoryId] = {
    alias: category_id
    for category_id, aliases in CATEGORY_ALIASES.items()
    for alias in aliases
}


def resolve_category(name: Any) -> Optional[CategoryId]:
    """
    Resolve a stored or display category string to its id.

    Matching is exact and case-sensitive against the alias table.
    Values that are not strings never match.

    Examples:
        >>> resolve_category("Awareness & Health")
        <CategoryId.AWARENESS: 'Awareness'>
        >>> resolve_category("awareness") is None
        True
    """
    if not isinstance(name, str):
        return None
    return _ALIAS_LOOKUP.get(name)
