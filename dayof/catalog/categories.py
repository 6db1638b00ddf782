#!/usr/bin/env python3
"""
categories.py
-------------
Fixed category reference data.

The eight categories are defined here, not derived from the day records.
Days point at a category through their resolved CategoryId.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# --- Local imports ---
from dayof.catalog.enums import CategoryId, resolve_category

UNKNOWN_CATEGORY_SLUG = "other"
UNKNOWN_CATEGORY_COLOR = "bg-gray-500"


@dataclass(frozen=True)
class Category:
    """
    One browsable category.

    Fields:
    - id:          Resolved category id
    - name:        Display name ("Food", "Awareness", ...)
    - slug:        URL form ("awareness-health")
    - description: One-line blurb for the category page
    - color:       CSS utility class used by the site
    - icon:        Emoji shown next to the name
    """
    id:          CategoryId
    name:        str
    slug:        str
    description: str
    color:       str
    icon:        str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "color": self.color,
            "icon": self.icon,
        }


CATEGORIES: Tuple[Category, ...] = (
    Category(
        CategoryId.FOOD, "Food", "food",
        "Delicious celebrations and culinary delights",
        "bg-orange-500", "🍽️",
    ),
    Category(
        CategoryId.AWARENESS, "Awareness", "awareness-health",
        "Health awareness and important causes",
        "bg-pink-500", "❤️",
    ),
    Category(
        CategoryId.ANIMALS, "Animals", "animals-pets",
        "Celebrating our furry, feathered, and scaly friends",
        "bg-green-500", "🐾",
    ),
    Category(
        CategoryId.FUN, "Fun", "fun-weird",
        "Quirky, fun, and weird celebrations",
        "bg-purple-500", "🎉",
    ),
    Category(
        CategoryId.HOLIDAY, "Holiday", "holiday",
        "Traditional holidays and special occasions",
        "bg-red-500", "🎊",
    ),
    Category(
        CategoryId.SHOPPING, "Shopping", "shopping-deals",
        "Shopping events and special deals",
        "bg-blue-500", "🛍️",
    ),
    Category(
        CategoryId.NATIONAL, "National", "national",
        "National observances and celebrations",
        "bg-indigo-500", "🇺🇸",
    ),
    Category(
        CategoryId.INTERNATIONAL, "International", "international",
        "Global celebrations and world events",
        "bg-teal-500", "🌍",
    ),
)

_BY_ID: Dict[CategoryId, Category] = {category.id: category for category in CATEGORIES}
_BY_SLUG: Dict[str, Category] = {category.slug: category for category in CATEGORIES}


def get_category(category_id: CategoryId) -> Category:
    """Reference data for a category id."""
    return _BY_ID[category_id]


def get_category_by_slug(slug: str) -> Optional[Category]:
    """Category for a URL slug, or None."""
    return _BY_SLUG.get(slug)


def get_category_by_name(name: str) -> Optional[Category]:
    """Category for any accepted name or alias, or None."""
    category_id = resolve_category(name)
    return _BY_ID[category_id] if category_id is not None else None


def category_slug(name: str) -> str:
    """URL slug for a category name; 'other' when the name is unknown."""
    category = get_category_by_name(name)
    return category.slug if category else UNKNOWN_CATEGORY_SLUG


def category_color(name: str) -> str:
    """Color class for a category name; neutral gray when unknown."""
    category = get_category_by_name(name)
    return category.color if category else UNKNOWN_CATEGORY_COLOR
