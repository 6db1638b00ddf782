"""
test_enums_categories.py
------------------------
Unit tests for category ids, aliases and category reference data.
"""
import pytest

from dayof.catalog.categories import (
    CATEGORIES,
    category_color,
    category_slug,
    get_category,
    get_category_by_name,
    get_category_by_slug,
)
from dayof.catalog.enums import CATEGORY_ALIASES, CategoryId, resolve_category


class TestCategoryId:
    """Test the category enumeration."""

    def test_choices(self):
        assert CategoryId.choices() == [
            "Food", "Awareness", "Animals", "Fun",
            "Holiday", "Shopping", "National", "International",
        ]

    def test_display_name_uses_long_form(self):
        assert CategoryId.FUN.display_name == "Fun & Weird"
        assert CategoryId.FOOD.display_name == "Food"

    def test_aliases(self):
        assert CategoryId.SHOPPING.aliases == ("Shopping", "Shopping & Deals")

    def test_every_id_has_aliases(self):
        assert set(CATEGORY_ALIASES) == set(CategoryId)


class TestResolveCategory:
    """Test alias resolution."""

    @pytest.mark.parametrize("name,expected", [
        ("Food", CategoryId.FOOD),
        ("Awareness", CategoryId.AWARENESS),
        ("Awareness & Health", CategoryId.AWARENESS),
        ("Animals & Pets", CategoryId.ANIMALS),
        ("Fun & Weird", CategoryId.FUN),
        ("Shopping & Deals", CategoryId.SHOPPING),
        ("International", CategoryId.INTERNATIONAL),
    ])
    def test_known_names(self, name, expected):
        assert resolve_category(name) is expected

    @pytest.mark.parametrize("name", ["food", "Sports", "", None, "Fun &  Weird"])
    def test_unknown_names(self, name):
        assert resolve_category(name) is None

    @pytest.mark.parametrize("value", [["Food"], {"name": "Food"}, ("Food",), 3])
    def test_non_string_values(self, value):
        assert resolve_category(value) is None


class TestCategories:
    """Test the fixed category table."""

    def test_eight_categories_in_order(self):
        assert [category.id for category in CATEGORIES] == list(CategoryId)

    def test_slugs_unique(self):
        slugs = [category.slug for category in CATEGORIES]
        assert len(set(slugs)) == len(slugs)

    def test_lookups(self):
        assert get_category(CategoryId.FUN).slug == "fun-weird"
        assert get_category_by_slug("animals-pets").id is CategoryId.ANIMALS
        assert get_category_by_slug("sports") is None
        assert get_category_by_name("Awareness & Health").name == "Awareness"
        assert get_category_by_name("Sports") is None

    def test_slug_and_color_fallbacks(self):
        assert category_slug("Shopping & Deals") == "shopping-deals"
        assert category_slug("Sports") == "other"
        assert category_color("Food") == "bg-orange-500"
        assert category_color("Sports") == "bg-gray-500"

    def test_to_dict(self):
        data = get_category(CategoryId.FOOD).to_dict()
        assert set(data) == {"name", "slug", "description", "color", "icon"}
