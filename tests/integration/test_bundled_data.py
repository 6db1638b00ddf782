#!/usr/bin/env python3
"""
Integration tests for the category files shipped in data/categories.

The bundled data must load strictly (no unknown categories), cover every
category and keep slugs unique.
"""
import pytest
from datetime import date
from pathlib import Path

from dayof.catalog.enums import CategoryId
from dayof.catalog.loader import DEFAULT_SOURCE_ORDER, load_catalog, read_manifest

BUNDLED_DIR = Path(__file__).resolve().parents[2] / "data" / "categories"


@pytest.fixture(scope="module")
def bundled():
    return load_catalog(data_dir=BUNDLED_DIR, today=date(2025, 1, 1), strict=True)


def test_manifest_matches_default_order():
    assert read_manifest(BUNDLED_DIR) == list(DEFAULT_SOURCE_ORDER)


def test_every_category_has_days(bundled):
    for category in CategoryId:
        assert bundled.get_days_by_category(category.value), category


def test_slugs_unique(bundled):
    slugs = [day.slug for day in bundled]
    assert len(slugs) == len(set(slugs))


def test_explicit_related_days_resolve(bundled):
    for day in bundled:
        for slug in day.related_days:
            assert bundled.get_day_by_slug(slug) is not None, (day.slug, slug)


def test_all_days_enriched(bundled):
    for day in bundled:
        assert day.faqs
        assert day.history
        assert day.next_occurrences


def test_leap_day_occurrences(bundled):
    leap = bundled.get_day_by_slug("leap-day")
    assert leap.next_occurrences[:4] == ("2025-03-01", "2026-03-01", "2027-03-01", "2028-02-29")
