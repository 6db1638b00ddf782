"""
dayof
=====

Catalog of special days (holidays, food days, awareness days and more).

Category data files are loaded once, each record is enriched with
generated occurrences, FAQs and background text, and the resulting
read-only catalog answers lookups by slug, category, month, upcoming
date, relatedness and free text.

Main Components:
    - catalog: Day model, category reference data, enrichment, loader, queries
    - core: Logging, exceptions, paths, validation, CLI helpers
    - utils: Slug and calendar helpers
    - cli: The `dayof` command line

Example Usage:
    >>> from dayof import load_catalog
    >>> catalog = load_catalog()
    >>> catalog.get_day_by_slug("national-coffee-day")
"""

__version__ = "1.0.0"

from dayof.catalog import (
    CATEGORIES,
    Catalog,
    CategoryId,
    Day,
    get_default_catalog,
    load_catalog,
)

__all__ = [
    "CATEGORIES",
    "Catalog",
    "CategoryId",
    "Day",
    "get_default_catalog",
    "load_catalog",
]
