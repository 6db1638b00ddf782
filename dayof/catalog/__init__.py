"""
catalog package
---------------
The day catalog: category reference data, day records, enrichment,
loading and queries.

Typical use:
    from dayof.catalog import load_catalog

    catalog = load_catalog()
    catalog.get_days_by_month(3, 2026)
"""
from dayof.catalog.catalog import Catalog
from dayof.catalog.categories import CATEGORIES, Category
from dayof.catalog.enums import CategoryId, MonthMatch, resolve_category
from dayof.catalog.loader import (
    CatalogLoader,
    get_default_catalog,
    load_catalog,
    reset_default_catalog,
)
from dayof.catalog.models import Day, Faq, MonthResult

__all__ = [
    "CATEGORIES",
    "Catalog",
    "CatalogLoader",
    "Category",
    "CategoryId",
    "Day",
    "Faq",
    "MonthMatch",
    "MonthResult",
    "get_default_catalog",
    "load_catalog",
    "reset_default_catalog",
    "resolve_category",
]
