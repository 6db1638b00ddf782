#!/usr/bin/env python3
"""
catalog.py
----------
The immutable, in-memory day catalog and its query operations.

A Catalog is built once by the loader and never mutated afterwards, so a
single instance can be shared by any number of readers without locking.
Queries never raise for missing data: a lookup that matches nothing
returns None, an empty list, or an EMPTY MonthResult.

Usage:
    catalog = load_catalog(sources)

    catalog.get_day_by_slug("national-coffee-day")
    catalog.get_days_by_category("Awareness & Health")
    catalog.get_days_by_month(3, 2026)
    catalog.get_upcoming_days(10)
    catalog.get_related_days(day, 5)
    catalog.search_days("coffee")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import copy
import logging
from datetime import date
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

# --- Local imports ---
from dayof.catalog.categories import CATEGORIES, Category
from dayof.catalog.enrichment import generate_next_occurrences, is_recurring
from dayof.catalog.enums import MonthMatch, resolve_category
from dayof.catalog.models import Day, MonthResult
from dayof.utils.dates import rolled_date

logger = logging.getLogger(__name__)

SAME_CATEGORY_SCORE = 10
SAME_MONTH_SCORE = 5
SHARED_TAG_SCORE = 2


class Catalog:
    """
    Read-only collection of enriched days with query operations.

    Attributes:
        days: Enriched records in load order
        categories: Fixed category reference data
        reference_date: Date used as "today" during enrichment
    """

    def __init__(
        self,
        days: Iterable[Day],
        categories: Sequence[Category] = CATEGORIES,
        reference_date: Optional[date] = None,
        sources: Optional[Mapping[str, Sequence[Dict[str, Any]]]] = None,
    ) -> None:
        """
        Args:
            days: Enriched records, in the order queries should see them
            categories: Category reference data
            reference_date: "Today" used for enrichment and projections
            sources: Raw records per source name, as read from disk
        """
        self._days: Tuple[Day, ...] = tuple(days)
        self._categories: Tuple[Category, ...] = tuple(categories)
        self.reference_date: date = reference_date or date.today()
        self._sources: Dict[str, Tuple[Dict[str, Any], ...]] = {
            name: tuple(records) for name, records in (sources or {}).items()
        }

        # First record wins when slugs repeat
        self._by_slug: Dict[str, Day] = {}
        for day in self._days:
            self._by_slug.setdefault(day.slug, day)

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self) -> Iterator[Day]:
        return iter(self._days)

    def __repr__(self) -> str:
        return f"Catalog(days={len(self._days)}, reference_date={self.reference_date})"

    @property
    def days(self) -> Tuple[Day, ...]:
        return self._days

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    @property
    def source_names(self) -> List[str]:
        return list(self._sources)

    def source_records(self, name: str) -> List[Dict[str, Any]]:
        """
        Raw, un-enriched records of one source file.

        Args:
            name: Source name (file stem, e.g. 'food')

        Returns:
            Copies of the records as read; empty for unknown sources
        """
        return copy.deepcopy(list(self._sources.get(name, ())))

    def to_dicts(self) -> List[Dict[str, Any]]:
        """All enriched records in the source JSON shape."""
        return [day.to_dict() for day in self._days]

    # ----- Lookups -----

    def get_day_by_slug(self, slug: str) -> Optional[Day]:
        """First record with this slug, or None."""
        return self._by_slug.get(slug)

    def get_days_by_category(self, category_name: str) -> List[Day]:
        """
        Records belonging to a category.

        Args:
            category_name: Short or long category name ("Fun", "Fun & Weird")

        Returns:
            Matching records in catalog order; empty for unknown names
        """
        category_id = resolve_category(category_name)
        if category_id is None:
            return []
        return [day for day in self._days if day.category_id is category_id]

    def get_days_by_category_slug(self, slug: str) -> List[Day]:
        """Records for a category page URL slug ('fun-weird')."""
        category = next((c for c in self._categories if c.slug == slug), None)
        if category is None:
            return []
        return [day for day in self._days if day.category_id is category.id]

    def get_days_on(self, month: int, day_of_month: int) -> List[Day]:
        """Records falling on a month/day in any year."""
        return [
            day for day in self._days
            if day.month == month and day.day_of_month == day_of_month
        ]

    def get_todays_days(self, today: Optional[date] = None) -> List[Day]:
        """Records whose month/day is today's, regardless of year."""
        today = today or date.today()
        return self.get_days_on(today.month, today.day)

    # ----- Month view -----

    def _days_in(self, month: int, year: int) -> List[Day]:
        return [day for day in self._days if day.month == month and day.year == year]

    def get_year_with_data_for_month(
        self, month: int, preferred_year: Optional[int] = None
    ) -> int:
        """
        Year to show for a month when the requested year has no records.

        A preferred year with any record in the month wins. Otherwise the
        year with the most records wins, the earliest-seen on ties. With no
        records at all, the preferred year (or the reference year) is returned.

        Args:
            month: Month number (1-12)
            preferred_year: Optional year to favour

        Returns:
            Base year for the month
        """
        year_counts: Dict[int, int] = {}
        for day in self._days:
            if day.month == month:
                year_counts[day.year] = year_counts.get(day.year, 0) + 1

        fallback_year = preferred_year or self.reference_date.year
        if not year_counts:
            return fallback_year

        if preferred_year and preferred_year in year_counts:
            return preferred_year

        best_year = fallback_year
        max_count = 0
        for year, count in year_counts.items():
            if count > max_count:
                max_count = count
                best_year = year
        return best_year

    def project_day(self, day: Day, year: int) -> Day:
        """
        Re-date a record to another year, keeping its month and day.

        Recurring records get their next occurrences regenerated.
        """
        target = rolled_date(year, day.month, day.day_of_month).isoformat()
        changes: Dict[str, Any] = {"date": target}
        if is_recurring(day):
            changes["next_occurrences"] = generate_next_occurrences(
                target, today=self.reference_date
            )
        return day.with_changes(**changes)

    def lookup_month(self, month: int, year: int) -> MonthResult:
        """
        Records for a month, with the tier that produced them.

        1. Records dated in the requested month and year (EXACT).
        2. Otherwise the base year's records for the month: re-dated to the
           requested year when it is later (PROJECTED), returned unchanged
           when it is earlier (FALLBACK).
        3. No records for the month in any year, or an invalid month (EMPTY).

        Args:
            month: Month number (1-12)
            year: Four-digit year

        Returns:
            MonthResult tagged with its tier
        """
        if not 1 <= month <= 12:
            return MonthResult(MonthMatch.EMPTY, (), month, year)

        exact = self._days_in(month, year)
        if exact:
            return MonthResult(MonthMatch.EXACT, tuple(exact), month, year, year)

        base_year = self.get_year_with_data_for_month(month)
        base_days = self._days_in(month, base_year)
        if not base_days:
            return MonthResult(MonthMatch.EMPTY, (), month, year)

        if year > base_year:
            logger.debug(
                "Projecting %d records for %02d from %d to %d",
                len(base_days), month, base_year, year,
            )
            projected = tuple(self.project_day(day, year) for day in base_days)
            return MonthResult(MonthMatch.PROJECTED, projected, month, year, base_year)

        logger.debug("No records for %02d/%d, falling back to %d", month, year, base_year)
        return MonthResult(MonthMatch.FALLBACK, tuple(base_days), month, year, base_year)

    def get_days_by_month(self, month: int, year: int) -> List[Day]:
        """
        Records for a month and year, with silent base-year substitution.

        Use lookup_month() to find out whether the records were substituted.
        """
        return list(self.lookup_month(month, year).days)

    # ----- Listings -----

    def get_upcoming_days(self, limit: int = 10, today: Optional[date] = None) -> List[Day]:
        """
        Records dated today or later, soonest first.

        Args:
            limit: Maximum number of records
            today: Reference date (defaults to the wall clock)

        Returns:
            At most `limit` records in non-decreasing date order
        """
        today = today or date.today()
        upcoming = [day for day in self._days if day.date_value >= today]
        upcoming.sort(key=lambda day: day.date_value)
        return upcoming[:max(limit, 0)]

    def get_related_days(self, day: Day, limit: int = 5) -> List[Day]:
        """
        Days related to a given day.

        Explicitly declared related days come first, in declared order.
        Remaining slots are filled by scoring every other record: same
        category +10, same month and year +5, +2 per shared tag. Zero
        scores are dropped; ties keep catalog order.

        Args:
            day: Source day
            limit: Maximum number of records

        Returns:
            At most `limit` related records
        """
        limit = max(limit, 0)
        explicit: List[Day] = []
        for slug in day.related_days:
            related = self.get_day_by_slug(slug)
            if related is not None:
                explicit.append(related)

        if len(explicit) >= limit:
            return explicit[:limit]

        excluded = {day.slug}
        excluded.update(related.slug for related in explicit)

        scored: List[Tuple[int, Day]] = []
        for candidate in self._days:
            if candidate.slug in excluded:
                continue
            score = 0
            if candidate.category_id is day.category_id:
                score += SAME_CATEGORY_SCORE
            if candidate.month == day.month and candidate.year == day.year:
                score += SAME_MONTH_SCORE
            shared = sum(1 for tag in day.tags if tag in candidate.tags)
            score += SHARED_TAG_SCORE * shared
            if score > 0:
                scored.append((score, candidate))

        # sort() is stable, so equal scores keep catalog order
        scored.sort(key=lambda item: item[0], reverse=True)
        backfill = [candidate for _, candidate in scored[:limit - len(explicit)]]
        return explicit + backfill

    def search_days(self, query: str) -> List[Day]:
        """
        Case-insensitive substring search over title, description and tags.

        Returns:
            Matching records in catalog order
        """
        needle = query.lower()
        return [
            day for day in self._days
            if needle in day.title.lower()
            or needle in day.description.lower()
            or any(needle in tag.lower() for tag in day.tags)
        ]
