#!/usr/bin/env python3
"""
dates.py
--------
Calendar helpers shared by enrichment, queries and the command line.

All catalog dates are ISO calendar strings (YYYY-MM-DD) with no time
or timezone component.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
from datetime import date, timedelta
from typing import Tuple

MONTH_NAMES = tuple(calendar.month_name[1:])
WEEKDAY_NAMES = tuple(calendar.day_name)


def parse_iso(value: str) -> date:
    """
    Parse a YYYY-MM-DD string.

    Raises:
        ValueError: If the string is not a valid calendar date
    """
    return date.fromisoformat(value)


def month_day(value: str) -> Tuple[int, int]:
    """Return (month, day) of an ISO date string."""
    parsed = parse_iso(value)
    return parsed.month, parsed.day


def rolled_date(year: int, month: int, day: int) -> date:
    """
    Build a date, letting an out-of-range day spill into the next month.

    Feb 29 in a non-leap year becomes Mar 1.

    Examples:
        >>> rolled_date(2025, 2, 29)
        datetime.date(2025, 3, 1)
        >>> rolled_date(2028, 2, 29)
        datetime.date(2028, 2, 29)
    """
    return date(year, month, 1) + timedelta(days=day - 1)


def month_name(month: int) -> str:
    """Full English month name for 1-12."""
    return MONTH_NAMES[month - 1]


def format_date(value: str) -> str:
    """
    Long human-readable form of an ISO date.

    Examples:
        >>> format_date("2024-03-15")
        'Friday, March 15, 2024'
    """
    parsed = parse_iso(value)
    return (
        f"{WEEKDAY_NAMES[parsed.weekday()]}, "
        f"{month_name(parsed.month)} {parsed.day}, {parsed.year}"
    )
