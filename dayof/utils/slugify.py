#!/usr/bin/env python3
"""
slugify.py
----------
URL slugs and file names from display text.

Used for per-category export file names.

Usage:
    from dayof.utils.slugify import slugify

    slugify("National Coffee Day")     # "national-coffee-day"
    slugify("Awareness & Health")      # "awareness-and-health"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata

_BRACKETS = re.compile(r"[(){}\[\]]")
_SEPARATORS = re.compile(r"[\s_/]+")
_DISALLOWED = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-+")


def slugify(text: str, max_length: int = 200) -> str:
    """
    Lowercase ASCII slug with words joined by single hyphens.

    Accents are folded (Crêpe → crepe), apostrophes dropped
    (Mother's → mothers) and '&' spelled out as 'and'. Brackets, spaces,
    underscores and slashes separate words; anything else is removed.

    Args:
        text: Display text
        max_length: Upper bound on the slug length

    Returns:
        Slug, possibly empty

    Examples:
        >>> slugify("National Crêpe Day")
        'national-crepe-day'
        >>> slugify("Fun & Weird")
        'fun-and-weird'
    """
    if not text:
        return ""

    ascii_text = (
        unicodedata.normalize("NFKD", text)
        .encode("ascii", "ignore")
        .decode("ascii")
        .lower()
        .replace("'", "")
        .replace("&", " and ")
    )
    slug = _BRACKETS.sub(" ", ascii_text)
    slug = _SEPARATORS.sub("-", slug)
    slug = _DISALLOWED.sub("", slug)
    slug = _HYPHEN_RUNS.sub("-", slug).strip("-")

    return slug[:max_length].rstrip("-")
