#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the dayof catalog.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in different subsystems.

Exception Hierarchy:
    Exception (built-in)
    └── DayOfError - Base for all catalog errors
        ├── CatalogLoadError - Source files unreadable or malformed
        ├── ValidationError - Data validation failures
        │   └── RecordValidationError - A single day record is invalid
        │       └── UnknownCategoryError - Category string has no known alias
        └── ExportError - Writing catalog output failed

Lookups never raise: a missing slug, category or month is an empty result,
not an exception. Everything here is a load-time or export-time condition.

Usage:
    from dayof.core.exceptions import CatalogLoadError, ValidationError

    try:
        catalog = load_catalog(sources)
    except CatalogLoadError as e:
        logger.error(f"Cannot build catalog: {e}")
"""


class DayOfError(Exception):
    """
    Base exception for all dayof errors.

    Catch this to handle any catalog error, or catch specific
    subclasses for more granular error handling.
    """

    pass


class CatalogLoadError(DayOfError):
    """
    Exception for catalog source failures.

    Raised while building the catalog when a source cannot be used:
    - File not found or not readable
    - Invalid JSON or YAML syntax
    - Top level of a source is not a list of records
    - A record inside the source fails validation

    This is a build-time fatal condition; the loader does not try to
    recover from it.

    Examples:
        >>> raise CatalogLoadError("food.json: expected a list of records")
        >>> raise CatalogLoadError("Source file not found: data/categories/fun.json")
    """

    pass


class ValidationError(DayOfError):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Invalid date formats
    - Missing required fields
    - Type mismatches

    Examples:
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
        >>> raise ValidationError("Required field 'slug' missing or empty")
    """

    pass


class RecordValidationError(ValidationError):
    """
    Exception for day-record validation failures.

    Examples:
        >>> raise RecordValidationError("Record 'coffee-day' has invalid date '2024-13-01'")
    """

    pass


class UnknownCategoryError(RecordValidationError):
    """
    Exception for a category string that resolves to no known category.

    The loader skips such records with a warning unless it runs in
    strict mode, where this is raised instead.

    Examples:
        >>> raise UnknownCategoryError("Unknown category 'Sports' for 'ski-day'")
    """

    pass


class ExportError(DayOfError):
    """
    Exception for catalog export failures.

    Raised when writing enriched or split data files fails:
    - Output directory not writable
    - Input file for splitting unreadable or malformed

    Examples:
        >>> raise ExportError("Cannot write export/food.json: permission denied")
    """

    pass
