#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for catalog records.

Provides type-safe conversion, validation, and normalization functions
used when raw JSON/YAML day records are turned into Day objects.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import ValidationError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DataValidator:
    """Centralized data validation for raw day records."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str], allow_falsy: bool = False
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names
            allow_falsy: Accept present-but-falsy values (0, "", False)

        Raises:
            ValidationError: Naming every missing field
        """
        missing = []
        for field in required_fields:
            if field not in data or data[field] is None:
                missing.append(field)
            elif not allow_falsy and not data[field]:
                missing.append(field)

        if missing:
            names = ", ".join(f"'{name}'" for name in missing)
            raise ValidationError(f"Required field(s) {names} missing or empty")

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize various date inputs to date object.

        Strings must be ISO calendar dates (YYYY-MM-DD).

        Args:
            date_value: Date string, date object, or datetime

        Returns:
            Normalized date object or None

        Raises:
            ValidationError: If a string is not a valid ISO date
        """
        if isinstance(date_value, datetime):
            return date_value.date()
        elif isinstance(date_value, date):
            return date_value
        elif isinstance(date_value, str):
            text = date_value.strip()
            if not ISO_DATE_RE.match(text):
                raise ValidationError(
                    f"Invalid date format '{date_value}': expected YYYY-MM-DD"
                )
            try:
                return date.fromisoformat(text)
            except ValueError as e:
                raise ValidationError(f"Invalid date '{date_value}': {e}") from e
        return None

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize string value.

        Args:
            value: Value to normalize

        Returns:
            Stripped string, or None for empty/missing values
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_str_list(value: Any, field: str = "value") -> Tuple[str, ...]:
        """
        Normalize a list of strings, keeping order and dropping blanks.

        Args:
            value: List of values, a single string, or None
            field: Field name used in error messages

        Returns:
            Tuple of non-empty strings

        Raises:
            ValidationError: If value is neither a list nor a string
        """
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValidationError(
                f"Field '{field}' must be a list of strings, got {type(value).__name__}"
            )
        items = []
        for item in value:
            text = DataValidator.normalize_string(item)
            if text:
                items.append(text)
        return tuple(items)
