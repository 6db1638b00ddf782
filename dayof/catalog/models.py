#!/usr/bin/env python3
"""
models.py
-------------------
Dataclasses for day records and query results.

Day records come from JSON (or YAML) category files using camelCase keys:

    {
      "title": "National Coffee Day",
      "slug": "national-coffee-day",
      "date": "2024-09-29",
      "category": "Food",
      "description": "...",
      "tags": ["coffee", "drinks"],
      "image": "coffee.jpg",
      "relatedDays": ["national-espresso-day"],
      "howToCelebrate": "...",
      "funFacts": ["..."],
      "history": "...",
      "whyItMatters": "...",
      "faqs": [{"question": "...", "answer": "..."}],
      "nextOccurrences": ["2025-09-29", "..."]
    }

Day objects are frozen; lists are stored as tuples so a loaded catalog can
be shared freely between readers.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Iterator, Optional, Tuple

# --- Local imports ---
from dayof.catalog.enums import CategoryId, MonthMatch, resolve_category
from dayof.core.exceptions import (
    RecordValidationError,
    UnknownCategoryError,
    ValidationError,
)
from dayof.core.validators import DataValidator

REQUIRED_FIELDS = ["title", "slug", "date", "category"]


@dataclass(frozen=True)
class Faq:
    """A question/answer pair shown on a day page."""

    question: str
    answer: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Faq":
        if not isinstance(data, dict):
            raise ValidationError(f"FAQ entries must be objects, got {type(data).__name__}")
        DataValidator.validate_required_fields(data, ["question", "answer"])
        return cls(question=str(data["question"]), answer=str(data["answer"]))

    def to_dict(self) -> Dict[str, str]:
        return {"question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class Day:
    """
    One catalog record: a named observance with a nominal annual date.

    Fields:
    - title:            Display name
    - slug:             URL-safe primary lookup key
    - date:             ISO date of one representative occurrence
    - category:         Category string exactly as stored in the source
    - category_id:      Resolved category
    - description:      Short description
    - tags:             Ordered free-text tags
    - image:            Optional image path or file name
    - related_days:     Ordered slugs of explicitly related days
    - how_to_celebrate: Optional long-form text
    - fun_facts:        Optional list of facts
    - history:          Optional history text (generated when absent)
    - why_it_matters:   Optional importance text (generated when absent)
    - faqs:             Optional FAQs (generated when absent or empty)
    - next_occurrences: Optional upcoming ISO dates (generated for recurring days)
    """
    title:            str
    slug:             str
    date:             str
    category:         str
    category_id:      CategoryId
    description:      str                        = ""
    tags:             Tuple[str, ...]            = ()
    image:            Optional[str]              = None
    related_days:     Tuple[str, ...]            = ()
    how_to_celebrate: Optional[str]              = None
    fun_facts:        Optional[Tuple[str, ...]]  = None
    history:          Optional[str]              = None
    why_it_matters:   Optional[str]              = None
    faqs:             Optional[Tuple[Faq, ...]]  = None
    next_occurrences: Optional[Tuple[str, ...]]  = None
    _date_value:      date = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_date_value", date.fromisoformat(self.date))

    # ---- Public constructors ----
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Day":
        """
        Build a Day from one raw source record.

        Args:
            data: Record dictionary with camelCase keys

        Returns:
            Day instance (not yet enriched)

        Raises:
            RecordValidationError: Missing required field, bad date or bad list field
            UnknownCategoryError: Category string has no known alias
        """
        if not isinstance(data, dict):
            raise RecordValidationError(
                f"Day records must be objects, got {type(data).__name__}"
            )

        label = data.get("slug") or data.get("title") or "<unnamed>"
        try:
            DataValidator.validate_required_fields(data, REQUIRED_FIELDS)
            record_date = DataValidator.normalize_date(data["date"])
            if record_date is None:
                raise ValidationError(f"Invalid date value {data['date']!r}")
        except ValidationError as e:
            raise RecordValidationError(f"Record '{label}': {e}") from e

        category = str(data["category"])
        category_id = resolve_category(category)
        if category_id is None:
            raise UnknownCategoryError(
                f"Record '{label}': unknown category '{category}'"
            )

        try:
            faqs = data.get("faqs")
            fun_facts = data.get("funFacts")
            next_occurrences = data.get("nextOccurrences")
            return cls(
                title=str(data["title"]).strip(),
                slug=str(data["slug"]).strip(),
                date=record_date.isoformat(),
                category=category,
                category_id=category_id,
                description=DataValidator.normalize_string(data.get("description")) or "",
                tags=DataValidator.normalize_str_list(data.get("tags"), "tags"),
                image=DataValidator.normalize_string(data.get("image")),
                related_days=DataValidator.normalize_str_list(
                    data.get("relatedDays"), "relatedDays"
                ),
                how_to_celebrate=DataValidator.normalize_string(data.get("howToCelebrate")),
                fun_facts=(
                    DataValidator.normalize_str_list(fun_facts, "funFacts")
                    if fun_facts is not None else None
                ),
                history=DataValidator.normalize_string(data.get("history")),
                why_it_matters=DataValidator.normalize_string(data.get("whyItMatters")),
                faqs=(
                    tuple(Faq.from_dict(item) for item in faqs)
                    if faqs is not None else None
                ),
                next_occurrences=(
                    tuple(
                        DataValidator.normalize_date(value).isoformat()
                        for value in DataValidator.normalize_str_list(
                            next_occurrences, "nextOccurrences"
                        )
                    )
                    if next_occurrences is not None else None
                ),
            )
        except (ValidationError, TypeError) as e:
            raise RecordValidationError(f"Record '{label}': {e}") from e

    # ---- Serialization ----
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase source shape, omitting absent optionals."""
        data: Dict[str, Any] = {
            "title": self.title,
            "slug": self.slug,
            "date": self.date,
            "category": self.category,
            "description": self.description,
            "tags": list(self.tags),
        }
        if self.image is not None:
            data["image"] = self.image
        data["relatedDays"] = list(self.related_days)

        optional = (
            ("howToCelebrate", self.how_to_celebrate),
            ("funFacts", list(self.fun_facts) if self.fun_facts is not None else None),
            ("history", self.history),
            ("whyItMatters", self.why_it_matters),
            ("faqs", [faq.to_dict() for faq in self.faqs] if self.faqs is not None else None),
            (
                "nextOccurrences",
                list(self.next_occurrences) if self.next_occurrences is not None else None,
            ),
        )
        for key, value in optional:
            if value is not None:
                data[key] = value
        return data

    # ---- Derived values ----
    @property
    def date_value(self) -> date:
        return self._date_value

    @property
    def year(self) -> int:
        return self._date_value.year

    @property
    def month(self) -> int:
        return self._date_value.month

    @property
    def day_of_month(self) -> int:
        return self._date_value.day

    def with_changes(self, **changes: Any) -> "Day":
        """Copy of this day with some fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class MonthResult:
    """
    Outcome of a month/year lookup.

    Fields:
    - kind:            How the lookup was satisfied
    - days:            Records for the month (possibly from another year)
    - month:           Requested month
    - requested_year:  Requested year
    - from_year:       Year the records were taken from (None when EMPTY)

    Callers can show "(showing {from_year} dates)" whenever kind is FALLBACK.
    """
    kind:           MonthMatch
    days:           Tuple[Day, ...]
    month:          int
    requested_year: int
    from_year:      Optional[int] = None

    def __bool__(self) -> bool:
        return self.kind is not MonthMatch.EMPTY

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[Day]:
        return iter(self.days)

    @property
    def is_substituted(self) -> bool:
        """True when the records come from a year other than the requested one."""
        return self.kind in (MonthMatch.PROJECTED, MonthMatch.FALLBACK)
