"""
test_models.py
--------------
Unit tests for dayof.catalog.models.

Tests record parsing and validation, camelCase serialization, derived
date properties and the MonthResult container.
"""
import dataclasses
import pytest
from datetime import date

from dayof.catalog.enums import CategoryId, MonthMatch
from dayof.catalog.models import Day, Faq, MonthResult
from dayof.core.exceptions import (
    RecordValidationError,
    UnknownCategoryError,
    ValidationError,
)


class TestFaq:
    """Test FAQ parsing."""

    def test_from_dict(self):
        faq = Faq.from_dict({"question": "Why?", "answer": "Because."})
        assert faq == Faq("Why?", "Because.")
        assert faq.to_dict() == {"question": "Why?", "answer": "Because."}

    def test_missing_answer(self):
        with pytest.raises(ValidationError, match="answer"):
            Faq.from_dict({"question": "Why?"})

    def test_not_a_dict(self):
        with pytest.raises(ValidationError):
            Faq.from_dict("Why?")


class TestDayFromDict:
    """Test building days from raw records."""

    def test_minimal_record(self, make_record):
        day = Day.from_dict(make_record("National Coffee Day", "2024-09-29"))

        assert day.title == "National Coffee Day"
        assert day.slug == "national-coffee-day"
        assert day.date == "2024-09-29"
        assert day.category == "Food"
        assert day.category_id is CategoryId.FOOD
        assert day.tags == ()
        assert day.related_days == ()
        assert day.image is None
        assert day.faqs is None
        assert day.next_occurrences is None

    def test_long_category_name_resolved(self, make_record):
        day = Day.from_dict(make_record("Pi Day", "2024-03-14", "Fun & Weird"))
        assert day.category == "Fun & Weird"
        assert day.category_id is CategoryId.FUN

    def test_lists_become_tuples(self, make_record):
        day = Day.from_dict(
            make_record(
                "Pi Day", "2024-03-14", "Fun",
                tags=["math", "pie"],
                relatedDays=["national-pie-day"],
                funFacts=["Pi is irrational."],
            )
        )
        assert day.tags == ("math", "pie")
        assert day.related_days == ("national-pie-day",)
        assert day.fun_facts == ("Pi is irrational.",)

    def test_optional_text_fields(self, make_record):
        day = Day.from_dict(
            make_record(
                "Pi Day", "2024-03-14", "Fun",
                image="pi.jpg",
                howToCelebrate="  Bake a pie.  ",
                history="Started in 1988.",
                whyItMatters="Math is fun.",
            )
        )
        assert day.image == "pi.jpg"
        assert day.how_to_celebrate == "Bake a pie."
        assert day.history == "Started in 1988."
        assert day.why_it_matters == "Math is fun."

    def test_faqs_and_occurrences(self, make_record):
        day = Day.from_dict(
            make_record(
                "Pi Day", "2024-03-14", "Fun",
                faqs=[{"question": "Q?", "answer": "A."}],
                nextOccurrences=["2025-03-14", "2026-03-14"],
            )
        )
        assert day.faqs == (Faq("Q?", "A."),)
        assert day.next_occurrences == ("2025-03-14", "2026-03-14")

    def test_empty_occurrences_kept(self, make_record):
        day = Day.from_dict(make_record("Pi Day", "2024-03-14", "Fun", nextOccurrences=[]))
        assert day.next_occurrences == ()

    @pytest.mark.parametrize("missing", ["title", "slug", "date", "category"])
    def test_missing_required_field(self, make_record, missing):
        record = make_record("Pi Day", "2024-03-14", "Fun")
        del record[missing]
        with pytest.raises(RecordValidationError, match=missing):
            Day.from_dict(record)

    @pytest.mark.parametrize("bad_date", ["2024-02-30", "03/14/2024", "soon"])
    def test_invalid_date(self, make_record, bad_date):
        with pytest.raises(RecordValidationError):
            Day.from_dict(make_record("Pi Day", bad_date, "Fun"))

    def test_invalid_occurrence_date(self, make_record):
        record = make_record("Pi Day", "2024-03-14", "Fun", nextOccurrences=["someday"])
        with pytest.raises(RecordValidationError):
            Day.from_dict(record)

    def test_unknown_category(self, make_record):
        with pytest.raises(UnknownCategoryError, match="Sports"):
            Day.from_dict(make_record("Super Bowl Sunday", "2025-02-09", "Sports"))

    def test_unknown_category_is_validation_error(self, make_record):
        with pytest.raises(RecordValidationError):
            Day.from_dict(make_record("Super Bowl Sunday", "2025-02-09", "Sports"))

    def test_tags_must_be_list(self, make_record):
        with pytest.raises(RecordValidationError, match="tags"):
            Day.from_dict(make_record("Pi Day", "2024-03-14", "Fun", tags={"math": 1}))

    def test_record_must_be_object(self):
        with pytest.raises(RecordValidationError):
            Day.from_dict(["not", "a", "record"])


class TestDaySerialization:
    """Test camelCase output."""

    def test_round_trip_keys(self, make_record):
        record = make_record(
            "National Coffee Day", "2024-09-29",
            tags=["coffee"],
            image="coffee.jpg",
            relatedDays=["national-espresso-day"],
            howToCelebrate="Drink coffee.",
        )
        data = Day.from_dict(record).to_dict()

        assert data == {
            "title": "National Coffee Day",
            "slug": "national-coffee-day",
            "date": "2024-09-29",
            "category": "Food",
            "description": "All about National Coffee Day.",
            "tags": ["coffee"],
            "image": "coffee.jpg",
            "relatedDays": ["national-espresso-day"],
            "howToCelebrate": "Drink coffee.",
        }

    def test_absent_optionals_omitted(self, make_record):
        data = Day.from_dict(make_record("Pi Day", "2024-03-14", "Fun")).to_dict()
        for key in ("image", "faqs", "history", "whyItMatters", "nextOccurrences", "funFacts"):
            assert key not in data

    def test_stored_category_string_kept(self, make_record):
        data = Day.from_dict(make_record("Pi Day", "2024-03-14", "Fun & Weird")).to_dict()
        assert data["category"] == "Fun & Weird"


class TestDayProperties:
    """Test derived date values and copying."""

    def test_date_parts(self, make_record):
        day = Day.from_dict(make_record("Leap Day", "2024-02-29", "Fun"))
        assert day.date_value == date(2024, 2, 29)
        assert (day.year, day.month, day.day_of_month) == (2024, 2, 29)

    def test_with_changes_recomputes_date(self, make_record):
        day = Day.from_dict(make_record("Pi Day", "2024-03-14", "Fun"))
        moved = day.with_changes(date="2026-03-14")

        assert moved.year == 2026
        assert day.year == 2024

    def test_frozen(self, make_record):
        day = Day.from_dict(make_record("Pi Day", "2024-03-14", "Fun"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            day.slug = "other"


class TestMonthResult:
    """Test the tagged month lookup result."""

    def test_empty_is_falsy(self):
        result = MonthResult(MonthMatch.EMPTY, (), 1, 2025)
        assert not result
        assert len(result) == 0
        assert list(result) == []
        assert not result.is_substituted

    def test_projected_is_substituted(self, make_record):
        day = Day.from_dict(make_record("Pi Day", "2026-03-14", "Fun"))
        result = MonthResult(MonthMatch.PROJECTED, (day,), 3, 2026, from_year=2024)

        assert result
        assert list(result) == [day]
        assert result.is_substituted

    def test_exact_not_substituted(self):
        result = MonthResult(MonthMatch.EXACT, (), 3, 2024, from_year=2024)
        assert not result.is_substituted
