#!/usr/bin/env python3
"""
enrichment.py
-------------
One-time derivation of the fields a day record may omit.

Applied by the loader to every record, in this order:

1. next_occurrences  - recurring days without explicit dates get the next
                       five annual occurrences, starting with the current year
2. faqs              - generated when absent or empty
3. history           - canned category paragraph when absent
4. why_it_matters    - canned category paragraph when absent

"Current year" always comes from an explicit `today` argument so the output
can be pinned; it defaults to the wall clock.

Usage:
    from dayof.catalog.enrichment import enrich_day

    enriched = enrich_day(day, today=date(2025, 1, 1))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Any, Dict, FrozenSet, Optional, Tuple

# --- Local imports ---
from dayof.catalog.enums import CategoryId
from dayof.catalog.models import Day, Faq
from dayof.utils.dates import format_date, month_day, month_name, rolled_date

DEFAULT_OCCURRENCE_COUNT = 5

RECURRING_CATEGORIES: FrozenSet[CategoryId] = frozenset({
    CategoryId.NATIONAL,
    CategoryId.INTERNATIONAL,
    CategoryId.HOLIDAY,
    CategoryId.FOOD,
    CategoryId.AWARENESS,
    CategoryId.ANIMALS,
    CategoryId.FUN,
    CategoryId.SHOPPING,
})

HISTORY_TEMPLATES: Dict[CategoryId, str] = {
    CategoryId.FOOD: (
        "{title} is one of many food holidays that grew out of a love for "
        "sharing meals. Food days like this one were popularized by producers, "
        "restaurants and home cooks who wanted a reason to celebrate a favorite "
        "dish, and they spread quickly through menus, recipes and social media."
    ),
    CategoryId.AWARENESS: (
        "{title} was established to draw public attention to an important "
        "cause. Awareness days are usually promoted by health organizations, "
        "charities and advocates who use a fixed date each year to share "
        "information, raise funds and encourage people to take action."
    ),
    CategoryId.ANIMALS: (
        "{title} belongs to a family of observances created to celebrate "
        "animals and the people who care for them. Animal days are often "
        "championed by shelters, conservation groups and pet owners who want "
        "to highlight welfare, adoption and protection."
    ),
    CategoryId.FUN: (
        "{title} is one of the lighthearted observances that started as a "
        "playful idea and caught on. Many fun days were invented by "
        "enthusiasts or writers and spread by word of mouth until they became "
        "a yearly tradition."
    ),
    CategoryId.HOLIDAY: (
        "{title} has roots in long-standing traditions that have been passed "
        "down through generations. Over time its customs have changed, but it "
        "remains a day when families and communities come together."
    ),
    CategoryId.SHOPPING: (
        "{title} grew out of the retail calendar, when stores began promoting "
        "special deals on a fixed date. It has since become a fixture for "
        "shoppers looking for bargains both in stores and online."
    ),
    CategoryId.NATIONAL: (
        "{title} is a national observance recognized across the country. "
        "Days like this are often proclaimed by organizations or officials "
        "to honor people, achievements and shared values."
    ),
    CategoryId.INTERNATIONAL: (
        "{title} is observed around the world, often with support from "
        "international organizations. Global days like this one connect "
        "people across borders around a common theme."
    ),
}

WHY_IT_MATTERS_TEMPLATES: Dict[CategoryId, str] = {
    CategoryId.FOOD: (
        "{title} is a chance to appreciate the cooks, farmers and traditions "
        "behind the food we enjoy, and a good excuse to try something new."
    ),
    CategoryId.AWARENESS: (
        "{title} matters because awareness leads to understanding, early "
        "action and support for the people affected."
    ),
    CategoryId.ANIMALS: (
        "{title} reminds us of our responsibility toward animals and the joy "
        "they bring into our lives."
    ),
    CategoryId.FUN: (
        "{title} matters because taking time for play and laughter is good "
        "for everyone."
    ),
    CategoryId.HOLIDAY: (
        "{title} matters because shared traditions bring people together and "
        "keep cultural memory alive."
    ),
    CategoryId.SHOPPING: (
        "{title} helps shoppers plan purchases and supports the businesses "
        "that take part."
    ),
    CategoryId.NATIONAL: (
        "{title} matters because it recognizes people and values that shape "
        "the nation."
    ),
    CategoryId.INTERNATIONAL: (
        "{title} matters because global challenges and celebrations are "
        "shared by people everywhere."
    ),
}

GENERIC_HISTORY = (
    "{title} is a special day celebrated each year by people who share an "
    "interest in its theme."
)
GENERIC_WHY_IT_MATTERS = (
    "{title} gives people a reason to pause, learn something new and "
    "celebrate together."
)


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def is_recurring(day: Day) -> bool:
    """Whether a day repeats on the same month/day every year."""
    return day.category_id in RECURRING_CATEGORIES


def generate_next_occurrences(
    base_date: str,
    count: int = DEFAULT_OCCURRENCE_COUNT,
    today: Optional[date] = None,
) -> Tuple[str, ...]:
    """
    Next annual occurrences of a date's month/day, starting this year.

    Feb 29 rolls forward to Mar 1 in non-leap years.

    Args:
        base_date: ISO date whose month and day are reused
        count: Number of occurrences
        today: Reference date; only its year is used

    Returns:
        Tuple of ISO dates in ascending order

    Raises:
        ValueError: If base_date is not a valid ISO date

    Examples:
        >>> generate_next_occurrences("2024-03-15", 2, date(2025, 6, 1))
        ('2025-03-15', '2026-03-15')
    """
    month, day = month_day(base_date)
    start_year = _today(today).year
    return tuple(
        rolled_date(start_year + offset, month, day).isoformat()
        for offset in range(count)
    )


def _occurrence_answer(title: str, occurrence: str) -> str:
    return f"{title} {occurrence[:4]} falls on {format_date(occurrence)}."


def generate_auto_faqs(day: Day, today: Optional[date] = None) -> Tuple[Faq, ...]:
    """
    Default question/answer pairs for a day page.

    Args:
        day: Day record, already carrying next_occurrences if it recurs
        today: Reference date for "this year"

    Returns:
        Tuple of FAQs, deterministic for a given day and reference date
    """
    year = _today(today).year
    this_year = rolled_date(year, day.month, day.day_of_month).isoformat()

    faqs = [
        Faq(f"When is {day.title} {year}?", _occurrence_answer(day.title, this_year)),
    ]

    occurrences = day.next_occurrences or ()
    if len(occurrences) > 1:
        following = occurrences[1]
        faqs.append(
            Faq(
                f"When is {day.title} {following[:4]}?",
                _occurrence_answer(day.title, following),
            )
        )

    if is_recurring(day):
        when = f"{month_name(day.month)} {day.day_of_month}"
        faqs.append(
            Faq(
                f"Is {day.title} always on {when}?",
                f"Yes. {day.title} is celebrated every year on {when}.",
            )
        )

    if day.how_to_celebrate:
        faqs.append(Faq(f"How do people celebrate {day.title}?", day.how_to_celebrate))

    purpose = f"{day.title} is listed under {day.category_id.display_name}."
    if day.description:
        purpose = f"{purpose} {day.description}"
    faqs.append(
        Faq(
            f"What is the purpose of {day.title}?",
            f"{purpose} It is a day to learn more about its theme and to share it with others.",
        )
    )
    return tuple(faqs)


def default_history(day: Day) -> str:
    """Canned history paragraph for the day's category."""
    template = HISTORY_TEMPLATES.get(day.category_id, GENERIC_HISTORY)
    return template.format(title=day.title)


def default_why_it_matters(day: Day) -> str:
    """Canned importance paragraph for the day's category."""
    template = WHY_IT_MATTERS_TEMPLATES.get(day.category_id, GENERIC_WHY_IT_MATTERS)
    return template.format(title=day.title)


def enrich_day(day: Day, today: Optional[date] = None) -> Day:
    """
    Fill in every derived field the record omits.

    Args:
        day: Parsed record
        today: Reference date for occurrence and FAQ generation

    Returns:
        The same object when nothing was missing, otherwise an enriched copy
    """
    changes: Dict[str, Any] = {}

    if is_recurring(day) and day.next_occurrences is None:
        changes["next_occurrences"] = generate_next_occurrences(day.date, today=today)
    enriched = day.with_changes(**changes) if changes else day

    if not enriched.faqs:
        changes["faqs"] = generate_auto_faqs(enriched, today=today)
    if enriched.history is None:
        changes["history"] = default_history(enriched)
    if enriched.why_it_matters is None:
        changes["why_it_matters"] = default_why_it_matters(enriched)

    return day.with_changes(**changes) if changes else day
