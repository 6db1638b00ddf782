"""
conftest.py
-----------
Shared pytest fixtures for dayof tests.

Provides fixtures for:
- A pinned reference date
- Raw record factories
- Category source files written to a temporary directory
- A loaded catalog built from those files
"""
import json
import pytest
from datetime import date
from pathlib import Path

from dayof.catalog.loader import load_catalog


# ----- Reference Date -----

@pytest.fixture
def today():
    """Pinned "today" used for enrichment and upcoming queries."""
    return date(2025, 6, 1)


# ----- Record Factories -----

@pytest.fixture
def make_record():
    """Factory for raw day records with sensible defaults."""
    def _make(title, date_str, category="Food", **extra):
        record = {
            "title": title,
            "slug": extra.pop("slug", title.lower().replace(" ", "-")),
            "date": date_str,
            "category": category,
            "description": extra.pop("description", f"All about {title}."),
            "tags": extra.pop("tags", []),
            "image": extra.pop("image", None),
            "relatedDays": extra.pop("relatedDays", []),
        }
        record.update(extra)
        return {key: value for key, value in record.items() if value is not None}
    return _make


@pytest.fixture
def write_source(tmp_path):
    """Write a list of records to a JSON source file in tmp_path."""
    def _write(name, records, directory=None):
        directory = directory or (tmp_path / "categories")
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        return path
    return _write


# ----- Sample Catalog -----

@pytest.fixture
def sample_records(make_record):
    """Records per source file, mixing short and long category names."""
    return {
        "food.json": [
            make_record(
                "National Coffee Day", "2024-09-29", "Food",
                tags=["coffee", "drinks", "breakfast"],
                relatedDays=["national-espresso-day", "missing-day", "national-pancake-day"],
                howToCelebrate="Drink a cup with friends.",
            ),
            make_record("National Espresso Day", "2024-11-23", "Food", tags=["coffee", "drinks"]),
            make_record("National Pancake Day", "2024-09-26", "Food", tags=["breakfast"]),
            make_record("National Pie Day", "2024-03-14", "Food", tags=["pie", "dessert"]),
        ],
        "awareness.json": [
            make_record(
                "World Heart Day", "2024-09-29", "Awareness & Health",
                tags=["health", "heart"],
            ),
            make_record("World Health Day", "2024-04-07", "Awareness", tags=["health"]),
        ],
        "animals.json": [
            make_record("National Dog Day", "2024-08-26", "Animals & Pets", tags=["dogs", "pets"]),
            make_record("International Cat Day", "2024-08-08", "Animals", tags=["cats", "pets"]),
        ],
        "fun.json": [
            make_record("Pi Day", "2024-03-14", "Fun & Weird", tags=["math", "pie"]),
            make_record("Leap Day", "2024-02-29", "Fun", tags=["calendar"]),
        ],
        "shopping.json": [
            make_record("Black Friday", "2025-11-28", "Shopping & Deals", tags=["deals"]),
            make_record("Cyber Monday", "2025-12-01", "Shopping", tags=["deals", "online"]),
        ],
    }


@pytest.fixture
def sample_sources(sample_records, write_source):
    """Sample records written to JSON files, in load order."""
    return [write_source(name, records) for name, records in sample_records.items()]


@pytest.fixture
def catalog(sample_sources, today):
    """Catalog loaded from the sample sources with a pinned date."""
    return load_catalog(sample_sources, today=today)


@pytest.fixture
def data_dir(sample_sources) -> Path:
    """Directory holding the sample source files."""
    return sample_sources[0].parent
