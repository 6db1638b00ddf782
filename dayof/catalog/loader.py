#!/usr/bin/env python3
"""
loader.py
---------
Build the catalog from category source files.

Sources are read in a fixed order and concatenated, preserving each file's
internal order. Every record is validated, its category resolved, and the
result enriched once. The finished Catalog is immutable.

Source order:
    By default: food, awareness, animals, fun, holiday, shopping, national,
    international (``<name>.json`` in the categories directory). A
    ``catalog.yaml`` manifest in that directory overrides the list:

        sources:
          - food.json
          - seasonal.yaml

Failure handling:
    - Unreadable or malformed files, and records with missing fields or
      bad dates, raise CatalogLoadError (the build cannot continue).
    - Records whose category is unknown are skipped with a warning, or
      raise UnknownCategoryError when strict=True.

Usage:
    from dayof.catalog.loader import load_catalog

    catalog = load_catalog()                         # default data directory
    catalog = load_catalog([Path("food.json")], today=date(2025, 1, 1))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

# --- Third party imports ---
import yaml

# --- Local imports ---
from dayof.catalog.catalog import Catalog
from dayof.catalog.categories import CATEGORIES
from dayof.catalog.enrichment import enrich_day
from dayof.catalog.models import Day
from dayof.core.cli import LoadStats
from dayof.core.exceptions import (
    CatalogLoadError,
    RecordValidationError,
    UnknownCategoryError,
)
from dayof.core.logging_manager import DayOfLogger, safe_logger
from dayof.core.paths import CATEGORIES_DIR, MANIFEST_NAME

PathLike = Union[str, Path]

DEFAULT_SOURCE_ORDER = (
    "food.json",
    "awareness.json",
    "animals.json",
    "fun.json",
    "holiday.json",
    "shopping.json",
    "national.json",
    "international.json",
)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


# ----- Manifest -----

def read_manifest(data_dir: PathLike) -> Optional[List[str]]:
    """
    Read the source list from a catalog.yaml manifest.

    Args:
        data_dir: Directory holding the category files

    Returns:
        File names in load order, or None when there is no manifest

    Raises:
        CatalogLoadError: If the manifest is malformed
    """
    manifest = Path(data_dir) / MANIFEST_NAME
    if not manifest.exists():
        return None

    try:
        data = yaml.safe_load(manifest.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(f"Cannot read manifest {manifest}: {e}") from e

    sources = data.get("sources") if isinstance(data, dict) else None
    if not isinstance(sources, list) or not all(isinstance(s, str) for s in sources):
        raise CatalogLoadError(
            f"Manifest {manifest} must contain a 'sources' list of file names"
        )
    return sources


def default_sources(
    data_dir: Optional[PathLike] = None,
    logger: Optional[DayOfLogger] = None,
) -> List[Path]:
    """
    Resolve the ordered list of source files for a data directory.

    Files named by a manifest must exist. Files from the default order that
    are missing are skipped with a warning.

    Args:
        data_dir: Categories directory (defaults to paths.CATEGORIES_DIR)
        logger: Optional logger

    Returns:
        Existing source paths in load order

    Raises:
        CatalogLoadError: If the directory does not exist or a manifest-listed
            file is missing
    """
    data_dir = Path(data_dir) if data_dir is not None else CATEGORIES_DIR
    if not data_dir.is_dir():
        raise CatalogLoadError(
            f"Category directory not found: {data_dir} "
            "(pass --data-dir or set DAYOF_DATA_DIR)"
        )
    names = read_manifest(data_dir)

    if names is not None:
        paths = [data_dir / name for name in names]
        missing = [str(path) for path in paths if not path.exists()]
        if missing:
            raise CatalogLoadError(f"Manifest lists missing source(s): {', '.join(missing)}")
        return paths

    paths = []
    for name in DEFAULT_SOURCE_ORDER:
        path = data_dir / name
        if path.exists():
            paths.append(path)
        else:
            safe_logger(logger).log_warning("Category source missing", {"path": str(path)})
    return paths


# ----- Loader -----

class CatalogLoader:
    """
    Reads source files and builds an enriched Catalog.

    Attributes:
        logger: Optional logger for load operations
        today: Reference date used for enrichment
        strict: Raise on unknown categories instead of skipping
        stats: Statistics of the last load
    """

    def __init__(
        self,
        logger: Optional[DayOfLogger] = None,
        today: Optional[date] = None,
        strict: bool = False,
    ) -> None:
        self.logger = logger
        self.today = today or date.today()
        self.strict = strict
        self.stats = LoadStats()

    def read_source(self, path: PathLike) -> List[Dict[str, Any]]:
        """
        Read one source file as a list of raw records.

        Args:
            path: JSON or YAML file

        Returns:
            Raw record dictionaries in file order

        Raises:
            CatalogLoadError: If the file is missing, unparsable or not a list
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
            raise CatalogLoadError(f"Unsupported source type '{suffix}': {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"Cannot read source {path}: {e}") from e

        try:
            if suffix in JSON_SUFFIXES:
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise CatalogLoadError(f"Cannot parse source {path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise CatalogLoadError(
                f"Source {path} must contain a list of records, got {type(data).__name__}"
            )
        return data

    def parse_records(self, records: Sequence[Any], source: str) -> List[Day]:
        """
        Validate raw records and enrich them.

        Args:
            records: Raw records from one source
            source: Source name used in messages

        Returns:
            Enriched days in record order

        Raises:
            CatalogLoadError: If a record is invalid
            UnknownCategoryError: Unknown category in strict mode
        """
        days: List[Day] = []
        for index, raw in enumerate(records):
            try:
                day = Day.from_dict(raw)
            except UnknownCategoryError as e:
                if self.strict:
                    raise
                self.stats.records_skipped += 1
                safe_logger(self.logger).log_warning(
                    "Skipping record with unknown category",
                    {"source": source, "index": index, "error": str(e)},
                )
                continue
            except RecordValidationError as e:
                self.stats.errors += 1
                raise CatalogLoadError(f"{source}[{index}]: {e}") from e

            enriched = enrich_day(day, today=self.today)
            if enriched is not day:
                self.stats.records_enriched += 1
            days.append(enriched)
            self.stats.records_loaded += 1
        return days

    def load(self, sources: Sequence[PathLike]) -> Catalog:
        """
        Build a catalog from source files, in the given order.

        Args:
            sources: JSON/YAML source paths

        Returns:
            Immutable enriched Catalog
        """
        self.stats = LoadStats()
        days: List[Day] = []
        raw_by_source: Dict[str, List[Dict[str, Any]]] = {}

        for source in sources:
            path = Path(source)
            records = self.read_source(path)
            days.extend(self.parse_records(records, path.name))
            raw_by_source.setdefault(path.stem, []).extend(records)
            self.stats.files_processed += 1
            safe_logger(self.logger).log_debug(
                "Source loaded", {"path": str(path), "records": len(records)}
            )

        catalog = Catalog(
            days,
            categories=CATEGORIES,
            reference_date=self.today,
            sources=raw_by_source,
        )
        safe_logger(self.logger).log_operation("load_catalog", self.stats.to_dict())
        return catalog


def load_catalog(
    sources: Optional[Sequence[PathLike]] = None,
    today: Optional[date] = None,
    logger: Optional[DayOfLogger] = None,
    strict: bool = False,
    data_dir: Optional[PathLike] = None,
) -> Catalog:
    """
    Load and enrich a catalog.

    Args:
        sources: Source files in load order; resolved from data_dir when None
        today: Reference date for enrichment (defaults to the wall clock)
        logger: Optional logger
        strict: Raise on unknown categories instead of skipping
        data_dir: Categories directory used when sources is None

    Returns:
        Immutable enriched Catalog
    """
    if sources is None:
        sources = default_sources(data_dir, logger=logger)
    loader = CatalogLoader(logger=logger, today=today, strict=strict)
    return loader.load(sources)


# ----- Process-wide default -----

_default_catalog: Optional[Catalog] = None


def get_default_catalog() -> Catalog:
    """
    Catalog from the default data directory, loaded on first use.

    Application start-up code calls this once; later calls return the
    same immutable instance.
    """
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = load_catalog()
    return _default_catalog


def reset_default_catalog() -> None:
    """Forget the cached default catalog."""
    global _default_catalog
    _default_catalog = None
