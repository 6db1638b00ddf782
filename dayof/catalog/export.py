#!/usr/bin/env python3
"""
export.py
---------
Write catalog data back to JSON files.

Exports are machine-generated build artifacts:
    - export_catalog:       every enriched record in one JSON list
    - export_by_category:   enriched records, one file per category
    - split_days_file:      split a combined raw days file into the
                            per-category source files the loader reads

Per-category files are named after the category (food.json,
awareness.json, ...) so the output directory can be loaded directly.

Usage:
    exporter = CatalogExporter(catalog, logger=logger)
    exporter.export_catalog(Path("exports/days.json"))
    exporter.export_by_category(Path("exports/categories"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from dayof.catalog.catalog import Catalog
from dayof.catalog.enums import CategoryId, resolve_category
from dayof.core.cli import ExportStats
from dayof.core.exceptions import ExportError
from dayof.core.logging_manager import DayOfLogger, safe_logger
from dayof.utils.slugify import slugify


def category_file_name(category_id: CategoryId) -> str:
    """Source file name for a category ('awareness.json')."""
    return f"{slugify(category_id.value)}.json"


def _write_json(path: Path, data: Any) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise ExportError(f"Cannot write {path}: {e}") from e


class CatalogExporter:
    """
    Serializes an enriched catalog to JSON.

    Attributes:
        catalog: Catalog to export
        logger: Optional logger for operation tracking
        stats: Statistics of the last export
    """

    def __init__(self, catalog: Catalog, logger: Optional[DayOfLogger] = None) -> None:
        self.catalog = catalog
        self.logger = logger
        self.stats = ExportStats()

    def export_catalog(self, path: Path) -> Path:
        """
        Write all enriched records to a single JSON list.

        Args:
            path: Output file

        Returns:
            The written path
        """
        self.stats = ExportStats()
        records = self.catalog.to_dicts()
        _write_json(Path(path), records)
        self.stats.records_exported = len(records)
        self.stats.files_created = 1
        safe_logger(self.logger).log_operation(
            "export_catalog", {"path": str(path), **self.stats.to_dict()}
        )
        return Path(path)

    def export_by_category(self, output_dir: Path) -> List[Path]:
        """
        Write enriched records grouped into one file per category.

        Args:
            output_dir: Directory for the category files

        Returns:
            Written paths in category order
        """
        self.stats = ExportStats()
        output_dir = Path(output_dir)
        written: List[Path] = []

        for category in self.catalog.categories:
            records = [
                day.to_dict() for day in self.catalog
                if day.category_id is category.id
            ]
            path = output_dir / category_file_name(category.id)
            _write_json(path, records)
            written.append(path)
            self.stats.records_exported += len(records)
            self.stats.files_created += 1

        safe_logger(self.logger).log_operation(
            "export_by_category", {"output_dir": str(output_dir), **self.stats.to_dict()}
        )
        return written


def split_days_file(
    input_file: Path,
    output_dir: Path,
    logger: Optional[DayOfLogger] = None,
) -> Dict[str, int]:
    """
    Split a combined list of raw day records into per-category source files.

    Every category gets a file, empty or not. Records keep their order and
    raw form; records with an unknown or missing category are skipped.

    Args:
        input_file: JSON file holding a list of raw records
        output_dir: Directory for the category files
        logger: Optional logger

    Returns:
        Record count per category name

    Raises:
        ExportError: If the input cannot be read or is not a list
    """
    try:
        data = json.loads(Path(input_file).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ExportError(f"Cannot read {input_file}: {e}") from e
    if not isinstance(data, list):
        raise ExportError(f"{input_file} must contain a list of records")

    groups: Dict[CategoryId, List[Dict[str, Any]]] = {category: [] for category in CategoryId}
    for record in data:
        category_id = (
            resolve_category(record.get("category")) if isinstance(record, dict) else None
        )
        if category_id is None:
            safe_logger(logger).log_warning(
                "Skipping record without a known category",
                {"record": record.get("slug") if isinstance(record, dict) else repr(record)},
            )
            continue
        groups[category_id].append(record)

    counts: Dict[str, int] = {}
    for category_id, records in groups.items():
        _write_json(Path(output_dir) / category_file_name(category_id), records)
        counts[category_id.value] = len(records)

    safe_logger(logger).log_operation(
        "split_days_file", {"input": str(input_file), "counts": counts}
    )
    return counts
