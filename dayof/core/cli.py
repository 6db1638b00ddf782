#!/usr/bin/env python3
"""
cli.py
------
Logger setup and run statistics shared by the dayof commands.

Functions:
    setup_logger: DayOfLogger writing to <log_dir>/operations

Classes:
    OperationStats: Files, errors and elapsed time
    LoadStats: Catalog build counters
    ExportStats: Export and split counters

Usage:
    from dayof.core.cli import setup_logger, LoadStats

    logger = setup_logger(log_dir, "dayof")
    stats = LoadStats()
    stats.records_loaded += 1
    click.echo(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# --- Local imports ---
from dayof.core.logging_manager import DayOfLogger


def setup_logger(log_dir: Path, component_name: str, verbose: bool = False) -> DayOfLogger:
    """
    Logger for one command line run.

    Log files go to an ``operations`` sub-directory of log_dir, which is
    created when missing.

    Args:
        log_dir: Base log directory (paths.LOG_DIR or --log-dir)
        component_name: Log file stem, e.g. 'dayof' -> dayof.log
        verbose: Echo debug messages to the console as well

    Returns:
        Configured DayOfLogger
    """
    operations_dir = Path(log_dir) / "operations"
    operations_dir.mkdir(parents=True, exist_ok=True)
    return DayOfLogger(operations_dir, component_name=component_name, verbose=verbose)


@dataclass
class OperationStats:
    """
    Counters common to every operation.

    Attributes:
        files_processed: Source or output files handled
        errors: Errors encountered
        start_time: When the operation started
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _elapsed: Optional[float] = field(default=None, init=False, repr=False)

    # Counters checked for negative values on construction
    _counters: Tuple[str, ...] = field(
        default=("files_processed", "errors"), init=False, repr=False
    )

    def __post_init__(self) -> None:
        for name in self._counters:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def duration(self) -> float:
        """Seconds since start_time, frozen at the first call."""
        if self._elapsed is None:
            self._elapsed = (datetime.now() - self.start_time).total_seconds()
        return self._elapsed

    def _summary_parts(self) -> List[str]:
        return [f"{self.files_processed} files processed"]

    def summary(self) -> str:
        """One-line human-readable summary."""
        parts = self._summary_parts()
        parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Counters plus duration, for log records and JSON output."""
        data: Dict[str, Any] = {name: getattr(self, name) for name in self._counters}
        data["duration"] = self.duration()
        return data


@dataclass
class LoadStats(OperationStats):
    """
    Catalog build counters.

    Attributes:
        records_loaded: Records parsed into the catalog
        records_skipped: Records dropped for an unknown category
        records_enriched: Records that received at least one generated field
    """
    records_loaded: int = 0
    records_skipped: int = 0
    records_enriched: int = 0
    _counters: Tuple[str, ...] = field(
        default=(
            "files_processed", "errors",
            "records_loaded", "records_skipped", "records_enriched",
        ),
        init=False,
        repr=False,
    )

    def _summary_parts(self) -> List[str]:
        return super()._summary_parts() + [
            f"{self.records_loaded} records loaded",
            f"{self.records_enriched} enriched",
            f"{self.records_skipped} skipped",
        ]


@dataclass
class ExportStats(OperationStats):
    """
    Export counters.

    Attributes:
        records_exported: Records written
        files_created: Output files written
    """
    records_exported: int = 0
    files_created: int = 0
    _counters: Tuple[str, ...] = field(
        default=("files_processed", "errors", "records_exported", "files_created"),
        init=False,
        repr=False,
    )

    def _summary_parts(self) -> List[str]:
        return [
            f"{self.records_exported} records exported",
            f"{self.files_created} files created",
        ]
