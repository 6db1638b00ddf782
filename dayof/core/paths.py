#!/usr/bin/env python3
"""
paths.py
--------
Default locations of the category data, exports and logs.

    ROOT/
    ├── dayof/                  # Package code
    ├── data/
    │   └── categories/         # One JSON file per category (+ catalog.yaml)
    ├── exports/                # Enriched catalog output
    └── logs/                   # Application logs

Environment overrides (read once, at import):
    DAYOF_DATA_DIR    directory holding the category files
    DAYOF_LOG_DIR     log directory

The --data-dir and --log-dir command line options take precedence over both.

data/categories is not installed with the package. A regular install
resolves ROOT to site-packages, so it needs DAYOF_DATA_DIR or --data-dir;
loading from a missing directory raises CatalogLoadError.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_project_root() -> Path:
    """
    Directory that contains the dayof package.

    Raises:
        RuntimeError: If this file is not at ROOT/dayof/core/paths.py
    """
    here = Path(__file__).resolve()
    root = here.parents[2]
    if not (root / "dayof").is_dir():
        raise RuntimeError(f"Cannot locate project root from {here}")
    return root


def _env_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    return Path(value).expanduser() if value else default


ROOT: Path = _get_project_root()

DATA_DIR = ROOT / "data"
CATEGORIES_DIR = _env_path("DAYOF_DATA_DIR", DATA_DIR / "categories")
MANIFEST_NAME = "catalog.yaml"

EXPORT_DIR = ROOT / "exports"
LOG_DIR = _env_path("DAYOF_LOG_DIR", ROOT / "logs")
