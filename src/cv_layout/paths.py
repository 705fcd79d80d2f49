"""Centralized path management for the CV layout planner.

All paths should be imported from this module to ensure consistency.
"""
from __future__ import annotations

from pathlib import Path

# Resolve once, reuse everywhere
PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parents[1]
CONFIG_DIR = PACKAGE_DIR / "config"
PAGE_BUDGETS_FILE = CONFIG_DIR / "page_budgets.yaml"
OUTPUT_DIR = PROJECT_ROOT / "output"
LOG_DIR = OUTPUT_DIR / "logs"


def resolve_under_root(p: str | Path) -> Path:
    """Resolve a path relative to PROJECT_ROOT if not absolute.

    Relative paths that exist under the current working directory win over
    PROJECT_ROOT, so the CLI behaves as expected from any directory.

    Raises:
        ValueError: If the path resolves to a directory when a file is expected
    """
    p = Path(p)
    if p.is_absolute():
        resolved = p
    elif (Path.cwd() / p).exists():
        resolved = Path.cwd() / p
    else:
        resolved = PROJECT_ROOT / p

    if resolved.exists() and resolved.is_dir():
        raise ValueError(f"Path is a directory, not a file: {resolved}")

    return resolved
