"""Bootstrap helpers shared by the Streamlit entry point."""
from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path


def _resolve_project_root() -> Path:
    """Return the repository root holding the ``src`` package and ``configs``."""

    current = Path(__file__).resolve().parents[1]
    missing = [name for name in ("src", "configs") if not (current / name).exists()]
    if missing:
        raise RuntimeError(
            "Could not locate the project root. Expected "
            + " and ".join(f"'{name}'" for name in missing)
            + " next to scripts/."
        )
    return current


@lru_cache(maxsize=1)
def bootstrap_project() -> Path:
    """Put the repository root on ``sys.path`` once and return it."""

    project_root = _resolve_project_root()
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)
    return project_root
