from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel
from pydantic.config import ConfigDict


PROJECT_ROOT = Path(__file__).resolve().parent.parent

TARGET_FILE = Path("data") / "bookmarks.json"
BACKUP_FILE = Path("data") / "bookmarks.backup.json"


def data_base_dir() -> Path:
    """BOOKMARKS_DATA_DIR, else the checkout root, else the working directory.

    An installed copy has no pyproject.toml next to its packages, so data never
    lands inside site-packages.
    """
    base = os.environ.get("BOOKMARKS_DATA_DIR")
    if base:
        return Path(base)
    if (PROJECT_ROOT / "pyproject.toml").exists():
        return PROJECT_ROOT
    return Path.cwd()


def default_source_path() -> Optional[Path]:
    src = (os.environ.get("SPEEDDIAL_EXPORT") or "").strip()
    return Path(src) if src else None


class ImporterConfig(BaseModel):
    """Paths and switches for one import run. Built once at startup."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path
    target_path: Path
    backup_path: Path
    keep_source_ids: bool = False
    dry_run: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> "ImporterConfig":
        """Fill unset paths from BOOKMARKS_DATA_DIR / SPEEDDIAL_EXPORT.

        Overrides that are None are treated as unset. Raises ValueError when no
        source path is available from either place.
        """
        given = {k: v for k, v in overrides.items() if v is not None}
        base = data_base_dir()
        given.setdefault("target_path", base / TARGET_FILE)
        given.setdefault("backup_path", base / BACKUP_FILE)
        if "source_path" not in given:
            src = default_source_path()
            if src is None:
                raise ValueError("No source export given. Pass --source or set SPEEDDIAL_EXPORT.")
            given["source_path"] = src
        return cls(**given)
