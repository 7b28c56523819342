from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

from core.errors import BackupError, SourceParseError, SourceReadError, TargetWriteError


def read_source(path: str | Path) -> Any:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read source export {p}: {e}") from e
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise SourceParseError(f"Source export is not valid JSON: {p}\n{e}") from e


def backup_target(target_path: str | Path, backup_path: str | Path) -> Path | None:
    """Copy an existing target byte-for-byte. Returns the backup path, or None if there was no target."""
    target = Path(target_path)
    if not target.exists():
        return None
    backup = Path(backup_path)
    try:
        backup.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(target, backup)
    except OSError as e:
        raise BackupError(f"Cannot back up {target} to {backup}: {e}") from e
    return backup


def write_target(data: list[dict[str, Any]], out_path: str | Path) -> None:
    path = Path(out_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise TargetWriteError(f"Cannot write bookmarks to {path}: {e}") from e
