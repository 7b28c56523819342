#!/usr/bin/env python3
"""
Import a Speed Dial 2 export into the bookmarks file.

Usage:
  python import_speeddial.py --source speed-dial-2-export.json
  BOOKMARKS_DATA_DIR=/srv/app SPEEDDIAL_EXPORT=export.json python import_speeddial.py --dry-run

The previous data/bookmarks.json (if any) is copied to data/bookmarks.backup.json
before it is overwritten.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from core.config import ImporterConfig
from core.errors import ImporterError
from core.importer import run_import


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Convert a Speed Dial export (groups/dials) into categories/bookmarks.")
    p.add_argument("--source", type=Path, default=None, help="Speed Dial export JSON (default: $SPEEDDIAL_EXPORT)")
    p.add_argument("--target", type=Path, default=None, help="Bookmarks file to write (default: <data dir>/data/bookmarks.json)")
    p.add_argument("--backup", type=Path, default=None, help="Backup of the previous bookmarks file (default: <data dir>/data/bookmarks.backup.json)")
    p.add_argument("--keep-source-ids", action="store_true", help="Add sourceId fields with the original Speed Dial ids")
    p.add_argument("--dry-run", action="store_true", help="Convert and report without writing anything")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = ImporterConfig.from_env(
            source_path=args.source,
            target_path=args.target,
            backup_path=args.backup,
            keep_source_ids=args.keep_source_ids,
            dry_run=args.dry_run,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        result = run_import(config)
    except ImporterError as e:
        print(f"Error during import: {e}", file=sys.stderr)
        return 1

    if result.skipped:
        print(f"{len(result.skipped)} dial(s) skipped (unknown group).")
    if result.written:
        print(f"✅ {result.bookmark_count} bookmarks in {result.category_count} categories.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
