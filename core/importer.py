from __future__ import annotations

import sys

from storage.bookmark_store import backup_target, read_source, write_target

from .config import ImporterConfig
from .models import ImportResult, SkippedDial
from .transform import IdFactory, convert_export, dump_categories, new_id, parse_export


def _warn_skipped(skipped: SkippedDial) -> None:
    print(
        f'Warning: Bookmark "{skipped.title}" (ID: {skipped.dial_id}) belongs to unknown group {skipped.group_id}',
        file=sys.stderr,
    )


def run_import(config: ImporterConfig, id_factory: IdFactory = new_id) -> ImportResult:
    """Read the Speed Dial export, convert it and replace the bookmarks file.

    An existing target is copied to ``config.backup_path`` first; if that copy
    fails the target is left untouched. Raises ImporterError subclasses.
    """
    print(f"Reading from: {config.source_path}")
    export = parse_export(read_source(config.source_path))

    result = convert_export(export, id_factory=id_factory)
    for s in result.skipped:
        _warn_skipped(s)
    print(f"Converted {result.dial_count} bookmarks into {result.category_count} categories.")

    if config.dry_run:
        print(f"Dry run: {result.bookmark_count} bookmarks would be written to {config.target_path}")
        return ImportResult(
            category_count=result.category_count,
            bookmark_count=result.bookmark_count,
            dial_count=result.dial_count,
            skipped=result.skipped,
        )

    backup = backup_target(config.target_path, config.backup_path)
    if backup is not None:
        print(f"Backed up existing data to {backup}")

    write_target(dump_categories(result.categories, keep_source_ids=config.keep_source_ids), config.target_path)
    print(f"Successfully imported data to {config.target_path}")

    return ImportResult(
        category_count=result.category_count,
        bookmark_count=result.bookmark_count,
        dial_count=result.dial_count,
        skipped=result.skipped,
        backup_path=backup,
        written=True,
    )
