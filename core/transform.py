from __future__ import annotations

import uuid
from typing import Any, Callable

from pydantic import ValidationError

from .errors import SourceParseError
from .models import (
    Bookmark,
    Category,
    ConversionResult,
    SkippedDial,
    SourceId,
    SpeedDialExport,
)


IdFactory = Callable[[str], str]


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


def _key(source_id: SourceId) -> str:
    # Exports are inconsistent about 1 vs "1"; compare string forms.
    return str(source_id)


def parse_export(data: Any) -> SpeedDialExport:
    if not isinstance(data, dict):
        raise SourceParseError("Speed Dial export must be a JSON object")
    try:
        return SpeedDialExport.model_validate(data)
    except ValidationError as e:
        raise SourceParseError(f"Invalid Speed Dial export:\n{e}") from e


def convert_export(export: SpeedDialExport, id_factory: IdFactory = new_id) -> ConversionResult:
    """Map Speed Dial groups/dials onto categories/bookmarks.

    Categories follow ``groups`` order and bookmarks follow ``dials`` order.
    Dials whose ``idgroup`` names no group are left out and returned in
    ``ConversionResult.skipped``.
    """
    categories: list[Category] = []
    by_group: dict[str, Category] = {}
    for group in export.groups:
        cat = Category(id=id_factory("cat"), name=group.title, source_id=_key(group.id))
        categories.append(cat)
        # On a repeated group id the later group receives the dials.
        by_group[_key(group.id)] = cat

    skipped: list[SkippedDial] = []
    dials = export.dials or []
    for dial in dials:
        cat = by_group.get(_key(dial.idgroup))
        if cat is None:
            skipped.append(SkippedDial(dial_id=_key(dial.id), title=dial.title, group_id=_key(dial.idgroup)))
            continue
        cat.bookmarks.append(
            Bookmark(
                id=id_factory("bm"),
                title=dial.title,
                url=dial.url,
                icon=dial.thumbnail or None,
                source_id=_key(dial.id),
            )
        )

    return ConversionResult(categories=categories, dial_count=len(dials), skipped=skipped)


def dump_categories(categories: list[Category], keep_source_ids: bool = False) -> list[dict[str, Any]]:
    if keep_source_ids:
        return [c.model_dump(by_alias=True) for c in categories]
    exclude = {"source_id": True, "bookmarks": {"__all__": {"source_id"}}}
    return [c.model_dump(by_alias=True, exclude=exclude) for c in categories]
