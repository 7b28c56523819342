from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


SourceId = Union[int, str]


# --- Speed Dial export (source) ---


class SpeedDialGroup(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: SourceId
    title: str


class SpeedDial(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: SourceId
    idgroup: SourceId
    title: str
    url: str
    thumbnail: Optional[str] = None  # data: URI or remote image; absent on plain dials


class SpeedDialExport(BaseModel):
    """Top-level Speed Dial 2 export. Only the keys the importer reads are modelled."""

    model_config = ConfigDict(extra="ignore")

    groups: list[SpeedDialGroup] = Field(default_factory=list)
    dials: Optional[list[SpeedDial]] = None


# --- Bookmarks file (target) ---


class Bookmark(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str
    title: str
    url: str
    icon: Optional[str] = None
    source_id: Optional[str] = Field(default=None, alias="sourceId")


class Category(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str
    name: str
    bookmarks: list[Bookmark] = Field(default_factory=list)
    source_id: Optional[str] = Field(default=None, alias="sourceId")


# --- Results ---


@dataclass(frozen=True)
class SkippedDial:
    """A dial dropped because its idgroup matched no group."""

    dial_id: str
    title: str
    group_id: str


@dataclass(frozen=True)
class ConversionResult:
    categories: list[Category]
    dial_count: int
    skipped: list[SkippedDial] = field(default_factory=list)

    @property
    def category_count(self) -> int:
        return len(self.categories)

    @property
    def bookmark_count(self) -> int:
        return sum(len(c.bookmarks) for c in self.categories)


@dataclass(frozen=True)
class ImportResult:
    category_count: int
    bookmark_count: int
    dial_count: int
    skipped: list[SkippedDial] = field(default_factory=list)
    backup_path: Optional[Path] = None  # set only when a previous target was copied
    written: bool = False
