"""Canonical archive record produced by metadata normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from .text import slugify

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


class TagCategory(StrEnum):
    MALE = "male"
    FEMALE = "female"
    MISC = "misc"


@dataclass(frozen=True, slots=True)
class Tag:
    name: str
    category: TagCategory


@dataclass(frozen=True, slots=True)
class Source:
    name: str
    url: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CanonicalRecord:
    """Immutable snapshot of an archive's metadata.

    ``slug`` is never passed in: it is recomputed from ``title`` on every
    construction, including ``dataclasses.replace``, so the two cannot diverge.
    """

    title: str
    slug: str = field(init=False)
    language: str | None = None
    released_at: datetime | None = None
    artists: tuple[str, ...] | None = None
    circles: tuple[str, ...] | None = None
    parodies: tuple[str, ...] | None = None
    tags: tuple[Tag, ...] | None = None
    sources: tuple[Source, ...] | None = None
    has_metadata: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "slug", slugify(self.title))

    @classmethod
    def from_archive_path(cls, path: Path) -> CanonicalRecord:
        """Seed a record the way file discovery does.

        Archive directories keep their full name as the title; archive files
        drop their extension.
        """

        return cls(title=path.name if path.is_dir() else path.stem)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "slug": self.slug,
            "language": self.language,
            "released_at": self.released_at.isoformat() if self.released_at else None,
            "artists": list(self.artists) if self.artists is not None else None,
            "circles": list(self.circles) if self.circles is not None else None,
            "parodies": list(self.parodies) if self.parodies is not None else None,
            "tags": (
                [[tag.name, str(tag.category)] for tag in self.tags]
                if self.tags is not None
                else None
            ),
            "sources": (
                [{"name": source.name, "url": source.url} for source in self.sources]
                if self.sources is not None
                else None
            ),
            "has_metadata": self.has_metadata,
        }
