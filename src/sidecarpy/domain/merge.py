"""Overlay adapter output onto an existing canonical record."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from .archive import CanonicalRecord, Source, Tag


@dataclass(frozen=True, slots=True, kw_only=True)
class RecordOverlay:
    """Fields derived by one adapter run; ``None`` means "not determined"."""

    title: str | None = None
    language: str | None = None
    released_at: datetime | None = None
    artists: tuple[str, ...] | None = None
    circles: tuple[str, ...] | None = None
    parodies: tuple[str, ...] | None = None
    tags: tuple[Tag, ...] | None = None
    sources: tuple[Source, ...] | None = None
    has_metadata: bool | None = None

    def determined(self) -> dict[str, object]:
        return {
            spec.name: value
            for spec in fields(self)
            if (value := getattr(self, spec.name)) is not None
        }


def merge_record(record: CanonicalRecord, overlay: RecordOverlay) -> CanonicalRecord:
    """Return a new record with every determined overlay field applied.

    Undetermined fields keep the existing value, so re-running normalization with
    another source format never clears earlier imports. Merges are only
    commutative across disjoint fields: callers normalizing several documents
    against the same record concurrently must serialize the merges themselves.
    """

    return replace(record, **overlay.determined())
