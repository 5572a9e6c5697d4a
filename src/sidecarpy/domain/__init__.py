"""Domain model and normalization rules."""

from __future__ import annotations

from .archive import CanonicalRecord, Source, Tag, TagCategory
from .errors import (
    FieldViolation,
    MetadataError,
    ParseError,
    UnsupportedSourceHostError,
    ValidationError,
    ViolationKind,
)
from .merge import RecordOverlay, merge_record

__all__ = [
    "CanonicalRecord",
    "FieldViolation",
    "MetadataError",
    "ParseError",
    "RecordOverlay",
    "Source",
    "Tag",
    "TagCategory",
    "UnsupportedSourceHostError",
    "ValidationError",
    "ViolationKind",
    "merge_record",
]
