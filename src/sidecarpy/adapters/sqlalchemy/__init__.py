"""SQLAlchemy access to legacy archive databases."""

from __future__ import annotations

from .legacy import (
    fetch_archive_hashes,
    migrate_archive_rows,
    normalize_archive_row,
    to_timestamp_text,
)

__all__ = [
    "fetch_archive_hashes",
    "migrate_archive_rows",
    "normalize_archive_row",
    "to_timestamp_text",
]
