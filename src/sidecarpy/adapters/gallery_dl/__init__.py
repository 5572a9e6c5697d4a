"""Public interface for the gallery-dl adapter."""

from __future__ import annotations

from .schema import GalleryDlMetadata
from .translator import GalleryDlAdapter, normalize_gallery_dl_metadata, parse_date

__all__ = [
    "GalleryDlAdapter",
    "GalleryDlMetadata",
    "normalize_gallery_dl_metadata",
    "parse_date",
]
