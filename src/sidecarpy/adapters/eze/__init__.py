"""Public interface for the Eze adapter."""

from __future__ import annotations

from .schema import EzeMetadata, EzeSource
from .translator import EzeAdapter, normalize_eze_metadata, parse_upload_date

__all__ = [
    "EzeAdapter",
    "EzeMetadata",
    "EzeSource",
    "normalize_eze_metadata",
    "parse_upload_date",
]
