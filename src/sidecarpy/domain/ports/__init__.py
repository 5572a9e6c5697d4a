from __future__ import annotations

from .metadata import MetadataAdapter, MetadataFormat

__all__ = ["MetadataAdapter", "MetadataFormat"]
