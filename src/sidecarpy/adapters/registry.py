"""Closed set of metadata adapters, selected by sidecar format."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from sidecarpy.domain.ports import MetadataAdapter, MetadataFormat

from .eze import EzeAdapter
from .gallery_dl import GalleryDlAdapter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sidecarpy.config import MetadataConfig
    from sidecarpy.domain.archive import CanonicalRecord

ADAPTERS: Final[Mapping[MetadataFormat, MetadataAdapter]] = MappingProxyType(
    {
        MetadataFormat.EZE: EzeAdapter(),
        MetadataFormat.GALLERY_DL: GalleryDlAdapter(),
    }
)


def get_adapter(metadata_format: MetadataFormat | str) -> MetadataAdapter:
    try:
        return ADAPTERS[MetadataFormat(metadata_format)]
    except ValueError as exc:
        raise ValueError(f"Unsupported metadata format: {metadata_format}") from exc


def normalize_metadata(
    content: str,
    record: CanonicalRecord,
    *,
    metadata_format: MetadataFormat | str,
    config: MetadataConfig,
) -> CanonicalRecord:
    """Normalize ``content`` with the adapter registered for ``metadata_format``."""

    return get_adapter(metadata_format).normalize(content, record, config=config)
