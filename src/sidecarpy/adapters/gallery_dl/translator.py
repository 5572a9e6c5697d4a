"""Translate gallery-dl sidecars into canonical records."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from sidecarpy.adapters.documents import load_document
from sidecarpy.adapters.translation import build_overlay, derive_sources, derive_title
from sidecarpy.domain.errors import MetadataError
from sidecarpy.domain.merge import merge_record
from sidecarpy.domain.ports import MetadataFormat
from sidecarpy.domain.tags import classify_tag_strings

from .schema import GALLERY_DL_DATE_FORMAT, GalleryDlMetadata

if TYPE_CHECKING:
    from sidecarpy.config import MetadataConfig
    from sidecarpy.domain.archive import CanonicalRecord
    from sidecarpy.domain.merge import RecordOverlay

SOURCE_NAME = "gallery-dl"

log = getLogger(__name__)


def parse_date(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.strptime(value.strip(), GALLERY_DL_DATE_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        log.debug("Ignoring unparseable date %r", value)
        return None


def translate_metadata(metadata: GalleryDlMetadata, *, config: MetadataConfig) -> RecordOverlay:
    classified = (
        classify_tag_strings(metadata.tags, capitalize=config.capitalize_tags)
        if metadata.tags is not None
        else None
    )
    return build_overlay(
        title=derive_title(metadata.title, config=config),
        language=metadata.language,
        released_at=parse_date(metadata.date),
        classified=classified,
        sources=derive_sources(metadata.category, metadata.gallery_id, metadata.gallery_token),
    )


def normalize_gallery_dl_metadata(
    content: str, record: CanonicalRecord, *, config: MetadataConfig
) -> CanonicalRecord:
    try:
        metadata = load_document(content, GalleryDlMetadata, source=SOURCE_NAME)
    except MetadataError:
        log.exception("Error parsing %s metadata for %r", SOURCE_NAME, record.title)
        raise
    return merge_record(record, translate_metadata(metadata, config=config))


class GalleryDlAdapter:
    """Adapter for the JSON sidecars written by gallery-dl."""

    @property
    def format(self) -> MetadataFormat:
        return MetadataFormat.GALLERY_DL

    def normalize(
        self, content: str, record: CanonicalRecord, *, config: MetadataConfig
    ) -> CanonicalRecord:
        return normalize_gallery_dl_metadata(content, record, config=config)
