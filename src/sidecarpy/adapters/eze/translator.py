"""Translate Eze sidecars into canonical records."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from sidecarpy.adapters.documents import load_document
from sidecarpy.adapters.translation import build_overlay, derive_sources, derive_title
from sidecarpy.domain.errors import MetadataError
from sidecarpy.domain.merge import merge_record
from sidecarpy.domain.ports import MetadataFormat
from sidecarpy.domain.tags import classify_tag_groups

from .schema import EzeMetadata

if TYPE_CHECKING:
    from sidecarpy.config import MetadataConfig
    from sidecarpy.domain.archive import CanonicalRecord
    from sidecarpy.domain.merge import RecordOverlay

SOURCE_NAME = "Eze"
UPLOAD_DATE_COMPONENTS = 6

log = getLogger(__name__)


def parse_upload_date(upload_date: list[int] | None) -> datetime | None:
    """Rebuild ``[year, month0, day, hour, minute, second]`` as a UTC datetime.

    The month is zero-based. A zero year or day marks the date as missing, as
    does any array that is not exactly six components long.
    """

    if upload_date is None or len(upload_date) != UPLOAD_DATE_COMPONENTS:
        return None
    year, month, day, hour, minute, second = upload_date
    if not year or not day:
        return None
    try:
        return datetime(year, month + 1, day, hour, minute, second, tzinfo=UTC)
    except (ValueError, OverflowError):
        log.debug("Ignoring out-of-range upload date %s", upload_date)
        return None


def translate_metadata(metadata: EzeMetadata, *, config: MetadataConfig) -> RecordOverlay:
    classified = (
        classify_tag_groups(metadata.tags, capitalize=config.capitalize_tags)
        if metadata.tags is not None
        else None
    )
    source = metadata.source
    return build_overlay(
        title=derive_title(metadata.title, config=config),
        language=metadata.language,
        released_at=parse_upload_date(metadata.upload_date),
        classified=classified,
        sources=(
            derive_sources(source.site, source.gid, source.token) if source is not None else None
        ),
    )


def normalize_eze_metadata(
    content: str, record: CanonicalRecord, *, config: MetadataConfig
) -> CanonicalRecord:
    try:
        metadata = load_document(content, EzeMetadata, source=SOURCE_NAME)
    except MetadataError:
        log.exception("Error parsing %s metadata for %r", SOURCE_NAME, record.title)
        raise
    return merge_record(record, translate_metadata(metadata, config=config))


class EzeAdapter:
    """Adapter for the YAML sidecars written by the Eze downloader."""

    @property
    def format(self) -> MetadataFormat:
        return MetadataFormat.EZE

    def normalize(
        self, content: str, record: CanonicalRecord, *, config: MetadataConfig
    ) -> CanonicalRecord:
        return normalize_eze_metadata(content, record, config=config)
