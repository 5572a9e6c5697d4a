"""Field derivations shared by the metadata translators."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sidecarpy.domain.errors import UnsupportedSourceHostError
from sidecarpy.domain.merge import RecordOverlay
from sidecarpy.domain.sources import resolve_source
from sidecarpy.domain.text import title_from_filename

if TYPE_CHECKING:
    from datetime import datetime

    from sidecarpy.config import MetadataConfig
    from sidecarpy.domain.archive import Source
    from sidecarpy.domain.tags import ClassifiedTags

log = getLogger(__name__)


def derive_title(raw_title: str, *, config: MetadataConfig) -> str:
    if config.parse_filename_as_title:
        return title_from_filename(raw_title) or raw_title
    return raw_title


def derive_sources(
    host: str | None, gallery_id: int | None, token: str | None
) -> tuple[Source, ...] | None:
    if host is None or gallery_id is None or token is None:
        return None
    try:
        return (resolve_source(host, gallery_id, token),)
    except UnsupportedSourceHostError as exc:
        log.debug("No source for gallery %s: %s", gallery_id, exc)
        return None


def build_overlay(
    *,
    title: str,
    language: str | None,
    released_at: datetime | None,
    classified: ClassifiedTags | None,
    sources: tuple[Source, ...] | None,
) -> RecordOverlay:
    """Assemble a completed overlay; empty tag destinations stay undetermined."""

    if classified is None:
        return RecordOverlay(
            title=title,
            language=language,
            released_at=released_at,
            sources=sources,
            has_metadata=True,
        )
    return RecordOverlay(
        title=title,
        language=language,
        released_at=released_at,
        artists=tuple(classified.artists) or None,
        circles=tuple(classified.circles) or None,
        parodies=tuple(classified.parodies) or None,
        tags=tuple(classified.tags) or None,
        sources=sources,
        has_metadata=True,
    )
