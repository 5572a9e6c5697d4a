"""Port for source-specific metadata adapters."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sidecarpy.config import MetadataConfig
    from sidecarpy.domain.archive import CanonicalRecord


class MetadataFormat(StrEnum):
    EZE = "eze"
    GALLERY_DL = "gallery-dl"


class MetadataAdapter(Protocol):
    """Transform one sidecar document into an updated canonical record.

    Implementations are pure: they never mutate ``record`` and keep no state
    between calls, so independent documents may be normalized in parallel.
    Malformed input raises ``ParseError`` or ``ValidationError``.
    """

    @property
    def format(self) -> MetadataFormat: ...

    def normalize(
        self,
        content: str,
        record: CanonicalRecord,
        *,
        config: MetadataConfig,
    ) -> CanonicalRecord: ...
