"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url

from sidecarpy.adapters.image_store import ImageFormat, ImageMigrationCounts, migrate_images
from sidecarpy.adapters.registry import normalize_metadata
from sidecarpy.adapters.sqlalchemy import fetch_archive_hashes, migrate_archive_rows
from sidecarpy.config import (
    ConfigurationError,
    get_database_config,
    get_legacy_database_uri,
    get_metadata_config,
    get_storage_config,
)
from sidecarpy.domain.archive import CanonicalRecord

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from sidecarpy.config import MetadataConfig
    from sidecarpy.domain.ports import MetadataFormat

log = getLogger(__name__)


def normalize_sidecar(
    sidecar: Path,
    *,
    metadata_format: MetadataFormat | str,
    record: CanonicalRecord | None = None,
    config: MetadataConfig | None = None,
) -> CanonicalRecord:
    """Read a sidecar file and normalize it onto ``record``.

    Without an explicit record, one is seeded from the sidecar's parent
    directory name, which is how archives are discovered on disk.
    """

    content = sidecar.read_text(encoding="utf-8")
    base = record or CanonicalRecord.from_archive_path(sidecar.parent)
    effective_config = config or get_metadata_config()
    log.info("Normalizing %s metadata from %s", metadata_format, sidecar)
    return normalize_metadata(
        content, base, metadata_format=metadata_format, config=effective_config
    )


def _require_backend(uri: str, backend: str, *, role: str) -> None:
    actual = make_url(uri).get_backend_name()
    if actual != backend:
        raise ConfigurationError(f"The {role} database must be {backend}, got {actual}")


def migrate_legacy_images(
    *,
    data_dir: Path,
    image_format: ImageFormat | str,
    legacy_engine: Engine,
    images_dir: Path | None = None,
) -> ImageMigrationCounts:
    """Move legacy covers and thumbnails for every archive in the legacy database."""

    target_dir = images_dir or get_storage_config().resolve_images_dir()
    hashes = fetch_archive_hashes(legacy_engine)
    log.info("Migrating images for %s archives into %s", len(hashes), target_dir)
    return migrate_images(
        data_dir=data_dir,
        images_dir=target_dir,
        image_format=ImageFormat(image_format),
        hashes=hashes,
    )


def migrate_legacy_database(*, legacy_engine: Engine, target_engine: Engine) -> int:
    """Copy legacy archive rows into the new database."""

    count = migrate_archive_rows(legacy_engine, target_engine)
    log.info("Migrated %s archives. Run a forced index to finish the migration", count)
    return count


def migrate_database(legacy_uri: str | None = None, *, target_uri: str | None = None) -> int:
    """Migrate a legacy PostgreSQL archive table into the SQLite database.

    Upgrading in place on PostgreSQL reuses the same database instead. Without
    ``legacy_uri`` the ``LEGACY_DATABASE_URI`` variable must be set.
    """

    legacy_uri = get_legacy_database_uri(legacy_uri)
    resolved_target = target_uri or get_database_config().uri
    _require_backend(legacy_uri, "postgresql", role="legacy")
    _require_backend(resolved_target, "sqlite", role="target")

    legacy_engine = create_engine(legacy_uri, future=True)
    target_engine = create_engine(resolved_target, future=True)
    try:
        return migrate_legacy_database(legacy_engine=legacy_engine, target_engine=target_engine)
    finally:
        legacy_engine.dispose()
        target_engine.dispose()


def migrate_images_from_database(
    legacy_uri: str | None, *, data_dir: Path, image_format: ImageFormat | str
) -> ImageMigrationCounts:
    legacy_uri = get_legacy_database_uri(legacy_uri)
    _require_backend(legacy_uri, "postgresql", role="legacy")
    legacy_engine = create_engine(legacy_uri, future=True)
    try:
        return migrate_legacy_images(
            data_dir=data_dir, image_format=image_format, legacy_engine=legacy_engine
        )
    finally:
        legacy_engine.dispose()
