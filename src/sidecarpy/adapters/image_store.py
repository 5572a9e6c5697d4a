"""Copy legacy cover and thumbnail files into the per-archive image layout.

Legacy layout: ``<data_dir>/thumbs/<hash>/<name>.c.<ext>`` for covers and
``<name>.t.<ext>`` for thumbnails. New layout:
``<images_dir>/<hash>/cover/<name>.<ext>`` and
``<images_dir>/<hash>/thumbnail/<name>.<ext>``.
"""

from __future__ import annotations

import shutil
import time
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

log = getLogger(__name__)

LEGACY_THUMBS_DIR: Final[str] = "thumbs"
COVER_DIR: Final[str] = "cover"
THUMBNAIL_DIR: Final[str] = "thumbnail"
COVER_MARKER: Final[str] = ".c."
THUMBNAIL_MARKER: Final[str] = ".t."


class ImageFormat(StrEnum):
    WEBP = "webp"
    JPEG = "jpeg"
    PNG = "png"
    AVIF = "avif"
    JXL = "jxl"


class MigrationError(RuntimeError):
    """Raised when a migration cannot start."""


@dataclass(slots=True)
class ImageMigrationCounts:
    archives: int = 0
    skipped: int = 0
    covers: int = 0
    thumbnails: int = 0


def _copy_marked(files: list[Path], marker: str, destination: Path) -> int:
    copied = 0
    for path in files:
        if marker not in path.name:
            continue
        shutil.copy2(path, destination / path.name.replace(marker, ".", 1))
        copied += 1
    return copied


def migrate_archive_images(
    legacy_dir: Path, target_dir: Path, image_format: ImageFormat
) -> tuple[int, int]:
    """Copy one archive's images; return ``(covers, thumbnails)`` copied."""

    cover_dir = target_dir / COVER_DIR
    thumbnail_dir = target_dir / THUMBNAIL_DIR
    cover_dir.mkdir(parents=True, exist_ok=True)
    thumbnail_dir.mkdir(parents=True, exist_ok=True)

    files = sorted(path for path in legacy_dir.glob(f"*.{image_format}") if path.is_file())
    return (
        _copy_marked(files, COVER_MARKER, cover_dir),
        _copy_marked(files, THUMBNAIL_MARKER, thumbnail_dir),
    )


def migrate_images(
    *,
    data_dir: Path,
    images_dir: Path,
    image_format: ImageFormat,
    hashes: Iterable[str],
) -> ImageMigrationCounts:
    """Migrate legacy images for every archive hash.

    Archives without a legacy directory are counted as skipped.
    """

    if not data_dir.is_dir():
        raise MigrationError(f"Data directory does not exist or is not a directory: {data_dir}")

    counts = ImageMigrationCounts()
    started = time.perf_counter()

    for archive_hash in hashes:
        legacy_dir = data_dir / LEGACY_THUMBS_DIR / archive_hash
        if not legacy_dir.is_dir():
            counts.skipped += 1
            continue

        covers, thumbnails = migrate_archive_images(
            legacy_dir, images_dir / archive_hash, image_format
        )
        counts.covers += covers
        counts.thumbnails += thumbnails
        counts.archives += 1

    log.info("Finished image migration in %.2f seconds", time.perf_counter() - started)
    log.info(
        "Migrated %s covers and %s thumbnails from %s archives (%s skipped)",
        counts.covers,
        counts.thumbnails,
        counts.archives,
        counts.skipped,
    )
    return counts
