from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from sidecarpy.adapters.image_store import ImageFormat
from sidecarpy.app import migrate_database, migrate_images_from_database, normalize_sidecar
from sidecarpy.config import ConfigurationError, configure_logging
from sidecarpy.domain.archive import CanonicalRecord
from sidecarpy.domain.errors import MetadataError
from sidecarpy.domain.ports import MetadataFormat

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Normalize archive metadata and migrate data")
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser("normalize", help="Normalize a metadata sidecar")
    normalize.add_argument("path", type=Path, help="Path to the sidecar file")
    normalize.add_argument(
        "--format",
        dest="metadata_format",
        choices=[str(item) for item in MetadataFormat],
        required=True,
        help="Sidecar format",
    )
    normalize.add_argument(
        "--archive",
        type=str,
        help="Archive name used as the initial title (defaults to the sidecar directory)",
    )

    images = subparsers.add_parser("migrate-images", help="Migrate legacy covers and thumbnails")
    images.add_argument("--data-dir", type=Path, required=True, help="Legacy data directory")
    images.add_argument(
        "--format",
        dest="image_format",
        choices=[str(item) for item in ImageFormat],
        required=True,
        help="Image format of the legacy thumbnails",
    )
    images.add_argument(
        "--legacy-db", type=str, help="Legacy database URI (defaults to LEGACY_DATABASE_URI)"
    )

    database = subparsers.add_parser("migrate-db", help="Migrate legacy archive rows")
    database.add_argument(
        "--legacy-db", type=str, help="Legacy database URI (defaults to LEGACY_DATABASE_URI)"
    )

    return parser.parse_args(list(argv))


def _run(args: argparse.Namespace) -> None:
    if args.command == "normalize":
        record = CanonicalRecord(title=args.archive) if args.archive else None
        result = normalize_sidecar(args.path, metadata_format=args.metadata_format, record=record)
        sys.stdout.write(json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n")
    elif args.command == "migrate-images":
        migrate_images_from_database(
            args.legacy_db, data_dir=args.data_dir, image_format=args.image_format
        )
    elif args.command == "migrate-db":
        migrate_database(args.legacy_db)
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        _run(parsed_args)
    except (MetadataError, ConfigurationError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
