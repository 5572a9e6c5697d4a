"""Read and copy archive rows from a legacy database."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

from sqlalchemy import MetaData, Table, insert, select

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy.engine import Engine

log = getLogger(__name__)

ARCHIVES_TABLE: Final[str] = "archives"
TIMESTAMP_COLUMNS: Final[tuple[str, ...]] = (
    "created_at",
    "updated_at",
    "released_at",
    "deleted_at",
)


def reflect_archives_table(engine: Engine) -> Table:
    return Table(ARCHIVES_TABLE, MetaData(), autoload_with=engine)


def fetch_archive_hashes(engine: Engine) -> list[str]:
    """Return the content hash of every archive row."""

    archives = reflect_archives_table(engine)
    with engine.connect() as connection:
        return list(connection.execute(select(archives.c.hash)).scalars())


def to_timestamp_text(value: datetime | str | None) -> str | None:
    """Encode a timestamp as UTC ISO-8601 with millisecond precision and ``Z``.

    Naive values are taken to be UTC. ``None`` passes through.
    """

    if value is None:
        return None
    moment = value
    if isinstance(moment, str):
        moment = datetime.fromisoformat(moment.strip().replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_archive_row(row: Mapping[str, Any]) -> dict[str, Any]:
    normalized = dict(row)
    for column in TIMESTAMP_COLUMNS:
        if column in normalized:
            normalized[column] = to_timestamp_text(normalized[column])
    return normalized


def migrate_archive_rows(source: Engine, target: Engine) -> int:
    """Copy every legacy archive row into the target ``archives`` table.

    Single pass and not resumable: a read or insert failure propagates and the
    batch is abandoned.
    """

    legacy_archives = reflect_archives_table(source)
    with source.connect() as connection:
        rows = [
            normalize_archive_row(row)
            for row in connection.execute(select(legacy_archives)).mappings()
        ]

    if not rows:
        log.info("No legacy archives to migrate")
        return 0

    archives = reflect_archives_table(target)
    with target.begin() as connection:
        connection.execute(insert(archives), rows)

    log.info("Migrated %s archive rows", len(rows))
    return len(rows)
