from __future__ import annotations

from dataclasses import FrozenInstanceError, replace
from datetime import UTC, datetime
from pathlib import Path

import pytest

from sidecarpy.domain.archive import CanonicalRecord, Source, Tag, TagCategory


def test_slug_is_derived_from_title() -> None:
    record = CanonicalRecord(title="Summer Story")

    assert record.slug == "summer-story"
    assert record.has_metadata is False


def test_slug_follows_title_on_replace() -> None:
    record = CanonicalRecord(title="Summer Story")

    updated = replace(record, title="Autumn Story")

    assert updated.slug == "autumn-story"
    assert record.slug == "summer-story"


def test_slug_cannot_be_passed_in() -> None:
    with pytest.raises(TypeError):
        CanonicalRecord(title="Summer Story", slug="other")  # type: ignore[call-arg]


def test_record_is_frozen() -> None:
    record = CanonicalRecord(title="Summer Story")

    with pytest.raises(FrozenInstanceError):
        record.title = "Changed"  # type: ignore[misc]


def test_from_archive_path_uses_stem() -> None:
    record = CanonicalRecord.from_archive_path(Path("/library/Summer Story.cbz"))

    assert record.title == "Summer Story"
    assert record.slug == "summer-story"


def test_from_archive_path_keeps_dotted_directory_name(tmp_path: Path) -> None:
    archive_dir = tmp_path / "Story Vol. 2"
    archive_dir.mkdir()

    record = CanonicalRecord.from_archive_path(archive_dir)

    assert record.title == "Story Vol. 2"
    assert record.slug == "story-vol-2"


def test_to_dict_renders_json_friendly_values() -> None:
    record = CanonicalRecord(
        title="Summer Story",
        language="english",
        released_at=datetime(2023, 1, 15, 10, 30, tzinfo=UTC),
        artists=("Jane Doe",),
        tags=(Tag("Glasses", TagCategory.FEMALE),),
        sources=(Source(name="E-Hentai", url="https://e-hentai/g/1/a"),),
        has_metadata=True,
    )

    rendered = record.to_dict()

    assert rendered["slug"] == "summer-story"
    assert rendered["released_at"] == "2023-01-15T10:30:00+00:00"
    assert rendered["artists"] == ["Jane Doe"]
    assert rendered["circles"] is None
    assert rendered["tags"] == [["Glasses", "female"]]
    assert rendered["sources"] == [{"name": "E-Hentai", "url": "https://e-hentai/g/1/a"}]
