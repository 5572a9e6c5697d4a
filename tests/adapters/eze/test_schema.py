"""Schema validation for Eze sidecars."""

from __future__ import annotations

import pytest
import yaml
from pydantic import ValidationError as PydanticValidationError

from sidecarpy.adapters.eze.schema import EzeMetadata


def test_schema_accepts_sample_sidecar(eze_content: str) -> None:
    parsed = EzeMetadata.model_validate(yaml.safe_load(eze_content))

    assert parsed.title.startswith("[Circle Name")
    assert parsed.upload_date == [2023, 0, 15, 10, 30, 0]
    assert parsed.tags is not None
    assert parsed.tags["artist"] == ["jane doe"]
    assert parsed.source is not None
    assert parsed.source.gid == 12345


def test_schema_only_requires_title() -> None:
    parsed = EzeMetadata.model_validate({"title": "Only Title"})

    assert parsed.tags is None
    assert parsed.source is None


def test_schema_rejects_string_gallery_id() -> None:
    with pytest.raises(PydanticValidationError):
        EzeMetadata.model_validate(
            {"title": "t", "source": {"site": "e-hentai", "gid": "12345", "token": "abcd"}}
        )


def test_schema_rejects_flat_tag_list() -> None:
    with pytest.raises(PydanticValidationError):
        EzeMetadata.model_validate({"title": "t", "tags": ["artist:jane doe"]})
