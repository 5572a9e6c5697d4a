from __future__ import annotations

import pytest

from sidecarpy.adapters.eze import EzeAdapter
from sidecarpy.adapters.gallery_dl import GalleryDlAdapter
from sidecarpy.adapters.registry import ADAPTERS, get_adapter, normalize_metadata
from sidecarpy.config import MetadataConfig
from sidecarpy.domain.archive import CanonicalRecord
from sidecarpy.domain.ports import MetadataFormat


def test_every_format_has_an_adapter() -> None:
    assert set(ADAPTERS) == set(MetadataFormat)
    for metadata_format, adapter in ADAPTERS.items():
        assert adapter.format is metadata_format


def test_get_adapter_accepts_format_names() -> None:
    assert isinstance(get_adapter("eze"), EzeAdapter)
    assert isinstance(get_adapter(MetadataFormat.GALLERY_DL), GalleryDlAdapter)


def test_get_adapter_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unsupported metadata format"):
        get_adapter("comicinfo")


def test_normalize_metadata_dispatches_by_format(
    eze_content: str, gallery_dl_content: str, base_record: CanonicalRecord
) -> None:
    config = MetadataConfig()

    from_eze = normalize_metadata(
        eze_content, base_record, metadata_format=MetadataFormat.EZE, config=config
    )
    from_gallery_dl = normalize_metadata(
        gallery_dl_content, base_record, metadata_format="gallery-dl", config=config
    )

    assert from_eze.sources is not None
    assert from_eze.sources[0].url == "https://e-hentai/g/12345/abcd"
    assert from_gallery_dl.sources is not None
    assert from_gallery_dl.sources[0].url == "https://exhentai/g/67890/0f1e2d3c4b"
