from __future__ import annotations

from pathlib import Path

import pytest

from sidecarpy.config import MetadataConfig
from sidecarpy.domain.archive import CanonicalRecord

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def eze_content() -> str:
    return (DATA_DIR / "eze" / "info.yaml").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def gallery_dl_content() -> str:
    return (DATA_DIR / "gallery_dl" / "info.json").read_text(encoding="utf-8")


@pytest.fixture
def base_record() -> CanonicalRecord:
    return CanonicalRecord(title="untitled archive")


@pytest.fixture
def plain_config() -> MetadataConfig:
    return MetadataConfig()


@pytest.fixture
def capitalizing_config() -> MetadataConfig:
    return MetadataConfig(capitalize_tags=True)
