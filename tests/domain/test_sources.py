from __future__ import annotations

import pytest

from sidecarpy.domain.archive import Source
from sidecarpy.domain.errors import UnsupportedSourceHostError
from sidecarpy.domain.sources import resolve_source, source_name_from_url


def test_resolve_known_host() -> None:
    assert resolve_source("e-hentai", 12345, "abcd") == Source(
        name="E-Hentai", url="https://e-hentai/g/12345/abcd"
    )


def test_resolve_exhentai() -> None:
    source = resolve_source("exhentai", 1, "token")

    assert source.url == "https://exhentai/g/1/token"
    assert source.name == "ExHentai"


def test_unknown_host_is_rejected() -> None:
    with pytest.raises(UnsupportedSourceHostError) as exc:
        resolve_source("unknown-site", 12345, "abcd")

    assert exc.value.host == "unknown-site"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://e-hentai.org/g/1/a", "E-Hentai"),
        ("https://exhentai.org/g/1/a", "ExHentai"),
        ("https://www.example.com/item", "example.com"),
    ],
)
def test_source_name_from_url(url: str, expected: str) -> None:
    assert source_name_from_url(url) == expected
