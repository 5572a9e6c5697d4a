"""Synthesize canonical gallery URLs for known hosts."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final
from urllib.parse import urlsplit

from .archive import Source
from .errors import UnsupportedSourceHostError

if TYPE_CHECKING:
    from collections.abc import Mapping


class SourceHost(StrEnum):
    E_HENTAI = "e-hentai"
    EXHENTAI = "exhentai"


SOURCE_NAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        SourceHost.E_HENTAI: "E-Hentai",
        SourceHost.EXHENTAI: "ExHentai",
    }
)


def gallery_url(host: SourceHost, gallery_id: int, token: str) -> str:
    return f"https://{host}/g/{gallery_id}/{token}"


def source_name_from_url(url: str) -> str:
    host = (urlsplit(url).hostname or "").removeprefix("www.")
    for candidate in (host, host.rsplit(".", 1)[0]):
        name = SOURCE_NAMES.get(candidate)
        if name is not None:
            return name
    return host


def resolve_source(host: str, gallery_id: int, token: str) -> Source:
    """Return the canonical source entry for a gallery on an allow-listed host."""

    try:
        known_host = SourceHost(host)
    except ValueError as exc:
        raise UnsupportedSourceHostError(host) from exc

    url = gallery_url(known_host, gallery_id, token)
    return Source(name=source_name_from_url(url), url=url)
