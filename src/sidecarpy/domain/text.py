"""Text helpers shared by the metadata adapters."""

from __future__ import annotations

import re
import unicodedata
from typing import Final

_BRACKETED: Final[re.Pattern[str]] = re.compile(
    r"\[[^\[\]]*\]|\([^()]*\)|\{[^{}]*\}|【[^【】]*】"
)
_PAGE_COUNT: Final[re.Pattern[str]] = re.compile(
    r"\s*\b\d+\s*(?:p|pp|pages?)\.?\s*$", re.IGNORECASE
)
_EDGE_SEPARATORS: Final[str] = " \t-|~:"
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")
_NON_ALNUM: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Return a lowercase, ASCII-folded, dash-separated slug for ``value``."""

    decomposed = unicodedata.normalize("NFKD", value)
    ascii_only = decomposed.encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", ascii_only.lower()).strip("-")


def capitalize_words(value: str) -> str:
    """Upper-case the first letter of every word and lower-case the rest.

    A word starts after any character that is neither a letter nor an apostrophe,
    so ``"o'neil-san"`` becomes ``"O'neil-San"``.
    """

    chars: list[str] = []
    at_boundary = True
    for char in value.lower():
        if char.isalpha():
            chars.append(char.upper() if at_boundary else char)
            at_boundary = False
        else:
            chars.append(char)
            at_boundary = char != "'"
    return "".join(chars)


def title_from_filename(value: str) -> str | None:
    """Extract the leading title from an archive-style file name.

    Bracketed and parenthesized annotations (circle, artist, parody, language,
    release flags) are removed together with a trailing page-count token. Returns
    ``None`` when nothing title-like remains.
    """

    stripped = value
    while True:
        reduced = _BRACKETED.sub(" ", stripped)
        if reduced == stripped:
            break
        stripped = reduced

    stripped = _WHITESPACE.sub(" ", stripped).strip(_EDGE_SEPARATORS)
    stripped = _PAGE_COUNT.sub("", stripped).strip(_EDGE_SEPARATORS)
    return stripped or None
