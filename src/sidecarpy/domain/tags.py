"""Route raw tag tokens into canonical record fields.

Sources encode tags either as ``"namespace:name"`` strings or as a flat mapping
of group name to values, in which case the group name is the namespace. Both
shapes go through the same namespace table:

- ``language`` is dropped (the record carries language separately)
- ``artist``/``group``/``parody`` go to the dedicated record sequences
- ``male``/``female`` become tags of that category
- anything else becomes a ``misc`` tag

A namespace without a name is itself a ``misc`` tag. Order is preserved and
duplicates are kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .archive import Tag, TagCategory
from .text import capitalize_words

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class TagDestination(StrEnum):
    ARTISTS = "artists"
    CIRCLES = "circles"
    PARODIES = "parodies"
    MALE = "male"
    FEMALE = "female"
    MISC = "misc"
    DROPPED = "dropped"


NAMESPACE_RULES: Final[Mapping[str, TagDestination]] = MappingProxyType(
    {
        "language": TagDestination.DROPPED,
        "artist": TagDestination.ARTISTS,
        "group": TagDestination.CIRCLES,
        "parody": TagDestination.PARODIES,
        "male": TagDestination.MALE,
        "female": TagDestination.FEMALE,
    }
)

_TAG_CATEGORIES: Final[Mapping[TagDestination, TagCategory]] = MappingProxyType(
    {
        TagDestination.MALE: TagCategory.MALE,
        TagDestination.FEMALE: TagCategory.FEMALE,
        TagDestination.MISC: TagCategory.MISC,
    }
)


def destination_for(namespace: str) -> TagDestination:
    return NAMESPACE_RULES.get(namespace.strip().lower(), TagDestination.MISC)


@dataclass(frozen=True, slots=True)
class ClassifiedTag:
    destination: TagDestination
    name: str


@dataclass(slots=True)
class ClassifiedTags:
    """Tag values grouped by the record field they belong to."""

    artists: list[str] = field(default_factory=list[str])
    circles: list[str] = field(default_factory=list[str])
    parodies: list[str] = field(default_factory=list[str])
    tags: list[Tag] = field(default_factory=list[Tag])

    def add(self, classified: ClassifiedTag) -> None:
        destination = classified.destination
        if destination is TagDestination.DROPPED:
            return
        if destination is TagDestination.ARTISTS:
            self.artists.append(classified.name)
        elif destination is TagDestination.CIRCLES:
            self.circles.append(classified.name)
        elif destination is TagDestination.PARODIES:
            self.parodies.append(classified.name)
        else:
            self.tags.append(Tag(classified.name, _TAG_CATEGORIES[destination]))


def classify_tag(namespace: str, name: str | None, *, capitalize: bool) -> ClassifiedTag:
    """Classify a single tag given its namespace and optional name."""

    namespace = namespace.strip()
    name = name.strip() if name is not None else ""
    destination = destination_for(namespace)

    if destination is TagDestination.DROPPED:
        return ClassifiedTag(destination, name or namespace)
    if not name:
        destination, name = TagDestination.MISC, namespace
    elif not namespace:
        destination = TagDestination.MISC

    return ClassifiedTag(destination, capitalize_words(name) if capitalize else name)


def split_tag_token(token: str) -> tuple[str, str | None]:
    namespace, separator, name = token.partition(":")
    return namespace, (name if separator else None)


def classify_tag_strings(tokens: Iterable[str], *, capitalize: bool) -> ClassifiedTags:
    """Classify ``"namespace:name"`` tokens in document order."""

    result = ClassifiedTags()
    for token in tokens:
        namespace, name = split_tag_token(token)
        result.add(classify_tag(namespace, name, capitalize=capitalize))
    return result


def classify_tag_groups(
    groups: Mapping[str, Iterable[str]], *, capitalize: bool
) -> ClassifiedTags:
    """Classify a group-name to values mapping in document order."""

    result = ClassifiedTags()
    for namespace, names in groups.items():
        for name in names:
            result.add(classify_tag(namespace, name, capitalize=capitalize))
    return result
