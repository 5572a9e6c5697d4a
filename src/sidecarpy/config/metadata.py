"""Metadata normalization settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag

CAPITALIZE_TAGS_ENV = "SIDECARPY_CAPITALIZE_TAGS"
PARSE_FILENAME_AS_TITLE_ENV = "SIDECARPY_PARSE_FILENAME_AS_TITLE"


@dataclass(frozen=True, slots=True, kw_only=True)
class MetadataConfig:
    """Policies applied by every metadata adapter invocation."""

    capitalize_tags: bool = False
    parse_filename_as_title: bool = False


def get_metadata_config() -> MetadataConfig:
    return MetadataConfig(
        capitalize_tags=env_flag(CAPITALIZE_TAGS_ENV),
        parse_filename_as_title=env_flag(PARSE_FILENAME_AS_TITLE_ENV),
    )
