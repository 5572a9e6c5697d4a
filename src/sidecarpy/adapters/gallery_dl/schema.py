"""Pydantic models describing gallery-dl metadata sidecars."""

from __future__ import annotations

from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

GALLERY_DL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class GalleryDlBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)


class GalleryDlMetadata(GalleryDlBaseModel):
    title: str
    language: str | None = None
    date: str | None = None
    tags: list[str] | None = None
    category: str | None = None
    gallery_id: int | None = Field(default=None, ge=0)
    gallery_token: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _format_loaded_timestamp(cls, value: object) -> object:
        # YAML resolves unquoted timestamps to datetime objects
        if isinstance(value, datetime) and value.tzinfo is not None:
            value = value.astimezone(UTC)
        if isinstance(value, date):
            return value.strftime(GALLERY_DL_DATE_FORMAT)
        return value
