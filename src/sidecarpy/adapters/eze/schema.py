"""Pydantic models describing Eze ``info.yaml`` sidecars."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EzeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)


class EzeSource(EzeBaseModel):
    site: str
    gid: int = Field(ge=0)
    token: str


class EzeMetadata(EzeBaseModel):
    title: str
    tags: dict[str, list[str]] | None = None
    language: str | None = None
    upload_date: list[int] | None = None
    source: EzeSource | None = None
