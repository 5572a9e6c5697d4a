"""Errors raised while normalizing metadata sidecars."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ViolationKind(StrEnum):
    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    OUT_OF_RANGE = "out_of_range"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single field that failed validation."""

    path: str
    kind: ViolationKind
    message: str

    def __str__(self) -> str:
        return f"{self.path or '<document>'}: {self.kind} ({self.message})"


class MetadataError(Exception):
    """Base class for metadata normalization failures."""

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source


class ParseError(MetadataError):
    """Raised when a sidecar is not well-formed for its serialization format."""

    def __init__(self, *, source: str, detail: str) -> None:
        super().__init__(f"Failed to parse {source} metadata: {detail}", source=source)
        self.detail = detail


class ValidationError(MetadataError):
    """Raised when a well-formed document does not match the expected shape."""

    def __init__(self, *, source: str, violations: tuple[FieldViolation, ...]) -> None:
        listed = "; ".join(str(violation) for violation in violations)
        super().__init__(f"Invalid {source} metadata: {listed}", source=source)
        self.violations = violations

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(violation.path for violation in self.violations)


class UnsupportedSourceHostError(MetadataError):
    """Raised for a source host outside the allow-list.

    Adapters treat this as "no determinable source" rather than a failure.
    """

    def __init__(self, host: str, *, source: str = "source") -> None:
        super().__init__(f"Unsupported source host: {host!r}", source=source)
        self.host = host
