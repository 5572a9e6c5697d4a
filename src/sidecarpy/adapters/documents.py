"""Parse sidecar text and validate it against a per-source pydantic model."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final, TypeVar

import pydantic
import yaml

from sidecarpy.domain.errors import FieldViolation, ParseError, ValidationError, ViolationKind

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

log = getLogger(__name__)

TModel = TypeVar("TModel", bound=pydantic.BaseModel)

_OUT_OF_RANGE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
        "too_short",
        "too_long",
    }
)


def parse_document(content: str, *, source: str) -> object:
    """Deserialize YAML (or JSON, a YAML subset) into plain Python objects."""

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ParseError(source=source, detail=_describe_yaml_error(exc)) from exc


def validate_document(
    document: object, model: type[TModel], *, source: str
) -> TModel:
    """Validate ``document`` as ``model``, collecting every violated field."""

    try:
        return model.model_validate(document)
    except pydantic.ValidationError as exc:
        violations = tuple(_violation_from_error(error) for error in exc.errors())
        raise ValidationError(source=source, violations=violations) from exc


def load_document(
    content: str, model: type[TModel], *, source: str
) -> TModel:
    return validate_document(parse_document(content, source=source), model, source=source)


def _violation_from_error(error: ErrorDetails) -> FieldViolation:
    path = ".".join(str(part) for part in error["loc"])
    return FieldViolation(path=path, kind=_violation_kind(error["type"]), message=error["msg"])


def _violation_kind(error_type: str) -> ViolationKind:
    if error_type == "missing":
        return ViolationKind.MISSING
    if error_type in _OUT_OF_RANGE_TYPES:
        return ViolationKind.OUT_OF_RANGE
    if error_type.endswith("_type") or error_type.endswith("_parsing"):
        return ViolationKind.WRONG_TYPE
    return ViolationKind.INVALID


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    if isinstance(exc, yaml.MarkedYAMLError) and exc.problem_mark is not None:
        mark = exc.problem_mark
        problem = exc.problem or "syntax error"
        return f"line {mark.line + 1}, column {mark.column + 1}: {problem}"
    return str(exc)
