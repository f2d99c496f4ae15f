import logging
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import ValidationError

from ats_config.schema.fields import FIELD_TYPES, LEGACY_FIELD_TYPES, ConfigDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaIssue:
    location: str
    message: str
    field_index: int | None = None
    field_id: str | None = None


class ConfigSchemaError(RuntimeError):
    kind: ClassVar[str] = "schema"

    def __init__(self, message: str, issues: list[SchemaIssue] | None = None):
        super().__init__(message)
        self.issues = list(issues or [])


class StructuralError(ConfigSchemaError):
    kind = "structural"


class FieldShapeError(ConfigSchemaError):
    kind = "field-shape"

    @property
    def field_index(self) -> int | None:
        return self.issues[0].field_index if self.issues else None

    @property
    def field_id(self) -> str | None:
        return self.issues[0].field_id if self.issues else None


@dataclass(frozen=True)
class ValidationResult:
    document: ConfigDocument | None = None
    error: ConfigSchemaError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.document is not None

    def unwrap(self) -> ConfigDocument:
        if self.error is not None:
            raise self.error
        if self.document is None:
            raise ConfigSchemaError("validation produced no document")
        return self.document


def _format_location(loc: tuple[Any, ...]) -> str:
    parts: list[str] = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        else:
            parts.append(f".{item}" if parts else str(item))
    return "".join(parts) or "<document>"


def _raw_field(raw: Any, index: int) -> dict[str, Any] | None:
    try:
        entry = raw["config"]["fields"][index]
    except (KeyError, IndexError, TypeError):
        return None
    return entry if isinstance(entry, dict) else None


def _field_issue(error: dict[str, Any], raw: Any) -> SchemaIssue:
    loc = tuple(error.get("loc", ()))
    index = loc[2]
    rest = loc[3:]
    # pydantic inserts the matched union tag into the location
    if rest and rest[0] in FIELD_TYPES:
        rest = rest[1:]
    entry = _raw_field(raw, index)
    raw_id = entry.get("id") if entry else None
    message = error.get("msg", "invalid value")
    tag = entry.get("type") if entry else None
    if error.get("type") == "union_tag_invalid" and tag in LEGACY_FIELD_TYPES:
        message = f"field type '{tag}' is no longer supported"
    return SchemaIssue(
        location=_format_location(loc[:3] + rest),
        message=message,
        field_index=index,
        field_id=raw_id if isinstance(raw_id, str) and raw_id else None,
    )


def _is_field_error(loc: tuple[Any, ...]) -> bool:
    return len(loc) >= 3 and loc[:2] == ("config", "fields") and isinstance(loc[2], int)


def _translate(exc: ValidationError, raw: Any) -> ConfigSchemaError:
    structural: list[SchemaIssue] = []
    field_level: list[SchemaIssue] = []
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        if _is_field_error(loc):
            field_level.append(_field_issue(error, raw))
        else:
            structural.append(SchemaIssue(location=_format_location(loc), message=error.get("msg", "invalid value")))
    if structural:
        first = structural[0]
        return StructuralError(f"malformed config document at {first.location}: {first.message}", structural)
    first = field_level[0]
    return FieldShapeError(f"invalid config field at {first.location}: {first.message}", field_level)


def parse_config(raw: Any) -> ConfigDocument:
    try:
        document = ConfigDocument.model_validate(raw)
    except ValidationError as exc:
        raise _translate(exc, raw) from exc
    logger.debug("config document validated", extra={"field_count": len(document.fields)})
    return document


def validate_config(raw: Any) -> ValidationResult:
    try:
        document = parse_config(raw)
    except ConfigSchemaError as exc:
        logger.info(
            "config document rejected",
            extra={"error_kind": exc.kind, "issue_count": len(exc.issues), "reason": str(exc)},
        )
        return ValidationResult(error=exc)
    return ValidationResult(document=document)


__all__ = [
    "ConfigSchemaError",
    "FieldShapeError",
    "SchemaIssue",
    "StructuralError",
    "ValidationResult",
    "parse_config",
    "validate_config",
]
