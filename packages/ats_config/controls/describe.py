import logging
from collections.abc import Callable, Iterable
from dataclasses import asdict, dataclass
from typing import Any, Literal

from ats_config.schema import (
    FIELD_TYPES,
    INFO_CLASSES,
    LABEL_FIELD_TYPES,
    CheckboxField,
    ConfigDocument,
    ConfigField,
    ConfigFieldValue,
    FieldType,
    InfoClass,
    LabelField,
    SelectField,
    TextField,
)

logger = logging.getLogger(__name__)

ControlKind = Literal["toggle", "text-input", "single-select", "display-text"]
TextLevel = Literal["heading", "subheading", "body"]
AlertSeverity = Literal["info", "warning", "error", "success"]


class UnhandledFieldTypeError(RuntimeError):
    pass


@dataclass(frozen=True)
class ControlOption:
    value: str
    label: str


@dataclass(frozen=True)
class ControlDescriptor:
    """How to render one config field, independent of any widget toolkit.

    ``render`` is False only for a select without options. Display-text
    controls prefer ``markdown`` over ``label`` when it is set, and are
    wrapped in an alert of ``severity`` when that is set.
    """

    field_id: str
    field_type: FieldType
    kind: ControlKind
    label: str
    render: bool = True
    initial_value: ConfigFieldValue | None = None
    placeholder: str | None = None
    options: tuple[ControlOption, ...] = ()
    disabled: bool = False
    text_level: TextLevel | None = None
    markdown: str | None = None
    severity: AlertSeverity | None = None

    @property
    def interactive(self) -> bool:
        return self.kind != "display-text"

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


_SEVERITY_BY_CLASS: dict[str, AlertSeverity | None] = {
    "default": None,
    "info": "info",
    "warning": "warning",
    "error": "error",
    "success": "success",
}

_TEXT_LEVELS: dict[str, TextLevel] = {
    "header": "heading",
    "subheader": "subheading",
    "paragraph": "body",
}


def alert_severity(label_class: InfoClass | None) -> AlertSeverity | None:
    if label_class is None:
        return None
    return _SEVERITY_BY_CLASS[label_class]


def _describe_checkbox(field: CheckboxField) -> ControlDescriptor:
    return ControlDescriptor(
        field_id=field.id,
        field_type=field.type,
        kind="toggle",
        label=field.label,
        initial_value=field.value if isinstance(field.value, bool) else False,
        disabled=field.disabled,
    )


def _describe_text(field: TextField) -> ControlDescriptor:
    return ControlDescriptor(
        field_id=field.id,
        field_type=field.type,
        kind="text-input",
        label=field.label,
        initial_value=field.value if isinstance(field.value, str) else "",
        placeholder=field.placeholder,
        disabled=field.disabled,
    )


def _describe_select(field: SelectField) -> ControlDescriptor:
    options = tuple(ControlOption(value=option.id, label=option.label) for option in field.options or ())
    if not options:
        logger.debug("select field has no options, skipping render", extra={"field_id": field.id})
        return ControlDescriptor(
            field_id=field.id,
            field_type=field.type,
            kind="single-select",
            label=field.label,
            render=False,
            initial_value="",
            disabled=field.disabled,
        )
    known = {option.value for option in options}
    value = field.value if isinstance(field.value, str) and field.value in known else ""
    return ControlDescriptor(
        field_id=field.id,
        field_type=field.type,
        kind="single-select",
        label=field.label,
        initial_value=value,
        options=options,
        disabled=field.disabled,
    )


def _describe_label(field: LabelField) -> ControlDescriptor:
    return ControlDescriptor(
        field_id=field.id,
        field_type=field.type,
        kind="display-text",
        label=field.label,
        text_level=_TEXT_LEVELS[field.type],
        markdown=field.label_markdown or None,
        severity=alert_severity(field.label_class),
    )


_DESCRIBERS: dict[str, Callable[[Any], ControlDescriptor]] = {
    "checkbox": _describe_checkbox,
    "text": _describe_text,
    "select": _describe_select,
    "header": _describe_label,
    "subheader": _describe_label,
    "paragraph": _describe_label,
}


def _check_exhaustive() -> None:
    missing = [tag for tag in FIELD_TYPES if tag not in _DESCRIBERS]
    if missing:
        raise RuntimeError(f"no control mapping for field types: {', '.join(missing)}")
    levels = [tag for tag in LABEL_FIELD_TYPES if tag not in _TEXT_LEVELS]
    if levels:
        raise RuntimeError(f"no text level for label field types: {', '.join(levels)}")
    classes = [tag for tag in INFO_CLASSES if tag not in _SEVERITY_BY_CLASS]
    if classes:
        raise RuntimeError(f"no alert severity for label classes: {', '.join(classes)}")


_check_exhaustive()


def describe(field: ConfigField) -> ControlDescriptor:
    handler = _DESCRIBERS.get(field.type)
    if handler is None:
        raise UnhandledFieldTypeError(f"no control mapping for field type {field.type!r}")
    return handler(field)


def describe_fields(fields: Iterable[ConfigField]) -> list[ControlDescriptor]:
    return [describe(field) for field in fields]


def describe_document(document: ConfigDocument) -> list[ControlDescriptor]:
    return describe_fields(document.fields)


__all__ = [
    "AlertSeverity",
    "ControlDescriptor",
    "ControlKind",
    "ControlOption",
    "TextLevel",
    "UnhandledFieldTypeError",
    "alert_severity",
    "describe",
    "describe_document",
    "describe_fields",
]
