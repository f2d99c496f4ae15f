import logging
from typing import Annotated, Any, ClassVar, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

logger = logging.getLogger(__name__)

FieldType = Literal["select", "checkbox", "text", "header", "subheader", "paragraph"]
InteractiveFieldType = Literal["select", "checkbox", "text"]
LabelFieldType = Literal["header", "subheader", "paragraph"]
InfoClass = Literal["info", "warning", "error", "success", "default"]
ConfigFieldValue = str | bool | int | float

FIELD_TYPES: tuple[str, ...] = get_args(FieldType)
INTERACTIVE_FIELD_TYPES: tuple[str, ...] = get_args(InteractiveFieldType)
LABEL_FIELD_TYPES: tuple[str, ...] = get_args(LabelFieldType)
INFO_CLASSES: tuple[str, ...] = get_args(InfoClass)

# Field types older producers may still emit; rejected with a dedicated message.
LEGACY_FIELD_TYPES: tuple[str, ...] = ("hidden",)

_INFO_CLASS_ALIASES = {"warn": "warning", "danger": "error"}


def drop_nulls(data: Any) -> Any:
    """Treat ``key: null`` exactly like a missing key.

    Some producers cannot omit keys when serializing, so every schema object
    runs its raw input through this before any attribute is validated.
    """
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class NullTolerantModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_means_absent(cls, data: Any) -> Any:
        return drop_nulls(data)


def _field_tag(model: type[BaseModel]) -> str:
    return get_args(model.model_fields["type"].annotation)[0]


class ConfigOption(NullTolerantModel):
    id: str
    label: str


class _FieldBase(NullTolerantModel):
    id: str = Field(min_length=1)
    label: str


class _InteractiveField(_FieldBase):
    value_type: ClassVar[type] = str

    value: ConfigFieldValue | None = None
    disabled: bool = False

    @field_validator("value", mode="before")
    @classmethod
    def _drop_mismatched_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or isinstance(value, cls.value_type):
            return value
        logger.debug(
            "ignoring config field value of unexpected type",
            extra={
                "field_id": info.data.get("id"),
                "field_type": _field_tag(cls),
                "value_type": type(value).__name__,
            },
        )
        return None

    @field_validator("disabled", mode="before")
    @classmethod
    def _drop_mismatched_disabled(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, bool):
            return value
        logger.debug(
            "ignoring non-boolean disabled flag",
            extra={"field_id": info.data.get("id"), "value_type": type(value).__name__},
        )
        return False


class SelectField(_InteractiveField):
    type: Literal["select"]
    value: str | None = None
    options: tuple[ConfigOption, ...] | None = None


class CheckboxField(_InteractiveField):
    value_type: ClassVar[type] = bool

    type: Literal["checkbox"]
    value: bool | None = None


class TextField(_InteractiveField):
    type: Literal["text"]
    value: str | None = None
    placeholder: str | None = None


class _LabelField(_FieldBase):
    label_markdown: str | None = Field(default=None, alias="label-markdown")
    # Pre-rendered form of label-markdown; carried for completeness, never rendered.
    label_html: str | None = Field(default=None, alias="label-html")
    label_class: InfoClass | None = Field(default=None, alias="label-class")

    @field_validator("label_class", mode="before")
    @classmethod
    def _normalize_label_class(cls, value: Any, info: ValidationInfo) -> Any:
        tag = value.strip().lower() if isinstance(value, str) else value
        tag = _INFO_CLASS_ALIASES.get(tag, tag) if isinstance(tag, str) else tag
        if tag in INFO_CLASSES:
            return tag
        logger.debug(
            "unrecognized label-class, using default",
            extra={"field_id": info.data.get("id"), "label_class": repr(value)},
        )
        return "default"


class HeaderField(_LabelField):
    type: Literal["header"]


class SubheaderField(_LabelField):
    type: Literal["subheader"]


class ParagraphField(_LabelField):
    type: Literal["paragraph"]


ConfigField = Annotated[
    SelectField | CheckboxField | TextField | HeaderField | SubheaderField | ParagraphField,
    Field(discriminator="type"),
]
InteractiveField = SelectField | CheckboxField | TextField
LabelField = HeaderField | SubheaderField | ParagraphField


class ConfigBody(NullTolerantModel):
    fields: tuple[ConfigField, ...]


class ConfigDocument(NullTolerantModel):
    config: ConfigBody

    @property
    def fields(self) -> tuple[ConfigField, ...]:
        return self.config.fields

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


FIELD_MODELS: dict[str, type[_FieldBase]] = {_field_tag(model): model for model in get_args(get_args(ConfigField)[0])}


def _check_field_models() -> None:
    if set(FIELD_MODELS) != set(FIELD_TYPES):
        missing = sorted(set(FIELD_TYPES) - set(FIELD_MODELS))
        extra = sorted(set(FIELD_MODELS) - set(FIELD_TYPES))
        raise RuntimeError(f"config field union out of sync with FieldType (missing={missing}, extra={extra})")
    if set(INTERACTIVE_FIELD_TYPES) | set(LABEL_FIELD_TYPES) != set(FIELD_TYPES):
        raise RuntimeError("every field type must be either interactive or a label")
    for tag in INTERACTIVE_FIELD_TYPES:
        if not issubclass(FIELD_MODELS[tag], _InteractiveField):
            raise RuntimeError(f"field type {tag!r} must be an interactive field")
    for tag in LABEL_FIELD_TYPES:
        if not issubclass(FIELD_MODELS[tag], _LabelField):
            raise RuntimeError(f"field type {tag!r} must be a label field")


_check_field_models()


__all__ = [
    "FIELD_MODELS",
    "FIELD_TYPES",
    "INFO_CLASSES",
    "INTERACTIVE_FIELD_TYPES",
    "LABEL_FIELD_TYPES",
    "LEGACY_FIELD_TYPES",
    "CheckboxField",
    "ConfigBody",
    "ConfigDocument",
    "ConfigField",
    "ConfigFieldValue",
    "ConfigOption",
    "FieldType",
    "HeaderField",
    "InfoClass",
    "InteractiveField",
    "InteractiveFieldType",
    "LabelField",
    "LabelFieldType",
    "NullTolerantModel",
    "ParagraphField",
    "SelectField",
    "SubheaderField",
    "TextField",
    "drop_nulls",
]
