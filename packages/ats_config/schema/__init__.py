from .fields import (
    FIELD_TYPES,
    INFO_CLASSES,
    INTERACTIVE_FIELD_TYPES,
    LABEL_FIELD_TYPES,
    LEGACY_FIELD_TYPES,
    CheckboxField,
    ConfigBody,
    ConfigDocument,
    ConfigField,
    ConfigFieldValue,
    ConfigOption,
    FieldType,
    HeaderField,
    InfoClass,
    InteractiveField,
    LabelField,
    NullTolerantModel,
    ParagraphField,
    SelectField,
    SubheaderField,
    TextField,
    drop_nulls,
)
from .validate import (
    ConfigSchemaError,
    FieldShapeError,
    SchemaIssue,
    StructuralError,
    ValidationResult,
    parse_config,
    validate_config,
)

__all__ = [
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
    "ConfigSchemaError",
    "FieldShapeError",
    "FieldType",
    "HeaderField",
    "InfoClass",
    "InteractiveField",
    "LabelField",
    "NullTolerantModel",
    "ParagraphField",
    "SchemaIssue",
    "SelectField",
    "StructuralError",
    "SubheaderField",
    "TextField",
    "ValidationResult",
    "drop_nulls",
    "parse_config",
    "validate_config",
]
