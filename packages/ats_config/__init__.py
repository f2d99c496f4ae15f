from ats_config.config import DEFAULT_SAMPLES_URL, PreviewSettings, SubmissionSettings
from ats_config.controls import (
    ControlDescriptor,
    ControlOption,
    FormState,
    FormStateError,
    UnhandledFieldTypeError,
    alert_severity,
    describe,
    describe_document,
    describe_fields,
)
from ats_config.logging import configure_logging
from ats_config.schema import (
    ConfigDocument,
    ConfigField,
    ConfigSchemaError,
    FieldShapeError,
    StructuralError,
    ValidationResult,
    drop_nulls,
    parse_config,
    validate_config,
)
from ats_config.sources import (
    SAMPLE_CONFIG_FILES,
    ActiveConfig,
    ConfigSource,
    ConfigSourceError,
    fetch_config,
    load_config,
    load_config_blocking,
    sample_url,
)
from ats_config.submission import (
    AtsPartnerEventPayload,
    SubmissionError,
    build_partner_event,
    send_partner_event,
)

__all__ = [
    "DEFAULT_SAMPLES_URL",
    "SAMPLE_CONFIG_FILES",
    "ActiveConfig",
    "AtsPartnerEventPayload",
    "ConfigDocument",
    "ConfigField",
    "ConfigSchemaError",
    "ConfigSource",
    "ConfigSourceError",
    "ControlDescriptor",
    "ControlOption",
    "FieldShapeError",
    "FormState",
    "FormStateError",
    "PreviewSettings",
    "StructuralError",
    "SubmissionError",
    "SubmissionSettings",
    "UnhandledFieldTypeError",
    "ValidationResult",
    "alert_severity",
    "build_partner_event",
    "configure_logging",
    "describe",
    "describe_document",
    "describe_fields",
    "drop_nulls",
    "fetch_config",
    "load_config",
    "load_config_blocking",
    "parse_config",
    "sample_url",
    "send_partner_event",
    "validate_config",
]
