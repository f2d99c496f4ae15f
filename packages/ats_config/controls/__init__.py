from .describe import (
    AlertSeverity,
    ControlDescriptor,
    ControlKind,
    ControlOption,
    TextLevel,
    UnhandledFieldTypeError,
    alert_severity,
    describe,
    describe_document,
    describe_fields,
)
from .form_state import FormState, FormStateError, WebhookData

__all__ = [
    "AlertSeverity",
    "ControlDescriptor",
    "ControlKind",
    "ControlOption",
    "FormState",
    "FormStateError",
    "TextLevel",
    "UnhandledFieldTypeError",
    "WebhookData",
    "alert_severity",
    "describe",
    "describe_document",
    "describe_fields",
]
