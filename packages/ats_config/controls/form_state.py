from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ats_config.schema import ConfigDocument

from .describe import ControlDescriptor, describe_document

logger = logging.getLogger(__name__)

WebhookData = dict[str, str | bool]

_VALUE_TYPES: dict[str, type] = {
    "toggle": bool,
    "text-input": str,
    "single-select": str,
}


class FormStateError(RuntimeError):
    def __init__(self, message: str, field_id: str | None = None):
        super().__init__(message)
        self.field_id = field_id


class FormState:
    """Current value of every rendered interactive control, keyed by field id."""

    def __init__(self, controls: Iterable[ControlDescriptor]):
        self._controls: dict[str, ControlDescriptor] = {}
        self._values: dict[str, str | bool] = {}
        for control in controls:
            if not control.interactive or not control.render:
                continue
            if control.field_id in self._controls:
                logger.warning("duplicate config field id, later field wins", extra={"field_id": control.field_id})
            self._controls[control.field_id] = control
            self._values[control.field_id] = control.initial_value  # type: ignore[assignment]

    @classmethod
    def from_descriptors(cls, controls: Iterable[ControlDescriptor]) -> FormState:
        return cls(controls)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> FormState:
        return cls.from_descriptors(describe_document(document))

    @property
    def values(self) -> dict[str, str | bool]:
        return dict(self._values)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._controls

    def get(self, field_id: str) -> str | bool:
        if field_id not in self._values:
            raise FormStateError(f"unknown form field {field_id!r}", field_id)
        return self._values[field_id]

    def _check(self, field_id: str, value: Any) -> None:
        control = self._controls.get(field_id)
        if control is None:
            raise FormStateError(f"unknown form field {field_id!r}", field_id)
        if control.disabled:
            raise FormStateError(f"form field {field_id!r} is disabled", field_id)
        expected = _VALUE_TYPES[control.kind]
        if not isinstance(value, expected):
            raise FormStateError(f"form field {field_id!r} expects a {expected.__name__} value", field_id)
        if control.kind == "single-select" and value and value not in {option.value for option in control.options}:
            raise FormStateError(f"{value!r} is not an option of form field {field_id!r}", field_id)

    def update(self, field_id: str, value: str | bool) -> None:
        self._check(field_id, value)
        self._values[field_id] = value

    def apply(self, values: Mapping[str, Any]) -> None:
        # all or nothing
        for field_id, value in values.items():
            self._check(field_id, value)
        self._values.update(values)

    def webhook_data(self) -> WebhookData:
        return dict(self._values)


__all__ = ["FormState", "FormStateError", "WebhookData"]
