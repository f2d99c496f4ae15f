from __future__ import annotations

from typing import Any

from ats_config.submission import AtsCandidate, AtsCompany, PartnerResult
from pydantic import BaseModel, ConfigDict, Field, model_validator


class LoadConfigPayload(BaseModel):
    sample: str | None = None
    url: str | None = None

    @model_validator(mode="after")
    def require_one_source(self) -> LoadConfigPayload:
        if (self.sample is None) == (self.url is None):
            raise ValueError("provide exactly one of sample or url")
        return self


class FormValuesPayload(BaseModel):
    values: dict[str, Any] = Field(default_factory=dict)


class SubmitPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company: AtsCompany
    candidate: AtsCandidate
    partner_result: PartnerResult = Field(alias="partner-result")
    values: dict[str, Any] = Field(default_factory=dict)


class ErrorDetail(BaseModel):
    location: str | None = None
    message: str
    field_id: str | None = None


__all__ = ["ErrorDetail", "FormValuesPayload", "LoadConfigPayload", "SubmitPayload"]
