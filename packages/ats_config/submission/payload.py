from typing import Any, Literal

from ats_config.controls import FormState
from ats_config.schema import NullTolerantModel
from pydantic import Field

ResultStatus = Literal["sending", "sent", "pending", "completed", "failed"]


class AtsCompany(NullTolerantModel):
    name: str
    # Provider key that links the company in both systems
    uuid: str
    ats_url: str | None = Field(default=None, alias="ats-url")


class AtsRecruiter(NullTolerantModel):
    name: str | None = None
    first_name: str | None = Field(default=None, alias="first-name")
    last_name: str | None = Field(default=None, alias="last-name")
    email: str
    phone: str | None = None
    ats_url: str | None = Field(default=None, alias="ats-url")


class AtsJob(NullTolerantModel):
    id: int | str
    title: str
    private_title: bool | None = Field(default=None, alias="private-title")
    client_name: str | None = Field(default=None, alias="client-name")
    recruiting_team: tuple[AtsRecruiter, ...] | None = Field(default=None, alias="recruiting-team")
    ats_url: str | None = Field(default=None, alias="ats-url")
    # Base64url encoded PKCS#1 DER public key
    ats_public_key: str | None = Field(default=None, alias="ats-public-key")
    ats_name: str | None = Field(default=None, alias="ats-name")


class AtsReferee(NullTolerantModel):
    first_name: str = Field(alias="first-name")
    last_name: str = Field(alias="last-name")
    email: str | None = None
    phone: str | None = None
    language: str | None = None


class AtsCandidate(NullTolerantModel):
    id: int | str
    first_name: str = Field(alias="first-name")
    last_name: str = Field(alias="last-name")
    email: str
    phone: str | None = None
    referees: tuple[AtsReferee, ...] | None = None
    recruiter: AtsRecruiter
    job: AtsJob
    # ISO 639-1 preferred, ISO 639-2 or a full locale such as en-GB accepted
    language: str | None = None
    ats_url: str | None = Field(default=None, alias="ats-url")


class PartnerResult(NullTolerantModel):
    id: str
    status: ResultStatus
    update_url: str | None = Field(default=None, alias="update-url")


class AtsPartnerEvent(NullTolerantModel):
    company: AtsCompany
    candidate: AtsCandidate
    partner_result: PartnerResult = Field(alias="partner-result")
    webhook_data: dict[str, str | bool] | None = Field(default=None, alias="webhook-data")


class AtsPartnerEventPayload(NullTolerantModel):
    partner_event: AtsPartnerEvent = Field(alias="partner-event")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def build_partner_event(
    company: AtsCompany,
    candidate: AtsCandidate,
    partner_result: PartnerResult,
    form: FormState,
) -> AtsPartnerEventPayload:
    event = AtsPartnerEvent(
        company=company,
        candidate=candidate,
        partner_result=partner_result,
        webhook_data=form.webhook_data(),
    )
    return AtsPartnerEventPayload(partner_event=event)


__all__ = [
    "AtsCandidate",
    "AtsCompany",
    "AtsJob",
    "AtsPartnerEvent",
    "AtsPartnerEventPayload",
    "AtsRecruiter",
    "AtsReferee",
    "PartnerResult",
    "ResultStatus",
    "build_partner_event",
]
