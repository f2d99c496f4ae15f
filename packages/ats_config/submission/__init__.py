from .client import SubmissionError, send_partner_event
from .payload import (
    AtsCandidate,
    AtsCompany,
    AtsJob,
    AtsPartnerEvent,
    AtsPartnerEventPayload,
    AtsRecruiter,
    AtsReferee,
    PartnerResult,
    ResultStatus,
    build_partner_event,
)

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
    "SubmissionError",
    "build_partner_event",
    "send_partner_event",
]
