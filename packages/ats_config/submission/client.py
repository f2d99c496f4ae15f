import logging
from typing import Any

import httpx

from .payload import AtsPartnerEventPayload

logger = logging.getLogger(__name__)


class SubmissionError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


async def send_partner_event(
    client: httpx.AsyncClient,
    endpoint: str,
    payload: AtsPartnerEventPayload,
    *,
    timeout: float | None = None,
) -> dict[str, Any]:
    event = payload.partner_event
    logger.info(
        "sending partner event",
        extra={
            "partner_result_id": event.partner_result.id,
            "webhook_keys": sorted((event.webhook_data or {}).keys()),
        },
    )
    kwargs: dict[str, Any] = {"json": payload.to_wire()}
    if timeout is not None:
        kwargs["timeout"] = timeout
    try:
        response = await client.post(endpoint, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "partner event rejected",
            extra={"status_code": exc.response.status_code, "body": exc.response.text},
        )
        raise SubmissionError(
            f"partner event rejected with HTTP {exc.response.status_code}",
            status_code=exc.response.status_code,
            body=exc.response.text,
        ) from exc
    except httpx.RequestError as exc:
        raise SubmissionError(f"partner event endpoint unreachable: {exc}") from exc
    try:
        body = response.json()
    except ValueError:
        return {"body": response.text}
    return body if isinstance(body, dict) else {"body": body}


__all__ = ["SubmissionError", "send_partner_event"]
