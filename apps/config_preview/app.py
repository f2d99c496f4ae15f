from __future__ import annotations

import logging
import uuid
from typing import Any

import httpx
from ats_config.config import PreviewSettings, SubmissionSettings
from ats_config.controls import FormState, FormStateError, describe_document
from ats_config.logging import request_context
from ats_config.schema import ConfigDocument, ConfigSchemaError, validate_config
from ats_config.sources import (
    SAMPLE_CONFIG_FILES,
    ActiveConfig,
    ConfigSource,
    ConfigSourceError,
    LoadedConfig,
    load_config,
    resolve_sample,
)
from ats_config.submission import SubmissionError, build_partner_event, send_partner_event
from fastapi import Body, Depends, FastAPI, HTTPException, Request, status

from .dependencies import (
    get_active_config,
    get_http_client,
    get_preview_settings,
    get_submission_settings,
    lifespan,
)
from .models import ErrorDetail, FormValuesPayload, LoadConfigPayload, SubmitPayload

logger = logging.getLogger(__name__)
app = FastAPI(
    title="ATS Config Preview",
    version="0.1.0",
    description="Validates ATS config documents and previews the form they describe.",
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    with request_context(request_id):
        response = await call_next(request)
    response.headers["x-request-id"] = request_id
    return response


def _error_details(error: ConfigSchemaError) -> list[dict[str, Any]]:
    return [
        ErrorDetail(location=issue.location, message=issue.message, field_id=issue.field_id).model_dump()
        for issue in error.issues
    ]


def _invalid(error: ConfigSchemaError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": str(error), "kind": error.kind, "errors": _error_details(error)},
    )


def _form_error(exc: FormStateError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": str(exc), "errors": [ErrorDetail(message=str(exc), field_id=exc.field_id).model_dump()]},
    )


def _preview(document: ConfigDocument) -> dict[str, Any]:
    controls = describe_document(document)
    form = FormState.from_descriptors(controls)
    return {
        "status": "ok",
        "controls": [control.as_dict() for control in controls],
        "values": form.webhook_data(),
    }


def _source_payload(source: ConfigSource) -> dict[str, Any]:
    return {"kind": source.kind, "location": source.location, "sample": source.sample}


def _snapshot(loaded: LoadedConfig) -> dict[str, Any]:
    result = loaded.result
    if result.error is not None:
        body: dict[str, Any] = {
            "status": "invalid",
            "error": {"message": str(result.error), "kind": result.error.kind, "errors": _error_details(result.error)},
        }
    else:
        body = _preview(result.unwrap())
    body["source"] = _source_payload(loaded.source)
    body["loaded_at"] = loaded.loaded_at.isoformat()
    return body


def _held_document(active: ActiveConfig) -> ConfigDocument:
    loaded = active.current
    if loaded is None or not loaded.result.ok:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail={"message": "no valid config document loaded"})
    return loaded.result.unwrap()


def _filled_form(document: ConfigDocument, values: dict[str, Any]) -> FormState:
    form = FormState.from_document(document)
    try:
        form.apply(values)
    except FormStateError as exc:
        raise _form_error(exc) from exc
    return form


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/samples")
async def list_samples(settings: PreviewSettings = Depends(get_preview_settings)) -> dict[str, Any]:
    return {
        "samples": list(SAMPLE_CONFIG_FILES),
        "base_url": settings.samples_base_url,
    }


@app.post("/api/config/describe")
async def describe_config(raw: Any = Body(...)) -> dict[str, Any]:
    result = validate_config(raw)
    if result.error is not None:
        raise _invalid(result.error)
    return _preview(result.unwrap())


@app.post("/api/config/load")
async def load_active_config(
    payload: LoadConfigPayload = Body(...),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: PreviewSettings = Depends(get_preview_settings),
    active: ActiveConfig = Depends(get_active_config),
) -> dict[str, Any]:
    if payload.sample is not None:
        try:
            source = resolve_sample(payload.sample, settings)
        except ConfigSourceError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"message": str(exc)}) from exc
    else:
        source = ConfigSource(kind="url", location=payload.url or "")
    try:
        result = await load_config(source, client)
    except ConfigSourceError as exc:
        logger.warning("config source failed", extra={"location": source.location, "reason": str(exc)})
        raise HTTPException(status_code=status.HTTP_424_FAILED_DEPENDENCY, detail={"message": str(exc)}) from exc
    loaded = active.replace(source, result)
    if result.error is not None:
        raise _invalid(result.error)
    return _snapshot(loaded)


@app.get("/api/config")
async def read_active_config(active: ActiveConfig = Depends(get_active_config)) -> dict[str, Any]:
    loaded = active.current
    if loaded is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={"message": "no config document loaded"})
    return _snapshot(loaded)


@app.post("/api/form")
async def fill_form(
    payload: FormValuesPayload = Body(...),
    active: ActiveConfig = Depends(get_active_config),
) -> dict[str, Any]:
    form = _filled_form(_held_document(active), payload.values)
    return {"webhook-data": form.webhook_data()}


@app.post("/api/submit")
async def submit_partner_event(
    payload: SubmitPayload = Body(...),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: SubmissionSettings = Depends(get_submission_settings),
    active: ActiveConfig = Depends(get_active_config),
) -> dict[str, Any]:
    form = _filled_form(_held_document(active), payload.values)
    event = build_partner_event(payload.company, payload.candidate, payload.partner_result, form)
    try:
        response = await send_partner_event(client, settings.endpoint, event, timeout=settings.request_timeout)
    except SubmissionError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": str(exc), "status_code": exc.status_code},
        ) from exc
    return {"status": "submitted", "payload": event.to_wire(), "response": response}


__all__ = ["app"]
