from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

import httpx
from ats_config.config import PreviewSettings, SubmissionSettings
from ats_config.logging import configure_logging
from ats_config.sources import ActiveConfig
from fastapi import FastAPI

from .config import ConfigPreviewConfig, get_config

_client: httpx.AsyncClient | None = None
_active_config = ActiveConfig()


@lru_cache
def _get_config() -> ConfigPreviewConfig:
    return get_config()


def get_preview_settings() -> PreviewSettings:
    return _get_config().preview


def get_submission_settings() -> SubmissionSettings:
    return _get_config().submission


def get_active_config() -> ActiveConfig:
    return _active_config


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    global _client
    configure_logging("config_preview")
    settings = get_preview_settings()
    _client = httpx.AsyncClient(timeout=settings.request_timeout)
    try:
        yield
    finally:
        if _client is not None:
            await _client.aclose()
            _client = None


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("http client not initialized")
    return _client


__all__ = [
    "get_active_config",
    "get_http_client",
    "get_preview_settings",
    "get_submission_settings",
    "lifespan",
]
