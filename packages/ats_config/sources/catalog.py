import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal
from urllib.parse import quote

import httpx
from ats_config.config import DEFAULT_SAMPLES_URL, PreviewSettings
from ats_config.schema import ValidationResult, validate_config

logger = logging.getLogger(__name__)

# Published under config-examples/ in the refapp-api repository.
SAMPLE_CONFIG_FILES: tuple[str, ...] = (
    "Cost Centers, existing project, English.json",
    "Cost Centers, existing project, Swedish.json",
    "Cost Centers.json",
    "External Recruitment, pre-filled values from default project template.json",
    "Project Templates, existing project, English.json",
    "Project Templates, existing project, Swedish.json",
    "Project Templates.json",
)

SourceKind = Literal["url", "file"]


class ConfigSourceError(RuntimeError):
    pass


@dataclass(frozen=True)
class ConfigSource:
    kind: SourceKind
    location: str
    sample: str | None = None


def _require_sample(name: str) -> str:
    if name not in SAMPLE_CONFIG_FILES:
        raise ConfigSourceError(f"unknown sample config {name!r}")
    return name


def sample_url(name: str, base_url: str = DEFAULT_SAMPLES_URL) -> str:
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    return f"{base}{quote(_require_sample(name), safe='')}"


def resolve_sample(name: str, settings: PreviewSettings | None = None) -> ConfigSource:
    cfg = settings or PreviewSettings()
    _require_sample(name)
    if cfg.samples_dir is not None:
        return ConfigSource(kind="file", location=str(cfg.samples_dir / name), sample=name)
    return ConfigSource(kind="url", location=sample_url(name, cfg.samples_base_url), sample=name)


def read_config_file(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigSourceError(f"unable to read config file {path}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigSourceError(f"config file {path} is not valid JSON") from exc


async def fetch_config(client: httpx.AsyncClient, url: str) -> Any:
    logger.debug("fetching config document from %s", url)
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise ConfigSourceError(f"config source returned HTTP {exc.response.status_code}") from exc
    except httpx.RequestError as exc:
        raise ConfigSourceError(f"config source unreachable: {exc}") from exc
    except httpx.InvalidURL as exc:
        raise ConfigSourceError(f"invalid config source URL: {exc}") from exc
    try:
        return response.json()
    except ValueError as exc:
        raise ConfigSourceError("config source returned invalid JSON") from exc


async def load_config(source: ConfigSource, client: httpx.AsyncClient) -> ValidationResult:
    if source.kind == "file":
        raw = read_config_file(Path(source.location))
    else:
        raw = await fetch_config(client, source.location)
    result = validate_config(raw)
    logger.info(
        "config source loaded",
        extra={"source_kind": source.kind, "location": source.location, "valid": result.ok},
    )
    return result


def load_config_blocking(source: ConfigSource, timeout: float = 30.0) -> ValidationResult:
    async def _run() -> ValidationResult:
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await load_config(source, client)

    return asyncio.run(_run())


__all__ = [
    "SAMPLE_CONFIG_FILES",
    "ConfigSource",
    "ConfigSourceError",
    "SourceKind",
    "fetch_config",
    "load_config",
    "load_config_blocking",
    "read_config_file",
    "resolve_sample",
    "sample_url",
]
