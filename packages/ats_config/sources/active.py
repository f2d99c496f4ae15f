from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from ats_config.schema import ValidationResult

from .catalog import ConfigSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedConfig:
    source: ConfigSource
    result: ValidationResult
    loaded_at: datetime


class ActiveConfig:
    """The config currently backing the form; each load replaces it outright."""

    def __init__(self) -> None:
        self._current: LoadedConfig | None = None

    @property
    def current(self) -> LoadedConfig | None:
        return self._current

    def replace(self, source: ConfigSource, result: ValidationResult) -> LoadedConfig:
        loaded = LoadedConfig(source=source, result=result, loaded_at=datetime.now(timezone.utc))
        self._current = loaded
        logger.info(
            "active config replaced",
            extra={"source_kind": source.kind, "location": source.location, "valid": result.ok},
        )
        return loaded

    def clear(self) -> None:
        self._current = None


__all__ = ["ActiveConfig", "LoadedConfig"]
