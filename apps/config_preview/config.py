from __future__ import annotations

from dataclasses import dataclass

from ats_config.config import PreviewSettings, SubmissionSettings


@dataclass
class ConfigPreviewConfig:
    preview: PreviewSettings
    submission: SubmissionSettings


def get_config() -> ConfigPreviewConfig:
    return ConfigPreviewConfig(preview=PreviewSettings(), submission=SubmissionSettings())


__all__ = ["ConfigPreviewConfig", "get_config"]
