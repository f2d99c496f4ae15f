from ats_config.config.runtime import (
    DEFAULT_SAMPLES_URL,
    PreviewSettings,
    RuntimeSettings,
    SubmissionSettings,
)

__all__ = [
    "DEFAULT_SAMPLES_URL",
    "PreviewSettings",
    "RuntimeSettings",
    "SubmissionSettings",
]
