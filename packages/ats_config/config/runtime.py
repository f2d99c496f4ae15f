from pathlib import Path
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SAMPLES_URL = "https://raw.githubusercontent.com/ref-app/refapp-api/main/config-examples/"


class RuntimeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

    @staticmethod
    def _normalize_path(value: Path | str) -> Path:
        if isinstance(value, Path):
            return value.expanduser()
        return Path(value).expanduser()

    @staticmethod
    def _validate_url(value: str, field_name: str) -> str:
        parsed = urlparse(value.strip())
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError(f"{field_name} must be an absolute http(s) URL")
        return value.strip()


class PreviewSettings(RuntimeSettings):
    samples_base_url: str = Field(default=DEFAULT_SAMPLES_URL, alias="ATS_CONFIG_SAMPLES_URL")
    samples_dir: Path | None = Field(default=None, alias="ATS_CONFIG_SAMPLES_DIR")
    request_timeout: float = Field(default=30.0, gt=0, alias="ATS_CONFIG_HTTP_TIMEOUT")

    @field_validator("samples_base_url")
    @classmethod
    def validate_samples_base_url(cls, value: str) -> str:
        url = cls._validate_url(value, "ATS_CONFIG_SAMPLES_URL")
        return url if url.endswith("/") else f"{url}/"

    @field_validator("samples_dir", mode="before")
    @classmethod
    def normalize_samples_dir(cls, value: Path | str | None) -> Path | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return cls._normalize_path(value)


class SubmissionSettings(RuntimeSettings):
    endpoint: str = Field(default="http://localhost:8120/partner-events", alias="ATS_SUBMIT_URL")
    request_timeout: float = Field(default=30.0, gt=0, alias="ATS_SUBMIT_HTTP_TIMEOUT")

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        return cls._validate_url(value, "ATS_SUBMIT_URL")


__all__ = [
    "DEFAULT_SAMPLES_URL",
    "PreviewSettings",
    "RuntimeSettings",
    "SubmissionSettings",
]
