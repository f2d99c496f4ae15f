import json
from pathlib import Path
from typing import Any, Optional

import typer
from ats_config.config import PreviewSettings
from ats_config.controls import FormState, describe_document
from ats_config.logging import configure_logging
from ats_config.schema import ConfigDocument, ConfigSchemaError, ValidationResult, validate_config
from ats_config.sources import (
    SAMPLE_CONFIG_FILES,
    ConfigSource,
    ConfigSourceError,
    load_config_blocking,
    read_config_file,
    resolve_sample,
)
from pydantic import ValidationError

app = typer.Typer(add_completion=False, help="ATS config document utilities")


def _ensure_logging() -> None:
    configure_logging("ats_config_cli")


def _settings_kwargs(env_file: Optional[Path]) -> dict:
    if env_file:
        return {"_env_file": env_file}
    return {}


def _get_preview_settings(env_file: Optional[Path]) -> PreviewSettings:
    return PreviewSettings(**_settings_kwargs(env_file))


def _error_payload(error: ConfigSchemaError) -> dict[str, Any]:
    return {
        "kind": error.kind,
        "message": str(error),
        "errors": [
            {"location": issue.location, "message": issue.message, "field_id": issue.field_id}
            for issue in error.issues
        ],
    }


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


def _read_result(path: Path) -> ValidationResult:
    try:
        raw = read_config_file(path)
    except ConfigSourceError as exc:
        raise _fail(str(exc)) from exc
    return validate_config(raw)


def _accepted(result: ValidationResult) -> ConfigDocument:
    if result.error is not None:
        typer.echo(json.dumps(_error_payload(result.error), indent=2), err=True)
        raise typer.Exit(code=1)
    return result.unwrap()


def _report(result: ValidationResult) -> dict[str, Any]:
    document = _accepted(result)
    controls = describe_document(document)
    form = FormState.from_descriptors(controls)
    return {
        "controls": [control.as_dict() for control in controls],
        "values": form.webhook_data(),
    }


@app.callback()
def main(
    ctx: typer.Context,
    env_file: Optional[Path] = typer.Option(None, help="Optional .env file to load before commands run"),
) -> None:
    ctx.ensure_object(dict)
    ctx.obj["env_file"] = env_file


@app.command()
def samples() -> None:
    """List the published example config documents."""
    for name in SAMPLE_CONFIG_FILES:
        typer.echo(name)


@app.command()
def validate(path: Path = typer.Argument(..., help="Config document to check")) -> None:
    _ensure_logging()
    document = _accepted(_read_result(path))
    typer.echo(f"ok: {len(document.fields)} fields")


@app.command()
def describe(path: Path = typer.Argument(..., help="Config document to describe")) -> None:
    """Print the controls a config document renders to, plus initial form values."""
    _ensure_logging()
    typer.echo(json.dumps(_report(_read_result(path)), indent=2))


@app.command()
def fetch(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Sample config filename, see `samples`"),
    url: Optional[str] = typer.Option(None, "--url", help="Fetch a config document from this URL instead"),
) -> None:
    _ensure_logging()
    if (name is None) == (url is None):
        raise _fail("pass exactly one of NAME or --url")
    try:
        settings = _get_preview_settings(ctx.obj.get("env_file"))
    except ValidationError as exc:
        raise _fail(str(exc)) from exc
    try:
        source = resolve_sample(name, settings) if name is not None else ConfigSource(kind="url", location=url)
        result = load_config_blocking(source, timeout=settings.request_timeout)
    except ConfigSourceError as exc:
        raise _fail(f"fetch failed: {exc}") from exc
    typer.echo(json.dumps(_report(result), indent=2))


__all__ = [
    "app",
    "describe",
    "fetch",
    "main",
    "samples",
    "validate",
    "_get_preview_settings",
]
