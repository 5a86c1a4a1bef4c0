"""Command-line entry point: inspect, ingest and store pipeline configurations."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from .engine import (
    JsonFileConfigStore,
    SpecLoader,
    find_legacy_marker,
    get_pipeline,
    ingest_config,
    is_legacy_shape,
    pipeline_names,
    resolve_defaults,
    split_envelope,
    visible_steps,
)
from .engine.versioning import export_config
from .errors import PipelineWizardError
from .logging_config import configure_logging
from .settings import load_settings

logger = logging.getLogger(__name__)

app = typer.Typer(help="Versioned configuration wizard for preset, workflow and website pipelines.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level")):
    settings = load_settings()
    configure_logging(settings.log_level, verbose or settings.verbose)


def _read_json(path: Path) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        typer.echo(f"{path} is not valid JSON: {exc}", err=True)
        raise typer.Exit(code=1)


def _pipeline_or_exit(name: str):
    try:
        return get_pipeline(name)
    except PipelineWizardError as exc:
        typer.echo(f"{exc} (known: {', '.join(pipeline_names())})", err=True)
        raise typer.Exit(code=2)


@app.command()
def defaults(pipeline: str):
    """Print the default configuration of a pipeline."""
    resolved = _pipeline_or_exit(pipeline)
    typer.echo(export_config(resolve_defaults(resolved.schema)))


@app.command()
def ingest(
    pipeline: str,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Stored or exported JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write result here instead of stdout"),
):
    """Migrate or sanitize a JSON file into a current configuration."""
    resolved = _pipeline_or_exit(pipeline)
    raw = _read_json(path)

    try:
        config = ingest_config(raw, resolved)
    except PipelineWizardError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    text = export_config(config)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding='utf-8')
        typer.echo(f"Wrote {output}")


@app.command()
def detect(
    pipeline: str,
    path: Path = typer.Argument(..., exists=True, dir_okay=False),
):
    """Report whether a JSON file has a legacy or current shape."""
    resolved = _pipeline_or_exit(pipeline)
    raw = _read_json(path)
    if not isinstance(raw, dict):
        typer.echo("not a JSON object")
        raise typer.Exit(code=1)

    tag, body = split_envelope(raw)
    if is_legacy_shape(body, resolved.legacy_markers, tag):
        marker = find_legacy_marker(body, resolved.legacy_markers)
        reason = f"marker {marker.field!r}" if marker else f"version {tag.version}"
        typer.echo(f"legacy ({reason})")
    else:
        typer.echo("current")


@app.command()
def steps(
    pipeline: str,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration to evaluate visibility against"),
):
    """List the wizard steps that are visible for a configuration."""
    resolved = _pipeline_or_exit(pipeline)
    settings = load_settings()
    spec = SpecLoader(settings.spec_path).load_pipeline_spec(resolved.name)

    current = ingest_config(_read_json(config), resolved) if config else resolve_defaults(resolved.schema)
    visible = visible_steps(spec, current)

    for step in spec.steps:
        marker = " " if step.number in visible else "-"
        typer.echo(f"{marker} {step.number:>2}  {step.label}")


@app.command()
def save(
    pipeline: str,
    path: Path = typer.Argument(..., exists=True, dir_okay=False),
    existing_id: Optional[str] = typer.Option(None, "--id", help="Update this stored configuration"),
):
    """Validate a configuration and write it to the file store."""
    resolved = _pipeline_or_exit(pipeline)
    settings = load_settings()
    store = JsonFileConfigStore(resolved, settings.store_dir, version=settings.schema_version)

    result = store.save(existing_id, _read_json(path))
    if result.error:
        typer.echo(result.error, err=True)
        raise typer.Exit(code=1)
    typer.echo(result.id)


if __name__ == "__main__":
    app()
