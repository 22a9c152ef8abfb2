from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Final

import typer

from argdiag.analyzers import FAMILY_ANALYZERS
from argdiag.catalog import MESSAGE_CATALOG
from argdiag.config import load_settings
from argdiag.describe import describe_request
from argdiag.errors import ConfigError, RequestDecodeError
from argdiag.logging_setup import configure_logging
from argdiag.models import DiagnosticReport

from .request_codec import load_request

app = typer.Typer(help="Per-argument diagnostics for failed standard-library calls")

_EXIT_EXPLAINED: Final[int] = 0
_EXIT_UNEXPLAINED: Final[int] = 1
_EXIT_BAD_INPUT: Final[int] = 2
_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="YAML settings file (defaults to $ARGDIAG_CONFIG)",
)


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


def _canonical_json(payload: object) -> str:
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


@app.callback()
def main(config: Path | None = _CONFIG_OPTION) -> None:
    """Configure logging for every command."""
    try:
        settings = load_settings(config)
    except ConfigError as exc:
        typer.echo(f"config error: {exc}", err=True)
        raise typer.Exit(code=_EXIT_BAD_INPUT) from exc
    configure_logging(settings)


@app.command()
def explain(
    request: Path,
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Output format: text|json",
        show_default=True,
    ),
) -> None:
    """Explain which arguments of a failed call were at fault."""
    try:
        diagnostic_request = load_request(request)
    except RequestDecodeError as exc:
        typer.echo(f"request error: {exc}", err=True)
        raise typer.Exit(code=_EXIT_BAD_INPUT) from exc

    report = describe_request(diagnostic_request)
    _emit_report(report, output_format=format)
    raise typer.Exit(code=_EXIT_EXPLAINED if report.messages else _EXIT_UNEXPLAINED)


@app.command()
def catalog(
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Output format: text|json",
        show_default=True,
    ),
) -> None:
    """List every reason tag and its message."""
    if format is OutputFormat.JSON:
        typer.echo(_canonical_json({tag.value: text for tag, text in MESSAGE_CATALOG.items()}))
        return
    for tag in sorted(MESSAGE_CATALOG, key=lambda item: item.value):
        typer.echo(f"{tag.value}: {MESSAGE_CATALOG[tag]}")


@app.command()
def operations(
    family: str | None = typer.Option(None, "--family", help="Only list this family"),
) -> None:
    """List the operations that have a dedicated analyzer."""
    if family is not None and family not in FAMILY_ANALYZERS:
        typer.echo(f"unknown family: {family}", err=True)
        raise typer.Exit(code=_EXIT_BAD_INPUT)
    families = [family] if family is not None else sorted(FAMILY_ANALYZERS)
    for family_name in families:
        table = FAMILY_ANALYZERS[family_name]
        for name, arity in table.operations():
            arity_text = "*" if arity is None else str(arity)
            typer.echo(f"{family_name}:{name}/{arity_text}")
        if table.fallback is not None:
            typer.echo(f"{family_name}:*/* (fallback)")


def _emit_report(report: DiagnosticReport, *, output_format: OutputFormat) -> None:
    if output_format is OutputFormat.JSON:
        typer.echo(_canonical_json(report.model_dump(mode="json")))
        return
    typer.echo(f"operation: {report.operation.label()}")
    typer.echo(f"cause: {report.cause}")
    if not report.messages:
        typer.echo("no argument-specific explanation")
        return
    for position, message in report.messages.items():
        typer.echo(f"argument {position}: {message}")
