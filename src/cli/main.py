"""Typer application for person-records."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.text_exporter import export_persons_text, print_person
from cli.ui_components import build_persons_table, print_banner
from core.config import AppSettings
from core.domain.errors import ConstructionError
from core.domain.models import Gender, PersonRecord
from core.logging_config import setup_logging
from core.services.roster import run_demo

app = typer.Typer(
    no_args_is_help=True,
    help="Store a few person records and print them to the console and to a file.",
)

_err_console = Console(stderr=True)


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (overrides PERSON_RECORDS_LOG_LEVEL)."
    ),
    log_json: Optional[bool] = typer.Option(
        None, "--log-json/--no-log-json", help="Emit logs as JSON lines."
    ),
) -> None:
    """Load settings and configure logging for every command."""

    overrides: dict[str, object] = {}
    if log_level is not None:
        overrides["log_level"] = log_level
    if log_json is not None:
        overrides["log_json"] = log_json

    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    setup_logging(settings.log_level, json_logs=settings.log_json)
    ctx.obj = settings


@app.command()
def demo(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Text file to write the records to (truncated)."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print record blocks to stdout."),
    summary: bool = typer.Option(False, "--summary", help="Show a summary table on stderr."),
) -> None:
    """Print the three demo records to the console and to a file."""

    settings = _settings(ctx)
    output_path = output or settings.output_path
    echo = settings.echo_console and not quiet

    try:
        result = run_demo(output_path=output_path, echo_console=echo)
    except ConstructionError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if summary:
        print_banner(_err_console)
        _err_console.print(build_persons_table(result.records))
        _err_console.print(f"[green]Written to:[/green] {output_path}")


@app.command()
def show(
    name: str = typer.Option(..., "--name", help="Full name."),
    age: int = typer.Option(..., "--age", help="Age in years."),
    address: str = typer.Option("", "--address", help="Home address."),
    occupation: str = typer.Option("", "--occupation", help="Occupation."),
    gender: str = typer.Option(
        Gender.UNSPECIFIED.value,
        "--gender",
        help="male, female, other or unspecified; anything else is unspecified.",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Also write the record to this file (truncated)."
    ),
) -> None:
    """Print a single record built from the given fields."""

    record = PersonRecord(
        name=name,
        age=age,
        address=address,
        occupation=occupation,
        gender=gender,
    )
    print_person(record)

    if output is not None:
        export_persons_text(persons=[record], output_path=output)


def run() -> None:
    app()
