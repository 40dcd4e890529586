"""CLI (Typer + Rich).

Comandos:
- `resolve`: ejecuta el mismo pipeline que el handler Lambda.
- `doctor`: diagnóstico de configuración y de una instancia RMK.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cli import doctor
from cli.ui_components import print_envelope
from core.config import AppSettings
from core.services.reqid_pipeline import resolve_job

app = typer.Typer(
    no_args_is_help=True,
    help="Resolve RMK job ids into requisition ids.",
)
app.command(name="doctor", help="Environment diagnostics and configuration checks.")(doctor.run)

logger = logging.getLogger(__name__)

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    try:
        level = AppSettings().log_level
        config_error = None
    except ValidationError as exc:
        level, config_error = "INFO", exc
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )
    if config_error is not None:
        logger.warning("invalid configuration, logging at %s: %s", level, config_error)


@app.command()
def resolve(
    domain: str = typer.Option(..., "--domain", "-d", help="Hostname of the RMK instance."),
    job_id: str = typer.Option(..., "--job-id", "-j", help="Numeric job id."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON body."),
) -> None:
    """Resolve JOB_ID on DOMAIN into a requisition id."""

    envelope = asyncio.run(resolve_job({"domain": domain, "jobId": job_id}))

    if as_json:
        typer.echo(envelope.body_json())
    else:
        print_envelope(_console, envelope)

    if not envelope.ok:
        raise typer.Exit(code=1)


def run() -> None:
    app()
