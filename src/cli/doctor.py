"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.rmk import fetch_session_artifacts
from core.config import AppSettings
from core.domain.errors import ReqIdError

_console = Console()


async def _check_session(domain: str, settings: AppSettings) -> tuple[bool, str]:
    """Single fetch of the error page; reports the extracted tenant or the failure."""

    try:
        artifacts = await fetch_session_artifacts(domain=domain, settings=settings)
    except ReqIdError as err:
        return False, f"{err.kind.value}: {err.message}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__
    return True, f"companyId={artifacts.company_id}"


def run(
    domain: str | None = typer.Option(
        None,
        "--domain",
        "-d",
        help="RMK instance to check (error page + session artifacts).",
    ),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    table = Table(title="rmk-reqid Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        settings = AppSettings()
    except ValidationError as exc:
        table.add_row("Config", "FAIL", f"{exc.error_count()} invalid setting(s)")
        _console.print(table)
        raise typer.Exit(code=1) from None

    # Config
    table.add_row("Cache TTL", "OK", f"public, max-age={settings.cache_ttl}")
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level)

    if domain:
        ok_session, detail_session = asyncio.run(_check_session(domain, settings))
        table.add_row("Session artifacts", "OK" if ok_session else "FAIL", detail_session)
    else:
        table.add_row("Session artifacts", "SKIPPED", "pass --domain to check an instance")

    _console.print(table)
