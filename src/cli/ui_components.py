"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ResponseEnvelope

# Orden de presentación del cuerpo de una respuesta OK.
_RESULT_FIELDS = ("domain", "jobId", "companyId", "reqId", "csrfToken", "cookie")


def build_result_table(envelope: ResponseEnvelope) -> Table:
    """Tabla Rich con el cuerpo de una respuesta OK."""

    table = Table(title=f"Requisition lookup (HTTP {envelope.status_code})")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key in _RESULT_FIELDS:
        value = envelope.body.get(key)
        table.add_row(key, "-" if value is None else str(value))
    cache_control = envelope.headers.get("Cache-Control")
    if cache_control:
        table.add_row("Cache-Control", cache_control, style="dim")
    return table


def build_error_panel(envelope: ResponseEnvelope) -> Panel:
    body = Text()
    for message in envelope.body.get("errors", []):
        body.append(f"- {message}\n")
    title = Text(f"HTTP {envelope.status_code}", style="bold red")
    return Panel(body, title=title, border_style="red")


def print_envelope(console: Console, envelope: ResponseEnvelope) -> None:
    if envelope.ok:
        console.print(build_result_table(envelope))
    else:
        console.print(build_error_panel(envelope))
