"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar el banner y la tabla de resultados en varios comandos.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def format_value(value: object) -> str:
    """Render a parsed value the way the `ask` commands print it."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida del modo demo."""

    title = Text("input-helper", style="bold cyan")
    subtitle = Text("Validated console input • retry until valid", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_results_table(rows: Iterable[tuple[str, object]]) -> Table:
    """Tabla con lo que devolvió cada operación del demo."""

    table = Table(title="Values read")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Type", style="dim")
    table.add_column("Value", style="green")
    for operation, value in rows:
        table.add_row(operation, type(value).__name__, format_value(value))
    return table
