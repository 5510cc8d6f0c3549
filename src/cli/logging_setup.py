"""Logging para la CLI.

Los módulos del Core sólo crean loggers (`logging.getLogger(__name__)`); la
configuración de handlers vive aquí, en el borde, y escribe en stderr para
no mezclarse con los prompts ni con el valor leído.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Install a single RichHandler on the root logger."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
