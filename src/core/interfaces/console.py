"""Contrato de consola.

Por qué Protocol:
- Los bucles de lectura sólo necesitan tres cosas: mostrar un prompt, leer
  una línea y mostrar un diagnóstico.
- Permite pasar un doble de pruebas (o cualquier otra consola) sin herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsoleHandle(Protocol):
    """Single-reader console session passed into every read operation.

    Design rules:
    - `read_line` is blocking and consumes exactly one line; the stream is
      never rewound.
    - `read_line` raises `core.errors.InputClosedError` at end of input.
    """

    def show_prompt(self, prompt: str) -> None:
        """Display `prompt` before a read attempt."""

        ...

    def read_line(self) -> str:
        """Return the next line without its line terminator."""

        ...

    def warn(self, message: str) -> None:
        """Display a diagnostic for rejected input."""

        ...
