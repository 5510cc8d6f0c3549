"""Adaptador de consola (Rich).

Por qué un wrapper:
- Es el único punto que toca stdin/stdout; el Core sólo ve `ConsoleHandle`.
- Se construye una vez por proceso y se pasa por referencia a cada lectura,
  así no hay un lector global escondido.
- Facilita testeo: se puede inyectar un `Console` que escribe en memoria y
  un stream de entrada con las líneas preparadas.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console

from core.config import AppSettings
from core.errors import InputClosedError


class ConsoleIO:
    """Blocking, line-oriented console session.

    Input comes from `stream` when one is given, otherwise from the
    platform line reader (`input()` through `Console.input`).
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        stream: TextIO | None = None,
        prompt_suffix: str = ": ",
        diagnostic_style: str = "yellow",
    ) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.stream = stream
        self.prompt_suffix = prompt_suffix
        self.diagnostic_style = diagnostic_style
        self._last_prompt: str | None = None

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> "ConsoleIO":
        settings = settings or AppSettings()
        return cls(
            console,
            stream=stream,
            prompt_suffix=settings.prompt_suffix,
            diagnostic_style=settings.diagnostic_style,
        )

    def show_prompt(self, prompt: str) -> None:
        self._last_prompt = prompt
        self.console.print(f"{prompt}{self.prompt_suffix}", markup=False, highlight=False)

    def read_line(self) -> str:
        if self.stream is None:
            try:
                return self.console.input(markup=False)
            except EOFError as exc:
                raise InputClosedError(self._last_prompt) from exc

        line = self.console.input(markup=False, stream=self.stream)
        if line == "":
            raise InputClosedError(self._last_prompt)
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line

    def warn(self, message: str) -> None:
        self.console.print(message, style=self.diagnostic_style, markup=False, highlight=False)
