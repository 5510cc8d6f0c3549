"""Shared fixtures: a ConsoleIO wired to in-memory streams."""

from __future__ import annotations

import io as _io
from dataclasses import dataclass

import pytest
from rich.console import Console

from adapters.console_io import ConsoleIO


@dataclass
class Session:
    io: ConsoleIO
    out: _io.StringIO

    @property
    def output(self) -> str:
        return self.out.getvalue()

    def count(self, message: str) -> int:
        return self.output.count(message.strip())


def make_session(lines: list[str], *, terminated: bool = True) -> Session:
    text = "\n".join(lines) + ("\n" if terminated and lines else "")
    out = _io.StringIO()
    console = Console(file=out, highlight=False, soft_wrap=True, color_system=None, width=120)
    return Session(io=ConsoleIO(console, stream=_io.StringIO(text)), out=out)


@pytest.fixture
def session_factory():
    return make_session
