"""Core errors.

Why so few:
- Malformed user input is never an error here: every read loop absorbs it and
  re-prompts. What remains is the absence of input altogether.
"""

from __future__ import annotations


class InputClosedError(RuntimeError):
    """Raised when standard input reaches end-of-file during a read.

    Re-prompting cannot recover from a closed stream, so this is the one
    condition that crosses the public read operations.
    """

    def __init__(self, prompt: str | None = None) -> None:
        self.prompt = prompt
        detail = f" while reading {prompt!r}" if prompt else ""
        super().__init__(f"Input stream closed{detail}.")
