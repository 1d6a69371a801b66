"""Line-oriented console primitives used by the view-model and menu."""

from __future__ import annotations

from typing import Protocol


class Console(Protocol):
    """The two I/O primitives catalog operations depend on."""

    def prompt(self, text: str) -> str:
        """Show `text` and return the raw line typed by the user."""
        raise NotImplementedError

    def echo(self, line: str = "") -> None:
        """Write one line of output."""
        raise NotImplementedError


class TerminalConsole:
    """Console backed by stdin/stdout."""

    def prompt(self, text: str) -> str:
        return input(text)

    def echo(self, line: str = "") -> None:
        print(line)
