"""Terminal status output: "[pkgname]    Doing something... ok" lines."""

from __future__ import annotations

import click

NAME_COLUMN = 32


class Output:
    """Coloured status printer.  Nothing goes to stdout when disabled (-q)."""

    def __init__(self, color: bool = True, enabled: bool = True) -> None:
        self.color = color
        self.enabled = enabled

    def _style(self, text: str, fg: str) -> str:
        if not self.color:
            return text
        return click.style(text, fg=fg)

    def step(self, pkgname: str, message: str) -> None:
        """Print the start of a status line, waiting for the result word."""
        if not self.enabled:
            return
        spaces = " " * (NAME_COLUMN - min(NAME_COLUMN, len(pkgname)))
        click.echo(
            self._style("[", "bright_black")
            + self._style(pkgname, "bright_blue")
            + self._style("]", "bright_black")
            + spaces
            + self._style(message, "bright_black")
            + " ",
            nl=False,
        )

    def result(self, word: str, fg: str = "green") -> None:
        """Finish a status line started with step()."""
        if not self.enabled:
            return
        click.echo(self._style(word, fg))

    def err(self, message: str) -> None:
        """Errors are shown even in quiet mode."""
        click.echo(self._style(message, "red"), err=True)
