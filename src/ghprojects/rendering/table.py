"""Row-oriented table output."""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

PLACEHOLDER = " - "


class TablePrinter:
    """Collects rows and writes them as a table.

    Piped output is tab-separated, one row per line, so it stays easy to
    consume from scripts. On a terminal the rows are aligned into columns
    with Rich. Header rows are ordinary rows.
    """

    def __init__(self, out: TextIO | None = None, *, is_terminal: bool | None = None) -> None:
        self._out = out or sys.stdout
        self._is_terminal = self._out.isatty() if is_terminal is None else is_terminal
        self._rows: list[list[str]] = []

    @property
    def is_terminal(self) -> bool:
        return self._is_terminal

    def add_row(self, *cells: object) -> None:
        self._rows.append([str(c) for c in cells])

    def render(self) -> None:
        rows, self._rows = self._rows, []
        if not rows:
            return
        if not self._is_terminal:
            for row in rows:
                self._out.write("\t".join(row) + "\n")
            return

        table = Table(show_header=False, box=None, pad_edge=False, padding=(0, 2, 0, 0))
        for row in rows:
            table.add_row(*(Text(cell) for cell in row))
        Console(file=self._out, highlight=False, markup=False, emoji=False).print(table)


def or_placeholder(value: object) -> str:
    """*value* as a cell, or the placeholder for an empty string or zero."""
    if value in ("", 0, None):
        return PLACEHOLDER
    return str(value)
