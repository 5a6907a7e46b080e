# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Render context for one top-level Sealeye invocation.

The context carries the output streams and the decisions that should be made
only once per invocation, however many command levels are run: whether
standard output is a terminal, and how wide the terminal is. It is created by
`run_command()` and passed explicitly through every subcommand level.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from rich.console import Console

from sealeye.console import make_console, make_error_console
from sealeye.logger import logger


@dataclass
class RenderContext:
    """
    Streams and memoized terminal state shared by all levels of one invocation.

    Attributes:
        stdout (TextIO): Stream for help output.
        stderr (TextIO): Stream for diagnostics.
        terminal (bool | None): Whether stdout is a terminal; detected on first
            use when None.
        width (int | None): Terminal width; detected on first use when None.
    """

    stdout: TextIO
    stderr: TextIO
    terminal: bool | None = None
    width: int | None = None
    _error_console: Console | None = field(default=None, repr=False)

    def is_terminal(self) -> bool:
        if self.terminal is None:
            self.terminal = Console(file=self.stdout).is_terminal
            logger.debug("Detected terminal output: %s", self.terminal)
        return self.terminal

    def get_width(self) -> int:
        if self.width is None:
            self.width = Console(file=self.stdout).width
        return self.width

    def console(self, color: bool) -> Console:
        """A help output console with color switched per `color`."""
        return make_console(self.stdout, color, self.get_width())

    def report(self, message: object) -> None:
        """Write a diagnostic to stderr."""
        if self._error_console is None:
            self._error_console = make_error_console(self.stderr)
        self._error_console.print(
            str(message), style="sealeye.error", markup=False, emoji=False
        )
