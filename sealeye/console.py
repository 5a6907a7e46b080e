# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Rich console factories for Sealeye help output and diagnostics."""
from typing import TextIO

from rich.console import Console
from rich.theme import Theme

SEALEYE_THEME = Theme(
    {
        "sealeye.heading": "bold",
        "sealeye.option": "bold cyan",
        "sealeye.subcommand": "bold green",
        "sealeye.separator": "dim",
        "sealeye.error": "bold red",
    }
)


def make_console(file: TextIO, color: bool, width: int | None = None) -> Console:
    """Console for help output, with color forced on or off."""
    return Console(
        file=file,
        theme=SEALEYE_THEME,
        force_terminal=color,
        no_color=not color,
        color_system="truecolor" if color else None,
        width=width,
        highlight=False,
    )


def make_error_console(file: TextIO) -> Console:
    """Console for diagnostics; long messages are never wrapped."""
    return Console(file=file, theme=SEALEYE_THEME, highlight=False, soft_wrap=True)
