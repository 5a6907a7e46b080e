# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help output for a Sealeye command level.

The help document has three parts:

- the command's help template, with `{{Command}}` replaced by the invocation
  path and rendered as Markdown,
- an "Options:" table of every option not marked hidden,
- a "Subcommands:" table of every visible subcommand and its quick help.

Option rows are ordered with the help option first, the all-help option
second (listed only when the command has subcommands), then the rest in
case-insensitive order of their names without leading dashes. Options whose
names do not fit on one line are listed afterwards with one name per line.

Color comes from the nearest `color` option up the parent chain, falling back
to whether standard output is a terminal.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markdown import Markdown
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from sealeye.command import ALL_HELP_OPTION, COLOR_OPTION, HELP_OPTION, Command
from sealeye.exceptions import SchemaError
from sealeye.parser.extractor import OptionTable, extract_options
from sealeye.parser.option import OptionDescriptor
from sealeye.parser.option_kind import OptionKind

if TYPE_CHECKING:
    from sealeye.context import RenderContext

PLACEHOLDER = re.compile(r"\{\{\s*\.?([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")
SINGLE_ROW_WIDTH = 15
MIN_HELP_WIDTH = 20


def render_help_template(template: str, command_path: str) -> str:
    """
    Replace every `{{Command}}` in `template` with `command_path`.

    Raises:
        SchemaError: If the template uses any other placeholder or leaves a
            `{{` unclosed. A lone `}}` is plain text.
    """

    def substitute(match: re.Match) -> str:
        if match.group(1) != "Command":
            raise SchemaError(
                f"Could not parse help text {template!r}: "
                f"unknown placeholder {match.group(0)!r}"
            )
        return command_path

    rendered = PLACEHOLDER.sub(substitute, template)
    if "{{" in PLACEHOLDER.sub("", template):
        raise SchemaError(f"Could not parse help text {template!r}: unclosed action")
    return rendered


@dataclass
class OptionRow:
    names: str
    help: str
    descriptor: OptionDescriptor

    @property
    def sort_key(self) -> str:
        return self.names.lstrip("-").lower()


def resolve_color(command: Command, table: OptionTable, context: RenderContext) -> bool:
    """Find a bool `color` option on this command or an ancestor, else detect a terminal."""
    node: Command | None = command
    node_table: OptionTable | None = table
    while node is not None:
        if node_table is None:
            node_table = extract_options(node)
        descriptor = node_table.find(COLOR_OPTION)
        if descriptor is not None and descriptor.kind is OptionKind.BOOL:
            return bool(descriptor.get())
        node = node.parent
        node_table = None
    return context.is_terminal()


class HelpAssembler:
    """
    Builds and prints the help document for one command level.

    Args:
        command (Command): The command level.
        table (OptionTable): The level's option table.
        help_text (str): The help template already rendered for this level.
        context (RenderContext): Streams and terminal state.
    """

    def __init__(
        self,
        command: Command,
        table: OptionTable,
        help_text: str,
        context: RenderContext,
    ) -> None:
        self.command = command
        self.table = table
        self.help_text = help_text
        self.context = context

    def get_option_rows(self) -> tuple[list[OptionRow], list[OptionRow]]:
        """Return the single line rows and the wrapped rows, both sorted."""
        rows: list[OptionRow] = []
        wrapped: list[OptionRow] = []
        for descriptor in self.table:
            if descriptor.hidden:
                continue
            if descriptor.dest == ALL_HELP_OPTION and not self.command.subcommands:
                continue
            names = descriptor.help_names
            help_text = descriptor.get_help_text()
            joined = " ".join(names)
            if len(names) == 1 or (
                descriptor.kind is OptionKind.BOOL and len(joined) < SINGLE_ROW_WIDTH
            ):
                rows.append(OptionRow(joined, help_text, descriptor))
            else:
                wrapped.append(OptionRow("\n".join(names), help_text, descriptor))

        def rank(row: OptionRow) -> tuple[int, str]:
            if row.descriptor.dest == HELP_OPTION:
                return (0, row.sort_key)
            if row.descriptor.dest == ALL_HELP_OPTION:
                return (1, row.sort_key)
            return (2, row.sort_key)

        rows.sort(key=rank)
        wrapped.sort(key=lambda row: row.sort_key)
        return rows, wrapped

    def get_subcommand_rows(self) -> list[tuple[str, str]]:
        return [
            (name, self.command.subcommands[name].quick_help)
            for name in sorted(self.command.subcommands)
        ]

    def _build_table(self, first_width: int, rows: list[tuple[str, str]]) -> Padding:
        help_width = max(
            self.context.get_width() - self.table.max_flag_width - 8, MIN_HELP_WIDTH
        )
        table = Table.grid(padding=(0, 2))
        table.add_column(min_width=first_width, no_wrap=True)
        table.add_column(width=help_width, overflow="fold")
        for first, second in rows:
            table.add_row(Text(first), Text(second))
        return Padding(table, (0, 0, 0, 4))

    def render(self) -> None:
        """Print the full help document for this command level."""
        color = resolve_color(self.command, self.table, self.context)
        console = self.context.console(color)
        console.print(Markdown(self.help_text))

        rows, wrapped = self.get_option_rows()
        if rows or wrapped:
            option_rows = [(row.names, row.help) for row in rows]
            for row in wrapped:
                option_rows.append(("", ""))
                option_rows.append((row.names, row.help))
            console.print()
            console.print("Options:", style="sealeye.heading")
            console.print(self._build_table(self.table.max_flag_width, option_rows))

        subcommand_rows = self.get_subcommand_rows()
        if subcommand_rows:
            console.print()
            console.print("Subcommands:", style="sealeye.heading")
            first_width = max(len(name) for name, _ in subcommand_rows)
            console.print(self._build_table(first_width, subcommand_rows))

    def render_separator(self, command_path: str) -> None:
        """Print the banner that precedes a subcommand's help in all-help output."""
        color = resolve_color(self.command, self.table, self.context)
        console = self.context.console(color)
        label = f"---[ {command_path} ]"
        fill = "-" * max(self.context.get_width() - len(label) - 1, 0)
        console.print()
        console.print(f"{label}{fill}", style="sealeye.separator", markup=False, emoji=False)
        console.print()
