# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry points that run a Sealeye command tree against a command line.

For each command level the runner:

1. sets the command's parent and clears its positional arguments,
2. renders the help template (a bad template is a `SchemaError`),
3. extracts the option table, resets every option to its zero value and
   resolves its defaults,
4. scans the arguments, possibly handing the rest to a subcommand level,
5. shows help when the help or all-help option was given, or
6. calls the command's handler and interprets the result.

Result codes follow the Unix convention: 0 for success, 1 for usage errors
and help output, anything else as returned by the handler. Bad user input and
bad environment defaults are reported on stderr and give 1 without help. Only
a handler returning 1 shows help as a side effect.

Example:
    from sealeye import run

    def main() -> None:
        run(root)
"""
from __future__ import annotations

import sys
from typing import NoReturn, Sequence, TextIO

from sealeye.command import ALL_HELP_OPTION, HELP_OPTION, Command
from sealeye.context import RenderContext
from sealeye.exceptions import CommandArgumentError
from sealeye.help import HelpAssembler, render_help_template
from sealeye.logger import logger
from sealeye.parser.defaults import resolve_default
from sealeye.parser.extractor import OptionTable, extract_options
from sealeye.parser.scanner import ArgumentScanner


def _flag_set(table: OptionTable, dest: str) -> bool:
    descriptor = table.find(dest)
    return descriptor is not None and bool(descriptor.get())


class CommandRunner:
    """Runs command levels recursively within one `RenderContext`."""

    def __init__(self, context: RenderContext) -> None:
        self.context = context

    def run(
        self,
        command: Command,
        name: str,
        args: Sequence[str],
        parent: Command | None = None,
        all_help: bool = False,
    ) -> int:
        """
        Run one command level.

        Args:
            command (Command): The command level to run.
            name (str): The invocation path, e.g. "prog cat".
            args (Sequence[str]): The tokens following `name`.
            parent (Command | None): The command this level was dispatched from.
            all_help (bool): Skip scanning and the handler and output this
                level's help and the help of every subcommand below it.

        Returns:
            int: The result code.

        Raises:
            SchemaError: If the command's schema is declared incorrectly.
        """
        command.parent = parent
        command.args = []
        help_text = render_help_template(command.help, name)
        table = extract_options(command)
        assembler = HelpAssembler(command, table, help_text, self.context)

        try:
            for descriptor in table:
                descriptor.set(descriptor.kind.zero)
                resolve_default(descriptor, self.context)
            if all_help:
                return self._render_all_help(command, name, assembler)

            def dispatch(subcommand_name: str, subcommand: Command, rest: list[str]) -> int:
                return self.run(subcommand, f"{name} {subcommand_name}", rest, parent=command)

            dispatched = ArgumentScanner(command, table, dispatch).scan(list(args))
        except CommandArgumentError as error:
            logger.debug("[%s] %s", name, error)
            self.context.report(error)
            return 1
        if dispatched is not None:
            return dispatched

        if _flag_set(table, ALL_HELP_OPTION):
            return self._render_all_help(command, name, assembler)
        if _flag_set(table, HELP_OPTION):
            assembler.render()
            return 1

        result = command.run()
        if result is None:
            result = 0
        logger.debug("[%s] handler returned %s.", name, result)
        if result == 1:
            assembler.render()
        return result

    def _render_all_help(
        self, command: Command, name: str, assembler: HelpAssembler
    ) -> int:
        assembler.render()
        for subcommand_name in sorted(command.subcommands):
            path = f"{name} {subcommand_name}"
            assembler.render_separator(path)
            self.run(
                command.subcommands[subcommand_name],
                path,
                [],
                parent=command,
                all_help=True,
            )
        return 1


def run_command(
    command: Command,
    args: Sequence[str],
    name: str | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Run a command tree and return the result code instead of exiting.

    Args:
        command (Command): The root command.
        args (Sequence[str]): The arguments, without the program name.
        name (str | None): The program name used in help output; defaults to
            `sys.argv[0]`.
        stdout (TextIO | None): Stream for help output; defaults to sys.stdout.
        stderr (TextIO | None): Stream for diagnostics; defaults to sys.stderr.
    """
    context = RenderContext(
        stdout=stdout if stdout is not None else sys.stdout,
        stderr=stderr if stderr is not None else sys.stderr,
    )
    if name is None:
        name = sys.argv[0]
    return CommandRunner(context).run(command, name, args)


def run(command: Command, argv: Sequence[str] | None = None) -> NoReturn:
    """
    Run a command tree against the process arguments and exit with its result.

    `argv[0]` is only used as the program name in help output.
    """
    if argv is None:
        argv = sys.argv
    name = argv[0] if argv else ""
    sys.exit(run_command(command, argv[1:], name=name))
