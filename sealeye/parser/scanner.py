# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ArgumentScanner`, the single left-to-right pass that applies a
command line to one command level.

Each token is one of:

- an option alias (`-c`, `--count`), which sets a boolean or consumes exactly
  one following value,
- a legacy single-dash long option (`-count`), retried as `--count`,
- `--no-<name>` for a boolean long option, which clears it,
- a bare `--`, after which no token is treated as an option,
- a subcommand name, which hands every remaining token to that subcommand and
  ends the scan,
- anything else, which is appended to the command's positional arguments.

Aggregated short options (`-abc`) and `--name=value` are not supported.
"""
from __future__ import annotations

from typing import Callable

from sealeye.command import HELP_OPTION, Command
from sealeye.exceptions import CommandArgumentError
from sealeye.logger import logger
from sealeye.parser.extractor import OptionTable
from sealeye.parser.option import OptionDescriptor
from sealeye.parser.option_kind import OptionKind
from sealeye.parser.requirement import check_requirements

TERMINATOR = "--"
ALL_HELP_FLAG = "--all-help"
NEGATION_PREFIX = "--no-"

Dispatch = Callable[[str, Command, list[str]], int]


class ArgumentScanner:
    """
    Scans the argument vector of one command level.

    Args:
        command (Command): The command level whose options and positional
            arguments are updated.
        table (OptionTable): The level's option table.
        dispatch (Dispatch): Called with a subcommand's name, the subcommand and
            the tokens after it; its result becomes the scan's result.
    """

    def __init__(self, command: Command, table: OptionTable, dispatch: Dispatch) -> None:
        self.command = command
        self.table = table
        self.dispatch = dispatch

    def _lookup(self, token: str) -> tuple[OptionDescriptor | None, str]:
        descriptor = self.table.get(token)
        if descriptor is None and len(token) > 1 and token[1] != "-":
            token = f"-{token}"
            descriptor = self.table.get(token)
        if descriptor is None and token == ALL_HELP_FLAG and self.command.subcommands:
            descriptor = self.table.find(HELP_OPTION)
        return descriptor, token

    def _negated(self, token: str) -> OptionDescriptor | None:
        if not token.startswith(NEGATION_PREFIX):
            return None
        descriptor = self.table.get(f"--{token[len(NEGATION_PREFIX):]}")
        if descriptor is not None and descriptor.kind is OptionKind.BOOL:
            return descriptor
        return None

    def _apply_option(self, token: str, args: list[str], index: int) -> int:
        """Apply the option at `args[index]`; return the index of the next token."""
        descriptor, flag = self._lookup(token)
        if descriptor is None:
            negated = self._negated(flag)
            if negated is None:
                raise CommandArgumentError(f"unknown option {token!r}")
            negated.set(False)
            return index + 1

        if descriptor.kind is OptionKind.BOOL:
            descriptor.set(True)
            return index + 1

        if index + 1 >= len(args):
            raise CommandArgumentError(f"no value given for option {token!r}")
        raw = args[index + 1]
        if descriptor.kind is OptionKind.INT:
            try:
                value = descriptor.kind.parse(raw)
            except ValueError:
                raise CommandArgumentError(
                    f"invalid int {raw!r} for option {token!r}"
                ) from None
        else:
            check_requirements(descriptor.requirements, flag, raw)
            value = raw
        descriptor.set(value)
        return index + 2

    def scan(self, args: list[str]) -> int | None:
        """
        Apply `args` to the command level.

        Returns:
            int | None: The subcommand's result if a subcommand was dispatched,
            else None once every token has been applied.

        Raises:
            CommandArgumentError: On an unknown option, a missing or invalid
                value, or a value failing its requirement.
        """
        terminated = False
        index = 0
        while index < len(args):
            token = args[index]
            if not terminated:
                if token == TERMINATOR:
                    terminated = True
                    index += 1
                    continue
                if token.startswith("-") and len(token) > 1:
                    index = self._apply_option(token, args, index)
                    continue
            subcommand = self.command.get_subcommand(token)
            if subcommand is not None:
                logger.debug("Dispatching to subcommand '%s'.", token)
                return self.dispatch(token, subcommand, args[index + 1 :])
            self.command.args.append(token)
            index += 1
        return None
