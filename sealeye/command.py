# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command schema for Sealeye CLIs.

A Command is one node of a command tree. Options are declared as `Option`
class attributes, reusable option sets are `OptionGroup` subclasses embedded
with `Embed`, and child commands live in the `subcommands` and
`hidden_subcommands` mappings:

    class CommonOptions(OptionGroup):
        verbose = Option("v,verbose", bool, help="Output more information.")

    class CatCommand(Command):
        common = Embed(CommonOptions)
        help_option = Option("?,h,help", bool, help="Outputs this help text.")
        count = Option("c,count", int, help="Times to output.", default="1")

        def run(self) -> int:
            ...

Options bound to a few well known names are treated specially by the
framework: `help_option` shows help, `all_help_option` shows help for the
whole subtree, and `color` controls colored help output for the command and
every command below it.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

HELP_OPTION = "help_option"
ALL_HELP_OPTION = "all_help_option"
COLOR_OPTION = "color"


class OptionGroup:
    """Base class for a reusable set of `Option` declarations."""

    def __repr__(self) -> str:
        values = ", ".join(
            f"{key}={value!r}" for key, value in vars(self).items() if key[0] != "_"
        )
        return f"{type(self).__name__}({values})"


class Embed:
    """
    Embeds an option group in a command or another group.

    Each owning instance gets its own group instance, created on first access,
    so values set through the group are independent of same-named options
    declared directly on the owner.
    """

    def __init__(self, group: type) -> None:
        self.group: type = group
        self.name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        if self.name not in instance.__dict__:
            instance.__dict__[self.name] = self.group()
        return instance.__dict__[self.name]

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = value

    def __repr__(self) -> str:
        return f"Embed({self.group.__name__})"


class Command(OptionGroup):
    """
    Represents one command level of a Sealeye CLI.

    Attributes:
        help (str): Help text, rendered as Markdown. `{{Command}}` is replaced
            with the invocation path, e.g. "prog cat".
        quick_help (str): One line summary shown in the parent's subcommand list.
        handler (Callable[[Command], int | None] | None): Called with the command
            once parsing succeeds; `run()` may be overridden instead.
        subcommands (dict[str, Command]): Child commands listed in help.
        hidden_subcommands (dict[str, Command]): Child commands left out of help.
        args (list[str]): Positional arguments left after parsing.
        parent (Command | None): The command this one was dispatched from.
    """

    help: str = ""
    quick_help: str = ""

    def __init__(
        self,
        handler: Callable[[Any], int | None] | None = None,
        *,
        help: str | None = None,
        quick_help: str | None = None,
        subcommands: Mapping[str, Command] | None = None,
        hidden_subcommands: Mapping[str, Command] | None = None,
    ) -> None:
        if help is not None:
            self.help = help
        if quick_help is not None:
            self.quick_help = quick_help
        self.handler = handler
        self.subcommands: dict[str, Command] = dict(subcommands or {})
        self.hidden_subcommands: dict[str, Command] = dict(hidden_subcommands or {})
        self.args: list[str] = []
        self.parent: Command | None = None

    def add_subcommand(self, name: str, command: Command, hidden: bool = False) -> None:
        """Register `command` under `name`, optionally hidden from help."""
        if hidden:
            self.hidden_subcommands[name] = command
        else:
            self.subcommands[name] = command

    def get_subcommand(self, name: str) -> Command | None:
        """Return the visible or hidden subcommand called `name`, if any."""
        if name in self.subcommands:
            return self.subcommands[name]
        return self.hidden_subcommands.get(name)

    def run(self) -> int | None:
        """
        Run the command after parsing.

        Returns 0 for success, 1 to have the help text shown, anything else as
        the process exit code. Without a handler the help text is shown.
        """
        if self.handler is None:
            return 1
        return self.handler(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(subcommands={sorted(self.subcommands)}, "
            f"args={self.args!r})"
        )
