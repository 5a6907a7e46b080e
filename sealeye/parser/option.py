# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option`, the declaration used to add command-line options to a
Sealeye command or option group, and `OptionDescriptor`, the per-command-level
view of one declared option bound to its storage.

An `Option` is a Python descriptor. Declared as a class attribute, its
attribute name becomes the binding name and instances of the class store the
option's value under that name:

    class CatCommand(Command):
        count = Option("c,count", int, help="Times to output each file.",
                       default="env:COUNT,1")

    cat = CatCommand()
    cat.count  # 0 until defaults are resolved or the command line sets it

Key Attributes:
- `flags`: One or more aliases; one character is a short option (`-c`),
  longer is a long option (`--count`)
- `kind`: `OptionKind` of the stored value
- `defaults`: Ordered default sources parsed from the default specification
- `requirements`: Filesystem requirements for string values
- `hidden`: Whether the option is left out of help output
- `help`: Help text for the options table

Used By:
- `extract_options()` to build a command level's option table
- `ArgumentScanner` to apply command-line values
- `HelpAssembler` to render the options table
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from sealeye.exceptions import SchemaError
from sealeye.parser.defaults import DefaultSource, parse_default_spec
from sealeye.parser.option_kind import OptionKind
from sealeye.parser.requirement import Requirement, parse_requirements


def _normalize_flags(flags: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(flags, str):
        names = flags.split(",")
    else:
        names = list(flags)
    normalized = []
    for name in names:
        name = name.strip().lstrip("-")
        if name:
            normalized.append(name)
    if not normalized:
        raise SchemaError(f"No option names given in {flags!r}")
    return tuple(normalized)


def render_flag(name: str) -> str:
    """Return `name` with its dash prefix: `-x` for one character, else `--name`."""
    if len(name) == 1:
        return f"-{name}"
    return f"--{name}"


class Option:
    """
    Declares a command-line option as a class attribute.

    Args:
        flags (str | Iterable[str]): Comma separated option names, e.g. "?,h,help".
        kind (OptionKind | type | str): bool, int or str.
        help (str): Help text for the options table.
        default (str | None): Default specification, e.g. "env:COUNT,1".
        required (str | Requirement | None): "dir", "file" or "dirorfile".
        hidden (bool): Leave the option out of help output.

    Raises:
        SchemaError: If the kind, default or requirement is invalid.
    """

    def __init__(
        self,
        flags: str | Iterable[str],
        kind: OptionKind | type | str = OptionKind.BOOL,
        *,
        help: str = "",
        default: str | None = None,
        required: str | Requirement | None = None,
        hidden: bool = False,
    ) -> None:
        self.flags: tuple[str, ...] = _normalize_flags(flags)
        try:
            self.kind: OptionKind = OptionKind(kind)
        except ValueError as error:
            raise SchemaError(f"cannot handle option {flags!r}: {error}") from error
        self.help: str = help
        self.default: str | None = default
        self.defaults: tuple[DefaultSource, ...] = parse_default_spec(default, self.kind)
        self.requirements: tuple[Requirement, ...] = parse_requirements(required)
        if self.requirements and self.kind is not OptionKind.STRING:
            raise SchemaError(
                f"requirements can only be set on string options, not {self.kind} {flags!r}"
            )
        self.hidden: bool = hidden
        self.dest: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.dest = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.dest, self.kind.zero)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.dest] = value

    def __repr__(self) -> str:
        return (
            f"Option(flags={','.join(self.flags)!r}, kind={self.kind}, "
            f"dest={self.dest!r})"
        )


@dataclass
class OptionDescriptor:
    """
    One option of a command level, bound to the object that stores its value.

    Attributes:
        option (Option): The class-level declaration.
        owner (Any): The command or embedded group instance holding the value.
    """

    option: Option
    owner: Any

    @property
    def dest(self) -> str:
        return self.option.dest

    @property
    def kind(self) -> OptionKind:
        return self.option.kind

    @property
    def flags(self) -> tuple[str, ...]:
        """The option's aliases with their dash prefixes."""
        return tuple(render_flag(name) for name in self.option.flags)

    @property
    def long_flags(self) -> tuple[str, ...]:
        return tuple(flag for flag in self.flags if flag.startswith("--"))

    @property
    def name(self) -> str:
        """The alias used in diagnostics: the first long alias, else the first."""
        long_flags = self.long_flags
        return long_flags[0] if long_flags else self.flags[0]

    @property
    def help_names(self) -> tuple[str, ...]:
        """The aliases as shown in help, followed by the value placeholder."""
        metavar = self.kind.metavar
        if not metavar:
            return self.flags
        return tuple(f"{flag} {metavar}" for flag in self.flags)

    @property
    def defaults(self) -> tuple[DefaultSource, ...]:
        return self.option.defaults

    @property
    def requirements(self) -> tuple[Requirement, ...]:
        return self.option.requirements

    @property
    def hidden(self) -> bool:
        return self.option.hidden

    def get_help_text(self) -> str:
        """Help text followed by any requirement and default summaries."""
        text = self.option.help
        if self.requirements:
            text += " Requirements: " + ", ".join(
                requirement.description for requirement in self.requirements
            )
        if self.defaults:
            text += " Default: " + ", ".join(
                source.describe() for source in self.defaults
            )
        return text

    def get(self) -> Any:
        return getattr(self.owner, self.dest)

    def set(self, value: Any) -> None:
        setattr(self.owner, self.dest, value)
