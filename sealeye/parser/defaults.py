# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Default specifications and their resolution.

A default specification is an ordered, comma-separated list of sources, for
example ``"env:COUNT,1"``. Sources are tried first to last and the first one
that yields a value wins:

- ``env:NAME``: the environment variable NAME, parsed per the option kind;
  skipped when the variable is unset.
- ``terminal``: True when standard output is a terminal (boolean options only).
- anything else: a literal, parsed per the option kind when the option is
  declared.

An explicit command line value is applied later by the scanner and always wins.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from sealeye.exceptions import DefaultValueError, SchemaError
from sealeye.logger import logger
from sealeye.parser.option_kind import OptionKind
from sealeye.parser.requirement import check_requirements

if TYPE_CHECKING:
    from sealeye.context import RenderContext
    from sealeye.parser.option import OptionDescriptor

ENV_PREFIX = "env:"
TERMINAL = "terminal"


@dataclass(frozen=True)
class EnvDefault:
    """Use the named environment variable when it is set."""

    name: str

    def describe(self) -> str:
        return f"${self.name}"


@dataclass(frozen=True)
class TerminalDefault:
    """Use True when standard output is attached to a terminal."""

    def describe(self) -> str:
        return "if terminal"


@dataclass(frozen=True)
class LiteralDefault:
    """A fixed value given in the declaration."""

    text: str
    value: Any

    def describe(self) -> str:
        return self.text


DefaultSource = Union[EnvDefault, TerminalDefault, LiteralDefault]


def parse_default_spec(spec: str | None, kind: OptionKind) -> tuple[DefaultSource, ...]:
    """
    Parse a default specification for an option of the given kind.

    Raises:
        SchemaError: If a literal does not parse for `kind` or `terminal` is
            used on a non-boolean option.
    """
    if not spec:
        return ()
    sources: list[DefaultSource] = []
    for item in spec.split(","):
        if not item:
            continue
        if item.startswith(ENV_PREFIX):
            name = item[len(ENV_PREFIX) :]
            if not name:
                raise SchemaError(f"empty environment variable name in default {spec!r}")
            sources.append(EnvDefault(name))
        elif item == TERMINAL:
            if kind is not OptionKind.BOOL:
                raise SchemaError(
                    f"default {TERMINAL!r} in {spec!r} is only valid for bool options"
                )
            sources.append(TerminalDefault())
        else:
            try:
                value = kind.parse(item)
            except ValueError as error:
                raise SchemaError(
                    f"cannot handle default specification {item!r} from {spec!r}: {error}"
                ) from error
            sources.append(LiteralDefault(item, value))
    return tuple(sources)


def resolve_default(descriptor: OptionDescriptor, context: RenderContext) -> None:
    """
    Apply the first satisfiable default source to the descriptor's binding.

    Raises:
        DefaultValueError: If an environment value does not parse.
        RequirementError: If a string default fails its requirement.
    """
    for source in descriptor.defaults:
        if isinstance(source, EnvDefault):
            raw = os.environ.get(source.name)
            if raw is None:
                continue
            value = _parse_env_value(descriptor, source, raw)
        elif isinstance(source, TerminalDefault):
            value = context.is_terminal()
        else:
            value = source.value
        if descriptor.kind is OptionKind.STRING:
            check_requirements(descriptor.requirements, descriptor.name, value)
        descriptor.set(value)
        logger.debug(
            "Option '%s' defaulted from %s to %r.",
            descriptor.name,
            source.describe(),
            value,
        )
        return


def _parse_env_value(descriptor: OptionDescriptor, source: EnvDefault, raw: str) -> Any:
    try:
        return descriptor.kind.parse(raw)
    except ValueError:
        noun = "boolean" if descriptor.kind is OptionKind.BOOL else "integer"
        raise DefaultValueError(
            f"invalid {noun} {raw!r} for option {descriptor.name!r} via ${source.name}"
        ) from None
