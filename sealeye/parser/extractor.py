# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds the option table for one command level.

Registration happens in two passes per object: the options of every embedded
group first (depth first, in declaration order), then the object's own
options. The table is keyed by binding name, so an option declared directly
on an object replaces a same-named option from one of its embedded groups,
and any attribute the object declares shadows embedded options of that name.
Aliases are mapped once the binding table is final; two bindings claiming the
same alias is a schema error.
"""
from __future__ import annotations

from typing import Any, Iterator

from sealeye.command import Embed
from sealeye.exceptions import SchemaError
from sealeye.logger import logger
from sealeye.parser.option import Option, OptionDescriptor


class OptionTable:
    """The flat option table of one command level."""

    def __init__(self) -> None:
        self._bindings: dict[str, OptionDescriptor] = {}
        self._flag_map: dict[str, OptionDescriptor] = {}
        self.max_flag_width: int = 0

    def register(self, descriptor: OptionDescriptor) -> None:
        """Register `descriptor`, replacing any earlier one with the same binding name."""
        if descriptor.dest in self._bindings:
            logger.debug(
                "Option binding '%s' from %s overrides %s.",
                descriptor.dest,
                type(descriptor.owner).__name__,
                type(self._bindings[descriptor.dest].owner).__name__,
            )
            del self._bindings[descriptor.dest]
        self._bindings[descriptor.dest] = descriptor

    def build_flag_map(self) -> None:
        self._flag_map.clear()
        self.max_flag_width = 0
        for descriptor in self._bindings.values():
            for flag in descriptor.flags:
                existing = self._flag_map.get(flag)
                if existing is not None:
                    raise SchemaError(
                        f"Option '{flag}' is used by both '{existing.dest}' "
                        f"and '{descriptor.dest}'"
                    )
                self._flag_map[flag] = descriptor
            for name in descriptor.help_names:
                self.max_flag_width = max(self.max_flag_width, len(name))

    def get(self, flag: str) -> OptionDescriptor | None:
        """Return the descriptor for an exact alias such as `--count`."""
        return self._flag_map.get(flag)

    def find(self, dest: str) -> OptionDescriptor | None:
        """Return the descriptor bound to the attribute `dest`."""
        return self._bindings.get(dest)

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._bindings.values())

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, flag: object) -> bool:
        return flag in self._flag_map

    def __str__(self) -> str:
        return f"OptionTable(options={len(self._bindings)}, flags={len(self._flag_map)})"


def declared_attributes(cls: type) -> dict[str, Any]:
    """Class attributes of `cls` and its bases, resolved the way attribute lookup does."""
    attributes: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if name.startswith("__"):
                continue
            attributes[name] = value
    return attributes


def _collect(node: Any, table: OptionTable, shadowed: frozenset[str]) -> None:
    attributes = declared_attributes(type(node))
    inner_shadowed = shadowed | frozenset(attributes)
    for name, attribute in attributes.items():
        if isinstance(attribute, Embed):
            _collect(getattr(node, name), table, inner_shadowed)
    for name, attribute in attributes.items():
        if not isinstance(attribute, Option):
            continue
        if name in shadowed:
            continue
        table.register(OptionDescriptor(attribute, node))


def extract_options(node: Any) -> OptionTable:
    """
    Produce the option table for a command or option group instance.

    Raises:
        SchemaError: If two options claim the same alias.
    """
    table = OptionTable()
    _collect(node, table, frozenset())
    table.build_flag_map()
    logger.debug("Extracted %s from %s.", table, type(node).__name__)
    return table
