# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind`, the closed set of value kinds a Sealeye option may hold.

Each member knows its zero value, how to parse a raw string into a value, and
the placeholder shown after the option name in help output.

Supports alias coercion so option declarations can name the kind the way that
reads best in the schema: a Python type or a short string.

Example:
    OptionKind(bool)      → OptionKind.BOOL
    OptionKind("str")     → OptionKind.STRING
    OptionKind("integer") → OptionKind.INT
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from sealeye.parser.utils import parse_bool, parse_int


class OptionKind(Enum):
    """
    Defines the value kind stored by an option.

    Members:
        BOOL: A flag; present means True, `--no-name` means False.
        INT: A base-10 integer taking exactly one following value.
        STRING: A verbatim string taking exactly one following value.

    Aliases:
        - bool, "boolean" → "bool"
        - int, "integer" → "int"
        - str, "str" → "string"
    """

    BOOL = "bool"
    INT = "int"
    STRING = "string"

    @classmethod
    def choices(cls) -> list[OptionKind]:
        """Return a list of all option kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "integer": "int",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionKind:
        types = {bool: "bool", int: "int", str: "string"}
        if isinstance(value, type) and value in types:
            return cls(types[value])
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def zero(self) -> Any:
        """The value an option of this kind holds before anything sets it."""
        if self is OptionKind.BOOL:
            return False
        if self is OptionKind.INT:
            return 0
        return ""

    @property
    def metavar(self) -> str:
        """Placeholder rendered after the option name in help output."""
        if self is OptionKind.INT:
            return "n"
        if self is OptionKind.STRING:
            return "s"
        return ""

    @property
    def takes_value(self) -> bool:
        return self is not OptionKind.BOOL

    def parse(self, value: str) -> Any:
        """
        Parse a raw string into a value of this kind.

        Raises:
            ValueError: If the string is not valid for this kind.
        """
        if self is OptionKind.BOOL:
            return parse_bool(value)
        if self is OptionKind.INT:
            return parse_int(value)
        return value

    def __str__(self) -> str:
        """Return the string representation of the option kind."""
        return self.value
