# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Filesystem requirements for string options.

A requirement is checked every time a value is written into an option,
whatever the value's origin: the command line, an environment default, or a
literal default.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path

from sealeye.exceptions import RequirementError, SchemaError


class Requirement(Enum):
    """Defines what a path-valued string option must point at."""

    DIR = "dir"
    FILE = "file"
    DIR_OR_FILE = "dirorfile"

    @property
    def description(self) -> str:
        return {
            Requirement.DIR: "must be a directory",
            Requirement.FILE: "must be a file",
            Requirement.DIR_OR_FILE: "must be a directory or file",
        }[self]

    def is_met(self, value: str) -> bool:
        path = Path(value)
        if self is Requirement.DIR:
            return path.is_dir()
        if self is Requirement.FILE:
            return path.exists() and not path.is_dir()
        return path.exists()

    def check(self, option_name: str, value: str) -> None:
        """
        Validate `value` for the option called `option_name`.

        Raises:
            RequirementError: If the path does not satisfy the requirement.
        """
        if not self.is_met(value):
            noun = self.description.removeprefix("must be ")
            raise RequirementError(f"{option_name} {value!r} is not {noun}")

    def __str__(self) -> str:
        return self.value


def parse_requirements(
    spec: str | Requirement | tuple[Requirement, ...] | list[Requirement] | None,
) -> tuple[Requirement, ...]:
    """
    Parse a requirement specification like ``"dir"`` or ``"dir,file"``.

    Empty entries are ignored. Unknown entries are a schema error.
    """
    if spec is None:
        return ()
    if isinstance(spec, Requirement):
        return (spec,)
    if isinstance(spec, (tuple, list)):
        items = list(spec)
    else:
        items = spec.split(",")
    requirements: list[Requirement] = []
    for item in items:
        if isinstance(item, Requirement):
            requirements.append(item)
            continue
        if not item:
            continue
        try:
            requirements.append(Requirement(item))
        except ValueError:
            raise SchemaError(f"unknown required value: {item!r}") from None
    return tuple(requirements)


def check_requirements(
    requirements: tuple[Requirement, ...], option_name: str, value: str
) -> None:
    """Check every requirement, in declaration order, against `value`."""
    for requirement in requirements:
        requirement.check(option_name, value)
