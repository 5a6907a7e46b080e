# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Sealeye CLI framework.

Two families matter to callers. Schema errors signal a mistake by the
application author (a bad option declaration, a malformed help template) and
are raised straight through to the caller before any user-facing output.
Command argument errors signal bad user input or a bad environment and are
caught at each command level, printed to stderr and turned into exit code 1.

Exception Hierarchy:
- SealeyeError
    ├── SchemaError
    └── CommandArgumentError
        ├── RequirementError
        └── DefaultValueError
"""


class SealeyeError(Exception):
    """Base exception for the Sealeye framework."""


class SchemaError(SealeyeError):
    """Exception raised when a command schema is declared incorrectly."""


class CommandArgumentError(SealeyeError):
    """Exception raised when the command line cannot be applied to a schema."""


class RequirementError(CommandArgumentError):
    """Exception raised when a path value does not meet its option's requirement."""


class DefaultValueError(CommandArgumentError):
    """Exception raised when an environment default cannot be parsed."""
