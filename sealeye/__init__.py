"""
Sealeye CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import Command, Embed, OptionGroup
from .exceptions import (
    CommandArgumentError,
    DefaultValueError,
    RequirementError,
    SchemaError,
    SealeyeError,
)
from .logger import logger
from .parser import Option, OptionKind, Requirement
from .runner import run, run_command
from .utils import setup_logging
from .version import __version__

__all__ = [
    "Command",
    "Embed",
    "OptionGroup",
    "Option",
    "OptionKind",
    "Requirement",
    "run",
    "run_command",
    "setup_logging",
    "logger",
    "SealeyeError",
    "SchemaError",
    "CommandArgumentError",
    "RequirementError",
    "DefaultValueError",
    "__version__",
]
