"""
Sealeye CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .extractor import OptionTable, extract_options
from .option import Option, OptionDescriptor
from .option_kind import OptionKind
from .requirement import Requirement
from .scanner import ArgumentScanner

__all__ = [
    "ArgumentScanner",
    "Option",
    "OptionDescriptor",
    "OptionKind",
    "OptionTable",
    "Requirement",
    "extract_options",
]
