# Sealeye CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for Sealeye option parsing.

Both functions are strict: unlike a general `bool()` or `int()` call they
reject anything that is not an exact, recognized spelling, so a typo in an
environment variable is reported instead of silently becoming a value.

Functions:
- parse_bool: Convert a string to a boolean.
- parse_int: Convert a base-10 string to a 64-bit signed integer.
"""
import re

TRUE_VALUES = frozenset({"1", "t", "T", "true", "TRUE", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "false", "FALSE", "False"})

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts exactly '1', 't', 'T', 'true', 'TRUE', 'True' and their false
    counterparts. Surrounding whitespace and other spellings are rejected.

    Args:
        value (str): The input string.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognized boolean token.
    """
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{value!r} is not a valid boolean")


def parse_int(value: str) -> int:
    """
    Convert a base-10 string, with an optional sign, to an integer.

    Raises:
        ValueError: If the string is not a plain base-10 integer or falls
            outside the 64-bit signed range.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} is not a valid integer")
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"{value!r} is out of range")
    return number
