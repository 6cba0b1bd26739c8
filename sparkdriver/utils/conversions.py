"""
Value conversion helpers for Spark-style configuration strings.

Every parser takes the configuration key it is reading so that a bad value
surfaces as MalformedValue naming the offending key.
"""

import re
import shlex
from typing import List

from ..errors import MalformedValue

_BYTE_SUFFIXES = {
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "m": 1024 ** 2,
    "mb": 1024 ** 2,
    "g": 1024 ** 3,
    "gb": 1024 ** 3,
    "t": 1024 ** 4,
    "tb": 1024 ** 4,
    "p": 1024 ** 5,
    "pb": 1024 ** 5,
}

_BYTE_STRING = re.compile(r'^([0-9]+)([a-z]+)?$')


def memory_string_to_mb(key: str, value: str) -> int:
    """
    Convert a Spark memory string ("512m", "2g", "1073741824") to whole MB.

    A number without a suffix is a byte count.

    Examples:
        >>> memory_string_to_mb("spark.driver.memory", "2g")
        2048
        >>> memory_string_to_mb("spark.driver.memory", "1048576")
        1
    """
    match = _BYTE_STRING.match(value.strip().lower())
    if not match:
        raise MalformedValue(key, value, "a size such as 512m or 2g")

    number, suffix = match.groups()
    if suffix is not None and suffix not in _BYTE_SUFFIXES:
        raise MalformedValue(key, value, "a size such as 512m or 2g")

    multiplier = _BYTE_SUFFIXES[suffix] if suffix else 1
    return (int(number) * multiplier) // (1024 ** 2)


def parse_bool(key: str, value: str) -> bool:
    """Parse "true"/"false" (any case)."""
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise MalformedValue(key, value, "true or false")


def parse_int(key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise MalformedValue(key, value, "an integer") from e


def parse_float(key: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as e:
        raise MalformedValue(key, value, "a number") from e


def split_command_string(key: str, value: str) -> List[str]:
    """Split a shell-quoted option string into individual arguments."""
    try:
        return shlex.split(value)
    except ValueError as e:
        raise MalformedValue(key, value, "a shell-quoted option string") from e
