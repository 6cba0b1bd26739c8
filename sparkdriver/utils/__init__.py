"""Utility modules for the driver launcher."""

from .conversions import (
    memory_string_to_mb,
    parse_bool,
    parse_int,
    parse_float,
    split_command_string,
)
from .resource_naming import (
    LaunchIdentities,
    NameGenerator,
    RandomNameGenerator,
    generate_resource_name,
)

__all__ = [
    'memory_string_to_mb',
    'parse_bool',
    'parse_int',
    'parse_float',
    'split_command_string',
    'LaunchIdentities',
    'NameGenerator',
    'RandomNameGenerator',
    'generate_resource_name',
]
