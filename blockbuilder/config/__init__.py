"""Centralized configuration management for blockbuilder.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from blockbuilder.config import EnvVar, get_environment
    >>>
    >>> capacity = get_environment(EnvVar.GROUP_CAPACITY)  # Returns int: 100
    >>> zone = get_environment(EnvVar.DEFAULT_TIMEZONE)  # Returns str | None

Environment Variable Categories:
    logging: Log level for the CLI
    options: Option group capacity
    time: Default zone for time pickers
    reference: Location of time-zone and country reference data
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_default_timezone,
    get_environment,
    get_environment_info,
    get_group_capacity,
    get_log_level,
    get_reference_dir,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    "get_group_capacity",
    "get_default_timezone",
    "get_reference_dir",
    # Introspection
    "list_environment_variables",
]
