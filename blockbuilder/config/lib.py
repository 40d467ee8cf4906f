"""Centralized environment configuration management for blockbuilder.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from blockbuilder.config import EnvVar, get_environment
    >>>
    >>> capacity = get_environment(EnvVar.GROUP_CAPACITY)  # Returns int
    >>> capacity = get_environment(EnvVar.GROUP_CAPACITY, override=50)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "BLOCKBUILDER_LOG_LEVEL").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by blockbuilder.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - logging: Log output configuration
        - options: Option grouping behaviour
        - time: Time picker defaults
        - reference: Static reference data location
    """

    LOG_LEVEL = EnvConfig(
        name="BLOCKBUILDER_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level used by the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )
    GROUP_CAPACITY = EnvConfig(
        name="BLOCKBUILDER_GROUP_CAPACITY",
        default=100,
        var_type=int,
        description="Maximum options per option group before splitting",
        category="options",
    )
    DEFAULT_TIMEZONE = EnvConfig(
        name="BLOCKBUILDER_DEFAULT_TIMEZONE",
        default=None,  # Local time when unset
        var_type=str,
        description="IANA zone used by time pickers without an explicit zone",
        category="time",
    )
    REFERENCE_DIR = EnvConfig(
        name="BLOCKBUILDER_REFERENCE_DIR",
        default=None,
        var_type=Path,
        description="Directory containing timezones.json and countries.json",
        category="reference",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert a raw environment string to ``var_type``.

    Unset, empty and non-numeric integer values fall back to ``default``.
    """
    if value is None or value == "":
        return default

    if var_type is int:
        try:
            return int(value.strip())
        except ValueError:
            return default

    if var_type is Path:
        return Path(value).expanduser()

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, or Path).
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name, upper-cased."""
    return str(get_environment(EnvVar.LOG_LEVEL, override)).upper()


def get_group_capacity(override: int | None = None) -> int:
    """Get the maximum number of options allowed in one option group."""
    return get_environment(EnvVar.GROUP_CAPACITY, override)


def get_default_timezone(override: str | None = None) -> str | None:
    """Get the default time zone for time pickers, or None for local time."""
    return get_environment(EnvVar.DEFAULT_TIMEZONE, override)


def get_reference_dir(override: Path | str | None = None) -> Path | None:
    """Get the reference data directory.

    Resolution: override > BLOCKBUILDER_REFERENCE_DIR > None
    """
    if override is not None:
        return Path(override)
    return get_environment(EnvVar.REFERENCE_DIR)


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, options, time, reference).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "get_log_level",
    "get_group_capacity",
    "get_default_timezone",
    "get_reference_dir",
    "list_environment_variables",
]
