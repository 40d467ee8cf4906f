"""Reference data loading for the time-zone and country pickers."""

from .lib import (
    COUNTRIES_FILE,
    TIMEZONES_FILE,
    clear_cache,
    load_countries,
    load_timezones,
)

__all__ = [
    "TIMEZONES_FILE",
    "COUNTRIES_FILE",
    "load_timezones",
    "load_countries",
    "clear_cache",
]
