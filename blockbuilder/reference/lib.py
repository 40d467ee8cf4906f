"""Static reference data for the time-zone and country pickers.

Reference lists are read once per process from a directory holding
``timezones.json`` (``[{"zoneName": ...}]``) and ``countries.json``
(``[{"id": ..., "value": ...}]``). Records are returned as read-only
mappings so cached lists can be shared between build calls.
"""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from blockbuilder.config import get_reference_dir
from blockbuilder.constraints import RequiredFieldViolation, ShapeViolation

logger = logging.getLogger(__name__)

TIMEZONES_FILE = "timezones.json"
COUNTRIES_FILE = "countries.json"

Records = tuple[Mapping[str, Any], ...]


def _resolve_dir(directory: Path | str | None) -> Path:
    resolved = get_reference_dir(directory)
    if resolved is None:
        raise RequiredFieldViolation(
            "Reference data directory is not configured. Pass the records "
            "explicitly or set BLOCKBUILDER_REFERENCE_DIR",
            field="reference_dir",
        )
    return resolved


@lru_cache(maxsize=None)
def _load_records(path: Path, required_keys: tuple[str, ...]) -> Records:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RequiredFieldViolation(
            f"Reference data file not found: {path}", field=path.name
        ) from e
    except json.JSONDecodeError as e:
        raise ShapeViolation(
            f"Reference data file is not valid JSON: {path}: {e}", field=path.name
        ) from e

    if not isinstance(raw, list):
        raise ShapeViolation(
            f"Expected {path.name} to contain an array", field=path.name
        )
    for index, record in enumerate(raw):
        if not isinstance(record, dict) or any(
            not isinstance(record.get(key), str) for key in required_keys
        ):
            raise ShapeViolation(
                f"Expected record {index} in {path.name} to have string fields "
                f"{', '.join(required_keys)}",
                field=path.name,
                position=index,
            )

    logger.debug(f"Loaded {len(raw)} reference records from {path}")
    return tuple(MappingProxyType(dict(record)) for record in raw)


def load_timezones(directory: Path | str | None = None) -> Records:
    """Load ``{zoneName}`` records from the reference directory."""
    path = _resolve_dir(directory) / TIMEZONES_FILE
    return _load_records(path.resolve(), ("zoneName",))


def load_countries(directory: Path | str | None = None) -> Records:
    """Load ``{id, value}`` country records from the reference directory."""
    path = _resolve_dir(directory) / COUNTRIES_FILE
    return _load_records(path.resolve(), ("id", "value"))


def clear_cache() -> None:
    """Forget previously loaded reference data."""
    _load_records.cache_clear()


__all__ = [
    "TIMEZONES_FILE",
    "COUNTRIES_FILE",
    "load_timezones",
    "load_countries",
    "clear_cache",
]
