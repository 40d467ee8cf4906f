"""Constraint primitives shared by every node validator.

Each primitive either returns normally or raises a ConstraintViolation
subclass whose message names the offending field, its limit and, for bulk
checks, the position of the offending item. Node validators are thin
compositions of these functions with node-specific limits.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

# Shared limits used across node kinds
IDENTIFIER_LIMIT = 255
OPTION_TEXT_LIMIT = 150
OPTION_URL_LIMIT = 3000
DEFAULT_TEXT_LIMIT = 3000


# === ERROR TAXONOMY ===


class ConstraintViolation(Exception):
    """Base exception for every rejected node or document.

    Attributes:
        field: Name of the offending field, when known.
        limit: The limit that was exceeded, when applicable.
        position: Index (or dotted group.option index) in a list, if any.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        limit: int | None = None,
        position: int | str | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.limit = limit
        self.position = position


class ShapeViolation(ConstraintViolation):
    """Raised when a value has the wrong type or shape."""


class BoundViolation(ConstraintViolation):
    """Raised when a length or count falls outside its allowed range."""


class UniquenessViolation(ConstraintViolation):
    """Raised when an identifier appears twice within one document."""


class RequiredFieldViolation(ConstraintViolation):
    """Raised when a required or co-required field is missing."""


# === MESSAGES ===


def limit_message(
    field: str,
    limit: int,
    value: Any,
    position: int | str | None = None,
    unit: str = "characters",
) -> str:
    """Build the standard message for a value exceeding its limit.

    Args:
        field: Field name shown to the caller.
        limit: Maximum allowed size.
        value: The offending value; its length is reported when it has one.
        position: Optional list position appended to the message.
        unit: What the limit counts ("characters", "items", ...).

    Returns:
        Human-readable message string.
    """
    try:
        received = len(value)
    except TypeError:
        received = value
    message = f"Expected {field} to have at most {limit} {unit}. Received: {received}"
    if position is not None:
        message += f". Position: {position}"
    return message


def _type_name(value: Any) -> str:
    return type(value).__name__


def _at(position: int | str | None) -> str:
    return f" at position {position}" if position is not None else ""


# === TEXT ===


def require_text(
    value: Any,
    limit: int = DEFAULT_TEXT_LIMIT,
    optional: bool = False,
    field: str = "text",
    position: int | str | None = None,
) -> None:
    """Require a non-empty string no longer than ``limit`` characters.

    Optional values pass when absent (None or an empty string).

    Raises:
        RequiredFieldViolation: Value is None and not optional.
        ShapeViolation: Value is not a string.
        BoundViolation: Value is empty or longer than ``limit``.
    """
    if optional and (value is None or value == ""):
        return
    if value is None:
        raise RequiredFieldViolation(
            f"{field} is required{_at(position)}", field=field, position=position
        )
    if not isinstance(value, str):
        raise ShapeViolation(
            f"Expected {field} to be a string. Received {_type_name(value)}",
            field=field,
            position=position,
        )
    if not value:
        raise BoundViolation(
            f"Expected {field} to have at least one character{_at(position)}",
            field=field,
            limit=limit,
            position=position,
        )
    if len(value) > limit:
        raise BoundViolation(
            limit_message(field, limit, value, position),
            field=field,
            limit=limit,
            position=position,
        )


def require_identifier(
    value: Any,
    limit: int = IDENTIFIER_LIMIT,
    optional: bool = False,
    field: str = "block_id",
    position: int | str | None = None,
) -> None:
    """Require a block or action identifier of at most ``limit`` characters."""
    require_text(value, limit=limit, optional=optional, field=field, position=position)


def require_serialized_text(
    value: Any,
    limit: int = DEFAULT_TEXT_LIMIT,
    field: str = "value",
    optional: bool = True,
) -> str | None:
    """Serialize structured values to compact JSON and length-check the result.

    Strings are checked as-is. Mappings and lists are serialized first.

    Returns:
        The string that will be placed in the payload, or None when absent.
    """
    if isinstance(value, (Mapping, list, tuple)):
        try:
            value = json.dumps(value, separators=(",", ":"))
        except TypeError as e:
            raise ShapeViolation(
                f"Expected {field} to be JSON serializable: {e}", field=field
            ) from e
    require_text(value, limit=limit, optional=optional, field=field)
    return value or None


# === SCALARS ===


def require_choice(value: Any, choices: Iterable[str], field: str) -> None:
    """Require ``value`` to be one of the allowed ``choices``."""
    allowed = tuple(choices)
    if value not in allowed:
        raise ShapeViolation(
            f"Expected {field} to be one of {', '.join(allowed)}. Received: {value}",
            field=field,
        )


def require_positive_int(
    value: Any, field: str, maximum: int | None = None, minimum: int = 1
) -> None:
    """Require an integer within ``[minimum, maximum]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ShapeViolation(
            f"Expected {field} to be an integer. Received {_type_name(value)}",
            field=field,
        )
    if value < minimum or (maximum is not None and value > maximum):
        if maximum is None:
            expected = f"at least {minimum}"
        else:
            expected = f"between {minimum} and {maximum}"
        raise BoundViolation(
            f"Expected {field} to be {expected}. Received: {value}",
            field=field,
            limit=maximum,
        )


# === ARRAYS ===


def require_bounded_array(
    value: Any,
    max_len: int | None,
    min_len: int = 1,
    field: str = "items",
) -> None:
    """Require a list whose length lies within ``[min_len, max_len]``.

    Args:
        value: Candidate sequence.
        max_len: Upper bound, or None for no upper bound.
        min_len: Lower bound (defaults to one element).
        field: Field name used in messages.

    Raises:
        ShapeViolation: Value is not a list or tuple.
        BoundViolation: Length is outside the allowed range.
    """
    if not isinstance(value, (list, tuple)):
        raise ShapeViolation(
            f"Expected {field} to be an array. Received {_type_name(value)}",
            field=field,
        )
    if len(value) < min_len:
        noun = "item" if min_len == 1 else "items"
        raise BoundViolation(
            f"Expected {field} to have at least {min_len} {noun}."
            f" Received: {len(value)}",
            field=field,
            limit=max_len,
        )
    if max_len is not None and len(value) > max_len:
        raise BoundViolation(
            limit_message(field, max_len, value, unit="items"),
            field=field,
            limit=max_len,
        )


def require_unique_identifiers(nodes: Iterable[Any]) -> bool:
    """Require every non-empty ``block_id`` in ``nodes`` to be distinct.

    Each identifier is also checked against the identifier length limit.

    Returns:
        True when no duplicate is found.

    Raises:
        UniquenessViolation: On the first duplicate identifier.
    """
    seen: set[str] = set()
    for index, node in enumerate(nodes):
        if not isinstance(node, Mapping):
            raise ShapeViolation(
                f"Expected node {index} to be an object. Received {_type_name(node)}",
                field="blocks",
                position=index,
            )
        block_id = node.get("block_id")
        if not block_id:
            continue
        require_identifier(block_id, position=index)
        if block_id in seen:
            raise UniquenessViolation(
                f"Found a duplicate block_id: {block_id}",
                field="block_id",
                position=index,
            )
        seen.add(block_id)
    return True


# === OPTIONS ===


def require_option(option: Any, position: int | str) -> None:
    """Validate a single ``{text, value, description?, url?}`` option."""
    if not isinstance(option, Mapping):
        raise ShapeViolation(
            f"Expected option {position} to be an object."
            f" Received {_type_name(option)}",
            field="option",
            position=position,
        )
    for key in ("text", "value"):
        if not option.get(key):
            raise RequiredFieldViolation(
                f"Expected option {position} to have a {key} property",
                field=f"option.{key}",
                position=position,
            )
    require_text(
        option["text"], limit=OPTION_TEXT_LIMIT, field="option.text", position=position
    )
    require_text(
        option["value"],
        limit=OPTION_TEXT_LIMIT,
        field="option.value",
        position=position,
    )
    require_text(
        option.get("description"),
        limit=OPTION_TEXT_LIMIT,
        optional=True,
        field="option.description",
        position=position,
    )
    require_text(
        option.get("url"),
        limit=OPTION_URL_LIMIT,
        optional=True,
        field="option.url",
        position=position,
    )


def _is_group(option: Any) -> bool:
    return (
        isinstance(option, Mapping)
        and isinstance(option.get("options"), (list, tuple))
        and len(option["options"]) > 0
    )


def require_option_list(
    options: Any, max_count: int = 100, field: str = "options"
) -> None:
    """Validate an option list, recursing into pre-grouped entries.

    Grouped entries (``{label, options: [...]}``, used by the time-zone and
    country pickers) have their inner options checked individually. The
    list-level bound applies to the outer list only.
    """
    require_bounded_array(options, max_len=max_count, field=field)
    for index, option in enumerate(options):
        if _is_group(option):
            for inner_index, inner in enumerate(option["options"]):
                require_option(inner, f"{index}.{inner_index}")
        else:
            require_option(option, index)


__all__ = [
    "IDENTIFIER_LIMIT",
    "OPTION_TEXT_LIMIT",
    "OPTION_URL_LIMIT",
    "DEFAULT_TEXT_LIMIT",
    "ConstraintViolation",
    "ShapeViolation",
    "BoundViolation",
    "UniquenessViolation",
    "RequiredFieldViolation",
    "limit_message",
    "require_text",
    "require_identifier",
    "require_serialized_text",
    "require_choice",
    "require_positive_int",
    "require_bounded_array",
    "require_unique_identifiers",
    "require_option",
    "require_option_list",
]
