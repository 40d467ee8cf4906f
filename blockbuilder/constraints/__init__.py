"""Constraint primitives and the violation taxonomy."""

from .lib import (
    DEFAULT_TEXT_LIMIT,
    IDENTIFIER_LIMIT,
    OPTION_TEXT_LIMIT,
    OPTION_URL_LIMIT,
    BoundViolation,
    ConstraintViolation,
    RequiredFieldViolation,
    ShapeViolation,
    UniquenessViolation,
    limit_message,
    require_bounded_array,
    require_choice,
    require_identifier,
    require_option,
    require_option_list,
    require_positive_int,
    require_serialized_text,
    require_text,
    require_unique_identifiers,
)

__all__ = [
    # Limits
    "IDENTIFIER_LIMIT",
    "OPTION_TEXT_LIMIT",
    "OPTION_URL_LIMIT",
    "DEFAULT_TEXT_LIMIT",
    # Errors
    "ConstraintViolation",
    "ShapeViolation",
    "BoundViolation",
    "UniquenessViolation",
    "RequiredFieldViolation",
    # Primitives
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
