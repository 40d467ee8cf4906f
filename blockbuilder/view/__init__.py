"""Document assembler for modal and home views."""

from .lib import SURFACE_TEXT_FIELDS, ViewType, build_view, validate_view

__all__ = [
    "ViewType",
    "SURFACE_TEXT_FIELDS",
    "validate_view",
    "build_view",
]
