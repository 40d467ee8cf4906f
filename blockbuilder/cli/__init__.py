"""Command line interface."""

from .lib import build_parser, cmd_kinds, cmd_schema, cmd_validate, main

__all__ = [
    "build_parser",
    "cmd_kinds",
    "cmd_schema",
    "cmd_validate",
    "main",
]
