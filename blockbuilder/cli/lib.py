"""Command line interface for blockbuilder.

Usage:
    python -m blockbuilder kinds [--category CATEGORY]
    python -m blockbuilder schema KIND
    python -m blockbuilder validate FILE
"""

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

from blockbuilder.config import get_log_level
from blockbuilder.constraints import ConstraintViolation
from blockbuilder.core import get_logger, setup_logging
from blockbuilder.nodes import (
    NODE_REGISTRY,
    NodeCategory,
    NodeKind,
    export_config_schema,
    get_kinds_by_category,
)
from blockbuilder.view import build_view

logger = get_logger("cli")


def _format_bounds(kind: NodeKind) -> str:
    constraints = NODE_REGISTRY[kind].constraints
    parts = []
    if constraints.max_items is not None:
        parts.append(f"{constraints.min_items or 0}-{constraints.max_items} items")
    elif constraints.min_items:
        parts.append(f">={constraints.min_items} items")
    if constraints.text_limit is not None:
        parts.append(f"text<={constraints.text_limit}")
    return ", ".join(parts)


def cmd_kinds(args: argparse.Namespace) -> int:
    """List registered node kinds with their bounds."""
    if args.category:
        kinds = get_kinds_by_category(args.category)
    else:
        kinds = list(NODE_REGISTRY)

    for kind in kinds:
        meta = NODE_REGISTRY[kind]
        bounds = _format_bounds(kind)
        suffix = f" [{bounds}]" if bounds else ""
        print(f"{kind.value:<24} {meta.category.value:<10} {meta.description}{suffix}")
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    """Print the JSON Schema of a kind's configuration."""
    try:
        schema = export_config_schema(args.kind)
    except ConstraintViolation as e:
        logger.error(str(e))
        return 1
    print(json.dumps(schema, indent=2))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a JSON file of view fields and print the payload."""
    path = Path(args.file)
    try:
        fields = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
        return 1

    if not isinstance(fields, dict):
        logger.error(f"Expected {path} to hold a JSON object of view fields")
        return 1

    try:
        view = build_view(**fields)
    except ConstraintViolation as e:
        location = f" (field: {e.field})" if e.field else ""
        logger.error(f"Invalid view{location}: {e}")
        return 1

    logger.info(f"{path} is a valid {view['type']} view")
    print(json.dumps(view, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="python -m blockbuilder",
        description="Build and validate Block Kit documents",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    kinds_parser = subparsers.add_parser("kinds", help="List registered node kinds")
    kinds_parser.add_argument(
        "--category",
        choices=[c.value for c in NodeCategory],
        help="Only list kinds in this category",
    )
    kinds_parser.set_defaults(func=cmd_kinds)

    schema_parser = subparsers.add_parser(
        "schema", help="Print the configuration schema of a node kind"
    )
    schema_parser.add_argument("kind", help="Node kind, e.g. static_select")
    schema_parser.set_defaults(func=cmd_schema)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a JSON file of view fields"
    )
    validate_parser.add_argument("file", help="Path to a JSON object of view fields")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv.

    Returns:
        Process exit code.
    """
    load_dotenv()
    setup_logging(get_log_level())

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1
    return args.func(args)


__all__ = [
    "build_parser",
    "cmd_kinds",
    "cmd_schema",
    "cmd_validate",
    "main",
]
