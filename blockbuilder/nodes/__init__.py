"""Node registry, configuration models and composition helpers."""

from . import models
from .lib import (
    NODE_REGISTRY,
    NodeCategory,
    NodeConstraints,
    NodeKind,
    NodeMeta,
    compact,
    confirm_object,
    export_config_schema,
    get_constraints,
    get_kinds_by_category,
    get_node_meta,
    mrkdwn,
    parse_config,
    placeholder_object,
)
from .models import ConfirmDialog, MentionStyle, TextStyle

__all__ = [
    # Enums
    "NodeCategory",
    "NodeKind",
    # Metadata
    "NodeConstraints",
    "NodeMeta",
    "NODE_REGISTRY",
    "get_node_meta",
    "get_constraints",
    "get_kinds_by_category",
    "export_config_schema",
    # Config models
    "models",
    "ConfirmDialog",
    "TextStyle",
    "MentionStyle",
    "parse_config",
    # Composition
    "mrkdwn",
    "placeholder_object",
    "confirm_object",
    "compact",
]
