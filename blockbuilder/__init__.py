"""blockbuilder: validated Block Kit document builders."""

from blockbuilder import accessory, blocks, elements, inputs, richtext
from blockbuilder.constraints import (
    BoundViolation,
    ConstraintViolation,
    RequiredFieldViolation,
    ShapeViolation,
    UniquenessViolation,
)
from blockbuilder.nodes import (
    NODE_REGISTRY,
    NodeCategory,
    NodeKind,
    export_config_schema,
)
from blockbuilder.view import ViewType, build_view, validate_view

__all__ = [
    # Builders
    "accessory",
    "blocks",
    "elements",
    "inputs",
    "richtext",
    # Documents
    "ViewType",
    "build_view",
    "validate_view",
    # Registry
    "NODE_REGISTRY",
    "NodeCategory",
    "NodeKind",
    "export_config_schema",
    # Errors
    "ConstraintViolation",
    "ShapeViolation",
    "BoundViolation",
    "UniquenessViolation",
    "RequiredFieldViolation",
]
