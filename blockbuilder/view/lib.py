"""Document assembly for modal and home tab views.

A view is an ordered list of already built blocks plus surface metadata.
:func:`validate_view` checks the whole document; :func:`build_view` turns
it into the payload sent to the platform.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from blockbuilder.constraints import (
    RequiredFieldViolation,
    ShapeViolation,
    require_bounded_array,
    require_identifier,
    require_serialized_text,
    require_text,
    require_unique_identifiers,
)
from blockbuilder.nodes import NodeKind, get_constraints, models, parse_config
from blockbuilder.options import plain_text

logger = logging.getLogger(__name__)

SURFACE_TEXT_FIELDS = ("title", "submit_text", "close_text")


class ViewType(str, Enum):
    """Surfaces a document can be published to."""

    MODAL = "modal"
    HOME = "home"


def _validate_surface(config: models.ViewConfig, text_limit: int) -> None:
    if config.type == ViewType.HOME.value:
        for name in SURFACE_TEXT_FIELDS:
            if getattr(config, name) is not None:
                raise ShapeViolation(
                    f"{name} is not accepted on home views", field=name
                )
        return
    if not config.title:
        raise RequiredFieldViolation("title is required for modals", field="title")
    require_text(config.title, limit=text_limit, field="title")
    for name in SURFACE_TEXT_FIELDS[1:]:
        require_text(getattr(config, name), limit=text_limit, optional=True, field=name)


def _validate(config: models.ViewConfig) -> str | None:
    constraints = get_constraints(NodeKind.VIEW)

    _validate_surface(config, constraints.text_limit)

    if config.blocks is None:
        raise RequiredFieldViolation("blocks is required", field="blocks")
    require_bounded_array(
        config.blocks,
        max_len=constraints.max_items,
        min_len=constraints.min_items,
        field="blocks",
    )
    for index, block in enumerate(config.blocks):
        if not isinstance(block, Mapping) or not block.get("type"):
            raise ShapeViolation(
                f"Expected block {index} to be an object with a type",
                field="blocks",
                position=index,
            )
    require_unique_identifiers(config.blocks)

    require_identifier(
        config.callback_id,
        limit=constraints.limit("callback_id"),
        optional=True,
        field="callback_id",
    )
    return require_serialized_text(
        config.metadata, limit=constraints.limit("metadata"), field="metadata"
    )


def validate_view(**fields: Any) -> models.ViewConfig:
    """Validate a complete document.

    Checks run in a fixed order: surface fields, block count, block shape,
    block_id uniqueness, callback_id and finally the serialized metadata.

    Args:
        type: "modal" (default) or "home".
        blocks: Built blocks, 1 to 100.
        title: Modal title, required for modals, at most 24 characters.
        submit_text: Optional modal submit label, at most 24 characters.
        close_text: Optional modal close label, at most 24 characters.
        callback_id: Optional identifier, at most 255 characters.
        metadata: Optional string or JSON-serializable value, at most 3000
            characters once serialized.

    Returns:
        The parsed view configuration.

    Raises:
        ConstraintViolation: The first failed check.
    """
    config = parse_config(models.ViewConfig, fields)
    _validate(config)
    return config


def build_view(**fields: Any) -> dict[str, Any]:
    """Validate and assemble a view payload.

    Takes the same fields as :func:`validate_view`.
    """
    config = parse_config(models.ViewConfig, fields)
    metadata = _validate(config)

    view: dict[str, Any] = {"type": config.type, "blocks": list(config.blocks)}
    if config.type == ViewType.MODAL.value:
        view["title"] = plain_text(config.title, emoji=True)
        if config.submit_text:
            view["submit"] = plain_text(config.submit_text, emoji=True)
        if config.close_text:
            view["close"] = plain_text(config.close_text, emoji=True)
    if config.callback_id:
        view["callback_id"] = config.callback_id
    if metadata is not None:
        view["private_metadata"] = metadata

    logger.debug(f"Assembled {config.type} view with {len(view['blocks'])} blocks")
    return view


__all__ = [
    "ViewType",
    "SURFACE_TEXT_FIELDS",
    "validate_view",
    "build_view",
]
