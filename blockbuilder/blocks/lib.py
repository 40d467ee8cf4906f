"""Layout block builders."""

from collections.abc import Mapping
from typing import Any

from blockbuilder.nodes import compact, models, mrkdwn, parse_config
from blockbuilder.options import plain_text as plain_text_object
from blockbuilder.validators import (
    validate_actions,
    validate_context,
    validate_divider,
    validate_fields,
    validate_header,
    validate_image,
    validate_rich_text,
    validate_section,
)


def actions(**fields: Any) -> dict[str, Any]:
    """Actions block holding 1 to 25 interactive elements."""
    config = parse_config(models.ActionsConfig, fields)
    validate_actions(config)
    return compact(
        {"type": "actions", "elements": config.elements, "block_id": config.block_id}
    )


def _context_elements(text: str | list[Any]) -> list[dict[str, Any]]:
    if isinstance(text, str):
        return [mrkdwn(text)]
    result: list[dict[str, Any]] = []
    for entry in text:
        if isinstance(entry, str):
            result.append(mrkdwn(entry))
            continue
        image = entry.get("image")
        if isinstance(image, Mapping) and image.get("url"):
            result.append(
                {
                    "type": "image",
                    "image_url": image["url"],
                    "alt_text": image.get("alt") or "image",
                }
            )
        if entry.get("text"):
            result.append(mrkdwn(entry["text"]))
    return result


def context(**fields: Any) -> dict[str, Any]:
    """Context block.

    ``text`` may be a string, a list of strings, or a list of
    ``{text?, image?: {url, alt?}}`` entries. An entry with both yields the
    image followed by the text.
    """
    config = parse_config(models.ContextConfig, fields)
    validate_context(config)
    return compact(
        {
            "type": "context",
            "elements": _context_elements(config.text),
            "block_id": config.block_id,
        }
    )


def divider(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.DividerConfig, fields)
    validate_divider(config)
    return compact({"type": "divider", "block_id": config.block_id})


def fields(**kwargs: Any) -> dict[str, Any]:
    """Section block laid out as markdown fields (1 to 10)."""
    config = parse_config(models.FieldsConfig, kwargs)
    validate_fields(config)
    return compact(
        {
            "type": "section",
            "fields": [mrkdwn(text) for text in config.fields],
            "block_id": config.block_id,
        }
    )


def header(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.HeaderConfig, fields)
    validate_header(config)
    return compact(
        {
            "type": "header",
            "text": plain_text_object(config.text),
            "block_id": config.block_id,
        }
    )


def image(**fields: Any) -> dict[str, Any]:
    """Image block with alt text and an optional title."""
    config = parse_config(models.ImageConfig, fields)
    validate_image(config)
    return compact(
        {
            "type": "image",
            "image_url": config.url,
            "alt_text": config.alt,
            "block_id": config.block_id,
            "title": plain_text_object(config.title) if config.title else None,
        }
    )


def _section(
    config: models.SectionConfig, text: dict[str, Any] | None
) -> dict[str, Any]:
    validate_section(config)
    return compact(
        {
            "type": "section",
            "text": text,
            "block_id": config.block_id,
            "accessory": config.accessory,
        }
    )


def markdown(**fields: Any) -> dict[str, Any]:
    """Section block with markdown text and an optional accessory."""
    config = parse_config(models.SectionConfig, fields)
    return _section(config, mrkdwn(config.text) if config.text else None)


def plain_text(**fields: Any) -> dict[str, Any]:
    """Section block with emoji-enabled plain text."""
    config = parse_config(models.SectionConfig, fields)
    text = plain_text_object(config.text, emoji=True) if config.text else None
    return _section(config, text)


def rich_text(**fields: Any) -> dict[str, Any]:
    """Rich text block; build its containers with :mod:`blockbuilder.richtext`."""
    config = parse_config(models.RichTextConfig, fields)
    validate_rich_text(config)
    return compact(
        {"type": "rich_text", "elements": config.elements, "block_id": config.block_id}
    )


__all__ = [
    "actions",
    "context",
    "divider",
    "fields",
    "header",
    "image",
    "markdown",
    "plain_text",
    "rich_text",
]
