"""Rich text container and inline element builders.

Containers (sections, lists, preformatted blocks and quotes) go into
:func:`blockbuilder.blocks.rich_text`; inline elements go into containers.
Optional numeric and style fields are only emitted when given.
"""

from typing import Any

from blockbuilder.nodes import NodeKind, compact, models, parse_config
from blockbuilder.validators import (
    validate_emoji_element,
    validate_link_element,
    validate_mention,
    validate_rich_text_container,
    validate_text_element,
)


def _style(
    style: models.TextStyle | models.MentionStyle | None,
) -> dict[str, Any] | None:
    if style is None:
        return None
    return style.model_dump(exclude_none=True) or None


def _container(
    kind: NodeKind, model: type[models.RichTextContainerConfig], fields: dict[str, Any]
) -> dict[str, Any]:
    config = parse_config(model, fields)
    validate_rich_text_container(config, kind)
    return {"type": kind.value, **config.model_dump(exclude_none=True)}


# === CONTAINERS ===


def section(**fields: Any) -> dict[str, Any]:
    """Paragraph of inline elements."""
    return _container(
        NodeKind.RICH_TEXT_SECTION, models.RichTextContainerConfig, fields
    )


def rich_list(**fields: Any) -> dict[str, Any]:
    """Bullet or ordered list whose items are rich text sections.

    Args:
        elements: Rich text sections, one per item.
        style: "bullet" (default) or "ordered".
        indent: Optional indent level.
        offset: Optional number offset for ordered lists.
        border: Optional border thickness.
    """
    config = parse_config(models.RichTextListConfig, fields)
    validate_rich_text_container(config, NodeKind.RICH_TEXT_LIST)
    dumped = config.model_dump(exclude_none=True)
    return {"type": NodeKind.RICH_TEXT_LIST.value, **dumped}


def preformatted(**fields: Any) -> dict[str, Any]:
    return _container(
        NodeKind.RICH_TEXT_PREFORMATTED, models.RichTextContainerConfig, fields
    )


def quote(**fields: Any) -> dict[str, Any]:
    return _container(NodeKind.RICH_TEXT_QUOTE, models.RichTextContainerConfig, fields)


# === INLINE ELEMENTS ===


def text(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.TextElementConfig, fields)
    validate_text_element(config)
    return compact(
        {"type": "text", "text": config.text, "style": _style(config.style)}
    )


def link(**fields: Any) -> dict[str, Any]:
    """Link element; the url is shown when no text is given."""
    config = parse_config(models.LinkElementConfig, fields)
    validate_link_element(config)
    return compact(
        {
            "type": "link",
            "url": config.url,
            "text": config.text or None,
            "unsafe": config.unsafe,
            "style": _style(config.style),
        }
    )


def emoji(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.EmojiElementConfig, fields)
    validate_emoji_element(config)
    return {"type": "emoji", "name": config.name}


def channel(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.ChannelElementConfig, fields)
    validate_mention(config)
    return compact(
        {
            "type": "channel",
            "channel_id": config.channel_id,
            "style": _style(config.style),
        }
    )


def user(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.UserElementConfig, fields)
    validate_mention(config)
    return compact(
        {"type": "user", "user_id": config.user_id, "style": _style(config.style)}
    )


def usergroup(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.UsergroupElementConfig, fields)
    validate_mention(config)
    return compact(
        {
            "type": "usergroup",
            "usergroup_id": config.usergroup_id,
            "style": _style(config.style),
        }
    )


__all__ = [
    # Containers
    "section",
    "rich_list",
    "preformatted",
    "quote",
    # Inline
    "text",
    "link",
    "emoji",
    "channel",
    "user",
    "usergroup",
]
