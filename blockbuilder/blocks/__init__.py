"""Layout block builders."""

from .lib import (
    actions,
    context,
    divider,
    fields,
    header,
    image,
    markdown,
    plain_text,
    rich_text,
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
