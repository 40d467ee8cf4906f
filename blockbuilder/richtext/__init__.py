"""Rich text container and inline element builders."""

from .lib import (
    channel,
    emoji,
    link,
    preformatted,
    quote,
    rich_list,
    section,
    text,
    user,
    usergroup,
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
