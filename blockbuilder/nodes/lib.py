"""Node registry for block, element and rich text kinds.

This module is the single source of truth for what each node kind is:
- Category and description
- Array bounds and text limits used by the node validators
- The configuration model that enumerates every accepted builder field

It also owns the translation from pydantic validation errors into the
constraint taxonomy, and the composition-object helpers (text objects and
confirm dialogs) shared by every builder.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from pydantic import ValidationError

from blockbuilder.constraints import DEFAULT_TEXT_LIMIT, ShapeViolation
from blockbuilder.options import plain_text

from . import models

ConfigT = TypeVar("ConfigT", bound=models.NodeConfig)


class NodeCategory(str, Enum):
    """High-level node groupings."""

    BLOCK = "block"
    ELEMENT = "element"
    RICH_TEXT = "rich_text"
    SURFACE = "surface"


class NodeKind(str, Enum):
    """Every node kind a builder can produce.

    Values name the builder, which is not always the output ``type``
    (``markdown`` and ``fields`` both produce ``section`` blocks).
    """

    # Layout blocks
    ACTIONS = "actions"
    CONTEXT = "context"
    DIVIDER = "divider"
    FIELDS = "fields"
    HEADER = "header"
    IMAGE = "image"
    MARKDOWN = "markdown"
    PLAIN_TEXT = "plain_text"
    RICH_TEXT = "rich_text"
    INPUT = "input"

    # Interactive elements
    BUTTON = "button"
    STATIC_SELECT = "static_select"
    USERS_SELECT = "users_select"
    CONVERSATIONS_SELECT = "conversations_select"
    EXTERNAL_SELECT = "external_select"
    OVERFLOW = "overflow"
    DATEPICKER = "datepicker"
    TIMEPICKER = "timepicker"
    PLAIN_TEXT_INPUT = "plain_text_input"
    EMAIL_INPUT = "email_text_input"
    CHECKBOXES = "checkboxes"
    RADIO_BUTTONS = "radio_buttons"
    IMAGE_ELEMENT = "image_element"
    TIMEZONE_PICKER = "timezone_picker"
    COUNTRY_SELECT = "country_select"

    # Rich text
    RICH_TEXT_SECTION = "rich_text_section"
    RICH_TEXT_LIST = "rich_text_list"
    RICH_TEXT_PREFORMATTED = "rich_text_preformatted"
    RICH_TEXT_QUOTE = "rich_text_quote"
    TEXT = "text"
    LINK = "link"
    EMOJI = "emoji"
    CHANNEL = "channel"
    USER = "user"
    USERGROUP = "usergroup"

    # Surfaces
    VIEW = "view"


@dataclass(frozen=True)
class NodeConstraints:
    """Size rules for a node kind.

    Attributes:
        min_items: Lower bound of the node's main array, if it has one.
        max_items: Upper bound of the node's main array (None = unbounded).
        text_limit: Limit of the node's main text field.
        field_limits: Limits of secondary text fields, by field name.
    """

    min_items: int | None = None
    max_items: int | None = None
    text_limit: int = DEFAULT_TEXT_LIMIT
    field_limits: tuple[tuple[str, int], ...] = ()

    def limit(self, name: str) -> int:
        """Return the limit for ``name``, falling back to ``text_limit``."""
        return dict(self.field_limits).get(name, self.text_limit)


@dataclass(frozen=True)
class NodeMeta:
    """Metadata definition for a node kind."""

    kind: NodeKind
    category: NodeCategory
    description: str
    config_model: type[models.NodeConfig]
    output_types: tuple[str, ...] = field(default_factory=tuple)
    constraints: NodeConstraints = field(default_factory=NodeConstraints)

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to a dictionary for listings."""
        return {
            "kind": self.kind.value,
            "category": self.category.value,
            "description": self.description,
            "output_types": list(self.output_types),
            "constraints": {
                "min_items": self.constraints.min_items,
                "max_items": self.constraints.max_items,
                "text_limit": self.constraints.text_limit,
                "field_limits": dict(self.constraints.field_limits),
            },
        }


# Placeholder-bearing elements share these limits
_PLACEHOLDER_LIMITS = (("placeholder", 150), ("action_id", 255))

_SELECT_CONSTRAINTS = NodeConstraints(
    min_items=1, max_items=100, field_limits=_PLACEHOLDER_LIMITS
)
_PICKER_CONSTRAINTS = NodeConstraints(field_limits=_PLACEHOLDER_LIMITS)
_CHOICE_CONSTRAINTS = NodeConstraints(
    min_items=1, max_items=10, field_limits=(("action_id", 255),)
)
_RICH_TEXT_CONTAINER = NodeConstraints(min_items=1)


NODE_REGISTRY: dict[NodeKind, NodeMeta] = {
    # === LAYOUT BLOCKS ===
    NodeKind.ACTIONS: NodeMeta(
        kind=NodeKind.ACTIONS,
        category=NodeCategory.BLOCK,
        description="Row of interactive elements",
        config_model=models.ActionsConfig,
        output_types=("actions",),
        constraints=NodeConstraints(min_items=1, max_items=25),
    ),
    NodeKind.CONTEXT: NodeMeta(
        kind=NodeKind.CONTEXT,
        category=NodeCategory.BLOCK,
        description="Small markdown texts and images shown as secondary content",
        config_model=models.ContextConfig,
        output_types=("context",),
        constraints=NodeConstraints(min_items=1, max_items=10),
    ),
    NodeKind.DIVIDER: NodeMeta(
        kind=NodeKind.DIVIDER,
        category=NodeCategory.BLOCK,
        description="Horizontal rule between blocks",
        config_model=models.DividerConfig,
        output_types=("divider",),
    ),
    NodeKind.FIELDS: NodeMeta(
        kind=NodeKind.FIELDS,
        category=NodeCategory.BLOCK,
        description="Section laid out as a two-column grid of markdown fields",
        config_model=models.FieldsConfig,
        output_types=("section",),
        constraints=NodeConstraints(min_items=1, max_items=10, text_limit=2000),
    ),
    NodeKind.HEADER: NodeMeta(
        kind=NodeKind.HEADER,
        category=NodeCategory.BLOCK,
        description="Large bold plain text heading",
        config_model=models.HeaderConfig,
        output_types=("header",),
        constraints=NodeConstraints(text_limit=150),
    ),
    NodeKind.IMAGE: NodeMeta(
        kind=NodeKind.IMAGE,
        category=NodeCategory.BLOCK,
        description="Standalone image with optional title",
        config_model=models.ImageConfig,
        output_types=("image",),
        constraints=NodeConstraints(
            field_limits=(("url", 3000), ("alt", 2000), ("title", 2000))
        ),
    ),
    NodeKind.MARKDOWN: NodeMeta(
        kind=NodeKind.MARKDOWN,
        category=NodeCategory.BLOCK,
        description="Section with markdown text and an optional accessory",
        config_model=models.SectionConfig,
        output_types=("section",),
    ),
    NodeKind.PLAIN_TEXT: NodeMeta(
        kind=NodeKind.PLAIN_TEXT,
        category=NodeCategory.BLOCK,
        description="Section with emoji-enabled plain text",
        config_model=models.SectionConfig,
        output_types=("section",),
    ),
    NodeKind.RICH_TEXT: NodeMeta(
        kind=NodeKind.RICH_TEXT,
        category=NodeCategory.BLOCK,
        description="Formatted text built from rich text containers",
        config_model=models.RichTextConfig,
        output_types=("rich_text",),
        constraints=NodeConstraints(min_items=1),
    ),
    NodeKind.INPUT: NodeMeta(
        kind=NodeKind.INPUT,
        category=NodeCategory.BLOCK,
        description="Labelled wrapper collecting user input from one element",
        config_model=models.InputBlockConfig,
        output_types=("input",),
        constraints=NodeConstraints(text_limit=2000, field_limits=(("hint", 2000),)),
    ),
    # === INTERACTIVE ELEMENTS ===
    NodeKind.BUTTON: NodeMeta(
        kind=NodeKind.BUTTON,
        category=NodeCategory.ELEMENT,
        description="Clickable button carrying a value or opening a URL",
        config_model=models.ButtonConfig,
        output_types=("button",),
        constraints=NodeConstraints(
            text_limit=75,
            field_limits=(("url", 3000), ("value", 2000), ("action_id", 255)),
        ),
    ),
    NodeKind.STATIC_SELECT: NodeMeta(
        kind=NodeKind.STATIC_SELECT,
        category=NodeCategory.ELEMENT,
        description="Menu of static options, optionally grouped",
        config_model=models.StaticSelectConfig,
        output_types=("static_select", "multi_static_select"),
        constraints=_SELECT_CONSTRAINTS,
    ),
    NodeKind.USERS_SELECT: NodeMeta(
        kind=NodeKind.USERS_SELECT,
        category=NodeCategory.ELEMENT,
        description="Menu of workspace users",
        config_model=models.UsersSelectConfig,
        output_types=("users_select", "multi_users_select"),
        constraints=_PICKER_CONSTRAINTS,
    ),
    NodeKind.CONVERSATIONS_SELECT: NodeMeta(
        kind=NodeKind.CONVERSATIONS_SELECT,
        category=NodeCategory.ELEMENT,
        description="Menu of conversations filtered by type",
        config_model=models.ConversationsSelectConfig,
        output_types=("conversations_select", "multi_conversations_select"),
        constraints=_PICKER_CONSTRAINTS,
    ),
    NodeKind.EXTERNAL_SELECT: NodeMeta(
        kind=NodeKind.EXTERNAL_SELECT,
        category=NodeCategory.ELEMENT,
        description="Menu whose options are loaded from an external source",
        config_model=models.ExternalSelectConfig,
        output_types=("external_select", "multi_external_select"),
        constraints=_PICKER_CONSTRAINTS,
    ),
    NodeKind.OVERFLOW: NodeMeta(
        kind=NodeKind.OVERFLOW,
        category=NodeCategory.ELEMENT,
        description="Compact menu of up to five items",
        config_model=models.OverflowConfig,
        output_types=("overflow",),
        constraints=NodeConstraints(
            min_items=1, max_items=5, field_limits=(("action_id", 255),)
        ),
    ),
    NodeKind.DATEPICKER: NodeMeta(
        kind=NodeKind.DATEPICKER,
        category=NodeCategory.ELEMENT,
        description="Calendar date picker",
        config_model=models.DatepickerConfig,
        output_types=("datepicker",),
        constraints=_PICKER_CONSTRAINTS,
    ),
    NodeKind.TIMEPICKER: NodeMeta(
        kind=NodeKind.TIMEPICKER,
        category=NodeCategory.ELEMENT,
        description="Clock time picker",
        config_model=models.TimepickerConfig,
        output_types=("timepicker",),
        constraints=_PICKER_CONSTRAINTS,
    ),
    NodeKind.PLAIN_TEXT_INPUT: NodeMeta(
        kind=NodeKind.PLAIN_TEXT_INPUT,
        category=NodeCategory.ELEMENT,
        description="Single or multi-line free text field",
        config_model=models.PlainTextInputConfig,
        output_types=("plain_text_input",),
        constraints=NodeConstraints(field_limits=_PLACEHOLDER_LIMITS),
    ),
    NodeKind.EMAIL_INPUT: NodeMeta(
        kind=NodeKind.EMAIL_INPUT,
        category=NodeCategory.ELEMENT,
        description="Email address field",
        config_model=models.EmailInputConfig,
        output_types=("email_text_input",),
        constraints=_PICKER_CONSTRAINTS,
    ),
    NodeKind.CHECKBOXES: NodeMeta(
        kind=NodeKind.CHECKBOXES,
        category=NodeCategory.ELEMENT,
        description="Group of checkboxes with markdown labels",
        config_model=models.ChoiceListConfig,
        output_types=("checkboxes",),
        constraints=_CHOICE_CONSTRAINTS,
    ),
    NodeKind.RADIO_BUTTONS: NodeMeta(
        kind=NodeKind.RADIO_BUTTONS,
        category=NodeCategory.ELEMENT,
        description="Group of mutually exclusive radio buttons",
        config_model=models.ChoiceListConfig,
        output_types=("radio_buttons",),
        constraints=_CHOICE_CONSTRAINTS,
    ),
    NodeKind.IMAGE_ELEMENT: NodeMeta(
        kind=NodeKind.IMAGE_ELEMENT,
        category=NodeCategory.ELEMENT,
        description="Inline image used as an accessory or context entry",
        config_model=models.ImageElementConfig,
        output_types=("image",),
        constraints=NodeConstraints(field_limits=(("url", 3000), ("alt", 2000))),
    ),
    NodeKind.TIMEZONE_PICKER: NodeMeta(
        kind=NodeKind.TIMEZONE_PICKER,
        category=NodeCategory.ELEMENT,
        description="Static select of IANA zones grouped by region",
        config_model=models.TimezonePickerConfig,
        output_types=("static_select",),
        constraints=_SELECT_CONSTRAINTS,
    ),
    NodeKind.COUNTRY_SELECT: NodeMeta(
        kind=NodeKind.COUNTRY_SELECT,
        category=NodeCategory.ELEMENT,
        description="Static select of countries grouped by first letter",
        config_model=models.CountrySelectConfig,
        output_types=("static_select",),
        constraints=_SELECT_CONSTRAINTS,
    ),
    # === RICH TEXT ===
    NodeKind.RICH_TEXT_SECTION: NodeMeta(
        kind=NodeKind.RICH_TEXT_SECTION,
        category=NodeCategory.RICH_TEXT,
        description="Paragraph of inline rich text elements",
        config_model=models.RichTextContainerConfig,
        output_types=("rich_text_section",),
        constraints=_RICH_TEXT_CONTAINER,
    ),
    NodeKind.RICH_TEXT_LIST: NodeMeta(
        kind=NodeKind.RICH_TEXT_LIST,
        category=NodeCategory.RICH_TEXT,
        description="Bulleted or ordered list of rich text sections",
        config_model=models.RichTextListConfig,
        output_types=("rich_text_list",),
        constraints=_RICH_TEXT_CONTAINER,
    ),
    NodeKind.RICH_TEXT_PREFORMATTED: NodeMeta(
        kind=NodeKind.RICH_TEXT_PREFORMATTED,
        category=NodeCategory.RICH_TEXT,
        description="Code block of inline rich text elements",
        config_model=models.RichTextContainerConfig,
        output_types=("rich_text_preformatted",),
        constraints=_RICH_TEXT_CONTAINER,
    ),
    NodeKind.RICH_TEXT_QUOTE: NodeMeta(
        kind=NodeKind.RICH_TEXT_QUOTE,
        category=NodeCategory.RICH_TEXT,
        description="Block quote of inline rich text elements",
        config_model=models.RichTextContainerConfig,
        output_types=("rich_text_quote",),
        constraints=_RICH_TEXT_CONTAINER,
    ),
    NodeKind.TEXT: NodeMeta(
        kind=NodeKind.TEXT,
        category=NodeCategory.RICH_TEXT,
        description="Styled run of text",
        config_model=models.TextElementConfig,
        output_types=("text",),
    ),
    NodeKind.LINK: NodeMeta(
        kind=NodeKind.LINK,
        category=NodeCategory.RICH_TEXT,
        description="Hyperlink with optional display text",
        config_model=models.LinkElementConfig,
        output_types=("link",),
    ),
    NodeKind.EMOJI: NodeMeta(
        kind=NodeKind.EMOJI,
        category=NodeCategory.RICH_TEXT,
        description="Emoji by name",
        config_model=models.EmojiElementConfig,
        output_types=("emoji",),
    ),
    NodeKind.CHANNEL: NodeMeta(
        kind=NodeKind.CHANNEL,
        category=NodeCategory.RICH_TEXT,
        description="Channel mention",
        config_model=models.ChannelElementConfig,
        output_types=("channel",),
    ),
    NodeKind.USER: NodeMeta(
        kind=NodeKind.USER,
        category=NodeCategory.RICH_TEXT,
        description="User mention",
        config_model=models.UserElementConfig,
        output_types=("user",),
    ),
    NodeKind.USERGROUP: NodeMeta(
        kind=NodeKind.USERGROUP,
        category=NodeCategory.RICH_TEXT,
        description="User group mention",
        config_model=models.UsergroupElementConfig,
        output_types=("usergroup",),
    ),
    # === SURFACES ===
    NodeKind.VIEW: NodeMeta(
        kind=NodeKind.VIEW,
        category=NodeCategory.SURFACE,
        description="Modal or home tab document holding up to 100 blocks",
        config_model=models.ViewConfig,
        output_types=("modal", "home"),
        constraints=NodeConstraints(
            min_items=1,
            max_items=100,
            text_limit=24,
            field_limits=(("callback_id", 255), ("metadata", 3000)),
        ),
    ),
}


# === LOOKUP ===


def get_node_meta(kind: NodeKind | str) -> NodeMeta:
    """Get metadata for a node kind.

    Args:
        kind: The kind, or its string value.

    Returns:
        NodeMeta for the kind.

    Raises:
        ShapeViolation: If the kind is not registered.
    """
    try:
        return NODE_REGISTRY[NodeKind(kind)]
    except ValueError as e:
        raise ShapeViolation(f"Unknown node kind: {kind}", field="kind") from e


def get_constraints(kind: NodeKind | str) -> NodeConstraints:
    """Get size rules for a node kind."""
    return get_node_meta(kind).constraints


def get_kinds_by_category(category: NodeCategory | str) -> list[NodeKind]:
    """Get all node kinds in a category, in registry order."""
    wanted = NodeCategory(category)
    return [meta.kind for meta in NODE_REGISTRY.values() if meta.category == wanted]


def export_config_schema(kind: NodeKind | str) -> dict[str, Any]:
    """Export the JSON Schema of a kind's configuration model."""
    return get_node_meta(kind).config_model.model_json_schema()


# === CONFIG PARSING ===


def _describe_error(error: Mapping[str, Any]) -> tuple[str, str]:
    loc = ".".join(str(part) for part in error.get("loc", ())) or "config"
    if error.get("type") == "extra_forbidden":
        return loc, f"Unrecognized option: {loc}"
    return loc, f"Invalid value for {loc}: {error.get('msg')}"


def parse_config(model: type[ConfigT], fields: Mapping[str, Any]) -> ConfigT:
    """Parse builder keyword fields into a configuration model.

    Args:
        model: Configuration model class for the node kind.
        fields: Caller-supplied keyword fields.

    Returns:
        Frozen model instance.

    Raises:
        ShapeViolation: For unrecognized keys or wrongly typed values. Only
            the first pydantic error is reported.
    """
    try:
        return model.model_validate(dict(fields))
    except ValidationError as e:
        loc, message = _describe_error(e.errors()[0])
        raise ShapeViolation(message, field=loc) from e


# === COMPOSITION OBJECTS ===


def mrkdwn(text: str) -> dict[str, Any]:
    """Build a ``mrkdwn`` text object."""
    return {"type": "mrkdwn", "text": text}


def placeholder_object(
    text: str | None, emoji: bool | None = None
) -> dict[str, Any] | None:
    """Build a placeholder text object, or None when there is no text."""
    if not text:
        return None
    return plain_text(text, emoji=emoji)


def confirm_object(dialog: models.ConfirmDialog | None) -> dict[str, Any] | None:
    """Build a confirm composition object from a dialog config.

    Returns None when no dialog was given. The dialog must already be
    validated.
    """
    if dialog is None or not dialog.model_dump(exclude_none=True):
        return None
    return {
        "title": plain_text(dialog.title),
        "text": plain_text(dialog.description),
        "confirm": plain_text(dialog.confirm_text),
        "deny": plain_text(dialog.cancel_text),
    }


def compact(node: dict[str, Any]) -> dict[str, Any]:
    """Drop absent keys: None and empty strings. False and zero are kept."""
    return {
        key: value
        for key, value in node.items()
        if value is not None and value != ""
    }


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
    # Parsing
    "parse_config",
    # Composition
    "mrkdwn",
    "placeholder_object",
    "confirm_object",
    "compact",
]
