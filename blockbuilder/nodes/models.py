"""Configuration structures for every node builder.

Each builder parses its keyword fields into one of these models before
validation. Models are frozen and reject unrecognized keys. Presence and
length rules are left to the node validators so that every failure uses
the same violation taxonomy.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class NodeConfig(BaseModel):
    """Base for all builder configuration models."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class BlockConfig(NodeConfig):
    """Fields shared by every top-level block."""

    block_id: str | None = Field(
        None, description="Identifier unique within the document (max 255)"
    )


# === COMPOSITION ===


class ConfirmDialog(NodeConfig):
    """Confirmation dialog shown before an interactive element fires.

    All four fields are given together or not at all.
    """

    title: str | None = Field(None, description="Dialog title (max 100)")
    description: str | None = Field(None, description="Dialog body (max 300)")
    confirm_text: str | None = Field(None, description="Confirm button (max 30)")
    cancel_text: str | None = Field(None, description="Cancel button (max 30)")


class TextStyle(NodeConfig):
    """Inline style flags for rich text text and link elements."""

    bold: bool | None = None
    italic: bool | None = None
    strike: bool | None = None
    code: bool | None = None


class MentionStyle(NodeConfig):
    """Inline style flags for rich text mentions."""

    bold: bool | None = None
    italic: bool | None = None
    strike: bool | None = None
    highlight: bool | None = None
    client_highlight: bool | None = None
    unlink: bool | None = None


# === LAYOUT BLOCKS ===


class ActionsConfig(BlockConfig):
    elements: list[Any] | None = Field(None, description="Interactive elements (1-25)")


class ContextConfig(BlockConfig):
    text: str | list[Any] | None = Field(
        None,
        description="A string, a list of strings, or a list of {text, image} entries",
    )


class DividerConfig(BlockConfig):
    pass


class FieldsConfig(BlockConfig):
    fields: list[Any] | None = Field(None, description="Markdown field texts (1-10)")


class HeaderConfig(BlockConfig):
    text: str | None = Field(None, description="Header text (max 150)")


class ImageConfig(BlockConfig):
    url: str | None = Field(None, description="Image URL (max 3000)")
    alt: str | None = Field("image", description="Alt text (max 2000)")
    title: str | None = Field(None, description="Optional title (max 2000)")


class SectionConfig(BlockConfig):
    text: str | None = Field(None, description="Section text (max 3000)")
    accessory: dict[str, Any] | None = Field(
        None, description="Element shown beside the text"
    )


class RichTextConfig(BlockConfig):
    elements: list[Any] | None = Field(None, description="Rich text containers")


class InputBlockConfig(BlockConfig):
    """Wrapper fields of an input block."""

    label: str | None = Field(None, description="Input label (max 2000)")
    optional: bool = False
    dispatch_action: bool = False
    hint: str | None = Field(None, description="Hint below the input (max 2000)")
    element: dict[str, Any] | None = None


# === INTERACTIVE ELEMENTS ===


class ElementConfig(NodeConfig):
    """Fields shared by interactive elements."""

    action_id: str | None = Field(None, description="Action identifier (max 255)")


class PlaceholderElementConfig(ElementConfig):
    placeholder: str | None = Field(None, description="Placeholder text (max 150)")
    focus_on_load: bool = False


class ButtonConfig(ElementConfig):
    text: str | None = Field(None, description="Button label (max 75)")
    value: str | dict[str, Any] | list[Any] | None = Field(
        None, description="Payload sent on click, serialized if structured (max 2000)"
    )
    style: str | None = Field(None, description="primary or danger")
    url: str | None = Field(None, description="URL opened on click (max 3000)")
    dialog: ConfirmDialog | None = None


class StaticSelectConfig(PlaceholderElementConfig):
    options: list[Any] | None = Field(
        None, description="Options, or {label, options} groups when use_group is set"
    )
    use_group: bool = False
    initial_selection: Any = Field(
        None, description="Value (single) or list of values (multi) to preselect"
    )
    multi: bool = False
    max_selected_items: int | None = None
    dialog: ConfirmDialog | None = None


class UsersSelectConfig(PlaceholderElementConfig):
    initial_users: str | list[str] | None = None
    multi: bool = False
    max_selected_items: int | None = None
    dialog: ConfirmDialog | None = None


class ConversationsSelectConfig(PlaceholderElementConfig):
    initial_conversations: str | list[str] | None = None
    filter: Any = Field(
        ("public", "private"),
        description="Conversation types: im, mpim, private, public",
    )
    multi: bool = False
    exclude_bot_users: bool = True
    exclude_external_shared_channels: bool = True
    max_selected_items: int | None = None


class ExternalSelectConfig(PlaceholderElementConfig):
    initial_options: list[Any] | dict[str, Any] | None = Field(
        None, description="Option record(s) shown before the first query"
    )
    multi: bool = False
    min_query_length: int | None = None
    max_selected_items: int | None = None


class OverflowConfig(ElementConfig):
    options: list[Any] | None = Field(None, description="Menu items (1-5)")
    dialog: ConfirmDialog | None = None


class DatepickerConfig(PlaceholderElementConfig):
    initial_date: str | None = Field(None, description="Date in YYYY-MM-DD format")


class TimepickerConfig(PlaceholderElementConfig):
    initial_time: str | None = Field(None, description="Time in hh:mm a format")
    timezone: str | None = Field(None, description="IANA zone for the default time")


class PlainTextInputConfig(PlaceholderElementConfig):
    initial_value: str | None = None
    multiline: bool = False
    min_length: int | None = None
    max_length: int | None = None
    dispatch_on_enter: bool = False


class EmailInputConfig(PlaceholderElementConfig):
    initial_value: str | None = None


class ChoiceListConfig(ElementConfig):
    """Checkbox and radio button groups."""

    options: list[Any] | None = Field(None, description="Choices (1-10)")
    initial_selection: Any = None
    dialog: ConfirmDialog | None = None


class ImageElementConfig(NodeConfig):
    url: str | None = Field(None, description="Image URL (max 3000)")
    alt: str | None = Field("image", description="Alt text (max 2000)")


class TimezonePickerConfig(PlaceholderElementConfig):
    initial_timezone: str | None = None
    timezones: list[Any] | tuple[Any, ...] | None = Field(
        None, description="{zoneName} records; loaded from reference data if omitted"
    )


class CountrySelectConfig(PlaceholderElementConfig):
    initial_country: str | None = None
    countries: list[Any] | tuple[Any, ...] | None = Field(
        None, description="{id, value} records; loaded from reference data if omitted"
    )


# === RICH TEXT ===


class RichTextContainerConfig(NodeConfig):
    elements: list[Any] | None = None
    border: int | None = None


class RichTextListConfig(RichTextContainerConfig):
    style: Literal["bullet", "ordered"] = "bullet"
    indent: int | None = None
    offset: int | None = None


class TextElementConfig(NodeConfig):
    text: str | None = None
    style: TextStyle | None = None


class LinkElementConfig(NodeConfig):
    url: str | None = None
    text: str | None = None
    unsafe: bool | None = None
    style: TextStyle | None = None


class EmojiElementConfig(NodeConfig):
    name: str | None = None


class ChannelElementConfig(NodeConfig):
    channel_id: str | None = None
    style: MentionStyle | None = None


class UserElementConfig(NodeConfig):
    user_id: str | None = None
    style: MentionStyle | None = None


class UsergroupElementConfig(NodeConfig):
    usergroup_id: str | None = None
    style: MentionStyle | None = None


# === SURFACES ===


class ViewConfig(NodeConfig):
    """Top-level document fields."""

    type: Literal["modal", "home"] = "modal"
    blocks: list[Any] | None = None
    title: str | None = Field(None, description="Modal title (max 24)")
    submit_text: str | None = Field(None, description="Modal submit label (max 24)")
    close_text: str | None = Field(None, description="Modal close label (max 24)")
    callback_id: str | None = Field(None, description="Callback identifier (max 255)")
    metadata: str | dict[str, Any] | list[Any] | None = Field(
        None, description="Private metadata, serialized if structured (max 3000)"
    )


__all__ = [
    "NodeConfig",
    "BlockConfig",
    "ConfirmDialog",
    "TextStyle",
    "MentionStyle",
    "ActionsConfig",
    "ContextConfig",
    "DividerConfig",
    "FieldsConfig",
    "HeaderConfig",
    "ImageConfig",
    "SectionConfig",
    "RichTextConfig",
    "InputBlockConfig",
    "ElementConfig",
    "PlaceholderElementConfig",
    "ButtonConfig",
    "StaticSelectConfig",
    "UsersSelectConfig",
    "ConversationsSelectConfig",
    "ExternalSelectConfig",
    "OverflowConfig",
    "DatepickerConfig",
    "TimepickerConfig",
    "PlainTextInputConfig",
    "EmailInputConfig",
    "ChoiceListConfig",
    "ImageElementConfig",
    "TimezonePickerConfig",
    "CountrySelectConfig",
    "RichTextContainerConfig",
    "RichTextListConfig",
    "TextElementConfig",
    "LinkElementConfig",
    "EmojiElementConfig",
    "ChannelElementConfig",
    "UserElementConfig",
    "UsergroupElementConfig",
    "ViewConfig",
]
