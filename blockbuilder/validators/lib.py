"""Per-kind node validators.

Every validator takes the parsed configuration model of its node kind,
returns None when the configuration is acceptable, and raises the first
ConstraintViolation it finds otherwise. Limits come from the node registry.
Validators never log.
"""

from collections.abc import Mapping
from typing import Any

from blockbuilder.constraints import (
    IDENTIFIER_LIMIT,
    OPTION_TEXT_LIMIT,
    OPTION_URL_LIMIT,
    BoundViolation,
    RequiredFieldViolation,
    ShapeViolation,
    require_bounded_array,
    require_choice,
    require_identifier,
    require_option,
    require_option_list,
    require_positive_int,
    require_serialized_text,
    require_text,
)
from blockbuilder.nodes import NodeKind, get_constraints, models
from blockbuilder.times import get_zone, parse_clock_time, require_iso_date

BUTTON_STYLES = ("primary", "danger")
CONVERSATION_FILTERS = ("im", "mpim", "private", "public")
RICH_TEXT_CONTAINERS = (
    "rich_text_section",
    "rich_text_list",
    "rich_text_preformatted",
    "rich_text_quote",
)
TEXT_INPUT_LIMIT = 3000

# Confirm dialog field limits
DIALOG_LIMITS = (
    ("title", 100),
    ("description", 300),
    ("confirm_text", 30),
    ("cancel_text", 30),
)


# === SHARED CHECKS ===


def _require_present(value: Any, field: str) -> None:
    if value is None:
        raise RequiredFieldViolation(f"{field} is required", field=field)


def _require_typed_nodes(nodes: list[Any], field: str) -> None:
    for index, node in enumerate(nodes):
        if not isinstance(node, Mapping) or not node.get("type"):
            raise ShapeViolation(
                f"Expected {field} {index} to be an object with a type",
                field=field,
                position=index,
            )


def validate_block_id(block_id: str | None) -> None:
    require_identifier(block_id, optional=True)


def validate_action_id(action_id: str | None) -> None:
    require_identifier(
        action_id, limit=IDENTIFIER_LIMIT, optional=True, field="action_id"
    )


def validate_placeholder(placeholder: str | None, kind: NodeKind) -> None:
    require_text(
        placeholder,
        limit=get_constraints(kind).limit("placeholder"),
        optional=True,
        field="placeholder",
    )


def validate_confirm_dialog(dialog: models.ConfirmDialog | None) -> None:
    """Require all four dialog fields together, or none of them.

    An empty dialog counts as absent.

    Raises:
        RequiredFieldViolation: A dialog is given but a field is missing.
        BoundViolation: A field exceeds its limit.
    """
    if dialog is None or not dialog.model_dump(exclude_none=True):
        return
    for name, limit in DIALOG_LIMITS:
        require_text(getattr(dialog, name), limit=limit, field=f"dialog.{name}")


def validate_max_selected_items(value: int | None) -> None:
    if value is not None:
        require_positive_int(value, field="max_selected_items")


def _validate_flat_options(options: Any, kind: NodeKind) -> None:
    bounds = get_constraints(kind)
    require_bounded_array(
        options, max_len=bounds.max_items, min_len=bounds.min_items, field="options"
    )
    for index, option in enumerate(options):
        require_option(option, index)


def _validate_option_groups(options: Any, kind: NodeKind) -> None:
    require_option_list(options, max_count=get_constraints(kind).max_items)
    for index, group in enumerate(options):
        if not isinstance(group, Mapping) or not isinstance(
            group.get("options"), (list, tuple)
        ):
            raise ShapeViolation(
                f"Expected option group {index} to have label and options",
                field="option_groups",
                position=index,
            )
        require_text(
            group.get("label"),
            limit=OPTION_TEXT_LIMIT,
            field="option_groups.label",
            position=index,
        )


# === LAYOUT BLOCKS ===


def validate_actions(config: models.ActionsConfig) -> None:
    bounds = get_constraints(NodeKind.ACTIONS)
    _require_present(config.elements, "elements")
    require_bounded_array(config.elements, max_len=bounds.max_items, field="elements")
    _require_typed_nodes(config.elements, "element")
    validate_block_id(config.block_id)


def _validate_context_entry(entry: Any, index: int) -> None:
    if isinstance(entry, str):
        require_text(entry, position=index)
        return
    if not isinstance(entry, Mapping):
        raise ShapeViolation(
            f"Expected context entry {index} to be a string or an object",
            field="text",
            position=index,
        )
    image = entry.get("image")
    if not entry.get("text") and not image:
        raise RequiredFieldViolation(
            f"Expected context entry {index} to have text or an image",
            field="text",
            position=index,
        )
    require_text(entry.get("text"), optional=True, position=index)
    if image:
        if not isinstance(image, Mapping):
            raise ShapeViolation(
                f"Expected context image {index} to be an object",
                field="image",
                position=index,
            )
        image_limits = get_constraints(NodeKind.IMAGE_ELEMENT)
        require_text(
            image.get("url"),
            limit=image_limits.limit("url"),
            field="image.url",
            position=index,
        )
        require_text(
            image.get("alt"),
            limit=image_limits.limit("alt"),
            optional=True,
            field="image.alt",
            position=index,
        )


def validate_context(config: models.ContextConfig) -> None:
    """Validate a context block.

    Text may be one string, a list of strings, or a list of
    ``{text?, image?: {url, alt?}}`` entries.
    """
    bounds = get_constraints(NodeKind.CONTEXT)
    _require_present(config.text, "text")
    if isinstance(config.text, str):
        require_text(config.text, limit=bounds.text_limit)
    else:
        require_bounded_array(config.text, max_len=bounds.max_items, field="text")
        for index, entry in enumerate(config.text):
            _validate_context_entry(entry, index)
    validate_block_id(config.block_id)


def validate_divider(config: models.DividerConfig) -> None:
    validate_block_id(config.block_id)


def validate_fields(config: models.FieldsConfig) -> None:
    bounds = get_constraints(NodeKind.FIELDS)
    _require_present(config.fields, "fields")
    require_bounded_array(config.fields, max_len=bounds.max_items, field="fields")
    for index, text in enumerate(config.fields):
        require_text(text, limit=bounds.text_limit, field="field", position=index)
    validate_block_id(config.block_id)


def validate_header(config: models.HeaderConfig) -> None:
    require_text(config.text, limit=get_constraints(NodeKind.HEADER).text_limit)
    validate_block_id(config.block_id)


def validate_image(config: models.ImageConfig | models.ImageElementConfig) -> None:
    """Validate an image block or image element."""
    is_block = isinstance(config, models.ImageConfig)
    limits = get_constraints(NodeKind.IMAGE if is_block else NodeKind.IMAGE_ELEMENT)
    require_text(config.url, limit=limits.limit("url"), field="url")
    require_text(config.alt, limit=limits.limit("alt"), field="alt")
    if is_block:
        require_text(
            config.title, limit=limits.limit("title"), optional=True, field="title"
        )
        validate_block_id(config.block_id)


def validate_section(config: models.SectionConfig) -> None:
    require_text(config.text, limit=get_constraints(NodeKind.MARKDOWN).text_limit)
    if config.accessory is not None:
        _require_typed_nodes([config.accessory], "accessory")
    validate_block_id(config.block_id)


def validate_rich_text(config: models.RichTextConfig) -> None:
    _require_present(config.elements, "elements")
    require_bounded_array(config.elements, max_len=None, field="elements")
    _require_typed_nodes(config.elements, "element")
    for index, element in enumerate(config.elements):
        require_choice(
            element["type"], RICH_TEXT_CONTAINERS, field=f"elements.{index}.type"
        )
    validate_block_id(config.block_id)


def validate_input(config: models.InputBlockConfig) -> None:
    """Validate the wrapper fields of an input block."""
    limits = get_constraints(NodeKind.INPUT)
    validate_block_id(config.block_id)
    require_text(config.hint, limit=limits.limit("hint"), optional=True, field="hint")
    if config.element is None:
        raise RequiredFieldViolation("element is required", field="element")
    _require_typed_nodes([config.element], "element")
    require_text(config.label, limit=limits.text_limit, field="label")


# === INTERACTIVE ELEMENTS ===


def validate_button(config: models.ButtonConfig) -> None:
    limits = get_constraints(NodeKind.BUTTON)
    require_text(config.text, limit=limits.text_limit)
    require_text(config.url, limit=limits.limit("url"), optional=True, field="url")
    validate_action_id(config.action_id)
    require_serialized_text(config.value, limit=limits.limit("value"), field="value")
    if config.style is not None:
        require_choice(config.style, BUTTON_STYLES, field="style")
    validate_confirm_dialog(config.dialog)


def validate_static_select(config: models.StaticSelectConfig) -> None:
    """Validate a static select, flat or grouped."""
    validate_placeholder(config.placeholder, NodeKind.STATIC_SELECT)
    validate_action_id(config.action_id)
    _require_present(config.options, "options")
    if config.use_group:
        _validate_option_groups(config.options, NodeKind.STATIC_SELECT)
    else:
        _validate_flat_options(config.options, NodeKind.STATIC_SELECT)
    if config.multi:
        validate_max_selected_items(config.max_selected_items)
    validate_confirm_dialog(config.dialog)


def validate_users_select(config: models.UsersSelectConfig) -> None:
    validate_placeholder(config.placeholder, NodeKind.USERS_SELECT)
    validate_action_id(config.action_id)
    users = config.initial_users
    if isinstance(users, list):
        for index, user in enumerate(users):
            require_identifier(user, field="initial_users", position=index)
    else:
        require_identifier(users, optional=True, field="initial_users")
    if config.multi:
        validate_max_selected_items(config.max_selected_items)
    validate_confirm_dialog(config.dialog)


def validate_conversations_select(config: models.ConversationsSelectConfig) -> None:
    validate_placeholder(config.placeholder, NodeKind.CONVERSATIONS_SELECT)
    validate_action_id(config.action_id)
    require_bounded_array(config.filter, max_len=None, field="filter")
    for index, kind in enumerate(config.filter):
        require_choice(kind, CONVERSATION_FILTERS, field=f"filter.{index}")
    conversations = config.initial_conversations
    if isinstance(conversations, list):
        for index, conversation in enumerate(conversations):
            require_identifier(
                conversation, field="initial_conversations", position=index
            )
    else:
        require_identifier(conversations, optional=True, field="initial_conversations")
    if config.multi:
        validate_max_selected_items(config.max_selected_items)


def validate_external_select(config: models.ExternalSelectConfig) -> None:
    validate_placeholder(config.placeholder, NodeKind.EXTERNAL_SELECT)
    validate_action_id(config.action_id)
    if config.min_query_length is not None:
        require_positive_int(config.min_query_length, field="min_query_length")
    initial = config.initial_options
    if isinstance(initial, Mapping):
        require_option(initial, 0)
    elif initial is not None:
        for index, option in enumerate(initial):
            require_option(option, index)
    if config.multi:
        validate_max_selected_items(config.max_selected_items)


def validate_overflow(config: models.OverflowConfig) -> None:
    validate_action_id(config.action_id)
    _require_present(config.options, "options")
    _validate_flat_options(config.options, NodeKind.OVERFLOW)
    validate_confirm_dialog(config.dialog)


def validate_datepicker(config: models.DatepickerConfig) -> None:
    validate_placeholder(config.placeholder, NodeKind.DATEPICKER)
    validate_action_id(config.action_id)
    if config.initial_date:
        require_iso_date(config.initial_date)


def validate_timepicker(config: models.TimepickerConfig) -> None:
    validate_placeholder(config.placeholder, NodeKind.TIMEPICKER)
    validate_action_id(config.action_id)
    if config.timezone:
        get_zone(config.timezone)
    if config.initial_time:
        parse_clock_time(config.initial_time)


def validate_plain_text_input(config: models.PlainTextInputConfig) -> None:
    validate_placeholder(config.placeholder, NodeKind.PLAIN_TEXT_INPUT)
    validate_action_id(config.action_id)
    if config.min_length is not None:
        require_positive_int(
            config.min_length, field="min_length", maximum=TEXT_INPUT_LIMIT, minimum=0
        )
    if config.max_length is not None:
        require_positive_int(
            config.max_length, field="max_length", maximum=TEXT_INPUT_LIMIT
        )
    if (
        config.min_length is not None
        and config.max_length is not None
        and config.min_length > config.max_length
    ):
        raise BoundViolation(
            f"Expected min_length to be at most max_length ({config.max_length})."
            f" Received: {config.min_length}",
            field="min_length",
            limit=config.max_length,
        )
    require_text(
        config.initial_value,
        limit=config.max_length or TEXT_INPUT_LIMIT,
        optional=True,
        field="initial_value",
    )


def validate_email_input(config: models.EmailInputConfig) -> None:
    validate_placeholder(config.placeholder, NodeKind.EMAIL_INPUT)
    validate_action_id(config.action_id)
    require_text(config.initial_value, optional=True, field="initial_value")


def validate_choice_list(config: models.ChoiceListConfig, kind: NodeKind) -> None:
    """Validate checkboxes or radio buttons."""
    validate_action_id(config.action_id)
    _require_present(config.options, "options")
    _validate_flat_options(config.options, kind)
    validate_confirm_dialog(config.dialog)


def validate_reference_select(
    config: models.TimezonePickerConfig | models.CountrySelectConfig,
    kind: NodeKind,
) -> None:
    """Validate the picker fields shared by the time-zone and country selects.

    The generated option groups are validated separately as a static select.
    """
    validate_placeholder(config.placeholder, kind)
    validate_action_id(config.action_id)
    if isinstance(config, models.TimezonePickerConfig):
        field, initial = "initial_timezone", config.initial_timezone
        records, keys = config.timezones, ("zoneName",)
    else:
        field, initial = "initial_country", config.initial_country
        records, keys = config.countries, ("id", "value")
    require_text(initial, limit=OPTION_TEXT_LIMIT, optional=True, field=field)
    for index, record in enumerate(records or ()):
        if not isinstance(record, Mapping) or any(
            not isinstance(record.get(key), str) for key in keys
        ):
            raise ShapeViolation(
                f"Expected reference record {index} to have string fields "
                f"{', '.join(keys)}",
                field="records",
                position=index,
            )


# === RICH TEXT ===


def validate_rich_text_container(
    config: models.RichTextContainerConfig, kind: NodeKind
) -> None:
    """Validate a rich text section, list, preformatted block or quote.

    List items must be rich text sections.
    """
    _require_present(config.elements, "elements")
    require_bounded_array(
        config.elements,
        max_len=None,
        min_len=get_constraints(kind).min_items,
        field="elements",
    )
    _require_typed_nodes(config.elements, "element")
    if config.border is not None:
        require_positive_int(config.border, field="border", minimum=0)
    if isinstance(config, models.RichTextListConfig):
        for index, element in enumerate(config.elements):
            require_choice(
                element["type"], ("rich_text_section",), field=f"elements.{index}.type"
            )
        if config.indent is not None:
            require_positive_int(config.indent, field="indent", minimum=0)
        if config.offset is not None:
            require_positive_int(config.offset, field="offset", minimum=0)


def validate_text_element(config: models.TextElementConfig) -> None:
    require_text(config.text)


def validate_link_element(config: models.LinkElementConfig) -> None:
    require_text(config.url, limit=OPTION_URL_LIMIT, field="url")
    require_text(config.text, optional=True)


def validate_emoji_element(config: models.EmojiElementConfig) -> None:
    require_text(config.name, limit=IDENTIFIER_LIMIT, field="name")


def validate_mention(
    config: models.ChannelElementConfig
    | models.UserElementConfig
    | models.UsergroupElementConfig,
) -> None:
    """Validate a channel, user or user group mention."""
    match config:
        case models.ChannelElementConfig(channel_id=ident):
            field = "channel_id"
        case models.UserElementConfig(user_id=ident):
            field = "user_id"
        case models.UsergroupElementConfig(usergroup_id=ident):
            field = "usergroup_id"
    require_identifier(ident, field=field)


__all__ = [
    "BUTTON_STYLES",
    "CONVERSATION_FILTERS",
    "RICH_TEXT_CONTAINERS",
    "DIALOG_LIMITS",
    # Shared
    "validate_block_id",
    "validate_action_id",
    "validate_placeholder",
    "validate_confirm_dialog",
    "validate_max_selected_items",
    # Blocks
    "validate_actions",
    "validate_context",
    "validate_divider",
    "validate_fields",
    "validate_header",
    "validate_image",
    "validate_section",
    "validate_rich_text",
    "validate_input",
    # Elements
    "validate_button",
    "validate_static_select",
    "validate_users_select",
    "validate_conversations_select",
    "validate_external_select",
    "validate_overflow",
    "validate_datepicker",
    "validate_timepicker",
    "validate_plain_text_input",
    "validate_email_input",
    "validate_choice_list",
    "validate_reference_select",
    # Rich text
    "validate_rich_text_container",
    "validate_text_element",
    "validate_link_element",
    "validate_emoji_element",
    "validate_mention",
]
