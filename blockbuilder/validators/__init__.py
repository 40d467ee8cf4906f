"""Per-kind node validators."""

from .lib import (
    BUTTON_STYLES,
    CONVERSATION_FILTERS,
    DIALOG_LIMITS,
    RICH_TEXT_CONTAINERS,
    validate_actions,
    validate_action_id,
    validate_block_id,
    validate_button,
    validate_choice_list,
    validate_confirm_dialog,
    validate_context,
    validate_conversations_select,
    validate_datepicker,
    validate_divider,
    validate_email_input,
    validate_emoji_element,
    validate_external_select,
    validate_fields,
    validate_header,
    validate_image,
    validate_input,
    validate_link_element,
    validate_max_selected_items,
    validate_mention,
    validate_overflow,
    validate_placeholder,
    validate_plain_text_input,
    validate_reference_select,
    validate_rich_text,
    validate_rich_text_container,
    validate_section,
    validate_static_select,
    validate_text_element,
    validate_timepicker,
    validate_users_select,
)

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
