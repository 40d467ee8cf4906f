"""Input block builders."""

from .lib import (
    INPUT_FIELDS,
    checkboxes,
    conversations_select,
    country_select,
    datepicker,
    email,
    external_select,
    input_block,
    radio_buttons,
    split_fields,
    static_select,
    text_input,
    timepicker,
    timezone_picker,
    users_select,
)

__all__ = [
    # Wrapper
    "INPUT_FIELDS",
    "input_block",
    "split_fields",
    # Inputs
    "text_input",
    "static_select",
    "users_select",
    "conversations_select",
    "external_select",
    "radio_buttons",
    "checkboxes",
    "datepicker",
    "timepicker",
    "email",
    "timezone_picker",
    "country_select",
]
