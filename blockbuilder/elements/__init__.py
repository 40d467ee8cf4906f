"""Interactive element builders."""

from .lib import (
    button,
    checkboxes,
    conversations_select,
    country_select,
    datepicker,
    email_input,
    external_select,
    image,
    overflow,
    plain_text_input,
    radio_buttons,
    static_select,
    timepicker,
    timezone_picker,
    users_select,
)

__all__ = [
    # Buttons and menus
    "button",
    "static_select",
    "overflow",
    "checkboxes",
    "radio_buttons",
    # Dynamic selects
    "users_select",
    "conversations_select",
    "external_select",
    "timezone_picker",
    "country_select",
    # Pickers and text fields
    "datepicker",
    "timepicker",
    "plain_text_input",
    "email_input",
    "image",
]
