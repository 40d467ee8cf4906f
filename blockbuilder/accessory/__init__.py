"""Section accessory builders."""

from .lib import (
    button,
    checkboxes,
    conversations_select,
    datepicker,
    image,
    overflow,
    radio_buttons,
    static_select,
    timepicker,
    users_select,
)

__all__ = [
    "button",
    "static_select",
    "overflow",
    "image",
    "conversations_select",
    "datepicker",
    "users_select",
    "checkboxes",
    "radio_buttons",
    "timepicker",
]
