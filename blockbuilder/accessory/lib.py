"""Section accessory builders.

An accessory is an element shown beside a section's text. Each builder
returns ``{"accessory": element}`` so the result can be spread into
:func:`blockbuilder.blocks.markdown` keyword fields::

    markdown(text="Pick one", **accessory.static_select(options=...))

Menu-style accessories get a default placeholder when none is given.
"""

from collections.abc import Callable
from typing import Any

from blockbuilder import elements

Builder = Callable[..., dict[str, Any]]


def _wrap(build: Builder, fields: dict[str, Any], **defaults: Any) -> dict[str, Any]:
    for key, value in defaults.items():
        if fields.get(key) is None:
            fields[key] = value
    return {"accessory": build(**fields)}


def button(**fields: Any) -> dict[str, Any]:
    """Button accessory; see :func:`blockbuilder.elements.button`."""
    return _wrap(elements.button, fields)


def static_select(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.static_select, fields, placeholder="Pick an option")


def overflow(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.overflow, fields)


def image(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.image, fields)


def conversations_select(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.conversations_select, fields, placeholder="Select channel")


def datepicker(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.datepicker, fields, placeholder="Select a date")


def users_select(**fields: Any) -> dict[str, Any]:
    """Users select accessory.

    Produces ``users_select`` or ``multi_users_select`` like the bare
    element.
    """
    return _wrap(elements.users_select, fields, placeholder="Select users")


def checkboxes(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.checkboxes, fields)


def radio_buttons(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.radio_buttons, fields)


def timepicker(**fields: Any) -> dict[str, Any]:
    return _wrap(elements.timepicker, fields, placeholder="Select a time")


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
