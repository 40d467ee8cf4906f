"""Input block builders.

Every builder here accepts the input wrapper fields (``label``,
``block_id``, ``optional``, ``dispatch_action``, ``hint``) together with
the fields of the wrapped element, splits them, builds and validates the
element first, then wraps it in an ``input`` block.
"""

from collections.abc import Callable
from typing import Any

from blockbuilder import elements
from blockbuilder.nodes import compact, models, parse_config
from blockbuilder.options import plain_text
from blockbuilder.validators import validate_input

INPUT_FIELDS = ("label", "block_id", "optional", "dispatch_action", "hint")


def input_block(**fields: Any) -> dict[str, Any]:
    """Wrap an already built element in an input block.

    Args:
        element: The element dict.
        label: Label text, required, at most 2000 characters.
        block_id: Optional block identifier.
        optional: Whether the user may leave the input empty.
        dispatch_action: Whether the element dispatches block actions.
        hint: Optional hint below the input, at most 2000 characters.
    """
    config = parse_config(models.InputBlockConfig, fields)
    validate_input(config)
    return compact(
        {
            "type": "input",
            "element": config.element,
            "label": plain_text(config.label, emoji=True),
            "optional": config.optional,
            "dispatch_action": config.dispatch_action,
            "block_id": config.block_id,
            "hint": plain_text(config.hint, emoji=True) if config.hint else None,
        }
    )


def split_fields(fields: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Separate input wrapper fields from element fields."""
    wrapper = {key: fields[key] for key in INPUT_FIELDS if key in fields}
    element = {key: value for key, value in fields.items() if key not in INPUT_FIELDS}
    return wrapper, element


def _wrapped(
    build: Callable[..., dict[str, Any]], fields: dict[str, Any]
) -> dict[str, Any]:
    wrapper, element_fields = split_fields(fields)
    return input_block(element=build(**element_fields), **wrapper)


def text_input(**fields: Any) -> dict[str, Any]:
    """Plain text input block.

    ``dispatch_action`` also makes the element dispatch on enter unless
    ``dispatch_on_enter`` is given explicitly.
    """
    fields.setdefault("dispatch_on_enter", bool(fields.get("dispatch_action")))
    return _wrapped(elements.plain_text_input, fields)


def static_select(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.static_select, fields)


def users_select(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.users_select, fields)


def conversations_select(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.conversations_select, fields)


def external_select(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.external_select, fields)


def radio_buttons(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.radio_buttons, fields)


def checkboxes(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.checkboxes, fields)


def datepicker(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.datepicker, fields)


def timepicker(**fields: Any) -> dict[str, Any]:
    """Time picker input block, defaulting to the next 5-minute boundary."""
    return _wrapped(elements.timepicker, fields)


def email(**fields: Any) -> dict[str, Any]:
    return _wrapped(elements.email_input, fields)


def timezone_picker(**fields: Any) -> dict[str, Any]:
    """Static select input of time zones grouped by region.

    Pass ``timezones=[{"zoneName": ...}]`` or configure
    ``BLOCKBUILDER_REFERENCE_DIR``.
    """
    return _wrapped(elements.timezone_picker, fields)


def country_select(**fields: Any) -> dict[str, Any]:
    """Static select input of countries grouped by letter range.

    Pass ``countries=[{"id": ..., "value": ...}]`` or configure
    ``BLOCKBUILDER_REFERENCE_DIR``.
    """
    return _wrapped(elements.country_select, fields)


__all__ = [
    "INPUT_FIELDS",
    "input_block",
    "split_fields",
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
