"""Interactive element builders.

Each builder takes keyword fields, parses them into the kind's config
model, validates, and returns the bare element dict. Elements are wrapped
by :mod:`blockbuilder.inputs` (input blocks), :mod:`blockbuilder.accessory`
(section accessories) or placed directly in an actions block.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from blockbuilder.config import get_default_timezone
from blockbuilder.constraints import require_serialized_text
from blockbuilder.nodes import (
    NodeKind,
    compact,
    confirm_object,
    get_constraints,
    models,
    parse_config,
    placeholder_object,
)
from blockbuilder.options import (
    group_countries,
    group_timezones,
    normalize_options,
    option_object,
    plain_text,
    resolve_initial,
)
from blockbuilder.reference import load_countries, load_timezones
from blockbuilder.times import next_five_minute_boundary, parse_clock_time
from blockbuilder.validators import (
    validate_button,
    validate_choice_list,
    validate_conversations_select,
    validate_datepicker,
    validate_email_input,
    validate_external_select,
    validate_image,
    validate_overflow,
    validate_plain_text_input,
    validate_reference_select,
    validate_static_select,
    validate_timepicker,
    validate_users_select,
)

logger = logging.getLogger(__name__)


def _flag(value: bool) -> bool | None:
    """Keep a boolean field only when it is set."""
    return True if value else None


def _multi_type(base: str, multi: bool) -> str:
    return f"multi_{base}" if multi else base


def _as_list(value: str | Sequence[str]) -> list[str]:
    return [value] if isinstance(value, str) else list(value)


# === BUTTONS AND MENUS ===


def button(**fields: Any) -> dict[str, Any]:
    """Build a button element.

    Args:
        text: Label, at most 75 characters.
        value: Payload; mappings and lists are serialized to JSON.
        action_id: Optional action identifier.
        style: "primary" or "danger".
        url: URL opened on click.
        dialog: Optional confirm dialog fields.
    """
    config = parse_config(models.ButtonConfig, fields)
    validate_button(config)
    value = require_serialized_text(
        config.value, limit=get_constraints(NodeKind.BUTTON).limit("value")
    )
    return compact(
        {
            "type": "button",
            "text": plain_text(config.text, emoji=True),
            "value": value,
            "action_id": config.action_id,
            "style": config.style,
            "url": config.url,
            "confirm": confirm_object(config.dialog),
        }
    )


def static_select(**fields: Any) -> dict[str, Any]:
    """Build a static select, single or multi, flat or grouped.

    The initial selection is matched against option values by their string
    form. A multi select takes a list of values; a single select takes one
    value. A shape that does not fit the mode selects nothing.
    """
    config = parse_config(models.StaticSelectConfig, fields)
    validate_static_select(config)
    options = normalize_options(config.options, grouped=config.use_group)
    state = resolve_initial(
        options, config.initial_selection, grouped=config.use_group, multi=config.multi
    )
    element = {
        "type": _multi_type("static_select", config.multi),
        "placeholder": placeholder_object(config.placeholder),
        "option_groups" if config.use_group else "options": options,
        "action_id": config.action_id,
        "focus_on_load": _flag(config.focus_on_load),
        "max_selected_items": config.max_selected_items if config.multi else None,
        "confirm": confirm_object(config.dialog),
    }
    element.update(state.as_fields())
    return compact(element)


def overflow(**fields: Any) -> dict[str, Any]:
    """Build an overflow menu of up to five items, each with an optional url."""
    config = parse_config(models.OverflowConfig, fields)
    validate_overflow(config)
    return compact(
        {
            "type": "overflow",
            "options": [option_object(o, include_url=True) for o in config.options],
            "action_id": config.action_id,
            "confirm": confirm_object(config.dialog),
        }
    )


def checkboxes(**fields: Any) -> dict[str, Any]:
    """Build a checkbox group with markdown labels and descriptions."""
    config = parse_config(models.ChoiceListConfig, fields)
    validate_choice_list(config, NodeKind.CHECKBOXES)
    options = [
        option_object(o, text_type="mrkdwn", include_description=True)
        for o in config.options
    ]
    state = resolve_initial(options, config.initial_selection, multi=True)
    element = {
        "type": "checkboxes",
        "options": options,
        "action_id": config.action_id,
        "confirm": confirm_object(config.dialog),
    }
    element.update(state.as_fields())
    return compact(element)


def radio_buttons(**fields: Any) -> dict[str, Any]:
    """Build a radio button group with a single initial option."""
    config = parse_config(models.ChoiceListConfig, fields)
    validate_choice_list(config, NodeKind.RADIO_BUTTONS)
    options = [option_object(o, include_description=True) for o in config.options]
    state = resolve_initial(options, config.initial_selection)
    element = {
        "type": "radio_buttons",
        "options": options,
        "action_id": config.action_id,
        "confirm": confirm_object(config.dialog),
    }
    element.update(state.as_fields())
    return compact(element)


# === DYNAMIC SELECTS ===


def users_select(**fields: Any) -> dict[str, Any]:
    """Build a users select.

    A single select takes the first id when given a list. A multi select
    wraps a single id in a list.
    """
    config = parse_config(models.UsersSelectConfig, fields)
    validate_users_select(config)
    element = {
        "type": _multi_type("users_select", config.multi),
        "placeholder": placeholder_object(config.placeholder),
        "action_id": config.action_id,
        "focus_on_load": _flag(config.focus_on_load),
        "max_selected_items": config.max_selected_items if config.multi else None,
        "confirm": confirm_object(config.dialog),
    }
    if config.initial_users:
        users = _as_list(config.initial_users)
        if config.multi:
            element["initial_users"] = users
        else:
            element["initial_user"] = users[0]
    return compact(element)


def conversations_select(**fields: Any) -> dict[str, Any]:
    """Build a conversations select restricted to the filtered types."""
    config = parse_config(models.ConversationsSelectConfig, fields)
    validate_conversations_select(config)
    element = {
        "type": _multi_type("conversations_select", config.multi),
        "placeholder": placeholder_object(config.placeholder),
        "filter": {
            "include": list(config.filter),
            "exclude_bot_users": config.exclude_bot_users,
            "exclude_external_shared_channels": config.exclude_external_shared_channels,
        },
        "action_id": config.action_id,
        "focus_on_load": _flag(config.focus_on_load),
        "max_selected_items": config.max_selected_items if config.multi else None,
    }
    if config.initial_conversations:
        conversations = _as_list(config.initial_conversations)
        if config.multi:
            element["initial_conversations"] = conversations
        else:
            element["initial_conversation"] = conversations[0]
    return compact(element)


def external_select(**fields: Any) -> dict[str, Any]:
    """Build a select whose options come from an external data source.

    Initial options may be one option record or a list. A single select
    uses the first; a multi select uses all of them.
    """
    config = parse_config(models.ExternalSelectConfig, fields)
    validate_external_select(config)
    element = {
        "type": _multi_type("external_select", config.multi),
        "placeholder": placeholder_object(config.placeholder),
        "action_id": config.action_id,
        "min_query_length": config.min_query_length,
        "focus_on_load": _flag(config.focus_on_load),
        "max_selected_items": config.max_selected_items if config.multi else None,
    }
    initial = config.initial_options
    if initial:
        records = [initial] if isinstance(initial, Mapping) else list(initial)
        if config.multi:
            element["initial_options"] = [option_object(o) for o in records]
        else:
            element["initial_option"] = option_object(records[0])
    return compact(element)


def timezone_picker(**fields: Any) -> dict[str, Any]:
    """Build a static select of IANA zones grouped by region prefix.

    Zones come from ``timezones`` when given, otherwise from the configured
    reference directory.
    """
    config = parse_config(models.TimezonePickerConfig, fields)
    validate_reference_select(config, NodeKind.TIMEZONE_PICKER)
    records = config.timezones if config.timezones is not None else load_timezones()
    groups = group_timezones(records)
    logger.debug(f"Built {len(groups)} time-zone groups from {len(records)} zones")
    return static_select(
        placeholder=config.placeholder,
        action_id=config.action_id,
        focus_on_load=config.focus_on_load,
        options=groups,
        use_group=True,
        initial_selection=config.initial_timezone,
    )


def country_select(**fields: Any) -> dict[str, Any]:
    """Build a static select of countries grouped into letter ranges.

    Option values are country ids; ``initial_country`` is matched against
    them.
    """
    config = parse_config(models.CountrySelectConfig, fields)
    validate_reference_select(config, NodeKind.COUNTRY_SELECT)
    records = config.countries if config.countries is not None else load_countries()
    groups = group_countries(records)
    logger.debug(f"Built {len(groups)} country groups from {len(records)} countries")
    return static_select(
        placeholder=config.placeholder,
        action_id=config.action_id,
        focus_on_load=config.focus_on_load,
        options=groups,
        use_group=True,
        initial_selection=config.initial_country,
    )


# === PICKERS AND TEXT FIELDS ===


def datepicker(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.DatepickerConfig, fields)
    validate_datepicker(config)
    return compact(
        {
            "type": "datepicker",
            "placeholder": placeholder_object(config.placeholder, emoji=True),
            "action_id": config.action_id,
            "initial_date": config.initial_date or None,
            "focus_on_load": _flag(config.focus_on_load),
        }
    )


def timepicker(**fields: Any) -> dict[str, Any]:
    """Build a time picker.

    Without ``initial_time`` the picker defaults to the next 5-minute
    boundary in ``timezone`` (or the configured default zone, or local
    time).
    """
    config = parse_config(models.TimepickerConfig, fields)
    validate_timepicker(config)
    if config.initial_time:
        initial_time = parse_clock_time(config.initial_time)
    else:
        initial_time = next_five_minute_boundary(get_default_timezone(config.timezone))
    return compact(
        {
            "type": "timepicker",
            "placeholder": placeholder_object(config.placeholder, emoji=True),
            "action_id": config.action_id,
            "initial_time": initial_time,
            "focus_on_load": _flag(config.focus_on_load),
        }
    )


def plain_text_input(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.PlainTextInputConfig, fields)
    validate_plain_text_input(config)
    return compact(
        {
            "type": "plain_text_input",
            "placeholder": placeholder_object(config.placeholder),
            "multiline": config.multiline,
            "action_id": config.action_id,
            "initial_value": config.initial_value or None,
            "min_length": config.min_length,
            "max_length": config.max_length,
            "dispatch_action_config": (
                {"trigger_actions_on": ["on_enter_pressed"]}
                if config.dispatch_on_enter
                else None
            ),
            "focus_on_load": _flag(config.focus_on_load),
        }
    )


def email_input(**fields: Any) -> dict[str, Any]:
    config = parse_config(models.EmailInputConfig, fields)
    validate_email_input(config)
    return compact(
        {
            "type": "email_text_input",
            "placeholder": placeholder_object(config.placeholder, emoji=True),
            "action_id": config.action_id,
            "initial_value": config.initial_value or None,
            "focus_on_load": _flag(config.focus_on_load),
        }
    )


def image(**fields: Any) -> dict[str, Any]:
    """Build an image element for accessories and context blocks."""
    config = parse_config(models.ImageElementConfig, fields)
    validate_image(config)
    return {"type": "image", "image_url": config.url, "alt_text": config.alt}


__all__ = [
    "button",
    "static_select",
    "overflow",
    "checkboxes",
    "radio_buttons",
    "users_select",
    "conversations_select",
    "external_select",
    "timezone_picker",
    "country_select",
    "datepicker",
    "timepicker",
    "plain_text_input",
    "email_input",
    "image",
]
