"""Option normalization, initial-selection resolution and capacity grouping.

Option lists arrive either flat (``[{text, value}]``) or grouped
(``[{label, options: [...]}]``), and initial selections arrive as a single
value, a list of values, or nothing. Both are classified once at entry into
small tagged unions so the resolution logic never probes types again.

Values are matched by their string form, so an option value ``"1"`` matches
an initial selection of ``1``.
"""

import copy
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from blockbuilder.config import get_group_capacity
from blockbuilder.constraints import BoundViolation

logger = logging.getLogger(__name__)


# === TAGGED UNIONS ===


@dataclass(frozen=True)
class FlatOptions:
    """A flat sequence of options."""

    options: tuple[Mapping[str, Any], ...]

    def flatten(self) -> tuple[Mapping[str, Any], ...]:
        return self.options


@dataclass(frozen=True)
class GroupedOptions:
    """A sequence of ``{label, options}`` groups."""

    groups: tuple[Mapping[str, Any], ...]

    def flatten(self) -> tuple[Mapping[str, Any], ...]:
        return tuple(option for group in self.groups for option in group["options"])


Options = FlatOptions | GroupedOptions


@dataclass(frozen=True)
class NoSelection:
    """No initial selection, or one of the wrong shape for the mode."""


@dataclass(frozen=True)
class SingleSelection:
    """One initially selected value."""

    value: str | int | float


@dataclass(frozen=True)
class MultiSelection:
    """Several initially selected values."""

    values: tuple[Any, ...]


InitialSelection = NoSelection | SingleSelection | MultiSelection


def classify_options(options: Sequence[Mapping[str, Any]], grouped: bool) -> Options:
    """Wrap a raw option list in its tagged form."""
    if grouped:
        return GroupedOptions(tuple(options))
    return FlatOptions(tuple(options))


def classify_selection(initial: Any, multi: bool) -> InitialSelection:
    """Classify a caller's initial selection for the given mode.

    A non-empty list is a multi selection only in multi mode; a string or
    number is a single selection only in single mode. Anything else,
    including a scalar passed in multi mode, is treated as no selection.
    """
    if multi:
        if isinstance(initial, (list, tuple)) and initial:
            return MultiSelection(tuple(initial))
        return NoSelection()
    if isinstance(initial, bool):
        return NoSelection()
    if isinstance(initial, (str, int, float)) and initial != "":
        return SingleSelection(initial)
    return NoSelection()


@dataclass(frozen=True)
class SelectionState:
    """Resolved initial selection for a select-style element.

    Attributes:
        multi: Whether the element accepts several selections.
        options: Resolved option objects, in option-list order.
    """

    multi: bool = False
    options: tuple[dict[str, Any], ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.options

    @property
    def option(self) -> dict[str, Any] | None:
        """The single selected option, if any."""
        return self.options[0] if self.options else None

    def as_fields(self) -> dict[str, Any]:
        """Return the element fields carrying this selection."""
        if self.is_empty:
            return {}
        if self.multi:
            return {"initial_options": [copy.deepcopy(o) for o in self.options]}
        return {"initial_option": copy.deepcopy(self.options[0])}


# === NORMALIZATION ===


def plain_text(text: str, emoji: bool | None = None) -> dict[str, Any]:
    """Build a ``plain_text`` text object."""
    obj: dict[str, Any] = {"type": "plain_text", "text": text}
    if emoji is not None:
        obj["emoji"] = emoji
    return obj


def option_object(
    option: Mapping[str, Any],
    text_type: str = "plain_text",
    emoji: bool | None = None,
    include_description: bool = False,
    include_url: bool = False,
) -> dict[str, Any]:
    """Convert an input option into its display form.

    Args:
        option: Input ``{text, value, description?, url?}`` record.
        text_type: Text object type ("plain_text" or "mrkdwn").
        emoji: Emoji flag for plain text, omitted when None.
        include_description: Carry ``description`` as a text object.
        include_url: Carry ``url`` through unchanged.
    """
    text: dict[str, Any] = {"type": text_type, "text": option["text"]}
    if emoji is not None and text_type == "plain_text":
        text["emoji"] = emoji
    obj: dict[str, Any] = {"text": text, "value": option["value"]}
    if include_description and option.get("description"):
        obj["description"] = {"type": text_type, "text": option["description"]}
    if include_url and option.get("url"):
        obj["url"] = option["url"]
    return obj


def normalize_options(
    options: Sequence[Mapping[str, Any]], grouped: bool = False
) -> list[dict[str, Any]]:
    """Normalize flat or grouped options into display form.

    Flat options gain an emoji-enabled plain text object. Grouped input keeps
    its group order and per-group option order, with labels wrapped as plain
    text.
    """
    match classify_options(options, grouped):
        case GroupedOptions(groups=groups):
            return [
                {
                    "label": plain_text(group["label"]),
                    "options": [option_object(o) for o in group["options"]],
                }
                for group in groups
            ]
        case FlatOptions(options=flat):
            return [option_object(o, emoji=True) for o in flat]


# === RESOLUTION ===


def _match_key(value: Any) -> str:
    """String form used to compare option values; 1.0 and "1" are equal."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_initial(
    normalized: Sequence[Mapping[str, Any]],
    initial: Any,
    grouped: bool = False,
    multi: bool = False,
) -> SelectionState:
    """Resolve an initial selection against normalized options.

    Args:
        normalized: Output of :func:`normalize_options` (or element-specific
            option objects with the same ``value`` key).
        initial: Caller's initial selection.
        grouped: Whether ``normalized`` holds option groups.
        multi: Whether the element is multi-select.

    Returns:
        SelectionState; empty when nothing matches or the shape does not
        fit the mode.
    """
    candidates = classify_options(normalized, grouped).flatten()

    match classify_selection(initial, multi):
        case MultiSelection(values=values):
            wanted = {_match_key(v) for v in values}
            matches = tuple(
                copy.deepcopy(dict(o))
                for o in candidates
                if _match_key(o["value"]) in wanted
            )
            return SelectionState(multi=True, options=matches)
        case SingleSelection(value=value):
            target = _match_key(value)
            for option in candidates:
                if _match_key(option["value"]) == target:
                    return SelectionState(options=(copy.deepcopy(dict(option)),))
            return SelectionState()
        case _:
            return SelectionState(multi=multi)


# === CAPACITY GROUPING ===


def split_group(
    label: str, options: Sequence[Any], capacity: int
) -> list[dict[str, Any]]:
    """Split one group into ``<label>-N`` chunks of at most ``capacity``.

    Groups that already fit keep their bare label.
    """
    if len(options) <= capacity:
        return [{"label": label, "options": list(options)}]
    return [
        {"label": f"{label}-{n}", "options": list(options[start : start + capacity])}
        for n, start in enumerate(range(0, len(options), capacity), start=1)
    ]


def group_by_capacity(
    options: Iterable[Mapping[str, Any]],
    key: Callable[[Mapping[str, Any]], str | None],
    capacity: int | None = None,
) -> list[dict[str, Any]]:
    """Partition options by a natural key, then split oversized groups.

    Args:
        options: Flat options in their original order.
        key: Returns the group label for an option, or None to drop it.
        capacity: Maximum options per group. Defaults to the configured
            group capacity.

    Returns:
        Raw ``{label, options}`` groups in first-seen key order, suitable
        for :func:`normalize_options` with ``grouped=True``.
    """
    capacity = get_group_capacity(capacity)
    if capacity < 1:
        raise BoundViolation(
            f"Expected group capacity to be at least 1. Received: {capacity}",
            field="capacity",
            limit=capacity,
        )

    buckets: dict[str, list[Mapping[str, Any]]] = {}
    for option in options:
        label = key(option)
        if label is None:
            logger.debug(f"Dropping option without a group: {option.get('text')}")
            continue
        buckets.setdefault(label, []).append(option)

    groups: list[dict[str, Any]] = []
    for label, members in buckets.items():
        chunks = split_group(label, members, capacity)
        if len(chunks) > 1:
            logger.debug(
                f"Split group {label} ({len(members)} options) into {len(chunks)}"
            )
        groups.extend(chunks)
    return groups


# === REFERENCE DATA GROUPERS ===


def _initial_between(first: str, last: str) -> Callable[[str], bool]:
    def predicate(name: str) -> bool:
        return bool(name) and first <= name[0].casefold() <= last

    return predicate


COUNTRY_BUCKETS: tuple[tuple[Callable[[str], bool], str], ...] = (
    (_initial_between("a", "c"), "A-C"),
    (_initial_between("d", "j"), "D-J"),
    (_initial_between("k", "o"), "K-O"),
    (_initial_between("p", "s"), "P-S"),
    (_initial_between("t", "z"), "T-Z"),
)


def classify_country(name: str) -> str | None:
    """Return the first bucket label whose predicate accepts ``name``."""
    for predicate, label in COUNTRY_BUCKETS:
        if predicate(name):
            return label
    return None


def timezone_prefix(zone_name: str) -> str:
    """Natural grouping key for an IANA zone name ("Europe/Rome" -> "Europe")."""
    return zone_name.split("/", 1)[0]


def group_timezones(
    records: Iterable[Mapping[str, Any]], capacity: int | None = None
) -> list[dict[str, Any]]:
    """Group ``{zoneName}`` records by zone prefix."""
    options = [{"text": r["zoneName"], "value": r["zoneName"]} for r in records]
    return group_by_capacity(
        options, key=lambda o: timezone_prefix(o["value"]), capacity=capacity
    )


def group_countries(
    records: Iterable[Mapping[str, Any]], capacity: int | None = None
) -> list[dict[str, Any]]:
    """Group ``{id, value}`` country records into first-letter buckets."""
    options = [{"text": r["value"], "value": r["id"]} for r in records]
    return group_by_capacity(
        options, key=lambda o: classify_country(o["text"]), capacity=capacity
    )


__all__ = [
    # Tagged unions
    "FlatOptions",
    "GroupedOptions",
    "NoSelection",
    "SingleSelection",
    "MultiSelection",
    "SelectionState",
    "classify_options",
    "classify_selection",
    # Normalization
    "plain_text",
    "option_object",
    "normalize_options",
    # Resolution
    "resolve_initial",
    # Grouping
    "split_group",
    "group_by_capacity",
    "COUNTRY_BUCKETS",
    "classify_country",
    "timezone_prefix",
    "group_timezones",
    "group_countries",
]
