"""Option normalization, selection resolution and capacity grouping.

Example usage:
    >>> from blockbuilder.options import normalize_options, resolve_initial
    >>> normalized = normalize_options([{"text": "One", "value": "1"}])
    >>> resolve_initial(normalized, 1).option["value"]
    '1'
"""

from .lib import (
    COUNTRY_BUCKETS,
    FlatOptions,
    GroupedOptions,
    MultiSelection,
    NoSelection,
    SelectionState,
    SingleSelection,
    classify_country,
    classify_options,
    classify_selection,
    group_by_capacity,
    group_countries,
    group_timezones,
    normalize_options,
    option_object,
    plain_text,
    resolve_initial,
    split_group,
    timezone_prefix,
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
