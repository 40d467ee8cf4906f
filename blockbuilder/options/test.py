"""Unit tests for the option resolution engine."""

import pytest

from blockbuilder.constraints import BoundViolation
from blockbuilder.options import (
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
    resolve_initial,
)

ABC = [
    {"text": "Alpha", "value": "A"},
    {"text": "Bravo", "value": "B"},
    {"text": "Charlie", "value": "C"},
]

GROUPS = [
    {"label": "First", "options": [{"text": "One", "value": "1"}]},
    {
        "label": "Second",
        "options": [{"text": "Two", "value": "2"}, {"text": "Three", "value": "3"}],
    },
]


class TestClassification:
    """Tests for the tagged unions."""

    @pytest.mark.unit
    def test_classify_options(self):
        """Options are wrapped according to the grouped flag."""
        assert isinstance(classify_options(ABC, grouped=False), FlatOptions)
        grouped = classify_options(GROUPS, grouped=True)
        assert isinstance(grouped, GroupedOptions)
        assert [o["value"] for o in grouped.flatten()] == ["1", "2", "3"]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("initial", "multi", "expected"),
        [
            (None, False, NoSelection()),
            ("A", False, SingleSelection("A")),
            (1, False, SingleSelection(1)),
            ("", False, NoSelection()),
            (True, False, NoSelection()),
            (["A"], False, NoSelection()),
            (["A", "B"], True, MultiSelection(("A", "B"))),
            ([], True, NoSelection()),
            ("A", True, NoSelection()),
        ],
    )
    def test_classify_selection(self, initial, multi, expected):
        """Selections are classified by shape and mode."""
        assert classify_selection(initial, multi) == expected


class TestNormalizeOptions:
    """Tests for normalize_options."""

    @pytest.mark.unit
    def test_flat(self):
        """Flat options gain emoji-enabled plain text."""
        result = normalize_options(ABC)
        assert result[0] == {
            "text": {"type": "plain_text", "text": "Alpha", "emoji": True},
            "value": "A",
        }
        assert [o["value"] for o in result] == ["A", "B", "C"]

    @pytest.mark.unit
    def test_grouped_preserves_order(self):
        """Group and option order are preserved."""
        result = normalize_options(GROUPS, grouped=True)
        assert [g["label"]["text"] for g in result] == ["First", "Second"]
        assert [o["value"] for o in result[1]["options"]] == ["2", "3"]
        assert result[0]["options"][0]["text"] == {"type": "plain_text", "text": "One"}

    @pytest.mark.unit
    def test_input_not_mutated(self):
        """Normalization does not alter the caller's options."""
        source = [{"text": "Alpha", "value": "A"}]
        normalize_options(source)
        assert source == [{"text": "Alpha", "value": "A"}]


class TestOptionObject:
    """Tests for element-specific option shapes."""

    @pytest.mark.unit
    def test_mrkdwn_with_description(self):
        """Checkbox-style options carry a mrkdwn description."""
        obj = option_object(
            {"text": "*A*", "value": "a", "description": "more"},
            text_type="mrkdwn",
            include_description=True,
        )
        assert obj == {
            "text": {"type": "mrkdwn", "text": "*A*"},
            "value": "a",
            "description": {"type": "mrkdwn", "text": "more"},
        }

    @pytest.mark.unit
    def test_url_carried(self):
        """Overflow-style options keep their url."""
        obj = option_object(
            {"text": "Docs", "value": "docs", "url": "https://example.com"},
            include_url=True,
        )
        assert obj["url"] == "https://example.com"
        assert "url" not in option_object({"text": "A", "value": "a"}, include_url=True)


class TestResolveInitial:
    """Tests for resolve_initial."""

    @pytest.mark.unit
    def test_multi_preserves_option_order(self):
        """Multi selection follows option-list order, not caller order."""
        state = resolve_initial(normalize_options(ABC), ["C", "A"], multi=True)
        assert [o["value"] for o in state.options] == ["A", "C"]
        assert state.as_fields()["initial_options"][1]["value"] == "C"

    @pytest.mark.unit
    def test_numeric_initial_matches_string_value(self):
        """A numeric initial selection matches a string option value."""
        normalized = normalize_options([{"text": "One", "value": "1"}])
        state = resolve_initial(normalized, 1)
        assert state.option["value"] == "1"

    @pytest.mark.unit
    def test_numeric_option_value(self):
        """Numeric option values compare by their string form."""
        state = resolve_initial([{"text": {}, "value": 7}], ["7"], multi=True)
        assert len(state.options) == 1

    @pytest.mark.unit
    def test_integral_float_matches(self):
        """Integral floats match their integer string form."""
        normalized = normalize_options([{"text": "One", "value": "1"}])
        assert resolve_initial(normalized, 1.0).option["value"] == "1"
        state = resolve_initial(normalized, [1.0], multi=True)
        assert [o["value"] for o in state.options] == ["1"]

    @pytest.mark.unit
    def test_fractional_float_kept(self):
        """Fractional floats keep their decimal form."""
        normalized = normalize_options([{"text": "Half", "value": "0.5"}])
        assert resolve_initial(normalized, 0.5).option["value"] == "0.5"

    @pytest.mark.unit
    def test_single_no_match(self):
        """Unmatched single selection is empty, not an error."""
        state = resolve_initial(normalize_options(ABC), "Z")
        assert state.is_empty
        assert state.as_fields() == {}

    @pytest.mark.unit
    def test_single_first_match(self):
        """Single selection returns the first matching option."""
        options = normalize_options(ABC + [{"text": "Again", "value": "B"}])
        state = resolve_initial(options, "B")
        assert state.as_fields() == {"initial_option": options[1]}

    @pytest.mark.unit
    def test_grouped_single(self):
        """Grouped options are flattened before matching."""
        normalized = normalize_options(GROUPS, grouped=True)
        state = resolve_initial(normalized, "3", grouped=True)
        assert state.option["text"]["text"] == "Three"

    @pytest.mark.unit
    def test_grouped_multi(self):
        """Grouped multi selection spans groups in flattened order."""
        normalized = normalize_options(GROUPS, grouped=True)
        state = resolve_initial(normalized, ["3", "1"], grouped=True, multi=True)
        assert [o["value"] for o in state.options] == ["1", "3"]

    @pytest.mark.unit
    def test_shape_mismatch_is_empty(self):
        """A list in single mode or a scalar in multi mode yields nothing."""
        normalized = normalize_options(ABC)
        assert resolve_initial(normalized, ["A"]).is_empty
        assert resolve_initial(normalized, "A", multi=True).is_empty

    @pytest.mark.unit
    def test_idempotent(self):
        """Identical inputs produce identical states."""
        normalized = normalize_options(ABC)
        first = resolve_initial(normalized, ["B", "C"], multi=True)
        second = resolve_initial(normalized, ["B", "C"], multi=True)
        assert first == second

    @pytest.mark.unit
    def test_result_is_independent_copy(self):
        """Mutating the resolved option leaves the option list untouched."""
        normalized = normalize_options(ABC)
        fields = resolve_initial(normalized, "A").as_fields()
        fields["initial_option"]["text"]["text"] = "changed"
        assert normalized[0]["text"]["text"] == "Alpha"

    @pytest.mark.unit
    def test_selection_state_defaults(self):
        """An empty state has no option."""
        assert SelectionState().option is None


class TestGroupByCapacity:
    """Tests for group_by_capacity."""

    @pytest.mark.unit
    def test_splits_into_sequential_subgroups(self):
        """250 options under one key split into 100/100/50."""
        options = [{"text": f"Zone {i}", "value": f"z{i}"} for i in range(250)]
        groups = group_by_capacity(options, key=lambda o: "America", capacity=100)

        assert [g["label"] for g in groups] == ["America-1", "America-2", "America-3"]
        assert [len(g["options"]) for g in groups] == [100, 100, 50]
        rejoined = [o for g in groups for o in g["options"]]
        assert rejoined == options

    @pytest.mark.unit
    def test_small_groups_keep_label(self):
        """Groups within capacity keep their bare label, in first-seen order."""
        options = [
            {"text": "b1", "value": "b1"},
            {"text": "a1", "value": "a1"},
            {"text": "b2", "value": "b2"},
        ]
        groups = group_by_capacity(options, key=lambda o: o["text"][0])
        assert [g["label"] for g in groups] == ["b", "a"]
        assert [o["value"] for o in groups[0]["options"]] == ["b1", "b2"]

    @pytest.mark.unit
    def test_exact_capacity_not_split(self):
        """A group exactly at capacity stays whole."""
        options = [{"text": str(i), "value": str(i)} for i in range(5)]
        groups = group_by_capacity(options, key=lambda o: "g", capacity=5)
        assert [g["label"] for g in groups] == ["g"]

    @pytest.mark.unit
    def test_configured_capacity(self, monkeypatch):
        """Capacity defaults to the configured value."""
        monkeypatch.setenv("BLOCKBUILDER_GROUP_CAPACITY", "2")
        options = [{"text": str(i), "value": str(i)} for i in range(3)]
        groups = group_by_capacity(options, key=lambda o: "g")
        assert [g["label"] for g in groups] == ["g-1", "g-2"]

    @pytest.mark.unit
    def test_invalid_capacity(self):
        """Capacity below one is rejected."""
        with pytest.raises(BoundViolation):
            group_by_capacity([], key=lambda o: "g", capacity=0)

    @pytest.mark.unit
    def test_deterministic(self):
        """Repeated grouping of the same data is identical."""
        options = [{"text": str(i), "value": str(i)} for i in range(30)]
        first = group_by_capacity(options, key=lambda o: str(len(o["text"])), capacity=7)
        second = group_by_capacity(options, key=lambda o: str(len(o["text"])), capacity=7)
        assert first == second


class TestReferenceGroupers:
    """Tests for the time-zone and country groupers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "bucket"),
        [
            ("Austria", "A-C"),
            ("chile", "A-C"),
            ("Denmark", "D-J"),
            ("Japan", "D-J"),
            ("Kenya", "K-O"),
            ("Oman", "K-O"),
            ("Peru", "P-S"),
            ("Sweden", "P-S"),
            ("Togo", "T-Z"),
            ("Zambia", "T-Z"),
            ("Åland Islands", None),
            ("", None),
        ],
    )
    def test_classify_country(self, name, bucket):
        """Countries fall into the first matching letter bucket."""
        assert classify_country(name) == bucket

    @pytest.mark.unit
    def test_group_countries(self):
        """Country records become id-valued options grouped by bucket."""
        records = [
            {"id": "SE", "value": "Sweden"},
            {"id": "AT", "value": "Austria"},
            {"id": "PE", "value": "Peru"},
            {"id": "AX", "value": "Åland Islands"},
        ]
        groups = group_countries(records)
        assert [g["label"] for g in groups] == ["P-S", "A-C"]
        assert groups[0]["options"] == [
            {"text": "Sweden", "value": "SE"},
            {"text": "Peru", "value": "PE"},
        ]

    @pytest.mark.unit
    def test_group_timezones(self):
        """Zones group by prefix and split past capacity."""
        records = [{"zoneName": f"America/City{i}"} for i in range(3)]
        records.append({"zoneName": "Europe/Rome"})
        records.append({"zoneName": "UTC"})
        groups = group_timezones(records, capacity=2)
        assert [g["label"] for g in groups] == [
            "America-1",
            "America-2",
            "Europe",
            "UTC",
        ]
        assert groups[2]["options"] == [{"text": "Europe/Rome", "value": "Europe/Rome"}]
