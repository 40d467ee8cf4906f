"""Unit tests for the constraint library."""

import pytest

from blockbuilder.constraints import (
    BoundViolation,
    ConstraintViolation,
    RequiredFieldViolation,
    ShapeViolation,
    UniquenessViolation,
    limit_message,
    require_bounded_array,
    require_choice,
    require_identifier,
    require_option,
    require_option_list,
    require_positive_int,
    require_serialized_text,
    require_text,
    require_unique_identifiers,
)


def _options(count: int) -> list[dict]:
    return [{"text": f"Option {i}", "value": f"v{i}"} for i in range(count)]


class TestLimitMessage:
    """Tests for the pure message builder."""

    @pytest.mark.unit
    def test_reports_length(self):
        """Message names field, limit and received length."""
        message = limit_message("title", 24, "x" * 30)
        assert message == "Expected title to have at most 24 characters. Received: 30"

    @pytest.mark.unit
    def test_includes_position(self):
        """Position is appended when given."""
        message = limit_message("option.text", 150, "abc", position=4)
        assert message.endswith("Position: 4")

    @pytest.mark.unit
    def test_unit_and_unsized_value(self):
        """Custom unit is used and unsized values are reported verbatim."""
        assert "items" in limit_message("options", 5, [1] * 6, unit="items")
        assert limit_message("count", 3, 7).endswith("Received: 7")


class TestRequireText:
    """Tests for require_text."""

    @pytest.mark.unit
    def test_valid_text(self):
        """Strings within the limit pass."""
        require_text("hello", limit=5)

    @pytest.mark.unit
    def test_too_long(self):
        """Strings over the limit raise BoundViolation with the limit."""
        with pytest.raises(BoundViolation) as exc:
            require_text("x" * 151, limit=150, field="header")
        assert exc.value.limit == 150
        assert "header" in str(exc.value)
        assert "150" in str(exc.value)

    @pytest.mark.unit
    def test_empty_string(self):
        """Empty strings are rejected when required."""
        with pytest.raises(BoundViolation):
            require_text("")

    @pytest.mark.unit
    def test_missing_required(self):
        """None is a missing required field."""
        with pytest.raises(RequiredFieldViolation):
            require_text(None, field="label")

    @pytest.mark.unit
    def test_wrong_type(self):
        """Non-strings raise ShapeViolation."""
        with pytest.raises(ShapeViolation):
            require_text(42)

    @pytest.mark.unit
    def test_optional_absent(self):
        """Optional values may be None or empty."""
        require_text(None, optional=True)
        require_text("", optional=True)

    @pytest.mark.unit
    def test_optional_present_still_checked(self):
        """Optional values are still length-checked when present."""
        with pytest.raises(BoundViolation):
            require_text("x" * 11, limit=10, optional=True)

    @pytest.mark.unit
    def test_all_violations_share_base(self):
        """Every violation derives from ConstraintViolation."""
        with pytest.raises(ConstraintViolation):
            require_text(1.5)


class TestRequireIdentifier:
    """Tests for require_identifier."""

    @pytest.mark.unit
    def test_default_limit(self):
        """Identifiers up to 255 characters pass."""
        require_identifier("a" * 255)
        with pytest.raises(BoundViolation):
            require_identifier("a" * 256)

    @pytest.mark.unit
    def test_optional(self):
        """Optional identifiers may be absent."""
        require_identifier(None, optional=True)


class TestRequireSerializedText:
    """Tests for require_serialized_text."""

    @pytest.mark.unit
    def test_mapping_serialized_compactly(self):
        """Mappings are serialized without whitespace."""
        assert require_serialized_text({"a": 1}, limit=20) == '{"a":1}'

    @pytest.mark.unit
    def test_serialized_length_checked(self):
        """The serialized form is what gets length-checked."""
        with pytest.raises(BoundViolation):
            require_serialized_text({"key": "x" * 20}, limit=10)

    @pytest.mark.unit
    def test_unserializable(self):
        """Values JSON cannot encode raise ShapeViolation."""
        with pytest.raises(ShapeViolation):
            require_serialized_text({"when": object()})

    @pytest.mark.unit
    def test_absent(self):
        """Absent optional values yield None."""
        assert require_serialized_text(None) is None


class TestScalars:
    """Tests for require_choice and require_positive_int."""

    @pytest.mark.unit
    def test_choice(self):
        """Values outside the allowed set raise ShapeViolation."""
        require_choice("primary", ("primary", "danger"), "style")
        with pytest.raises(ShapeViolation) as exc:
            require_choice("loud", ("primary", "danger"), "style")
        assert "primary, danger" in str(exc.value)

    @pytest.mark.unit
    def test_positive_int(self):
        """Integers below the minimum or above the maximum are rejected."""
        require_positive_int(3, "max_selected_items")
        with pytest.raises(BoundViolation):
            require_positive_int(0, "max_selected_items")
        with pytest.raises(BoundViolation):
            require_positive_int(3001, "max_length", maximum=3000)

    @pytest.mark.unit
    def test_positive_int_rejects_bool(self):
        """Booleans are not accepted as integers."""
        with pytest.raises(ShapeViolation):
            require_positive_int(True, "max_selected_items")


class TestRequireBoundedArray:
    """Tests for require_bounded_array."""

    @pytest.mark.unit
    def test_within_bounds(self):
        """Lists within bounds pass."""
        require_bounded_array([1, 2], max_len=2)

    @pytest.mark.unit
    def test_not_a_list(self):
        """Strings and mappings are not arrays."""
        with pytest.raises(ShapeViolation):
            require_bounded_array("abc", max_len=5)
        with pytest.raises(ShapeViolation):
            require_bounded_array({"a": 1}, max_len=5)

    @pytest.mark.unit
    def test_empty_and_too_long(self):
        """Length outside the range raises BoundViolation."""
        with pytest.raises(BoundViolation):
            require_bounded_array([], max_len=5)
        with pytest.raises(BoundViolation) as exc:
            require_bounded_array([1] * 26, max_len=25, field="elements")
        assert exc.value.limit == 25

    @pytest.mark.unit
    def test_unbounded(self):
        """A None upper bound accepts any non-empty length."""
        require_bounded_array(list(range(500)), max_len=None)

    @pytest.mark.unit
    def test_zero_minimum(self):
        """min_len=0 allows empty lists."""
        require_bounded_array([], max_len=3, min_len=0)


class TestRequireUniqueIdentifiers:
    """Tests for require_unique_identifiers."""

    @pytest.mark.unit
    def test_unique(self):
        """Distinct and missing identifiers pass."""
        nodes = [
            {"type": "divider", "block_id": "a"},
            {"type": "divider"},
            {"type": "divider", "block_id": ""},
            {"type": "divider", "block_id": "b"},
        ]
        assert require_unique_identifiers(nodes) is True

    @pytest.mark.unit
    def test_duplicate_named(self):
        """The duplicate identifier is named in the message."""
        nodes = [
            {"type": "divider", "block_id": "x"},
            {"type": "header", "block_id": "y"},
            {"type": "divider", "block_id": "x"},
        ]
        with pytest.raises(UniquenessViolation) as exc:
            require_unique_identifiers(nodes)
        assert "x" in str(exc.value)
        assert exc.value.position == 2

    @pytest.mark.unit
    def test_identifier_length_checked(self):
        """Overlong identifiers are rejected during the scan."""
        with pytest.raises(BoundViolation):
            require_unique_identifiers([{"type": "divider", "block_id": "a" * 256}])

    @pytest.mark.unit
    def test_non_mapping_node(self):
        """Nodes must be objects."""
        with pytest.raises(ShapeViolation):
            require_unique_identifiers(["divider"])


class TestRequireOption:
    """Tests for require_option."""

    @pytest.mark.unit
    def test_valid_option(self):
        """Full options within limits pass."""
        require_option(
            {"text": "A", "value": "a", "description": "d", "url": "https://x"}, 0
        )

    @pytest.mark.unit
    def test_missing_value(self):
        """Missing value raises RequiredFieldViolation naming the position."""
        with pytest.raises(RequiredFieldViolation) as exc:
            require_option({"text": "A"}, 3)
        assert "option 3" in str(exc.value)

    @pytest.mark.unit
    def test_long_text_reports_position(self):
        """Overlong text reports its position."""
        with pytest.raises(BoundViolation) as exc:
            require_option({"text": "x" * 151, "value": "a"}, 7)
        assert exc.value.position == 7
        assert "Position: 7" in str(exc.value)

    @pytest.mark.unit
    def test_long_url(self):
        """URLs are limited to 3000 characters."""
        with pytest.raises(BoundViolation):
            require_option({"text": "A", "value": "a", "url": "u" * 3001}, 0)


class TestRequireOptionList:
    """Tests for require_option_list."""

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [1, 50, 100])
    def test_valid_lengths(self, count):
        """Lists of 1..100 valid options pass."""
        require_option_list(_options(count))

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 101])
    def test_invalid_lengths(self, count):
        """Empty lists and lists over 100 fail."""
        with pytest.raises(BoundViolation):
            require_option_list(_options(count))

    @pytest.mark.unit
    def test_custom_max(self):
        """Overflow-style lists use a smaller ceiling."""
        with pytest.raises(BoundViolation):
            require_option_list(_options(6), max_count=5)

    @pytest.mark.unit
    def test_not_a_list(self):
        """Non-list input raises ShapeViolation."""
        with pytest.raises(ShapeViolation):
            require_option_list({"text": "A", "value": "a"})

    @pytest.mark.unit
    def test_groups_recurse(self):
        """Grouped entries have their inner options validated."""
        groups = [{"label": "Europe", "options": _options(150)}]
        require_option_list(groups)

        bad = [
            {"label": "Europe", "options": _options(2)},
            {"label": "Asia", "options": [{"text": "A", "value": "x" * 151}]},
        ]
        with pytest.raises(BoundViolation) as exc:
            require_option_list(bad)
        assert exc.value.position == "1.0"
