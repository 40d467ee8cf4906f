"""Unit tests for the node registry and config parsing."""

import pytest

from blockbuilder.constraints import ShapeViolation
from blockbuilder.nodes import (
    NODE_REGISTRY,
    NodeCategory,
    NodeKind,
    compact,
    confirm_object,
    export_config_schema,
    get_constraints,
    get_kinds_by_category,
    get_node_meta,
    parse_config,
    placeholder_object,
)
from blockbuilder.nodes.models import ButtonConfig, ConfirmDialog, ViewConfig


class TestRegistry:
    """Tests for NODE_REGISTRY and lookups."""

    @pytest.mark.unit
    def test_every_kind_registered(self):
        """Every NodeKind has metadata keyed by itself."""
        for kind in NodeKind:
            assert NODE_REGISTRY[kind].kind == kind

    @pytest.mark.unit
    def test_lookup_by_string(self):
        """Kinds can be looked up by their string value."""
        assert get_node_meta("static_select").kind == NodeKind.STATIC_SELECT

    @pytest.mark.unit
    def test_unknown_kind(self):
        """Unknown kinds raise ShapeViolation."""
        with pytest.raises(ShapeViolation, match="Unknown node kind"):
            get_node_meta("carousel")

    @pytest.mark.unit
    def test_array_bounds(self):
        """Registry bounds match the documented limits."""
        assert get_constraints(NodeKind.ACTIONS).max_items == 25
        assert get_constraints(NodeKind.CONTEXT).max_items == 10
        assert get_constraints(NodeKind.STATIC_SELECT).max_items == 100
        assert get_constraints(NodeKind.OVERFLOW).max_items == 5
        assert get_constraints(NodeKind.CHECKBOXES).max_items == 10
        assert get_constraints(NodeKind.VIEW).max_items == 100

    @pytest.mark.unit
    def test_field_limits(self):
        """Secondary limits fall back to the main text limit."""
        button = get_constraints(NodeKind.BUTTON)
        assert button.limit("value") == 2000
        assert button.limit("text") == 75
        assert get_constraints(NodeKind.HEADER).text_limit == 150

    @pytest.mark.unit
    def test_kinds_by_category(self):
        """Category filtering keeps registry order."""
        surfaces = get_kinds_by_category(NodeCategory.SURFACE)
        assert surfaces == [NodeKind.VIEW]
        assert NodeKind.TEXT in get_kinds_by_category("rich_text")

    @pytest.mark.unit
    def test_to_dict(self):
        """Metadata serializes to plain values."""
        data = get_node_meta(NodeKind.OVERFLOW).to_dict()
        assert data["category"] == "element"
        assert data["constraints"]["max_items"] == 5

    @pytest.mark.unit
    def test_export_schema(self):
        """Config schemas list the accepted fields."""
        schema = export_config_schema(NodeKind.BUTTON)
        assert "text" in schema["properties"]
        assert schema["additionalProperties"] is False


class TestParseConfig:
    """Tests for parse_config."""

    @pytest.mark.unit
    def test_valid(self):
        """Known fields parse into a frozen model."""
        config = parse_config(ButtonConfig, {"text": "Go", "value": {"id": 1}})
        assert config.text == "Go"
        assert config.value == {"id": 1}

    @pytest.mark.unit
    def test_unknown_key(self):
        """Unrecognized keys raise ShapeViolation naming the key."""
        with pytest.raises(ShapeViolation, match="Unrecognized option: colour") as exc:
            parse_config(ButtonConfig, {"text": "Go", "colour": "red"})
        assert exc.value.field == "colour"

    @pytest.mark.unit
    def test_wrong_type(self):
        """Wrongly typed values raise ShapeViolation."""
        with pytest.raises(ShapeViolation, match="Invalid value for text"):
            parse_config(ButtonConfig, {"text": ["Go"]})

    @pytest.mark.unit
    def test_invalid_literal(self):
        """Enumerated fields reject unknown values."""
        with pytest.raises(ShapeViolation):
            parse_config(ViewConfig, {"type": "workflow"})

    @pytest.mark.unit
    def test_nested_dialog(self):
        """Nested dialogs also reject unknown keys."""
        with pytest.raises(ShapeViolation, match="dialog.body"):
            parse_config(ButtonConfig, {"text": "Go", "dialog": {"body": "x"}})


class TestComposition:
    """Tests for composition object helpers."""

    @pytest.mark.unit
    def test_confirm_object(self):
        """Dialogs map onto title, text, confirm and deny."""
        dialog = ConfirmDialog(
            title="Sure?", description="Really", confirm_text="Yes", cancel_text="No"
        )
        assert confirm_object(dialog) == {
            "title": {"type": "plain_text", "text": "Sure?"},
            "text": {"type": "plain_text", "text": "Really"},
            "confirm": {"type": "plain_text", "text": "Yes"},
            "deny": {"type": "plain_text", "text": "No"},
        }

    @pytest.mark.unit
    def test_empty_dialog_is_absent(self):
        """An empty dialog produces no confirm object."""
        assert confirm_object(None) is None
        assert confirm_object(ConfirmDialog()) is None

    @pytest.mark.unit
    def test_placeholder(self):
        """Placeholders are omitted without text."""
        assert placeholder_object(None) is None
        assert placeholder_object("Pick", emoji=True)["emoji"] is True

    @pytest.mark.unit
    def test_compact_keeps_false_and_zero(self):
        """None and empty strings are dropped, False and zero are kept."""
        node = {"a": None, "b": False, "c": 0, "d": "", "e": []}
        assert compact(node) == {"b": False, "c": 0, "e": []}
