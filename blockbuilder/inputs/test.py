"""Unit tests for input block builders."""

import pytest

from blockbuilder.inputs import (
    checkboxes,
    country_select,
    datepicker,
    email,
    input_block,
    split_fields,
    static_select,
    text_input,
    timezone_picker,
    users_select,
)
from blockbuilder.constraints import (
    BoundViolation,
    RequiredFieldViolation,
    ShapeViolation,
)


class TestInputBlock:
    """Tests for the input wrapper."""

    @pytest.mark.unit
    def test_wrapper_shape(self):
        """The wrapper carries label, flags, block_id and hint."""
        result = input_block(
            element={"type": "plain_text_input"},
            label="Name",
            block_id="name",
            hint="Your full name",
        )
        assert result == {
            "type": "input",
            "element": {"type": "plain_text_input"},
            "label": {"type": "plain_text", "text": "Name", "emoji": True},
            "optional": False,
            "dispatch_action": False,
            "block_id": "name",
            "hint": {"type": "plain_text", "text": "Your full name", "emoji": True},
        }

    @pytest.mark.unit
    def test_empty_identifiers_omitted(self):
        """Empty block_id and action_id are left out of the input block."""
        result = text_input(label="Name", block_id="", action_id="")
        assert "block_id" not in result
        assert "action_id" not in result["element"]

    @pytest.mark.unit
    def test_label_required(self):
        """A missing label is rejected after the element is built."""
        with pytest.raises(RequiredFieldViolation):
            text_input(placeholder="Type")

    @pytest.mark.unit
    def test_label_limit(self):
        """Labels are limited to 2000 characters."""
        with pytest.raises(BoundViolation):
            email(label="x" * 2001)

    @pytest.mark.unit
    def test_split_fields(self):
        """Wrapper fields are separated from element fields."""
        wrapper, element = split_fields({"label": "L", "optional": True, "multi": True})
        assert wrapper == {"label": "L", "optional": True}
        assert element == {"multi": True}

    @pytest.mark.unit
    def test_unknown_field_rejected(self):
        """Fields known to neither wrapper nor element are rejected."""
        with pytest.raises(ShapeViolation, match="Unrecognized option"):
            datepicker(label="When", colour="red")


class TestInputs:
    """Tests for concrete input builders."""

    @pytest.mark.unit
    def test_text_input_dispatch(self):
        """dispatch_action also makes the text field dispatch on enter."""
        result = text_input(label="Search", dispatch_action=True, multiline=True)
        assert result["dispatch_action"] is True
        assert result["element"]["dispatch_action_config"] == {
            "trigger_actions_on": ["on_enter_pressed"]
        }
        assert result["element"]["multiline"] is True

    @pytest.mark.unit
    def test_text_input_no_dispatch(self):
        """Without dispatch the element has no dispatch config."""
        result = text_input(label="Notes", optional=True)
        assert "dispatch_action_config" not in result["element"]
        assert result["optional"] is True

    @pytest.mark.unit
    def test_static_select_multi(self, sample_options):
        """Multi static select inputs resolve initial options."""
        result = static_select(
            label="Letters",
            options=sample_options,
            multi=True,
            initial_selection=["B"],
        )
        element = result["element"]
        assert element["type"] == "multi_static_select"
        assert [o["value"] for o in element["initial_options"]] == ["B"]

    @pytest.mark.unit
    def test_users_select_single(self):
        """Single user inputs keep the whole user id."""
        result = users_select(label="Owner", initial_users="U123")
        assert result["element"]["initial_user"] == "U123"

    @pytest.mark.unit
    def test_checkboxes(self, sample_options):
        """Checkbox inputs wrap the checkbox element."""
        result = checkboxes(label="Pick", options=sample_options)
        assert result["element"]["type"] == "checkboxes"

    @pytest.mark.unit
    def test_timezone_picker(self, reference_dir, monkeypatch):
        """Time-zone inputs load zones from the reference directory."""
        monkeypatch.setenv("BLOCKBUILDER_REFERENCE_DIR", str(reference_dir))
        result = timezone_picker(
            label="Zone", placeholder="Pick a zone", initial_timezone="Europe/Rome"
        )
        element = result["element"]
        assert element["type"] == "static_select"
        assert element["option_groups"][0]["label"]["text"] == "Africa"
        assert element["initial_option"]["value"] == "Europe/Rome"

    @pytest.mark.unit
    def test_country_select_explicit(self):
        """Explicit country records override the reference directory."""
        result = country_select(
            label="Country",
            countries=[{"id": "PE", "value": "Peru"}],
            initial_country="PE",
            block_id="country",
        )
        assert result["block_id"] == "country"
        assert result["element"]["option_groups"][0]["label"]["text"] == "P-S"
        assert result["element"]["initial_option"]["text"]["text"] == "Peru"
