"""Unit tests for interactive element builders."""

import re

import pytest

from blockbuilder.elements import (
    button,
    checkboxes,
    conversations_select,
    country_select,
    datepicker,
    email_input,
    external_select,
    image,
    overflow,
    plain_text_input,
    radio_buttons,
    static_select,
    timepicker,
    timezone_picker,
    users_select,
)
from blockbuilder.constraints import (
    BoundViolation,
    RequiredFieldViolation,
    ShapeViolation,
)

DIALOG = {
    "title": "Sure?",
    "description": "Really",
    "confirm_text": "Yes",
    "cancel_text": "No",
}


class TestButton:
    """Tests for button."""

    @pytest.mark.unit
    def test_minimal(self):
        """A button needs only text."""
        assert button(text="Go") == {
            "type": "button",
            "text": {"type": "plain_text", "text": "Go", "emoji": True},
        }

    @pytest.mark.unit
    def test_empty_optional_fields_omitted(self):
        """Empty action_id, url and value are treated as absent."""
        assert button(text="Go", action_id="", url="", value="") == {
            "type": "button",
            "text": {"type": "plain_text", "text": "Go", "emoji": True},
        }

    @pytest.mark.unit
    def test_structured_value_serialized(self):
        """Mapping values are serialized to compact JSON."""
        result = button(text="Go", value={"id": 1, "tags": ["a"]}, style="primary")
        assert result["value"] == '{"id":1,"tags":["a"]}'
        assert result["style"] == "primary"

    @pytest.mark.unit
    def test_confirm(self):
        """A complete dialog becomes a confirm object."""
        result = button(text="Go", dialog=DIALOG)
        assert result["confirm"]["deny"] == {"type": "plain_text", "text": "No"}

    @pytest.mark.unit
    def test_unknown_field(self):
        """Unknown keyword fields are rejected."""
        with pytest.raises(ShapeViolation, match="Unrecognized option: colour"):
            button(text="Go", colour="red")


class TestStaticSelect:
    """Tests for static_select."""

    @pytest.mark.unit
    def test_single_initial(self, sample_options):
        """A single select carries the matching option."""
        result = static_select(
            placeholder="Pick", options=sample_options, initial_selection="B"
        )
        assert result["type"] == "static_select"
        assert result["initial_option"] == result["options"][1]
        assert "max_selected_items" not in result

    @pytest.mark.unit
    def test_multi_initial_in_option_order(self, sample_options):
        """Multi selections follow option order."""
        result = static_select(
            options=sample_options,
            initial_selection=["C", "A"],
            multi=True,
            max_selected_items=2,
        )
        assert result["type"] == "multi_static_select"
        assert [o["value"] for o in result["initial_options"]] == ["A", "C"]
        assert result["max_selected_items"] == 2

    @pytest.mark.unit
    def test_max_selected_items_ignored_for_single(self, sample_options):
        """max_selected_items only applies to multi selects."""
        result = static_select(options=sample_options, max_selected_items=3)
        assert "max_selected_items" not in result

    @pytest.mark.unit
    def test_grouped(self, sample_groups):
        """Grouped options become option_groups."""
        result = static_select(
            options=sample_groups, use_group=True, initial_selection="3"
        )
        assert "options" not in result
        assert result["option_groups"][0]["label"]["text"] == "First"
        assert result["initial_option"]["value"] == "3"

    @pytest.mark.unit
    def test_no_match(self, sample_options):
        """An unmatched initial selection is omitted."""
        result = static_select(options=sample_options, initial_selection="Z")
        assert "initial_option" not in result

    @pytest.mark.unit
    def test_too_many_options(self):
        """More than 100 options are rejected."""
        options = [{"text": str(i), "value": str(i)} for i in range(101)]
        with pytest.raises(BoundViolation):
            static_select(options=options)

    @pytest.mark.unit
    def test_focus_and_confirm(self, sample_options):
        """Focus and confirm are emitted only when given."""
        result = static_select(options=sample_options, focus_on_load=True, dialog=DIALOG)
        assert result["focus_on_load"] is True
        assert result["confirm"]["title"]["text"] == "Sure?"
        assert "focus_on_load" not in static_select(options=sample_options)


class TestChoiceLists:
    """Tests for checkboxes, radio buttons and overflow."""

    @pytest.mark.unit
    def test_checkboxes_markdown(self):
        """Checkboxes use mrkdwn text and descriptions."""
        result = checkboxes(
            options=[
                {"text": "*A*", "value": "a", "description": "first"},
                {"text": "B", "value": "b"},
            ],
            initial_selection=["b"],
        )
        assert result["options"][0]["description"] == {"type": "mrkdwn", "text": "first"}
        assert result["initial_options"] == [result["options"][1]]

    @pytest.mark.unit
    def test_radio_initial_coerced(self):
        """Radio initial values match by string form."""
        result = radio_buttons(
            options=[{"text": "One", "value": "1"}, {"text": "Two", "value": "2"}],
            initial_selection=2,
        )
        assert result["initial_option"]["value"] == "2"

    @pytest.mark.unit
    def test_overflow_urls(self):
        """Overflow options keep their url."""
        result = overflow(
            options=[{"text": "Docs", "value": "docs", "url": "https://example.com"}]
        )
        assert result["options"][0]["url"] == "https://example.com"


class TestDynamicSelects:
    """Tests for users, conversations and external selects."""

    @pytest.mark.unit
    def test_users_single_from_list(self):
        """A single users select takes the first id, not its first character."""
        result = users_select(initial_users=["U1", "U2"])
        assert result["type"] == "users_select"
        assert result["initial_user"] == "U1"
        assert users_select(initial_users="U9")["initial_user"] == "U9"

    @pytest.mark.unit
    def test_users_multi(self):
        """A multi users select wraps a single id."""
        result = users_select(initial_users="U1", multi=True, max_selected_items=3)
        assert result["type"] == "multi_users_select"
        assert result["initial_users"] == ["U1"]
        assert result["max_selected_items"] == 3

    @pytest.mark.unit
    def test_conversations_filter(self):
        """The filter is nested with the exclusion flags."""
        result = conversations_select(filter=["im"], initial_conversations="C1")
        assert result["filter"] == {
            "include": ["im"],
            "exclude_bot_users": True,
            "exclude_external_shared_channels": True,
        }
        assert result["initial_conversation"] == "C1"

    @pytest.mark.unit
    def test_conversations_default_filter(self):
        """The default filter shows public and private channels."""
        result = conversations_select(multi=True, initial_conversations=["C1"])
        assert result["filter"]["include"] == ["public", "private"]
        assert result["initial_conversations"] == ["C1"]

    @pytest.mark.unit
    def test_external_single_and_multi(self):
        """External selects use initial_option or initial_options by mode."""
        option = {"text": "A", "value": "a"}
        single = external_select(initial_options=[option], min_query_length=2)
        assert single["initial_option"] == {
            "text": {"type": "plain_text", "text": "A"},
            "value": "a",
        }
        assert single["min_query_length"] == 2
        multi = external_select(initial_options=option, multi=True)
        assert multi["type"] == "multi_external_select"
        assert len(multi["initial_options"]) == 1


class TestReferenceSelects:
    """Tests for the time-zone and country pickers."""

    @pytest.mark.unit
    def test_timezone_picker_explicit(self):
        """Explicit zones are grouped by prefix and split past capacity."""
        zones = [{"zoneName": f"America/City{i:03d}"} for i in range(150)]
        zones.append({"zoneName": "Europe/Rome"})
        result = timezone_picker(timezones=zones, initial_timezone="Europe/Rome")
        labels = [g["label"]["text"] for g in result["option_groups"]]
        assert labels == ["America-1", "America-2", "Europe"]
        assert result["initial_option"]["value"] == "Europe/Rome"

    @pytest.mark.unit
    def test_timezone_picker_bad_records(self):
        """Explicit records must carry a zoneName."""
        with pytest.raises(ShapeViolation):
            timezone_picker(timezones=[{"name": "UTC"}])

    @pytest.mark.unit
    def test_country_select_from_reference_dir(self, reference_dir, monkeypatch):
        """Countries load from the reference directory and match by id."""
        monkeypatch.setenv("BLOCKBUILDER_REFERENCE_DIR", str(reference_dir))
        result = country_select(initial_country="AT")
        assert result["option_groups"][0]["label"]["text"] == "A-C"
        assert result["initial_option"]["text"]["text"] == "Austria"

    @pytest.mark.unit
    def test_country_select_unconfigured(self, monkeypatch):
        """Without records or a directory the select cannot be built."""
        monkeypatch.delenv("BLOCKBUILDER_REFERENCE_DIR", raising=False)
        with pytest.raises(RequiredFieldViolation):
            country_select()


class TestPickersAndFields:
    """Tests for pickers, text fields and images."""

    @pytest.mark.unit
    def test_datepicker(self):
        """Valid dates are carried through."""
        result = datepicker(placeholder="When", initial_date="2024-06-01")
        assert result["initial_date"] == "2024-06-01"
        assert result["placeholder"]["emoji"] is True

    @pytest.mark.unit
    def test_timepicker_parses_clock(self):
        """hh:mm a input becomes 24-hour HH:MM."""
        assert timepicker(initial_time="02:15 PM")["initial_time"] == "14:15"

    @pytest.mark.unit
    def test_timepicker_default_boundary(self, monkeypatch):
        """Without a time the default lands on a 5-minute boundary."""
        monkeypatch.setenv("BLOCKBUILDER_DEFAULT_TIMEZONE", "UTC")
        initial = timepicker()["initial_time"]
        assert re.fullmatch(r"\d{2}:\d{2}", initial)
        assert int(initial[-2:]) % 5 == 0

    @pytest.mark.unit
    def test_plain_text_input(self):
        """Length bounds and enter dispatch are emitted when set."""
        result = plain_text_input(min_length=0, max_length=50, dispatch_on_enter=True)
        assert result["min_length"] == 0
        assert result["max_length"] == 50
        assert result["multiline"] is False
        assert result["dispatch_action_config"] == {
            "trigger_actions_on": ["on_enter_pressed"]
        }

    @pytest.mark.unit
    def test_email_input(self):
        """Email inputs carry their initial value."""
        result = email_input(initial_value="a@example.com")
        assert result == {"type": "email_text_input", "initial_value": "a@example.com"}

    @pytest.mark.unit
    def test_image_default_alt(self):
        """Images default their alt text."""
        assert image(url="https://x/y.png") == {
            "type": "image",
            "image_url": "https://x/y.png",
            "alt_text": "image",
        }
