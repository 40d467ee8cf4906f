"""Unit tests for node validators."""

import pytest

from blockbuilder.constraints import (
    BoundViolation,
    RequiredFieldViolation,
    ShapeViolation,
)
from blockbuilder.nodes import NodeKind, models
from blockbuilder.validators import (
    validate_actions,
    validate_button,
    validate_choice_list,
    validate_confirm_dialog,
    validate_context,
    validate_conversations_select,
    validate_datepicker,
    validate_external_select,
    validate_fields,
    validate_header,
    validate_image,
    validate_input,
    validate_mention,
    validate_overflow,
    validate_plain_text_input,
    validate_rich_text,
    validate_rich_text_container,
    validate_static_select,
    validate_timepicker,
    validate_users_select,
)


def _options(count: int) -> list[dict]:
    return [{"text": f"Option {i}", "value": f"v{i}"} for i in range(count)]


FULL_DIALOG = {
    "title": "Delete?",
    "description": "This cannot be undone",
    "confirm_text": "Delete",
    "cancel_text": "Keep",
}


class TestConfirmDialog:
    """Tests for the all-or-nothing dialog rule."""

    @pytest.mark.unit
    def test_absent_and_empty(self):
        """Missing and empty dialogs pass."""
        validate_confirm_dialog(None)
        validate_confirm_dialog(models.ConfirmDialog())

    @pytest.mark.unit
    def test_complete(self):
        """A dialog with all four fields passes."""
        validate_confirm_dialog(models.ConfirmDialog(**FULL_DIALOG))

    @pytest.mark.unit
    def test_missing_cancel_text(self):
        """A partial dialog raises RequiredFieldViolation."""
        partial = {k: v for k, v in FULL_DIALOG.items() if k != "cancel_text"}
        with pytest.raises(RequiredFieldViolation) as exc:
            validate_confirm_dialog(models.ConfirmDialog(**partial))
        assert exc.value.field == "dialog.cancel_text"

    @pytest.mark.unit
    def test_description_limit(self):
        """The description is limited to 300 characters."""
        dialog = models.ConfirmDialog(**{**FULL_DIALOG, "description": "x" * 301})
        with pytest.raises(BoundViolation):
            validate_confirm_dialog(dialog)


class TestBlockValidators:
    """Tests for layout block validators."""

    @pytest.mark.unit
    def test_actions_bounds(self):
        """Actions hold 1 to 25 typed elements."""
        element = {"type": "button"}
        validate_actions(models.ActionsConfig(elements=[element] * 25))
        with pytest.raises(BoundViolation):
            validate_actions(models.ActionsConfig(elements=[element] * 26))
        with pytest.raises(BoundViolation):
            validate_actions(models.ActionsConfig(elements=[]))
        with pytest.raises(RequiredFieldViolation):
            validate_actions(models.ActionsConfig())

    @pytest.mark.unit
    def test_actions_untyped_element(self):
        """Elements without a type are rejected."""
        with pytest.raises(ShapeViolation):
            validate_actions(models.ActionsConfig(elements=[{"text": "x"}]))

    @pytest.mark.unit
    def test_context_forms(self):
        """Context accepts a string, strings, or text/image entries."""
        validate_context(models.ContextConfig(text="hi"))
        validate_context(models.ContextConfig(text=["a", "b"]))
        validate_context(
            models.ContextConfig(text=[{"image": {"url": "https://x/y.png"}}])
        )

    @pytest.mark.unit
    def test_context_entry_limit(self):
        """Context holds at most 10 entries."""
        with pytest.raises(BoundViolation):
            validate_context(models.ContextConfig(text=["a"] * 11))

    @pytest.mark.unit
    def test_context_empty_entry(self):
        """An entry with neither text nor image is rejected with its position."""
        with pytest.raises(RequiredFieldViolation) as exc:
            validate_context(models.ContextConfig(text=["a", {}]))
        assert exc.value.position == 1

    @pytest.mark.unit
    def test_fields(self):
        """Section fields hold 1 to 10 texts of at most 2000 characters."""
        validate_fields(models.FieldsConfig(fields=["a"] * 10))
        with pytest.raises(BoundViolation):
            validate_fields(models.FieldsConfig(fields=["a"] * 11))
        with pytest.raises(BoundViolation) as exc:
            validate_fields(models.FieldsConfig(fields=["a", "x" * 2001]))
        assert exc.value.position == 1

    @pytest.mark.unit
    def test_header_limit(self):
        """Header text is limited to 150 characters."""
        validate_header(models.HeaderConfig(text="x" * 150))
        with pytest.raises(BoundViolation):
            validate_header(models.HeaderConfig(text="x" * 151))

    @pytest.mark.unit
    def test_image(self):
        """Images require a url and limit the title."""
        validate_image(models.ImageConfig(url="https://x/y.png"))
        with pytest.raises(RequiredFieldViolation):
            validate_image(models.ImageElementConfig())
        with pytest.raises(BoundViolation):
            validate_image(models.ImageConfig(url="https://x", title="t" * 2001))

    @pytest.mark.unit
    def test_rich_text_container_types(self):
        """Rich text blocks only hold rich text containers."""
        validate_rich_text(
            models.RichTextConfig(elements=[{"type": "rich_text_section"}])
        )
        with pytest.raises(ShapeViolation):
            validate_rich_text(models.RichTextConfig(elements=[{"type": "button"}]))

    @pytest.mark.unit
    def test_input(self):
        """Input blocks require a label and an element."""
        element = {"type": "plain_text_input"}
        validate_input(models.InputBlockConfig(label="Name", element=element))
        with pytest.raises(RequiredFieldViolation):
            validate_input(models.InputBlockConfig(element=element))
        with pytest.raises(RequiredFieldViolation):
            validate_input(models.InputBlockConfig(label="Name"))
        with pytest.raises(BoundViolation):
            validate_input(
                models.InputBlockConfig(label="Name", element=element, hint="h" * 2001)
            )


class TestElementValidators:
    """Tests for interactive element validators."""

    @pytest.mark.unit
    def test_button(self):
        """Buttons limit text, value and style."""
        validate_button(models.ButtonConfig(text="Go", value={"id": 1}, style="danger"))
        with pytest.raises(BoundViolation):
            validate_button(models.ButtonConfig(text="x" * 76))
        with pytest.raises(ShapeViolation):
            validate_button(models.ButtonConfig(text="Go", style="secondary"))
        with pytest.raises(BoundViolation):
            validate_button(models.ButtonConfig(text="Go", value={"v": "x" * 2000}))

    @pytest.mark.unit
    def test_button_partial_dialog(self):
        """Buttons check their confirm dialog."""
        with pytest.raises(RequiredFieldViolation):
            validate_button(
                models.ButtonConfig(text="Go", dialog={"title": "Sure?"})
            )

    @pytest.mark.unit
    def test_static_select_option_bounds(self):
        """Static selects hold 1 to 100 options."""
        validate_static_select(models.StaticSelectConfig(options=_options(100)))
        with pytest.raises(BoundViolation):
            validate_static_select(models.StaticSelectConfig(options=_options(101)))
        with pytest.raises(BoundViolation):
            validate_static_select(models.StaticSelectConfig(options=[]))

    @pytest.mark.unit
    def test_static_select_groups(self):
        """Grouped selects check group shape and inner options."""
        groups = [{"label": "G", "options": _options(3)}]
        validate_static_select(models.StaticSelectConfig(options=groups, use_group=True))
        with pytest.raises(ShapeViolation):
            validate_static_select(
                models.StaticSelectConfig(options=_options(2), use_group=True)
            )
        bad = [{"label": "G", "options": [{"text": "x" * 151, "value": "v"}]}]
        with pytest.raises(BoundViolation) as exc:
            validate_static_select(models.StaticSelectConfig(options=bad, use_group=True))
        assert exc.value.position == "0.0"

    @pytest.mark.unit
    def test_static_select_group_in_flat_mode(self):
        """A group passed without use_group is not a valid option."""
        groups = [{"label": "G", "options": _options(1)}]
        with pytest.raises(RequiredFieldViolation):
            validate_static_select(models.StaticSelectConfig(options=groups))

    @pytest.mark.unit
    def test_max_selected_items(self):
        """max_selected_items must be at least one in multi mode."""
        config = models.StaticSelectConfig(
            options=_options(2), multi=True, max_selected_items=0
        )
        with pytest.raises(BoundViolation):
            validate_static_select(config)

    @pytest.mark.unit
    def test_users_select_ids(self):
        """Initial users must be non-empty identifiers."""
        validate_users_select(models.UsersSelectConfig(initial_users=["U1", "U2"]))
        with pytest.raises(BoundViolation):
            validate_users_select(models.UsersSelectConfig(initial_users=["U1", ""]))

    @pytest.mark.unit
    def test_conversation_filter(self):
        """Filters must be a non-empty subset of the known types."""
        validate_conversations_select(models.ConversationsSelectConfig(filter=["im"]))
        with pytest.raises(BoundViolation):
            validate_conversations_select(models.ConversationsSelectConfig(filter=[]))
        with pytest.raises(ShapeViolation):
            validate_conversations_select(
                models.ConversationsSelectConfig(filter=["public", "group"])
            )

    @pytest.mark.unit
    def test_external_select_initial_options(self):
        """Initial options are validated like static options."""
        validate_external_select(
            models.ExternalSelectConfig(initial_options={"text": "A", "value": "a"})
        )
        with pytest.raises(RequiredFieldViolation):
            validate_external_select(
                models.ExternalSelectConfig(initial_options=[{"text": "A"}])
            )

    @pytest.mark.unit
    def test_overflow_bounds(self):
        """Overflow menus hold 1 to 5 options."""
        validate_overflow(models.OverflowConfig(options=_options(5)))
        with pytest.raises(BoundViolation):
            validate_overflow(models.OverflowConfig(options=_options(6)))

    @pytest.mark.unit
    def test_choice_list_bounds(self):
        """Checkboxes and radio buttons hold 1 to 10 options."""
        validate_choice_list(
            models.ChoiceListConfig(options=_options(10)), NodeKind.CHECKBOXES
        )
        with pytest.raises(BoundViolation):
            validate_choice_list(
                models.ChoiceListConfig(options=_options(11)), NodeKind.RADIO_BUTTONS
            )

    @pytest.mark.unit
    def test_datepicker_strict_date(self):
        """Initial dates must be strict YYYY-MM-DD calendar dates."""
        validate_datepicker(models.DatepickerConfig(initial_date="2024-02-29"))
        for bad in ("2023-02-29", "2024-2-1", "01/02/2024"):
            with pytest.raises(ShapeViolation):
                validate_datepicker(models.DatepickerConfig(initial_date=bad))

    @pytest.mark.unit
    def test_timepicker(self):
        """Time pickers check the zone and the clock format."""
        validate_timepicker(
            models.TimepickerConfig(initial_time="09:30 AM", timezone="Europe/Rome")
        )
        with pytest.raises(ShapeViolation):
            validate_timepicker(models.TimepickerConfig(timezone="Mars/Olympus"))
        with pytest.raises(ShapeViolation):
            validate_timepicker(models.TimepickerConfig(initial_time="half past"))

    @pytest.mark.unit
    def test_plain_text_input_lengths(self):
        """Length bounds are range-checked and ordered."""
        validate_plain_text_input(
            models.PlainTextInputConfig(min_length=0, max_length=3000)
        )
        with pytest.raises(BoundViolation):
            validate_plain_text_input(models.PlainTextInputConfig(min_length=3001))
        with pytest.raises(BoundViolation):
            validate_plain_text_input(models.PlainTextInputConfig(max_length=0))
        with pytest.raises(BoundViolation, match="at most max_length"):
            validate_plain_text_input(
                models.PlainTextInputConfig(min_length=10, max_length=5)
            )


class TestRichTextValidators:
    """Tests for rich text validators."""

    @pytest.mark.unit
    def test_list_items_are_sections(self):
        """List items must be rich text sections."""
        section = {"type": "rich_text_section", "elements": []}
        validate_rich_text_container(
            models.RichTextListConfig(elements=[section]), NodeKind.RICH_TEXT_LIST
        )
        with pytest.raises(ShapeViolation):
            validate_rich_text_container(
                models.RichTextListConfig(elements=[{"type": "text"}]),
                NodeKind.RICH_TEXT_LIST,
            )

    @pytest.mark.unit
    def test_container_requires_elements(self):
        """Containers need at least one element."""
        with pytest.raises(BoundViolation):
            validate_rich_text_container(
                models.RichTextContainerConfig(elements=[]), NodeKind.RICH_TEXT_QUOTE
            )

    @pytest.mark.unit
    def test_mentions(self):
        """Mentions require their identifier."""
        validate_mention(models.UserElementConfig(user_id="U123"))
        with pytest.raises(RequiredFieldViolation) as exc:
            validate_mention(models.ChannelElementConfig())
        assert exc.value.field == "channel_id"
