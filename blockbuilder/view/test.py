"""Unit tests for view assembly."""

import pytest

from blockbuilder import blocks, inputs
from blockbuilder.constraints import (
    BoundViolation,
    RequiredFieldViolation,
    ShapeViolation,
    UniquenessViolation,
)
from blockbuilder.view import ViewType, build_view, validate_view


@pytest.fixture
def body():
    return [blocks.header(text="Report"), blocks.divider()]


class TestModalTitle:
    """Tests for the modal title bound."""

    @pytest.mark.unit
    def test_missing_title(self, body):
        """Modals require a title."""
        with pytest.raises(RequiredFieldViolation) as exc:
            validate_view(blocks=body)
        assert exc.value.field == "title"

    @pytest.mark.unit
    def test_empty_title_is_missing(self, body):
        """An empty modal title counts as missing."""
        with pytest.raises(RequiredFieldViolation) as exc:
            build_view(blocks=body, title="")
        assert exc.value.field == "title"

    @pytest.mark.unit
    def test_title_too_long(self, body):
        """Titles longer than 24 characters are rejected."""
        with pytest.raises(BoundViolation):
            validate_view(blocks=body, title="x" * 25)

    @pytest.mark.unit
    def test_title_at_limit(self, body):
        """A 24 character title is accepted."""
        config = validate_view(blocks=body, title="x" * 24)
        assert config.title == "x" * 24

    @pytest.mark.unit
    def test_submit_limit(self, body):
        """Submit labels share the 24 character limit."""
        with pytest.raises(BoundViolation):
            validate_view(blocks=body, title="T", submit_text="x" * 25)


class TestBlocks:
    """Tests for the block list checks."""

    @pytest.mark.unit
    def test_blocks_required(self):
        """A view without blocks is rejected."""
        with pytest.raises(RequiredFieldViolation):
            validate_view(title="T")

    @pytest.mark.unit
    def test_empty_blocks(self):
        """A view needs at least one block."""
        with pytest.raises(BoundViolation):
            validate_view(title="T", blocks=[])

    @pytest.mark.unit
    def test_too_many_blocks(self):
        """More than 100 blocks are rejected."""
        with pytest.raises(BoundViolation):
            validate_view(title="T", blocks=[blocks.divider()] * 101)

    @pytest.mark.unit
    def test_untyped_block(self):
        """Blocks must carry a type."""
        with pytest.raises(ShapeViolation) as exc:
            validate_view(title="T", blocks=[blocks.divider(), {"text": "x"}])
        assert exc.value.position == 1

    @pytest.mark.unit
    def test_duplicate_block_id(self):
        """Duplicate block identifiers are rejected."""
        with pytest.raises(UniquenessViolation, match="dup"):
            validate_view(
                title="T",
                blocks=[blocks.divider(block_id="dup"), blocks.divider(block_id="dup")],
            )


class TestMetadata:
    """Tests for callback_id and metadata."""

    @pytest.mark.unit
    def test_callback_id_limit(self, body):
        """Callback identifiers are limited to 255 characters."""
        with pytest.raises(BoundViolation):
            validate_view(blocks=body, title="T", callback_id="x" * 256)

    @pytest.mark.unit
    def test_metadata_limit(self, body):
        """Serialized metadata is limited to 3000 characters."""
        with pytest.raises(BoundViolation):
            validate_view(blocks=body, title="T", metadata={"k": "x" * 3000})


class TestBuildView:
    """Tests for payload assembly."""

    @pytest.mark.unit
    def test_modal_payload(self, body):
        """Modal payloads carry title, submit, close and metadata."""
        view = build_view(
            blocks=body,
            title="Report",
            submit_text="Send",
            close_text="Cancel",
            callback_id="report",
            metadata={"channel": "C1"},
        )
        assert view == {
            "type": "modal",
            "blocks": body,
            "title": {"type": "plain_text", "text": "Report", "emoji": True},
            "submit": {"type": "plain_text", "text": "Send", "emoji": True},
            "close": {"type": "plain_text", "text": "Cancel", "emoji": True},
            "callback_id": "report",
            "private_metadata": '{"channel":"C1"}',
        }

    @pytest.mark.unit
    def test_empty_optionals_omitted(self):
        """Empty ids and labels are left out of the view and its blocks."""
        view = build_view(
            title="T",
            submit_text="",
            callback_id="",
            metadata="",
            blocks=[blocks.divider(block_id=""), blocks.divider(block_id="")],
        )
        assert view == {
            "type": "modal",
            "blocks": [{"type": "divider"}, {"type": "divider"}],
            "title": {"type": "plain_text", "text": "T", "emoji": True},
        }

    @pytest.mark.unit
    def test_string_metadata(self, body):
        """String metadata is passed through unchanged."""
        view = build_view(blocks=body, title="T", metadata="state")
        assert view["private_metadata"] == "state"

    @pytest.mark.unit
    def test_home_view(self, body):
        """Home views carry no surface text."""
        view = build_view(type=ViewType.HOME.value, blocks=body)
        assert view == {"type": "home", "blocks": body}

    @pytest.mark.unit
    def test_home_view_rejects_title(self, body):
        """Home views do not accept a title."""
        with pytest.raises(ShapeViolation):
            build_view(type="home", blocks=body, title="T")

    @pytest.mark.unit
    def test_with_inputs(self, sample_options):
        """Input blocks assemble into a modal."""
        view = build_view(
            title="Survey",
            blocks=[
                inputs.text_input(label="Name", block_id="name"),
                inputs.radio_buttons(
                    label="Letter", options=sample_options, block_id="letter"
                ),
            ],
        )
        assert [b["block_id"] for b in view["blocks"]] == ["name", "letter"]

    @pytest.mark.unit
    def test_unknown_field(self, body):
        """Unknown view fields are rejected."""
        with pytest.raises(ShapeViolation):
            build_view(blocks=body, title="T", colour="red")
