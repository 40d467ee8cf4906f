"""Unit tests for layout block builders."""

import pytest

from blockbuilder import accessory, elements
from blockbuilder.blocks import (
    actions,
    context,
    divider,
    fields,
    header,
    image,
    markdown,
    plain_text,
    rich_text,
)
from blockbuilder.constraints import (
    BoundViolation,
    RequiredFieldViolation,
    ShapeViolation,
)


class TestSimpleBlocks:
    """Tests for divider, header, image and fields."""

    @pytest.mark.unit
    def test_divider(self):
        """Dividers carry only their type and optional block_id."""
        assert divider() == {"type": "divider"}
        assert divider(block_id="d1") == {"type": "divider", "block_id": "d1"}

    @pytest.mark.unit
    def test_empty_block_id_omitted(self):
        """An empty block_id is treated as absent."""
        assert "block_id" not in header(text="Hi", block_id="")
        assert divider(block_id="") == {"type": "divider"}

    @pytest.mark.unit
    def test_block_id_limit(self):
        """Block identifiers are limited to 255 characters."""
        with pytest.raises(BoundViolation):
            divider(block_id="x" * 256)

    @pytest.mark.unit
    def test_header(self):
        """Headers use plain text without the emoji flag."""
        assert header(text="Title") == {
            "type": "header",
            "text": {"type": "plain_text", "text": "Title"},
        }

    @pytest.mark.unit
    def test_image_title(self):
        """Image titles become plain text objects."""
        result = image(url="https://x/y.png", title="Chart")
        assert result["alt_text"] == "image"
        assert result["title"] == {"type": "plain_text", "text": "Chart"}

    @pytest.mark.unit
    def test_fields(self):
        """Field texts become mrkdwn objects in a section."""
        result = fields(fields=["*A*", "B"], block_id="f")
        assert result == {
            "type": "section",
            "fields": [
                {"type": "mrkdwn", "text": "*A*"},
                {"type": "mrkdwn", "text": "B"},
            ],
            "block_id": "f",
        }

    @pytest.mark.unit
    def test_fields_limit(self):
        """More than ten fields are rejected."""
        with pytest.raises(BoundViolation):
            fields(fields=["x"] * 11)


class TestContext:
    """Tests for context."""

    @pytest.mark.unit
    def test_string(self):
        """A string becomes one mrkdwn element."""
        assert context(text="hi")["elements"] == [{"type": "mrkdwn", "text": "hi"}]

    @pytest.mark.unit
    def test_entries_with_images(self):
        """Image entries precede their text."""
        result = context(
            text=[{"text": "Logo", "image": {"url": "https://x/l.png"}}, "plain"]
        )
        assert result["elements"] == [
            {"type": "image", "image_url": "https://x/l.png", "alt_text": "image"},
            {"type": "mrkdwn", "text": "Logo"},
            {"type": "mrkdwn", "text": "plain"},
        ]

    @pytest.mark.unit
    def test_missing_text(self):
        """Context requires text."""
        with pytest.raises(RequiredFieldViolation):
            context()


class TestSections:
    """Tests for markdown and plain text sections."""

    @pytest.mark.unit
    def test_markdown(self):
        """Markdown sections use mrkdwn text."""
        assert markdown(text="*bold*") == {
            "type": "section",
            "text": {"type": "mrkdwn", "text": "*bold*"},
        }

    @pytest.mark.unit
    def test_plain_text(self):
        """Plain text sections enable emoji."""
        assert plain_text(text="hi")["text"] == {
            "type": "plain_text",
            "text": "hi",
            "emoji": True,
        }

    @pytest.mark.unit
    def test_accessory_spread(self, sample_options):
        """Accessory builders spread into section fields."""
        result = markdown(
            text="Choose", **accessory.static_select(options=sample_options)
        )
        assert result["accessory"]["type"] == "static_select"

    @pytest.mark.unit
    def test_text_limit(self):
        """Section text is limited to 3000 characters."""
        with pytest.raises(BoundViolation):
            markdown(text="x" * 3001)

    @pytest.mark.unit
    def test_missing_text(self):
        """Sections require text."""
        with pytest.raises(RequiredFieldViolation):
            plain_text()


class TestContainers:
    """Tests for actions and rich text blocks."""

    @pytest.mark.unit
    def test_actions(self):
        """Actions hold built elements."""
        result = actions(elements=[elements.button(text="Go")], block_id="a")
        assert result["elements"][0]["type"] == "button"
        assert result["block_id"] == "a"

    @pytest.mark.unit
    def test_actions_limit(self):
        """More than 25 elements are rejected."""
        with pytest.raises(BoundViolation):
            actions(elements=[elements.button(text="Go")] * 26)

    @pytest.mark.unit
    def test_rich_text_rejects_inline_elements(self):
        """Rich text blocks take containers, not inline elements."""
        with pytest.raises(ShapeViolation):
            rich_text(elements=[{"type": "text", "text": "hi"}])
