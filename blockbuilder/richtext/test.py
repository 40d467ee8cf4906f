"""Unit tests for rich text builders."""

import pytest

from blockbuilder.blocks import rich_text
from blockbuilder.constraints import (
    BoundViolation,
    RequiredFieldViolation,
    ShapeViolation,
)
from blockbuilder.richtext import (
    channel,
    emoji,
    link,
    preformatted,
    quote,
    rich_list,
    section,
    text,
    user,
    usergroup,
)


class TestInlineElements:
    """Tests for inline rich text elements."""

    @pytest.mark.unit
    def test_text_with_style(self):
        """Only set style flags are emitted."""
        assert text(text="hi", style={"bold": True}) == {
            "type": "text",
            "text": "hi",
            "style": {"bold": True},
        }

    @pytest.mark.unit
    def test_text_empty_style_dropped(self):
        """An empty style object is omitted."""
        assert text(text="hi", style={}) == {"type": "text", "text": "hi"}

    @pytest.mark.unit
    def test_unknown_style_flag(self):
        """Text styles reject mention-only flags."""
        with pytest.raises(ShapeViolation):
            text(text="hi", style={"highlight": True})

    @pytest.mark.unit
    def test_link(self):
        """Links carry optional text and the unsafe flag."""
        assert link(url="https://example.com") == {
            "type": "link",
            "url": "https://example.com",
        }
        result = link(url="https://example.com", text="Example", unsafe=False)
        assert result["text"] == "Example"
        assert result["unsafe"] is False

    @pytest.mark.unit
    def test_mentions(self):
        """Mentions carry their identifier and style."""
        assert channel(channel_id="C1") == {"type": "channel", "channel_id": "C1"}
        assert user(user_id="U1", style={"highlight": True})["style"] == {
            "highlight": True
        }
        assert usergroup(usergroup_id="S1")["usergroup_id"] == "S1"

    @pytest.mark.unit
    def test_missing_identifier(self):
        """Mentions without an identifier are rejected."""
        with pytest.raises(RequiredFieldViolation):
            user()

    @pytest.mark.unit
    def test_emoji(self):
        """Emoji are referenced by name."""
        assert emoji(name="wave") == {"type": "emoji", "name": "wave"}


class TestContainers:
    """Tests for rich text containers."""

    @pytest.mark.unit
    def test_section(self):
        """Sections wrap inline elements."""
        result = section(elements=[text(text="hi"), emoji(name="wave")])
        assert result["type"] == "rich_text_section"
        assert len(result["elements"]) == 2

    @pytest.mark.unit
    def test_list_defaults_to_bullet(self):
        """Lists default to bullet style and omit unset numbers."""
        item = section(elements=[text(text="one")])
        result = rich_list(elements=[item])
        assert result == {
            "type": "rich_text_list",
            "elements": [item],
            "style": "bullet",
        }

    @pytest.mark.unit
    def test_ordered_list_with_indent(self):
        """Ordered lists keep indent, offset and border."""
        item = section(elements=[text(text="one")])
        result = rich_list(
            elements=[item], style="ordered", indent=1, offset=2, border=0
        )
        assert result["style"] == "ordered"
        assert (result["indent"], result["offset"], result["border"]) == (1, 2, 0)

    @pytest.mark.unit
    def test_list_style_enum(self):
        """Unknown list styles are rejected."""
        item = section(elements=[text(text="one")])
        with pytest.raises(ShapeViolation):
            rich_list(elements=[item], style="dashed")

    @pytest.mark.unit
    def test_quote_and_preformatted(self):
        """Quotes and preformatted blocks carry a border."""
        assert quote(elements=[text(text="q")], border=1)["border"] == 1
        assert preformatted(elements=[text(text="code")])["type"] == (
            "rich_text_preformatted"
        )

    @pytest.mark.unit
    def test_empty_container(self):
        """Containers need at least one element."""
        with pytest.raises(BoundViolation):
            section(elements=[])

    @pytest.mark.unit
    def test_in_rich_text_block(self):
        """Containers assemble into a rich text block."""
        block = rich_text(elements=[section(elements=[text(text="hi")])])
        assert block["elements"][0]["elements"][0]["text"] == "hi"
