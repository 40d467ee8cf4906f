"""Unit tests for section accessories."""

import pytest

from blockbuilder.accessory import (
    button,
    conversations_select,
    datepicker,
    image,
    overflow,
    static_select,
    users_select,
)
from blockbuilder.constraints import BoundViolation


class TestAccessories:
    """Tests for accessory wrappers."""

    @pytest.mark.unit
    def test_wraps_element(self):
        """Accessories wrap the bare element under one key."""
        result = button(text="Go", value="go", action_id="go-button")
        assert list(result) == ["accessory"]
        assert result["accessory"]["type"] == "button"
        assert result["accessory"]["action_id"] == "go-button"

    @pytest.mark.unit
    def test_default_placeholders(self, sample_options):
        """Menu accessories fill in a placeholder."""
        select = static_select(options=sample_options)["accessory"]
        assert select["placeholder"]["text"] == "Pick an option"
        assert datepicker()["accessory"]["placeholder"]["text"] == "Select a date"
        channel = conversations_select()["accessory"]
        assert channel["placeholder"]["text"] == "Select channel"

    @pytest.mark.unit
    def test_explicit_placeholder_kept(self, sample_options):
        """A caller placeholder overrides the default."""
        select = static_select(options=sample_options, placeholder="Choose")
        assert select["accessory"]["placeholder"]["text"] == "Choose"

    @pytest.mark.unit
    def test_users_select_type(self):
        """Users select accessories use the platform type names."""
        assert users_select()["accessory"]["type"] == "users_select"
        assert users_select(multi=True)["accessory"]["type"] == "multi_users_select"

    @pytest.mark.unit
    def test_image(self):
        """Image accessories carry url and alt text."""
        assert image(url="https://x/y.png", alt="logo") == {
            "accessory": {
                "type": "image",
                "image_url": "https://x/y.png",
                "alt_text": "logo",
            }
        }

    @pytest.mark.unit
    def test_validation_applies(self):
        """Wrapped elements are still validated."""
        options = [{"text": str(i), "value": str(i)} for i in range(6)]
        with pytest.raises(BoundViolation):
            overflow(options=options)
