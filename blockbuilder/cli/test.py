"""Unit tests for the command line interface."""

import json

import pytest

from blockbuilder.cli import build_parser, main


@pytest.fixture
def view_file(tmp_path):
    def write(fields):
        path = tmp_path / "view.json"
        path.write_text(json.dumps(fields), encoding="utf-8")
        return path

    return write


class TestParser:
    """Tests for argument parsing."""

    @pytest.mark.unit
    def test_subcommands(self):
        """Each subcommand parses its arguments."""
        parser = build_parser()
        assert parser.parse_args(["kinds", "--category", "block"]).category == "block"
        assert parser.parse_args(["schema", "button"]).kind == "button"
        assert parser.parse_args(["validate", "view.json"]).file == "view.json"

    @pytest.mark.unit
    def test_no_command(self):
        """Running without a command prints help and fails."""
        assert main([]) == 1


class TestKinds:
    """Tests for the kinds command."""

    @pytest.mark.unit
    def test_all_kinds(self, capsys):
        """All registered kinds are listed."""
        assert main(["kinds"]) == 0
        out = capsys.readouterr().out
        assert "static_select" in out
        assert "view" in out

    @pytest.mark.unit
    def test_category_filter(self, capsys):
        """A category limits the listing."""
        assert main(["kinds", "--category", "rich_text"]) == 0
        out = capsys.readouterr().out
        assert "rich_text_list" in out
        assert "static_select" not in out


class TestSchema:
    """Tests for the schema command."""

    @pytest.mark.unit
    def test_known_kind(self, capsys):
        """The schema of a known kind is printed as JSON."""
        assert main(["schema", "button"]) == 0
        schema = json.loads(capsys.readouterr().out)
        assert "text" in schema["properties"]

    @pytest.mark.unit
    def test_unknown_kind(self):
        """Unknown kinds fail with exit code 1."""
        assert main(["schema", "carousel"]) == 1


class TestValidate:
    """Tests for the validate command."""

    @pytest.mark.unit
    def test_valid_view(self, view_file, capsys):
        """A valid view prints its payload."""
        path = view_file({"title": "Hello", "blocks": [{"type": "divider"}]})
        assert main(["validate", str(path)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["title"]["text"] == "Hello"

    @pytest.mark.unit
    def test_invalid_view(self, view_file, caplog):
        """Constraint violations are logged and fail."""
        path = view_file({"title": "x" * 25, "blocks": [{"type": "divider"}]})
        assert main(["validate", str(path)]) == 1
        assert "title" in caplog.text

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        """Unreadable files fail."""
        assert main(["validate", str(tmp_path / "missing.json")]) == 1

    @pytest.mark.unit
    def test_not_an_object(self, view_file):
        """The file must hold a JSON object."""
        path = view_file([{"type": "divider"}])
        assert main(["validate", str(path)]) == 1
