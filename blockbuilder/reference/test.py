"""Unit tests for reference data loading."""

import json

import pytest

from blockbuilder.constraints import RequiredFieldViolation, ShapeViolation
from blockbuilder.reference import clear_cache, load_countries, load_timezones


class TestLoadReferenceData:
    """Tests for load_timezones and load_countries."""

    @pytest.mark.unit
    def test_loads_from_configured_dir(self, reference_dir, monkeypatch):
        """Records are read from BLOCKBUILDER_REFERENCE_DIR."""
        monkeypatch.setenv("BLOCKBUILDER_REFERENCE_DIR", str(reference_dir))
        zones = load_timezones()
        assert zones[0]["zoneName"] == "Africa/Abidjan"
        countries = load_countries()
        assert {"id": "AT", "value": "Austria"} in [dict(c) for c in countries]

    @pytest.mark.unit
    def test_cached_once(self, reference_dir):
        """Repeated loads return the same cached tuple."""
        assert load_timezones(reference_dir) is load_timezones(reference_dir)

    @pytest.mark.unit
    def test_records_read_only(self, reference_dir):
        """Cached records cannot be mutated."""
        record = load_countries(reference_dir)[0]
        with pytest.raises(TypeError):
            record["value"] = "Elsewhere"

    @pytest.mark.unit
    def test_unconfigured(self, monkeypatch):
        """Missing configuration raises RequiredFieldViolation."""
        monkeypatch.delenv("BLOCKBUILDER_REFERENCE_DIR", raising=False)
        with pytest.raises(RequiredFieldViolation):
            load_timezones()

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        """A directory without the data file is reported."""
        with pytest.raises(RequiredFieldViolation):
            load_countries(tmp_path)

    @pytest.mark.unit
    def test_malformed_records(self, tmp_path):
        """Records without the expected fields are rejected."""
        (tmp_path / "timezones.json").write_text(json.dumps([{"name": "UTC"}]))
        clear_cache()
        with pytest.raises(ShapeViolation):
            load_timezones(tmp_path)

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path):
        """Unparseable files raise ShapeViolation."""
        (tmp_path / "countries.json").write_text("{not json")
        with pytest.raises(ShapeViolation):
            load_countries(tmp_path)
