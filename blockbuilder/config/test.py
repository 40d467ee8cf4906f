"""Tests for configuration management."""

from pathlib import Path

import pytest

from blockbuilder.config import (
    EnvConfig,
    EnvVar,
    get_default_timezone,
    get_environment,
    get_environment_info,
    get_group_capacity,
    get_log_level,
    get_reference_dir,
    list_environment_variables,
)
from blockbuilder.config.lib import _convert_value


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("BLOCKBUILDER_GROUP_CAPACITY", raising=False)
        assert get_environment(EnvVar.GROUP_CAPACITY) == 100

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("BLOCKBUILDER_GROUP_CAPACITY", "40")
        assert get_environment(EnvVar.GROUP_CAPACITY, override=5) == 5

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("BLOCKBUILDER_GROUP_CAPACITY", "40")
        result = get_environment(EnvVar.GROUP_CAPACITY)
        assert result == 40
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("BLOCKBUILDER_GROUP_CAPACITY", "lots")
        assert get_environment(EnvVar.GROUP_CAPACITY) == 100

    @pytest.mark.unit
    def test_empty_value_returns_default(self, monkeypatch):
        """An empty variable behaves as unset."""
        monkeypatch.setenv("BLOCKBUILDER_LOG_LEVEL", "")
        assert get_environment(EnvVar.LOG_LEVEL) == "INFO"

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables are converted to Path objects."""
        monkeypatch.setenv("BLOCKBUILDER_REFERENCE_DIR", str(tmp_path))
        assert get_environment(EnvVar.REFERENCE_DIR) == tmp_path


class TestConvertValue:
    """Tests for raw value conversion."""

    @pytest.mark.unit
    def test_int_whitespace(self):
        """Surrounding whitespace is ignored for integers."""
        assert _convert_value(" 25 ", int, 100) == 25

    @pytest.mark.unit
    def test_strings_pass_through(self):
        """String values are returned unchanged."""
        assert _convert_value("debug", str, "INFO") == "debug"

    @pytest.mark.unit
    def test_unset_returns_default(self):
        """Missing values use the default."""
        assert _convert_value(None, Path, None) is None


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.GROUP_CAPACITY)
        assert isinstance(info, EnvConfig)
        assert info.name == "BLOCKBUILDER_GROUP_CAPACITY"
        assert info.default == 100
        assert info.var_type is int
        assert info.category == "options"


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_list_all(self):
        """All variables are listed without a category."""
        assert len(list_environment_variables()) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filtering by category returns matching members only."""
        assert list_environment_variables("time") == [EnvVar.DEFAULT_TIMEZONE]
        assert list_environment_variables("unknown") == []


class TestConvenienceFunctions:
    """Tests for convenience accessors."""

    @pytest.mark.unit
    def test_log_level_upper_cased(self, monkeypatch):
        """Log level names are upper-cased."""
        monkeypatch.setenv("BLOCKBUILDER_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_group_capacity_override(self):
        """Explicit capacity wins over configuration."""
        assert get_group_capacity(7) == 7

    @pytest.mark.unit
    def test_default_timezone_unset(self, monkeypatch):
        """Default time zone is None when unset."""
        monkeypatch.delenv("BLOCKBUILDER_DEFAULT_TIMEZONE", raising=False)
        assert get_default_timezone() is None

    @pytest.mark.unit
    def test_reference_dir_override(self, monkeypatch):
        """Override path is returned as a Path."""
        monkeypatch.delenv("BLOCKBUILDER_REFERENCE_DIR", raising=False)
        assert get_reference_dir("/data/ref") == Path("/data/ref")
        assert get_reference_dir() is None
