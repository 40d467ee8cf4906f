"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Environment and reference cache isolation between tests
- Sample option lists and groups
- Reference data written to a temporary directory
"""

import json

import pytest
from dotenv import load_dotenv

from blockbuilder.config import EnvVar
from blockbuilder.reference import clear_cache

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Reference Data
# =============================================================================

TIMEZONES = [
    "Africa/Abidjan",
    "Africa/Cairo",
    "America/New_York",
    "America/Sao_Paulo",
    "Asia/Tokyo",
    "Europe/London",
    "Europe/Rome",
]

COUNTRIES = [
    {"id": "AT", "value": "Austria"},
    {"id": "DE", "value": "Germany"},
    {"id": "JP", "value": "Japan"},
    {"id": "PE", "value": "Peru"},
    {"id": "US", "value": "United States"},
]


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Clear blockbuilder settings and cached reference data for each test."""
    for var in EnvVar:
        monkeypatch.delenv(var.value.name, raising=False)
    clear_cache()
    yield
    clear_cache()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def sample_options():
    """Three flat options with letter values."""
    return [
        {"text": "Alpha", "value": "A"},
        {"text": "Bravo", "value": "B"},
        {"text": "Charlie", "value": "C"},
    ]


@pytest.fixture
def sample_groups():
    """Two labelled option groups."""
    return [
        {"label": "First", "options": [{"text": "One", "value": "1"}]},
        {
            "label": "Second",
            "options": [
                {"text": "Two", "value": "2"},
                {"text": "Three", "value": "3"},
            ],
        },
    ]


@pytest.fixture
def reference_dir(tmp_path):
    """Directory holding small timezones.json and countries.json files."""
    directory = tmp_path / "reference"
    directory.mkdir()
    (directory / "timezones.json").write_text(
        json.dumps([{"zoneName": zone} for zone in TIMEZONES]), encoding="utf-8"
    )
    (directory / "countries.json").write_text(json.dumps(COUNTRIES), encoding="utf-8")
    return directory
