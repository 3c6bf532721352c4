"""Tests for DrinkList settings."""
import pytest
from pydantic import ValidationError

from drinklist.config.settings import (
    DrinkListSettings,
    StreamlitSettings,
    get_settings,
)


def test_defaults(clean_settings):
    """Test default settings."""
    settings = get_settings()
    assert settings.WARNING_THRESHOLDS == [10, 20]
    assert settings.TOTAL_PRECISION == 2
    assert settings.APP_TITLE == "My Drink List"


def test_env_overrides(clean_settings):
    """Test reading settings from DRINKLIST_ environment variables."""
    clean_settings.setenv("DRINKLIST_WARNING_THRESHOLDS", "[20, 5, 5]")
    clean_settings.setenv("DRINKLIST_LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.WARNING_THRESHOLDS == [5, 20]
    assert settings.LOG_LEVEL == "DEBUG"


def test_settings_are_cached(clean_settings):
    """Test that get_settings returns the same instance."""
    assert get_settings() is get_settings()


@pytest.mark.parametrize("kwargs", [
    {"LOG_LEVEL": "LOUD"},
    {"LOG_FORMAT": "fancy"},
    {"WARNING_THRESHOLDS": [10, 0]},
    {"TOTAL_PRECISION": -1},
])
def test_invalid_settings(kwargs):
    """Test that bad values are rejected."""
    with pytest.raises(ValidationError):
        DrinkListSettings(**kwargs)


def test_log_file_directory_created(tmp_path):
    """Test that the log file directory is created."""
    log_file = tmp_path / "logs" / "drinks.log"
    settings = DrinkListSettings(LOG_FILE=log_file)
    assert settings.LOG_FILE == log_file
    assert log_file.parent.exists()


def test_streamlit_settings_validation():
    """Test Streamlit settings validation."""
    assert StreamlitSettings().LIST_COLUMNS == 4
    with pytest.raises(ValidationError):
        StreamlitSettings(LAYOUT="full")
    with pytest.raises(ValidationError):
        StreamlitSettings(LIST_COLUMNS=0)
