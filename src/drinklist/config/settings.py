"""Configuration settings for DrinkList."""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root sits above src/
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default log directory
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "drinklist.log"


class DrinkListSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    # Drink list settings
    WARNING_THRESHOLDS: List[int] = [10, 20]
    TOTAL_PRECISION: int = 2
    APP_TITLE: str = "My Drink List"

    model_config = SettingsConfigDict(
        env_prefix="DRINKLIST_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure log file path is absolute and parent directory exists
        if self.LOG_FILE:
            if not self.LOG_FILE.is_absolute():
                self.LOG_FILE = PROJECT_ROOT / self.LOG_FILE
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v

    @field_validator("WARNING_THRESHOLDS")
    @classmethod
    def validate_thresholds(cls, v: List[int]) -> List[int]:
        if any(threshold <= 0 for threshold in v):
            raise ValueError("Warning thresholds must be positive")
        return sorted(set(v))

    @field_validator("TOTAL_PRECISION")
    @classmethod
    def validate_precision(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Total precision cannot be negative")
        return v


class StreamlitSettings(BaseSettings):
    """Streamlit-specific settings."""
    LAYOUT: str = "wide"
    PAGE_ICON: str = "🍺"
    LIST_COLUMNS: int = 4

    model_config = SettingsConfigDict(
        env_prefix="STREAMLIT_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("LAYOUT")
    @classmethod
    def validate_layout(cls, v: str) -> str:
        valid_layouts = ["centered", "wide"]
        if v not in valid_layouts:
            raise ValueError(f"Layout must be one of: {', '.join(valid_layouts)}")
        return v

    @field_validator("LIST_COLUMNS")
    @classmethod
    def validate_columns(cls, v: int) -> int:
        if not 1 <= v <= 6:
            raise ValueError("List columns must be between 1 and 6")
        return v


@lru_cache()
def get_settings() -> DrinkListSettings:
    """Get cached settings instance."""
    return DrinkListSettings()


@lru_cache()
def get_streamlit_settings() -> StreamlitSettings:
    """Get cached Streamlit settings instance."""
    return StreamlitSettings()


def clear_settings_cache() -> None:
    """Clear all settings caches to force reload from environment."""
    get_settings.cache_clear()
    get_streamlit_settings.cache_clear()
