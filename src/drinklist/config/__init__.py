"""Configuration package for DrinkList."""
from .settings import (
    DrinkListSettings,
    StreamlitSettings,
    get_settings,
    get_streamlit_settings,
    clear_settings_cache,
)

__all__ = [
    'DrinkListSettings',
    'StreamlitSettings',
    'get_settings',
    'get_streamlit_settings',
    'clear_settings_cache',
]
