"""
Maxim configuration utilities.

Usage:
    from openai_maxim.config import load_maxim_settings

    settings = load_maxim_settings()
"""

from openai_maxim.config.loader import (
    MaximSettings,
    get_config_path,
    load_maxim_settings,
)

__all__ = ["MaximSettings", "get_config_path", "load_maxim_settings"]
