"""
Configuration module for mapext.

Uses pydantic-settings for environment variable loading.
"""

from mapext.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
