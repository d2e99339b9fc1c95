"""
Configuration module for the style assistant.

This module provides centralized configuration management using pydantic-settings.
All environment variables and configuration values should be accessed through this module.

Usage:
    from config import get_settings

    settings = get_settings()
    if settings.is_ai_configured:
        ...
"""

from config.settings import Settings, get_settings, get_settings_for_testing

__all__ = ["Settings", "get_settings", "get_settings_for_testing"]
