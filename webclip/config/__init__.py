"""Configuration module."""

from .settings import Settings, settings, get_settings, ensure_directories

__all__ = ["Settings", "settings", "get_settings", "ensure_directories"]
