"""Configuration management for oas-preflight"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

