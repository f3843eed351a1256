"""Core: configuration and application bootstrap."""

from platform_core.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
