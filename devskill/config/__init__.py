"""Configuration management."""

from .global_config import GlobalConfig
from .local_config import LocalConfig
from .settings import Settings, resolve_settings

__all__ = ["GlobalConfig", "LocalConfig", "Settings", "resolve_settings"]
