"""Configuration for component helpers.

Bundled YAML defaults, overridable through ``COMPONENT_HELPERS_*`` env vars,
exposed through typed domain accessors.
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .domains import AttributesConfig, JSONConfig
from .manager import ConfigManager

__all__ = [
    "AttributesConfig",
    "BaseDomainConfig",
    "ConfigManager",
    "JSONConfig",
    "clear_all_caches",
    "get_cached_config",
]
