"""Centralized configuration caching.

Provides a single source of truth for loaded configuration across all domain configs.
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict, Tuple

from .manager import ENV_PREFIX, ConfigManager

logger = logging.getLogger(__name__)

MAX_CACHED_CONFIGS = 8


def _env_overrides() -> Tuple[Tuple[str, str], ...]:
    return tuple(sorted((k, v) for k, v in os.environ.items() if k.startswith(ENV_PREFIX)))


@lru_cache(maxsize=MAX_CACHED_CONFIGS)
def _load_config(env_items: Tuple[Tuple[str, str], ...]) -> Dict[str, Any]:
    logger.debug("Config cache miss (%d env overrides)", len(env_items))
    return ConfigManager(env=dict(env_items)).load_config(strict=True)


def get_cached_config() -> Dict[str, Any]:
    """Get configuration with caching.

    Keyed by the current ``COMPONENT_HELPERS_*`` env vars, so a cache hit never
    returns stale config. Treat the result as immutable.
    """
    return _load_config(_env_overrides())


def clear_all_caches() -> None:
    """Clear the config dict cache."""
    _load_config.cache_clear()


__all__ = [
    "MAX_CACHED_CONFIGS",
    "clear_all_caches",
    "get_cached_config",
]
