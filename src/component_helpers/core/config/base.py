"""Base class for domain-specific configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any, Dict, Mapping, Optional

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors.

    Usage:
        class MyConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "mySection"

            @cached_property
            def my_setting(self) -> str:
                return self.section.get("mySetting", "default")

        cfg = MyConfig()
        print(cfg.my_setting)

    Passing ``config`` bypasses the cache and reads from the given mapping.
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        self._config = dict(config) if config is not None else get_cached_config()

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """Get this domain's configuration section, or an empty dict."""
        return self._config.get(self._config_section(), {}) or {}


__all__ = ["BaseDomainConfig"]
