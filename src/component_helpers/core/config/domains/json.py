"""Domain-specific configuration for JSON-encoded attribute values."""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Tuple

from component_helpers.core.exceptions import ConfigError

from ..base import BaseDomainConfig


class JSONConfig(BaseDomainConfig):
    """Typed access to JSON encoding settings.

    Defaults produce compact output (``{"a":1}``) so encoded values stay short
    inside attribute markup.
    """

    def _config_section(self) -> str:
        return "json"

    @cached_property
    def sort_keys(self) -> bool:
        return bool(self.section.get("sort_keys", False))

    @cached_property
    def ensure_ascii(self) -> bool:
        return bool(self.section.get("ensure_ascii", False))

    @cached_property
    def separators(self) -> Tuple[str, str]:
        seps = self.section.get("separators") or [",", ":"]
        if not isinstance(seps, (list, tuple)) or len(seps) != 2:
            raise ConfigError(
                "json.separators must be an [item, key] pair",
                context={"separators": seps},
            )
        item_sep, key_sep = seps
        return str(item_sep), str(key_sep)

    def dumps_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`json.dumps`."""
        return {
            "sort_keys": self.sort_keys,
            "ensure_ascii": self.ensure_ascii,
            "separators": self.separators,
        }


__all__ = ["JSONConfig"]
