"""Domain-specific configuration for attribute derivation.

Controls how derived entries are keyed in the store, which prefixes are
recognised, and how class lists are tokenised.
"""
from __future__ import annotations

from functools import cached_property
from typing import Tuple

from ..base import BaseDomainConfig


class AttributesConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "attributes"

    @cached_property
    def storage_prefix(self) -> str:
        """Prefix of derived storage keys (``raw_`` -> ``raw_id``)."""
        return str(self.section.get("storage_prefix", "raw_"))

    @cached_property
    def key_markers(self) -> str:
        """Characters stripped when they lead a key (``@click`` -> ``raw_click``)."""
        return str(self.section.get("key_markers", "@") or "")

    @cached_property
    def default_class_key(self) -> str:
        return str(self.section.get("default_class_key", "class"))

    @cached_property
    def data_prefix(self) -> str:
        return str(self.section.get("data_prefix", "data-"))

    @cached_property
    def phx_prefix(self) -> str:
        return str(self.section.get("phx_prefix", "phx_"))

    @cached_property
    def class_separators(self) -> Tuple[str, ...]:
        seps = self.section.get("class_separators") or [" ", "\n"]
        return tuple(str(s) for s in seps if s)


__all__ = ["AttributesConfig"]
