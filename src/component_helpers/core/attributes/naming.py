"""Attribute naming: rendered attribute names and derived storage keys."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Optional

from component_helpers.core.config import AttributesConfig


class NamingTransform(str, Enum):
    """How a store key becomes a rendered attribute name.

    ``PLAIN``: underscores become hyphens (``phx_change`` -> ``phx-change``).
    ``DATA``: ``PLAIN`` with the data prefix (``key`` -> ``data-key``).
    ``VERBATIM``: the key text is rendered unchanged.
    """

    PLAIN = "plain"
    DATA = "data"
    VERBATIM = "verbatim"

    def attribute_name(self, key: Hashable, config: Optional[AttributesConfig] = None) -> str:
        text = str(key)
        if self is NamingTransform.VERBATIM:
            return text
        plain = text.replace("_", "-")
        if self is NamingTransform.DATA:
            cfg = config or AttributesConfig()
            return f"{cfg.data_prefix}{plain}"
        return plain


def storage_key(key: Hashable, config: Optional[AttributesConfig] = None) -> str:
    """Return the store key a derived fragment for ``key`` is written under.

    A single leading marker character is dropped; the rendered name keeps it.

    >>> storage_key("@click")
    'raw_click'
    """
    cfg = config or AttributesConfig()
    text = str(key)
    if text and text[0] in cfg.key_markers:
        text = text[1:]
    return f"{cfg.storage_prefix}{text}"


@dataclass(frozen=True)
class AttributeDescriptor:
    """A requested store key plus its naming transform."""

    key: Any
    naming: NamingTransform = NamingTransform.PLAIN

    def attribute_name(self, config: Optional[AttributesConfig] = None) -> str:
        return self.naming.attribute_name(self.key, config)

    def storage_key(self, config: Optional[AttributesConfig] = None) -> str:
        return storage_key(self.key, config)


__all__ = ["AttributeDescriptor", "NamingTransform", "storage_key"]
