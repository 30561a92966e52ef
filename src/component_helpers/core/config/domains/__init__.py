"""Domain-specific configuration accessors.

Available domain configs:
- AttributesConfig: storage keys, name prefixes and class-list settings
- JSONConfig: JSON encoding of attribute values

Usage:
    from component_helpers.core.config.domains import AttributesConfig

    prefix = AttributesConfig().storage_prefix
"""
from __future__ import annotations

from .attributes import AttributesConfig
from .json import JSONConfig

__all__: list[str] = [
    "AttributesConfig",
    "JSONConfig",
]
