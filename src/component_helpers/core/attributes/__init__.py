"""Attribute derivation for component stores."""
from __future__ import annotations

from .builder import build_attribute, escape_attribute_text, serialize_json
from .classes import extend_class
from .discovery import find_prefixed_keys
from .naming import AttributeDescriptor, NamingTransform, storage_key
from .sets import (
    AttributeOptions,
    set_attributes,
    set_component_attributes,
    set_data_attributes,
    set_phx_attributes,
    set_prefixed_attributes,
)
from .validation import validate_required_attributes

__all__ = [
    "AttributeDescriptor",
    "AttributeOptions",
    "NamingTransform",
    "build_attribute",
    "escape_attribute_text",
    "extend_class",
    "find_prefixed_keys",
    "serialize_json",
    "set_attributes",
    "set_component_attributes",
    "set_data_attributes",
    "set_phx_attributes",
    "set_prefixed_attributes",
    "storage_key",
    "validate_required_attributes",
]
