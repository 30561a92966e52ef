"""
Component Helpers - safe HTML attribute markup for template components

Derives escaped attribute fragments, data attributes, prefixed (phx_*, alpinejs)
attributes and merged CSS class lists from a component's configuration store.
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from component_helpers.core.attributes import (  # noqa: E402
    extend_class,
    set_component_attributes,
    set_data_attributes,
    set_phx_attributes,
    set_prefixed_attributes,
    validate_required_attributes,
)

__all__ = [
    "__version__",
    "extend_class",
    "set_component_attributes",
    "set_data_attributes",
    "set_phx_attributes",
    "set_prefixed_attributes",
    "validate_required_attributes",
]
