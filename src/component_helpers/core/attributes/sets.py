"""Derive attribute fragments for a list of store keys.

Every public helper returns a new dict: the input store plus derived
``raw_*`` entries holding :class:`markupsafe.Markup` fragments.

Example:
    store = set_component_attributes(store, ["id", "name", "label"], required=["id", "name"])
    store = set_component_attributes(store, ["value"], json=True)
    store = set_phx_attributes(store, required=["phx_submit"], init=["phx_change"])

``store`` now contains ``raw_id``, ``raw_name``, ``raw_label``, ``raw_value``,
``raw_phx_submit`` and ``raw_phx_change``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence

from markupsafe import Markup

from component_helpers.core.config import AttributesConfig, JSONConfig, get_cached_config

from .builder import EMPTY, build_attribute
from .discovery import find_prefixed_keys
from .naming import AttributeDescriptor, NamingTransform
from .validation import validate_required_attributes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeOptions:
    """Options accepted by every ``set_*_attributes`` helper.

    Attributes:
        required: keys that must be present in the input store
        json: JSON-encode values before escaping
        init: keys whose derived entry is set to an empty fragment when absent
        into: key whose derived entry receives all produced fragments joined by spaces
    """

    required: Optional[Sequence[Any]] = None
    json: bool = False
    init: Optional[Sequence[Any]] = None
    into: Optional[Hashable] = None


def set_attributes(
    store: Mapping[Any, Any],
    keys: Iterable[Any],
    naming: NamingTransform = NamingTransform.PLAIN,
    options: Optional[AttributeOptions] = None,
    config: Optional[Mapping[str, Any]] = None,
) -> Dict[Any, Any]:
    """Derive fragments for ``keys`` into a copy of ``store``.

    ``config`` is the loaded configuration dict; it is resolved once here
    when omitted and shared by every fragment built in this call.
    """
    opts = options or AttributeOptions()
    raw_config = get_cached_config() if config is None else config
    cfg = AttributesConfig(raw_config)
    json_cfg = JSONConfig(raw_config) if opts.json else None
    result: Dict[Any, Any] = dict(store)
    produced: List[Markup] = []

    for key in keys:
        descriptor = AttributeDescriptor(key, naming)
        fragment = build_attribute(
            key,
            store.get(key),
            naming=naming,
            as_json=opts.json,
            config=cfg,
            json_config=json_cfg,
        )
        result[descriptor.storage_key(cfg)] = fragment
        produced.append(fragment)
        logger.debug("Set %s from %r", descriptor.storage_key(cfg), key)

    for key in opts.init or ():
        result.setdefault(AttributeDescriptor(key, naming).storage_key(cfg), EMPTY)

    if opts.into is not None:
        joined = Markup(" ").join(f for f in produced if f)
        result[AttributeDescriptor(opts.into, naming).storage_key(cfg)] = joined

    validate_required_attributes(store, opts.required)
    return result


def set_component_attributes(
    store: Mapping[Any, Any],
    keys: Iterable[Any],
    *,
    required: Optional[Sequence[Any]] = None,
    json: bool = False,
    init: Optional[Sequence[Any]] = None,
    into: Optional[Hashable] = None,
) -> Dict[Any, Any]:
    """Extend ``store`` with ``raw_*`` html attributes for ``keys``.

    Underscores in keys become hyphens in the rendered name.

    Raises:
        MissingAttributeError: if a ``required`` key is absent from ``store``.
        SerializationError: if ``json`` is set and a value cannot be encoded.
    """
    options = AttributeOptions(required=required, json=json, init=init, into=into)
    return set_attributes(store, keys, NamingTransform.PLAIN, options)


def set_data_attributes(
    store: Mapping[Any, Any],
    keys: Iterable[Any],
    *,
    required: Optional[Sequence[Any]] = None,
    json: bool = False,
    init: Optional[Sequence[Any]] = None,
    into: Optional[Hashable] = None,
) -> Dict[Any, Any]:
    """Like :func:`set_component_attributes` but renders ``data-*`` attributes."""
    options = AttributeOptions(required=required, json=json, init=init, into=into)
    return set_attributes(store, keys, NamingTransform.DATA, options)


def set_prefixed_attributes(
    store: Mapping[Any, Any],
    prefixes: Iterable[str],
    *,
    required: Optional[Sequence[Any]] = None,
    json: bool = False,
    init: Optional[Sequence[Any]] = None,
    into: Optional[Hashable] = None,
) -> Dict[Any, Any]:
    """Extend ``store`` with every attribute whose key starts with one of ``prefixes``.

    Useful to forward alpinejs attributes:

        set_prefixed_attributes(store, ["@click", "x-bind:"], required=["x-bind:class"])

    adds ``raw_click`` and ``raw_x-bind:class``.
    """
    keys = find_prefixed_keys(store, prefixes)
    options = AttributeOptions(required=required, json=json, init=init, into=into)
    return set_attributes(store, keys, NamingTransform.PLAIN, options)


def set_phx_attributes(
    store: Mapping[Any, Any],
    *,
    required: Optional[Sequence[Any]] = None,
    json: bool = False,
    init: Optional[Sequence[Any]] = None,
    into: Optional[Hashable] = None,
) -> Dict[Any, Any]:
    """Forward every ``phx_*`` entry as a ``phx-*`` attribute."""
    config = get_cached_config()
    keys = find_prefixed_keys(store, [AttributesConfig(config).phx_prefix])
    options = AttributeOptions(required=required, json=json, init=init, into=into)
    return set_attributes(store, keys, NamingTransform.PLAIN, options, config)


__all__ = [
    "AttributeOptions",
    "set_attributes",
    "set_component_attributes",
    "set_data_attributes",
    "set_phx_attributes",
    "set_prefixed_attributes",
]
