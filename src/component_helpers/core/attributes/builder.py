"""Single attribute fragments.

Glue around the external collaborators: MarkupSafe for escaping and the
stdlib ``json`` encoder for structured values.
"""
from __future__ import annotations

import json
from typing import Any, Hashable, Optional

from markupsafe import Markup, escape

from component_helpers.core.config import AttributesConfig, JSONConfig
from component_helpers.core.exceptions import SerializationError

from .naming import NamingTransform

EMPTY = Markup("")


def escape_attribute_text(raw: Any) -> Markup:
    """Escape ``< > & " '`` for a double-quoted attribute value.

    Values that are already markup (``__html__``) are returned untouched.
    Double quotes are emitted as ``&quot;`` rather than MarkupSafe's ``&#34;``.
    """
    if hasattr(raw, "__html__"):
        return Markup(raw)
    return Markup(str(escape(raw)).replace("&#34;", "&quot;"))


def serialize_json(value: Any, *, attribute: Optional[str] = None, config: Optional[JSONConfig] = None) -> str:
    kwargs = (config or JSONConfig()).dumps_kwargs()
    try:
        return json.dumps(value, allow_nan=False, **kwargs)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"cannot encode attribute value as JSON: {exc}",
            attribute=attribute,
            context={"type": type(value).__name__},
        ) from exc


def _text(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if hasattr(value, "__html__"):
        return value
    return str(value)


def build_attribute(
    name: Hashable,
    value: Any,
    *,
    naming: NamingTransform = NamingTransform.PLAIN,
    as_json: bool = False,
    config: Optional[AttributesConfig] = None,
    json_config: Optional[JSONConfig] = None,
) -> Markup:
    """Build ``name="value"`` for one attribute.

    ``None`` yields the empty fragment so templates can always interpolate
    optional attributes.
    """
    if value is None:
        return EMPTY

    attr_name = naming.attribute_name(name, config)
    if as_json:
        raw = serialize_json(value, attribute=attr_name, config=json_config)
    else:
        raw = _text(value)
    return Markup(f'{attr_name}="{escape_attribute_text(raw)}"')


__all__ = ["EMPTY", "build_attribute", "escape_attribute_text", "serialize_json"]
