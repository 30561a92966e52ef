"""CSS class list merging.

Default classes are extended, class by class, by the store value: a user
class sharing a default's property group (text before the first hyphen)
replaces that default instead of being appended to it.

    extend_class(store, "bg-blue-500 mt-8")
    extend_class(store, "py-4 px-2 divide-y-8 divide-gray-200", attribute="wrapper_class")

With ``{"class": "mt-2", "wrapper_class": "divide-none"}`` as input:
``raw_class`` is ``class="bg-blue-500 mt-2"`` and ``raw_wrapper_class``
is ``class="px-2 py-4 divide-none"``.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence

from markupsafe import Markup

from component_helpers.core.config import AttributesConfig

from .builder import escape_attribute_text
from .naming import storage_key

logger = logging.getLogger(__name__)


def split_classes(text: Any, separators: Sequence[str]) -> List[str]:
    """Split ``text`` on any of ``separators``, dropping empty tokens."""
    if not text:
        return []
    pattern = "|".join(re.escape(sep) for sep in separators)
    return [token for token in re.split(pattern, str(text)) if token]


def merge_class_tokens(defaults: Sequence[str], user: Sequence[str]) -> List[str]:
    """Merge default tokens into the user tokens.

    Surviving defaults are prepended one at a time, so they end up in
    reverse order ahead of the user tokens.
    """
    merged = list(user)
    for default in defaults:
        group = default.split("-", 1)[0]
        if any(token.startswith(f"{group}-") for token in user):
            logger.debug("Default class %r overridden by user %s- class", default, group)
            continue
        merged.insert(0, default)
    return merged


def extend_class(
    store: Mapping[Any, Any],
    default_classes: str,
    *,
    attribute: Optional[Hashable] = None,
) -> Dict[Any, Any]:
    """Store a ``class="..."`` fragment merging ``default_classes`` with ``store[attribute]``.

    ``attribute`` defaults to the configured class key (``class``). The fragment is
    written at the attribute's storage key (``raw_class``).
    """
    cfg = AttributesConfig()
    key = cfg.default_class_key if attribute is None else attribute

    defaults = split_classes(default_classes, cfg.class_separators)
    user = split_classes(store.get(key, ""), cfg.class_separators)
    classes = " ".join(merge_class_tokens(defaults, user))

    result: Dict[Any, Any] = dict(store)
    result[storage_key(key, cfg)] = Markup(f'class="{escape_attribute_text(classes)}"')
    return result


__all__ = ["extend_class", "merge_class_tokens", "split_classes"]
