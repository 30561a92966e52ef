from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

logger = logging.getLogger(__name__)


def find_prefixed_keys(store: Mapping[Any, Any], prefixes: Iterable[str]) -> List[Any]:
    """Return the store keys starting with any of ``prefixes``.

    Ordered by prefix, then by store order; a key matched by several
    prefixes is listed once, at its first match.
    """
    found: List[Any] = []
    seen: set[Any] = set()
    for prefix in prefixes:
        for key in store.keys():
            if key in seen or not str(key).startswith(prefix):
                continue
            seen.add(key)
            found.append(key)
    logger.debug("Discovered %d prefixed keys: %s", len(found), found)
    return found


__all__ = ["find_prefixed_keys"]
