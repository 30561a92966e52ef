from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, TypeVar

from component_helpers.core.exceptions import MissingAttributeError

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Mapping[Any, Any])


def validate_required_attributes(store: S, required: Optional[Iterable[Any]]) -> S:
    """Check that every required key is present in ``store``.

    Presence is key existence: ``False`` or ``""`` values satisfy it.
    Returns ``store`` itself so calls can be chained.

    Raises:
        MissingAttributeError: if any key is absent.
    """
    if required is None:
        return store

    missing = [key for key in required if key not in store]
    if missing:
        logger.warning("Missing required attributes: %s", ", ".join(str(k) for k in missing))
        raise MissingAttributeError(
            f"missing required attributes: {', '.join(str(k) for k in missing)}",
            missing=missing,
        )
    return store


__all__ = ["validate_required_attributes"]
