"""Render component templates against a derived store.

Autoescaping is always on: derived ``raw_*`` fragments are
:class:`markupsafe.Markup` and pass through verbatim, raw store values are
escaped.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from jinja2 import Environment
from markupsafe import Markup


@lru_cache(maxsize=1)
def _environment() -> Environment:
    # Component templates put control blocks on their own lines; trim them.
    return Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)


def render_component(template_text: str, store: Mapping[Any, Any]) -> Markup:
    """Render ``template_text`` with the string keys of ``store`` as context."""
    context = {str(k): v for k, v in store.items()}
    return Markup(_environment().from_string(template_text).render(**context))


__all__ = ["render_component"]
