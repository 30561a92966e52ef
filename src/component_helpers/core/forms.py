"""Helpers for components bound to a form field.

A component store may carry ``form`` and ``field`` entries. ``form.errors``
is either a sequence of ``(field, message)`` pairs or a mapping of field to
messages.
"""
from __future__ import annotations

from typing import Any, Callable, List, Mapping, TypeVar

T = TypeVar("T")


def _identity(store: Any) -> Any:
    return store


def with_form_fields(
    store: Mapping[Any, Any],
    fun: Callable[[Mapping[Any, Any], Any, Any], T],
    fallback: Callable[[Mapping[Any, Any]], T] = _identity,
) -> T:
    """Call ``fun(store, form, field)`` when both entries are set, else ``fallback(store)``."""
    form = store.get("form")
    field = store.get("field")
    if form and field:
        return fun(store, form, field)
    return fallback(store)


def form_errors(form: Any, field: Any) -> List[Any]:
    """Return every error message recorded for ``field``, in order."""
    errors = getattr(form, "errors", None)
    if errors is None and isinstance(form, Mapping):
        errors = form.get("errors")
    if not errors:
        return []
    if isinstance(errors, Mapping):
        messages = errors.get(field) or []
        return list(messages) if isinstance(messages, (list, tuple)) else [messages]
    return [message for name, message in errors if name == field]


def has_form_errors(form: Any, field: Any) -> bool:
    return bool(form_errors(form, field))


__all__ = ["form_errors", "has_form_errors", "with_form_fields"]
