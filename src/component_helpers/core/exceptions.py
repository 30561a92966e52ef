from __future__ import annotations

from typing import Any, Dict, Mapping


class ComponentHelpersError(Exception):
    """Base exception for component helpers."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class MissingAttributeError(ComponentHelpersError, ValueError):
    """Raised when required attributes are absent from a component store."""

    def __init__(
        self,
        message: str = "missing required attributes",
        *,
        missing: list[Any] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if missing:
            ctx["missing"] = [str(k) for k in missing]
        ComponentHelpersError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.missing = list(missing or [])


class SerializationError(ComponentHelpersError, ValueError):
    """Raised when an attribute value cannot be encoded as JSON."""

    def __init__(
        self,
        message: str,
        *,
        attribute: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if attribute:
            ctx["attribute"] = attribute
        ComponentHelpersError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class ConfigError(ComponentHelpersError, ValueError):
    """Raised for malformed configuration (defaults file or env overrides)."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ComponentHelpersError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "ComponentHelpersError",
    "MissingAttributeError",
    "SerializationError",
    "ConfigError",
]
