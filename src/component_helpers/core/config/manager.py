"""Configuration loading: bundled YAML defaults plus environment overrides.

Precedence (lowest to highest):
    1. Bundled defaults: component_helpers/data/config/defaults.yaml
    2. Environment variables: COMPONENT_HELPERS_<section>__<key>=<value>

Every setting present in the defaults must keep its type after overrides;
anything else raises :class:`ConfigError`.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from component_helpers.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "COMPONENT_HELPERS_"

_MISSING = object()


def _merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``; lists are replaced."""
    result: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "str"
    if isinstance(value, list):
        return "list of str"
    if isinstance(value, dict):
        return "mapping"
    return type(value).__name__


def _matches(default: Any, value: Any) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, str):
        return isinstance(value, str)
    if isinstance(default, list):
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    if isinstance(default, dict):
        return isinstance(value, dict)
    return True


class ConfigManager:
    """Loads the merged configuration dict.

    Domain accessors should not use this directly; go through
    :func:`component_helpers.core.config.cache.get_cached_config`.
    """

    def __init__(self, *, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = os.environ if env is None else env

    def load_defaults(self) -> Dict[str, Any]:
        from component_helpers.data import read_yaml

        defaults = read_yaml("config", "defaults.yaml")
        if not isinstance(defaults, dict):
            raise ConfigError(
                "defaults.yaml must contain a mapping",
                context={"type": type(defaults).__name__},
            )
        # read_yaml is lru_cached; never hand out the shared instance.
        return copy.deepcopy(defaults)

    def load_config(self, *, strict: bool = True) -> Dict[str, Any]:
        defaults = self.load_defaults()
        cfg = defaults
        for path, value, raw in self._iter_env_overrides(strict=strict):
            logger.debug("Applying env override %s%s", ENV_PREFIX, raw)
            if not isinstance(self._lookup(defaults, path), str):
                value = self._coerce_type(value)
            cfg = _merge(cfg, self._nest(path, value))
        self.validate(cfg, defaults)
        return cfg

    def validate(self, cfg: Mapping[str, Any], defaults: Mapping[str, Any]) -> None:
        """Check every default setting is still present with its default's type."""
        for section, section_defaults in defaults.items():
            value = cfg.get(section, _MISSING)
            if not _matches(section_defaults, value):
                raise ConfigError(
                    f"config section '{section}' must be a {_type_name(section_defaults)}",
                    context={"key": section, "got": _type_name(value)},
                )
            if not isinstance(section_defaults, dict):
                continue
            for key, default in section_defaults.items():
                setting = value.get(key, _MISSING)
                if not _matches(default, setting):
                    raise ConfigError(
                        f"config setting '{section}.{key}' must be a {_type_name(default)}",
                        context={"key": f"{section}.{key}", "got": _type_name(setting)},
                    )

    # ---------------------------------------------------------------- env ---

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value

    def _parse_env_key(self, raw: str, *, strict: bool) -> List[str]:
        # Leaf keys contain single underscores (storage_prefix), so only "__" separates.
        segs = raw.split("__")
        if any(seg == "" for seg in segs):
            if strict:
                raise ConfigError(
                    f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                    context={"key": f"{ENV_PREFIX}{raw}"},
                )
            return []
        return [seg.lower() for seg in segs]

    def _iter_env_overrides(self, *, strict: bool) -> Iterator[Tuple[List[str], str, str]]:
        for key in sorted(self._env.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            path = self._parse_env_key(raw, strict=strict)
            if not path:
                continue
            yield path, self._env[key], raw

    @staticmethod
    def _lookup(cfg: Mapping[str, Any], path: List[str]) -> Any:
        node: Any = cfg
        for part in path:
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    @staticmethod
    def _nest(path: List[str], value: Any) -> Dict[str, Any]:
        nested: Any = value
        for part in reversed(path):
            nested = {part: nested}
        return nested


__all__ = ["ConfigManager", "ENV_PREFIX"]
