from __future__ import annotations

import pytest

from component_helpers.core.attributes import (
    extend_class,
    set_component_attributes,
    set_phx_attributes,
)
from component_helpers.core.attributes import sets as attribute_sets
from component_helpers.core.config import cache
from component_helpers.core.config import (
    AttributesConfig,
    ConfigManager,
    JSONConfig,
    clear_all_caches,
    get_cached_config,
)
from component_helpers.core.exceptions import ConfigError, SerializationError


def test_bundled_defaults() -> None:
    cfg = AttributesConfig()
    assert cfg.storage_prefix == "raw_"
    assert cfg.key_markers == "@"
    assert cfg.default_class_key == "class"
    assert cfg.data_prefix == "data-"
    assert cfg.phx_prefix == "phx_"
    assert cfg.class_separators == (" ", "\n")

    json_cfg = JSONConfig()
    assert json_cfg.dumps_kwargs() == {
        "sort_keys": False,
        "ensure_ascii": False,
        "separators": (",", ":"),
    }


def test_explicit_mapping_bypasses_cache() -> None:
    cfg = AttributesConfig({"attributes": {"storage_prefix": "html_"}})
    assert cfg.storage_prefix == "html_"
    # Unset keys fall back to built-in defaults.
    assert cfg.phx_prefix == "phx_"
    assert JSONConfig({}).separators == (",", ":")


def test_config_is_cached_until_cleared() -> None:
    first = get_cached_config()
    assert get_cached_config() is first

    clear_all_caches()
    assert get_cached_config() is not first
    assert get_cached_config() == first


def test_config_cache_is_bounded(monkeypatch: pytest.MonkeyPatch) -> None:
    for i in range(cache.MAX_CACHED_CONFIGS + 5):
        monkeypatch.setenv("COMPONENT_HELPERS_attributes__storage_prefix", f"p{i}_")
        assert get_cached_config()["attributes"]["storage_prefix"] == f"p{i}_"
    assert cache._load_config.cache_info().currsize == cache.MAX_CACHED_CONFIGS


def test_config_is_resolved_once_per_call(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def counting_config():
        calls.append(True)
        return get_cached_config()

    monkeypatch.setattr(attribute_sets, "get_cached_config", counting_config)
    store = {"phx_click": {"a": 1}, "phx_change": [1], "phx_submit": "save"}
    new_store = set_phx_attributes(store, json=True, init=["phx_target"], into="phx")

    assert calls == [True]
    assert new_store["raw_phx_change"] == 'phx-change="[1]"'


def test_env_override_changes_storage_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_HELPERS_attributes__storage_prefix", "html_")
    new_store = set_component_attributes({"id": "x"}, ["id"])
    assert new_store == {"id": "x", "html_id": 'id="x"'}


def test_env_override_coerces_types(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_HELPERS_JSON__SORT_KEYS", "true")
    assert JSONConfig().sort_keys is True
    assert set_component_attributes({"v": {"b": 1, "a": 2}}, ["v"], json=True)["raw_v"] == (
        'v="{&quot;a&quot;:2,&quot;b&quot;:1}"'
    )


def test_env_override_replaces_lists(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_HELPERS_attributes__class_separators", '[" ", ","]')
    assert AttributesConfig().class_separators == (" ", ",")
    assert extend_class({}, "bg-blue-500,mt-8")["raw_class"] == 'class="mt-8 bg-blue-500"'


def test_string_settings_are_not_coerced(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_HELPERS_attributes__storage_prefix", "true")
    assert set_component_attributes({"id": "x"}, ["id"])["trueid"] == 'id="x"'


@pytest.mark.parametrize(
    ("env_key", "value"),
    [
        ("COMPONENT_HELPERS_attributes", "x"),
        ("COMPONENT_HELPERS_attributes__class_separators", "5"),
        ("COMPONENT_HELPERS_attributes__class_separators", "[1, 2]"),
        ("COMPONENT_HELPERS_json__sort_keys", "yes"),
    ],
)
def test_mistyped_env_override_fails(monkeypatch: pytest.MonkeyPatch, env_key: str, value: str) -> None:
    monkeypatch.setenv(env_key, value)
    with pytest.raises(ConfigError):
        set_component_attributes({"id": "x"}, ["id"])
    with pytest.raises(ConfigError):
        extend_class({}, "mt-8")


def test_bad_json_separators_is_a_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_HELPERS_json__separators", '[","]')
    with pytest.raises(ConfigError) as excinfo:
        set_component_attributes({"v": [1]}, ["v"], json=True)
    assert not isinstance(excinfo.value, SerializationError)


def test_malformed_env_key_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_HELPERS_attributes____prefix", "x")
    with pytest.raises(ConfigError):
        get_cached_config()


def test_malformed_env_key_is_skipped_when_not_strict() -> None:
    manager = ConfigManager(env={"COMPONENT_HELPERS_attributes____x": "1", "OTHER": "2"})
    cfg = manager.load_config(strict=False)
    assert cfg["attributes"]["storage_prefix"] == "raw_"
    assert "x" not in cfg["attributes"]
    assert "other" not in cfg


def test_loaded_defaults_are_private_copies() -> None:
    manager = ConfigManager(env={})
    cfg = manager.load_config()
    cfg["attributes"]["storage_prefix"] = "mutated_"
    assert manager.load_config()["attributes"]["storage_prefix"] == "raw_"
