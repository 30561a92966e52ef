from __future__ import annotations

import pytest
from markupsafe import Markup

from component_helpers.core.attributes import (
    find_prefixed_keys,
    set_phx_attributes,
    set_prefixed_attributes,
)
from component_helpers.core.exceptions import MissingAttributeError


def test_without_prefixes_store_is_unchanged(store: dict) -> None:
    assert set_prefixed_attributes(store, []) == store


def test_alpinejs_attributes_are_forwarded() -> None:
    store = {"@click": "open = true", "x-bind:class": "open", "foo": "foo"}
    new_store = set_prefixed_attributes(store, ["@click", "x-bind:"])
    assert new_store == {
        **store,
        "raw_click": Markup('@click="open = true"'),
        "raw_x-bind:class": Markup('x-bind:class="open"'),
    }


def test_init_adds_empty_attribute_with_marker_stripped(store: dict) -> None:
    new_store = set_prefixed_attributes(store, ["@click", "x-bind:"], init=["@click.away"])
    assert new_store == {**store, "raw_click.away": Markup("")}


def test_required_prefixed_attribute_present() -> None:
    store = {"@click.away": "open = false"}
    new_store = set_prefixed_attributes(store, ["@click", "x-bind:"], required=["@click.away"])
    assert new_store == {**store, "raw_click.away": Markup('@click.away="open = false"')}


def test_required_prefixed_attribute_missing(store: dict) -> None:
    with pytest.raises(MissingAttributeError):
        set_prefixed_attributes(store, ["@click", "x-bind:"], required=["@click.away"])


def test_phx_attributes_are_hyphenated() -> None:
    store = {"phx_change": "validate", "phx_submit": "save", "id": "form"}
    new_store = set_phx_attributes(store)
    assert new_store == {
        **store,
        "raw_phx_change": Markup('phx-change="validate"'),
        "raw_phx_submit": Markup('phx-submit="save"'),
    }


def test_phx_attributes_init_and_required() -> None:
    store = {"phx_submit": "save"}
    new_store = set_phx_attributes(store, required=["phx_submit"], init=["phx_change"])
    assert new_store["raw_phx_submit"] == 'phx-submit="save"'
    assert new_store["raw_phx_change"] == ""

    with pytest.raises(MissingAttributeError):
        set_phx_attributes({}, required=["phx_submit"])


def test_phx_attributes_into_single_entry() -> None:
    store = {"phx_change": "validate", "phx_submit": "save"}
    new_store = set_phx_attributes(store, into="phx")
    assert new_store["raw_phx"] == 'phx-change="validate" phx-submit="save"'


def test_find_prefixed_keys_orders_by_prefix_then_store_order() -> None:
    store = {"x-bind:a": 1, "@click": 2, "foo": 3, "@click.away": 4}
    assert find_prefixed_keys(store, ["@click", "x-bind:", "@"]) == [
        "@click",
        "@click.away",
        "x-bind:a",
    ]


def test_find_prefixed_keys_matches_text_form_of_keys() -> None:
    store = {("phx_", 1): "tuple", "phx_click": "go", 7: "seven"}
    assert find_prefixed_keys(store, ["phx_", "7"]) == ["phx_click", 7]


def test_find_prefixed_keys_without_match() -> None:
    assert find_prefixed_keys({"foo": 1}, ["@"]) == []
