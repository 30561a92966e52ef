from __future__ import annotations

from markupsafe import Markup

from component_helpers import extend_class, set_component_attributes
from component_helpers.core.rendering import render_component


def test_derived_fragments_render_verbatim_and_raw_values_escaped() -> None:
    store = {"id": "a<b", "label": "<x>", "class": "mt-2"}
    store = set_component_attributes(store, ["id", "title"], required=["id"])
    store = extend_class(store, "bg-blue-500 mt-8")

    html = render_component(
        "<button {{ raw_id }} {{ raw_class }}{{ raw_title }}>{{ label }}</button>",
        store,
    )

    assert isinstance(html, Markup)
    assert html == '<button id="a&lt;b" class="bg-blue-500 mt-2">&lt;x&gt;</button>'


def test_block_lines_are_trimmed() -> None:
    text = "\n".join(["<ul>", "{% if show %}", "<li>x</li>", "{% endif %}", "</ul>"])
    assert render_component(text, {"show": True}).splitlines() == ["<ul>", "<li>x</li>", "</ul>"]
