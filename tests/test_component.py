import html

import pytest

from widgetdemos.component import (
    Callback,
    Hovered,
    HoverKind,
    WeakComponentLink,
    classes,
    element,
    escape_text,
)


def test_callback_emit_passes_value():
    received = []
    Callback(received.append).emit("x")
    assert received == ["x"]


def test_callback_emit_returns_result():
    assert Callback(len).emit("four") == len("four")


def test_callback_reform_maps_input():
    received = []
    Callback(received.append).reform(str.upper).emit("abc")
    assert received == ["ABC"]


@pytest.mark.parametrize(
    "hovered, text",
    [
        (Hovered(HoverKind.HEADER), "Header"),
        (Hovered(HoverKind.LIST), "List container"),
        (Hovered(HoverKind.NONE), "Nothing"),
        (Hovered(HoverKind.ITEM, "Rustin"), "Rustin"),
    ],
)
def test_hovered_display(hovered, text):
    assert str(hovered) == text


def test_hovered_default_is_nothing():
    assert str(Hovered()) == "Nothing"


def test_weak_link_equality_is_identity():
    link = WeakComponentLink()
    assert link == link
    assert (WeakComponentLink() == WeakComponentLink()) is False


def test_weak_link_shares_component():
    link = WeakComponentLink()
    alias = link
    link.component = "list"
    assert alias.component == "list"


@pytest.mark.parametrize("text", ["<a & b>", "plain", "x < y > z", "&amp;"])
def test_escape_text_round_trip(text):
    escaped = escape_text(text)
    assert "<" not in escaped and ">" not in escaped
    assert html.unescape(escaped) == text


def test_classes_skips_empty():
    assert classes("list", "") == "list"


def test_classes_flattens_and_deduplicates():
    assert classes("a b", ["c", None], "a") == "a b c"


def test_element_wraps_children_and_escapes_text():
    out = element("p", "<hi>")
    assert out.startswith("<p>")
    assert out.endswith("</p>")
    assert escape_text("<hi>") in out


def test_element_keeps_nested_markup():
    inner = element("b", "x")
    assert inner in element("p", inner)


def test_element_attributes():
    out = element("div", class_="main", aria_label="menu", hidden=False, draggable=True)
    assert 'class="main"' in out
    assert 'aria-label="menu"' in out
    assert "hidden" not in out
    assert " draggable" in out


def test_void_element_has_no_closing_tag():
    out = element("input", type="text")
    assert "</input>" not in out
    assert 'type="text"' in out


def test_fragment_concatenates_children():
    assert element("", "a", "b") == "ab"


def test_element_renders_components_and_iterables():
    class Widget:
        def view(self):
            return element("span", "w")

    out = element("div", [Widget(), Widget()])
    assert out.count(element("span", "w")) == 2