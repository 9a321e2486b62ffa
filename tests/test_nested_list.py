import pytest

from widgetdemos.component import Callback, Hovered, HoverKind, WeakComponentLink, element
from widgetdemos.nested_list import (
    ListHeader,
    ListHeaderProps,
    ListItem,
    ListItemProps,
    NestedList,
    NestedListApp,
    NestedListProps,
)


@pytest.fixture
def events():
    return []


@pytest.fixture
def on_hover(events):
    return Callback(events.append)


def test_item_mouse_over_reports_name(events, on_hover):
    ListItem(ListItemProps("Rustin", on_hover)).mouse_over()
    assert events == [Hovered(HoverKind.ITEM, "Rustin")]


def test_item_without_children_has_no_details(on_hover):
    out = ListItem(ListItemProps("Rustin", on_hover)).view()
    assert "Rustin" in out
    assert "list-item-details" not in out


def test_item_with_children_shows_details(on_hover):
    child = element("div", "Sublist!")
    out = ListItem(ListItemProps("Rustifer", on_hover, children=(child,))).view()
    assert "list-item-details" in out
    assert child in out


def test_item_change_detects_difference(on_hover):
    item = ListItem(ListItemProps("a", on_hover))
    assert item.change(ListItemProps("a", on_hover)) is False
    assert item.change(ListItemProps("b", on_hover)) is True
    assert item.props.name == "b"


def test_header_mouse_over(events, on_hover):
    ListHeader(ListHeaderProps("Top", on_hover, WeakComponentLink())).mouse_over()
    assert events == [Hovered(HoverKind.HEADER)]


def test_header_click_without_list_raises(on_hover):
    header = ListHeader(ListHeaderProps("Top", on_hover, WeakComponentLink()))
    with pytest.raises(RuntimeError):
        header.click()


def test_list_registers_on_link_and_header_toggles(on_hover):
    link = WeakComponentLink()
    header_props = ListHeaderProps("Top", on_hover, link)
    nested = NestedList(NestedListProps((header_props,), on_hover, link))
    assert link.component is nested
    assert ListHeader(header_props).click() is True
    assert nested.inactive is True
    assert "inactive" in nested.view()
    ListHeader(header_props).click()
    assert nested.inactive is False
    assert "inactive" not in nested.view()


def test_list_hover_events(events, on_hover):
    nested = NestedList(NestedListProps((), on_hover, WeakComponentLink()))
    nested.mouse_over()
    nested.mouse_out()
    assert events == [Hovered(HoverKind.LIST), Hovered(HoverKind.NONE)]
    assert [str(h) for h in events] == ["List container", "Nothing"]
    assert "list-container" in nested.view()


def test_visible_items_skip_hidden_and_are_numbered(on_hover):
    link = WeakComponentLink()
    children = (
        ListItemProps("x", on_hover),
        ListItemProps("hidden", on_hover, hide=True),
        ListItemProps("y", on_hover),
    )
    nested = NestedList(NestedListProps(children, on_hover, link))
    names = [p.name for p in nested.visible_items()]
    assert names == ["#1 - x", "#2 - y"]
    assert [p.name for p in nested.props.children][0] == "x"


def test_list_view_places_headers_before_items(on_hover):
    link = WeakComponentLink()
    children = (ListItemProps("item", on_hover), ListHeaderProps("head", on_hover, link))
    out = NestedList(NestedListProps(children, on_hover, link)).view()
    assert out.index("head") < out.index("item")
    assert "hidden" not in out


def test_app_main_list_items():
    app = NestedListApp()
    names = [p.name for p in app.main_list.visible_items()]
    assert len(names) == 2
    assert names[0].endswith("Rustin")
    assert names[1].endswith("Rustifer")


def test_app_sub_list_items():
    app = NestedListApp()
    names = [p.name for p in app.sub_list.visible_items()]
    assert [n[-1] for n in names] == list("ABC")
    assert all("Hidden Sub" not in n for n in names)


def test_app_links_attached():
    app = NestedListApp()
    assert app.list_link.component is app.main_list
    assert app.sub_list_link.component is app.sub_list


def test_app_view_contains_everything():
    out = NestedListApp().view()
    for text in ("Nested List Demo", "Calling all Rusties!", "Sub Rusties!", "Sublist!"):
        assert text in out
    assert "Rustaroo" not in out
    assert "Hidden Sub" not in out


def test_app_hover_and_mouse_enter():
    app = NestedListApp()
    app.sub_list.mouse_over()
    assert "List container" in app.view()
    assert app.mouse_enter() is True
    assert str(app.hovered) == "Nothing"


def test_app_item_hover_updates_display():
    app = NestedListApp()
    props = app.main_list.visible_items()[0]
    ListItem(props).mouse_over()
    assert app.hovered == Hovered(HoverKind.ITEM, props.name)
    assert props.name in app.view()