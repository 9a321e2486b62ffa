"""A list component whose children are headers and items, nested inside an app."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Union

from widgetdemos.component import (
    Callback,
    Hovered,
    HoverKind,
    WeakComponentLink,
    classes,
    element,
)


@dataclass
class ListItemProps:
    name: str
    on_hover: Callback
    hide: bool = False
    children: tuple[Any, ...] = ()


class ListItem:
    """One named entry of a list, optionally with nested content."""

    def __init__(self, props: ListItemProps) -> None:
        self.props = props

    def change(self, props: ListItemProps) -> bool:
        if self.props == props:
            return False
        self.props = props
        return True

    def mouse_over(self) -> None:
        self.props.on_hover.emit(Hovered(HoverKind.ITEM, self.props.name))

    def view(self) -> str:
        return element(
            "div", self.props.name, self._view_details(), class_="list-item"
        )

    def _view_details(self) -> str:
        if not self.props.children:
            return element("")
        return element("div", self.props.children, class_="list-item-details")


@dataclass
class ListHeaderProps:
    text: str
    on_hover: Callback
    list_link: WeakComponentLink


class ListHeader:
    """The title row of a list; clicking it toggles the list's state."""

    def __init__(self, props: ListHeaderProps) -> None:
        self.props = props

    def change(self, props: ListHeaderProps) -> bool:
        if self.props == props:
            return False
        self.props = props
        return True

    def mouse_over(self) -> None:
        self.props.on_hover.emit(Hovered(HoverKind.HEADER))

    def click(self) -> bool:
        target = self.props.list_link.component
        if target is None:
            raise RuntimeError("the header's list link is not attached to a list")
        return target.header_click()

    def view(self) -> str:
        return element("div", self.props.text, class_="list-header")


ListChild = Union[ListItemProps, ListHeaderProps]


@dataclass
class NestedListProps:
    children: tuple[ListChild, ...]
    on_hover: Callback
    weak_link: WeakComponentLink


class NestedList:
    """A list that shows its headers first and then its visible, numbered items."""

    def __init__(self, props: NestedListProps) -> None:
        props.weak_link.component = self
        self.props = props
        self.inactive = False

    def change(self, props: NestedListProps) -> bool:
        if self.props == props:
            return False
        self.props = props
        return True

    def header_click(self) -> bool:
        self.inactive = not self.inactive
        return True

    def mouse_over(self) -> None:
        self.props.on_hover.emit(Hovered(HoverKind.LIST))

    def mouse_out(self) -> None:
        self.props.on_hover.emit(Hovered(HoverKind.NONE))

    def visible_items(self) -> list[ListItemProps]:
        """The non-hidden items, with their names prefixed by their position."""
        shown = (
            child
            for child in self.props.children
            if isinstance(child, ListItemProps) and not child.hide
        )
        return [
            replace(child, name=f"#{number} - {child.name}")
            for number, child in enumerate(shown, 1)
        ]

    def view(self) -> str:
        headers = [
            ListHeader(child)
            for child in self.props.children
            if isinstance(child, ListHeaderProps)
        ]
        items = [ListItem(props) for props in self.visible_items()]
        inner = element(
            "div",
            headers,
            element("div", items, class_="items"),
            class_=classes("list", "inactive" if self.inactive else ""),
        )
        return element("div", inner, class_="list-container")


class NestedListApp:
    """The demo page: a list with a sub-list and a display of what was last hovered."""

    def __init__(self) -> None:
        self.hovered = Hovered(HoverKind.NONE)
        on_hover = Callback(self.hover)
        self.list_link = WeakComponentLink()
        self.sub_list_link = WeakComponentLink()

        letters = tuple(ListItemProps(letter, on_hover) for letter in "ABC")
        self.sub_list = NestedList(
            NestedListProps(
                children=(
                    ListHeaderProps("Sub Rusties!", on_hover, self.sub_list_link),
                    ListItemProps("Hidden Sub", on_hover, hide=True),
                    *letters,
                ),
                on_hover=on_hover,
                weak_link=self.sub_list_link,
            )
        )
        self.main_list = NestedList(
            NestedListProps(
                children=(
                    ListHeaderProps("Calling all Rusties!", on_hover, self.list_link),
                    ListItemProps("Rustin", on_hover),
                    ListItemProps("Rustaroo", on_hover, hide=True),
                    ListItemProps(
                        "Rustifer",
                        on_hover,
                        children=(
                            element("div", "Sublist!", class_="sublist"),
                            self.sub_list,
                        ),
                    ),
                ),
                on_hover=on_hover,
                weak_link=self.list_link,
            )
        )

    def hover(self, hovered: Hovered) -> bool:
        self.hovered = hovered
        return True

    def mouse_enter(self) -> bool:
        return self.hover(Hovered(HoverKind.NONE))

    def view(self) -> str:
        return element(
            "div",
            element("h1", "Nested List Demo"),
            self.main_list,
            self._view_last_hovered(),
            class_="main",
        )

    def _view_last_hovered(self) -> str:
        return element(
            "div",
            "Last hovered:",
            element("span", self.hovered, class_="last-hovered-text"),
            class_="last-hovered",
        )