"""Shared building blocks for the demo components: callbacks, links and HTML output."""

from __future__ import annotations

import enum
import html
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable

_VOID_ELEMENTS = frozenset({"area", "br", "col", "hr", "img", "input", "link", "meta"})


class _Html(str):
    """A string that already holds rendered markup and must not be escaped again."""


class Callback:
    """A wrapped function that components hand to each other to report events."""

    def __init__(self, func: Callable[[Any], Any]) -> None:
        self._func = func

    def emit(self, value: Any) -> Any:
        """Call the wrapped function with ``value``."""
        return self._func(value)

    def reform(self, func: Callable[[Any], Any]) -> "Callback":
        """Return a callback that maps its input through ``func`` before emitting here."""
        return Callback(lambda value: self.emit(func(value)))

    def __repr__(self) -> str:
        return f"Callback({self._func!r})"


@dataclass(eq=False)
class WeakComponentLink:
    """A shared slot a component registers itself in; equal only to itself."""

    component: Any = None


class HoverKind(enum.Enum):
    HEADER = "header"
    ITEM = "item"
    LIST = "list"
    NONE = "none"


@dataclass(frozen=True)
class Hovered:
    """What the pointer was last over."""

    kind: HoverKind = HoverKind.NONE
    name: str = ""

    def __str__(self) -> str:
        if self.kind is HoverKind.HEADER:
            return "Header"
        if self.kind is HoverKind.ITEM:
            return self.name
        if self.kind is HoverKind.LIST:
            return "List container"
        return "Nothing"


def escape_text(value: Any) -> str:
    """Escape a value for use as HTML text content."""
    return html.escape(str(value), quote=False)


def classes(*args: Any) -> str:
    """Join class names, skipping empty ones and duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}

    def collect(item: Any) -> None:
        if item is None:
            return
        if isinstance(item, str):
            for name in item.split():
                seen.setdefault(name, None)
        elif isinstance(item, Iterable):
            for sub in item:
                collect(sub)
        else:
            seen.setdefault(str(item), None)

    collect(args)
    return " ".join(seen)


def _render(child: Any) -> str:
    if child is None:
        return ""
    if isinstance(child, _Html):
        return child
    if isinstance(child, str):
        return escape_text(child)
    view = getattr(child, "view", None)
    if callable(view):
        return view()
    if isinstance(child, Iterable):
        return "".join(_render(sub) for sub in child)
    return escape_text(child)


def _attribute(name: str, value: Any) -> str:
    name = name.rstrip("_").replace("_", "-")
    if value is None or value is False:
        return ""
    if value is True:
        return f" {name}"
    return f' {name}="{html.escape(str(value), quote=True)}"'


def element(tag: str, *args: Any, **kwargs: Any) -> str:
    """Render an HTML element.

    Positional arguments are children: plain strings are escaped, rendered markup is
    kept as is, components (objects with a ``view`` method) are rendered in place and
    iterables are flattened. Keyword arguments become attributes; a trailing
    underscore is dropped and other underscores become hyphens. An empty tag renders
    the children alone, as a fragment.
    """
    body = "".join(_render(child) for child in args)
    if not tag:
        return _Html(body)
    attrs = "".join(_attribute(name, value) for name, value in kwargs.items())
    if tag in _VOID_ELEMENTS:
        return _Html(f"<{tag}{attrs}>")
    return _Html(f"<{tag}{attrs}>{body}</{tag}>")