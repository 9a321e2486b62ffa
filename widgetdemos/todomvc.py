"""The to-do list application, saving its entries to a key-value store."""

from __future__ import annotations

import json
from dataclasses import asdict
from os import PathLike
from pathlib import Path
from typing import Any

from widgetdemos.component import classes, element
from widgetdemos.todo_state import Entry, Filter, State

KEY = "yew.todomvc.self"


class JsonStorage:
    """A key-value store kept as one JSON object in a file, or in memory when no path is given."""

    def __init__(self, path: str | PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._memory: dict[str, Any] = {}

    def _load(self) -> dict[str, Any]:
        if self.path is None:
            return self._memory
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def restore(self, key: str) -> Any:
        """The value stored under ``key``, or None when there is none or it cannot be read."""
        return self._load().get(key)

    def store(self, key: str, value: Any) -> None:
        data = dict(self._load())
        data[key] = value
        if self.path is None:
            self._memory = data
        else:
            self.path.write_text(json.dumps(data), encoding="utf-8")


def _entries_from_json(data: Any) -> list[Entry] | None:
    if not isinstance(data, list):
        return None
    entries = []
    for item in data:
        if not isinstance(item, dict):
            return None
        description = item.get("description")
        completed = item.get("completed")
        editing = item.get("editing")
        if not isinstance(description, str):
            return None
        if not isinstance(completed, bool) or not isinstance(editing, bool):
            return None
        entries.append(Entry(description, completed, editing))
    return entries


class TodoApp:
    """The to-do page. Every action returns True and saves the entries afterwards."""

    def __init__(self, storage: JsonStorage) -> None:
        self.storage = storage
        entries = _entries_from_json(storage.restore(KEY)) or []
        self.state = State(entries=entries)

    def _save(self) -> bool:
        self.storage.store(KEY, [asdict(entry) for entry in self.state.entries])
        return True

    def add(self) -> bool:
        description = self.state.value.strip()
        if description:
            self.state.entries.append(Entry(description))
        self.state.value = ""
        return self._save()

    def edit(self, idx: int) -> bool:
        edit_value = self.state.edit_value.strip()
        self.state.complete_edit(idx, edit_value)
        self.state.edit_value = ""
        return self._save()

    def update_value(self, val: str) -> bool:
        self.state.value = val
        return self._save()

    def update_edit(self, val: str) -> bool:
        self.state.edit_value = val
        return self._save()

    def remove(self, idx: int) -> bool:
        self.state.remove(idx)
        return self._save()

    def set_filter(self, filter: Filter) -> bool:
        self.state.filter = filter
        return self._save()

    def toggle_all(self) -> bool:
        self.state.toggle_all(not self.state.is_all_completed())
        return self._save()

    def toggle_edit(self, idx: int) -> bool:
        self.state.edit_value = self.state.entries[idx].description
        self.state.clear_all_edit()
        self.state.toggle_edit(idx)
        return self._save()

    def toggle(self, idx: int) -> bool:
        self.state.toggle(idx)
        return self._save()

    def clear_completed(self) -> bool:
        self.state.clear_completed()
        return self._save()

    def view(self) -> str:
        state = self.state
        hidden_class = "hidden" if not state.entries else ""
        visible = (entry for entry in state.entries if state.filter.fits(entry))
        main = element(
            "section",
            element(
                "input",
                type="checkbox",
                class_="toggle-all",
                id="toggle-all",
                checked=state.is_all_completed(),
            ),
            element("label", for_="toggle-all"),
            element("ul", [self._view_entry(entry) for entry in visible], class_="todo-list"),
            class_=classes("main", hidden_class),
        )
        footer = element(
            "footer",
            element(
                "span",
                element("strong", str(state.total())),
                " item(s) left",
                class_="todo-count",
            ),
            element("ul", [self._view_filter(f) for f in Filter], class_="filters"),
            element(
                "button",
                f"Clear completed ({state.total_completed()})",
                class_="clear-completed",
            ),
            class_=classes("footer", hidden_class),
        )
        app = element(
            "section",
            element("header", element("h1", "todos"), self._view_input(), class_="header"),
            main,
            footer,
            class_="todoapp",
        )
        info = element(
            "footer",
            element("p", "Double-click to edit a todo"),
            element("p", "Part of TodoMVC"),
            class_="info",
        )
        return element("div", app, info, class_="todomvc-wrapper")

    def _view_filter(self, filter_: Filter) -> str:
        cls = "selected" if self.state.filter is filter_ else "not-selected"
        return element("li", element("a", str(filter_), class_=cls, href=filter_.as_href()))

    def _view_input(self) -> str:
        return element(
            "input",
            class_="new-todo",
            placeholder="What needs to be done?",
            value=self.state.value,
        )

    def _view_entry(self, entry: Entry) -> str:
        cls = classes(
            "todo",
            "editing" if entry.editing else "",
            "completed" if entry.completed else "",
        )
        view = element(
            "div",
            element("input", type="checkbox", class_="toggle", checked=entry.completed),
            element("label", entry.description),
            element("button", class_="destroy"),
            class_="view",
        )
        return element("li", view, self._view_entry_edit_input(entry), class_=cls)

    def _view_entry_edit_input(self, entry: Entry) -> str:
        if entry.editing:
            return element("input", class_="edit", type="text", value=self.state.edit_value)
        return element("input", type="hidden")