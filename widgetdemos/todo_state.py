"""The state of a to-do list: entries, the active filter and the input values."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Entry:
    """One to-do item."""

    description: str
    completed: bool = False
    editing: bool = False


class Filter(enum.Enum):
    """Which entries are shown."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def fits(self, entry: Entry) -> bool:
        if self is Filter.ACTIVE:
            return not entry.completed
        if self is Filter.COMPLETED:
            return entry.completed
        return True

    def as_href(self) -> str:
        return {
            Filter.ALL: "#/",
            Filter.ACTIVE: "#/active",
            Filter.COMPLETED: "#/completed",
        }[self]

    def __str__(self) -> str:
        return self.value


@dataclass
class State:
    """All entries plus the filter and the texts being typed.

    Indices taken by the editing methods count only the entries that the current
    filter shows.
    """

    entries: list[Entry] = field(default_factory=list)
    filter: Filter = Filter.ALL
    value: str = ""
    edit_value: str = ""

    def _visible(self) -> Iterator[Entry]:
        return (entry for entry in self.entries if self.filter.fits(entry))

    def _position(self, idx: int) -> int:
        """The index in ``entries`` of the ``idx``-th visible entry."""
        positions = [
            position
            for position, entry in enumerate(self.entries)
            if self.filter.fits(entry)
        ]
        if not 0 <= idx < len(positions):
            raise IndexError(f"no visible entry at index {idx}")
        return positions[idx]

    def _nth_visible(self, idx: int) -> Entry:
        return self.entries[self._position(idx)]

    def total(self) -> int:
        return len(self.entries)

    def total_completed(self) -> int:
        return sum(1 for entry in self.entries if Filter.COMPLETED.fits(entry))

    def is_all_completed(self) -> bool:
        """True when at least one entry is visible and all visible ones are done."""
        visible = list(self._visible())
        return bool(visible) and all(entry.completed for entry in visible)

    def clear_completed(self) -> None:
        self.entries = [entry for entry in self.entries if Filter.ACTIVE.fits(entry)]

    def toggle(self, idx: int) -> None:
        entry = self._nth_visible(idx)
        entry.completed = not entry.completed

    def toggle_all(self, value: bool) -> None:
        for entry in self._visible():
            entry.completed = value

    def toggle_edit(self, idx: int) -> None:
        entry = self._nth_visible(idx)
        entry.editing = not entry.editing

    def clear_all_edit(self) -> None:
        for entry in self.entries:
            entry.editing = False

    def complete_edit(self, idx: int, val: str) -> None:
        """Store the edited text, or remove the entry when the text is empty."""
        if not val:
            self.remove(idx)
            return
        entry = self._nth_visible(idx)
        entry.description = val
        entry.editing = not entry.editing

    def remove(self, idx: int) -> Entry:
        """Remove the ``idx``-th visible entry and return it."""
        position = self._position(idx)
        return self.entries.pop(position)