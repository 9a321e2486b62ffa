"""A text field that reports its content when Enter is pressed."""

from __future__ import annotations

from widgetdemos.component import Callback, element


class TextInput:
    """Holds typed text; submitting emits it and resets the field to its initial value."""

    def __init__(self, value: str, onsubmit: Callback) -> None:
        self.value = value
        self.onsubmit = onsubmit
        self.text = value

    def set_text(self, text: str) -> bool:
        self.text = text
        return True

    def submit(self) -> bool:
        text, self.text = self.text, self.value
        self.onsubmit.emit(text)
        return True

    def key_down(self, key: str) -> bool:
        """Submit on Enter; other keys do nothing."""
        if key == "Enter":
            return self.submit()
        return False

    def change(self, value: str, onsubmit: Callback) -> bool:
        if value == self.value and onsubmit is self.onsubmit:
            return False
        self.value = value
        self.onsubmit = onsubmit
        self.text = value
        return True

    def view(self) -> str:
        return element("input", type="text", value=self.text)