"""Two app instances that send titles to each other, with a ping-pong exchange."""

from __future__ import annotations

from widgetdemos.component import element

_REPLIES = {
    "Ping": "Pong",
    "Pong": "Pong Done",
    "Pong Done": "Ping Done",
}


class PingPongApp:
    """Shows the last title it received and can send titles to its opposite."""

    def __init__(self, selector: str = "") -> None:
        self.selector = selector
        self.opposite: PingPongApp | None = None
        self.title = "Nothing"

    def set_opposite(self, opposite: "PingPongApp") -> bool:
        self.opposite = opposite
        return False

    def _require_opposite(self) -> "PingPongApp":
        if self.opposite is None:
            raise RuntimeError("no opposite app has been set")
        return self.opposite

    def send_to_opposite(self, title: str) -> bool:
        self._require_opposite().set_title(title)
        return False

    def set_title(self, title: str) -> bool:
        reply = _REPLIES.get(title)
        opposite = self._require_opposite() if reply is not None else None
        self.title = title
        if opposite is not None:
            opposite.set_title(reply)
        return True

    def view(self) -> str:
        buttons = [element("button", label) for label in ("One", "Two", "Three", "Ping")]
        heading = element("h3", f"{self.selector} received <{self.title}>")
        return element("div", heading, buttons)


def mount_pair(first_selector: str, second_selector: str) -> tuple[PingPongApp, PingPongApp]:
    """Create two apps, each the other's opposite."""
    first = PingPongApp(first_selector)
    second = PingPongApp(second_selector)
    first.set_opposite(second)
    second.set_opposite(first)
    return first, second