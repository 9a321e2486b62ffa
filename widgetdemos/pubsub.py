"""A broadcast event bus with a producer and a subscriber component."""

from __future__ import annotations

import itertools

from widgetdemos.component import Callback, element


class EventBus:
    """Delivers every published message to all connected subscribers."""

    def __init__(self) -> None:
        self._subscribers: dict[int, Callback] = {}
        self._ids = itertools.count()

    def connect(self, callback: Callback) -> int:
        """Register a subscriber and return its handler id."""
        handler_id = next(self._ids)
        self._subscribers[handler_id] = callback
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self._subscribers.pop(handler_id, None)

    def handle_input(self, message: str) -> None:
        for callback in list(self._subscribers.values()):
            callback.emit(message)


class Producer:
    """A button that publishes a fixed message on the bus."""

    def __init__(self, bus: EventBus) -> None:
        self.bus = bus

    def click(self) -> bool:
        self.bus.handle_input("Message received")
        return False

    def view(self) -> str:
        return element("button", "PRESS ME")


class Subscriber:
    """Shows the last message received from the bus."""

    def __init__(self, bus: EventBus) -> None:
        self.bus = bus
        self.message = "No message yet."
        self.handler_id = bus.connect(Callback(self.update))

    def update(self, message: str) -> bool:
        self.message = message
        return True

    def close(self) -> None:
        self.bus.disconnect(self.handler_id)

    def view(self) -> str:
        return element("h1", self.message)


class PubSubApp:
    """A producer and a subscriber sharing one bus."""

    def __init__(self, bus: EventBus) -> None:
        self.producer = Producer(bus)
        self.subscriber = Subscriber(bus)

    def view(self) -> str:
        return element("", self.producer, self.subscriber)