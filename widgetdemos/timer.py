"""A page with a clock, a one-shot timeout and a repeating interval."""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime
from typing import Any, Callable

from widgetdemos.component import element

logger = logging.getLogger(__name__)

Spawn = Callable[[float, Callable[[], Any], bool], Any]


class _ThreadTask:
    """Runs a callback after a delay, once or repeatedly, until cancelled."""

    def __init__(self, delay: float, callback: Callable[[], Any], repeat: bool) -> None:
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(delay, callback, repeat), daemon=True
        )
        self._thread.start()

    def _run(self, delay: float, callback: Callable[[], Any], repeat: bool) -> None:
        while not self._stop.wait(delay):
            callback()
            if not repeat:
                break

    def cancel(self) -> None:
        self._stop.set()


def _spawn_thread(delay: float, callback: Callable[[], Any], repeat: bool) -> _ThreadTask:
    return _ThreadTask(delay, callback, repeat)


def _local_time() -> str:
    return datetime.now().strftime("%I:%M:%S %p").lstrip("0")


def _cancel(task: Any) -> None:
    cancel = getattr(task, "cancel", None)
    if callable(cancel):
        cancel()


class TimerApp:
    """The timer page.

    ``clock`` returns the current time as text; ``spawn(delay, callback, repeat)``
    starts a task that calls ``callback`` after ``delay`` seconds, repeatedly when
    ``repeat`` is true, and returns a handle with a ``cancel`` method.
    """

    def __init__(
        self,
        clock: Callable[[], str] | None = None,
        spawn: Spawn | None = None,
    ) -> None:
        self.clock = clock or _local_time
        self.spawn = spawn or _spawn_thread
        self.job: Any = None
        self.time = self.clock()
        self.messages: list[str] = []
        self._tick_count = 0
        self._timer_started: float | None = None
        self._standalone = (
            self.spawn(
                10, lambda: logger.debug("Example of a standalone callback."), True
            ),
            self.spawn(1, self.update_time, True),
        )

    def _set_job(self, task: Any) -> None:
        if self.job is not None:
            _cancel(self.job)
        self.job = task

    def start_timeout(self) -> bool:
        self._set_job(self.spawn(3, self.done, False))
        self.messages.clear()
        self.messages.append("Timer started!")
        self._timer_started = time.monotonic()
        return True

    def start_interval(self) -> bool:
        self._set_job(self.spawn(1, self.tick, True))
        self.messages.clear()
        self.messages.append("Interval started!")
        return True

    def cancel(self) -> bool:
        self._set_job(None)
        self.messages.append("Canceled!")
        logger.warning("Canceled!")
        return True

    def done(self) -> bool:
        self._set_job(None)
        self.messages.append("Done!")
        logger.info("Done!")
        if self._timer_started is not None:
            elapsed = (time.monotonic() - self._timer_started) * 1000
            logger.info("Timer: %.3fms", elapsed)
            self._timer_started = None
        return True

    def tick(self) -> bool:
        self.messages.append("Tick...")
        self._tick_count += 1
        logger.info("Tick: %d", self._tick_count)
        return True

    def update_time(self) -> bool:
        self.time = self.clock()
        return True

    def view(self) -> str:
        has_job = self.job is not None
        buttons = element(
            "div",
            element("button", "Start Timeout", disabled=has_job),
            element("button", "Start Interval", disabled=has_job),
            element("button", "Cancel!", disabled=not has_job),
            id="buttons",
        )
        wrapper = element(
            "div",
            element("div", self.time, id="time"),
            element("div", [element("p", m) for m in self.messages], id="messages"),
            id="wrapper",
        )
        return element("", buttons, wrapper)