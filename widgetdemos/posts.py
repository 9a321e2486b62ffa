"""A store of text posts that reduces requests into actions and notifies its bridges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from widgetdemos.component import Callback


@dataclass(frozen=True)
class CreatePost:
    """Ask the store to add a post with a fresh id."""

    text: str


@dataclass(frozen=True)
class UpdatePost:
    """Ask the store to set the text of a post, creating it if needed."""

    post_id: int
    text: str


@dataclass(frozen=True)
class RemovePost:
    """Ask the store to drop a post."""

    post_id: int


@dataclass(frozen=True)
class SetPost:
    """Store ``text`` under ``post_id``, or under a new id when ``post_id`` is None."""

    post_id: int | None
    text: str


@dataclass(frozen=True)
class DeletePost:
    """Drop the post with ``post_id`` if there is one."""

    post_id: int


Request = Union[CreatePost, UpdatePost, RemovePost]
Action = Union[SetPost, DeletePost]


class StoreBridge:
    """A connection to a store: sends requests to it and receives its state."""

    def __init__(self, store: "PostStore", callback: Callback) -> None:
        self.store = store
        self.callback = callback
        self.closed = False

    def send(self, request: Request) -> None:
        if self.closed:
            raise RuntimeError("the bridge has been closed")
        self.store.handle_input(request)

    def close(self) -> None:
        self.closed = True
        self.store._detach(self)


class PostStore:
    """Holds posts by id; every handled request is passed on to all open bridges."""

    def __init__(self) -> None:
        self.posts: dict[int, str] = {0: "Magic first post"}
        self._id_counter = 1
        self._bridges: list[StoreBridge] = []

    def _next_id(self) -> int:
        post_id = self._id_counter
        self._id_counter += 1
        return post_id

    def handle_input(self, request: Request) -> None:
        """Turn a request into an action, apply it and notify every bridge."""
        if isinstance(request, CreatePost):
            action: Action = SetPost(None, request.text)
        elif isinstance(request, UpdatePost):
            action = SetPost(request.post_id, request.text)
        elif isinstance(request, RemovePost):
            action = DeletePost(request.post_id)
        else:
            raise TypeError(f"unknown request: {request!r}")
        self.reduce(action)
        self._notify()

    def reduce(self, action: Action) -> None:
        """Apply an action to the posts."""
        if isinstance(action, SetPost):
            post_id = action.post_id if action.post_id is not None else self._next_id()
            self.posts[post_id] = action.text
        elif isinstance(action, DeletePost):
            self.posts.pop(action.post_id, None)
        else:
            raise TypeError(f"unknown action: {action!r}")

    def bridge(self, callback: Callback) -> StoreBridge:
        """Open a bridge; ``callback`` gets the store now and after every change."""
        bridge = StoreBridge(self, callback)
        self._bridges.append(bridge)
        callback.emit(self)
        return bridge

    def _detach(self, bridge: StoreBridge) -> None:
        if bridge in self._bridges:
            self._bridges.remove(bridge)

    def _notify(self) -> None:
        for bridge in list(self._bridges):
            if not bridge.closed:
                bridge.callback.emit(self)