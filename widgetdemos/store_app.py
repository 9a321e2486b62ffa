"""A page listing the posts of a store, each editable and deletable."""

from __future__ import annotations

import logging

from widgetdemos.component import Callback, element
from widgetdemos.posts import CreatePost, PostStore, RemovePost, UpdatePost
from widgetdemos.text_input import TextInput

logger = logging.getLogger(__name__)


class PostView:
    """Shows one post and lets it be edited or deleted."""

    def __init__(self, store: PostStore, post_id: int) -> None:
        self.id = post_id
        self.text: str | None = None
        self.bridge = store.bridge(Callback(self.on_store))

    def update_text(self, text: str) -> bool:
        self.bridge.send(UpdatePost(self.id, text))
        return False

    def delete(self) -> bool:
        self.bridge.send(RemovePost(self.id))
        return False

    def on_store(self, store: PostStore) -> bool:
        """Take the post's text from the store; True only when it changed."""
        text = store.posts.get(self.id)
        if text is None or text == self.text:
            return False
        self.text = text
        return True

    def change(self, post_id: int) -> bool:
        if post_id == self.id:
            return False
        self.id = post_id
        return True

    def view(self) -> str:
        text = self.text if self.text is not None else "<pending>"
        return element(
            "div",
            element("h2", f"Post #{self.id}"),
            element("p", text),
            TextInput(text, Callback(self.update_text)),
            element("button", "Delete"),
        )


class StoreApp:
    """A field to create posts and a view for every post in the store."""

    def __init__(self, store: PostStore) -> None:
        self.store = store
        self.post_ids: list[int] = []
        self._views: dict[int, PostView] = {}
        self.input = TextInput("New post", Callback(self.create_post))
        self.bridge = store.bridge(Callback(self.on_store))

    def create_post(self, text: str) -> bool:
        self.bridge.send(CreatePost(text))
        return False

    def on_store(self, store: PostStore) -> bool:
        """Refresh the id list when the number of posts changed."""
        logger.debug("Received update")
        if len(store.posts) == len(self.post_ids):
            return False
        self.post_ids = sorted(store.posts)
        self._sync_views(store)
        return True

    def _sync_views(self, store: PostStore) -> None:
        for gone in set(self._views) - set(self.post_ids):
            self._views.pop(gone).bridge.close()
        for post_id in self.post_ids:
            if post_id not in self._views:
                self._views[post_id] = PostView(store, post_id)

    def view(self) -> str:
        posts = [self._views[post_id] for post_id in self.post_ids]
        return element("", self.input, element("div", posts))