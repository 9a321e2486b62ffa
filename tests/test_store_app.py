from widgetdemos.posts import PostStore, RemovePost, UpdatePost
from widgetdemos.store_app import PostView, StoreApp


def test_app_lists_initial_post():
    app = StoreApp(PostStore())
    assert app.post_ids == [0]
    assert "Magic first post" in app.view()


def test_create_post_adds_sorted_ids():
    store = PostStore()
    app = StoreApp(store)
    assert app.create_post("hello") is False
    assert app.post_ids == sorted(store.posts)
    assert len(app.post_ids) == 2
    assert "hello" in app.view()


def test_same_post_count_does_not_rerender():
    store = PostStore()
    app = StoreApp(store)
    store.handle_input(UpdatePost(0, "edited"))
    assert app.on_store(store) is False
    assert "edited" in app.view()


def test_removed_post_leaves_view():
    store = PostStore()
    app = StoreApp(store)
    app.create_post("temporary")
    new_id = max(store.posts)
    store.handle_input(RemovePost(new_id))
    assert new_id not in app.post_ids
    assert f"Post #{new_id}" not in app.view()


def test_post_view_receives_text():
    view = PostView(PostStore(), 0)
    assert view.text == "Magic first post"
    assert "Post #0" in view.view()


def test_post_view_pending_when_missing():
    view = PostView(PostStore(), 42)
    assert view.text is None
    assert "&lt;pending&gt;" in view.view()


def test_post_view_update_text():
    store = PostStore()
    view = PostView(store, 0)
    assert view.update_text("changed") is False
    assert store.posts[0] == "changed"
    assert view.text == "changed"


def test_post_view_delete_keeps_last_text():
    store = PostStore()
    view = PostView(store, 0)
    assert view.delete() is False
    assert 0 not in store.posts
    assert view.text == "Magic first post"
    assert view.on_store(store) is False


def test_post_view_change():
    view = PostView(PostStore(), 0)
    assert view.change(0) is False
    assert view.change(5) is True
    assert view.id == 5