import pytest

from widgetdemos.two_apps import PingPongApp, mount_pair


def test_new_app_has_no_title():
    app = PingPongApp(".first-app")
    assert app.title == "Nothing"
    assert app.opposite is None


def test_mount_pair_links_both_ways():
    first, second = mount_pair(".first-app", ".second-app")
    assert first.opposite is second
    assert second.opposite is first


def test_plain_title_reaches_only_opposite():
    first, second = mount_pair(".first-app", ".second-app")
    assert first.send_to_opposite("One") is False
    assert second.title == "One"
    assert first.title == "Nothing"


def test_ping_pong_exchange():
    first, second = mount_pair(".first-app", ".second-app")
    first.send_to_opposite("Ping")
    assert second.title == "Pong Done"
    assert first.title == "Ping Done"


def test_send_without_opposite_raises():
    with pytest.raises(RuntimeError):
        PingPongApp().send_to_opposite("One")


def test_ping_without_opposite_raises():
    with pytest.raises(RuntimeError):
        PingPongApp().set_title("Ping")


def test_set_title_and_set_opposite_render_flags():
    first = PingPongApp()
    assert first.set_opposite(PingPongApp()) is False
    assert first.set_title("Two") is True
    assert first.title == "Two"


def test_view_shows_selector_title_and_buttons():
    app = PingPongApp(".first-app")
    out = app.view()
    assert ".first-app received &lt;Nothing&gt;" in out
    for label in ("One", "Two", "Three", "Ping"):
        assert label in out