# widgetdemos

A set of small component demos. Each one keeps its state in plain Python
objects and reacts to events through its methods. Each one renders itself to
an HTML string with `view()`. You drive the demos from code or from tests, and
no browser is involved. The package has no dependencies beyond the standard
library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `widgetdemos.component`

The shared building blocks.

- `Callback(func)` wraps a function. `emit(value)` calls the function and
  returns its result. `reform(func)` returns a new callback that passes its
  input through `func` and then emits to the original callback.
- `WeakComponentLink` is a slot, `component`, that a component puts itself
  into. Two links are equal only when they are the same object.
- `Hovered(kind, name)` records what the pointer is over. `kind` is a
  `HoverKind`. Its `str()` gives `"Header"`, the item's name,
  `"List container"` or `"Nothing"`.
- `escape_text(value)` escapes a value for use as HTML text.
- `classes(*args)` joins class names. It skips empty names and repeats.
- `element(tag, *children, **attributes)` renders an element. It escapes
  string children and keeps markup that is already rendered. It renders
  components (objects with a `view` method) and flattens iterables. For
  attribute names, it drops a trailing underscore (`class_` → `class`) and
  turns other underscores into hyphens. `True` gives a bare attribute, and
  `False` or `None` leaves the attribute out. An empty tag renders a fragment.

### `widgetdemos.nested_list`

`NestedListApp` renders a `NestedList` of `ListHeader` and `ListItem`
children. One item holds a nested sub-list.

- `NestedList` shows its headers first. `visible_items()` gives the items
  that are not hidden, with names renumbered as `"#1 - name"` and so on.
- `ListHeader.click()` toggles the `inactive` state of the list that its link
  points to. It raises `RuntimeError` if the link is empty.
- Each `mouse_over` / `mouse_out` / `mouse_enter` sends a `Hovered` value to
  the app. The app shows the latest one under "Last hovered:".

### `widgetdemos.pubsub`

- `EventBus.connect(callback)` returns a handler id, and `disconnect(id)`
  removes it. `handle_input(message)` sends the message to every connected
  callback.
- `Producer.click()` publishes `"Message received"`.
- `Subscriber` shows the last message it got, starting from
  `"No message yet."`. `close()` disconnects it.
- `PubSubApp(bus)` renders one producer and one subscriber.

### `widgetdemos.two_apps`

`mount_pair(first_selector, second_selector)` creates two `PingPongApp`
instances and makes each one the other's opposite. `send_to_opposite(title)`
sets the other app's title.

A title of `"Ping"` starts a fixed exchange: `Ping` → `Pong` → `Pong Done` →
`Ping Done`. Sending without an opposite raises `RuntimeError`.

### `widgetdemos.todo_state` and `widgetdemos.todomvc`

A TodoMVC list.

- `State` holds the `Entry` list, a `Filter` (`ALL`, `ACTIVE`, `COMPLETED`)
  and the texts being typed. Indices passed to `toggle`, `toggle_edit`,
  `complete_edit` and `remove` count only the entries that the current filter
  shows. An index out of range raises `IndexError`.
- `TodoApp(storage)` handles input: `update_value`, `add`, `toggle`,
  `toggle_all`, `toggle_edit`, `update_edit`, `edit`, `remove`, `set_filter`
  and `clear_completed`. After each action it saves the entries under the key
  `"yew.todomvc.self"`. When it starts, it restores them from that key.
- `JsonStorage(path)` keeps keys and values as one JSON object in a file. With
  no path it keeps them in memory.

### `widgetdemos.timer`

`TimerApp(clock=None, spawn=None)` has a clock line, a one-shot timeout of 3
seconds and a repeating interval of 1 second.

- `clock()` returns the time as text. By default it is the local time.
- `spawn(delay, callback, repeat)` starts a task and returns a handle with a
  `cancel` method. By default it uses background threads.

Messages such as `"Timer started!"`, `"Tick..."`, `"Done!"` and
`"Canceled!"` are collected in `messages`. Events are also logged through the
`logging` module.

### `widgetdemos.posts`, `widgetdemos.text_input` and `widgetdemos.store_app`

- `PostStore` holds posts by id and starts with post 0,
  `"Magic first post"`. `handle_input` turns the requests `CreatePost`,
  `UpdatePost` and `RemovePost` into the actions `SetPost` and `DeletePost`,
  applies them with `reduce`, and passes the store to every open bridge.
- `bridge(callback)` opens a `StoreBridge` and calls the callback at once.
  Sending on a bridge after `close()` raises `RuntimeError`.
- `TextInput` holds typed text. `key_down("Enter")` or `submit()` emits the
  text and resets the field to its initial value.
- `StoreApp` creates posts and keeps a `PostView` for each post in the store.
  Each `PostView` can update its post or delete it.

### `widgetdemos.routes`

`AppRoute(kind, value)` with `RouteKind` describes the routes:

- `/posts/{id}`
- `/posts/?page={n}`
- `/posts/`
- `/authors/{id}`
- `/authors/`
- `/page-not-found`
- `/`

`parse_route(path, base)` returns the matching route or `None`.
`build_route(route, base)` builds the path. `base_path(base_url)` takes the
path of a base URL and drops its trailing slash.

```python
from widgetdemos.routes import base_path, parse_route

base = base_path("https://example.com/router/")   # "/router"
parse_route("/router/posts/42", base)              # AppRoute(kind=RouteKind.POST, value=42)
```

### `widgetdemos.pagination`

`Pagination(page, total_pages, on_switch_page)` shows a window of page links
around the current page, with an ellipsis where pages are left out. `previous()`
and `next()` emit the neighbouring page number. `page_seeds(page)` gives the
ten post seeds listed on a page.

```python
from widgetdemos.component import Callback
from widgetdemos.pagination import Pagination

Pagination(5, 20, Callback(print)).page_links()
# [1, '…', 4, 5, 6, '…', 20]
```

## Example

```python
from widgetdemos.todo_state import Filter
from widgetdemos.todomvc import JsonStorage, TodoApp

app = TodoApp(JsonStorage("todos.json"))
app.update_value("buy milk")
app.add()
app.toggle(0)
app.set_filter(Filter.COMPLETED)
print(app.state.total_completed())  # 1
html = app.view()
```

## What it does not do

- There is no command to run, and nothing serves the pages. `view()` only
  returns HTML text.
- The rendered markup carries no event handlers. To handle events, you call
  the component's methods yourself.
- The routing module parses and builds paths only. No blog pages, generated
  posts or authors come with it.