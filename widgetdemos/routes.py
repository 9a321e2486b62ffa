"""The routes of the blog pages, parsed from and built into URL paths under a base path."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

_U64_MAX = 2**64 - 1


class RouteKind(enum.Enum):
    POST = "post"
    POST_LIST_PAGE = "post_list_page"
    POST_LIST = "post_list"
    AUTHOR = "author"
    AUTHOR_LIST = "author_list"
    PAGE_NOT_FOUND = "page_not_found"
    HOME = "home"


_NUMBERED = frozenset({RouteKind.POST, RouteKind.POST_LIST_PAGE, RouteKind.AUTHOR})


@dataclass(frozen=True)
class AppRoute:
    """A route; ``value`` is the id or page number, or the unmatched path for a missing page."""

    kind: RouteKind
    value: int | str | None = None

    def __post_init__(self) -> None:
        value = self.value
        if self.kind in _NUMBERED:
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{self.kind.name} needs an integer value")
            if not 0 <= value <= _U64_MAX:
                raise ValueError(f"value out of range: {value}")
        elif self.kind is RouteKind.PAGE_NOT_FOUND:
            if value is not None and not isinstance(value, str):
                raise ValueError("PAGE_NOT_FOUND takes a path string or None")
        elif value is not None:
            raise ValueError(f"{self.kind.name} takes no value")


# Tried in order; each matches a prefix of the path except HOME, which is exact.
_PATTERNS = (
    (RouteKind.POST, re.compile(r"/posts/([0-9]+)")),
    (RouteKind.POST_LIST_PAGE, re.compile(r"/posts/\?page=([0-9]+)")),
    (RouteKind.POST_LIST, re.compile(r"/posts/")),
    (RouteKind.AUTHOR, re.compile(r"/authors/([0-9]+)")),
    (RouteKind.AUTHOR_LIST, re.compile(r"/authors/")),
    (RouteKind.PAGE_NOT_FOUND, re.compile(r"/page-not-found")),
    (RouteKind.HOME, re.compile(r"/\Z")),
)


def base_path(base_url: str | None = None) -> str:
    """The path of the page's base URL without its trailing slash."""
    path = urlsplit(base_url).path if base_url is not None else "/"
    path = path or "/"
    if path.endswith("/"):
        path = path[:-1]
    return path


def _parse_section(section: str) -> AppRoute | None:
    for kind, pattern in _PATTERNS:
        match = pattern.match(section)
        if match is None:
            continue
        if kind in _NUMBERED:
            number = int(match.group(1))
            if number > _U64_MAX:
                continue
            return AppRoute(kind, number)
        return AppRoute(kind)
    return None


def parse_route(path: str, base: str = "") -> AppRoute | None:
    """The route ``path`` leads to under ``base``, or None if it leads nowhere."""
    if not path.startswith(base):
        return None
    return _parse_section(path[len(base):])


def build_route(route: AppRoute, base: str = "") -> str:
    """The path of ``route`` under ``base``."""
    sections = {
        RouteKind.POST: lambda: f"/posts/{route.value}",
        RouteKind.POST_LIST_PAGE: lambda: f"/posts/?page={route.value}",
        RouteKind.POST_LIST: lambda: "/posts/",
        RouteKind.AUTHOR: lambda: f"/authors/{route.value}",
        RouteKind.AUTHOR_LIST: lambda: "/authors/",
        RouteKind.PAGE_NOT_FOUND: lambda: "/page-not-found",
        RouteKind.HOME: lambda: "/",
    }
    return base + sections[route.kind]()