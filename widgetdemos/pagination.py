"""Page navigation links and the seeds of the posts shown on one page."""

from __future__ import annotations

from widgetdemos.component import Callback, classes, element

ELLIPSIS = "\u2026"
LINKS_PER_SIDE = 3
ITEMS_PER_PAGE = 10
_U64_MAX = 2**64 - 1
TOTAL_PAGES = _U64_MAX // ITEMS_PER_PAGE


def _shorten(pages: range, max_links: int) -> list[int | str]:
    if len(pages) > max_links:
        # one slot for the ellipsis and one for the last page
        return [*pages[: max_links - 2], ELLIPSIS, pages[-1]]
    return list(pages)


class Pagination:
    """Links to the pages around the current one, with previous and next buttons."""

    def __init__(self, page: int, total_pages: int, on_switch_page: Callback) -> None:
        self.page = page
        self.total_pages = total_pages
        self.on_switch_page = on_switch_page

    def page_links(self) -> list[int | str]:
        """Page numbers to link to, in order, with ELLIPSIS where pages are left out."""
        page, total = self.page, self.total_pages
        if page > total:
            raise ValueError(f"page {page} is past the last page {total}")
        pages_prev = max(page - 1, 0)
        pages_next = total - page
        # fewer pages on the right leave room for more on the left
        links_left = min(LINKS_PER_SIDE, pages_prev) + max(LINKS_PER_SIDE - pages_next, 0)
        links_right = 2 * LINKS_PER_SIDE - links_left
        return [
            *_shorten(range(1, page), links_left),
            page,
            *_shorten(range(page + 1, total + 1), links_right),
        ]

    def previous(self) -> None:
        if self.page == 0:
            raise ValueError("there is no page before page 0")
        self.on_switch_page.emit(self.page - 1)

    def next(self) -> None:
        self.on_switch_page.emit(self.page + 1)

    def _link(self, to_page: int) -> str:
        return element(
            "li",
            element(
                "a",
                str(to_page),
                class_=classes("pagination-link", "is-current" if to_page == self.page else ""),
                aria_label=f"Goto page {to_page}",
            ),
        )

    def _item(self, link: int | str) -> str:
        if link == ELLIPSIS:
            return element("li", element("span", ELLIPSIS, class_="pagination-ellipsis"))
        if link == self.page:
            return element("li", self._link(self.page))
        return self._link(link)

    def view(self) -> str:
        relnav = element(
            "",
            element("a", "Previous", class_="pagination-previous", disabled=self.page == 1),
            element(
                "a",
                "Next page",
                class_="pagination-next",
                disabled=self.page == self.total_pages,
            ),
        )
        links = element(
            "ul", [self._item(link) for link in self.page_links()], class_="pagination-list"
        )
        return element(
            "nav",
            relnav,
            links,
            class_="pagination is-right",
            role="navigation",
            aria_label="pagination",
        )


def page_seeds(page: int) -> list[int]:
    """The seeds of the posts listed on ``page``, counting pages from 1."""
    if page < 1:
        raise ValueError("pages are numbered from 1")
    start = (page - 1) * ITEMS_PER_PAGE
    if start + ITEMS_PER_PAGE - 1 > _U64_MAX:
        raise ValueError(f"page {page} is out of range")
    return list(range(start, start + ITEMS_PER_PAGE))