"""
Fixed-size page partitioning of the matching items.
"""

from collections.abc import Sequence

from aws_lambda_powertools import Logger

from catalog.models.errors import PaginationError
from catalog.models.item import CatalogItem
from catalog.models.pagination import PaginationState
from catalog.utils.constants import DEFAULT_PAGE_SIZE, FIRST_PAGE, MIN_PAGE_SIZE

logger = Logger(UTC=True)


class Paginator:
    """
    Page tracker over one matching set.

    The paginator is in one of two states:
    - No results: the matching set is empty; there is no current page
      and navigation is not available
    - Paginated: ``page_count = ceil(len(items) / page_size)`` and a
      current page between 1 and ``page_count``

    Every ``reset`` starts over at page 1, even when the previous page
    would still be valid for the new matching set.

    Typical usage:
    1. ``reset`` with the freshly evaluated matching items
    2. ``open_page`` / ``next_page`` / ``last_page`` on navigation
    3. Render ``current_items`` and ``state``
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < MIN_PAGE_SIZE:
            raise PaginationError(
                message=f"Page size must be at least {MIN_PAGE_SIZE}",
                details={"page_size": page_size},
            )

        self._page_size = page_size
        self._items: tuple[CatalogItem, ...] = ()
        self._state = PaginationState(page_size=page_size)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def items(self) -> tuple[CatalogItem, ...]:
        """The whole matching set being paginated."""
        return self._items

    @property
    def current_items(self) -> list[CatalogItem]:
        """Items on the current page; empty when there are no results."""
        return list(self._items[self._state.start_index : self._state.end_index])

    @staticmethod
    def count_pages(total_count: int, page_size: int) -> int:
        """Number of pages needed for ``total_count`` items, rounded up."""
        return (total_count + page_size - 1) // page_size

    def reset(self, items: Sequence[CatalogItem]) -> PaginationState:
        """Paginate a new matching set, starting at page 1."""
        self._items = tuple(items)
        total_count = len(self._items)

        if not total_count:
            self._state = PaginationState(page_size=self._page_size)
            logger.debug("No matching items to paginate")
            return self._state

        self._state = PaginationState(
            page_size=self._page_size,
            total_count=total_count,
            page_count=self.count_pages(total_count, self._page_size),
            current_page=FIRST_PAGE,
        )
        logger.debug(
            "Pagination reset",
            extra={"total_count": total_count, "page_count": self._state.page_count},
        )
        return self._state

    def open_page(self, page: int) -> PaginationState:
        """Make ``page`` the current page.

        Raises:
            PaginationError: If there are no results or ``page`` is outside
                ``1..page_count``
        """
        page_count = self._state.page_count
        if not FIRST_PAGE <= page <= page_count:
            raise PaginationError(
                message=f"Page {page} is out of range",
                details={"page": page, "page_count": page_count},
            )

        self._state = self._state.model_copy(update={"current_page": page})
        logger.debug("Page opened", extra={"page": page, "page_count": page_count})
        return self._state

    def next_page(self) -> PaginationState:
        """Advance one page; stays put on the last page."""
        self._require_results()

        if not self._state.has_next:
            return self._state

        current_page = self._state.current_page or FIRST_PAGE
        return self.open_page(current_page + 1)

    def last_page(self) -> PaginationState:
        self._require_results()
        return self.open_page(self._state.page_count)

    def _require_results(self) -> None:
        if self._state.is_empty:
            raise PaginationError(
                message="There are no pages to navigate",
                details={"page_count": 0},
            )
