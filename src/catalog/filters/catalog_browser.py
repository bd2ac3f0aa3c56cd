"""
Catalog browsing coordinator.

Ties the facet index, filter engine and paginator to a display surface.
Every filter change re-evaluates the full collection, resets pagination
to page 1 and re-renders; every navigation re-renders the current page.
"""

from collections.abc import Iterable, Sequence

from aws_lambda_powertools import Logger

from catalog.display.surface import DisplaySurface
from catalog.filters.facet_index import FacetIndex
from catalog.filters.filter_engine import FilterEngine
from catalog.filters.paginator import Paginator
from catalog.models.errors import FilterError
from catalog.models.item import CatalogItem
from catalog.models.pagination import PaginationState
from catalog.utils.constants import DEFAULT_PAGE_SIZE, DEFAULT_PRESELECT_FACET

logger = Logger(UTC=True)


class CatalogBrowser:
    """
    Stateful browsing session over an immutable item collection.

    Owns the only mutable state of a session: the active facet selections
    and the pagination state. Independent instances share nothing but the
    (read-only) items.
    """

    def __init__(
        self,
        items: Sequence[CatalogItem],
        *,
        facet_types: Iterable[str],
        display: DisplaySurface,
        page_size: int = DEFAULT_PAGE_SIZE,
        preselect_facet: str | None = DEFAULT_PRESELECT_FACET,
    ) -> None:
        self._items: tuple[CatalogItem, ...] = tuple(items)
        self._facet_types = tuple(facet_types)

        if preselect_facet and preselect_facet not in self._facet_types:
            raise FilterError(
                message=f"Unknown facet type '{preselect_facet}'",
                details={"facet_type": preselect_facet},
            )

        self._preselect_facet = preselect_facet
        self._display = display
        self._index = FacetIndex(self._items, self._facet_types)
        self._engine = FilterEngine(self._facet_types)
        self._paginator = Paginator(page_size)

    @property
    def items(self) -> tuple[CatalogItem, ...]:
        return self._items

    @property
    def index(self) -> FacetIndex:
        return self._index

    @property
    def engine(self) -> FilterEngine:
        return self._engine

    @property
    def pagination(self) -> PaginationState:
        return self._paginator.state

    @property
    def matching_items(self) -> tuple[CatalogItem, ...]:
        return self._paginator.items

    @property
    def current_items(self) -> list[CatalogItem]:
        return self._paginator.current_items

    def start(self, preselect: str | None = None) -> PaginationState:
        """Render the facet lists and the first page.

        ``preselect`` is matched case-insensitively against the values of the
        preselect facet. On a match that value starts selected; otherwise
        the unfiltered collection is shown.
        """
        preselected = (
            self._index.find_value(self._preselect_facet, preselect)
            if self._preselect_facet
            else None
        )

        for facet_type in self._facet_types:
            self._display.render_facet_list(
                facet_type,
                self._index.value_counts(facet_type),
                preselected if facet_type == self._preselect_facet else None,
            )

        if preselected and self._preselect_facet:
            logger.info(
                "Applying preselected filter",
                extra={"facet_type": self._preselect_facet, "value": preselected},
            )
            self._engine.toggle(self._preselect_facet, preselected, True)
        elif preselect:
            logger.info("Ignoring unknown preselected filter", extra={"value": preselect})

        return self.refresh()

    def toggle(self, facet_type: str, value: str, active: bool) -> PaginationState:
        """Apply a facet toggle; re-evaluates only when the selection changed."""
        if not self._engine.toggle(facet_type, value, active):
            return self._paginator.state
        return self.refresh()

    def clear_filters(self) -> PaginationState:
        self._engine.clear()
        return self.refresh()

    def refresh(self) -> PaginationState:
        """Re-evaluate the full collection and show page 1 of the result."""
        matching = self._engine.evaluate(self._items)
        state = self._paginator.reset(matching)

        logger.debug(
            "Catalog re-filtered",
            extra={
                "selections": {k: sorted(v) for k, v in self._engine.selections.items()},
                "matching": len(matching),
            },
        )
        self._render()
        return state

    def open_page(self, page: int) -> PaginationState:
        state = self._paginator.open_page(page)
        self._render()
        return state

    def next_page(self) -> PaginationState:
        previous = self._paginator.state
        state = self._paginator.next_page()
        if state != previous:
            self._render()
        return state

    def last_page(self) -> PaginationState:
        state = self._paginator.last_page()
        self._render()
        return state

    def _render(self) -> None:
        self._display.render_page(self._paginator.current_items)
        self._display.render_pagination(self._paginator.state)
