"""
Display surface contract and a payload-building implementation.

The browsing engine never builds UI itself. After every state change it
hands the display surface exactly what to show: the items of the current
page, the pagination state and, once at start, the facet filter lists.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from catalog.models.facets import FacetList, FacetOption, FacetValueCount
from catalog.models.item import CatalogItem
from catalog.models.pagination import PaginationInfo, PaginationState, build_page_controls
from catalog.utils.constants import NO_RESULTS_MESSAGE

JsonDict = dict[str, Any]


class DisplaySurface(Protocol):
    """Rendering side of the catalog browser."""

    def render_page(self, items: Sequence[CatalogItem]) -> None:
        """Replace the shown items with exactly ``items``, in order."""

    def render_pagination(self, state: PaginationState) -> None:
        """Rebuild navigation controls for ``state``.

        One control per page, then next and last; ``state.current_page`` is
        marked active. Without pages, show the no-results placeholder only.
        """

    def render_facet_list(
        self,
        facet_type: str,
        values: Sequence[FacetValueCount],
        preselected: str | None = None,
    ) -> None:
        """Build one toggle control per value, labelled with its count."""


class PayloadDisplaySurface:
    """Display surface that records the latest render into an API payload."""

    def __init__(self) -> None:
        self._items: list[CatalogItem] = []
        self._pagination: PaginationInfo | None = None
        self._facet_values: dict[str, list[FacetValueCount]] = {}
        self._preselected: dict[str, str] = {}

    @property
    def items(self) -> list[CatalogItem]:
        return list(self._items)

    @property
    def pagination(self) -> PaginationInfo | None:
        return self._pagination

    def render_page(self, items: Sequence[CatalogItem]) -> None:
        self._items = list(items)

    def render_pagination(self, state: PaginationState) -> None:
        self._pagination = PaginationInfo(
            page_size=state.page_size,
            total_count=state.total_count,
            page_count=state.page_count,
            current_page=state.current_page,
            has_next=state.has_next,
            controls=build_page_controls(state),
            message=NO_RESULTS_MESSAGE if state.is_empty else None,
        )

    def render_facet_list(
        self,
        facet_type: str,
        values: Sequence[FacetValueCount],
        preselected: str | None = None,
    ) -> None:
        self._facet_values[facet_type] = list(values)
        if preselected:
            self._preselected[facet_type] = preselected

    def facet_lists(self, selections: dict[str, frozenset[str]]) -> list[FacetList]:
        """Rendered facet lists with ``active`` flags from ``selections``."""
        return [
            FacetList(
                facet_type=facet_type,
                options=[
                    FacetOption(
                        value=entry.value,
                        count=entry.count,
                        active=entry.value in selections.get(facet_type, frozenset()),
                    )
                    for entry in values
                ],
            )
            for facet_type, values in self._facet_values.items()
        ]

    def to_payload(self, selections: dict[str, frozenset[str]]) -> JsonDict:
        """JSON-serialisable snapshot of everything rendered so far."""
        pagination = self._pagination
        return {
            "items": [item.model_dump(mode="json") for item in self._items],
            "total_count": pagination.total_count if pagination else 0,
            "returned_count": len(self._items),
            "pagination": pagination.model_dump() if pagination else None,
            "facets": [facet.model_dump() for facet in self.facet_lists(selections)],
            "active_filters": {
                facet_type: sorted(values)
                for facet_type, values in selections.items()
                if values
            },
            "preselected": dict(self._preselected),
        }
