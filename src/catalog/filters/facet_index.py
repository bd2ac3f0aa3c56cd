"""Distinct facet values derived from the item collection."""

from collections.abc import Iterable, Sequence

from catalog.models.facets import FacetValueCount
from catalog.models.item import CatalogItem


class FacetIndex:
    """Per facet type, the sorted distinct values found across all items.

    Built once from the immutable collection and used to construct filter
    controls. Values are unique, trimmed and non-empty (guaranteed by
    item parsing) and kept in lexicographic ascending order.
    """

    def __init__(self, items: Sequence[CatalogItem], facet_types: Iterable[str]) -> None:
        self._items = tuple(items)
        self._values = self.build(self._items, facet_types)

    @staticmethod
    def build(
        items: Iterable[CatalogItem],
        facet_types: Iterable[str],
    ) -> dict[str, tuple[str, ...]]:
        """Collect the distinct values per facet type.

        Items lacking a facet type contribute nothing to it. Every requested
        facet type is present in the result, possibly with no values.

        Example:
            items = [{categories: {"Shoes"}}, {categories: {"Bags", "Shoes"}}]

            → {"categories": ("Bags", "Shoes")}
        """
        facet_types = tuple(facet_types)
        seen: dict[str, set[str]] = {facet_type: set() for facet_type in facet_types}

        for item in items:
            for facet_type in facet_types:
                values = item.facet_values(facet_type)
                if values:
                    seen[facet_type].update(values)

        return {facet_type: tuple(sorted(values)) for facet_type, values in seen.items()}

    @staticmethod
    def count(facet_type: str, value: str, items: Iterable[CatalogItem]) -> int:
        """Number of items whose values for ``facet_type`` contain ``value``."""
        return sum(1 for item in items if value in (item.facet_values(facet_type) or ()))

    @property
    def facet_types(self) -> tuple[str, ...]:
        return tuple(self._values)

    def values(self, facet_type: str) -> tuple[str, ...]:
        return self._values.get(facet_type, ())

    def value_counts(self, facet_type: str) -> list[FacetValueCount]:
        """Sorted values for ``facet_type`` paired with their item counts."""
        return [
            FacetValueCount(value=value, count=self.count(facet_type, value, self._items))
            for value in self.values(facet_type)
        ]

    def find_value(self, facet_type: str, raw: str | None) -> str | None:
        """Canonical value of ``facet_type`` equal to ``raw`` ignoring case."""
        if not raw:
            return None

        wanted = raw.strip().lower()
        return next(
            (value for value in self.values(facet_type) if value.lower() == wanted),
            None,
        )
