"""Facet selection state and matching."""

from collections.abc import Iterable, Sequence

from aws_lambda_powertools import Logger

from catalog.models.errors import FilterError
from catalog.models.item import CatalogItem

logger = Logger(UTC=True)


class FilterEngine:
    """Holds the active facet selections and evaluates matching items.

    Matching rules:
    - No selection at all: every item matches
    - Within one facet type: an item matches if it carries **any** selected value
    - Across facet types: an item must match **every** type with a selection
    - An item lacking a facet type fails that type's active selection
    """

    def __init__(self, facet_types: Iterable[str]) -> None:
        self._selections: dict[str, set[str]] = {
            facet_type: set() for facet_type in facet_types
        }

    @property
    def facet_types(self) -> tuple[str, ...]:
        return tuple(self._selections)

    @property
    def selections(self) -> dict[str, frozenset[str]]:
        """Read-only copy of the active selections."""
        return {
            facet_type: frozenset(values)
            for facet_type, values in self._selections.items()
        }

    @property
    def is_empty(self) -> bool:
        return not any(self._selections.values())

    def selected(self, facet_type: str) -> frozenset[str]:
        return frozenset(self._selection_for(facet_type))

    def toggle(self, facet_type: str, value: str, active: bool) -> bool:
        """Select or deselect ``value`` for ``facet_type``.

        Adding a selected value or removing an unselected one is a no-op.

        Returns:
            True if the selection changed

        Raises:
            FilterError: If ``facet_type`` is not configured
        """
        selection = self._selection_for(facet_type)

        if active == (value in selection):
            return False

        if active:
            selection.add(value)
        else:
            selection.discard(value)

        logger.debug(
            "Facet selection changed",
            extra={"facet_type": facet_type, "value": value, "active": active},
        )
        return True

    def clear(self) -> bool:
        """Drop every selection. Returns True if anything was selected."""
        changed = not self.is_empty
        for selection in self._selections.values():
            selection.clear()
        return changed

    def matches(self, item: CatalogItem) -> bool:
        for facet_type, selection in self._selections.items():
            if not selection:
                continue

            values = item.facet_values(facet_type)
            if not values or values.isdisjoint(selection):
                return False

        return True

    def evaluate(self, items: Sequence[CatalogItem]) -> list[CatalogItem]:
        """Items matching the active selections, in their original order."""
        if self.is_empty:
            return list(items)

        return [item for item in items if self.matches(item)]

    def _selection_for(self, facet_type: str) -> set[str]:
        try:
            return self._selections[facet_type]
        except KeyError as exc:
            raise FilterError(
                message=f"Unknown facet type '{facet_type}'",
                details={"facet_type": facet_type, "allowed": list(self._selections)},
            ) from exc
