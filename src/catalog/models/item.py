"""Catalog item model and raw catalog document parsing."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer

from catalog.models.errors import CatalogLoadError
from catalog.utils.constants import (
    CATALOG_ITEMS_KEY,
    ERROR_CODE_CATALOG_INVALID_FORMAT,
    FACET_VALUE_SEPARATOR,
    ITEM_ID_KEYS,
    ITEM_NAME_KEY,
)

FacetValues = frozenset[str]


def split_facet_values(raw: Any) -> FacetValues:
    """Normalize a raw facet attribute into a set of values.

    Accepts a comma-separated string or a list of strings. Every entry is
    trimmed and empty entries are discarded.

    Example:
        split_facet_values("Shoes, Sports,,") → frozenset({"Shoes", "Sports"})
    """
    if raw is None:
        return frozenset()

    if isinstance(raw, str):
        parts: Iterable[Any] = raw.split(FACET_VALUE_SEPARATOR)
    elif isinstance(raw, (list, tuple, set, frozenset)):
        parts = (
            piece
            for entry in raw
            for piece in str(entry).split(FACET_VALUE_SEPARATOR)
        )
    else:
        parts = [raw]

    return frozenset(value for value in (str(part).strip() for part in parts) if value)


class CatalogItem(BaseModel):
    """A single immutable catalog entry.

    ``facets`` maps a facet type to the values the item carries for it.
    A facet type missing from the mapping means the item does not have it.
    """

    model_config = ConfigDict(frozen=True)

    item_id: StrictStr = Field(..., min_length=1, description="Unique item identifier")
    name: StrictStr = Field(..., description="Display name")
    facets: dict[str, FacetValues] = Field(default_factory=dict)
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque display data (price, image URL, ...)",
    )

    def facet_values(self, facet_type: str) -> FacetValues | None:
        """Values for ``facet_type``, or None when the item lacks the type."""
        return self.facets.get(facet_type)

    @field_serializer("facets")
    def serialize_facets(self, facets: dict[str, FacetValues]) -> dict[str, list[str]]:
        return {facet_type: sorted(values) for facet_type, values in facets.items()}

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any], facet_types: Sequence[str]) -> "CatalogItem":
        """Build an item from a raw catalog record.

        Facet attributes are read by facet-type name. An attribute that yields
        no values is treated as absent. Every other key except the id and
        name is kept in ``attributes``.
        """
        item_id = next(
            (raw[key] for key in ITEM_ID_KEYS if raw.get(key) not in (None, "")),
            None,
        )
        if item_id is None:
            raise ValueError("catalog record must contain a non-empty 'id'")

        facets: dict[str, FacetValues] = {}
        for facet_type in facet_types:
            values = split_facet_values(raw.get(facet_type))
            if values:
                facets[facet_type] = values

        reserved = {*ITEM_ID_KEYS, ITEM_NAME_KEY, *facet_types}
        attributes = {key: value for key, value in raw.items() if key not in reserved}

        return cls(
            item_id=str(item_id),
            name=str(raw.get(ITEM_NAME_KEY) or ""),
            facets=facets,
            attributes=attributes,
        )


def parse_catalog(document: Any, facet_types: Sequence[str]) -> tuple[CatalogItem, ...]:
    """Parse a catalog document into the ordered item collection.

    The document is either a list of raw records or a mapping holding
    that list under ``"items"``. Record order is kept as display order.

    Raises:
        CatalogLoadError: If the document or any record is malformed
    """
    records = document.get(CATALOG_ITEMS_KEY) if isinstance(document, Mapping) else document

    if not isinstance(records, list):
        raise CatalogLoadError(
            message="Catalog document must contain a list of items",
            error_code=ERROR_CODE_CATALOG_INVALID_FORMAT,
            details={"type": type(records).__name__},
        )

    items: list[CatalogItem] = []
    for position, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise CatalogLoadError(
                message="Catalog item must be an object",
                error_code=ERROR_CODE_CATALOG_INVALID_FORMAT,
                details={"position": position},
            )
        try:
            items.append(CatalogItem.from_raw(record, facet_types))
        except ValueError as exc:
            raise CatalogLoadError(
                message="Malformed catalog item",
                error_code=ERROR_CODE_CATALOG_INVALID_FORMAT,
                details={"position": position, "error": str(exc)},
            ) from exc

    return tuple(items)
