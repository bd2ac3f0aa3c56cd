"""Unit tests for catalog item parsing."""

from pydantic import ValidationError
import pytest

from catalog.models.errors import CatalogLoadError
from catalog.models.item import CatalogItem, parse_catalog, split_facet_values

FACET_TYPES = ("categories", "subcategories", "brands")


class TestSplitFacetValues:
    def test_splits_and_trims(self) -> None:
        assert split_facet_values(" Shoes , Sports ") == frozenset({"Shoes", "Sports"})

    def test_discards_empty_entries(self) -> None:
        assert split_facet_values("Shoes,, ,") == frozenset({"Shoes"})

    def test_accepts_lists(self) -> None:
        assert split_facet_values(["Nike ", "Adidas, Puma"]) == frozenset(
            {"Nike", "Adidas", "Puma"}
        )

    def test_missing_value(self) -> None:
        assert split_facet_values(None) == frozenset()
        assert split_facet_values("") == frozenset()


class TestCatalogItemFromRaw:
    def test_reads_facets_and_keeps_attributes(self) -> None:
        item = CatalogItem.from_raw(
            {
                "id": 7,
                "name": "Zapatilla",
                "categories": "Calzado, Deportes",
                "brands": "Nike",
                "price": 4990,
            },
            FACET_TYPES,
        )

        assert item.item_id == "7"
        assert item.name == "Zapatilla"
        assert item.facet_values("categories") == frozenset({"Calzado", "Deportes"})
        assert item.facet_values("brands") == frozenset({"Nike"})
        assert item.facet_values("subcategories") is None
        assert item.attributes == {"price": 4990}

    def test_blank_facet_attribute_counts_as_absent(self) -> None:
        item = CatalogItem.from_raw({"id": "a", "subcategories": " , "}, FACET_TYPES)

        assert "subcategories" not in item.facets

    def test_item_id_key_fallback(self) -> None:
        item = CatalogItem.from_raw({"item_id": "sku-1", "name": "x"}, FACET_TYPES)

        assert item.item_id == "sku-1"

    def test_missing_name_defaults_to_empty(self) -> None:
        item = CatalogItem.from_raw({"id": "a", "brands": "Nike"}, FACET_TYPES)

        assert item.name == ""
        assert item.facet_values("brands") == frozenset({"Nike"})

    def test_missing_id_raises(self) -> None:
        with pytest.raises(ValueError):
            CatalogItem.from_raw({"name": "x"}, FACET_TYPES)

    def test_item_is_immutable(self) -> None:
        item = CatalogItem.from_raw({"id": "a", "name": "x"}, FACET_TYPES)

        with pytest.raises(ValidationError):
            item.name = "y"

    def test_dump_sorts_facet_values(self) -> None:
        item = CatalogItem.from_raw({"id": "a", "brands": "Puma, Adidas"}, FACET_TYPES)

        dumped = item.model_dump(mode="json")

        assert dumped["facets"] == {"brands": ["Adidas", "Puma"]}


class TestParseCatalog:
    def test_keeps_document_order(self, catalog_document) -> None:
        items = parse_catalog(catalog_document, FACET_TYPES)

        assert len(items) == 40
        assert [item.item_id for item in items[:3]] == ["sku-01", "sku-02", "sku-03"]
        assert items[4].facet_values("subcategories") == frozenset({"Botas"})

    def test_accepts_bare_list(self) -> None:
        items = parse_catalog([{"id": "a"}, {"id": "b"}], FACET_TYPES)

        assert [item.item_id for item in items] == ["a", "b"]

    def test_rejects_non_list(self) -> None:
        with pytest.raises(CatalogLoadError) as exc_info:
            parse_catalog({"items": "nope"}, FACET_TYPES)

        assert exc_info.value.error_code == "CATALOG_INVALID_FORMAT"

    def test_rejects_malformed_record(self) -> None:
        with pytest.raises(CatalogLoadError) as exc_info:
            parse_catalog([{"id": "a"}, {"name": "no id"}], FACET_TYPES)

        assert exc_info.value.details["position"] == 1

    def test_rejects_non_object_record(self) -> None:
        with pytest.raises(CatalogLoadError):
            parse_catalog(["a"], FACET_TYPES)
