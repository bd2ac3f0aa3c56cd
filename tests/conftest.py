"""
Pytest configuration and fixtures for catalog tests.
Provides environment defaults, catalog item factories and S3 mocking.
"""

import json
import os
from collections.abc import Callable, Iterable
from typing import Any

import boto3
import pytest
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "catalog-browse")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "CatalogBrowse")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")

from catalog.models.item import CatalogItem  # noqa: E402

TEST_BUCKET_NAME = "catalog-browse-test"
TEST_CATALOG_KEY = "catalog/catalog.json"

ItemFactory = Callable[..., CatalogItem]


@pytest.fixture
def make_item() -> ItemFactory:
    """
    Helper to build a catalog item with the given facet values.

    Usage:
        item = make_item("a", categories={"Shoes"}, brands={"Nike"})
    """

    def _make(item_id: str, **facets: Iterable[str]) -> CatalogItem:
        return CatalogItem(
            item_id=item_id,
            name=f"Item {item_id}",
            facets={facet_type: frozenset(values) for facet_type, values in facets.items()},
        )

    return _make


@pytest.fixture
def make_items(make_item) -> Callable[[int], list[CatalogItem]]:
    """Helper to build ``count`` items numbered from 1, all in category "All"."""

    def _make(count: int) -> list[CatalogItem]:
        return [make_item(f"{i}", categories={"All"}) for i in range(1, count + 1)]

    return _make


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    """
    Raw catalog document with 40 records.

    - categories: odd ids "Calzado", even ids "Ropa"
    - brands: ids 1-10 "Nike", the rest "Adidas, Puma"
    - subcategories: "Botas" on every fifth id, absent elsewhere
    """
    items: list[dict[str, Any]] = []
    for i in range(1, 41):
        record: dict[str, Any] = {
            "id": f"sku-{i:02d}",
            "name": f"Producto {i}",
            "price": 1000 + i,
            "categories": "Calzado" if i % 2 else "Ropa",
            "brands": "Nike" if i <= 10 else "Adidas, Puma",
        }
        if i % 5 == 0:
            record["subcategories"] = " Botas ,"
        items.append(record)

    return {"items": items}


@pytest.fixture
def catalog_file(tmp_path, catalog_document) -> Any:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_document), encoding="utf-8")
    return path


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client) -> str:
    """Create an empty S3 bucket for testing."""
    s3_client.create_bucket(Bucket=TEST_BUCKET_NAME)
    return TEST_BUCKET_NAME


@pytest.fixture
def s3_catalog(s3_client, s3_bucket, catalog_document) -> str:
    """Bucket holding ``catalog_document`` under the default key."""
    s3_client.put_object(
        Bucket=s3_bucket,
        Key=TEST_CATALOG_KEY,
        Body=json.dumps(catalog_document).encode("utf-8"),
        ContentType="application/json",
    )
    return s3_bucket
