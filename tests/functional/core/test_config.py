"""Unit tests for CatalogSettings."""

from pathlib import Path

import pytest

from catalog.models.errors import ValidationError
from catalog.utils.config import CatalogSettings
from catalog.utils.constants import DEFAULT_CATALOG_FILE, DEFAULT_FACET_TYPES

CATALOG_ENV_VARS = (
    "CATALOG_FACET_TYPES",
    "CATALOG_PAGE_SIZE",
    "CATALOG_PRESELECT_FACET",
    "CATALOG_FILE_PATH",
    "CATALOG_S3_BUCKET_NAME",
    "CATALOG_S3_KEY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestCatalogSettings:
    def test_defaults(self) -> None:
        settings = CatalogSettings.from_env()

        assert settings.facet_types == DEFAULT_FACET_TYPES
        assert settings.page_size == 36
        assert settings.preselect_facet == "categories"
        assert settings.catalog_file == DEFAULT_CATALOG_FILE
        assert settings.uses_s3 is False

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CATALOG_FACET_TYPES", "brands, categories,brands,")
        monkeypatch.setenv("CATALOG_PAGE_SIZE", "12")
        monkeypatch.setenv("CATALOG_PRESELECT_FACET", "brands")
        monkeypatch.setenv("CATALOG_FILE_PATH", "/tmp/catalog.json")
        monkeypatch.setenv("CATALOG_S3_BUCKET_NAME", "catalog-bucket")

        settings = CatalogSettings.from_env()

        assert settings.facet_types == ("brands", "categories")
        assert settings.page_size == 12
        assert settings.preselect_facet == "brands"
        assert settings.catalog_file == Path("/tmp/catalog.json")
        assert settings.uses_s3 is True
        assert settings.s3_key == "catalog/catalog.json"

    def test_page_size_must_be_positive(self, monkeypatch) -> None:
        monkeypatch.setenv("CATALOG_PAGE_SIZE", "0")

        with pytest.raises(ValidationError) as exc_info:
            CatalogSettings.from_env()

        assert exc_info.value.error_code == "VALIDATION_FAILED"

    def test_preselect_facet_must_be_configured(self, monkeypatch) -> None:
        monkeypatch.setenv("CATALOG_FACET_TYPES", "brands")

        with pytest.raises(ValidationError):
            CatalogSettings.from_env()

    def test_preselection_can_be_disabled(self) -> None:
        settings = CatalogSettings(facet_types=("brands",), preselect_facet=None)

        assert settings.preselect_facet is None

    def test_facet_types_cannot_be_empty(self, monkeypatch) -> None:
        monkeypatch.setenv("CATALOG_FACET_TYPES", " , ")
        monkeypatch.setenv("CATALOG_PRESELECT_FACET", "brands")

        with pytest.raises(ValidationError):
            CatalogSettings.from_env()
