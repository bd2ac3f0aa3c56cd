"""
Business logic for browsing the catalog.
"""

from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any

from aws_lambda_powertools import Logger

from catalog.display.surface import PayloadDisplaySurface
from catalog.filters.catalog_browser import CatalogBrowser
from catalog.infrastructure.adapters.s3_adapter import S3Adapter
from catalog.infrastructure.aws.s3_catalog import S3CatalogRepository
from catalog.infrastructure.local.file_catalog import FileCatalogRepository
from catalog.models.errors import FilterError
from catalog.models.item import CatalogItem
from catalog.repositories.catalog_repository import CatalogRepository
from catalog.utils.config import CatalogSettings
from catalog.utils.constants import FIRST_PAGE

Payload = dict[str, Any]

logger = Logger(UTC=True)


def build_repository(settings: CatalogSettings) -> CatalogRepository:
    """Catalog source selected by configuration: S3 when a bucket is set."""
    if settings.uses_s3:
        return S3CatalogRepository(
            S3Adapter(settings.s3_bucket),
            key=settings.s3_key,
            facet_types=settings.facet_types,
        )

    return FileCatalogRepository(settings.catalog_file, facet_types=settings.facet_types)


@lru_cache(maxsize=1)
def load_catalog() -> tuple[CatalogSettings, tuple[CatalogItem, ...]]:
    """Settings and item collection, loaded once per container."""
    settings = CatalogSettings.from_env()
    items = build_repository(settings).load_items()
    return settings, items


class BrowseService:
    """Application service answering one browse request.

    This service coordinates:
    - Replaying the requested facet selections on a fresh browser
    - Opening the requested page of the matching items
    - Collecting the rendered page, facets and pagination
    """

    def __init__(
        self,
        items: Sequence[CatalogItem] | None = None,
        settings: CatalogSettings | None = None,
    ) -> None:
        """Use the given catalog, or the cached one from configuration."""
        if items is None or settings is None:
            loaded_settings, loaded_items = load_catalog()
            settings = settings or loaded_settings
            items = loaded_items if items is None else items

        self.settings = settings
        self.items = tuple(items)

    def browse(
        self,
        *,
        preselect: str | None,
        selections: Mapping[str, Sequence[str]],
        page: int = FIRST_PAGE,
    ) -> Payload:
        """Render the requested view of the catalog."""

        unknown = sorted(set(selections) - set(self.settings.facet_types))
        if unknown:
            raise FilterError(
                message=f"Unknown facet type '{unknown[0]}'",
                details={"facet_types": unknown},
            )

        display = PayloadDisplaySurface()
        browser = CatalogBrowser(
            self.items,
            facet_types=self.settings.facet_types,
            display=display,
            page_size=self.settings.page_size,
            preselect_facet=self.settings.preselect_facet,
        )

        # Step 1: Preselection and unfiltered first render
        browser.start(preselect)

        # Step 2: Replay every selected value as a checkbox toggle
        for facet_type, values in selections.items():
            for value in values:
                browser.toggle(facet_type, value, True)

        # Step 3: Navigate only when a page other than the first is requested
        if page != FIRST_PAGE:
            browser.open_page(page)

        payload = display.to_payload(browser.engine.selections)

        logger.info(
            "Catalog page rendered",
            extra={
                "page": browser.pagination.current_page,
                "page_count": browser.pagination.page_count,
                "matching": browser.pagination.total_count,
            },
        )

        return payload
