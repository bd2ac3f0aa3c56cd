"""Local JSON file implementation of CatalogRepository."""

from collections.abc import Sequence
import json
from pathlib import Path

from aws_lambda_powertools import Logger

from catalog.models.errors import CatalogLoadError, NotFoundError
from catalog.models.item import CatalogItem, parse_catalog
from catalog.repositories.catalog_repository import CatalogRepository
from catalog.utils.constants import (
    DEFAULT_CATALOG_FILE,
    DEFAULT_FACET_TYPES,
    ERROR_CODE_CATALOG_INVALID_FORMAT,
    ERROR_CODE_CATALOG_NOT_FOUND,
)

logger = Logger(UTC=True)


class FileCatalogRepository(CatalogRepository):
    """Catalog loaded from a JSON document on local disk."""

    def __init__(
        self,
        path: Path | str = DEFAULT_CATALOG_FILE,
        *,
        facet_types: Sequence[str] = DEFAULT_FACET_TYPES,
    ) -> None:
        self._path = Path(path)
        self._facet_types = tuple(facet_types)

    def load_items(self) -> tuple[CatalogItem, ...]:
        if not self._path.is_file():
            raise NotFoundError(
                message="Catalog not found",
                error_code=ERROR_CODE_CATALOG_NOT_FOUND,
                details={"path": str(self._path)},
            )

        try:
            with self._path.open(encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(
                message="Catalog document is not valid JSON",
                error_code=ERROR_CODE_CATALOG_INVALID_FORMAT,
                details={"path": str(self._path)},
            ) from exc

        items = parse_catalog(document, self._facet_types)
        logger.info(
            "Catalog loaded from file",
            extra={"path": str(self._path), "count": len(items)},
        )
        return items
