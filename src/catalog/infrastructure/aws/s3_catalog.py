"""S3-backed implementation of CatalogRepository."""

from collections.abc import Sequence
import json

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from catalog.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from catalog.models.errors import CatalogLoadError, NotFoundError
from catalog.models.item import CatalogItem, parse_catalog
from catalog.repositories.catalog_repository import CatalogRepository
from catalog.utils.constants import (
    DEFAULT_CATALOG_S3_KEY,
    DEFAULT_FACET_TYPES,
    ERROR_CODE_CATALOG_INVALID_FORMAT,
    ERROR_CODE_CATALOG_NOT_FOUND,
)

logger = Logger(UTC=True)


class S3CatalogRepository(CatalogRepository):
    """Catalog loaded from a JSON document stored in Amazon S3."""

    def __init__(
        self,
        adapter: S3AdapterProtocol | None = None,
        *,
        key: str = DEFAULT_CATALOG_S3_KEY,
        facet_types: Sequence[str] = DEFAULT_FACET_TYPES,
    ) -> None:
        """Create the repository using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()
        self._key = key
        self._facet_types = tuple(facet_types)

    def load_items(self) -> tuple[CatalogItem, ...]:
        """Download and parse the catalog document."""
        logger.debug("Loading catalog from S3", extra={"key": self._key})

        try:
            response = self._s3.get_object(key=self._key)
            body: bytes = response["Body"].read()

        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in ("NoSuchKey", "NoSuchBucket"):
                raise NotFoundError(
                    message="Catalog not found",
                    error_code=ERROR_CODE_CATALOG_NOT_FOUND,
                    details={"key": self._key},
                ) from exc

            logger.error("S3 catalog download failed", extra={"key": self._key})
            raise CatalogLoadError(
                message="Unable to load catalog at this time",
                details={"key": self._key},
            ) from exc

        try:
            document = json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(
                message="Catalog document is not valid JSON",
                error_code=ERROR_CODE_CATALOG_INVALID_FORMAT,
                details={"key": self._key},
            ) from exc

        items = parse_catalog(document, self._facet_types)
        logger.info(
            "Catalog loaded from S3",
            extra={"key": self._key, "count": len(items)},
        )
        return items
