"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from pathlib import Path
from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"
ERROR_CODE_INVALID_PAGE = "INVALID_PAGE"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_CATALOG_NOT_FOUND = "CATALOG_NOT_FOUND"

# Catalog Source Errors
ERROR_CODE_CATALOG_LOAD_FAILED = "CATALOG_LOAD_FAILED"
ERROR_CODE_CATALOG_INVALID_FORMAT = "CATALOG_INVALID_FORMAT"


# ============================================================================
# Facets
# ============================================================================

DEFAULT_FACET_TYPES: Final[tuple[str, ...]] = ("categories", "subcategories", "brands")
DEFAULT_PRESELECT_FACET = "categories"
FACET_VALUE_SEPARATOR = ","

# Query parameter carrying the initial selection for the preselect facet
PRESELECT_QUERY_PARAM = "filter"
PAGE_QUERY_PARAM = "page"

# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE_SIZE = 36
MIN_PAGE_SIZE = 1
FIRST_PAGE = 1

NO_RESULTS_MESSAGE = "No se encontraron productos disponibles."
NEXT_PAGE_LABEL = "››"
LAST_PAGE_LABEL = "Último »"

# ============================================================================
# Catalog Document
# ============================================================================

CATALOG_ITEMS_KEY = "items"
ITEM_ID_KEYS: Final[tuple[str, ...]] = ("id", "item_id")
ITEM_NAME_KEY = "name"

DEFAULT_CATALOG_FILE: Final[Path] = (
    Path(__file__).resolve().parents[3] / "seed" / "data" / "catalog.json"
)
DEFAULT_CATALOG_S3_KEY = "catalog/catalog.json"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_CATALOG_S3_BUCKET_NAME = "CATALOG_S3_BUCKET_NAME"
ENV_CATALOG_S3_KEY = "CATALOG_S3_KEY"
ENV_CATALOG_FILE_PATH = "CATALOG_FILE_PATH"
ENV_CATALOG_FACET_TYPES = "CATALOG_FACET_TYPES"
ENV_CATALOG_PAGE_SIZE = "CATALOG_PAGE_SIZE"
ENV_CATALOG_PRESELECT_FACET = "CATALOG_PRESELECT_FACET"
