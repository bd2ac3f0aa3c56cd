"""
Pydantic models for browse catalog request and response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.models.facets import FacetList
from catalog.models.pagination import PaginationInfo
from catalog.utils.constants import FACET_VALUE_SEPARATOR, FIRST_PAGE


class BrowseCatalogRequest(BaseModel):
    """
    Validation model for the browse catalog API.

    - filter: initial value for the preselect facet (case-insensitive)
    - selections: facet type → values to select
    - page: 1-based page of the matching items to open
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    filter: str | None = Field(
        None,
        description="Preselected value of the preselect facet",
    )

    selections: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Selected values per facet type",
    )

    page: int = Field(
        default=FIRST_PAGE,
        ge=FIRST_PAGE,
        description="Page to open (1-based)",
    )

    @field_validator("filter")
    @classmethod
    def blank_filter_is_none(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("selections", mode="before")
    @classmethod
    def split_selections(cls, value: Any) -> Any:
        """Split comma-separated values and drop blanks and repeats.

        Input:  {"brands": "Nike, Adidas,,Nike"}
                {"brands": ["Nike,Adidas", "Nike"]}
        Output: {"brands": ["Nike", "Adidas"]}
        """
        if not isinstance(value, dict):
            return value

        selections: dict[str, list[str]] = {}
        for facet_type, raw in value.items():
            raw_entries = raw if isinstance(raw, list) else [raw]
            entries = (
                piece
                for raw_entry in raw_entries
                for piece in str(raw_entry).split(FACET_VALUE_SEPARATOR)
            )
            values: list[str] = []
            for entry in entries:
                entry = str(entry).strip()
                if entry and entry not in values:
                    values.append(entry)
            if values:
                selections[facet_type] = values

        return selections


class BrowseCatalogResponse(BaseModel):
    """Page of catalog items with facet controls and pagination."""

    items: list[dict[str, Any]] = Field(..., description="Items on the current page")
    total_count: int = Field(..., description="Number of items matching the filters")
    returned_count: int = Field(..., description="Number of items on this page")
    pagination: PaginationInfo = Field(..., description="Pagination metadata and controls")
    facets: list[FacetList] = Field(..., description="Filter controls per facet type")
    active_filters: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Currently selected values per facet type",
    )
    preselected: dict[str, str] = Field(
        default_factory=dict,
        description="Value preselected through the filter parameter",
    )
