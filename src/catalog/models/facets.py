"""Facet listing models."""

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr


class FacetValueCount(BaseModel):
    """A distinct facet value with the number of items carrying it."""

    value: StrictStr = Field(..., description="Facet value as it appears on items")
    count: StrictInt = Field(..., ge=0, description="Items in the catalog with this value")


class FacetOption(FacetValueCount):
    """A facet value as rendered in a filter list."""

    active: StrictBool = Field(False, description="Whether the value is currently selected")


class FacetList(BaseModel):
    """Filter controls for one facet type."""

    facet_type: StrictStr
    options: list[FacetOption] = Field(default_factory=list)
