"""Environment-driven configuration for the catalog service."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from catalog.models.errors import ValidationError
from catalog.utils.constants import (
    DEFAULT_CATALOG_FILE,
    DEFAULT_CATALOG_S3_KEY,
    DEFAULT_FACET_TYPES,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PRESELECT_FACET,
    ENV_CATALOG_FACET_TYPES,
    ENV_CATALOG_FILE_PATH,
    ENV_CATALOG_PAGE_SIZE,
    ENV_CATALOG_PRESELECT_FACET,
    ENV_CATALOG_S3_BUCKET_NAME,
    ENV_CATALOG_S3_KEY,
    FACET_VALUE_SEPARATOR,
    MIN_PAGE_SIZE,
)


class CatalogSettings(BaseModel):
    """Runtime settings for loading and browsing the catalog."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    facet_types: tuple[str, ...] = Field(default=DEFAULT_FACET_TYPES, min_length=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=MIN_PAGE_SIZE)
    preselect_facet: str | None = Field(default=DEFAULT_PRESELECT_FACET)

    catalog_file: Path = Field(default=DEFAULT_CATALOG_FILE)
    s3_bucket: str | None = None
    s3_key: str = Field(default=DEFAULT_CATALOG_S3_KEY, min_length=1)

    @field_validator("facet_types", mode="before")
    @classmethod
    def split_facet_types(cls, value: object) -> object:
        """Accept a comma-separated string and drop blank or repeated names."""
        if isinstance(value, str):
            value = value.split(FACET_VALUE_SEPARATOR)

        if isinstance(value, (list, tuple)):
            names: list[str] = []
            for name in value:
                name = str(name).strip()
                if name and name not in names:
                    names.append(name)
            return tuple(names)

        return value

    @model_validator(mode="after")
    def validate_preselect_facet(self) -> "CatalogSettings":
        """The preselect facet, when set, must be one of the facet types."""
        if self.preselect_facet and self.preselect_facet not in self.facet_types:
            raise ValueError(
                f"preselect_facet '{self.preselect_facet}' is not a configured facet type"
            )
        return self

    @property
    def uses_s3(self) -> bool:
        return bool(self.s3_bucket)

    @classmethod
    def from_env(cls) -> "CatalogSettings":
        """Build settings from environment variables.

        Unset variables fall back to the model defaults.

        Raises:
            ValidationError: If any variable holds an invalid value
        """
        env_map = {
            "facet_types": ENV_CATALOG_FACET_TYPES,
            "page_size": ENV_CATALOG_PAGE_SIZE,
            "preselect_facet": ENV_CATALOG_PRESELECT_FACET,
            "catalog_file": ENV_CATALOG_FILE_PATH,
            "s3_bucket": ENV_CATALOG_S3_BUCKET_NAME,
            "s3_key": ENV_CATALOG_S3_KEY,
        }
        values = {
            field: os.environ[env_name]
            for field, env_name in env_map.items()
            if os.environ.get(env_name)
        }

        try:
            return cls(**values)
        except PydanticValidationError as exc:
            raise ValidationError(
                message="Invalid catalog configuration",
                details={"errors": [err["msg"] for err in exc.errors()]},
            ) from exc
