"""Thin adapter for interacting with Amazon S3."""

from collections.abc import Mapping
import os
from typing import Any, Protocol

import boto3

from catalog.utils.constants import (
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_CATALOG_S3_BUCKET_NAME,
)


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (AWS-facing only)."""

    def get_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Mapping[str, Any]: ...

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str,
    ) -> Any: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (repository-facing)."""

    def get_object(self, *, key: str) -> Mapping[str, Any]: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 S3 client
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, bucket_name: str | None = None) -> None:
        """Create S3 client from environment configuration."""
        bucket_name = bucket_name or os.getenv(ENV_CATALOG_S3_BUCKET_NAME)
        if not bucket_name:
            raise RuntimeError(f"{ENV_CATALOG_S3_BUCKET_NAME} environment variable is not set")

        self._bucket = bucket_name
        self._client: _Boto3S3Client = boto3.client(
            "s3",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION),
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def get_object(self, *, key: str) -> Mapping[str, Any]:
        """Fetch object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        response = self._client.get_object(
            Bucket=self._bucket,
            Key=key,
        )
        return response

    def put_object(self, *, key: str, body: bytes, content_type: str) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by the caller.
        """
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
        )
