from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from handlers.browse_catalog.service import load_catalog


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def catalog_env(monkeypatch, catalog_file):
    """Point the service at the 40-item test catalog, with a fresh cache."""
    for name in (
        "CATALOG_S3_BUCKET_NAME",
        "CATALOG_S3_KEY",
        "CATALOG_FACET_TYPES",
        "CATALOG_PRESELECT_FACET",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CATALOG_FILE_PATH", str(catalog_file))
    monkeypatch.setenv("CATALOG_PAGE_SIZE", "36")

    load_catalog.cache_clear()
    yield catalog_file
    load_catalog.cache_clear()


@pytest.fixture
def browse_event() -> Callable[..., dict[str, Any]]:
    """
    Helper to build a browse request event.

    Usage:
        event = browse_event(filter="calzado", page="2")
    """

    def _event(**params: str) -> dict[str, Any]:
        return {
            "httpMethod": "GET",
            "path": "/v1/catalog",
            "queryStringParameters": params or None,
            "headers": {"x-api-key": "test-api-key"},
        }

    return _event

