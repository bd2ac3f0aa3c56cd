"""
Lambda handler responsible for browsing the catalog with facet filters and pagination.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from catalog.utils.constants import PAGE_QUERY_PARAM, PRESELECT_QUERY_PARAM
from catalog.utils.decorators import api_gateway_handler
from catalog.utils.response import ResponseBuilder
from catalog.utils.validators import validate_request

from .models import BrowseCatalogRequest, BrowseCatalogResponse
from .service import BrowseService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to browse the catalog.

    Supports:
    - Preselecting a category through the ``filter`` query parameter
    - One comma-separated query parameter per facet type (OR within a
      type, AND across types)
    - Fixed-size pages through the ``page`` query parameter
    """
    request_id = getattr(context, "aws_request_id", None)
    params = event.get("queryStringParameters") or {}
    multi_params = event.get("multiValueQueryStringParameters") or {}

    logger.info(
        "Received browse catalog request",
        extra={"query_params": params, "request_id": request_id},
    )

    service = BrowseService()

    selections = {
        facet_type: multi_params.get(facet_type) or params.get(facet_type, "")
        for facet_type in service.settings.facet_types
        if facet_type in params or facet_type in multi_params
    }

    is_valid, result = validate_request(
        BrowseCatalogRequest,
        {
            "filter": params.get(PRESELECT_QUERY_PARAM),
            "page": params.get(PAGE_QUERY_PARAM) or 1,
            "selections": selections,
        },
        request_id=request_id,
    )
    if not is_valid:
        return result

    request: BrowseCatalogRequest = result

    payload = service.browse(
        preselect=request.filter,
        selections=request.selections,
        page=request.page,
    )

    metrics.add_metric(name="CatalogPageViews", unit=MetricUnit.Count, value=1)

    response = BrowseCatalogResponse(**payload)
    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
