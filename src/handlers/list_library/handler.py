"""
Lambda handler serving the artist library view.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.constants import (
    METRIC_ITEMS_RETURNED,
    METRIC_LIBRARY_QUERIES,
    METRICS_NAMESPACE,
)
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder

from .models import LibraryViewRequest
from .service import LibraryViewService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Return one page of the library view as camelCase JSON.

    Query parameters (all optional, never rejected):
        artist, tag (repeatable, comma-separated), title,
        groupByPost, page, perPage

    The library root comes from GALLERY_ROOT; a missing root surfaces
    as a 500 through ``api_gateway_handler``.
    """
    request_id = getattr(context, "aws_request_id", None)
    request = LibraryViewRequest.model_validate(LibraryViewRequest.params_from_event(event))

    logger.info(
        "Library view requested",
        extra={
            "request_id": request_id,
            "artist": request.artist,
            "tags": request.tags,
            "page": request.page,
            "per_page": request.per_page,
        },
    )

    view = LibraryViewService().resolve_view(request)

    metrics.add_metric(name=METRIC_LIBRARY_QUERIES, unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=METRIC_ITEMS_RETURNED, unit=MetricUnit.Count, value=len(view.items))

    return ResponseBuilder.ok(view.model_dump(mode="json", by_alias=True))
