"""
Handler decorator turning gallery exceptions into API Gateway responses.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any, NamedTuple

from aws_lambda_powertools import Logger

from core.models.errors import ConfigurationError, GalleryServiceError
from core.utils.constants import ERROR_CODE_INTERNAL_ERROR
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]


class ErrorRule(NamedTuple):
    """How one exception family is logged and reported."""

    exc_type: type[BaseException]
    status: HTTPStatus
    log_message: str
    client_message: str | None
    log_level: str = "exception"


# Checked in order; subclasses must precede their bases.
ERROR_RULES: tuple[ErrorRule, ...] = (
    ErrorRule(
        ConfigurationError,
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Gallery service misconfigured",
        "The gallery service is not configured correctly.",
    ),
    ErrorRule(
        GalleryServiceError,
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Gallery service error",
        None,
    ),
    ErrorRule(
        PermissionError,
        HTTPStatus.FORBIDDEN,
        "Library access denied",
        "The gallery library cannot be read.",
        log_level="warning",
    ),
    ErrorRule(
        TimeoutError,
        HTTPStatus.GATEWAY_TIMEOUT,
        "Library scan timed out",
        "The library took too long to scan. Please try again.",
    ),
)

FALLBACK_RULE = ErrorRule(
    Exception,
    HTTPStatus.INTERNAL_SERVER_ERROR,
    "Unexpected error in handler",
    "We're experiencing technical difficulties. Please try again in a few moments.",
)


def _match_rule(exc: Exception) -> ErrorRule:
    for rule in ERROR_RULES:
        if isinstance(exc, rule.exc_type):
            return rule
    return FALLBACK_RULE


def _error_response(
    exc: Exception,
    *,
    handler_name: str,
    request_id: str | None,
    cors_origin: str | None,
) -> JsonDict:
    rule = _match_rule(exc)

    log_extra: JsonDict = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
        "status": rule.status.value,
    }
    if rule.log_level == "exception":
        logger.exception(rule.log_message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(rule.log_message, extra=log_extra)

    if isinstance(exc, GalleryServiceError):
        error_code: str | None = exc.error_code
        message = rule.client_message or exc.message
    else:
        error_code = ERROR_CODE_INTERNAL_ERROR if rule is FALLBACK_RULE else None
        message = rule.client_message or ""

    return ResponseBuilder.error(
        status=rule.status,
        message=message,
        error=error_code,
        request_id=request_id,
        cors_origin=cors_origin,
    )


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Wrap a Lambda handler for API Gateway proxy integration.

    OPTIONS requests are answered with an empty 204 before the handler
    runs. Any exception escaping the handler is logged with the request
    id and converted to a JSON error response according to
    ``ERROR_RULES``; internal details never reach the client except for
    ``GalleryServiceError`` messages, which are written for callers.

    Example:
        @api_gateway_handler
        def lambda_handler(event, context):
            return ResponseBuilder.ok({"items": []})
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.no_content(cors_origin=cors_origin)

        try:
            return func(event, context)
        except Exception as exc:
            return _error_response(
                exc,
                handler_name=func.__name__,
                request_id=getattr(context, "aws_request_id", None),
                cors_origin=cors_origin,
            )

    return wrapper
