"""
API Gateway proxy responses for the gallery service.

Every response is JSON, carries the CORS headers the browser UI needs,
and is marked uncacheable because library views reflect the
filesystem at the moment of the request.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    CACHE_CONTROL,
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    EXPOSE_HEADERS,
)
from core.utils.time import utc_now_iso

JsonDict = dict[str, Any]


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    BASE_HEADERS: dict[str, str] = {
        "Content-Type": DEFAULT_CONTENT_TYPE,
        "Cache-Control": CACHE_CONTROL,
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }

    @classmethod
    def headers(cls, cors_origin: str | None = None) -> dict[str, str]:
        """Return the response headers, overriding the allowed origin if given."""
        headers = dict(cls.BASE_HEADERS)
        if cors_origin:
            headers["Access-Control-Allow-Origin"] = cors_origin
        return headers

    @classmethod
    def json(
        cls,
        status: HTTPStatus,
        payload: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """Serialize ``payload`` as the response body, tagging the request id."""
        body = dict(payload)
        if request_id:
            body["request_id"] = request_id

        return {
            "statusCode": status.value,
            "headers": cls.headers(cors_origin),
            "body": json.dumps(body),
        }

    @classmethod
    def ok(
        cls,
        body: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.json(HTTPStatus.OK, body, request_id=request_id, cors_origin=cors_origin)

    @classmethod
    def no_content(cls, *, cors_origin: str | None = None) -> JsonDict:
        """Empty 204 used for CORS preflight."""
        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": cls.headers(cors_origin),
            "body": "",
        }

    @classmethod
    def error(
        cls,
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: JsonDict | list[Any] | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """
        Build an error response.

        Body shape:
            {"error": <code>, "message": ..., "timestamp": ..., "details": ...}

        ``error`` defaults to the HTTP status name (for example
        ``"GATEWAY_TIMEOUT"``); ``details`` is omitted when empty.
        """
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return cls.json(status, payload, request_id=request_id, cors_origin=cors_origin)

