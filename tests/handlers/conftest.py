from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest


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
def gallery_env(monkeypatch, populated_library: Path) -> Path:
    """Point the service configuration at the populated library."""
    monkeypatch.setenv("GALLERY_ROOT", str(populated_library))
    monkeypatch.delenv("GALLERY_MEDIA_PREFIX", raising=False)
    return populated_library


@pytest.fixture
def list_library_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/library",
        "queryStringParameters": {
            "artist": "all",
            "groupByPost": "1",
            "perPage": "20",
        },
        "multiValueQueryStringParameters": None,
        "headers": {"x-api-key": "test-api-key"},
    }
