from collections.abc import Callable
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


PARENT_TYPES = {
    "getPostById": "Query",
    "listPosts": "Query",
    "postsByUsername": "Query",
    "createPost": "Mutation",
    "updatePost": "Mutation",
    "deletePost": "Mutation",
}


@pytest.fixture
def appsync_event() -> Callable[..., dict[str, Any]]:
    """
    Build an AppSync direct Lambda resolver event.

    Usage:
        event = appsync_event("createPost", {"post": {...}}, username="alice")
    """

    def _event(
        field_name: str,
        arguments: dict[str, Any] | None = None,
        *,
        username: str | None = None,
    ) -> dict[str, Any]:
        identity = None
        if username is not None:
            identity = {
                "sub": f"sub-{username}",
                "username": username,
                "issuer": "https://cognito-idp.us-east-1.amazonaws.com/us-east-1_test",
                "claims": {"cognito:username": username},
                "sourceIp": ["127.0.0.1"],
                "defaultAuthStrategy": "ALLOW",
            }

        return {
            "arguments": arguments or {},
            "identity": identity,
            "source": None,
            "request": {"headers": {}},
            "prev": None,
            "info": {
                "fieldName": field_name,
                "parentTypeName": PARENT_TYPES.get(field_name, "Query"),
                "variables": {},
                "selectionSetList": ["id", "title", "content", "owner"],
            },
            "stash": {},
        }

    return _event
