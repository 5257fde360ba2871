"""
Lambda handler serving the blog GraphQL API as an AppSync direct resolver.
"""

import asyncio
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.data_classes import AppSyncResolverEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.decorators import appsync_resolver_handler

from .router import build_router

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@appsync_resolver_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
@event_source(data_class=AppSyncResolverEvent)
def handler(event: AppSyncResolverEvent, context: LambdaContext) -> dict[str, Any]:
    """
    Resolve one GraphQL field for the blog API.

    Expected AppSync event structure:
    {
        "info": {"fieldName": "updatePost", "parentTypeName": "Mutation"},
        "arguments": {"post": {...}} | {"postId": "..."},
        "identity": {"username": "...", "sub": "..."} | null
    }

    Args:
        event: AppSync direct Lambda resolver event
        context: AWS Lambda execution context

    Returns:
        Result envelope with either ``data`` or a typed ``error``
    """
    identity = event.identity
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received resolver request",
        extra={
            "field_name": event.field_name,
            "type_name": event.type_name,
            "caller": getattr(identity, "username", None),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    router = build_router()

    return asyncio.run(
        router.dispatch(
            event.field_name,
            event.arguments,
            identity.raw_event if identity else None,
            request_id=request_id,
        )
    )
