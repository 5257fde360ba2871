"""
Common decorators for AppSync Lambda resolver handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import BlogServiceError
from core.utils.response import ResultBuilder

logger = Logger(service="appsync-resolver", UTC=True)

JsonDict = dict[str, Any]


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def appsync_resolver_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for AppSync direct Lambda resolvers.

    Provides:
    - Centralized exception handling with result envelopes
    - Request ID tracking and structured logging

    Domain errors that escape the handler keep their error code;
    anything else becomes an INTERNAL_ERROR envelope.

    Example:
        @appsync_resolver_handler
        def handler(event, context):
            return ResultBuilder.ok({"id": "1"})
    """

    @wraps(func)
    def wrapper(event: Any, context: Any) -> JsonDict:
        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        except BlogServiceError as exc:
            _log_error(
                "Domain error escaped resolver",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResultBuilder.from_exception(exc, request_id=request_id)

        except Exception as exc:
            _log_error(
                "Unexpected error in resolver",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResultBuilder.internal_error(
                "We're experiencing technical difficulties. Please try again in a few moments.",
                request_id=request_id,
            )

    return wrapper
