"""
Centralized result envelope builder for AppSync Lambda resolvers.

Every resolver invocation returns one of:

    {"data": <result>, "error": None}
    {"data": None, "error": {"type", "message", "details", "timestamp"}}

The AppSync response mapping template raises ``$util.error`` when
``error`` is set and returns ``data`` otherwise.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core.models.errors import BlogServiceError
from core.utils.constants import ERROR_CODE_INTERNAL_ERROR

JsonDict = dict[str, Any]


class ResultBuilder:
    """Factory for resolver result envelopes."""

    @staticmethod
    def ok(data: Any) -> JsonDict:
        return {"data": data, "error": None}

    @staticmethod
    def error(
        *,
        error_type: str,
        message: str,
        details: JsonDict | None = None,
        request_id: str | None = None,
    ) -> JsonDict:
        error: JsonDict = {
            "type": error_type,
            "message": message,
            "details": details or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if request_id:
            error["request_id"] = request_id

        return {"data": None, "error": error}

    @staticmethod
    def from_exception(
        exc: BlogServiceError,
        *,
        request_id: str | None = None,
    ) -> JsonDict:
        return ResultBuilder.error(
            error_type=exc.error_code,
            message=exc.message,
            details=exc.details,
            request_id=request_id,
        )

    @staticmethod
    def internal_error(
        message: str = "Internal server error",
        *,
        request_id: str | None = None,
    ) -> JsonDict:
        return ResultBuilder.error(
            error_type=ERROR_CODE_INTERNAL_ERROR,
            message=message,
            request_id=request_id,
        )
