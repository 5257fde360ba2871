"""Custom exception classes for the blog post service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_CONDITION_FAILED,
    ERROR_CODE_DYNAMODB,
    ERROR_CODE_POST_ALREADY_EXISTS,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_UNAUTHORIZED,
    ERROR_CODE_UNSUPPORTED_OPERATION,
    ERROR_CODE_VALIDATION_FAILED,
)


class BlogServiceError(Exception):
    """
    Base exception for all blog service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(BlogServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(BlogServiceError):
    """Raised when a referenced post does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class AuthorizationError(BlogServiceError):
    """Raised when the caller may not mutate the targeted post."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DynamoDBError(BlogServiceError):
    """Raised when a DynamoDB operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DYNAMODB,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ConditionFailedError(BlogServiceError):
    """Raised when a conditional write is rejected by DynamoDB."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONDITION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnsupportedOperationError(BlogServiceError):
    """Raised when the router receives an unknown operation name."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_OPERATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DuplicatePostError(BlogServiceError):
    """Raised when a post with the requested id already exists."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_POST_ALREADY_EXISTS,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
