"""
Dispatch of AppSync resolver operations to the post service.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_posts import DynamoDBPostStore
from core.models.errors import BlogServiceError, UnsupportedOperationError, ValidationError
from core.repositories.post_repository import PostRepository
from core.utils.constants import (
    OPERATION_CREATE_POST,
    OPERATION_DELETE_POST,
    OPERATION_GET_POST_BY_ID,
    OPERATION_LIST_POSTS,
    OPERATION_POSTS_BY_USERNAME,
    OPERATION_UPDATE_POST,
)
from core.utils.response import ResultBuilder
from core.utils.validators import validate_request

from .models import (
    CallerIdentity,
    CreatePostRequest,
    DeletePostRequest,
    GetPostRequest,
    PostsByUsernameRequest,
    UpdatePostRequest,
)
from .service import PostService

Arguments = Mapping[str, Any]
Operation = Callable[[Arguments, str | None], Awaitable[Any]]

logger = Logger(UTC=True)


class PostRouter:
    """Routes one resolver call to the matching post operation.

    The router holds no state between calls. Every outcome is returned
    as a result envelope: domain errors (not found, not the owner, store
    failures, unknown operations) become typed error results instead of
    exceptions.
    """

    def __init__(self, service: PostService) -> None:
        self.service = service
        self._operations: dict[str, Operation] = {
            OPERATION_GET_POST_BY_ID: self._get_post_by_id,
            OPERATION_LIST_POSTS: self._list_posts,
            OPERATION_POSTS_BY_USERNAME: self._posts_by_username,
            OPERATION_CREATE_POST: self._create_post,
            OPERATION_UPDATE_POST: self._update_post,
            OPERATION_DELETE_POST: self._delete_post,
        }

    async def dispatch(
        self,
        operation_name: str | None,
        arguments: Arguments | None = None,
        identity: Mapping[str, Any] | None = None,
        *,
        request_id: str | None = None,
    ) -> dict[str, Any]:
        """Run ``operation_name`` and wrap its outcome in a result envelope."""
        log_extra = {"operation": operation_name, "request_id": request_id}

        try:
            operation = self._operations.get(operation_name or "")
            if operation is None:
                raise UnsupportedOperationError(
                    message=f"Unsupported operation: {operation_name}",
                    details={"operation": operation_name},
                )

            caller = validate_request(CallerIdentity, dict(identity or {})).username
            data = await operation(arguments or {}, caller)

        except BlogServiceError as exc:
            logger.warning(
                "Operation failed",
                extra={**log_extra, "error_code": exc.error_code, "details": exc.details},
            )
            return ResultBuilder.from_exception(exc, request_id=request_id)

        logger.info("Operation completed", extra=log_extra)
        return ResultBuilder.ok(data)

    async def _get_post_by_id(self, arguments: Arguments, caller: str | None) -> Any:
        request = validate_request(GetPostRequest, dict(arguments))
        return await self.service.get_post(request.post_id)

    async def _list_posts(self, arguments: Arguments, caller: str | None) -> Any:
        return await self.service.list_posts()

    async def _posts_by_username(self, arguments: Arguments, caller: str | None) -> Any:
        request = validate_request(PostsByUsernameRequest, dict(arguments))
        owner = request.username or caller

        if not owner:
            raise ValidationError(
                message="A username is required when the caller is anonymous",
                details={"errors": [{"field": "username", "message": "This field is required"}]},
            )

        return await self.service.posts_by_owner(owner)

    async def _create_post(self, arguments: Arguments, caller: str | None) -> Any:
        request = validate_request(CreatePostRequest, dict(arguments))
        return await self.service.create_post(
            request.post.model_dump(exclude_none=True),
            caller,
        )

    async def _update_post(self, arguments: Arguments, caller: str | None) -> Any:
        request = validate_request(UpdatePostRequest, dict(arguments))
        changes = request.post.ordered_changes(arguments.get("post") or {})
        return await self.service.update_post(request.post.id, changes, caller)

    async def _delete_post(self, arguments: Arguments, caller: str | None) -> Any:
        request = validate_request(DeletePostRequest, dict(arguments))
        return await self.service.delete_post(request.post_id, caller)


def build_router(store: PostRepository | None = None) -> PostRouter:
    """Create a router backed by ``store``, or by the DynamoDB table from the environment."""
    return PostRouter(PostService(store or DynamoDBPostStore()))
