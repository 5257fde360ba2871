"""DynamoDB-backed implementation of PostRepository."""

import asyncio
import os
from collections.abc import Callable
from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from core.expressions.update_expression import UpdateExpression
from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.errors import ConditionFailedError, DynamoDBError
from core.repositories.post_repository import PostRepository
from core.utils.constants import (
    DEFAULT_POSTS_BY_OWNER_INDEX,
    ENV_POSTS_BY_OWNER_INDEX,
    ERROR_CODE_POST_CREATE_FAILED,
    ERROR_CODE_POST_DELETE_FAILED,
    ERROR_CODE_POST_FETCH_FAILED,
    ERROR_CODE_POST_INVALID_FORMAT,
    ERROR_CODE_POST_LIST_FAILED,
    ERROR_CODE_POST_UPDATE_FAILED,
    POST_ID_FIELD,
    POST_OWNER_FIELD,
)

Item = dict[str, Any]

logger = Logger(UTC=True)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"
OWNER_CONDITION = "#owner = :owner"
NEW_POST_CONDITION = f"attribute_not_exists({POST_ID_FIELD})"


def _is_condition_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED


class DynamoDBPostStore(PostRepository):
    """DynamoDB-backed post storage with error handling.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics. Blocking
    boto3 calls run in a worker thread so callers only
    suspend at store-call boundaries.
    """

    def __init__(
        self,
        adapter: DynamoDBAdapterProtocol | None = None,
        *,
        index_name: str | None = None,
    ) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()
        self._index_name = (
            index_name or os.getenv(ENV_POSTS_BY_OWNER_INDEX) or DEFAULT_POSTS_BY_OWNER_INDEX
        )

    async def _call(
        self,
        func: Callable[..., Item],
        /,
        *,
        operation: str,
        message: str,
        error_code: str,
        details: dict[str, Any],
        **kwargs: Any,
    ) -> Item:
        """Run one adapter call off the event loop and translate its failures."""
        try:
            return await asyncio.to_thread(func, **kwargs)

        except ClientError as exc:
            if _is_condition_failure(exc):
                logger.info(f"DynamoDB {operation} condition failed", extra=details)
                raise ConditionFailedError(
                    message="Conditional write was rejected",
                    details=details,
                ) from exc

            logger.error(
                f"DynamoDB {operation} failed",
                extra={**details, "aws_error_code": exc.response.get("Error", {}).get("Code")},
            )
            raise DynamoDBError(
                message=message,
                error_code=error_code,
                details=details,
            ) from exc

        except Exception as exc:
            logger.exception(f"Unexpected error during DynamoDB {operation}")
            raise DynamoDBError(
                message=message,
                error_code=error_code,
                details=details,
            ) from exc

    async def get_post(self, *, post_id: str) -> Item | None:
        logger.debug("Fetching post", extra={"post_id": post_id})

        response = await self._call(
            self._db.get_item,
            operation="get_item",
            message="Unable to retrieve post",
            error_code=ERROR_CODE_POST_FETCH_FAILED,
            details={"post_id": post_id},
            key={POST_ID_FIELD: post_id},
        )

        item = response.get("Item")
        if item is None:
            return None

        if not isinstance(item, dict):
            raise DynamoDBError(
                message="Invalid post format",
                error_code=ERROR_CODE_POST_INVALID_FORMAT,
                details={"post_id": post_id},
            )

        return item

    async def put_post(self, *, item: Item, overwrite: bool = False) -> None:
        post_id = item.get(POST_ID_FIELD)
        owner = item.get(POST_OWNER_FIELD)

        if not post_id or not isinstance(post_id, str):
            raise ValueError("post must contain non-empty 'id' (string)")

        if not owner or not isinstance(owner, str):
            raise ValueError("post must contain non-empty 'owner' (string)")

        logger.debug("Storing post", extra={"post_id": post_id, "owner": owner})

        await self._call(
            self._db.put_item,
            operation="put_item",
            message="Unable to save post at this time",
            error_code=ERROR_CODE_POST_CREATE_FAILED,
            details={"post_id": post_id},
            item=item,
            condition_expression=None if overwrite else NEW_POST_CONDITION,
        )

        logger.info("Post stored", extra={"post_id": post_id, "owner": owner})

    async def update_post(
        self,
        *,
        post_id: str,
        expression: UpdateExpression,
        owner: str,
    ) -> Item:
        logger.debug(
            "Updating post",
            extra={"post_id": post_id, "fields": expression.fields},
        )

        response = await self._call(
            self._db.update_item,
            operation="update_item",
            message="Unable to update post",
            error_code=ERROR_CODE_POST_UPDATE_FAILED,
            details={"post_id": post_id},
            key={POST_ID_FIELD: post_id},
            UpdateExpression=expression.update_expression,
            ConditionExpression=OWNER_CONDITION,
            ExpressionAttributeNames={"#owner": POST_OWNER_FIELD, **expression.attribute_names},
            ExpressionAttributeValues={":owner": owner, **expression.attribute_values},
            ReturnValues="UPDATED_NEW",
        )

        logger.info("Post updated", extra={"post_id": post_id})

        attributes: Item = response.get("Attributes") or {}
        return attributes

    async def delete_post(self, *, post_id: str) -> None:
        logger.debug("Deleting post", extra={"post_id": post_id})

        await self._call(
            self._db.delete_item,
            operation="delete_item",
            message="Unable to delete post",
            error_code=ERROR_CODE_POST_DELETE_FAILED,
            details={"post_id": post_id},
            key={POST_ID_FIELD: post_id},
        )

        logger.info("Post deleted", extra={"post_id": post_id})

    async def delete_post_if_owner(self, *, post_id: str, owner: str) -> None:
        logger.debug("Deleting post for owner", extra={"post_id": post_id, "owner": owner})

        await self._call(
            self._db.delete_item,
            operation="delete_item",
            message="Unable to delete post",
            error_code=ERROR_CODE_POST_DELETE_FAILED,
            details={"post_id": post_id},
            key={POST_ID_FIELD: post_id},
            ConditionExpression=OWNER_CONDITION,
            ExpressionAttributeNames={"#owner": POST_OWNER_FIELD},
            ExpressionAttributeValues={":owner": owner},
        )

        logger.info("Post deleted", extra={"post_id": post_id, "owner": owner})

    async def scan_posts(self) -> list[Item]:
        logger.debug("Scanning posts")

        items = await self._collect_pages(
            self._db.scan,
            operation="scan",
            details={},
        )

        logger.info("Posts listed", extra={"count": len(items)})
        return items

    async def query_posts_by_owner(self, *, owner: str) -> list[Item]:
        logger.debug("Querying posts by owner", extra={"owner": owner})

        items = await self._collect_pages(
            self._db.query,
            operation="query",
            details={"owner": owner},
            IndexName=self._index_name,
            KeyConditionExpression=Key(POST_OWNER_FIELD).eq(owner),
        )

        logger.info("Owner posts listed", extra={"owner": owner, "count": len(items)})
        return items

    async def _collect_pages(
        self,
        func: Callable[..., Item],
        *,
        operation: str,
        details: dict[str, Any],
        **kwargs: Any,
    ) -> list[Item]:
        """Follow ``LastEvaluatedKey`` until the scan or query is exhausted."""
        items: list[Item] = []
        last_evaluated_key: Item | None = None

        while True:
            if last_evaluated_key:
                kwargs["ExclusiveStartKey"] = last_evaluated_key

            response = await self._call(
                func,
                operation=operation,
                message="Unable to list posts",
                error_code=ERROR_CODE_POST_LIST_FAILED,
                details=details,
                **kwargs,
            )

            page_items = response.get("Items", [])
            if not isinstance(page_items, list):
                raise DynamoDBError(
                    message=f"Invalid {operation} response from DynamoDB",
                    error_code=ERROR_CODE_POST_LIST_FAILED,
                    details=details,
                )

            items.extend(page_items)

            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                break

        return items
