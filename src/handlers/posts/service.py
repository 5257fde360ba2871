"""Business logic for blog posts.

This module implements the six post operations on top of a
PostRepository. Reads are public; update and delete are gated on
ownership and their writes are additionally conditioned on the owner
so a post removed between the check and the write is not recreated.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.auth.ownership import OwnershipGate, require_identity
from core.expressions.update_expression import build_update_expression
from core.models.errors import (
    ConditionFailedError,
    DuplicatePostError,
    DynamoDBError,
    NotFoundError,
)
from core.repositories.post_repository import PostRepository
from core.utils.constants import ERROR_CODE_POST_INVALID_FORMAT, POST_ID_FIELD
from core.utils.post_codec import ensure_id, from_store_item, to_store_item

PostData = dict[str, Any]

logger = Logger(UTC=True)


class PostService:
    """Application service responsible for blog posts.

    This service orchestrates:
    - Stamping the owner and id on new posts
    - Ownership checks before update and delete
    - Building update expressions from partial posts
    """

    def __init__(self, store: PostRepository) -> None:
        self.store = store
        self.gate = OwnershipGate(store)

    async def get_post(self, post_id: str) -> PostData | None:
        """Return a single post, or None if it does not exist.

        Raises:
            DynamoDBError: If the post cannot be read or is malformed
        """
        item = await self.store.get_post(post_id=post_id)

        if item is None:
            logger.info("Post not found", extra={"post_id": post_id})
            return None

        try:
            return from_store_item(item).model_dump()
        except PydanticValidationError as exc:
            logger.error("Stored post is malformed", extra={"post_id": post_id})
            raise DynamoDBError(
                message="Invalid post format",
                error_code=ERROR_CODE_POST_INVALID_FORMAT,
                details={"post_id": post_id},
            ) from exc

    async def list_posts(self) -> list[PostData]:
        """Return every post."""
        items = await self.store.scan_posts()
        return self._to_posts(items)

    async def posts_by_owner(self, owner: str) -> list[PostData]:
        """Return the posts whose owner is ``owner``."""
        items = await self.store.query_posts_by_owner(owner=owner)
        return self._to_posts(items)

    async def create_post(self, post: Mapping[str, Any], caller: str | None) -> PostData:
        """Store a new post owned by the caller.

        A missing id is generated; a client-supplied owner is overwritten.

        Raises:
            AuthorizationError: If there is no authenticated caller
            DuplicatePostError: If a post with the given id already exists
            DynamoDBError: If the write fails
        """
        owner = require_identity(caller)
        item = to_store_item(ensure_id(post), owner)

        try:
            await self.store.put_post(item=item)
        except ConditionFailedError as exc:
            raise DuplicatePostError(
                message="A post with this id already exists",
                details={"post_id": item[POST_ID_FIELD]},
            ) from exc

        logger.info(
            "Post created",
            extra={"post_id": item[POST_ID_FIELD], "owner": owner},
        )
        return from_store_item(item).model_dump()

    async def update_post(
        self,
        post_id: str,
        changes: Mapping[str, Any],
        caller: str | None,
    ) -> PostData:
        """Set the given attributes on a post owned by the caller.

        Returns the post id together with the attributes that were set.
        An update without attributes leaves the post untouched.

        Raises:
            ValidationError: If ``changes`` names a field that cannot be updated
            AuthorizationError: If the caller does not own the post
            NotFoundError: If the post does not exist
            DynamoDBError: If the update fails
        """
        expression = build_update_expression(changes)

        snapshot = await self.gate.authorize_mutation(post_id, caller)
        owner = snapshot["owner"]

        if expression.is_empty:
            logger.info("Empty update ignored", extra={"post_id": post_id})
            return {POST_ID_FIELD: post_id}

        try:
            attributes = await self.store.update_post(
                post_id=post_id,
                expression=expression,
                owner=owner,
            )
        except ConditionFailedError as exc:
            logger.warning("Post removed before update", extra={"post_id": post_id})
            raise NotFoundError(
                message="Post not found",
                details={"post_id": post_id},
            ) from exc

        return {POST_ID_FIELD: post_id, **attributes}

    async def delete_post(self, post_id: str, caller: str | None) -> str:
        """Delete a post owned by the caller and return its id.

        Raises:
            AuthorizationError: If the caller does not own the post
            NotFoundError: If the post does not exist
            DynamoDBError: If the deletion fails
        """
        snapshot = await self.gate.authorize_mutation(post_id, caller)

        try:
            await self.store.delete_post_if_owner(post_id=post_id, owner=snapshot["owner"])
        except ConditionFailedError as exc:
            logger.warning("Post removed before delete", extra={"post_id": post_id})
            raise NotFoundError(
                message="Post not found",
                details={"post_id": post_id},
            ) from exc

        return post_id

    @staticmethod
    def _to_posts(items: list[dict[str, Any]]) -> list[PostData]:
        posts: list[PostData] = []

        for item in items:
            try:
                posts.append(from_store_item(item).model_dump())
            except PydanticValidationError as exc:
                logger.warning(
                    "Skipping malformed post",
                    extra={"post_id": item.get(POST_ID_FIELD)},
                    exc_info=exc,
                )

        return posts
