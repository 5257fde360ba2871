"""Ownership checks for mutations on existing posts."""

from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import AuthorizationError, NotFoundError
from core.repositories.post_repository import PostRepository
from core.utils.constants import ERROR_CODE_UNAUTHENTICATED, POST_OWNER_FIELD

Item = dict[str, Any]

logger = Logger(UTC=True)


def require_identity(username: str | None) -> str:
    """Return the caller's username or reject an anonymous mutation.

    Raises:
        AuthorizationError: If no authenticated username was supplied
    """
    if not username or not username.strip():
        raise AuthorizationError(
            message="An authenticated user is required for this operation",
            error_code=ERROR_CODE_UNAUTHENTICATED,
        )
    return username


class OwnershipGate:
    """Reads the current post and checks that the caller owns it.

    The check is a plain read followed later by a separate write,
    so it is not atomic with the mutation it guards.
    """

    def __init__(self, store: PostRepository) -> None:
        self.store = store

    async def authorize_mutation(self, post_id: str, caller: str | None) -> Item:
        """Return the pre-mutation snapshot of a post owned by ``caller``.

        Raises:
            AuthorizationError: If the caller is anonymous or not the owner
            NotFoundError: If the post does not exist
            DynamoDBError: If the post cannot be read
        """
        username = require_identity(caller)

        post = await self.store.get_post(post_id=post_id)

        if post is None:
            logger.warning("Post not found for mutation", extra={"post_id": post_id})
            raise NotFoundError(
                message="Post not found",
                details={"post_id": post_id},
            )

        if post.get(POST_OWNER_FIELD) != username:
            logger.warning(
                "Caller does not own post",
                extra={"post_id": post_id, "caller": username},
            )
            raise AuthorizationError(
                message="Caller is not authorized to mutate this post",
                details={"post_id": post_id},
            )

        return post
