"""Abstract contract for post persistence."""

from abc import ABC, abstractmethod
from typing import Any

from core.expressions.update_expression import UpdateExpression

Item = dict[str, Any]


class PostRepository(ABC):
    """Contract for storing and retrieving blog posts.

    Implementations could be DynamoDB, an in-memory fake, etc.
    Services depend on this interface, not the implementation.
    All operations are coroutines and surface the first failure;
    implementations never retry.
    """

    @abstractmethod
    async def get_post(self, *, post_id: str) -> Item | None:
        """Fetch a single post.

        Args:
            post_id: Unique post identifier

        Returns:
            Post item or None if not found

        Raises:
            DynamoDBError: If fetch fails
        """

    @abstractmethod
    async def put_post(self, *, item: Item, overwrite: bool = False) -> None:
        """Store a post.

        Unless ``overwrite`` is set, an existing post with the same id
        is left untouched and the write is rejected.

        Raises:
            ConditionFailedError: If the id is taken and ``overwrite`` is False
            DynamoDBError: If the write fails
        """

    @abstractmethod
    async def update_post(
        self,
        *,
        post_id: str,
        expression: UpdateExpression,
        owner: str,
    ) -> Item:
        """Apply ``expression`` to a post, provided it is still owned by ``owner``.

        Returns:
            The updated attributes with their new values

        Raises:
            ConditionFailedError: If the post is missing or owned by someone else
            DynamoDBError: If the update fails
        """

    @abstractmethod
    async def delete_post(self, *, post_id: str) -> None:
        """Delete a post unconditionally.

        Raises:
            DynamoDBError: If deletion fails
        """

    @abstractmethod
    async def delete_post_if_owner(self, *, post_id: str, owner: str) -> None:
        """Delete a post only if it is owned by ``owner``.

        Raises:
            ConditionFailedError: If the post is missing or owned by someone else
            DynamoDBError: If deletion fails
        """

    @abstractmethod
    async def scan_posts(self) -> list[Item]:
        """Return every stored post.

        Raises:
            DynamoDBError: If the scan fails
        """

    @abstractmethod
    async def query_posts_by_owner(self, *, owner: str) -> list[Item]:
        """Return the posts owned by ``owner`` using the owner index.

        Raises:
            DynamoDBError: If the query fails
        """
