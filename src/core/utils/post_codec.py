"""Mapping between post payloads and DynamoDB items."""

import uuid
from collections.abc import Mapping
from typing import Any

from core.models.post import Post
from core.utils.constants import POST_ID_FIELD, POST_OWNER_FIELD

Item = dict[str, Any]


def generate_post_id() -> str:
    """Generate a unique post identifier."""
    return str(uuid.uuid4())


def ensure_id(post: Mapping[str, Any]) -> Item:
    """Return a copy of ``post`` that carries an identifier.

    Posts that already have a non-empty ``id`` are returned unchanged.
    """
    prepared = dict(post)

    if not prepared.get(POST_ID_FIELD):
        prepared[POST_ID_FIELD] = generate_post_id()

    return prepared


def to_store_item(post: Mapping[str, Any], owner: str) -> Item:
    """Build the DynamoDB item for a post owned by ``owner``.

    The owner always overrides whatever the client supplied. Attributes
    without a value are left out of the item.
    """
    item = {key: value for key, value in post.items() if value is not None}
    item[POST_OWNER_FIELD] = owner
    return item


def from_store_item(item: Mapping[str, Any]) -> Post:
    return Post.model_validate(dict(item))
