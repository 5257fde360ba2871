"""Pydantic models for post resolver arguments."""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, StringConstraints

# Only identifiers are trimmed; title and content are stored exactly as sent.
PostId = Annotated[StrictStr, StringConstraints(strip_whitespace=True)]


class PostInput(BaseModel):
    """Payload of the createPost mutation.

    ``owner`` is accepted for compatibility with clients that echo
    whole posts back, but it is always replaced by the caller.
    """

    model_config = ConfigDict(extra="forbid")

    id: PostId | None = Field(None, description="Optional client-chosen post ID")
    title: StrictStr | None = Field(None, description="Post title")
    content: StrictStr | None = Field(None, description="Markdown post body")
    owner: StrictStr | None = Field(None, description="Ignored, set from the caller")


class UpdatePostInput(BaseModel):
    """Payload of the updatePost mutation."""

    model_config = ConfigDict(extra="forbid")

    id: PostId = Field(..., min_length=1, description="Post ID to update")
    title: StrictStr | None = Field(None, description="New post title")
    content: StrictStr | None = Field(None, description="New markdown post body")
    owner: StrictStr | None = Field(None, description="Ignored, owner is immutable")

    def ordered_changes(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Return the validated values the client sent, in the client's key order.

        ``owner`` is never part of the changes.
        """
        values = self.model_dump(exclude_unset=True, exclude={"owner"})
        return {name: values[name] for name in raw if name in values}


class GetPostRequest(BaseModel):
    """Validation model for getPostById arguments."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    post_id: StrictStr = Field(..., alias="postId", min_length=1, description="Post ID")


class DeletePostRequest(GetPostRequest):
    """Validation model for deletePost arguments."""


class PostsByUsernameRequest(BaseModel):
    """Validation model for postsByUsername arguments."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: StrictStr | None = Field(
        None,
        min_length=1,
        description="Owner to list posts for, defaults to the caller",
    )


class CreatePostRequest(BaseModel):
    """Validation model for createPost arguments."""

    post: PostInput


class UpdatePostRequest(BaseModel):
    """Validation model for updatePost arguments."""

    post: UpdatePostInput


class CallerIdentity(BaseModel):
    """Authenticated caller as supplied by the identity provider."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: StrictStr | None = Field(None, description="Verified username of the caller")
