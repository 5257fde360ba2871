"""Shared post model."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Post(BaseModel):
    """Blog post returned by the GraphQL API."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field(..., min_length=1, description="Unique post identifier")
    title: StrictStr | None = Field(None, description="Post title")
    content: StrictStr | None = Field(None, description="Markdown post body")
    owner: StrictStr = Field(..., min_length=1, description="Username of the post author")
