"""
Blog schemas for the Bloglist API.

Request bodies are deliberately lenient about missing ``title``/``url``: the
routes answer those cases with ``400`` rather than a validation ``422``.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.configs.settings import MAX_AUTHOR_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogCreate(BaseModel):
    """Blog creation/replacement payload."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        },
    )

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH, description="Blog title")
    author: str | None = Field(
        default=None,
        max_length=MAX_AUTHOR_LENGTH,
        description="Blog author",
    )
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH, description="Blog URL")
    likes: int | None = Field(default=None, ge=0, description="Like count (defaults to 0)")

    @property
    def is_complete(self) -> bool:
        """Whether both ``title`` and ``url`` carry a non-blank value."""
        return bool(self.title and self.title.strip() and self.url and self.url.strip())


class BlogOwner(BaseModel):
    """Owner of a blog entry as embedded in blog responses."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Blog response model."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int
    user: BlogOwner | None = None
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class UserBlogSummary(BaseModel):
    """Blog entry as listed under its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int
