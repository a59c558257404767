"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Index, Integer, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``author`` is free text naming whoever wrote the post; ``user_id`` points at
    the account that added it to the list and is cleared if that user is removed.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_user_created", "user_id", "created_at"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.uuid", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owner ID (foreign key to users.uuid)",
    )

    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    author: str = Field(
        default="",
        sa_column=Column(String(100), nullable=False, index=True, server_default=""),
        description="Blog author",
    )
    url: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Blog URL",
    )
    likes: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, server_default="0"),
        description="Like count",
    )

    # Listing order follows created_at, so keep full precision
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Canonical string reduction",
                "author": "Edsger W. Dijkstra",
                "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
                "likes": 12,
            },
        },
    )
