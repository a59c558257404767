"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    Blogs reference users through ``BlogDB.user_id``; the blogs of a user are
    loaded by the repository layer rather than through an ORM relationship.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    uuid: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    name: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="Display name",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
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
                "uuid": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
            },
        },
    )
