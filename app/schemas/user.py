"""User schemas for registration and listing."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from app.schemas.blog import UserBlogSummary


class UserCreate(BaseModel):
    """
    User registration payload.

    ``username`` and ``password`` are optional at the schema level so that the
    route can answer missing or short credentials with ``400``.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "username": "mluukkai",
                "name": "Matti Luukkainen",
                "password": "salainen",
            },
        },
    )

    username: str | None = Field(default=None, max_length=50, description="Username")
    name: str | None = Field(default=None, max_length=100, description="Display name")
    password: SecretStr | None = Field(default=None, description="Password")


class UserResponse(BaseModel):
    """User response model (never carries the password hash)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UserBlogSummary] = Field(default_factory=list)
