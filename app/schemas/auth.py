from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """
    Credentials posted to the login endpoint.

    Both fields are optional so that incomplete credentials are rejected with
    the same ``401`` as wrong ones.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "mluukkai", "password": "salainen"}},
    )

    username: str | None = Field(default=None, max_length=50)
    password: str | None = Field(default=None)


class Token(BaseModel):
    """Token issued on successful login."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
    token_type: str
