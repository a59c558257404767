# app/routes/user.py

"""
User Routes.

Summary
-------
Endpoints include:
  - Create user
  - Get all users, each with the blogs they added
  - Delete every user (non-production only)

Registration answers incomplete, too short or already taken credentials with
``400`` and a short ``detail`` message.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_400_BAD_REQUEST

from app.configs.settings import MIN_CREDENTIAL_LENGTH
from app.dependencies import BlogRepoDep, UserRepoDep, require_non_production
from app.errors.database import DuplicateEntryError
from app.managers import limiter
from app.models import BlogDB, UserDB
from app.monitoring import get_logger
from app.schemas import UserBlogSummary, UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = get_logger(__name__)

MISSING_CREDENTIALS_DETAIL = "both username and password required"
SHORT_CREDENTIALS_DETAIL = (
    f"username and password length should be at least {MIN_CREDENTIAL_LENGTH}"
)
DUPLICATE_USERNAME_DETAIL = "expected `username` to be unique"

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "username": "mluukkai",
    "name": "Matti Luukkainen",
    "blogs": [
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "title": "React patterns",
            "author": "Michael Chan",
            "url": "https://reactpatterns.com/",
            "likes": 7,
        },
    ],
}


def db_user_to_response(db_user: UserDB, blogs: list[BlogDB] | None = None) -> UserResponse:
    """
    Convert a `UserDB` instance and its blogs to a `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.
    blogs : list[BlogDB] | None
        Blogs owned by the user.

    Returns
    -------
    UserResponse
        Validated response model, without the password hash.
    """
    return UserResponse(
        id=db_user.uuid,
        username=db_user.username,
        name=db_user.name,
        blogs=[UserBlogSummary.model_validate(blog) for blog in blogs or []],
    )


def _validate_credentials(user: UserCreate) -> tuple[str, str]:
    username = user.username or ""
    password = user.password.get_secret_value() if user.password else ""

    if not username or not password:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=MISSING_CREDENTIALS_DETAIL)
    if len(username) < MIN_CREDENTIAL_LENGTH or len(password) < MIN_CREDENTIAL_LENGTH:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=SHORT_CREDENTIALS_DETAIL)
    return username, password


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a user account. The password is stored only as a hash.",
    responses={
        201: {
            "content": {"application/json": {"example": USER_EXAMPLE | {"blogs": []}}},
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {"example": {"detail": DUPLICATE_USERNAME_DETAIL}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_create",
)
@limiter.limit(lambda key: "30/hour" if "apikey" in key else "10/hour")
async def create_user(
    request: Request,
    response: Response,
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
            ],
        ),
    ],
    repo: UserRepoDep,
) -> UserResponse:
    """
    Create a new user and return the safe response model.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    user : UserCreate
        User input payload.
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    UserResponse
        Created user (without password).

    Raises
    ------
    HTTPException
        400 if credentials are missing, too short, or the username is taken.
    """
    username, _ = _validate_credentials(user)

    if await repo.get_by_username(username):
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=DUPLICATE_USERNAME_DETAIL)

    try:
        db_user = await repo.create(user)
    except DuplicateEntryError as e:
        # lost a race against a concurrent registration
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=DUPLICATE_USERNAME_DETAIL) from e

    return db_user_to_response(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="Get all users",
    description="List every user together with the blogs they added.",
    responses={
        200: {"content": {"application/json": {"example": [USER_EXAMPLE]}}},
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_get_all",
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def get_users(
    request: Request,
    response: Response,
    repo: UserRepoDep,
    blog_repo: BlogRepoDep,
) -> list[UserResponse]:
    """
    Get all users with their blogs.

    Returns
    -------
    list[UserResponse]
        Users in registration order.
    """
    db_users = await repo.get_all()
    blogs_by_user = await blog_repo.get_by_user_ids([u.uuid for u in db_users])
    return [db_user_to_response(u, blogs_by_user.get(u.uuid)) for u in db_users]


@router.delete(
    "",
    status_code=HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete every user",
    description="Remove all users. Their blogs stay, without an owner. Unavailable in production.",
    dependencies=[Depends(require_non_production)],
    operation_id="users_delete_all",
)
async def delete_all_users(repo: UserRepoDep) -> None:
    deleted = await repo.delete_all()
    logger.info("all users deleted", count=deleted)
