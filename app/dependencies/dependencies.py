# app/dependencies/dependencies.py

"""Application dependencies: sessions, repositories and the current user."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_404_NOT_FOUND

from app.configs import settings
from app.configs.settings import TOKEN_INVALID_MESSAGE
from app.db import get_session
from app.managers.token_manager import decode_access_token
from app.models import UserDB
from app.repositories import BlogRepository, UserRepository
from app.services import AuthService

bearer_scheme = HTTPBearer(auto_error=False, description="JWT issued by POST /api/login")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """Resolve the `UserRepository` dependency."""
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """Resolve the `BlogRepository` dependency."""
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(repo: UserRepoDep) -> AuthService:
    return AuthService(repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def _unauthorized(detail: str = TOKEN_INVALID_MESSAGE) -> HTTPException:
    return HTTPException(
        status_code=HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    repo: UserRepoDep,
) -> UserDB:
    """
    Resolve the user behind the bearer token.

    Parameters
    ----------
    credentials : HTTPAuthorizationCredentials | None
        Parsed ``Authorization: Bearer`` header, if any.
    repo : UserRepository
        User repository bound to the request session.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    HTTPException
        401 when the token is missing, invalid, expired, or its user is gone.
    """
    if credentials is None:
        raise _unauthorized()

    token_data = decode_access_token(credentials.credentials)
    if not token_data:
        raise _unauthorized()

    user = await repo.get_by_id(token_data.user_id)
    if not user:
        raise _unauthorized()

    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]


def require_non_production() -> None:
    """Hide maintenance endpoints (bulk deletes) in production."""
    if settings.ENVIRONMENT == "production":
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Not Found")


@dataclass(frozen=True)
class BlogListQuery:
    """
    Query container for blog listing.

    Parameters
    ----------
    skip : int
        Number of records to skip.
    limit : int | None
        Maximum number of records to return, ``None`` for all.
    """

    skip: int = 0
    limit: int | None = None


def get_blog_list_query(
    skip: Annotated[int, Query(ge=0, description="Number of records to skip")] = 0,
    limit: Annotated[
        int | None,
        Query(ge=1, le=1000, description="Maximum number of records to return"),
    ] = None,
) -> BlogListQuery:
    return BlogListQuery(skip=skip, limit=limit)


BlogQueryListDep = Annotated[BlogListQuery, Depends(get_blog_list_query)]
