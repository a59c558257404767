# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthServiceDep,
    BlogListQuery,
    BlogQueryListDep,
    BlogRepoDep,
    CurrentUserDep,
    SessionDep,
    UserRepoDep,
    get_auth_service,
    get_blog_repository,
    get_current_user,
    get_user_repository,
    require_non_production,
)

__all__ = [
    "AuthServiceDep",
    "BlogListQuery",
    "BlogQueryListDep",
    "BlogRepoDep",
    "CurrentUserDep",
    "SessionDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_repository",
    "get_current_user",
    "get_user_repository",
    "require_non_production",
]
