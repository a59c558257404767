# app/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs
  - Blog statistics (total likes, favourite blog, top authors)
  - Get blog by id
  - Create blog (authenticated)
  - Replace blog
  - Delete blog (owner only)
  - Delete every blog (non-production only)

Every blog response embeds its owner as ``user: {id, username, name}``.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
)

from app.dependencies import (
    BlogQueryListDep,
    BlogRepoDep,
    CurrentUserDep,
    UserRepoDep,
    require_non_production,
)
from app.managers import limiter
from app.models import BlogDB, UserDB
from app.monitoring import get_logger
from app.schemas import (
    BlogCreate,
    BlogOwner,
    BlogResponse,
    BlogStatsResponse,
    FavoriteBlogResponse,
    MostBlogsResponse,
    MostLikesResponse,
)
from app.services.blog_stats import favorite_blog, most_blogs, most_likes, to_records, total_likes
from app.utils import format_datetime

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

MISSING_FIELDS_DETAIL = "title and url are required"
NOT_OWNER_DETAIL = "lack of valid authentication credentials"

BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "Canonical string reduction",
    "author": "Edsger W. Dijkstra",
    "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
    "likes": 12,
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "username": "mluukkai",
        "name": "Matti Luukkainen",
    },
    "createdAt": "2025-01-01 10:00:00",
    "updatedAt": None,
}

BlogBody = Annotated[
    BlogCreate,
    Body(
        examples=[
            {
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        ],
    ),
]


def blog_to_response(db_blog: BlogDB, owner: UserDB | None) -> BlogResponse:
    """
    Convert a `BlogDB` instance and its owner to a `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    owner : UserDB | None
        Owner of the blog, ``None`` when the owning account is gone.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=BlogOwner(id=owner.uuid, username=owner.username, name=owner.name) if owner else None,
        created_at=format_datetime(db_blog.created_at) or "",
        updated_at=format_datetime(db_blog.updated_at),
    )


async def _owner_of(db_blog: BlogDB, user_repo: UserRepoDep) -> UserDB | None:
    if db_blog.user_id is None:
        return None
    return await user_repo.get_by_id(db_blog.user_id)


def _ensure_complete(blog: BlogCreate) -> None:
    if not blog.is_complete:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS_DETAIL)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="List every blog, oldest first, with its owner embedded.",
    responses={200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}}},
    operation_id="blogs_list",
)
@limiter.limit("60/minute")
async def get_blogs(
    request: Request,
    response: Response,
    query: BlogQueryListDep,
    repo: BlogRepoDep,
    user_repo: UserRepoDep,
) -> list[BlogResponse]:
    """
    List blogs.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    query : BlogListQuery
        Pagination parameters.
    repo : BlogRepository
        Blog repository dependency.
    user_repo : UserRepository
        User repository used to resolve owners.

    Returns
    -------
    list[BlogResponse]
        Blogs in insertion order.
    """
    blogs = await repo.get_all(skip=query.skip, limit=query.limit)
    owners = await user_repo.get_by_ids([b.user_id for b in blogs if b.user_id is not None])
    return [blog_to_response(blog, owners.get(blog.user_id)) for blog in blogs]


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatsResponse,
    summary="Blog statistics",
    description="Total likes, the most liked blog, and the authors with most blogs and likes.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "totalLikes": 36,
                        "favoriteBlog": {
                            "title": "Canonical string reduction",
                            "author": "Edsger W. Dijkstra",
                            "likes": 12,
                        },
                        "mostBlogs": {"author": "Robert C. Martin", "blogs": 3},
                        "mostLikes": {"author": "Edsger W. Dijkstra", "likes": 17},
                    },
                },
            },
        },
    },
    operation_id="blogs_stats",
)
@limiter.limit("30/minute")
async def get_blog_stats(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> BlogStatsResponse:
    """
    Summarise every stored blog.

    Ties are resolved in favour of the earliest stored blog or author.

    Returns
    -------
    BlogStatsResponse
        ``favoriteBlog``, ``mostBlogs`` and ``mostLikes`` are null when there
        are no blogs.
    """
    records = to_records(await repo.get_all())
    favorite = favorite_blog(records)
    top_by_count = most_blogs(records)
    top_by_likes = most_likes(records)

    return BlogStatsResponse(
        total_likes=total_likes(records),
        favorite_blog=FavoriteBlogResponse.model_validate(favorite) if favorite else None,
        most_blogs=MostBlogsResponse.model_validate(top_by_count) if top_by_count else None,
        most_likes=MostLikesResponse.model_validate(top_by_likes) if top_by_likes else None,
    )


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_get_by_id",
)
@limiter.limit("60/minute")
async def get_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    repo: BlogRepoDep,
    user_repo: UserRepoDep,
) -> BlogResponse:
    """
    Get blog by ID.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    """
    db_blog = await repo.get_or_raise(blog_id)
    return blog_to_response(db_blog, await _owner_of(db_blog, user_repo))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Add a blog owned by the authenticated user. `likes` defaults to 0.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": MISSING_FIELDS_DETAIL}}},
        },
        401: {
            "description": "Unauthorized",
            "content": {"application/json": {"example": {"detail": "token invalid"}}},
        },
    },
    operation_id="blogs_create",
)
@limiter.limit("20/minute")
async def create_blog(
    request: Request,
    response: Response,
    blog: BlogBody,
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog : BlogCreate
        Blog input payload.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Authenticated user, recorded as the owner.

    Raises
    ------
    HTTPException
        400 if title or url is missing.
    """
    _ensure_complete(blog)
    db_blog = await repo.create(blog, user_id=current_user.uuid)
    return blog_to_response(db_blog, current_user)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Replace blog",
    description="Overwrite title, author, url and likes. A missing `likes` resets it to 0.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": MISSING_FIELDS_DETAIL}}},
        },
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_update",
)
@limiter.limit("30/minute")
async def update_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    blog: BlogBody,
    repo: BlogRepoDep,
    user_repo: UserRepoDep,
) -> BlogResponse:
    """
    Replace a blog; the owner never changes.

    Raises
    ------
    HTTPException
        400 if title or url is missing.
    RecordNotFoundError
        If the blog does not exist.
    """
    _ensure_complete(blog)
    db_blog = await repo.update(blog_id, blog)
    return blog_to_response(db_blog, await _owner_of(db_blog, user_repo))


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete blog",
    description="Delete a blog. Only its owner may do so.",
    responses={
        204: {"description": "No Content"},
        401: {
            "description": "Unauthorized",
            "content": {"application/json": {"example": {"detail": NOT_OWNER_DETAIL}}},
        },
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_delete",
)
@limiter.limit("20/minute")
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
) -> None:
    """
    Delete blog by ID.

    Raises
    ------
    RecordNotFoundError
        If the blog does not exist.
    HTTPException
        401 if the caller does not own it.
    """
    existing = await repo.get_or_raise(blog_id)
    if existing.user_id != current_user.uuid:
        logger.warning("blog delete refused", blog_id=str(blog_id), user_id=str(current_user.uuid))
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=NOT_OWNER_DETAIL)

    await repo.delete(blog_id)


@router.delete(
    "",
    status_code=HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete every blog",
    description="Remove all blogs. Unavailable in production.",
    dependencies=[Depends(require_non_production)],
    operation_id="blogs_delete_all",
)
async def delete_all_blogs(repo: BlogRepoDep) -> None:
    """Remove every blog."""
    deleted = await repo.delete_all()
    logger.info("all blogs deleted", count=deleted)
