from app.schemas.auth import LoginRequest, Token, TokenData
from app.schemas.blog import BlogCreate, BlogOwner, BlogResponse, UserBlogSummary
from app.schemas.health import HealthCheckResponse
from app.schemas.stats import (
    BlogStatsResponse,
    FavoriteBlogResponse,
    MostBlogsResponse,
    MostLikesResponse,
)
from app.schemas.user import UserCreate, UserResponse

__all__ = [
    "BlogCreate",
    "BlogOwner",
    "BlogResponse",
    "BlogStatsResponse",
    "FavoriteBlogResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "MostBlogsResponse",
    "MostLikesResponse",
    "Token",
    "TokenData",
    "UserBlogSummary",
    "UserCreate",
    "UserResponse",
]
