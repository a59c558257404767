from app.services.auth import AuthService
from app.services.blog_stats import (
    AuthorBlogCount,
    AuthorLikesTotal,
    BlogRecord,
    FavoriteSummary,
    favorite_blog,
    most_blogs,
    most_likes,
    total_likes,
)

__all__ = [
    "AuthService",
    "AuthorBlogCount",
    "AuthorLikesTotal",
    "BlogRecord",
    "FavoriteSummary",
    "favorite_blog",
    "most_blogs",
    "most_likes",
    "total_likes",
]
