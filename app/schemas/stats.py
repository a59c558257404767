"""Response schemas for blog statistics."""

from pydantic import BaseModel, ConfigDict, Field


class FavoriteBlogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    author: str
    likes: int


class MostBlogsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str
    blogs: int


class MostLikesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str
    likes: int


class BlogStatsResponse(BaseModel):
    """Aggregated statistics over every stored blog."""

    model_config = ConfigDict(populate_by_name=True)

    total_likes: int = Field(alias="totalLikes")
    favorite_blog: FavoriteBlogResponse | None = Field(default=None, alias="favoriteBlog")
    most_blogs: MostBlogsResponse | None = Field(default=None, alias="mostBlogs")
    most_likes: MostLikesResponse | None = Field(default=None, alias="mostLikes")
