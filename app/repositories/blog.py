"""Blog repository for database operations."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select

from app.models.blog import BlogDB
from app.monitoring import get_logger
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogCreate

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB, BlogCreate]):
    """
    Repository for Blog database operations.

    Listings come back oldest first, which is the order the statistics
    endpoints use for tie-breaking.
    """

    model = BlogDB
    label = "Blog"

    async def create(self, schema: BlogCreate, **kwargs: object) -> BlogDB:
        """
        Create a new blog owned by ``user_id``.

        Args:
            schema: Blog payload; ``likes`` defaults to 0 and ``author`` to ""
            **kwargs: Must carry ``user_id``

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=kwargs.get("user_id"),
            title=schema.title or "",
            author=schema.author or "",
            url=schema.url or "",
            likes=schema.likes or 0,
        )
        db_blog = await self._add_and_refresh(db_blog)
        logger.info("blog created", blog_id=str(db_blog.id), user_id=str(db_blog.user_id))
        return db_blog

    async def update(self, blog_id: UUID, schema: BlogCreate) -> BlogDB:
        """
        Overwrite title, author, url and likes of a blog; the owner is kept.

        Args:
            blog_id: Blog UUID
            schema: Replacement payload; a missing ``likes`` resets it to 0

        Returns:
            BlogDB: Updated blog

        Raises:
            RecordNotFoundError: If the blog does not exist
        """
        db_blog = await self.get_or_raise(blog_id)

        db_blog.title = schema.title or ""
        db_blog.author = schema.author or ""
        db_blog.url = schema.url or ""
        db_blog.likes = schema.likes or 0
        db_blog.updated_at = datetime.now(tz=UTC)
        return await self._add_and_refresh(db_blog)

    async def get_by_user_ids(self, user_ids: list[UUID]) -> dict[UUID, list[BlogDB]]:
        """
        Get the blogs of several users in one query.

        Returns:
            dict[UUID, list[BlogDB]]: Blogs per owner, oldest first
        """
        if not user_ids:
            return {}
        statement = (
            select(BlogDB)
            # pyrefly: ignore [missing-attribute]
            .where(BlogDB.user_id.in_(set(user_ids)))
            # pyrefly: ignore [bad-argument-type]
            .order_by(BlogDB.created_at)
        )
        result = await self.session.execute(statement)
        grouped: dict[UUID, list[BlogDB]] = {user_id: [] for user_id in user_ids}
        for blog in result.scalars().all():
            if blog.user_id is not None:
                grouped.setdefault(blog.user_id, []).append(blog)
        return grouped
