"""User repository for database operations."""

from datetime import UTC, datetime
from app.errors.database import DuplicateEntryError
from app.managers.password_manager import hash_password
from app.models.user import UserDB
from app.monitoring import get_logger
from app.repositories.base import BaseRepository
from app.schemas.user import UserCreate

logger = get_logger(__name__)


class UserRepository(BaseRepository[UserDB, UserCreate]):
    """Repository for User database operations."""

    model = UserDB
    id_field = "uuid"
    label = "User"

    async def create(self, schema: UserCreate, **kwargs: object) -> UserDB:
        """
        Create a new user, hashing the password on the way in.

        Raises:
            DuplicateEntryError: If the username is taken
        """
        password = schema.password.get_secret_value() if schema.password else ""
        password_hash = await hash_password(password)

        db_user = UserDB(
            username=schema.username or "",
            name=schema.name,
            password_hash=password_hash,
        )
        try:
            db_user = await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(
                detail=f"Username '{schema.username}' already exists",
            ) from e
        logger.info("user created", user_id=str(db_user.uuid))
        return db_user

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.get_by_field("username", username)

    async def update_password_hash(self, user: UserDB, password_hash: str) -> UserDB:
        """Store a replacement password hash for ``user``."""
        user.password_hash = password_hash
        user.updated_at = datetime.now(tz=UTC)
        return await self._add_and_refresh(user)
