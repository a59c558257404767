"""Authentication service for username/password login."""

from app.errors.auth import InvalidCredentialsError
from app.managers.password_manager import verify_and_update_password
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.monitoring import get_logger
from app.repositories import UserRepository
from app.schemas.auth import Token

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        A stored hash produced with outdated parameters is replaced on success.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_username(username)
        if not password:
            raise InvalidCredentialsError

        is_valid, new_hash = await verify_and_update_password(
            password,
            user.password_hash if user else None,
        )
        if not user or not is_valid:
            logger.info("login rejected", username=username)
            raise InvalidCredentialsError

        if new_hash:
            await self.user_repo.update_password_hash(user, new_hash)
            logger.info("password hash upgraded", user_id=str(user.uuid))

        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """Issue an access token for ``user``."""
        return Token(
            token=create_access_token(user_id=user.uuid, username=user.username),
            username=user.username,
            name=user.name,
        )
