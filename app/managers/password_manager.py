"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashes are produced with Argon2id; pbkdf2_sha256 hashes are still accepted
but flagged for migration so they get upgraded on the next successful login.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from app.configs import CONFIG_MAP, settings
from app.decorators.with_retry import with_retry
from app.errors.password_hasher import PasswordHashingError, PasswordRehashError
from app.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using Argon2id.

    Wraps passlib's CryptContext to provide hashing, verification, and
    detection of hashes that need to be upgraded.
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the hasher with Argon2id as the primary scheme.

        Args:
            level: Key into ``CONFIG_MAP``; defaults to ``PASSWORD_SECURITY_LEVEL``
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("my_secure_password")  # doctest: +SKIP
            '$argon2id$v=19$m=65536,t=2,p=2$...'
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Returns ``False`` rather than raising for corrupted or unknown hashes.
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def check_needs_rehash(self, hashed_password: str) -> bool:
        """Check whether a hash uses a deprecated scheme or outdated parameters."""
        try:
            needs_rehash = self.pwd_context.needs_update(hashed_password)
        except ValueError:
            logger.exception(f"Error checking hash currency on level {self.level}")
            return False
        if needs_rehash:
            logger.info(f"Hash needs update on level {self.level}")
        return needs_rehash

    def verify_and_update(
        self,
        password: str,
        hashed_password: str | None,
    ) -> tuple[bool, str | None]:
        """
        Verify a password and return a new hash if the current one needs updating.

        Returns:
            tuple[bool, str | None]: Whether the password matched, and the
            replacement hash when the stored one is outdated.

        Raises:
            PasswordRehashError: If the replacement hash cannot be produced
        """
        if hashed_password is None:
            # Keep timing comparable to a real verification
            self.pwd_context.dummy_verify()
            return False, None

        if not self.verify(password, hashed_password):
            return False, None

        new_hash = None
        if self.check_needs_rehash(hashed_password):
            try:
                new_hash = self.hash(password)
            except (ValueError, PasswordHashingError) as e:
                logger.exception("Error generating new hash")
                mssg = "Failed to rehash password"
                raise PasswordRehashError(mssg) from e

        return True, new_hash


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """Return the process-wide password hasher."""
    return _default_hasher


@with_retry(base_delay=1, max_delay=10, exec_retry=PasswordHashingError)
async def hash_password(password: str) -> str:
    """
    Hash a password with the default hasher off the event loop.

    Example:
        >>> hashed = await hash_password("my_password")  # doctest: +SKIP
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


@with_retry(base_delay=1, max_delay=10, exec_retry=PasswordHashingError)
async def verify_password(password: str, hashed_password: str) -> bool:
    """Verify a password with the default hasher off the event loop."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


@with_retry(base_delay=1, max_delay=10, exec_retry=PasswordHashingError)
async def verify_and_update_password(
    password: str,
    hashed_password: str | None,
) -> tuple[bool, str | None]:
    """Verify a password and get a replacement hash if the stored one is outdated."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify_and_update,
        password,
        hashed_password,
    )
