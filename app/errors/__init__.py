from app.errors.auth import (
    InvalidCredentialsError,
    UserAuthenticationError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    TransactionError,
    database_exception_handler,
)
from app.errors.password_hasher import (
    PasswordHashingError,
    PasswordRehashError,
    password_hashing_exception_handler,
)
from app.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "create_exception_handler",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "RecordNotFoundError",
    "TransactionError",
    "database_exception_handler",
    "InvalidCredentialsError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "PasswordHashingError",
    "PasswordRehashError",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
