"""Token manager for issuing and validating JWT access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import JWTError, jwt

from app.configs import settings
from app.schemas.auth import TokenData

ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    user_id: UUID,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a new access token.

    Args:
        user_id: User's UUID
        username: User's username
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": username,
        "user_id": str(user_id),
        "jti": str(uuid4()),
        "iat": now,
        "exp": now + expires_delta,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenData | None:
    """
    Decode and validate an access token.

    Args:
        token: JWT token string

    Returns:
        TokenData | None: Decoded token data, or None if the token is invalid,
        expired, issued for another audience, or not an access token
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError:
        return None

    username: str | None = payload.get("sub")
    user_id: str | None = payload.get("user_id")
    jti: str | None = payload.get("jti")
    token_type: str | None = payload.get("type")

    if not username or not user_id or not jti or token_type != ACCESS_TOKEN_TYPE:
        return None

    try:
        parsed_user_id = UUID(user_id)
    except ValueError:
        return None

    return TokenData(
        username=username,
        user_id=parsed_user_id,
        jti=jti,
        token_type=token_type,
    )


def get_token_expiry(token: str) -> datetime | None:
    """
    Extract expiration time from a token without audience/issuer checks.

    Returns:
        datetime | None: Token expiration time or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"verify_aud": False, "verify_iss": False},
        )
    except JWTError:
        return None
    exp = payload.get("exp")
    return datetime.fromtimestamp(exp, tz=UTC) if exp else None
