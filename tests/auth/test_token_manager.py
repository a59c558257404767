"""Tests for the JWT token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import jwt

from app.configs import settings
from app.managers.token_manager import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_access_token,
    get_token_expiry,
)


class TestCreateAccessToken:
    """Test cases for create_access_token function."""

    def test_creates_valid_token(self) -> None:
        token = create_access_token(user_id=uuid4(), username="testuser")

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_token_contains_correct_claims(self) -> None:
        """Test that access token contains all required claims."""
        user_id = uuid4()

        token = create_access_token(user_id=user_id, username="testuser")
        token_data = decode_access_token(token)

        assert token_data is not None
        assert token_data.username == "testuser"
        assert token_data.user_id == user_id
        assert token_data.token_type == ACCESS_TOKEN_TYPE
        assert token_data.jti

    def test_each_token_has_unique_jti(self) -> None:
        user_id = uuid4()
        first = decode_access_token(create_access_token(user_id=user_id, username="u"))
        second = decode_access_token(create_access_token(user_id=user_id, username="u"))

        assert first is not None
        assert second is not None
        assert first.jti != second.jti

    def test_custom_expiration(self) -> None:
        """Test that custom expiration is respected."""
        token = create_access_token(
            user_id=uuid4(),
            username="testuser",
            expires_delta=timedelta(hours=2),
        )

        expiry = get_token_expiry(token)

        assert expiry is not None
        remaining = expiry - datetime.now(UTC)
        assert timedelta(minutes=119) < remaining <= timedelta(hours=2)


class TestDecodeAccessToken:
    """Test cases for decode_access_token function."""

    def test_expired_token_rejected(self) -> None:
        token = create_access_token(
            user_id=uuid4(),
            username="testuser",
            expires_delta=timedelta(seconds=-1),
        )
        assert decode_access_token(token) is None

    def test_garbage_rejected(self) -> None:
        assert decode_access_token("not-a-token") is None

    def test_wrong_secret_rejected(self) -> None:
        token = jwt.encode(
            {"sub": "u", "user_id": str(uuid4()), "jti": "x", "type": "access"},
            "some-other-secret",
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None

    def test_wrong_type_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "u",
                "user_id": str(uuid4()),
                "jti": "x",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "type": "refresh",
            },
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None

    def test_malformed_user_id_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "u",
                "user_id": "not-a-uuid",
                "jti": "x",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "type": ACCESS_TOKEN_TYPE,
            },
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None

    def test_get_token_expiry_invalid(self) -> None:
        assert get_token_expiry("invalid") is None
