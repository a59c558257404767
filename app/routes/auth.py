"""Authentication routes for handling user login."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from app.dependencies import AuthServiceDep
from app.managers import limiter
from app.schemas.auth import LoginRequest, Token

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit("5/minute")
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> Token:
    """
    Login with username and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Token
        Bearer token plus the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    user = await auth_service.authenticate_user(credentials.username or "", credentials.password)
    return auth_service.create_token_for_user(user)
