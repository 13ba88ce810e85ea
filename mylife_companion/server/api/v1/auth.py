"""
Authentication Endpoints.

Registration, sign-in, token verification and refresh, logout and password
reset. Tokens are stateless JWTs; logout only exists so clients have a call to
make when they discard their tokens.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.concurrency import run_in_threadpool

from mylife_companion.core.database.entities.users import User
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.io import (
    MessageResponse,
    PasswordResetConfirm,
    PasswordResetRequest,
    RefreshTokenRequest,
    RefreshTokenResponse,
    SigninRequest,
    SigninResponse,
    SignupRequest,
    TokenVerifyResponse,
)
from mylife_companion.core.security import (
    InvalidTokenError,
    TokenType,
    create_access_token,
    create_password_reset_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)
from mylife_companion.server.services.deps import CurrentUserIdDep, ReposDep

logger = get_logger(__name__)

router = APIRouter()

PASSWORD_RESET_MESSAGE = "If an account with that email exists, a password reset link has been sent."


async def register_user(repos, username: str, email: str, password: str, **fields) -> User:
    """
    Create an account after checking that the username and email are free.

    Raises:
        HTTPException: 400 when the username or email is already taken
    """
    conflict = await repos.users.find_conflict(username, email)
    if conflict is not None:
        taken = "Username" if conflict.username == username else "Email"
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Failed! {taken} is already in use!")

    password_hash = await run_in_threadpool(hash_password, password)
    user = User(username=username, email=email, password_hash=password_hash, **fields)
    try:
        user = await repos.users.create(user)
    except IntegrityError:
        # Lost a race against a concurrent registration
        await repos.users.session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed! Username or email is already in use!",
        )
    await repos.preferences.get_or_create(user.id)
    logger.info(f"Registered user {user.id} ({user.username})")
    return user


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create a new account with the default 'user' role.",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Missing field, or username/email already in use"},
    },
)
@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def signup(payload: SignupRequest, repos: ReposDep) -> MessageResponse:
    """
    Register a new account.

    - **username**: Unique login name (max 50 characters).
    - **email**: Unique email address.
    - **password**: Plain text password; only its bcrypt hash is stored.
    """
    await register_user(
        repos,
        payload.username,
        payload.email,
        payload.password,
        full_name=payload.full_name,
    )
    return MessageResponse(message="User registered successfully!")


@router.post(
    "/signin",
    response_model=SigninResponse,
    summary="Sign In",
    description="Exchange email and password for an access token and a refresh token.",
    responses={
        200: {"description": "Signed in"},
        401: {"description": "Wrong password"},
        403: {"description": "Account is not active"},
        404: {"description": "No account with that email"},
    },
)
@router.post("/login", response_model=SigninResponse, include_in_schema=False)
async def signin(payload: SigninRequest, repos: ReposDep):
    """
    Sign in with email and password.

    On success the account's ``last_login`` is updated.
    """
    user = await repos.users.get_by_email(payload.email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User Not found.")

    if not await run_in_threadpool(verify_password, payload.password, user.password_hash):
        logger.info(f"Failed sign-in for user {user.id}")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Invalid Password!", "accessToken": None},
        )

    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is not active!")

    user = await repos.users.touch_last_login(user)
    logger.info(f"User {user.id} signed in")
    return SigninResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        access_token=create_access_token(user.id),
        refresh_token=create_refresh_token(user.id),
    )


@router.post(
    "/verify-token",
    response_model=TokenVerifyResponse,
    summary="Verify Token",
    description="Check that the supplied access token is valid.",
    responses={
        200: {"description": "Token is valid"},
        401: {"description": "Token is invalid or expired"},
        403: {"description": "No token provided"},
    },
)
async def verify_token(user_id: CurrentUserIdDep) -> TokenVerifyResponse:
    """Validate the access token from ``x-access-token`` or ``Authorization: Bearer``."""
    return TokenVerifyResponse(message="Token is valid!", user_id=user_id)


@router.post(
    "/refresh-token",
    response_model=RefreshTokenResponse,
    summary="Refresh Access Token",
    description="Exchange a refresh token for a new access token.",
    responses={
        200: {"description": "New access token issued"},
        400: {"description": "Refresh token missing"},
        401: {"description": "Refresh token invalid or expired"},
        404: {"description": "Account no longer exists"},
    },
)
async def refresh_token(payload: RefreshTokenRequest, repos: ReposDep) -> RefreshTokenResponse:
    """
    Issue a new access token.

    - **refreshToken**: A refresh token previously returned by sign-in.
    """
    try:
        user_id = decode_token(payload.refresh_token, TokenType.refresh)
    except InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token!")

    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found!")
    return RefreshTokenResponse(new_token=create_access_token(user.id))


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log Out",
    description="Acknowledge a logout. Tokens are stateless, so the client discards them.",
)
async def logout() -> MessageResponse:
    return MessageResponse(message="Successfully logged out!")


@router.post(
    "/password-reset/request",
    response_model=MessageResponse,
    summary="Request Password Reset",
    description="Issue a short-lived password reset token. The response never reveals whether the email exists.",
)
async def request_password_reset(payload: PasswordResetRequest, repos: ReposDep) -> MessageResponse:
    """
    Request a password reset.

    A reset token is issued for a known email. There is no mail delivery; the
    token is written to the debug log.
    """
    user = await repos.users.get_by_email(payload.email)
    if user is not None:
        token = create_password_reset_token(user.id)
        logger.info(f"Password reset requested for user {user.id}")
        logger.debug(f"Password reset token for user {user.id}: {token}")
    return MessageResponse(message=PASSWORD_RESET_MESSAGE)


@router.post(
    "/password-reset/confirm",
    response_model=MessageResponse,
    summary="Confirm Password Reset",
    description="Set a new password using a password reset token.",
    responses={
        200: {"description": "Password changed"},
        400: {"description": "Token or new password missing"},
        401: {"description": "Reset token invalid or expired"},
        404: {"description": "Account no longer exists"},
    },
)
async def confirm_password_reset(payload: PasswordResetConfirm, repos: ReposDep) -> MessageResponse:
    """
    Replace the password of the account named by a reset token.

    - **token**: Password reset token.
    - **newPassword**: The new plain text password.
    """
    try:
        user_id = decode_token(payload.token, TokenType.password_reset)
    except InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired reset token!")

    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found!")

    user.password_hash = await run_in_threadpool(hash_password, payload.new_password)
    await repos.users.update(user)
    logger.info(f"Password reset completed for user {user.id}")
    return MessageResponse(message="Password has been reset successfully!")
