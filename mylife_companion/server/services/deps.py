"""
Request dependencies.

Provides injectable dependencies for:
- Database sessions and the repository bundle
- Authentication (JWT from ``x-access-token`` or ``Authorization: Bearer``)
- Authorization (admin only, or admin or the account owner)
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from mylife_companion.core.database import get_session
from mylife_companion.core.database.entities.users import User
from mylife_companion.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.security import InvalidTokenError, decode_token

logger = get_logger(__name__)

# Both schemes are optional so that a missing token is reported as 403 here
access_token_header = APIKeyHeader(name="x-access-token", auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repos(session: SessionDep) -> SqlRepoBundle:
    """Bundle every repository around the request's session."""
    return build_sql_repos_from_session(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


def get_token(
    x_access_token: Annotated[Optional[str], Depends(access_token_header)],
    bearer: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> str:
    """
    Pull the raw JWT from the request headers.

    ``x-access-token`` wins over ``Authorization: Bearer`` when both are sent.

    Raises:
        HTTPException: 403 when no token was supplied
    """
    if x_access_token:
        return x_access_token
    if bearer is not None and bearer.credentials:
        return bearer.credentials
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="No token provided!")


TokenDep = Annotated[str, Depends(get_token)]


def get_current_user_id(token: TokenDep) -> int:
    """
    Validate the access token and return the account id it names.

    Raises:
        HTTPException: 401 when the token is invalid or expired
    """
    try:
        return decode_token(token)
    except InvalidTokenError as e:
        logger.debug(f"Rejected access token: {e}")
        detail = "Token has expired!" if e.expired else "Unauthorized!"
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


CurrentUserIdDep = Annotated[int, Depends(get_current_user_id)]


async def get_current_user(user_id: CurrentUserIdDep, repos: ReposDep) -> User:
    """
    Load the authenticated account.

    Raises:
        HTTPException: 404 when the account no longer exists, 403 when it is not active
    """
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is not active!")
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


async def require_admin(user: CurrentUserDep) -> User:
    """Allow only administrators through."""
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Require Admin Role!")
    return user


AdminDep = Annotated[User, Depends(require_admin)]


async def require_admin_or_same_user(user_id: int, user: CurrentUserDep) -> User:
    """Allow administrators, or the account named by the ``user_id`` path parameter."""
    if not user.is_admin and user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized to access this resource!",
        )
    return user


AdminOrSelfDep = Annotated[User, Depends(require_admin_or_same_user)]
