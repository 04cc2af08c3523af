# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# The bearer token is handed to the strategy that issued it (demo tokens only
# when the demo login is enabled) and comes back as the session UserView.
#
# Usage:
#   from app.auth import get_current_user, require_roles
#
#   @router.get("/users", dependencies=[Depends(require_roles(Role.SUPER_ADMIN))])
#   async def list_users(user: UserView = Depends(get_current_user)):
#       ...
# =============================================================================

import logging
from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.dependencies import SupabaseDep
from app.exceptions import AccessDeniedError, AuthenticationError
from app.auth.strategies import AuthStrategy, build_strategies
from core.models import Role, UserView
from core.navigation import has_role

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor
security = HTTPBearer()


def get_strategies(client: SupabaseDep) -> list[AuthStrategy]:
    """Configured sign-in strategies, in login order."""
    return build_strategies(client)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> str:
    return credentials.credentials


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_token(token: str, strategies: list[AuthStrategy]) -> UserView:
    """
    Resolve a bearer token with the strategy that issued it.

    Raises:
        HTTPException: 401 if no strategy accepts the token
    """
    for strategy in strategies:
        if not strategy.owns(token):
            continue
        try:
            user = strategy.resolve(token)
        except AuthenticationError as e:
            raise _unauthorized(e.message)
        logger.debug(f"Authenticated user: {user.id} ({strategy.name})")
        return user

    logger.warning("Bearer token not issued by any enabled sign-in strategy")
    raise _unauthorized("Invalid token")


async def get_current_user(
    token: str = Depends(get_bearer_token),
    strategies: list[AuthStrategy] = Depends(get_strategies),
) -> UserView:
    """
    Extract and validate the session user from the bearer token.

    Returns:
        UserView: The signed-in user's profile

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    return resolve_token(token, strategies)


def require_roles(*roles: Role, action: str = "view this page") -> Callable:
    """
    Build a dependency that admits only the given roles.

    Anyone else gets the fixed "Access Denied" payload (403).
    """
    allowed = frozenset(roles)

    async def _gate(user: UserView = Depends(get_current_user)) -> UserView:
        if not has_role(user, allowed):
            logger.info(f"Access denied for {user.id} ({user.role.value}): {action}")
            raise AccessDeniedError(action)
        return user

    return _gate
