# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for signing in and out and for what the signed-in user sees.
#
# Endpoints:
#   POST /auth/login   - Exchange e-mail + password for a bearer token
#   POST /auth/logout  - End the current session
#   GET  /auth/me      - The session user record
#   GET  /navigation   - Sidebar entries visible to the session user
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_bearer_token, get_current_user, get_strategies
from app.auth.models import LoginRequest, LoginResponse, LogoutResponse, NavItemResponse
from app.auth.strategies import AuthStrategy
from app.exceptions import AuthenticationError
from core.models import UserView
from core.navigation import visible_navigation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])
navigation_router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    strategies: list[AuthStrategy] = Depends(get_strategies),
) -> LoginResponse:
    """
    Sign in with e-mail and password.

    Strategies are tried in order (demo login first, when enabled).

    Raises:
        401: Missing fields or credentials no strategy accepts
    """
    email = request.email.strip()
    if not email or not request.password:
        raise AuthenticationError("Please enter both email and password")

    for strategy in strategies:
        grant = strategy.authenticate(email, request.password)
        if grant is not None:
            return LoginResponse(
                access_token=grant.access_token,
                expires_in=grant.expires_in,
                provider=grant.provider,
                user=grant.user,
            )

    logger.info(f"Login failed for {email}")
    raise AuthenticationError("Invalid email or password")


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    user: UserView = Depends(get_current_user),
    strategies: list[AuthStrategy] = Depends(get_strategies),
) -> LogoutResponse:
    """End the session behind the bearer token."""
    strategy = next(s for s in strategies if s.owns(token))
    strategy.revoke(token)
    logger.info(f"User {user.id} signed out")
    return LogoutResponse(provider=strategy.name)


@router.get("/me", response_model=UserView)
async def get_current_user_info(
    user: UserView = Depends(get_current_user)
) -> UserView:
    """
    Get the current authenticated user's profile.

    Raises:
        401: If not authenticated
    """
    return user


@navigation_router.get("/navigation", response_model=list[NavItemResponse])
async def get_navigation(
    user: UserView = Depends(get_current_user)
) -> list[NavItemResponse]:
    """Sidebar entries the session user's role may open, in menu order."""
    return [
        NavItemResponse(label=item.label, route=item.route, icon=item.icon)
        for item in visible_navigation(user)
    ]
