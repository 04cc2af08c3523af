# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Session bootstrap for the console: sign-in strategies (Supabase Auth and
# the optional demo login), bearer token resolution and role gates.
#
# Usage:
#   from app.auth import get_current_user, require_roles
#
#   @router.get("/protected")
#   async def protected(user: UserView = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import (
    get_current_user,
    require_roles,
)
from app.auth.models import LoginRequest, LoginResponse, LogoutResponse, NavItemResponse
from app.auth.strategies import (
    AuthStrategy,
    DemoCredentialStrategy,
    SessionGrant,
    SupabasePasswordStrategy,
    build_strategies,
)

__all__ = [
    "get_current_user",
    "require_roles",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "NavItemResponse",
    "AuthStrategy",
    "DemoCredentialStrategy",
    "SessionGrant",
    "SupabasePasswordStrategy",
    "build_strategies",
]
