# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.models import UserView


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(_CamelModel):
    """
    Credentials posted by the login screen.

    Both fields default to "" so a half-filled form gets the friendly
    "Please enter both email and password" instead of a schema error.
    """
    email: str = ""
    password: str = ""


class LoginResponse(_CamelModel):
    """
    A new console session.

    Example:
        {
            "accessToken": "eyJhbGciOi...",
            "tokenType": "bearer",
            "expiresIn": 3600,
            "provider": "supabase",
            "user": {"id": "...", "name": "Asha", "role": "admin", ...}
        }
    """
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    provider: str
    user: UserView


class LogoutResponse(_CamelModel):
    status: str = "signed_out"
    provider: str


class NavItemResponse(_CamelModel):
    """One sidebar entry the signed-in user may open."""
    label: str
    route: str
    icon: str
