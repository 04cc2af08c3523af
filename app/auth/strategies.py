# =============================================================================
# app/auth/strategies.py - Sign-In Strategies
# =============================================================================
# A strategy turns credentials into a session and a bearer token back into
# the session user. The login route tries the configured strategies in order;
# get_current_user hands each token to the strategy that issued it.
#
# - DemoCredentialStrategy: the fixed demo login. Only built when
#   DEMO_LOGIN_ENABLED is true (which settings refuse in production).
# - SupabasePasswordStrategy: Supabase Auth password sign-in, with the
#   console profile loaded from the users table by e-mail.
# =============================================================================

import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from jose import ExpiredSignatureError, JWTError
from supabase import Client

from app.config import settings
from app.exceptions import AuthenticationError
from core.models import Role, UserView
from core.services import UserService
from lib.supabase_client import SupabaseClient, store_error_message

from .tokens import decode_demo_token, decode_supabase_token, is_demo_token, issue_demo_token

logger = logging.getLogger(__name__)

DEMO_USER_ID = "00000000-0000-0000-0000-000000000001"
NO_PROFILE_MESSAGE = "No console profile found for this account"


@dataclass(frozen=True)
class SessionGrant:
    """A signed-in session: the bearer token and who it belongs to."""
    access_token: str
    expires_in: int
    user: UserView
    provider: str


class AuthStrategy:
    """Interface shared by the sign-in strategies."""

    name: str = "base"

    def authenticate(self, email: str, password: str) -> SessionGrant | None:
        """Return a session for matching credentials, None if they don't match."""
        raise NotImplementedError

    def owns(self, token: str) -> bool:
        """Whether this strategy issued the token."""
        raise NotImplementedError

    def resolve(self, token: str) -> UserView:
        """
        Verify a token and return its session user.

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        raise NotImplementedError

    def revoke(self, token: str) -> None:
        """End the session behind a token."""
        raise NotImplementedError


# =============================================================================
# Demo Login
# =============================================================================

class DemoCredentialStrategy(AuthStrategy):
    """Fixed demo credentials that sign in as a demo super admin."""

    name = "demo"

    def __init__(self, email: str | None = None, password: str | None = None):
        self.email = email or settings.DEMO_EMAIL
        self.password = password or settings.DEMO_PASSWORD

    def demo_user(self) -> UserView:
        now = datetime.now(timezone.utc).isoformat()
        return UserView(
            id=DEMO_USER_ID,
            email=self.email,
            name="Demo User",
            role=Role.SUPER_ADMIN,
            city="Mumbai",
            phone="+91-9876543200",
            status="active",
            created_at=now,
            last_login=now,
            updated_at=now,
        )

    def authenticate(self, email: str, password: str) -> SessionGrant | None:
        if not (
            hmac.compare_digest(email.encode(), self.email.encode())
            and hmac.compare_digest(password.encode(), self.password.encode())
        ):
            return None
        user = self.demo_user()
        token, expires_in = issue_demo_token(user)
        logger.info(f"Demo login for {email}")
        return SessionGrant(token, expires_in, user, self.name)

    def owns(self, token: str) -> bool:
        return is_demo_token(token)

    def resolve(self, token: str) -> UserView:
        try:
            return decode_demo_token(token)
        except ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except (JWTError, ValueError) as e:
            logger.warning(f"Demo token rejected: {e}")
            raise AuthenticationError(f"Invalid token: {e}")

    def revoke(self, token: str) -> None:
        # Demo sessions are stateless; the client just drops the token
        logger.debug("Demo logout")


# =============================================================================
# Supabase Auth
# =============================================================================

class SupabasePasswordStrategy(AuthStrategy):
    """Password sign-in against Supabase Auth."""

    name = "supabase"

    def __init__(
        self,
        client: Client,
        auth_client_factory: Callable[[], Client] = SupabaseClient.new_auth_client,
        admin_enabled: bool | None = None,
    ):
        self.client = client
        self.users = UserService(client, auth_client_factory=auth_client_factory)
        self._auth_client_factory = auth_client_factory
        self._admin_enabled = (
            SupabaseClient.has_admin_access() if admin_enabled is None else admin_enabled
        )

    def authenticate(self, email: str, password: str) -> SessionGrant | None:
        auth_client = self._auth_client_factory()
        try:
            response = auth_client.auth.sign_in_with_password({
                "email": email,
                "password": password,
            })
        except Exception as e:
            logger.warning(f"Login error for {email}: {store_error_message(e)}")
            return None

        session = getattr(response, "session", None)
        if getattr(response, "user", None) is None or session is None:
            return None

        self.users.touch_last_login(email)
        profile = self.users.find_by_email(email)
        if profile is None:
            logger.warning(f"Auth user {email} signed in but has no users row")
            raise AuthenticationError(NO_PROFILE_MESSAGE)

        logger.info(f"User {profile.id} signed in")
        return SessionGrant(
            access_token=session.access_token,
            expires_in=session.expires_in or 3600,
            user=profile,
            provider=self.name,
        )

    def owns(self, token: str) -> bool:
        return not is_demo_token(token)

    def resolve(self, token: str) -> UserView:
        try:
            claims = decode_supabase_token(token)
        except ExpiredSignatureError:
            logger.warning("JWT token has expired")
            raise AuthenticationError("Token has expired")
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError(f"Invalid token: {e}")

        profile = self.users.find_by_email(claims["email"])
        if profile is None:
            raise AuthenticationError(NO_PROFILE_MESSAGE)
        return profile

    def revoke(self, token: str) -> None:
        if not self._admin_enabled:
            logger.info("Supabase logout without SUPABASE_SERVICE_KEY; token stays valid until it expires")
            return
        try:
            self.client.auth.admin.sign_out(token)
        except Exception as e:
            logger.warning(f"Supabase sign-out failed: {store_error_message(e)}")


def build_strategies(client: Client) -> list[AuthStrategy]:
    """Strategies in the order the login route tries them."""
    strategies: list[AuthStrategy] = []
    if settings.DEMO_LOGIN_ENABLED:
        strategies.append(DemoCredentialStrategy())
    strategies.append(SupabasePasswordStrategy(client))
    return strategies
