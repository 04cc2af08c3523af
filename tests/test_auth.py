# =============================================================================
# tests/test_auth.py - Sign-In Strategy and Token Tests
# =============================================================================
# Tests for:
# - demo tokens: issue, verify, tamper, expiry
# - the demo and Supabase password strategies
# - bearer token resolution and the role gate
#
# Run with: pytest tests/test_auth.py -v
# =============================================================================

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException
from jose import ExpiredSignatureError, JWTError, jwt

from app.auth.dependencies import require_roles, resolve_token
from app.auth.strategies import (
    DEMO_USER_ID,
    NO_PROFILE_MESSAGE,
    DemoCredentialStrategy,
    SupabasePasswordStrategy,
    build_strategies,
)
from app.auth.tokens import (
    DEMO_ISSUER,
    decode_demo_token,
    decode_supabase_token,
    is_demo_token,
    issue_demo_token,
)
from app.config import settings
from app.exceptions import AccessDeniedError, AuthenticationError
from core.models import Role
from tests.conftest import ADMIN_ID


def supabase_token(email: str, expires_in: int = 3600, audience: str = "authenticated") -> str:
    """An HS256 access token shaped like the ones Supabase Auth issues."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": "auth-user-1",
        "email": email,
        "aud": audience,
        "role": "authenticated",
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=expires_in)).timestamp()),
    }
    return jwt.encode(claims, settings.SUPABASE_JWT_SECRET, algorithm="HS256")


def supabase_strategy(client) -> SupabasePasswordStrategy:
    return SupabasePasswordStrategy(client, auth_client_factory=lambda: client, admin_enabled=True)


# =============================================================================
# Demo Tokens
# =============================================================================

class TestDemoTokens:

    def test_round_trip(self, city_admin):
        token, expires_in = issue_demo_token(city_admin, ttl_minutes=30)

        assert expires_in == 1800
        assert is_demo_token(token)
        assert decode_demo_token(token) == city_admin

    def test_default_ttl(self, city_admin):
        _, expires_in = issue_demo_token(city_admin)
        assert expires_in == settings.DEMO_TOKEN_TTL_MINUTES * 60

    def test_wrong_key_rejected(self, city_admin):
        claims = jwt.get_unverified_claims(issue_demo_token(city_admin)[0])
        forged = jwt.encode(claims, "some-other-secret-key", algorithm="HS256")

        assert is_demo_token(forged)
        with pytest.raises(JWTError):
            decode_demo_token(forged)

    def test_expired(self, city_admin):
        claims = {
            "iss": DEMO_ISSUER,
            "sub": city_admin.id,
            "exp": int((datetime.now(timezone.utc) - timedelta(minutes=5)).timestamp()),
            "user": city_admin.model_dump(mode="json", by_alias=True),
        }
        token = jwt.encode(claims, settings.SECRET_KEY, algorithm="HS256")

        with pytest.raises(ExpiredSignatureError):
            decode_demo_token(token)

    def test_supabase_token_is_not_demo(self):
        assert not is_demo_token(supabase_token("pune@boothbuzz.com"))

    def test_garbage_is_not_demo(self):
        assert not is_demo_token("not-a-jwt")


class TestSupabaseTokens:

    def test_valid(self):
        claims = decode_supabase_token(supabase_token("pune@boothbuzz.com"))
        assert claims["email"] == "pune@boothbuzz.com"

    def test_wrong_audience(self):
        with pytest.raises(JWTError):
            decode_supabase_token(supabase_token("pune@boothbuzz.com", audience="anon"))

    def test_expired(self):
        with pytest.raises(ExpiredSignatureError):
            decode_supabase_token(supabase_token("pune@boothbuzz.com", expires_in=-60))

    def test_missing_email(self):
        with pytest.raises(JWTError, match="no email"):
            decode_supabase_token(supabase_token(""))


# =============================================================================
# Strategies
# =============================================================================

class TestDemoCredentialStrategy:

    def test_demo_credentials(self):
        grant = DemoCredentialStrategy().authenticate("demo@boothbuzz.com", "demo123")

        assert grant is not None
        assert grant.provider == "demo"
        assert grant.user.id == DEMO_USER_ID
        assert grant.user.role is Role.SUPER_ADMIN
        assert grant.user.city == "Mumbai"

    def test_wrong_password(self):
        assert DemoCredentialStrategy().authenticate("demo@boothbuzz.com", "demo1234") is None

    def test_resolve_own_token(self):
        strategy = DemoCredentialStrategy()
        grant = strategy.authenticate("demo@boothbuzz.com", "demo123")

        assert strategy.owns(grant.access_token)
        assert strategy.resolve(grant.access_token).id == DEMO_USER_ID

    def test_resolve_forged_token(self, super_admin):
        claims = jwt.get_unverified_claims(issue_demo_token(super_admin)[0])
        forged = jwt.encode(claims, "some-other-secret-key", algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            DemoCredentialStrategy().resolve(forged)


class TestSupabasePasswordStrategy:

    def test_sign_in(self, fake_client):
        fake_client.add_identity("pune@boothbuzz.com", "Secret123", ADMIN_ID)

        grant = supabase_strategy(fake_client).authenticate("pune@boothbuzz.com", "Secret123")

        assert grant.access_token == f"supabase-token-{ADMIN_ID}"
        assert grant.expires_in == 3600
        assert grant.user.id == ADMIN_ID
        assert grant.user.city == "Pune"
        assert grant.provider == "supabase"
        assert len(fake_client.calls_to("users", "update")) == 1

    def test_bad_password(self, fake_client):
        fake_client.add_identity("pune@boothbuzz.com", "Secret123", ADMIN_ID)

        assert supabase_strategy(fake_client).authenticate("pune@boothbuzz.com", "nope") is None
        assert fake_client.calls_to("users") == []

    def test_no_profile_row(self, fake_client):
        fake_client.add_identity("stranger@boothbuzz.com", "Secret123")

        with pytest.raises(AuthenticationError) as exc_info:
            supabase_strategy(fake_client).authenticate("stranger@boothbuzz.com", "Secret123")
        assert exc_info.value.message == NO_PROFILE_MESSAGE

    def test_resolve(self, fake_client):
        user = supabase_strategy(fake_client).resolve(supabase_token("pune@boothbuzz.com"))
        assert user.id == ADMIN_ID

    def test_resolve_expired(self, fake_client):
        with pytest.raises(AuthenticationError, match="Token has expired"):
            supabase_strategy(fake_client).resolve(supabase_token("pune@boothbuzz.com", expires_in=-60))

    def test_resolve_unknown_profile(self, fake_client):
        with pytest.raises(AuthenticationError, match=NO_PROFILE_MESSAGE):
            supabase_strategy(fake_client).resolve(supabase_token("ghost@boothbuzz.com"))

    def test_revoke_uses_admin_sign_out(self, fake_client):
        token = supabase_token("pune@boothbuzz.com")
        supabase_strategy(fake_client).revoke(token)
        assert fake_client.calls_to("auth", "admin.sign_out") == [("auth", "admin.sign_out", token)]

    def test_revoke_without_service_key(self, fake_client):
        strategy = SupabasePasswordStrategy(fake_client, auth_client_factory=lambda: fake_client, admin_enabled=False)
        strategy.revoke(supabase_token("pune@boothbuzz.com"))
        assert fake_client.calls_to("auth") == []

    def test_revoke_failure_is_quiet(self, fake_client):
        fake_client.fail("auth", "admin.sign_out")
        supabase_strategy(fake_client).revoke(supabase_token("pune@boothbuzz.com"))


class TestBuildStrategies:

    def test_demo_first_when_enabled(self, fake_client, monkeypatch):
        monkeypatch.setattr(settings, "DEMO_LOGIN_ENABLED", True)
        assert [s.name for s in build_strategies(fake_client)] == ["demo", "supabase"]

    def test_demo_absent_when_disabled(self, fake_client, monkeypatch):
        monkeypatch.setattr(settings, "DEMO_LOGIN_ENABLED", False)
        assert [s.name for s in build_strategies(fake_client)] == ["supabase"]


# =============================================================================
# Token Resolution and Role Gate
# =============================================================================

class TestResolveToken:

    def test_demo_token_rejected_when_demo_disabled(self, fake_client, super_admin):
        token, _ = issue_demo_token(super_admin)

        with pytest.raises(HTTPException) as exc_info:
            resolve_token(token, [supabase_strategy(fake_client)])
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid token"

    def test_routed_to_owner(self, fake_client, super_admin):
        token, _ = issue_demo_token(super_admin)
        strategies = [DemoCredentialStrategy(), supabase_strategy(fake_client)]

        assert resolve_token(token, strategies) == super_admin
        assert resolve_token(supabase_token("pune@boothbuzz.com"), strategies).id == ADMIN_ID

    def test_rejection_is_401(self, fake_client):
        with pytest.raises(HTTPException) as exc_info:
            resolve_token(supabase_token("pune@boothbuzz.com", expires_in=-60), [supabase_strategy(fake_client)])
        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


class TestRequireRoles:

    def test_allowed(self, city_admin):
        gate = require_roles(Role.SUPER_ADMIN, Role.ADMIN)
        assert asyncio.run(gate(user=city_admin)) == city_admin

    def test_denied(self, logistics_user):
        gate = require_roles(Role.SUPER_ADMIN, action="manage users")

        with pytest.raises(AccessDeniedError) as exc_info:
            asyncio.run(gate(user=logistics_user))
        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "Access Denied"
