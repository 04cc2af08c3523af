# =============================================================================
# app/auth/tokens.py - Session Token Verification
# =============================================================================
# Two kinds of bearer token reach the API:
#
# - Supabase access tokens, issued by Supabase Auth on password sign-in.
#   Verified with the project's JWKS (ES256, new signing keys) or the legacy
#   HS256 JWT secret.
# - Demo tokens, issued by this API for the fixed demo credentials. Signed
#   HS256 with SECRET_KEY and marked with their own issuer so they can never
#   be mistaken for a Supabase token.
# =============================================================================

import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
from jose import JWTError, jwt

from app.config import settings
from core.models import UserView

logger = logging.getLogger(__name__)

DEMO_ISSUER = "boothbuzz-demo"
DEMO_ALGORITHM = "HS256"
SUPABASE_AUDIENCE = "authenticated"

# Cache for JWKS keys
_jwks_cache: dict = {}
_jwks_cache_time: float = 0
JWKS_CACHE_TTL = 3600  # 1 hour


# =============================================================================
# Supabase Tokens
# =============================================================================

def _get_jwks_url() -> str:
    """Get the JWKS URL from Supabase URL."""
    # Format: https://<project-ref>.supabase.co
    supabase_url = settings.SUPABASE_URL.rstrip('/')
    return f"{supabase_url}/auth/v1/.well-known/jwks.json"


def _fetch_jwks() -> dict:
    """Fetch JWKS from Supabase with caching."""
    global _jwks_cache, _jwks_cache_time

    current_time = time.time()

    # Return cached if valid
    if _jwks_cache and (current_time - _jwks_cache_time) < JWKS_CACHE_TTL:
        return _jwks_cache

    try:
        jwks_url = _get_jwks_url()
        response = httpx.get(jwks_url, timeout=10)
        response.raise_for_status()
        _jwks_cache = response.json()
        _jwks_cache_time = current_time
        logger.debug(f"Fetched JWKS from {jwks_url}")
        return _jwks_cache
    except Exception as e:
        logger.warning(f"Failed to fetch JWKS: {e}")
        # Return cached even if expired, as fallback
        if _jwks_cache:
            return _jwks_cache
        return {"keys": []}


def _get_signing_key(token: str) -> tuple[Any, str]:
    """
    Get the appropriate signing key for a Supabase token.

    Returns:
        Tuple of (key, algorithm) to use for verification

    Raises:
        JWTError: If no key is available for the token
    """
    try:
        unverified_header = jwt.get_unverified_header(token)
    except JWTError:
        unverified_header = {}

    alg = unverified_header.get("alg", "HS256")
    kid = unverified_header.get("kid")

    if alg != "HS256" and kid:
        for key in _fetch_jwks().get("keys", []):
            if key.get("kid") == kid:
                return key, alg
        logger.warning(f"Could not find key for alg={alg}, kid={kid}, falling back to HS256")

    if not settings.SUPABASE_JWT_SECRET:
        raise JWTError("No verification key available for this token")
    return settings.SUPABASE_JWT_SECRET, "HS256"


def decode_supabase_token(token: str) -> dict[str, Any]:
    """
    Verify a Supabase access token and return its claims.

    Raises:
        ExpiredSignatureError: If the token has expired
        JWTError: If the signature, audience or shape is wrong
    """
    signing_key, algorithm = _get_signing_key(token)
    payload = jwt.decode(
        token,
        signing_key,
        algorithms=[algorithm],
        audience=SUPABASE_AUDIENCE,
    )
    if not payload.get("email"):
        raise JWTError("Token has no email claim")
    return payload


# =============================================================================
# Demo Tokens
# =============================================================================

def is_demo_token(token: str) -> bool:
    """Whether a token claims to be a demo token (signature not checked)."""
    try:
        return jwt.get_unverified_claims(token).get("iss") == DEMO_ISSUER
    except JWTError:
        return False


def issue_demo_token(user: UserView, ttl_minutes: int | None = None) -> tuple[str, int]:
    """
    Sign a demo session carrying the serialised user record.

    Returns:
        Tuple of (token, lifetime in seconds)
    """
    ttl = timedelta(minutes=ttl_minutes or settings.DEMO_TOKEN_TTL_MINUTES)
    now = datetime.now(timezone.utc)
    claims = {
        "iss": DEMO_ISSUER,
        "sub": user.id,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
        "user": user.model_dump(mode="json", by_alias=True),
    }
    token = jwt.encode(claims, settings.SECRET_KEY, algorithm=DEMO_ALGORITHM)
    return token, int(ttl.total_seconds())


def decode_demo_token(token: str) -> UserView:
    """
    Verify a demo token and return the user it carries.

    Raises:
        ExpiredSignatureError: If the token has expired
        JWTError: If the token was not signed with SECRET_KEY
    """
    payload = jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[DEMO_ALGORITHM],
        issuer=DEMO_ISSUER,
    )
    user = payload.get("user")
    if not isinstance(user, dict):
        raise JWTError("Demo token carries no user")
    return UserView.model_validate(user)
