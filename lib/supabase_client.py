# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns the one shared Supabase client used for table and storage
# access. The handle is built once on first use and then injected into the
# services that need it (see app/dependencies.py), so tests can hand those
# services a fake instead.
#
# Password sign-in and sign-up go through short-lived auth clients built by
# new_auth_client(). Those calls would otherwise store an end-user session on
# the shared handle and leak it into every other request.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   rows = client.table("vendors").select("*").execute().data
# =============================================================================

from __future__ import annotations

import logging
import threading
from typing import Any

from supabase import Client, ClientOptions, create_client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error while constructing a Supabase client.

    Provides actionable error messages: errors should tell HOW to fix,
    not just WHAT failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def store_error_message(exc: BaseException) -> str:
    """
    Extract the store's own message from a client exception.

    PostgREST and Auth errors expose a ``message`` attribute; storage errors
    and transport errors only have their string form.
    """
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or exc.__class__.__name__


class SupabaseClient:
    """
    Process-wide holder for the shared Supabase client.

    The data client uses the service_role key when one is configured, which
    bypasses Row Level Security and enables the admin auth API. Without it the
    anon key is used and RLS applies.

    Example:
        client = SupabaseClient.get_client()
        response = client.table("venues").select("*").order("name").execute()
    """

    _instance: Client | None = None
    _lock = threading.Lock()

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the shared Supabase client.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    key = settings.SUPABASE_SERVICE_KEY or settings.SUPABASE_ANON_KEY
                    try:
                        cls._instance = create_client(
                            settings.SUPABASE_URL,
                            key,
                            options=ClientOptions(
                                persist_session=False,
                                auto_refresh_token=False,
                            ),
                        )
                        logger.info(
                            f"Supabase client initialized for {settings.SUPABASE_URL} "
                            f"(service key: {settings.SUPABASE_SERVICE_KEY is not None})"
                        )
                    except Exception as e:
                        raise SupabaseClientError(
                            message=f"Failed to create Supabase client: {e}",
                            code="CLIENT_INIT_FAILED",
                            suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
                        ) from e
        return cls._instance

    @classmethod
    def new_auth_client(cls) -> Client:
        """
        Build a throwaway client for end-user auth calls.

        Sign-in and sign-up attach a user session to the client they run on;
        running them here keeps the shared handle stateless.

        Raises:
            SupabaseClientError: If client creation fails
        """
        try:
            return create_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_ANON_KEY,
                options=ClientOptions(
                    persist_session=False,
                    auto_refresh_token=False,
                ),
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase auth client: {e}",
                code="AUTH_CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            ) from e

    @classmethod
    def has_admin_access(cls) -> bool:
        """Whether the shared client can call the admin auth API."""
        return settings.SUPABASE_SERVICE_KEY is not None

    @classmethod
    def reset(cls) -> None:
        """Drop the shared client (used by tests)."""
        with cls._lock:
            cls._instance = None
