# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: The shared Supabase client handle and auth clients
# - utils.py: Shared helpers (LIKE escaping, display formatting)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError, store_error_message
from lib.utils import (
    city_from_location,
    escape_like,
    format_lakhs,
    humanize_slug,
)

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "store_error_message",
    # Utils
    "city_from_location",
    "escape_like",
    "format_lakhs",
    "humanize_slug",
]
