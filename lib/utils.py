# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Small helpers used across services, forms and routers.
# =============================================================================


# =============================================================================
# Query Utilities
# =============================================================================

def escape_like(value: str) -> str:
    """
    Escape LIKE wildcards so user input matches literally.

    PostgREST passes ``ilike`` patterns straight to Postgres, where ``%`` and
    ``_`` are wildcards and ``\\`` is the escape character.
    """
    return (
        value.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


# =============================================================================
# Display Utilities
# =============================================================================

def city_from_location(location: str) -> str:
    """
    Take the city out of a free-text venue location.

    Venue locations are written as "Street, Area, City"; the city is the
    last comma-separated segment.

    Example:
        city_from_location("12 MG Road, Koregaon Park, Pune")  # "Pune"
    """
    if not location:
        return ""
    return location.split(",")[-1].strip()


def humanize_slug(value: str) -> str:
    """Turn a snake_case enum value into a badge label ("sound_lights" -> "sound lights")."""
    return value.replace("_", " ")


def format_lakhs(amount: float) -> str:
    """Format rupees in lakhs the way the dashboard shows revenue (₹12.5L)."""
    return f"₹{amount / 100000:.1f}L"
