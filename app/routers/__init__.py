# =============================================================================
# app/routers/ - API Route Handlers
# =============================================================================
# One module per console page:
# - health.py: Health check endpoints
# - dashboard.py: Role-specific dashboard
# - users.py, events.py, venues.py, vendors.py, exhibitors.py, societies.py:
#   list/get/create/update/delete per entity
# - registration.py: Public event registration
# - responses.py: Shared list/delete/form response shapes
# =============================================================================

from app.routers import (
    dashboard,
    events,
    exhibitors,
    health,
    registration,
    societies,
    users,
    vendors,
    venues,
)

__all__ = [
    "dashboard",
    "events",
    "exhibitors",
    "health",
    "registration",
    "societies",
    "users",
    "vendors",
    "venues",
]
