# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .table_fetcher import FetchOptions, FetchSnapshot, OrderBy, TableFetcher
from .fetchers import (
    EVENTS_SELECT,
    events_fetcher,
    exhibitors_fetcher,
    users_fetcher,
    vendors_fetcher,
    venues_fetcher,
)
from .entity_service import EntityService
from .storage_service import StorageService
from .user_service import UserService
from .event_service import EventService
from .venue_service import VenueService
from .vendor_service import VendorService
from .exhibitor_service import ExhibitorService
from .society_service import SocietyService
from .registration_service import RegistrationService
from .dashboard_service import DashboardService

__all__ = [
    # Fetching
    "FetchOptions",
    "FetchSnapshot",
    "OrderBy",
    "TableFetcher",
    "EVENTS_SELECT",
    "events_fetcher",
    "exhibitors_fetcher",
    "users_fetcher",
    "vendors_fetcher",
    "venues_fetcher",
    # Records
    "EntityService",
    "StorageService",
    "UserService",
    "EventService",
    "VenueService",
    "VendorService",
    "ExhibitorService",
    "SocietyService",
    "RegistrationService",
    "DashboardService",
]
