# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The Supabase client handle is built once (SupabaseClient.get_client) and
# handed to every service from here; tests override get_supabase_client to
# substitute a fake.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from supabase import Client

from core.services import (
    DashboardService,
    EventService,
    ExhibitorService,
    RegistrationService,
    SocietyService,
    UserService,
    VendorService,
    VenueService,
)
from lib.supabase_client import SupabaseClient


def get_supabase_client() -> Client:
    """
    Get the shared Supabase client.

    Returns the process-wide client handle.
    """
    return SupabaseClient.get_client()


# Type alias for dependency injection
SupabaseDep = Annotated[Client, Depends(get_supabase_client)]


# =============================================================================
# Services
# =============================================================================

def get_user_service(client: SupabaseDep) -> UserService:
    return UserService(client)


def get_event_service(client: SupabaseDep) -> EventService:
    return EventService(client)


def get_venue_service(client: SupabaseDep) -> VenueService:
    return VenueService(client)


def get_vendor_service(client: SupabaseDep) -> VendorService:
    return VendorService(client)


def get_exhibitor_service(client: SupabaseDep) -> ExhibitorService:
    return ExhibitorService(client)


def get_registration_service(client: SupabaseDep) -> RegistrationService:
    return RegistrationService(client)


def get_dashboard_service(client: SupabaseDep) -> DashboardService:
    return DashboardService(client)


@lru_cache
def get_society_service() -> SocietyService:
    """Societies live in process memory, so every request shares one service."""
    return SocietyService()


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
EventServiceDep = Annotated[EventService, Depends(get_event_service)]
VenueServiceDep = Annotated[VenueService, Depends(get_venue_service)]
VendorServiceDep = Annotated[VendorService, Depends(get_vendor_service)]
ExhibitorServiceDep = Annotated[ExhibitorService, Depends(get_exhibitor_service)]
RegistrationServiceDep = Annotated[RegistrationService, Depends(get_registration_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
SocietyServiceDep = Annotated[SocietyService, Depends(get_society_service)]
