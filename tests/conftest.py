# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory Supabase fake seeded with sample rows
# - Provides signed-in users of the common roles
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-demo-tokens")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DEMO_LOGIN_ENABLED", "true")

import pytest

from core.models import Role, UserView
from tests.fakes import FakeSupabase


# =============================================================================
# Sample Rows
# =============================================================================

SUPER_ADMIN_ID = "11111111-1111-1111-1111-111111111111"
ADMIN_ID = "22222222-2222-2222-2222-222222222222"
LOGISTICS_ID = "33333333-3333-3333-3333-333333333333"


def sample_tables() -> dict[str, list[dict]]:
    return {
        "users": [
            {
                "id": SUPER_ADMIN_ID, "email": "root@boothbuzz.com", "name": "Riya Root",
                "role": "super_admin", "city": None, "phone": "+91-9000000001", "status": "active",
            },
            {
                "id": ADMIN_ID, "email": "pune@boothbuzz.com", "name": "Arjun Admin",
                "role": "admin", "city": "Pune", "phone": "+91-9000000002", "status": "active",
            },
            {
                "id": LOGISTICS_ID, "email": "trucks@boothbuzz.com", "name": "Lata Logistics",
                "role": "logistics", "city": "Mumbai", "phone": None, "status": "active",
            },
        ],
        "venues": [
            {
                "id": "venue-1", "name": "Phoenix Hall", "location": "Baner, Pune",
                "address_line1": "12 Baner Road", "capacity": 400, "total_revenue": 90000,
                "status": "active",
            },
            {
                "id": "venue-2", "name": "Sea Breeze Lawn", "location": "Juhu, Mumbai",
                "address_line1": "4 Juhu Tara Road", "capacity": None, "total_revenue": 150000,
                "status": "active",
            },
        ],
        "events": [
            {
                "id": "event-1", "title": "Pune Food Fest", "event_date": "2030-03-01",
                "event_time": "10:00", "venue_id": "venue-1", "city": "Pune",
                "status": "published", "plan_type": "Plan A", "max_capacity": 400,
                "attendees": 120, "total_revenue": 250000, "created_by": ADMIN_ID,
                "created_at": "2025-01-03T00:00:00+00:00",
            },
            {
                "id": "event-2", "title": "Mumbai Craft Mela", "event_date": "2030-04-10",
                "event_time": "11:00", "venue_id": "venue-2", "city": "Mumbai",
                "status": "draft", "plan_type": "Plan B", "max_capacity": 100,
                "attendees": 0, "total_revenue": 0, "created_by": SUPER_ADMIN_ID,
                "created_at": "2025-01-02T00:00:00+00:00",
            },
        ],
        "vendors": [
            {
                "id": "vendor-1", "name": "Acme Lights", "email": "hello@acme.in",
                "phone": "+91-9000000010", "category": "sound_lights", "city": "Pune",
                "rating": None, "status": "active",
            },
        ],
        "exhibitors": [],
        "event_registrations": [],
    }


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_client():
    """In-memory Supabase client seeded with sample rows."""
    return FakeSupabase(sample_tables())


@pytest.fixture
def super_admin():
    return UserView(id=SUPER_ADMIN_ID, email="root@boothbuzz.com", name="Riya Root", role=Role.SUPER_ADMIN)


@pytest.fixture
def city_admin():
    return UserView(id=ADMIN_ID, email="pune@boothbuzz.com", name="Arjun Admin", role=Role.ADMIN, city="Pune")


@pytest.fixture
def logistics_user():
    return UserView(
        id=LOGISTICS_ID, email="trucks@boothbuzz.com", name="Lata Logistics",
        role=Role.LOGISTICS, city="Mumbai",
    )
