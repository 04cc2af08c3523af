# =============================================================================
# app/routers/health.py - Service Status Endpoints
# =============================================================================
# Probes for the hosting platform:
#   GET /health        - process up, which environment, demo login on/off
#   GET /health/ready  - Supabase answers (users table, storage API)
#   GET /health/live   - process alive
# =============================================================================

from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import SupabaseDep
from core.services import StorageService
from lib.supabase_client import store_error_message

router = APIRouter()

VERSION = "1.0.0"


class ServiceStatus(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str
    demo_login: bool


class SupabaseChecks(BaseModel):
    """One entry per Supabase API the console depends on."""
    database: str = "unknown"
    storage: str = "unknown"

    @property
    def all_healthy(self) -> bool:
        return self.database == "healthy" and self.storage == "healthy"


class ReadinessStatus(BaseModel):
    status: Literal["ready", "degraded"]
    checks: SupabaseChecks
    timestamp: str


class LivenessStatus(BaseModel):
    status: Literal["alive"] = "alive"
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=ServiceStatus)
async def health_check():
    """Static service info; makes no remote calls."""
    return ServiceStatus(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=VERSION,
        demo_login=settings.DEMO_LOGIN_ENABLED,
    )


@router.get("/health/ready", response_model=ReadinessStatus)
def readiness_check(client: SupabaseDep):
    """
    Whether the console can serve pages.

    Reads one id from the users table (every page needs the session profile)
    and lists storage buckets (event images). Either failing reports
    "degraded" with the reason; the endpoint itself still answers 200.
    """
    checks = SupabaseChecks()

    try:
        client.table("users").select("id").limit(1).execute()
        checks.database = "healthy"
    except Exception as e:
        checks.database = f"unhealthy: {store_error_message(e)[:50]}"

    checks.storage = "healthy" if StorageService(client).bucket_reachable() else "unhealthy"

    return ReadinessStatus(
        status="ready" if checks.all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessStatus)
async def liveness_check():
    return LivenessStatus(timestamp=_now())
