# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Booth Buzz admin API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import settings
from app.exceptions import (
    BoothBuzzException,
    boothbuzz_exception_handler,
    validation_exception_handler,
)
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
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is built lazily on first use, so startup only
    reports the configuration.
    """
    logger.info(f"Starting Booth Buzz API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if settings.DEMO_LOGIN_ENABLED:
        logger.warning(f"Demo login is enabled for {settings.DEMO_EMAIL}")

    yield

    logger.info("Shutting down Booth Buzz API")


# Create FastAPI application
app = FastAPI(
    title="Booth Buzz API",
    description="""
## Booth Buzz Admin Console API

Backs the Booth Buzz admin console: events, venues, vendors, exhibitors,
societies and console users, stored in Supabase.

### Roles

Every page is gated by the signed-in user's role. The sidebar a user sees
(`GET /api/v1/navigation`) and the pages they may open follow the same table.

### Forms

Add/edit endpoints validate the whole form before anything is written.
A rejected form answers `422` with a field error map:

```json
{"detail": "Please correct the highlighted fields", "code": "FORM_INVALID",
 "details": {"errors": {"email": "Please enter a valid email address"}}}
```

A successful one answers with the saved record and where the console should
go next (`redirectTo`, after `redirectAfter` seconds).
""",
    version=health.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Sign in, sign out and navigation"},
        {"name": "Dashboard", "description": "Role-specific statistics"},
        {"name": "Users", "description": "Console user accounts (super admin)"},
        {"name": "Events", "description": "Events and the create event form"},
        {"name": "Venues", "description": "Event locations"},
        {"name": "Vendors", "description": "Service providers"},
        {"name": "Exhibitors", "description": "Brands taking booths"},
        {"name": "Societies", "description": "Partner societies"},
        {"name": "Registration", "description": "Public event registration"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(BoothBuzzException)
async def handle_boothbuzz_exception(request: Request, exc: BoothBuzzException):
    """Handle custom Booth Buzz exceptions."""
    return await boothbuzz_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: Exception):
    """Handle malformed request bodies (including multipart JSON payloads)."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(auth_routes.router, prefix=API_PREFIX, tags=["Auth"])
app.include_router(auth_routes.navigation_router, prefix=API_PREFIX, tags=["Auth"])

# Health check endpoints
app.include_router(health.router, prefix=API_PREFIX, tags=["Health"])

# Console pages
app.include_router(dashboard.router, prefix=API_PREFIX, tags=["Dashboard"])
app.include_router(users.router, prefix=API_PREFIX, tags=["Users"])
app.include_router(events.router, prefix=API_PREFIX, tags=["Events"])
app.include_router(venues.router, prefix=API_PREFIX, tags=["Venues"])
app.include_router(vendors.router, prefix=API_PREFIX, tags=["Vendors"])
app.include_router(exhibitors.router, prefix=API_PREFIX, tags=["Exhibitors"])
app.include_router(societies.router, prefix=API_PREFIX, tags=["Societies"])

# Public registration page
app.include_router(registration.router, prefix=API_PREFIX, tags=["Registration"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Booth Buzz API",
        "version": health.VERSION,
        "docs": "/docs",
        "health": f"{API_PREFIX}/health",
    }
