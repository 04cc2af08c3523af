# =============================================================================
# app/ - Booth Buzz HTTP Layer
# =============================================================================
# FastAPI application serving the admin console:
# - main.py: app factory wiring (CORS, error handlers, routers under /api/v1)
# - config.py: settings from the environment
# - auth/: sign-in strategies, bearer token resolution, role gates
# - routers/: one module per console page plus public registration
#
# Handlers stay thin: validation and writes live in core/forms and
# core/services.
# =============================================================================
