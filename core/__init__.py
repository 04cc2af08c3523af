# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: View models (row -> console shape) and form payloads
# - forms/: Form validation and the submit state machine
# - services/: Table fetchers and per-entity read/write services
# - navigation.py: Role-based sidebar table
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
