# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Booth Buzz API:
# - fakes.py: In-memory stand-in for the Supabase client
# - test_models.py: Row -> view model mapping and form payloads
# - test_table_fetcher.py: List loading and stale-response handling
# - test_forms.py: Field rules and the submit state machine
# - test_services.py: Entity services against the fake store
# - test_navigation.py, test_auth.py: Role gates and sign-in
# - test_routers.py: Endpoints through the FastAPI TestClient
#
# Run tests with: pytest
# =============================================================================
