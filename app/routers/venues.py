# =============================================================================
# app/routers/venues.py - Venue Endpoints
# =============================================================================
# Venues page: list, add, edit and delete event locations.
# A venue whose name or first address line is already taken is refused.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import require_roles
from app.dependencies import SupabaseDep, VenueServiceDep
from app.routers.responses import DeleteResponse, ListResponse, list_response, submitted
from core.forms import FormOutcome, VenueFormFlow
from core.models import VenueForm, VenueView
from core.navigation import roles_for
from core.services import venues_fetcher

router = APIRouter(
    prefix="/venues",
    dependencies=[Depends(require_roles(*roles_for("/venues"), action="manage venues"))],
)


@router.get("", response_model=ListResponse)
def list_venues(client: SupabaseDep):
    """All venues, by name."""
    return list_response(venues_fetcher(client).mount().snapshot())


@router.get("/{venue_id}", response_model=VenueView)
def get_venue(venue_id: str, service: VenueServiceDep):
    return service.get(venue_id)


@router.post("", response_model=FormOutcome, status_code=201)
def create_venue(form: VenueForm, service: VenueServiceDep):
    """Submit the add venue form."""
    return submitted(VenueFormFlow(service).submit(form))


@router.put("/{venue_id}", response_model=FormOutcome)
def update_venue(venue_id: str, form: VenueForm, service: VenueServiceDep):
    return submitted(VenueFormFlow(service, record_id=venue_id).submit(form))


@router.delete("/{venue_id}", response_model=DeleteResponse)
def delete_venue(venue_id: str, service: VenueServiceDep):
    service.delete(venue_id)
    return DeleteResponse(id=venue_id)
