# =============================================================================
# app/routers/societies.py - Society Endpoints
# =============================================================================
# Societies page. Society records are held in process memory (seeded with
# sample data) behind the same interface as the stored entities.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.auth import require_roles
from app.dependencies import SocietyServiceDep
from app.routers.responses import DeleteResponse, ListResponse, submitted, views
from core.forms import FormOutcome, SocietyFormFlow
from core.models import SocietyForm, SocietyView
from core.navigation import roles_for

router = APIRouter(
    prefix="/societies",
    dependencies=[Depends(require_roles(*roles_for("/societies"), action="manage societies"))],
)


@router.get("", response_model=ListResponse)
def list_societies(
    service: SocietyServiceDep,
    status: Annotated[str | None, Query(description="Filter by status ('all' for every status)")] = None,
    search: Annotated[str | None, Query(description="Match name, location or contact person")] = None,
):
    return views(service.list_societies(status=status, search=search))


@router.get("/{society_id}", response_model=SocietyView)
def get_society(society_id: str, service: SocietyServiceDep):
    return service.get(society_id)


@router.post("", response_model=FormOutcome, status_code=201)
def create_society(form: SocietyForm, service: SocietyServiceDep):
    """Submit the add society form."""
    return submitted(SocietyFormFlow(service).submit(form))


@router.put("/{society_id}", response_model=FormOutcome)
def update_society(society_id: str, form: SocietyForm, service: SocietyServiceDep):
    return submitted(SocietyFormFlow(service, record_id=society_id).submit(form))


@router.delete("/{society_id}", response_model=DeleteResponse)
def delete_society(society_id: str, service: SocietyServiceDep):
    service.delete(society_id)
    return DeleteResponse(id=society_id)
