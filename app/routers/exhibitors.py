# =============================================================================
# app/routers/exhibitors.py - Exhibitor Endpoints
# =============================================================================
# Exhibitors page: brands taking booths at events, plus the option lists the
# add exhibitor form offers (categories, sub-categories, sizes).
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import require_roles
from app.dependencies import ExhibitorServiceDep, SupabaseDep
from app.routers.responses import DeleteResponse, ListResponse, list_response, submitted
from core.forms import ExhibitorFormFlow, FormOutcome
from core.models import (
    BOOTH_SIZES,
    BUSINESS_TYPES,
    COMPANY_SIZES,
    EXHIBITOR_SUB_CATEGORIES,
    ExhibitorForm,
    ExhibitorView,
)
from core.navigation import roles_for
from core.services import exhibitors_fetcher

router = APIRouter(
    prefix="/exhibitors",
    dependencies=[Depends(require_roles(*roles_for("/exhibitors"), action="add exhibitors"))],
)


@router.get("", response_model=ListResponse)
def list_exhibitors(client: SupabaseDep):
    """All exhibitors, newest first."""
    return list_response(exhibitors_fetcher(client).mount().snapshot())


@router.get("/options")
def exhibitor_options():
    """Choices for the add exhibitor form's select boxes."""
    return {
        "categories": {
            category: list(sub_categories)
            for category, sub_categories in EXHIBITOR_SUB_CATEGORIES.items()
        },
        "businessTypes": list(BUSINESS_TYPES),
        "companySizes": list(COMPANY_SIZES),
        "boothSizes": list(BOOTH_SIZES),
    }


@router.get("/{exhibitor_id}", response_model=ExhibitorView)
def get_exhibitor(exhibitor_id: str, service: ExhibitorServiceDep):
    return service.get(exhibitor_id)


@router.post("", response_model=FormOutcome, status_code=201)
def create_exhibitor(form: ExhibitorForm, service: ExhibitorServiceDep):
    """Submit the add exhibitor form."""
    return submitted(ExhibitorFormFlow(service).submit(form))


@router.put("/{exhibitor_id}", response_model=FormOutcome)
def update_exhibitor(exhibitor_id: str, form: ExhibitorForm, service: ExhibitorServiceDep):
    return submitted(ExhibitorFormFlow(service, record_id=exhibitor_id).submit(form))


@router.delete("/{exhibitor_id}", response_model=DeleteResponse)
def delete_exhibitor(exhibitor_id: str, service: ExhibitorServiceDep):
    service.delete(exhibitor_id)
    return DeleteResponse(id=exhibitor_id)
