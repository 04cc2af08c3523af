# =============================================================================
# app/routers/vendors.py - Vendor Endpoints
# =============================================================================
# Vendors page: list, add, edit and delete service providers.
# Open to the roles that see Vendors in the sidebar.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import require_roles
from app.dependencies import SupabaseDep, VendorServiceDep
from app.routers.responses import DeleteResponse, ListResponse, list_response, submitted
from core.forms import FormOutcome, VendorFormFlow
from core.models import VendorForm, VendorView
from core.navigation import roles_for
from core.services import vendors_fetcher

router = APIRouter(
    prefix="/vendors",
    dependencies=[Depends(require_roles(*roles_for("/vendors"), action="manage vendors"))],
)


@router.get("", response_model=ListResponse)
def list_vendors(client: SupabaseDep):
    """All vendors, by name."""
    return list_response(vendors_fetcher(client).mount().snapshot())


@router.get("/{vendor_id}", response_model=VendorView)
def get_vendor(vendor_id: str, service: VendorServiceDep):
    return service.get(vendor_id)


@router.post("", response_model=FormOutcome, status_code=201)
def create_vendor(form: VendorForm, service: VendorServiceDep):
    """
    Submit the add vendor form.

    Returns 422 with a field error map when validation or the write fails.
    """
    return submitted(VendorFormFlow(service).submit(form))


@router.put("/{vendor_id}", response_model=FormOutcome)
def update_vendor(vendor_id: str, form: VendorForm, service: VendorServiceDep):
    return submitted(VendorFormFlow(service, record_id=vendor_id).submit(form))


@router.delete("/{vendor_id}", response_model=DeleteResponse)
def delete_vendor(vendor_id: str, service: VendorServiceDep):
    service.delete(vendor_id)
    return DeleteResponse(id=vendor_id)
