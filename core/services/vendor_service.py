# =============================================================================
# core/services/vendor_service.py - Vendor Records
# =============================================================================

from core.models import VendorView

from .entity_service import EntityService


class VendorService(EntityService[VendorView]):
    table = "vendors"
    entity = "vendor"
    view = VendorView
