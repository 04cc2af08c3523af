# =============================================================================
# core/services/exhibitor_service.py - Exhibitor Records
# =============================================================================

from core.models import ExhibitorView

from .entity_service import EntityService


class ExhibitorService(EntityService[ExhibitorView]):
    table = "exhibitors"
    entity = "exhibitor"
    view = ExhibitorView
