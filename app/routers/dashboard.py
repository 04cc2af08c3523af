# =============================================================================
# app/routers/dashboard.py - Dashboard Endpoint
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import get_current_user
from app.dependencies import DashboardServiceDep
from core.models import DashboardView, UserView

router = APIRouter()


@router.get("/dashboard", response_model=DashboardView)
def get_dashboard(
    service: DashboardServiceDep,
    user: UserView = Depends(get_current_user),
):
    """
    Role-specific dashboard for the signed-in user.

    A list that failed to load is reported under errors; the stats are
    still computed from whatever did load.
    """
    return service.load(user)
