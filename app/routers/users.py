# =============================================================================
# app/routers/users.py - User Management Endpoints
# =============================================================================
# Users page (super admin only). Creating a user signs up an auth identity
# and writes its profile row; a failed profile write removes the identity
# again. Any signed-in user may update their own profile.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import get_current_user, require_roles
from app.dependencies import SupabaseDep, UserServiceDep
from app.routers.responses import DeleteResponse, ListResponse, list_response, submitted
from core.forms import FormOutcome, UserCreateFlow, UserUpdateFlow
from core.models import Role, UserCreateForm, UserUpdateForm, UserView
from core.services import users_fetcher

router = APIRouter(prefix="/users")

super_admin_only = require_roles(Role.SUPER_ADMIN, action="manage users")


@router.get("", response_model=ListResponse, dependencies=[Depends(super_admin_only)])
def list_users(client: SupabaseDep):
    return list_response(users_fetcher(client).mount().snapshot())


@router.get("/{user_id}", response_model=UserView, dependencies=[Depends(super_admin_only)])
def get_user(user_id: str, service: UserServiceDep):
    return service.get(user_id)


@router.post("", response_model=FormOutcome, status_code=201, dependencies=[Depends(super_admin_only)])
def create_user(form: UserCreateForm, service: UserServiceDep):
    """
    Submit the add user form.

    The password pair is validated here and only ever sent to Supabase Auth.
    """
    return submitted(UserCreateFlow(service).submit(form))


@router.put("/{user_id}", response_model=FormOutcome)
def update_user(
    user_id: str,
    form: UserUpdateForm,
    service: UserServiceDep,
    user: UserView = Depends(get_current_user),
):
    """Update a profile. Non super admins may only update their own."""
    return submitted(UserUpdateFlow(service, user, user_id).submit(form))


@router.delete("/{user_id}", response_model=DeleteResponse, dependencies=[Depends(super_admin_only)])
def delete_user(user_id: str, service: UserServiceDep):
    """Delete the profile row. The auth identity is left to the Supabase dashboard."""
    service.delete(user_id)
    return DeleteResponse(id=user_id)
