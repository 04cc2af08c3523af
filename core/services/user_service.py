# =============================================================================
# core/services/user_service.py - User Accounts and Profiles
# =============================================================================
# A console user is two records: an identity in Supabase Auth and a profile
# row in the users table, joined by id.
#
# Creating a user is therefore two writes:
#   1. auth sign-up (on a throwaway auth client, see SupabaseClient)
#   2. profile insert with the new identity's id
# If step 2 fails, step 1 is undone by deleting the auth identity through
# the admin API. That needs the service key; without it, or if the delete
# itself fails, the orphaned identity is logged for an operator.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Callable

from supabase import Client

from app.exceptions import (
    EntityNotFoundError,
    NotAllowedError,
    PartialWriteError,
    RemoteStoreError,
)
from core.models import UserCreateForm, UserUpdateForm, UserView
from lib.supabase_client import SupabaseClient, store_error_message

from .entity_service import EntityService

logger = logging.getLogger(__name__)


class UserService(EntityService[UserView]):
    table = "users"
    entity = "user"
    view = UserView

    def __init__(
        self,
        client: Client,
        auth_client_factory: Callable[[], Client] = SupabaseClient.new_auth_client,
        admin_enabled: bool | None = None,
    ):
        super().__init__(client)
        self._auth_client_factory = auth_client_factory
        self._admin_enabled = (
            SupabaseClient.has_admin_access() if admin_enabled is None else admin_enabled
        )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def find_by_email(self, email: str) -> UserView | None:
        """Profile row for an e-mail address, or None."""
        response = self._run(
            "fetch",
            lambda: self.client.table(self.table).select("*").eq("email", email).limit(1).execute(),
        )
        if not response.data:
            return None
        return self.view.from_row(response.data[0])

    # -------------------------------------------------------------------------
    # Create (two-step)
    # -------------------------------------------------------------------------

    def create_user(self, form: UserCreateForm) -> UserView:
        """
        Sign up the identity, then write the profile row.

        Raises:
            RemoteStoreError: If sign-up is rejected (nothing was written)
            PartialWriteError: If the profile insert failed after sign-up
        """
        auth_client = self._auth_client_factory()
        try:
            response = auth_client.auth.sign_up({
                "email": form.email,
                "password": form.password,
                "options": {"data": form.sign_up_metadata()},
            })
        except Exception as e:
            message = store_error_message(e)
            logger.error(f"Sign-up failed for {form.email}: {message}")
            raise RemoteStoreError(message, operation="sign up", table="auth.users") from e

        auth_user = getattr(response, "user", None)
        if auth_user is None:
            raise RemoteStoreError("Failed to create user account", operation="sign up", table="auth.users")

        try:
            return self.create(form.to_row(auth_user.id))
        except RemoteStoreError as e:
            logger.error(f"Profile creation failed for auth user {auth_user.id}: {e.message}")
            compensated = self._delete_identity(auth_user.id)
            raise PartialWriteError(
                f"Failed to create user profile: {e.message}",
                compensated=compensated,
            ) from e

    def _delete_identity(self, auth_user_id: str) -> bool:
        """Undo a sign-up. Returns True if the identity is gone."""
        if not self._admin_enabled:
            logger.error(
                f"Auth user {auth_user_id} has no profile and cannot be removed "
                f"without SUPABASE_SERVICE_KEY; delete it manually"
            )
            return False
        try:
            self.client.auth.admin.delete_user(auth_user_id)
        except Exception as e:
            logger.error(
                f"Failed to remove auth user {auth_user_id} after profile failure, "
                f"identity is orphaned: {store_error_message(e)}"
            )
            return False
        logger.info(f"Removed auth user {auth_user_id} after profile failure")
        return True

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    def update_user(self, actor: UserView, record_id: str, form: UserUpdateForm) -> UserView:
        """
        Update a profile on behalf of the signed-in user.

        Only a super admin may edit someone else's profile, or change anyone's
        role or status.

        Raises:
            NotAllowedError: If the actor may not make this change
            EntityNotFoundError: If the target profile doesn't exist
        """
        if not actor.is_super_admin and actor.id != record_id:
            raise NotAllowedError("You can only update your own profile")

        try:
            existing = self.get(record_id)
        except EntityNotFoundError:
            raise EntityNotFoundError(
                self.entity, record_id, message="User to be updated not found in database"
            )

        if not actor.is_super_admin and (form.role != existing.role or form.status != existing.status):
            logger.warning(f"User {actor.id} tried to change role or status of {record_id}")
            raise NotAllowedError("Only a super admin can change roles or status")

        return self.update(record_id, form.to_row())

    def touch_last_login(self, email: str) -> None:
        """Stamp last_login after a successful sign-in. Failures are only logged."""
        try:
            self.client.table(self.table).update(
                {"last_login": datetime.now(timezone.utc).isoformat()}
            ).eq("email", email).execute()
        except Exception as e:
            logger.warning(f"Could not update last_login for {email}: {store_error_message(e)}")
