# =============================================================================
# core/forms/user.py - Add/Edit User Forms
# =============================================================================
# City is required for every role except super_admin; super admins are not
# tied to a city and are stored with a NULL city.
# =============================================================================

from core.models import Role, UserCreateForm, UserUpdateForm, UserView
from core.services import UserService

from .flow import FormFlow
from .validators import (
    FieldErrors,
    check_email,
    check_min_length,
    check_password,
    check_phone,
    check_required,
)


def _validate_identity(form: UserCreateForm | UserUpdateForm, errors: FieldErrors) -> None:
    check_min_length(
        errors, "name", form.name, 2,
        "Name is required",
        "Name must be at least 2 characters",
    )
    check_email(errors, "email", form.email)
    check_phone(errors, "phone", form.phone)
    if form.role is None:
        errors["role"] = "Role is required"
    if form.role is not Role.SUPER_ADMIN:
        check_required(errors, "city", form.city, "City is required for this role")


def validate_new_user(form: UserCreateForm) -> FieldErrors:
    errors: FieldErrors = {}
    _validate_identity(form, errors)
    check_password(errors, form.password, form.confirm_password)
    return errors


def validate_user_update(form: UserUpdateForm) -> FieldErrors:
    errors: FieldErrors = {}
    _validate_identity(form, errors)
    return errors


class UserCreateFlow(FormFlow[UserCreateForm]):
    """Sign-up plus profile row; see UserService.create_user."""

    entity = "user"
    redirect_to = "/users"

    def __init__(self, service: UserService):
        super().__init__("create")
        self.service = service

    def validate(self, form: UserCreateForm) -> FieldErrors:
        return validate_new_user(form)

    def perform(self, form: UserCreateForm) -> UserView:
        return self.service.create_user(form)


class UserUpdateFlow(FormFlow[UserUpdateForm]):
    entity = "user"
    redirect_to = "/users"

    def __init__(self, service: UserService, actor: UserView, record_id: str):
        super().__init__("update")
        self.service = service
        self.actor = actor
        self.record_id = record_id

    def validate(self, form: UserUpdateForm) -> FieldErrors:
        return validate_user_update(form)

    def perform(self, form: UserUpdateForm) -> UserView:
        return self.service.update_user(self.actor, self.record_id, form)
