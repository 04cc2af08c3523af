# =============================================================================
# core/models/user.py - User View Models
# =============================================================================
# Console users: staff accounts (super admin, city admin, support, sales,
# legal, logistics, accounting) and partner accounts (vendor, society,
# exhibitor). The role decides which pages a user sees; the city scopes what
# a non-super-admin works on.
# =============================================================================

from enum import Enum
from typing import Any, Literal

from pydantic import Field, field_validator

from .base import FormModel, ViewModel


class Role(str, Enum):
    """
    Closed set of console roles.

    Everyone except SUPER_ADMIN is expected to have a city.
    """
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    SUPPORT_TECH = "support_tech"
    SALES_MARKETING = "sales_marketing"
    LEGAL = "legal"
    LOGISTICS = "logistics"
    ACCOUNTING = "accounting"
    VENDOR = "vendor"
    SOCIETY = "society"
    EXHIBITOR = "exhibitor"

    @property
    def label(self) -> str:
        """Display label ("sales_marketing" -> "sales marketing")."""
        return self.value.replace("_", " ")


UserStatus = Literal["active", "inactive"]


class EmergencyContact(ViewModel):
    name: str = ""
    phone: str = ""
    relationship: str = ""


class UserPreferences(ViewModel):
    language: str = ""
    timezone: str = ""
    notifications: bool = False


class UserView(ViewModel):
    """
    A row of the users table as the console sees it.

    Also used as the session user record once someone has signed in.
    """

    id: str
    email: str = ""
    name: str = ""
    role: Role
    city: str = ""
    phone: str = ""
    status: UserStatus = "active"

    # Extended profile
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    state: str = ""
    pincode: str = ""
    country: str = ""
    date_of_birth: str = ""
    gender: str = ""
    department: str = ""
    designation: str = ""
    employee_id: str = ""
    joining_date: str = ""
    emergency_contact: EmergencyContact = Field(default_factory=EmergencyContact)
    preferences: UserPreferences = Field(default_factory=UserPreferences)

    last_login: str = ""
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_super_admin(self) -> bool:
        return self.role is Role.SUPER_ADMIN


# =============================================================================
# Form Payloads
# =============================================================================

class _UserIdentityForm(FormModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    role: Role | None = None
    city: str = ""
    status: UserStatus = "active"

    @field_validator("role", mode="before")
    @classmethod
    def _blank_role(cls, value: Any) -> Any:
        # The role <select> posts "" until something is picked
        return None if value == "" else value

    def stored_city(self) -> str | None:
        """Super admins are global: their city is stored as NULL."""
        if self.role is Role.SUPER_ADMIN:
            return None
        return self.city or None


class UserCreateForm(_UserIdentityForm):
    """
    Payload of the add user form.

    The password pair is only used for the auth sign-up; it is never written
    to the users table.
    """

    password: str = Field(default="", repr=False)
    confirm_password: str = Field(default="", repr=False)

    def to_row(self, user_id: str) -> dict[str, Any]:
        return {
            "id": user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value if self.role else None,
            "city": self.stored_city(),
            "phone": self.phone,
            "status": self.status,
        }

    def sign_up_metadata(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "role": self.role.value if self.role else None,
            "city": self.stored_city(),
            "phone": self.phone,
        }


class UserUpdateForm(_UserIdentityForm):
    """Payload of the edit user form (identity plus extended profile)."""

    first_name: str = ""
    last_name: str = ""
    address: str = ""
    state: str = ""
    pincode: str = ""
    country: str = ""
    department: str = ""
    designation: str = ""

    def to_row(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "name": self.name,
            "role": self.role.value if self.role else None,
            "city": self.stored_city(),
            "phone": self.phone,
            "status": self.status,
            "first_name": self.first_name or None,
            "last_name": self.last_name or None,
            "address": self.address or None,
            "state": self.state or None,
            "pincode": self.pincode or None,
            "country": self.country or None,
            "department": self.department or None,
            "designation": self.designation or None,
        }
