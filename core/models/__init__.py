# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains the console's data shapes:
# - base.py: ViewModel (row -> console shape) and FormModel bases
# - user.py: Roles, user view and user forms
# - event.py: Event view, event form, image upload, public registration
# - venue.py: Venue view and form
# - vendor.py: Vendor view, categories and form
# - exhibitor.py: Exhibitor view, category tables and form
# - society.py: Society view and form
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Bases
# -----------------------------------------------------------------------------
from .base import FormModel, ViewModel

# -----------------------------------------------------------------------------
# Users
# -----------------------------------------------------------------------------
from .user import (
    EmergencyContact,
    Role,
    UserCreateForm,
    UserPreferences,
    UserStatus,
    UserUpdateForm,
    UserView,
)

# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------
from .event import (
    ACTIVE_EVENT_STATUSES,
    EVENT_STATUSES,
    PLAN_TYPES,
    EventForm,
    EventRegistrationView,
    EventStatus,
    EventView,
    ImageUpload,
    PlanType,
    RegistrationForm,
)

# -----------------------------------------------------------------------------
# Venues, Vendors, Exhibitors, Societies
# -----------------------------------------------------------------------------
from .venue import CustomContact, CustomContactForm, VenueForm, VenueStatus, VenueView
from .vendor import VendorCategory, VendorForm, VendorStatus, VendorView
from .exhibitor import (
    BOOTH_SIZES,
    BUSINESS_TYPES,
    COMPANY_SIZES,
    EXHIBITOR_CATEGORIES,
    EXHIBITOR_SUB_CATEGORIES,
    ExhibitorForm,
    ExhibitorStatus,
    ExhibitorView,
    PaymentStatus,
    SocialLinks,
    SocialLinksForm,
)
from .society import SocietyForm, SocietyStatus, SocietyView
from .dashboard import DashboardView, StatCard

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Bases
    "FormModel",
    "ViewModel",
    # Users
    "EmergencyContact",
    "Role",
    "UserCreateForm",
    "UserPreferences",
    "UserStatus",
    "UserUpdateForm",
    "UserView",
    # Events
    "ACTIVE_EVENT_STATUSES",
    "EVENT_STATUSES",
    "PLAN_TYPES",
    "EventForm",
    "EventRegistrationView",
    "EventStatus",
    "EventView",
    "ImageUpload",
    "PlanType",
    "RegistrationForm",
    # Venues
    "CustomContact",
    "CustomContactForm",
    "VenueForm",
    "VenueStatus",
    "VenueView",
    # Vendors
    "VendorCategory",
    "VendorForm",
    "VendorStatus",
    "VendorView",
    # Exhibitors
    "BOOTH_SIZES",
    "BUSINESS_TYPES",
    "COMPANY_SIZES",
    "EXHIBITOR_CATEGORIES",
    "EXHIBITOR_SUB_CATEGORIES",
    "ExhibitorForm",
    "ExhibitorStatus",
    "ExhibitorView",
    "PaymentStatus",
    "SocialLinks",
    "SocialLinksForm",
    # Societies
    "SocietyForm",
    "SocietyStatus",
    "SocietyView",
    # Dashboard
    "DashboardView",
    "StatCard",
]
