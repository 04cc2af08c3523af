# =============================================================================
# core/models/vendor.py - Vendor View Models
# =============================================================================

from enum import Enum
from typing import Any, Literal

from pydantic import computed_field

from lib.utils import humanize_slug

from .base import FormModel, ViewModel


class VendorCategory(str, Enum):
    """Service categories a vendor can be listed under."""
    SOUND_LIGHTS = "sound_lights"
    CATERING = "catering"
    DECORATION = "decoration"
    SECURITY = "security"
    TRANSPORTATION = "transportation"
    HOUSEKEEPING = "housekeeping"


VendorStatus = Literal["active", "inactive"]


class VendorView(ViewModel):
    """A row of the vendors table as the console sees it."""

    id: str
    name: str = ""
    category: str = ""
    city: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    rating: float = 0
    completed_jobs: int = 0
    status: VendorStatus = "active"
    price_range: str = ""
    created_at: str = ""
    updated_at: str = ""

    @computed_field(alias="categoryLabel")
    @property
    def category_label(self) -> str:
        """Badge text for the category ("sound_lights" -> "sound lights")."""
        return humanize_slug(self.category)


class VendorForm(FormModel):
    """
    Payload of the add/edit vendor form.

    Example:
        {
            "name": "Acme Lights",
            "category": "sound_lights",
            "city": "Pune",
            "contactPerson": "R. Rao",
            "email": "r@acme.io",
            "phone": "+919876543210",
            "rating": 4.5,
            "completedJobs": 12,
            "status": "active",
            "priceRange": "₹10,000-₹30,000"
        }
    """

    name: str = ""
    category: VendorCategory = VendorCategory.SOUND_LIGHTS
    city: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    rating: float = 0
    completed_jobs: int = 0
    status: VendorStatus = "active"
    price_range: str = ""

    def to_row(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "city": self.city,
            "contact_person": self.contact_person,
            "email": self.email,
            "phone": self.phone,
            "rating": self.rating,
            "completed_jobs": self.completed_jobs,
            "status": self.status,
            "price_range": self.price_range or None,
        }
