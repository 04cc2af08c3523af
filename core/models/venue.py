# =============================================================================
# core/models/venue.py - Venue View Models
# =============================================================================
# Venues are the physical spaces events are held in. The stored "capacity"
# column is surfaced to the console as memberCount.
# =============================================================================

from typing import Any, Literal

from pydantic import Field

from .base import FormModel, ViewModel


VenueStatus = Literal["active", "inactive", "pending"]


class CustomContact(ViewModel):
    """An extra named contact attached to a venue."""

    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""


class VenueView(ViewModel):
    """A row of the venues table as the console sees it."""

    column_renames = {"capacity": "member_count"}

    id: str
    name: str = ""
    location: str = ""
    contact_person: str = ""
    contact_role: str = ""
    email: str = ""
    phone: str = ""
    member_count: int = 0
    facilities: list[str] = []
    amenities: list[str] = []
    active_events: int = 0
    total_revenue: float = 0
    status: VenueStatus = "active"
    joined_date: str = ""
    description: str = ""

    address_line1: str = ""
    address_landmark: str = ""
    address_standard: str = ""
    area_sq_ft: float = 0
    kind_of_space: str = ""
    is_covered: bool = False
    pricing_per_day: float = 0
    facility_area_sq_ft: float = 0
    no_of_stalls: int = 0
    facility_covered: bool = False
    no_of_flats: int = 0
    available_hours: str = ""
    parking_spaces: int = 0
    catering_allowed: bool = False
    alcohol_allowed: bool = False
    smoking_allowed: bool = False

    latitude: float = 0
    longitude: float = 0
    formatted_address: str = ""

    custom_contacts: list[CustomContact] = []

    created_at: str = ""
    updated_at: str = ""


# =============================================================================
# Form Payloads
# =============================================================================

class CustomContactForm(FormModel):
    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""


class VenueForm(FormModel):
    """
    Payload of the add/edit venue form.

    member_count is the venue capacity; it is stored in the capacity column.
    """

    name: str = ""
    location: str = Field(default="", description='Free text, "Street, Area, City"')
    contact_person: str = ""
    contact_role: str = ""
    email: str = ""
    phone: str = ""
    member_count: int = 0
    facilities: list[str] = []
    amenities: list[str] = []
    description: str = ""
    status: VenueStatus = "active"

    address_line1: str = ""
    address_landmark: str = ""
    address_standard: str = ""
    area_sq_ft: float = 0
    kind_of_space: str = ""
    is_covered: bool = False
    pricing_per_day: float = 0
    facility_area_sq_ft: float = 0
    no_of_stalls: int = 0
    facility_covered: bool = False
    no_of_flats: int = 0

    latitude: float = 0
    longitude: float = 0
    formatted_address: str = ""

    custom_contacts: list[CustomContactForm] = []

    def to_row(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "location": self.location,
            "contact_person": self.contact_person,
            "contact_role": self.contact_role,
            "email": self.email,
            "phone": self.phone,
            "capacity": self.member_count,
            "facilities": self.facilities,
            "amenities": self.amenities,
            "description": self.description,
            "status": self.status,
            "address_line1": self.address_line1,
            "address_landmark": self.address_landmark,
            "address_standard": self.address_standard,
            "area_sq_ft": self.area_sq_ft,
            "kind_of_space": self.kind_of_space,
            "is_covered": self.is_covered,
            "pricing_per_day": self.pricing_per_day,
            "facility_area_sq_ft": self.facility_area_sq_ft,
            "no_of_stalls": self.no_of_stalls,
            "facility_covered": self.facility_covered,
            "no_of_flats": self.no_of_flats,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "formatted_address": self.formatted_address,
            "custom_contacts": [contact.model_dump() for contact in self.custom_contacts],
        }
