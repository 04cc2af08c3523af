# =============================================================================
# core/models/event.py - Event View Models
# =============================================================================
# Events are held at a venue. The venue is referenced by id and by a
# denormalized name (copied at creation time); when the name column is empty
# the events list falls back to the embedded venues(name) relation.
#
# Status flow: draft -> published -> ongoing -> completed, or cancelled.
# =============================================================================

from typing import Any, Literal

from pydantic import BaseModel, Field

from .base import FormModel, ViewModel


EventStatus = Literal["draft", "published", "ongoing", "completed", "cancelled"]
PlanType = Literal["Plan A", "Plan B", "Plan C", "Custom"]

EVENT_STATUSES: tuple[str, ...] = ("draft", "published", "ongoing", "completed", "cancelled")
ACTIVE_EVENT_STATUSES: frozenset[str] = frozenset({"published", "ongoing"})

PLAN_TYPES: dict[str, str] = {
    "Plan A": "Plan A - Basic Package",
    "Plan B": "Plan B - Standard Package",
    "Plan C": "Plan C - Premium Package",
    "Custom": "Custom Package",
}


class EventView(ViewModel):
    """A row of the events table as the console sees it."""

    column_renames = {
        "event_date": "date",
        "event_time": "time",
        "venue_name": "venue",
        "vendor_ids": "vendors",
    }

    id: str
    title: str = ""
    description: str = ""
    date: str = ""
    event_end_date: str = ""
    time: str = ""
    event_end_time: str = ""
    venue: str = ""
    venue_id: str = ""
    city: str = ""
    status: EventStatus = "draft"
    attendees: int = 0
    max_capacity: int = 0
    plan_type: str = ""
    vendors: list[str] = []
    created_by: str = ""
    total_revenue: float = 0
    event_image_url: str = ""

    # Physical space
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
    amenities: str = ""
    no_of_flats: int = 0
    price_per_hour: float = 0
    available_hours: str = ""
    parking_spaces: int = 0
    catering_allowed: bool = False
    alcohol_allowed: bool = False
    smoking_allowed: bool = False

    # Map position
    latitude: float = 0
    longitude: float = 0
    formatted_address: str = ""

    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "EventView":
        row = dict(row)
        # "venue" is the embedded relation from select("*, venue:venues(name)")
        embedded = row.pop("venue", None)
        if not row.get("venue_name") and isinstance(embedded, dict):
            row["venue_name"] = embedded.get("name")
        return super().from_row(row)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_EVENT_STATUSES


class EventRegistrationView(ViewModel):
    """A row of event_registrations (public self-service sign-ups)."""

    id: str
    event_id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    created_at: str = ""


# =============================================================================
# Form Payloads
# =============================================================================

class ImageUpload(BaseModel):
    """An image file attached to the create event form."""

    filename: str
    content_type: str = ""
    content: bytes = Field(default=b"", repr=False)

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        """Text after the last dot, as the storage path suffix."""
        return self.filename.rsplit(".", 1)[-1] if "." in self.filename else "bin"


class EventForm(FormModel):
    """
    Payload of the create/edit event form.

    venue_name, city and max_capacity are normally filled in by picking a
    venue (see core.forms.event.apply_venue_selection) but stay editable.
    """

    title: str = ""
    description: str = ""
    event_date: str = Field(default="", description="ISO date (YYYY-MM-DD)")
    event_time: str = ""
    event_end_date: str = ""
    event_end_time: str = ""
    venue_id: str = ""
    venue_name: str = ""
    city: str = ""
    max_capacity: int = 100
    plan_type: PlanType = "Plan A"
    status: EventStatus = "draft"
    attendees: int = 0
    total_revenue: float = 0

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
    amenities: str = ""
    no_of_flats: int = 0

    latitude: float = 0
    longitude: float = 0
    formatted_address: str = ""

    event_image_url: str = Field(default="", description="Existing image URL when no new file is attached")

    def to_row(self) -> dict[str, Any]:
        """Columns written for this form; image URL and ownership are added by the service."""
        return {
            "title": self.title,
            "description": self.description,
            "event_date": self.event_date,
            "event_time": self.event_time,
            "event_end_date": self.event_end_date or None,
            "event_end_time": self.event_end_time or None,
            "venue_id": self.venue_id,
            "venue_name": self.venue_name,
            "city": self.city,
            "max_capacity": self.max_capacity,
            "plan_type": self.plan_type,
            "status": self.status,
            "attendees": self.attendees,
            "total_revenue": self.total_revenue,
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
            "amenities": self.amenities,
            "no_of_flats": self.no_of_flats,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "formatted_address": self.formatted_address,
            "event_image_url": self.event_image_url or None,
        }


class RegistrationForm(FormModel):
    """Public sign-up for an event."""

    name: str = ""
    email: str = ""
    phone: str = ""
