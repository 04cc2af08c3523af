# =============================================================================
# core/forms/event.py - Create/Edit Event Form
# =============================================================================
# Picking a venue fills in the venue name, the city (last comma-separated
# part of the venue's location) and the capacity (the venue's capacity, or
# 100 when it has none). The copy is taken once, from the venue list loaded
# when the venue was picked; editing the venue later doesn't touch the form.
# =============================================================================

from datetime import date
from typing import Iterable

from app.config import settings
from core.models import EventForm, EventView, ImageUpload, VenueView
from core.services import EventService
from lib.utils import city_from_location

from .flow import FormFlow
from .validators import FieldErrors, check_min_length, check_range, check_required

DEFAULT_CAPACITY = 100


def apply_venue_selection(
    form: EventForm,
    venue_id: str,
    venues: Iterable[VenueView],
) -> EventForm:
    """
    Return a copy of the form with the chosen venue's details filled in.

    An unknown venue id only sets venue_id; the other fields are left as the
    user typed them.
    """
    venue = next((v for v in venues if v.id == venue_id), None)
    if venue is None:
        return form.model_copy(update={"venue_id": venue_id})
    return form.model_copy(update={
        "venue_id": venue.id,
        "venue_name": venue.name,
        "city": city_from_location(venue.location),
        "max_capacity": venue.member_count or DEFAULT_CAPACITY,
    })


def validate_image(image: ImageUpload, max_bytes: int | None = None) -> str | None:
    """Message for an unacceptable image file, or None."""
    max_bytes = max_bytes if max_bytes is not None else settings.max_image_size_bytes
    if not image.content_type.startswith("image/"):
        return "Please select a valid image file"
    if image.size > max_bytes:
        return f"Image size must be less than {max_bytes // (1024 * 1024)}MB"
    return None


def validate_event(
    form: EventForm,
    image: ImageUpload | None = None,
    today: date | None = None,
) -> FieldErrors:
    errors: FieldErrors = {}
    today = today or date.today()

    check_min_length(
        errors, "title", form.title, 3,
        "Event title is required",
        "Event title must be at least 3 characters",
    )
    check_min_length(
        errors, "description", form.description, 10,
        "Event description is required",
        "Description must be at least 10 characters",
    )

    if check_required(errors, "eventDate", form.event_date, "Event date is required"):
        try:
            event_date = date.fromisoformat(form.event_date)
        except ValueError:
            errors["eventDate"] = "Please enter a valid date"
        else:
            if event_date < today:
                errors["eventDate"] = "Event date cannot be in the past"

    check_required(errors, "eventTime", form.event_time, "Event time is required")
    check_required(errors, "venueId", form.venue_id, "Please select a venue")
    check_required(errors, "city", form.city, "City is required")
    check_range(errors, "maxCapacity", form.max_capacity, "Maximum capacity must be at least 10", minimum=10)

    check_required(errors, "addressLine1", form.address_line1, "Address line 1 is required")
    check_required(errors, "addressStandard", form.address_standard, "Standard address format is required")
    check_range(errors, "areaSqFt", form.area_sq_ft, "Area must be greater than 0", minimum=0, exclusive_minimum=True)
    check_required(errors, "kindOfSpace", form.kind_of_space, "Kind of space is required")
    check_range(errors, "pricingPerDay", form.pricing_per_day, "Pricing per day cannot be negative", minimum=0)
    check_range(errors, "facilityAreaSqFt", form.facility_area_sq_ft, "Facility area cannot be negative", minimum=0)
    check_range(errors, "noOfStalls", form.no_of_stalls, "Number of stalls cannot be negative", minimum=0)
    check_range(errors, "noOfFlats", form.no_of_flats, "Number of flats cannot be negative", minimum=0)

    if image is not None:
        message = validate_image(image)
        if message:
            errors["eventImage"] = message
    elif not form.event_image_url:
        errors["eventImage"] = "Event image is required"

    return errors


class EventFormFlow(FormFlow[EventForm]):
    """
    Create or edit one event.

    The image file, if any, is bound to the flow because it arrives next to
    the JSON payload rather than inside it.
    """

    entity = "event"
    redirect_to = "/events"

    def __init__(
        self,
        service: EventService,
        created_by: str | None = None,
        record_id: str | None = None,
        image: ImageUpload | None = None,
        today: date | None = None,
    ):
        super().__init__("update" if record_id else "create")
        self.service = service
        self.created_by = created_by
        self.record_id = record_id
        self.image = image
        self.today = today

    def validate(self, form: EventForm) -> FieldErrors:
        return validate_event(form, self.image, self.today)

    def perform(self, form: EventForm) -> EventView:
        if self.record_id:
            return self.service.update_event(self.record_id, form, self.image)
        return self.service.create_event(form, self.image, self.created_by)
