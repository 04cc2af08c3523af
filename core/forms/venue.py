# =============================================================================
# core/forms/venue.py - Add/Edit Venue Form
# =============================================================================

from core.models import VenueForm, VenueView
from core.services import VenueService

from .flow import FormFlow
from .validators import (
    FieldErrors,
    check_email,
    check_min_length,
    check_phone,
    check_range,
    check_required,
)


def validate_venue(form: VenueForm) -> FieldErrors:
    errors: FieldErrors = {}
    check_min_length(
        errors, "name", form.name, 3,
        "Venue name is required",
        "Venue name must be at least 3 characters",
    )
    check_required(errors, "location", form.location, "Location is required")
    check_required(errors, "contactPerson", form.contact_person, "Contact person is required")
    check_required(errors, "contactRole", form.contact_role, "Contact role is required")
    check_email(errors, "email", form.email)
    check_phone(errors, "phone", form.phone)
    check_range(errors, "memberCount", form.member_count, "Capacity must be greater than 0", minimum=0, exclusive_minimum=True)
    check_range(errors, "pricingPerDay", form.pricing_per_day, "Pricing per day cannot be negative", minimum=0)
    check_required(errors, "addressLine1", form.address_line1, "Address line 1 is required")
    check_required(errors, "addressStandard", form.address_standard, "Standard address format is required")
    check_range(errors, "areaSqFt", form.area_sq_ft, "Area must be greater than 0", minimum=0, exclusive_minimum=True)
    check_required(errors, "kindOfSpace", form.kind_of_space, "Kind of space is required")
    check_range(errors, "facilityAreaSqFt", form.facility_area_sq_ft, "Facility area cannot be negative", minimum=0)
    return errors


class VenueFormFlow(FormFlow[VenueForm]):
    """Venue names and street addresses must not clash with another venue."""

    entity = "venue"
    redirect_to = "/venues"

    def __init__(self, service: VenueService, record_id: str | None = None):
        super().__init__("update" if record_id else "create")
        self.service = service
        self.record_id = record_id

    def validate(self, form: VenueForm) -> FieldErrors:
        return validate_venue(form)

    def perform(self, form: VenueForm) -> VenueView:
        self.service.ensure_unique(form.name, form.address_line1, exclude_id=self.record_id)
        if self.record_id:
            return self.service.update(self.record_id, form.to_row())
        return self.service.create(form.to_row())
