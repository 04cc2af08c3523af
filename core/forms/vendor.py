# =============================================================================
# core/forms/vendor.py - Add/Edit Vendor Form
# =============================================================================

from core.models import VendorForm, VendorView
from core.services import VendorService

from .flow import FormFlow
from .validators import (
    FieldErrors,
    check_email,
    check_min_length,
    check_phone,
    check_range,
    check_required,
)


def validate_vendor(form: VendorForm) -> FieldErrors:
    errors: FieldErrors = {}
    check_min_length(
        errors, "name", form.name, 3,
        "Vendor name is required",
        "Vendor name must be at least 3 characters",
    )
    check_required(errors, "city", form.city, "City is required")
    check_required(errors, "contactPerson", form.contact_person, "Contact person is required")
    check_email(errors, "email", form.email)
    check_phone(errors, "phone", form.phone)
    check_range(errors, "rating", form.rating, "Rating must be between 0 and 5", minimum=0, maximum=5)
    check_range(errors, "completedJobs", form.completed_jobs, "Completed jobs cannot be negative", minimum=0)
    return errors


class VendorFormFlow(FormFlow[VendorForm]):
    entity = "vendor"
    redirect_to = "/vendors"

    def __init__(self, service: VendorService, record_id: str | None = None):
        super().__init__("update" if record_id else "create")
        self.service = service
        self.record_id = record_id

    def validate(self, form: VendorForm) -> FieldErrors:
        return validate_vendor(form)

    def perform(self, form: VendorForm) -> VendorView:
        if self.record_id:
            return self.service.update(self.record_id, form.to_row())
        return self.service.create(form.to_row())
