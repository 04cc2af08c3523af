# =============================================================================
# core/forms/society.py - Add/Edit Society Form
# =============================================================================

from core.models import SocietyForm, SocietyView
from core.services import SocietyService

from .flow import FormFlow
from .validators import FieldErrors, check_email, check_phone, check_range, check_required


def validate_society(form: SocietyForm) -> FieldErrors:
    errors: FieldErrors = {}
    check_required(errors, "name", form.name, "Society name is required")
    check_required(errors, "location", form.location, "Location is required")
    check_required(errors, "contactPerson", form.contact_person, "Contact person is required")
    check_email(errors, "email", form.email)
    check_phone(errors, "phone", form.phone, required_message="Phone is required")
    check_range(errors, "memberCount", form.member_count, "Member count must be greater than 0", minimum=0, exclusive_minimum=True)
    check_required(errors, "facilities", form.facilities, "Please select at least one facility")
    return errors


class SocietyFormFlow(FormFlow[SocietyForm]):
    entity = "society"
    redirect_to = "/societies"

    def __init__(self, service: SocietyService, record_id: str | None = None):
        super().__init__("update" if record_id else "create")
        self.service = service
        self.record_id = record_id

    def validate(self, form: SocietyForm) -> FieldErrors:
        return validate_society(form)

    def perform(self, form: SocietyForm) -> SocietyView:
        if self.record_id:
            return self.service.update(self.record_id, form.to_row())
        return self.service.create(form.to_row())
