# =============================================================================
# core/forms/exhibitor.py - Add/Edit Exhibitor Form
# =============================================================================

from core.models import EXHIBITOR_SUB_CATEGORIES, ExhibitorForm, ExhibitorView
from core.services import ExhibitorService

from .flow import FormFlow
from .validators import FieldErrors, check_email, check_phone, check_range, check_required


def validate_exhibitor(form: ExhibitorForm) -> FieldErrors:
    errors: FieldErrors = {}

    # Company
    check_required(errors, "companyName", form.company_name, "Company name is required")
    check_required(errors, "companyDescription", form.company_description, "Company description is required")
    if check_required(errors, "category", form.category, "Category is required"):
        if form.category not in EXHIBITOR_SUB_CATEGORIES:
            errors["category"] = "Please select a valid category"
        elif form.sub_category and form.sub_category not in EXHIBITOR_SUB_CATEGORIES[form.category]:
            errors["subCategory"] = f"{form.sub_category} is not a {form.category} sub-category"
    check_required(errors, "businessType", form.business_type, "Business type is required")

    # Contact
    check_required(errors, "contactPerson", form.contact_person, "Contact person is required")
    check_email(errors, "email", form.email, invalid_message="Invalid email format")
    check_required(errors, "phone", form.phone, "Phone number is required")
    check_required(errors, "designation", form.designation, "Designation is required")
    check_email(errors, "alternateEmail", form.alternate_email, required=False, invalid_message="Invalid email format")
    check_phone(errors, "alternatePhone", form.alternate_phone, required=False)

    # Location
    check_required(errors, "address", form.address, "Address is required")
    check_required(errors, "city", form.city, "City is required")
    check_required(errors, "state", form.state, "State is required")
    check_required(errors, "pincode", form.pincode, "Pincode is required")

    # Exhibition
    check_required(errors, "boothSize", form.booth_size, "Booth size is required")
    check_required(errors, "expectedVisitors", form.expected_visitors, "Expected visitors is required")

    check_range(errors, "registrationFee", form.registration_fee, "Registration fee cannot be negative", minimum=0)
    return errors


class ExhibitorFormFlow(FormFlow[ExhibitorForm]):
    entity = "exhibitor"
    redirect_to = "/exhibitors"

    def __init__(self, service: ExhibitorService, record_id: str | None = None):
        super().__init__("update" if record_id else "create")
        self.service = service
        self.record_id = record_id

    def validate(self, form: ExhibitorForm) -> FieldErrors:
        return validate_exhibitor(form)

    def perform(self, form: ExhibitorForm) -> ExhibitorView:
        if self.record_id:
            return self.service.update(self.record_id, form.to_row())
        return self.service.create(form.to_row())
