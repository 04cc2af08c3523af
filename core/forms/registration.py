# =============================================================================
# core/forms/registration.py - Public Event Registration Form
# =============================================================================

from core.models import EventRegistrationView, RegistrationForm
from core.services import RegistrationService

from .flow import FormFlow
from .validators import FieldErrors, is_blank, is_valid_email

REQUIRED_MESSAGE = "Name and email are required."


def validate_registration(form: RegistrationForm) -> FieldErrors:
    errors: FieldErrors = {}
    if is_blank(form.name) or is_blank(form.email):
        errors["submit"] = REQUIRED_MESSAGE
    elif not is_valid_email(form.email):
        errors["email"] = "Please enter a valid email address"
    return errors


class RegistrationFlow(FormFlow[RegistrationForm]):
    """One attendee signing up for one event; success stays on the page."""

    entity = "registration"
    redirect_to = None

    def __init__(self, service: RegistrationService, event_id: str):
        super().__init__("create")
        self.service = service
        self.event_id = event_id

    def validate(self, form: RegistrationForm) -> FieldErrors:
        return validate_registration(form)

    def perform(self, form: RegistrationForm) -> EventRegistrationView:
        return self.service.register(self.event_id, form)
