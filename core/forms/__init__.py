# =============================================================================
# core/forms/ - Form Validation and Submission
# =============================================================================
# - validators.py: Shared field rules (required, length, e-mail, phone, ...)
# - flow.py: FormFlow state machine shared by every add/edit form
# - one module per form with its validate_* function and flow class
# =============================================================================

from .flow import SUBMIT_FIELD, FormFlow, FormOutcome, FormState
from .event import EventFormFlow, apply_venue_selection, validate_event, validate_image
from .exhibitor import ExhibitorFormFlow, validate_exhibitor
from .registration import RegistrationFlow, validate_registration
from .society import SocietyFormFlow, validate_society
from .user import UserCreateFlow, UserUpdateFlow, validate_new_user, validate_user_update
from .vendor import VendorFormFlow, validate_vendor
from .venue import VenueFormFlow, validate_venue

__all__ = [
    # State machine
    "SUBMIT_FIELD",
    "FormFlow",
    "FormOutcome",
    "FormState",
    # Flows
    "EventFormFlow",
    "ExhibitorFormFlow",
    "RegistrationFlow",
    "SocietyFormFlow",
    "UserCreateFlow",
    "UserUpdateFlow",
    "VendorFormFlow",
    "VenueFormFlow",
    # Rules
    "apply_venue_selection",
    "validate_event",
    "validate_exhibitor",
    "validate_image",
    "validate_new_user",
    "validate_registration",
    "validate_society",
    "validate_user_update",
    "validate_vendor",
    "validate_venue",
]
