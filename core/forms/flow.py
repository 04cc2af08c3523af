# =============================================================================
# core/forms/flow.py - Form Submit State Machine
# =============================================================================
# Every add/edit screen in the console follows the same lifecycle:
#
#   editing -> validating -> submitting -> succeeded  (terminal)
#                  |              |
#                  +--> failed <--+   (back to editing with an error map)
#
# - Validation runs before anything touches the store. A form with any field
#   error never reaches perform(), so invalid input costs zero remote calls.
# - Top-level failures are reported under the "submit" pseudo-field: store
#   rejections carry the store's own message, anything unexpected gets a
#   generic "Failed to <action> <entity>. Please try again." and is logged.
# - A succeeded flow carries the route to go back to and the delay before the
#   console follows it. Submitting it again is an error.
#
# Usage:
#   flow = VendorFormFlow(service)
#   outcome = flow.submit(form)
#   if outcome.state is FormState.FAILED:
#       ...outcome.errors...
# =============================================================================

import logging
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.config import settings
from app.exceptions import BoothBuzzException, FormAlreadySubmittedError
from core.models.base import ViewModel

from .validators import FieldErrors

logger = logging.getLogger(__name__)

SUBMIT_FIELD = "submit"

FormT = TypeVar("FormT", bound=BaseModel)


class FormState(str, Enum):
    """Lifecycle states of a form flow."""
    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FormOutcome(BaseModel):
    """
    Result of one submit attempt.

    Example (success):
        {
            "state": "succeeded",
            "errors": {},
            "record": {"id": "...", "name": "Acme Lights", ...},
            "redirectTo": "/vendors",
            "redirectAfter": 2.0
        }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    state: FormState
    errors: FieldErrors = Field(default_factory=dict)
    record: dict[str, Any] | None = None
    redirect_to: str | None = None
    redirect_after: float | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is FormState.SUCCEEDED


class FormFlow(Generic[FormT]):
    """
    Base class for a single add/edit form.

    Subclasses set ``entity`` and ``redirect_to`` and implement validate()
    and perform(). One flow instance backs one form on screen.
    """

    entity: str = "record"
    redirect_to: str | None = "/dashboard"

    def __init__(self, action: str = "create"):
        self.action = action
        self.state = FormState.EDITING
        self.errors: FieldErrors = {}
        self.record: ViewModel | None = None

    def validate(self, form: FormT) -> FieldErrors:
        raise NotImplementedError

    def perform(self, form: FormT) -> ViewModel:
        raise NotImplementedError

    def submit(self, form: FormT) -> FormOutcome:
        """
        Validate and, when clean, write the form.

        Raises:
            FormAlreadySubmittedError: If this flow already succeeded
        """
        if self.state is FormState.SUCCEEDED:
            raise FormAlreadySubmittedError(self.entity)

        self.state = FormState.VALIDATING
        errors = self.validate(form)
        if errors:
            return self._fail(errors)

        self.state = FormState.SUBMITTING
        try:
            record = self.perform(form)
        except BoothBuzzException as e:
            logger.warning(f"Failed to {self.action} {self.entity}: {e.message}")
            return self._fail({SUBMIT_FIELD: e.message})
        except Exception:
            logger.exception(f"Unexpected error while trying to {self.action} {self.entity}")
            return self._fail({
                SUBMIT_FIELD: f"Failed to {self.action} {self.entity}. Please try again."
            })

        self.state = FormState.SUCCEEDED
        self.errors = {}
        self.record = record
        logger.info(f"{self.entity.capitalize()} {self.action}d: {record.id}")
        return FormOutcome(
            state=FormState.SUCCEEDED,
            record=record.to_view(),
            redirect_to=self.redirect_to,
            redirect_after=settings.REDIRECT_DELAY_SECONDS if self.redirect_to else None,
        )

    def _fail(self, errors: FieldErrors) -> FormOutcome:
        # The outcome reports the failure; the flow itself is editable again
        self.state = FormState.EDITING
        self.errors = errors
        return FormOutcome(state=FormState.FAILED, errors=dict(errors))
