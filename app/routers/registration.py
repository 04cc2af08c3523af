# =============================================================================
# app/routers/registration.py - Public Event Registration
# =============================================================================
# The only unauthenticated pages: an attendee opens /register?id=<event id>,
# sees the event and signs up with name, e-mail and phone.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.dependencies import RegistrationServiceDep
from app.exceptions import EntityNotFoundError
from app.routers.responses import submitted
from core.forms import FormOutcome, RegistrationFlow
from core.models import EventView, RegistrationForm

router = APIRouter(prefix="/register")

EventId = Annotated[str, Query(alias="id", description="Event UUID")]


class RegistrationPageResponse(BaseModel):
    event: EventView


def _event_id(event_id: str) -> str:
    if not event_id.strip():
        raise EntityNotFoundError("event", event_id, message="Event not found.")
    return event_id


@router.get("", response_model=RegistrationPageResponse)
def get_registration_page(service: RegistrationServiceDep, event_id: EventId = ""):
    """The event an attendee is registering for."""
    return RegistrationPageResponse(event=service.get_event(_event_id(event_id)))


@router.post("", response_model=FormOutcome, status_code=201)
def register(form: RegistrationForm, service: RegistrationServiceDep, event_id: EventId = ""):
    """Register an attendee. Store messages are not shown to the public."""
    event = service.get_event(_event_id(event_id))
    return submitted(RegistrationFlow(service, event.id).submit(form))
