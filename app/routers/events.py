# =============================================================================
# app/routers/events.py - Event Endpoints
# =============================================================================
# Events page and the create/edit event form.
#
# The form is posted as multipart: a "payload" part holding the form's JSON
# and an optional "image" file part. The image is uploaded to storage before
# the row is written and removed again if the write fails.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.auth import require_roles
from app.dependencies import EventServiceDep, SupabaseDep
from app.routers.responses import DeleteResponse, ListResponse, list_response, submitted
from core.forms import EventFormFlow, FormOutcome, apply_venue_selection
from core.models import EventForm, EventView, ImageUpload, UserView
from core.navigation import roles_for
from core.services import events_fetcher, venues_fetcher

logger = logging.getLogger(__name__)

event_roles = require_roles(*roles_for("/events"), action="manage events")

router = APIRouter(prefix="/events", dependencies=[Depends(event_roles)])


# =============================================================================
# Request Models
# =============================================================================

class VenueSelectionRequest(BaseModel):
    """A draft event form and the venue just picked for it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    venue_id: str
    form: EventForm = Field(default_factory=EventForm)


async def _read_image(image: UploadFile | None) -> ImageUpload | None:
    if image is None or not image.filename:
        return None
    return ImageUpload(
        filename=image.filename,
        content_type=image.content_type or "",
        content=await image.read(),
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=ListResponse)
def list_events(client: SupabaseDep):
    """The 50 most recently created events, each with its venue's name."""
    return list_response(events_fetcher(client).mount().snapshot())


@router.post("/venue-selection", response_model=EventForm)
def select_venue(request: VenueSelectionRequest, client: SupabaseDep):
    """
    Fill the venue's name, city and capacity into a draft event form.

    An unknown venue only sets venueId.
    """
    venues = venues_fetcher(client).mount().snapshot()
    if venues.error:
        logger.warning(f"Venue auto-fill without venue list: {venues.error}")
    return apply_venue_selection(request.form, request.venue_id, venues.data)


@router.get("/{event_id}", response_model=EventView)
def get_event(event_id: str, service: EventServiceDep):
    return service.get(event_id)


@router.post("", response_model=FormOutcome, status_code=201)
async def create_event(
    payload: Annotated[str, Form(description="Event form as JSON")],
    service: EventServiceDep,
    image: Annotated[UploadFile | None, File(description="Event image")] = None,
    user: UserView = Depends(event_roles),
):
    """
    Submit the create event form.

    The signed-in user is recorded as the event's creator.
    """
    form = EventForm.model_validate_json(payload)
    flow = EventFormFlow(service, created_by=user.id, image=await _read_image(image))
    return submitted(await run_in_threadpool(flow.submit, form))


@router.put("/{event_id}", response_model=FormOutcome)
async def update_event(
    event_id: str,
    payload: Annotated[str, Form(description="Event form as JSON")],
    service: EventServiceDep,
    image: Annotated[UploadFile | None, File(description="Replacement event image")] = None,
):
    form = EventForm.model_validate_json(payload)
    flow = EventFormFlow(service, record_id=event_id, image=await _read_image(image))
    return submitted(await run_in_threadpool(flow.submit, form))


@router.delete("/{event_id}", response_model=DeleteResponse)
def delete_event(event_id: str, service: EventServiceDep):
    service.delete(event_id)
    return DeleteResponse(id=event_id)
