# =============================================================================
# core/services/registration_service.py - Public Event Registration
# =============================================================================
# Backs the public /register?id=<event> page: show the event, take a name,
# e-mail and optional phone, and record the sign-up in event_registrations.
# Attendees never see store messages, only "Event not found." or
# "Registration failed.".
# =============================================================================

import logging

from app.exceptions import EntityNotFoundError, RemoteStoreError
from core.models import EventRegistrationView, EventView, RegistrationForm
from lib.supabase_client import store_error_message

from .entity_service import EntityService

logger = logging.getLogger(__name__)


class RegistrationService(EntityService[EventRegistrationView]):
    table = "event_registrations"
    entity = "registration"
    view = EventRegistrationView

    def get_event(self, event_id: str) -> EventView:
        """
        Load the event being registered for.

        Raises:
            EntityNotFoundError: If the id is unknown or the lookup fails
        """
        try:
            response = self.client.table("events").select("*").eq("id", event_id).limit(1).execute()
        except Exception as e:
            logger.error(f"Failed to load event {event_id} for registration: {store_error_message(e)}")
            raise EntityNotFoundError("event", event_id, message="Event not found.") from e

        if not response.data:
            raise EntityNotFoundError("event", event_id, message="Event not found.")
        return EventView.from_row(response.data[0])

    def register(self, event_id: str, form: RegistrationForm) -> EventRegistrationView:
        """
        Record an attendee for an event.

        Raises:
            RemoteStoreError: "Registration failed." if the insert is rejected
        """
        try:
            return self.create({
                "event_id": event_id,
                "name": form.name,
                "email": form.email,
                "phone": form.phone,
            })
        except RemoteStoreError as e:
            raise RemoteStoreError("Registration failed.", operation="create", table=self.table) from e
