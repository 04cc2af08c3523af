# =============================================================================
# core/services/event_service.py - Event Records
# =============================================================================
# Writing an event with a new image is two steps: upload the image, then
# write the row with the image's public URL folded in.
# - Upload failure: the row is never written.
# - Row failure: the uploaded image is removed again and PartialWriteError
#   says whether that worked; a failed removal is logged as an orphan.
# =============================================================================

import logging
from typing import Any

from supabase import Client

from app.exceptions import PartialWriteError
from core.models import EventForm, EventView, ImageUpload
from lib.supabase_client import store_error_message

from .entity_service import EntityService
from .fetchers import EVENTS_SELECT
from .storage_service import StorageService

logger = logging.getLogger(__name__)


class EventService(EntityService[EventView]):
    table = "events"
    entity = "event"
    view = EventView
    select = EVENTS_SELECT

    def __init__(self, client: Client, storage: StorageService | None = None):
        super().__init__(client)
        self.storage = storage or StorageService(client)

    def create_event(
        self,
        form: EventForm,
        image: ImageUpload | None,
        created_by: str | None,
    ) -> EventView:
        """
        Create an event owned by created_by.

        Raises:
            StorageUploadError: If the image upload fails
            RemoteStoreError: If the row write fails without an image
            PartialWriteError: If the row write fails after the upload
        """
        values = form.to_row()
        values["created_by"] = created_by
        values["vendor_ids"] = []
        return self._write_with_image(values, image, lambda row: self.create(row))

    def update_event(self, record_id: str, form: EventForm, image: ImageUpload | None) -> EventView:
        values = form.to_row()
        return self._write_with_image(values, image, lambda row: self.update(record_id, row))

    def _write_with_image(self, values: dict[str, Any], image: ImageUpload | None, write) -> EventView:
        if image is None:
            return write(values)

        path = self.storage.upload_image(image)
        try:
            values["event_image_url"] = self.storage.get_public_url(path)
            return write(values)
        except Exception as e:
            logger.error(f"Event write failed after uploading {path}; removing the image")
            raise PartialWriteError(
                f"Failed to save event: {store_error_message(e)}",
                compensated=self.storage.delete_file(path),
            ) from e
