# =============================================================================
# core/services/venue_service.py - Venue Records
# =============================================================================
# Adds the duplicate guard used by the venue form: venue names and street
# addresses (address line 1) are unique, case-insensitively.
# =============================================================================

import logging

from app.exceptions import DuplicateRecordError
from core.models import VenueView
from lib.utils import escape_like

from .entity_service import EntityService

logger = logging.getLogger(__name__)


class VenueService(EntityService[VenueView]):
    table = "venues"
    entity = "venue"
    view = VenueView

    def ensure_unique(
        self,
        name: str,
        address_line1: str,
        exclude_id: str | None = None,
    ) -> None:
        """
        Reject a venue whose name or address is already taken.

        Args:
            name: Venue name as entered
            address_line1: Street address as entered
            exclude_id: The venue being edited, which may keep its own values

        Raises:
            DuplicateRecordError: With the message shown on the form
            RemoteStoreError: If either lookup fails
        """
        clashes = self._matching("name", name, exclude_id)
        if clashes:
            raise DuplicateRecordError(
                f'A venue with the name "{name}" already exists. Please choose a different name.',
                details={"field": "name", "id": clashes[0]["id"]},
            )

        clashes = self._matching("address_line1", address_line1, exclude_id)
        if clashes:
            raise DuplicateRecordError(
                f'A venue with the address "{address_line1}" already exists '
                f'({clashes[0].get("name") or "unnamed venue"}). Please verify the address.',
                details={"field": "addressLine1", "id": clashes[0]["id"]},
            )

    def _matching(self, column: str, value: str, exclude_id: str | None) -> list[dict]:
        pattern = escape_like(value.strip())
        if not pattern:
            return []

        def query():
            q = self.client.table(self.table).select("id, name, address_line1").ilike(column, pattern)
            if exclude_id:
                q = q.neq("id", exclude_id)
            return q.execute()

        response = self._run("check duplicates for", query)
        if response.data:
            logger.info(f"Venue {column} clash for {value!r}: {response.data[0]['id']}")
        return response.data or []
