# =============================================================================
# core/services/society_service.py - Society Records
# =============================================================================
# Societies have not been moved to the hosted store yet. They are served from
# an in-process sample list with the same read/create/update/delete surface
# as the table-backed services, so routers and forms don't care which kind
# they are talking to. Changes last for the life of the process.
# =============================================================================

import logging
import threading
import uuid
from datetime import date, datetime, timezone
from typing import Any

from app.exceptions import EntityNotFoundError, NothingDeletedError
from core.models import SocietyView

logger = logging.getLogger(__name__)


SAMPLE_SOCIETIES: tuple[dict[str, Any], ...] = (
    {
        "id": "soc-001",
        "name": "Green Valley Apartments",
        "location": "Andheri West, Mumbai",
        "contact_person": "Rajesh Kumar",
        "email": "rajesh@greenvalley.com",
        "phone": "+91-9876543210",
        "member_count": 450,
        "facilities": ["Community Hall", "Garden", "Parking"],
        "active_events": 3,
        "total_revenue": 125000,
        "status": "active",
        "joined_date": "2023-01-15",
    },
    {
        "id": "soc-002",
        "name": "Sunrise Heights",
        "location": "Koregaon Park, Pune",
        "contact_person": "Priya Sharma",
        "email": "priya@sunriseheights.com",
        "phone": "+91-9876543211",
        "member_count": 320,
        "facilities": ["Club House", "Swimming Pool", "Gymnasium"],
        "active_events": 2,
        "total_revenue": 89000,
        "status": "active",
        "joined_date": "2023-03-20",
    },
    {
        "id": "soc-003",
        "name": "Palm Grove Residency",
        "location": "Whitefield, Bangalore",
        "contact_person": "Arjun Menon",
        "email": "arjun@palmgrove.in",
        "phone": "+91-9876543212",
        "member_count": 280,
        "facilities": ["Amphitheater", "Children Play Area"],
        "active_events": 0,
        "total_revenue": 0,
        "status": "pending",
        "joined_date": "2024-02-01",
    },
)


class SocietyService:
    """
    Society records backed by an in-memory list.

    Each instance starts from its own copy of the sample data.

    Example:
        service = SocietyService()
        service.list_societies(status="active", search="pune")
    """

    entity = "society"

    def __init__(self, seed: tuple[dict[str, Any], ...] = SAMPLE_SOCIETIES):
        now = datetime.now(timezone.utc).isoformat()
        self._lock = threading.Lock()
        self._rows: dict[str, dict[str, Any]] = {
            row["id"]: {"created_at": now, "updated_at": now, **row} for row in seed
        }

    def list_societies(self, status: str | None = None, search: str | None = None) -> list[SocietyView]:
        """
        List societies, optionally by status and a case-insensitive search over
        name, location and contact person.
        """
        with self._lock:
            rows = list(self._rows.values())

        if status and status != "all":
            rows = [row for row in rows if row.get("status") == status]
        if search:
            needle = search.lower()
            rows = [
                row for row in rows
                if any(needle in (row.get(key) or "").lower() for key in ("name", "location", "contact_person"))
            ]
        return [SocietyView.from_row(row) for row in rows]

    def get(self, record_id: str) -> SocietyView:
        with self._lock:
            row = self._rows.get(record_id)
        if row is None:
            raise EntityNotFoundError(self.entity, record_id)
        return SocietyView.from_row(row)

    def create(self, values: dict[str, Any]) -> SocietyView:
        now = datetime.now(timezone.utc).isoformat()
        row = {
            "active_events": 0,
            "total_revenue": 0,
            "joined_date": date.today().isoformat(),
            **values,
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
        }
        with self._lock:
            self._rows[row["id"]] = row
        logger.info(f"Created society: {row['id']}")
        return SocietyView.from_row(row)

    def update(self, record_id: str, values: dict[str, Any]) -> SocietyView:
        with self._lock:
            row = self._rows.get(record_id)
            if row is None:
                raise EntityNotFoundError(self.entity, record_id)
            row = {**row, **values, "id": record_id, "updated_at": datetime.now(timezone.utc).isoformat()}
            self._rows[record_id] = row
        logger.info(f"Updated society: {record_id}")
        return SocietyView.from_row(row)

    def delete(self, record_id: str) -> None:
        with self._lock:
            removed = self._rows.pop(record_id, None)
        if removed is None:
            raise NothingDeletedError(self.entity, record_id)
        logger.info(f"Deleted society: {record_id}")
