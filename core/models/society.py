# =============================================================================
# core/models/society.py - Society View Models
# =============================================================================

from typing import Any, Literal

from .base import FormModel, ViewModel


SocietyStatus = Literal["active", "inactive", "pending"]


class SocietyView(ViewModel):
    """A residential or commercial society partnered with Booth Buzz."""

    id: str
    name: str = ""
    location: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    member_count: int = 0
    facilities: list[str] = []
    active_events: int = 0
    total_revenue: float = 0
    status: SocietyStatus = "active"
    joined_date: str = ""
    created_at: str = ""
    updated_at: str = ""


class SocietyForm(FormModel):
    """Payload of the add/edit society form."""

    name: str = ""
    location: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    member_count: int = 0
    facilities: list[str] = []
    status: SocietyStatus = "active"

    def to_row(self) -> dict[str, Any]:
        return self.model_dump()
