# =============================================================================
# core/models/dashboard.py - Dashboard Schemas
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .event import EventView
from .venue import VenueView


class StatCard(BaseModel):
    """One tile on the dashboard ("Total Events": 42)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    value: int | str


class DashboardView(BaseModel):
    """
    Everything the dashboard page shows for one user.

    errors maps a list name ("events", "venues", ...) to the store's message
    when that list failed to load; the other lists are still filled in.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    welcome: str
    subtitle: str
    stats: list[StatCard]
    recent_events: list[EventView] = Field(default_factory=list)
    top_venues: list[VenueView] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    loading: bool = False
