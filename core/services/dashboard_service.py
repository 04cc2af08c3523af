# =============================================================================
# core/services/dashboard_service.py - Dashboard Statistics
# =============================================================================
# The dashboard loads five lists (users, events, venues, vendors,
# exhibitors) side by side. Each list is fetched independently: one failing
# leaves the others intact and is reported under errors.
#
# Stats and the recent events / top venues lists depend on the role:
# - super admin: totals across the whole platform
# - admin: scoped to the admin's city
# - everyone else: events they created and the venues they are held at
# Revenue is summed from events' total_revenue and shown in lakhs (₹x.xL).
# =============================================================================

import logging
from concurrent.futures import ThreadPoolExecutor

from supabase import Client

from core.models import ACTIVE_EVENT_STATUSES, EventView, Role, UserView, VenueView
from core.models.dashboard import DashboardView, StatCard
from lib.utils import format_lakhs

from .fetchers import (
    events_fetcher,
    exhibitors_fetcher,
    users_fetcher,
    vendors_fetcher,
    venues_fetcher,
)
from .table_fetcher import TableFetcher

logger = logging.getLogger(__name__)

RECENT_EVENTS = 3
TOP_VENUES = 3


def _revenue(events: list[EventView]) -> float:
    return sum(event.total_revenue for event in events)


def _active(events: list[EventView]) -> list[EventView]:
    return [event for event in events if event.status in ACTIVE_EVENT_STATUSES]


class DashboardService:
    """
    Builds the dashboard for the signed-in user.

    Example:
        view = DashboardService(client).load(current_user)
    """

    def __init__(self, client: Client):
        self.client = client

    def load(self, user: UserView) -> DashboardView:
        fetchers: dict[str, TableFetcher] = {
            "users": users_fetcher(self.client),
            "events": events_fetcher(self.client),
            "venues": venues_fetcher(self.client),
            "vendors": vendors_fetcher(self.client),
            "exhibitors": exhibitors_fetcher(self.client),
        }

        with ThreadPoolExecutor(max_workers=len(fetchers)) as pool:
            # mount() records failures on the fetcher itself
            list(pool.map(lambda fetcher: fetcher.mount(), fetchers.values()))

        errors = {name: f.error for name, f in fetchers.items() if f.error is not None}
        if errors:
            logger.warning(f"Dashboard for {user.id} loaded with errors: {sorted(errors)}")

        events: list[EventView] = fetchers["events"].data
        venues: list[VenueView] = fetchers["venues"].data
        scoped_events, scoped_venues = self.scope(user, events, venues)

        return DashboardView(
            welcome=f"Welcome back, {user.name}!",
            subtitle=f"{user.role.label} Dashboard" + (f" - {user.city}" if user.city else ""),
            stats=self.stats_for(
                user,
                events=events,
                venues=venues,
                vendor_count=len(fetchers["vendors"].data),
                exhibitor_count=len(fetchers["exhibitors"].data),
            ),
            recent_events=scoped_events[:RECENT_EVENTS],
            top_venues=sorted(scoped_venues, key=lambda v: v.total_revenue, reverse=True)[:TOP_VENUES],
            errors=errors,
            loading=any(f.loading for f in fetchers.values()),
        )

    @staticmethod
    def scope(
        user: UserView,
        events: list[EventView],
        venues: list[VenueView],
    ) -> tuple[list[EventView], list[VenueView]]:
        """
        The events and venues the user's dashboard is about.

        A super admin sees everything; an admin sees their city (events by
        city, venues whose location names the city); everyone else sees the
        events they created and the venues those events are held at.
        """
        if user.role is Role.SUPER_ADMIN:
            return events, venues

        if user.role is Role.ADMIN:
            if not user.city:
                return [], []
            return (
                [event for event in events if event.city == user.city],
                [venue for venue in venues if user.city in venue.location],
            )

        own_events = [event for event in events if event.created_by == user.id]
        own_venue_ids = {event.venue_id for event in own_events}
        return own_events, [venue for venue in venues if venue.id in own_venue_ids]

    @staticmethod
    def stats_for(
        user: UserView,
        events: list[EventView],
        venues: list[VenueView],
        vendor_count: int,
        exhibitor_count: int,
    ) -> list[StatCard]:
        """Stat tiles for the user's role. Events and venues are scoped here."""
        events, venues = DashboardService.scope(user, events, venues)

        if user.role is Role.SUPER_ADMIN:
            return [
                StatCard(title="Total Events", value=len(events)),
                StatCard(title="Active Events", value=len(_active(events))),
                StatCard(title="Venues", value=len(venues)),
                StatCard(title="Vendors", value=vendor_count),
                StatCard(title="Exhibitors", value=exhibitor_count),
                StatCard(title="Monthly Revenue", value=format_lakhs(_revenue(events))),
            ]

        if user.role is Role.ADMIN:
            return [
                StatCard(title="City Events", value=len(events)),
                StatCard(title="Active Events", value=len(_active(events))),
                StatCard(title="City Venues", value=len(venues)),
                StatCard(title="City Revenue", value=format_lakhs(_revenue(events))),
            ]

        return [
            StatCard(title="My Events", value=len(events)),
            StatCard(title="Active Events", value=len(_active(events))),
            StatCard(title="Revenue", value=format_lakhs(_revenue(events))),
        ]
