# =============================================================================
# core/services/fetchers.py - Per-Entity List Fetchers
# =============================================================================
# The table, selection, ordering and row mapper for each console list.
# Each call builds a fresh, unmounted fetcher; nothing is shared between
# requests.
# =============================================================================

from typing import Any, Sequence

from supabase import Client

from app.config import settings
from core.models import EventView, ExhibitorView, UserView, VendorView, VenueView

from .table_fetcher import FetchOptions, OrderBy, TableFetcher

# Embedded relation select: pulls the venue's name alongside each event
EVENTS_SELECT = "*, venue:venues(name)"


def users_fetcher(client: Client, dependencies: Sequence[Any] = ()) -> TableFetcher[UserView]:
    return TableFetcher(client, "users", "*", dependencies, row_mapper=UserView.from_row)


def events_fetcher(client: Client, dependencies: Sequence[Any] = ()) -> TableFetcher[EventView]:
    return TableFetcher(
        client,
        "events",
        EVENTS_SELECT,
        dependencies,
        options=FetchOptions(
            limit=settings.EVENTS_FETCH_LIMIT,
            order=OrderBy("created_at", ascending=False),
        ),
        row_mapper=EventView.from_row,
    )


def venues_fetcher(client: Client, dependencies: Sequence[Any] = ()) -> TableFetcher[VenueView]:
    return TableFetcher(
        client,
        "venues",
        "*",
        dependencies,
        options=FetchOptions(order=OrderBy("name", ascending=True)),
        row_mapper=VenueView.from_row,
    )


def vendors_fetcher(client: Client, dependencies: Sequence[Any] = ()) -> TableFetcher[VendorView]:
    return TableFetcher(
        client,
        "vendors",
        "*",
        dependencies,
        options=FetchOptions(order=OrderBy("name", ascending=True)),
        row_mapper=VendorView.from_row,
    )


def exhibitors_fetcher(client: Client, dependencies: Sequence[Any] = ()) -> TableFetcher[ExhibitorView]:
    return TableFetcher(
        client,
        "exhibitors",
        "*",
        dependencies,
        options=FetchOptions(order=OrderBy("created_at", ascending=False)),
        row_mapper=ExhibitorView.from_row,
    )
