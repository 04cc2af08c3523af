# =============================================================================
# core/services/table_fetcher.py - Generic Table Fetcher
# =============================================================================
# One fetcher = one list on screen. It reads a table (optionally ordered and
# limited), maps the rows to view models, and exposes data/loading/error.
#
# Query lifecycle:
# - mount() issues the first query
# - update_dependencies() issues another only when a dependency changed
#   (compared element-wise by identity)
# - refetch() always issues another
#
# Overlapping queries: every query takes the next request id and only the
# response to the latest id is committed. An older response that arrives
# late is dropped, so the list never flips back to stale rows.
#
# On failure the previous data is kept and error holds the store's message.
# There is no retry and no caching; callers refetch when they need fresh rows.
# =============================================================================

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from supabase import Client

from lib.supabase_client import store_error_message

logger = logging.getLogger(__name__)

T = TypeVar("T")

RowMapper = Callable[[dict[str, Any]], T]


@dataclass(frozen=True)
class OrderBy:
    column: str
    ascending: bool = False


@dataclass(frozen=True)
class FetchOptions:
    """
    Query shaping for a fetcher.

    order is applied before limit, so "latest 50" is the 50 newest rows.
    Without order the store decides the row order.
    """

    limit: int | None = None
    order: OrderBy | None = None


@dataclass(frozen=True)
class FetchSnapshot(Generic[T]):
    """Point-in-time copy of a fetcher's state."""

    data: list[T]
    loading: bool
    error: str | None


class TableFetcher(Generic[T]):
    """
    Reads one table into a list of view models.

    Example:
        fetcher = TableFetcher(
            client, "events", "*, venue:venues(name)",
            options=FetchOptions(limit=50, order=OrderBy("created_at")),
            row_mapper=EventView.from_row,
        ).mount()
        fetcher.data     # list[EventView]
        fetcher.error    # None, or the store's message
    """

    def __init__(
        self,
        client: Client,
        table: str,
        select: str = "*",
        dependencies: Sequence[Any] = (),
        options: FetchOptions | None = None,
        row_mapper: RowMapper | None = None,
    ):
        self.table = table
        self.select = select
        self.options = options or FetchOptions()
        self._client = client
        self._row_mapper = row_mapper
        self._dependencies = tuple(dependencies)
        self._lock = threading.Lock()
        self._latest_request = 0
        self._mounted = False

        self.data: list[T] = []
        self.loading = False
        self.error: str | None = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def mount(self) -> "TableFetcher[T]":
        """Issue the initial query. Mounting twice is a no-op."""
        if not self._mounted:
            self._mounted = True
            self._fetch()
        return self

    def update_dependencies(self, dependencies: Sequence[Any]) -> bool:
        """
        Replace the dependency tuple; query again if anything changed.

        Returns:
            True if a new query was issued
        """
        new = tuple(dependencies)
        old = self._dependencies
        changed = len(new) != len(old) or any(a is not b for a, b in zip(new, old))
        self._dependencies = new
        if changed and self._mounted:
            self._fetch()
        return changed

    def refetch(self) -> None:
        """Query again regardless of dependencies."""
        self._fetch()

    def snapshot(self) -> FetchSnapshot[T]:
        with self._lock:
            return FetchSnapshot(data=list(self.data), loading=self.loading, error=self.error)

    # -------------------------------------------------------------------------
    # Query
    # -------------------------------------------------------------------------

    def _build_query(self):
        query = self._client.table(self.table).select(self.select)
        order = self.options.order
        if order is not None:
            query = query.order(order.column, desc=not order.ascending)
        if self.options.limit is not None:
            query = query.limit(self.options.limit)
        return query

    def _next_request_id(self) -> int:
        with self._lock:
            self._latest_request += 1
            self.loading = True
            return self._latest_request

    def _fetch(self) -> None:
        request_id = self._next_request_id()
        logger.debug(f"Fetching {self.table} (request #{request_id})")

        try:
            response = self._build_query().execute()
            rows = response.data or []
            mapped = [self._row_mapper(row) for row in rows] if self._row_mapper else list(rows)
        except Exception as e:
            message = store_error_message(e)
            if self._commit(request_id, error=message):
                logger.error(f"Error fetching data from {self.table}: {message}")
            return

        self._commit(request_id, data=mapped)

    def _commit(
        self,
        request_id: int,
        data: list[T] | None = None,
        error: str | None = None,
    ) -> bool:
        with self._lock:
            if request_id != self._latest_request:
                logger.debug(
                    f"Dropping stale {self.table} response #{request_id} "
                    f"(latest is #{self._latest_request})"
                )
                return False
            if error is None:
                self.data = data if data is not None else []
                self.error = None
            else:
                self.error = error
            self.loading = False
            return True
