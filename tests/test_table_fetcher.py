# =============================================================================
# tests/test_table_fetcher.py - Generic Table Fetcher Tests
# =============================================================================
# Tests for TableFetcher:
# - mounting issues exactly one query, and only once
# - dependency changes re-query, identical dependencies don't
# - store failures are reported on the fetcher, not raised
# - a response that arrives after a newer request started is dropped
#
# Run with: pytest tests/test_table_fetcher.py -v
# =============================================================================

import logging

from core.models import EventView, VendorView
from core.services import (
    FetchOptions,
    OrderBy,
    TableFetcher,
    events_fetcher,
    vendors_fetcher,
)
from tests.fakes import FakeStoreError, FakeSupabase


class InterleavingClient(FakeSupabase):
    """Runs a hook while the first query is in flight (after it read its rows)."""

    def __init__(self, tables):
        super().__init__(tables)
        self.while_in_flight = None

    def table(self, name):
        query = super().table(name)
        hook, self.while_in_flight = self.while_in_flight, None
        if hook is not None:
            original = query.execute

            def execute():
                response = original()
                hook()
                return response

            query.execute = execute
        return query


class FailingInFlightClient(FakeSupabase):
    """First query runs a hook and then fails."""

    def __init__(self, tables):
        super().__init__(tables)
        self.while_in_flight = None

    def table(self, name):
        query = super().table(name)
        hook, self.while_in_flight = self.while_in_flight, None
        if hook is not None:
            def execute():
                hook()
                raise FakeStoreError("connection reset")

            query.execute = execute
        return query


# =============================================================================
# Lifecycle
# =============================================================================

class TestMount:
    """Tests for mount() and the initial query."""

    def test_initial_state(self, fake_client):
        fetcher = vendors_fetcher(fake_client)

        assert fetcher.data == []
        assert fetcher.loading is False
        assert fetcher.error is None
        assert fake_client.calls == []

    def test_mount_fetches_and_maps(self, fake_client):
        fetcher = vendors_fetcher(fake_client).mount()

        assert len(fake_client.calls_to("vendors", "select")) == 1
        assert fetcher.error is None
        assert fetcher.loading is False
        assert [v.name for v in fetcher.data] == ["Acme Lights"]
        assert isinstance(fetcher.data[0], VendorView)
        assert fetcher.data[0].rating == 0

    def test_mount_twice_is_one_query(self, fake_client):
        fetcher = vendors_fetcher(fake_client)
        fetcher.mount()
        fetcher.mount()

        assert len(fake_client.calls_to("vendors")) == 1

    def test_order_then_limit(self, fake_client):
        """Latest N means newest first, then cut."""
        fetcher = TableFetcher(
            fake_client, "events",
            options=FetchOptions(limit=1, order=OrderBy("created_at", ascending=False)),
            row_mapper=EventView.from_row,
        ).mount()

        assert [e.id for e in fetcher.data] == ["event-1"]

    def test_events_embed_venue_name(self, fake_client):
        fetcher = events_fetcher(fake_client).mount()

        venues = {event.id: event.venue for event in fetcher.data}
        assert venues == {"event-1": "Phoenix Hall", "event-2": "Sea Breeze Lawn"}

    def test_without_row_mapper_rows_are_raw(self, fake_client):
        fetcher = TableFetcher(fake_client, "vendors").mount()
        assert fetcher.data[0]["name"] == "Acme Lights"

    def test_empty_table(self, fake_client):
        fetcher = TableFetcher(fake_client, "exhibitors").mount()
        assert fetcher.data == []
        assert fetcher.error is None


class TestDependencies:
    """Tests for update_dependencies()."""

    def test_same_dependencies_no_query(self, fake_client):
        city = object()
        fetcher = TableFetcher(fake_client, "vendors", dependencies=[city]).mount()

        assert fetcher.update_dependencies([city]) is False
        assert len(fake_client.calls_to("vendors")) == 1

    def test_changed_dependencies_query_again(self, fake_client):
        fetcher = TableFetcher(fake_client, "vendors", dependencies=[object()]).mount()

        assert fetcher.update_dependencies([object()]) is True
        assert len(fake_client.calls_to("vendors")) == 2

    def test_length_change_counts(self, fake_client):
        city = object()
        fetcher = TableFetcher(fake_client, "vendors", dependencies=[city]).mount()

        assert fetcher.update_dependencies([city, object()]) is True
        assert len(fake_client.calls_to("vendors")) == 2

    def test_not_mounted_no_query(self, fake_client):
        fetcher = TableFetcher(fake_client, "vendors", dependencies=[object()])

        assert fetcher.update_dependencies([object()]) is True
        assert fake_client.calls == []

    def test_refetch_sees_new_rows(self, fake_client):
        fetcher = vendors_fetcher(fake_client).mount()
        fake_client.tables["vendors"].append({"id": "vendor-2", "name": "Zed Catering"})

        fetcher.refetch()

        assert [v.name for v in fetcher.data] == ["Acme Lights", "Zed Catering"]

    def test_refetch_twice_same_data(self, fake_client):
        fetcher = events_fetcher(fake_client).mount()
        fetcher.refetch()
        first = fetcher.snapshot().data
        fetcher.refetch()

        assert fetcher.snapshot().data == first


# =============================================================================
# Failures
# =============================================================================

class TestErrors:
    """Tests for store failures."""

    def test_error_reported_not_raised(self, fake_client, caplog):
        fake_client.fail("vendors", "select", FakeStoreError("permission denied for table vendors"))

        with caplog.at_level(logging.ERROR):
            fetcher = vendors_fetcher(fake_client).mount()

        assert fetcher.error == "permission denied for table vendors"
        assert fetcher.loading is False
        assert fetcher.data == []
        assert "Error fetching data from vendors" in caplog.text

    def test_error_keeps_previous_data(self, fake_client):
        fetcher = vendors_fetcher(fake_client).mount()
        fake_client.fail("vendors", "select")

        fetcher.refetch()

        assert fetcher.error == "select on vendors failed"
        assert [v.name for v in fetcher.data] == ["Acme Lights"]

    def test_success_clears_error(self, fake_client):
        fake_client.fail("vendors", "select")
        fetcher = vendors_fetcher(fake_client).mount()
        fake_client.failures.clear()

        fetcher.refetch()

        assert fetcher.error is None
        assert len(fetcher.data) == 1

    def test_bad_row_is_an_error(self, fake_client):
        """A row the mapper rejects fails the fetch instead of escaping."""
        fake_client.tables["vendors"].append({"id": "vendor-x", "status": "exploded"})
        fetcher = vendors_fetcher(fake_client).mount()

        assert fetcher.error is not None
        assert fetcher.loading is False

    def test_snapshot_is_a_copy(self, fake_client):
        fetcher = vendors_fetcher(fake_client).mount()
        snapshot = fetcher.snapshot()
        fake_client.tables["vendors"].clear()

        fetcher.refetch()

        assert len(snapshot.data) == 1
        assert fetcher.snapshot().data == []


# =============================================================================
# Out-of-Order Responses
# =============================================================================

class TestStaleResponses:
    """A response for an older request never overwrites a newer one."""

    def test_stale_data_dropped(self):
        client = InterleavingClient({"vendors": [{"id": "v1", "name": "Old"}]})
        fetcher = TableFetcher(client, "vendors", row_mapper=VendorView.from_row)

        def newer_request():
            client.tables["vendors"] = [{"id": "v2", "name": "New"}]
            fetcher.refetch()

        client.while_in_flight = newer_request
        fetcher.mount()

        assert [v.name for v in fetcher.data] == ["New"]
        assert fetcher.loading is False

    def test_stale_error_dropped(self, caplog):
        client = FailingInFlightClient({"vendors": [{"id": "v1", "name": "Fresh"}]})
        fetcher = TableFetcher(client, "vendors", row_mapper=VendorView.from_row)
        client.while_in_flight = fetcher.refetch

        with caplog.at_level(logging.ERROR):
            fetcher.mount()

        assert fetcher.error is None
        assert [v.name for v in fetcher.data] == ["Fresh"]
        assert "Error fetching data from vendors" not in caplog.text
