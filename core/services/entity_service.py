# =============================================================================
# core/services/entity_service.py - Single-Table Record Service
# =============================================================================
# Read/insert/update/delete for one table, returning view models.
# Each write is exactly one remote call. A store rejection becomes a
# RemoteStoreError carrying the store's own message.
#
# Subclasses pick the table, the entity name used in messages and the view
# model rows are mapped to.
# =============================================================================

import logging
from typing import Any, Callable, ClassVar, Generic, TypeVar

from supabase import Client

from app.exceptions import EntityNotFoundError, NothingDeletedError, RemoteStoreError
from core.models.base import ViewModel
from lib.supabase_client import store_error_message

logger = logging.getLogger(__name__)

ViewT = TypeVar("ViewT", bound=ViewModel)


class EntityService(Generic[ViewT]):
    """
    Base service for one table.

    Example:
        service = VendorService(client)
        vendor = service.create(form.to_row())
        service.delete(vendor.id)
    """

    table: ClassVar[str]
    entity: ClassVar[str]
    view: ClassVar[type[ViewModel]]
    select: ClassVar[str] = "*"

    def __init__(self, client: Client):
        self.client = client

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get(self, record_id: str) -> ViewT:
        """
        Fetch one record by id.

        Raises:
            EntityNotFoundError: If no row has this id
            RemoteStoreError: If the store rejects the query
        """
        response = self._run(
            "fetch",
            lambda: (
                self.client.table(self.table)
                .select(self.select)
                .eq("id", record_id)
                .limit(1)
                .execute()
            ),
        )
        if not response.data:
            raise EntityNotFoundError(self.entity, record_id)
        return self.view.from_row(response.data[0])

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, values: dict[str, Any]) -> ViewT:
        """Insert one row and return it as stored."""
        response = self._run(
            "create",
            lambda: self.client.table(self.table).insert(values).execute(),
        )
        if not response.data:
            raise RemoteStoreError(
                f"Failed to create {self.entity}: insert returned no data",
                operation="create",
                table=self.table,
            )
        record = self.view.from_row(response.data[0])
        logger.info(f"Created {self.entity}: {record.id}")
        return record

    def update(self, record_id: str, values: dict[str, Any]) -> ViewT:
        """
        Update one row by id and return it as stored.

        Raises:
            EntityNotFoundError: If the update matched no row
        """
        response = self._run(
            "update",
            lambda: self.client.table(self.table).update(values).eq("id", record_id).execute(),
        )
        if not response.data:
            raise EntityNotFoundError(self.entity, record_id)
        logger.info(f"Updated {self.entity}: {record_id}")
        return self.view.from_row(response.data[0])

    def delete(self, record_id: str) -> None:
        """
        Delete one row by id (hard delete).

        Raises:
            NothingDeletedError: If no row was removed, either because the id
                doesn't exist or because row-level security hid it
        """
        response = self._run(
            "delete",
            lambda: self.client.table(self.table).delete().eq("id", record_id).execute(),
        )
        if not response.data:
            logger.warning(f"Delete of {self.entity} {record_id} affected no rows")
            raise NothingDeletedError(self.entity, record_id)
        logger.info(f"Deleted {self.entity}: {record_id}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _run(self, operation: str, call: Callable[[], Any]) -> Any:
        """Execute one store call, translating client errors."""
        try:
            return call()
        except Exception as e:
            message = store_error_message(e)
            logger.error(f"Failed to {operation} {self.entity}: {message}")
            raise RemoteStoreError(message, operation=operation, table=self.table) from e
