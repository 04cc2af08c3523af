# =============================================================================
# app/routers/responses.py - Shared Response Shapes
# =============================================================================
# Every console list answers {data, loading, error}; every add/edit form
# answers a FormOutcome (201/200 on success, 422 with the field map otherwise).
# =============================================================================

from typing import Any

from pydantic import BaseModel

from app.exceptions import FormSubmissionError
from core.forms import FormOutcome
from core.models.base import ViewModel
from core.services import FetchSnapshot


class ListResponse(BaseModel):
    """
    A list page's state.

    Example:
        {"data": [{"id": "...", "name": "Acme Lights"}], "loading": false, "error": null}
    """
    data: list[dict[str, Any]]
    loading: bool = False
    error: str | None = None


class DeleteResponse(BaseModel):
    id: str
    deleted: bool = True


def list_response(snapshot: FetchSnapshot) -> ListResponse:
    return ListResponse(
        data=[item.to_view() for item in snapshot.data],
        loading=snapshot.loading,
        error=snapshot.error,
    )


def views(records: list[ViewModel]) -> ListResponse:
    """Wrap an in-memory list in the list shape."""
    return ListResponse(data=[record.to_view() for record in records])


def submitted(outcome: FormOutcome) -> FormOutcome:
    """
    Pass a successful outcome through.

    Raises:
        FormSubmissionError: If the submission failed (422 with the error map)
    """
    if not outcome.succeeded:
        raise FormSubmissionError(outcome.errors)
    return outcome
