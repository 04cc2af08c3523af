# =============================================================================
# core/models/base.py - View Model Base
# =============================================================================
# Rows come back from the store in snake_case with nullable columns. View
# models are what the console consumes: camelCase on the wire and every
# field populated, so the UI never has to tell "missing" from "empty".
#
# Mapping is done by ViewModel.from_row():
# - column_renames handles columns whose view name is not plain camelCase
# - None values are dropped before validation so field defaults apply
# - unknown columns are ignored
# =============================================================================

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ViewModel(BaseModel):
    """
    Base class for all view models.

    Python attributes stay snake_case; serialization uses camelCase aliases
    (FastAPI response models dump by alias).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    # Source column -> field name, for columns that aren't renamed 1:1
    column_renames: ClassVar[dict[str, str]] = {}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Let field defaults stand in for NULL columns."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_row(cls, row: dict[str, Any]):
        """Map a raw store row onto this view model."""
        data = {cls.column_renames.get(key, key): value for key, value in row.items()}
        return cls.model_validate(data)

    def to_view(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)


class FormModel(BaseModel):
    """
    Base class for form payloads posted by the console.

    Accepts camelCase (what the console sends) or snake_case field names.
    Text fields default to "" so validators see exactly what the user left
    blank rather than a missing key.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
