"""
Base class for API transfer objects.

Transfer objects describe the wire shape only. They are deliberately
permissive: unknown keys are ignored, numeric ids are accepted as
strings and an explicit JSON ``null`` is treated exactly like an
absent key.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class TransferObject(BaseModel):
    """Loosely-typed record as decoded from an OnlyCare API response."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Remove ``null`` values so field defaults apply."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
