"""Pandera schema for exported call history tables."""

import pandera.pandas as pa
from pandera.typing import Series

from onlycare.domain.enums import CallStatus, CallType


class CallFrameSchema(pa.DataFrameModel):
    """Schema for normalized calls, one row per call."""

    id: Series[str]
    caller_id: Series[str]
    caller_name: Series[str]
    caller_image: Series[str]
    receiver_id: Series[str]
    receiver_name: Series[str]
    receiver_image: Series[str]
    other_user_id: Series[str]
    other_user_name: Series[str]
    other_user_image: Series[str]
    call_type: Series[str] = pa.Field(isin=[t.value for t in CallType])
    status: Series[str] = pa.Field(isin=[s.value for s in CallStatus])
    duration: Series[int] = pa.Field(ge=0, description="Call length in seconds")
    coins_spent: Series[int] = pa.Field(ge=0)
    coins_earned: Series[int] = pa.Field(ge=0)
    timestamp: Series[int] = pa.Field(ge=0, description="Epoch milliseconds")
    rating: Series[float] = pa.Field(ge=0.0, le=5.0)

    class Config:
        """Schema configuration."""

        name = "CallFrameSchema"
        strict = False
        coerce = True
