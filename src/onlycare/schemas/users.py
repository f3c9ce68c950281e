"""Pandera schema for exported user tables."""

import pandera.pandas as pa
from pandera.typing import Series

from onlycare.domain.enums import Gender, Language


class UserFrameSchema(pa.DataFrameModel):
    """
    Schema for normalized users, one row per user.

    ``interests`` is the ``|``-joined tag list.
    """

    id: Series[str] = pa.Field(unique=True, description="Backend user id")
    name: Series[str] = pa.Field(description="Display name")
    username: Series[str]
    age: Series[int] = pa.Field(ge=0, description="Age in years, 0 if unknown")
    gender: Series[str] = pa.Field(isin=[g.value for g in Gender])
    phone: Series[str]
    profile_image: Series[str]
    bio: Series[str]
    language: Series[str] = pa.Field(isin=[lang.value for lang in Language])
    interests: Series[str]
    is_online: Series[bool]
    last_seen: Series[int] = pa.Field(ge=0, description="Epoch milliseconds")
    rating: Series[float] = pa.Field(ge=0.0, le=5.0)
    total_ratings: Series[int] = pa.Field(ge=0)
    coin_balance: Series[int]
    total_earnings: Series[int]
    audio_call_enabled: Series[bool]
    video_call_enabled: Series[bool]
    is_verified: Series[bool]

    class Config:
        """Schema configuration."""

        name = "UserFrameSchema"
        strict = False
        coerce = True
