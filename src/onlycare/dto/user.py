"""Transfer objects for user profiles."""

from typing import Any

from pydantic import AliasChoices, Field

from onlycare.dto.base import TransferObject


class UserDto(TransferObject):
    """
    User profile as returned by the Laravel API.

    Boolean-like flags are typed ``Any``: depending on the endpoint they
    arrive as JSON booleans, 0/1 integers or strings such as ``"enabled"``.
    Several endpoints also use different key names for the same flag,
    all of which are accepted here.
    """

    id: str
    name: str | None = None
    phone: str | None = None
    username: str | None = None
    age: int | None = None
    gender: str | None = None
    profile_image: str | None = None
    bio: str | None = None
    language: str | None = None
    interests: list[str] | None = None
    is_online: Any = Field(
        default=None,
        validation_alias=AliasChoices(
            "is_online", "isOnline", "online", "online_status", "is_online_status"
        ),
    )
    last_seen: int | None = None
    rating: float = 0.0
    total_ratings: int = 0
    coin_balance: int | None = None
    total_earnings: float | None = None
    audio_call_enabled: Any = Field(
        default=None,
        validation_alias=AliasChoices(
            "audio_call_enabled",
            "audio_enabled",
            "is_audio_enabled",
            "audio_call_status",
            "audio_status",
            "audioStatus",
        ),
    )
    video_call_enabled: Any = Field(
        default=None,
        validation_alias=AliasChoices(
            "video_call_enabled",
            "video_enabled",
            "is_video_enabled",
            "video_call_status",
            "video_status",
            "videoStatus",
        ),
    )
    is_verified: Any = Field(
        default=None,
        validation_alias=AliasChoices(
            "is_verified", "isVerified", "verified", "is_approved", "verification_status"
        ),
    )
    verified_datetime: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "verified_datetime", "verifiedDatetime", "verified_at", "verifiedAt"
        ),
    )
    kyc_status: str | None = None
    audio_call_rate: int | None = None
    video_call_rate: int | None = None
    created_at: str | None = None
