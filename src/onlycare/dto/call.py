"""Transfer objects for calls."""

from onlycare.dto.base import TransferObject


class CallDto(TransferObject):
    """
    Call record from the call history, initiate and end-call endpoints.

    Every field is optional: partially populated call objects are common
    while a call is still being set up.
    """

    id: str | None = None
    caller_id: str | None = None
    caller_name: str | None = None
    caller_image: str | None = None
    receiver_id: str | None = None
    receiver_name: str | None = None
    receiver_image: str | None = None
    other_user_id: str | None = None
    other_user_name: str | None = None
    other_user_image: str | None = None
    call_type: str | None = None
    status: str | None = None
    duration: int = 0
    coins_spent: int = 0
    coins_earned: int = 0
    rating: float | None = None
    timestamp: int | None = None

    # Session details, not part of the call history entity
    agora_app_id: str | None = None
    agora_token: str | None = None
    channel_name: str | None = None
    balance_time: str | None = None
    started_at: str | None = None
    ended_at: str | None = None
