"""
Domain entities produced by the normalization layer.

All entities are immutable and default-complete: once constructed every
attribute is present and of its declared type, so downstream code needs no
null or type checks. Timestamps are epoch milliseconds.
"""

from dataclasses import dataclass

from onlycare.domain.enums import (
    CallStatus,
    CallType,
    Gender,
    Language,
    TransactionStatus,
    TransactionType,
)


@dataclass(frozen=True)
class User:
    """
    A platform account.

    Attributes:
        id: Backend user id.
        name: Display name.
        username: Handle chosen at profile setup.
        age: Age in years, 0 if unknown.
        gender: Account gender.
        phone: Phone number including country code.
        profile_image: Avatar URL or avatar id.
        bio: Free text profile description.
        language: Preferred language.
        interests: Interest tags in API order.
        is_online: Presence flag.
        last_seen: Last presence time (epoch ms), 0 if unknown.
        rating: Average call rating.
        total_ratings: Number of ratings received.
        coin_balance: Spendable coins.
        total_earnings: Lifetime earnings, truncated to whole units.
        audio_call_enabled: Accepts audio calls.
        video_call_enabled: Accepts video calls.
        is_verified: Passed profile verification.
    """

    id: str
    name: str = ""
    username: str = ""
    age: int = 0
    gender: Gender = Gender.MALE
    phone: str = ""
    profile_image: str = ""
    bio: str = ""
    language: Language = Language.ENGLISH
    interests: tuple[str, ...] = ()
    is_online: bool = False
    last_seen: int = 0
    rating: float = 0.0
    total_ratings: int = 0
    coin_balance: int = 0
    total_earnings: int = 0
    audio_call_enabled: bool = False
    video_call_enabled: bool = False
    is_verified: bool = False


@dataclass(frozen=True)
class Call:
    """
    A single audio or video call as seen by the current user.

    ``other_user_*`` describe the counterpart regardless of direction.
    ``duration`` is in seconds.
    """

    timestamp: int
    id: str = ""
    caller_id: str = ""
    caller_name: str = ""
    caller_image: str = ""
    receiver_id: str = ""
    receiver_name: str = ""
    receiver_image: str = ""
    other_user_id: str = ""
    other_user_name: str = ""
    other_user_image: str = ""
    call_type: CallType = CallType.AUDIO
    status: CallStatus = CallStatus.PENDING
    duration: int = 0
    coins_spent: int = 0
    coins_earned: int = 0
    rating: float = 0.0


@dataclass(frozen=True)
class CoinPackage:
    """A purchasable bundle of coins. Prices are in rupees."""

    id: str
    coins: int
    price: float
    original_price: float
    discount: int
    is_popular: bool = False
    is_best_value: bool = False


@dataclass(frozen=True)
class Transaction:
    """A wallet ledger entry."""

    id: str
    type: TransactionType
    amount: float
    coins: int
    is_credit: bool
    status: TransactionStatus
    timestamp: int
    title: str
    payment_method: str = ""
    description: str = ""


@dataclass(frozen=True)
class Message:
    """A chat message between two users."""

    id: str
    sender_id: str
    receiver_id: str
    content: str
    timestamp: int
    is_read: bool = False


@dataclass(frozen=True)
class ChatConversation:
    """One row of the chat list: the counterpart and the latest message."""

    user_id: str
    user_name: str
    last_message_time: int
    user_image: str = ""
    last_message: str = ""
    unread_count: int = 0
    is_online: bool = False
