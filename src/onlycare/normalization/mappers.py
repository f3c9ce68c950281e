"""
DTO to domain entity mappers.

Every mapper is a pure, total function: it performs no I/O, never raises
for any field value a transfer object can hold, and resolves each absent
or ambiguous field to a fixed default. ``clock`` supplies "now" for the
fields that default to the current time.
"""

from functools import singledispatch
from typing import Any

from onlycare.domain.entities import (
    Call,
    ChatConversation,
    CoinPackage,
    Message,
    Transaction,
    User,
)
from onlycare.dto.call import CallDto
from onlycare.dto.chat import ConversationDto, MessageDto
from onlycare.dto.user import UserDto
from onlycare.dto.wallet import CoinPackageDto, TransactionDto
from onlycare.normalization.coercion import coerce_bool
from onlycare.normalization.enums import (
    parse_call_status,
    parse_call_type,
    parse_gender,
    parse_language,
    parse_transaction_status,
    parse_transaction_type,
)
from onlycare.normalization.timestamps import Clock, now_ms, parse_timestamp


def _truncate(value: float | None) -> int:
    """Truncate toward zero; None and non-finite values become 0."""
    if value is None:
        return 0
    try:
        return int(value)
    except (OverflowError, ValueError):
        return 0


def map_user(dto: UserDto, clock: Clock = now_ms) -> User:
    """Map a user profile."""
    return User(
        id=dto.id,
        name=dto.name or "",
        username=dto.username or "",
        age=dto.age or 0,
        gender=parse_gender(dto.gender),
        phone=dto.phone or "",
        profile_image=dto.profile_image or "",
        bio=dto.bio or "",
        language=parse_language(dto.language),
        interests=tuple(dto.interests or ()),
        is_online=coerce_bool(dto.is_online, False),
        last_seen=dto.last_seen or 0,
        rating=dto.rating,
        total_ratings=dto.total_ratings,
        coin_balance=dto.coin_balance or 0,
        total_earnings=_truncate(dto.total_earnings),
        audio_call_enabled=coerce_bool(dto.audio_call_enabled, False),
        video_call_enabled=coerce_bool(dto.video_call_enabled, False),
        is_verified=coerce_bool(dto.is_verified, False),
    )


def map_call(dto: CallDto, clock: Clock = now_ms) -> Call:
    """
    Map a call record.

    A missing ``timestamp`` is replaced by the current time.
    """
    return Call(
        id=dto.id or "",
        caller_id=dto.caller_id or "",
        caller_name=dto.caller_name or "",
        caller_image=dto.caller_image or "",
        receiver_id=dto.receiver_id or "",
        receiver_name=dto.receiver_name or "",
        receiver_image=dto.receiver_image or "",
        other_user_id=dto.other_user_id or "",
        other_user_name=dto.other_user_name or "",
        other_user_image=dto.other_user_image or "",
        call_type=parse_call_type(dto.call_type),
        status=parse_call_status(dto.status),
        duration=dto.duration,
        coins_spent=dto.coins_spent,
        coins_earned=dto.coins_earned,
        timestamp=dto.timestamp if dto.timestamp is not None else clock(),
        rating=dto.rating if dto.rating is not None else 0.0,
    )


def map_coin_package(dto: CoinPackageDto, clock: Clock = now_ms) -> CoinPackage:
    """Map a store coin package (one-to-one copy)."""
    return CoinPackage(
        id=dto.id,
        coins=dto.coins,
        price=dto.price,
        original_price=dto.original_price,
        discount=dto.discount,
        is_popular=dto.is_popular,
        is_best_value=dto.is_best_value,
    )


def map_transaction(dto: TransactionDto, clock: Clock = now_ms) -> Transaction:
    """
    Map a wallet transaction.

    ``timestamp`` comes from ``created_at``; an unreadable value falls back
    to the current time and is reported by ``parse_timestamp``. A missing
    title is derived from the type, e.g. ``Purchase``.
    """
    tx_type = parse_transaction_type(dto.type)
    return Transaction(
        id=dto.id,
        type=tx_type,
        amount=dto.amount,
        coins=dto.coins,
        is_credit=dto.is_credit,
        status=parse_transaction_status(dto.status),
        timestamp=parse_timestamp(dto.created_at, clock),
        payment_method=dto.payment_method or "",
        title=dto.title if dto.title is not None else tx_type.label,
        description=dto.description or "",
    )


def map_message(dto: MessageDto, clock: Clock = now_ms) -> Message:
    """
    Map a chat message.

    The upstream ``created_at`` is ignored and the message is stamped with
    the current time, so ordering by ``timestamp`` reflects arrival order
    only. Kept as-is pending a product decision on history ordering.
    """
    return Message(
        id=dto.id,
        sender_id=dto.sender_id,
        receiver_id=dto.receiver_id,
        content=dto.message,
        timestamp=clock(),
        is_read=dto.is_read,
    )


def map_conversation(dto: ConversationDto, clock: Clock = now_ms) -> ChatConversation:
    """
    Map a chat list entry.

    As with messages, ``last_message_time`` is the current time rather than
    the upstream value.
    """
    return ChatConversation(
        user_id=dto.user.id,
        user_name=dto.user.name or "",
        user_image=dto.user.profile_image or "",
        last_message=dto.last_message or "",
        last_message_time=clock(),
        unread_count=dto.unread_count,
        is_online=coerce_bool(dto.user.is_online, False),
    )


@singledispatch
def to_domain(dto: Any, clock: Clock = now_ms) -> Any:
    """
    Map any supported transfer object to its domain entity.

    Raises:
        TypeError: If ``dto`` is not a supported transfer object.
    """
    msg = f"No mapper registered for {type(dto).__name__}"
    raise TypeError(msg)


to_domain.register(UserDto, map_user)
to_domain.register(CallDto, map_call)
to_domain.register(CoinPackageDto, map_coin_package)
to_domain.register(TransactionDto, map_transaction)
to_domain.register(MessageDto, map_message)
to_domain.register(ConversationDto, map_conversation)
