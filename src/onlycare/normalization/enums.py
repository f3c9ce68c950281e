"""
Parsing of enumerated API tokens.

Each parser is a total mapping from a fixed token table to a closed
enumeration with an explicit default member. Matching ignores case and
surrounding whitespace; the first table entry that matches wins.
"""

from enum import Enum
from typing import TypeVar

from onlycare.domain.enums import (
    CallStatus,
    CallType,
    Gender,
    Language,
    TransactionStatus,
    TransactionType,
)
from onlycare.utils.logging import get_logger

log = get_logger(__name__)

E = TypeVar("E", bound=Enum)

GENDER_TOKENS: dict[str, Gender] = {
    "FEMALE": Gender.FEMALE,
    "MALE": Gender.MALE,
}

LANGUAGE_TOKENS: dict[str, Language] = {
    "HINDI": Language.HINDI,
    "TAMIL": Language.TAMIL,
    "TELUGU": Language.TELUGU,
    "KANNADA": Language.KANNADA,
    "MALAYALAM": Language.MALAYALAM,
    "BENGALI": Language.BENGALI,
    "MARATHI": Language.MARATHI,
    "ENGLISH": Language.ENGLISH,
}

CALL_TYPE_TOKENS: dict[str, CallType] = {
    "VIDEO": CallType.VIDEO,
    "AUDIO": CallType.AUDIO,
}

CALL_STATUS_TOKENS: dict[str, CallStatus] = {
    "PENDING": CallStatus.PENDING,
    "CONNECTING": CallStatus.CONNECTING,
    "ONGOING": CallStatus.ONGOING,
    "ENDED": CallStatus.ENDED,
    "MISSED": CallStatus.MISSED,
    "REJECTED": CallStatus.REJECTED,
    "CANCELLED": CallStatus.CANCELLED,
}

TRANSACTION_TYPE_TOKENS: dict[str, TransactionType] = {
    "PURCHASE": TransactionType.PURCHASE,
    "CALL": TransactionType.CALL,
    # Ledger entries for coins spent on calls
    "CALL_SPENT": TransactionType.CALL,
    "GIFT": TransactionType.GIFT,
    "WITHDRAWAL": TransactionType.WITHDRAWAL,
    "BONUS": TransactionType.BONUS,
}

TRANSACTION_STATUS_TOKENS: dict[str, TransactionStatus] = {
    "PENDING": TransactionStatus.PENDING,
    "SUCCESS": TransactionStatus.SUCCESS,
    "FAILED": TransactionStatus.FAILED,
}


def parse_token(
    raw: str | None,
    tokens: dict[str, E],
    default: E,
    *,
    field: str = "",
) -> E:
    """
    Map a raw token onto an enum member.

    Args:
        raw: Token as received, may be None.
        tokens: Upper-case token -> member table.
        default: Member returned for absent or unrecognized tokens.
        field: Field name, used only for diagnostics.

    Returns:
        Matching member or ``default``.
    """
    if raw is None:
        return default
    key = str(raw).strip().upper()
    member = tokens.get(key)
    if member is None:
        if key:
            log.debug("Unrecognized enum token", field=field, token=raw, default=default.value)
        return default
    return member


def parse_gender(raw: str | None) -> Gender:
    """Parse gender, defaulting to MALE."""
    return parse_token(raw, GENDER_TOKENS, Gender.MALE, field="gender")


def parse_language(raw: str | None) -> Language:
    """Parse preferred language, defaulting to ENGLISH."""
    return parse_token(raw, LANGUAGE_TOKENS, Language.ENGLISH, field="language")


def parse_call_type(raw: str | None) -> CallType:
    """Parse call type, defaulting to AUDIO."""
    return parse_token(raw, CALL_TYPE_TOKENS, CallType.AUDIO, field="call_type")


def parse_call_status(raw: str | None) -> CallStatus:
    """Parse call status, defaulting to PENDING."""
    return parse_token(raw, CALL_STATUS_TOKENS, CallStatus.PENDING, field="call_status")


def parse_transaction_type(raw: str | None) -> TransactionType:
    """Parse transaction type, defaulting to PURCHASE. CALL_SPENT maps to CALL."""
    return parse_token(
        raw, TRANSACTION_TYPE_TOKENS, TransactionType.PURCHASE, field="transaction_type"
    )


def parse_transaction_status(raw: str | None) -> TransactionStatus:
    """Parse transaction status, defaulting to PENDING."""
    return parse_token(
        raw,
        TRANSACTION_STATUS_TOKENS,
        TransactionStatus.PENDING,
        field="transaction_status",
    )
