"""
Domain model: closed enumerations and immutable entities.

Everything in this package is a plain value type with no behaviour
beyond derived display properties.
"""

from onlycare.domain.entities import (
    Call,
    ChatConversation,
    CoinPackage,
    Message,
    Transaction,
    User,
)
from onlycare.domain.enums import (
    CallStatus,
    CallType,
    Gender,
    Language,
    TransactionStatus,
    TransactionType,
)

__all__ = [
    "Call",
    "CallStatus",
    "CallType",
    "ChatConversation",
    "CoinPackage",
    "Gender",
    "Language",
    "Message",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "User",
]
