"""
Transfer objects for the OnlyCare HTTP API.

These pydantic models are the boundary contract: they accept whatever the
backend sends and leave interpretation to ``onlycare.normalization``.
"""

from onlycare.dto.base import TransferObject
from onlycare.dto.call import CallDto
from onlycare.dto.chat import ConversationDto, MessageDto
from onlycare.dto.envelope import (
    ApiEnvelope,
    ApiError,
    Pagination,
    parse_envelope,
    unwrap_records,
)
from onlycare.dto.user import UserDto
from onlycare.dto.wallet import CoinPackageDto, TransactionDto

__all__ = [
    "ApiEnvelope",
    "ApiError",
    "CallDto",
    "CoinPackageDto",
    "ConversationDto",
    "MessageDto",
    "Pagination",
    "TransactionDto",
    "TransferObject",
    "UserDto",
    "parse_envelope",
    "unwrap_records",
]
