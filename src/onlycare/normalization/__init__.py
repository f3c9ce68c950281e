"""
Normalization layer for inbound API data.

Turns loosely-typed transfer objects into strict domain entities:
boolean coercion, enum parsing, timestamp parsing and per-entity mapping.
"""

from onlycare.normalization.batch import (
    EntityKind,
    NormalizationResult,
    normalize_record,
    normalize_records,
    normalize_response,
)
from onlycare.normalization.coercion import BoolLike, coerce_bool
from onlycare.normalization.enums import (
    parse_call_status,
    parse_call_type,
    parse_gender,
    parse_language,
    parse_transaction_status,
    parse_transaction_type,
)
from onlycare.normalization.mappers import (
    map_call,
    map_coin_package,
    map_conversation,
    map_message,
    map_transaction,
    map_user,
    to_domain,
)
from onlycare.normalization.timestamps import (
    fallback_count,
    now_ms,
    parse_timestamp,
    reset_fallback_count,
)

__all__ = [
    "BoolLike",
    "EntityKind",
    "NormalizationResult",
    "coerce_bool",
    "fallback_count",
    "map_call",
    "map_coin_package",
    "map_conversation",
    "map_message",
    "map_transaction",
    "map_user",
    "normalize_record",
    "normalize_records",
    "normalize_response",
    "now_ms",
    "parse_call_status",
    "parse_call_type",
    "parse_gender",
    "parse_language",
    "parse_timestamp",
    "parse_transaction_status",
    "parse_transaction_type",
    "reset_fallback_count",
    "to_domain",
]
