"""
Pandera schemas for tabular exports of normalized entities.

Each entity kind has a DataFrame contract that export output is
validated against before it is written.
"""

from onlycare.schemas.calls import CallFrameSchema
from onlycare.schemas.chat import ConversationFrameSchema, MessageFrameSchema
from onlycare.schemas.registry import SchemaInfo, SchemaRegistry
from onlycare.schemas.users import UserFrameSchema
from onlycare.schemas.wallet import CoinPackageFrameSchema, TransactionFrameSchema

__all__ = [
    "CallFrameSchema",
    "CoinPackageFrameSchema",
    "ConversationFrameSchema",
    "MessageFrameSchema",
    "SchemaInfo",
    "SchemaRegistry",
    "TransactionFrameSchema",
    "UserFrameSchema",
]
