"""
Schema registry for exported entity tables.

Provides lookup of the table schema for each entity kind with version
tracking.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import pandera.pandas as pa

from onlycare.normalization.batch import EntityKind
from onlycare.schemas.calls import CallFrameSchema
from onlycare.schemas.chat import ConversationFrameSchema, MessageFrameSchema
from onlycare.schemas.users import UserFrameSchema
from onlycare.schemas.wallet import CoinPackageFrameSchema, TransactionFrameSchema

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class SchemaInfo:
    """Metadata about a registered schema."""

    kind: EntityKind
    schema: type[pa.DataFrameModel]
    version: str
    description: str


class SchemaRegistry:
    """Centralized registry of entity table schemas."""

    _version = "1.0.0"

    _schemas: ClassVar[dict[EntityKind, SchemaInfo]] = {
        EntityKind.USER: SchemaInfo(
            kind=EntityKind.USER,
            schema=UserFrameSchema,
            version="1.0.0",
            description="User profiles",
        ),
        EntityKind.CALL: SchemaInfo(
            kind=EntityKind.CALL,
            schema=CallFrameSchema,
            version="1.0.0",
            description="Call history entries",
        ),
        EntityKind.COIN_PACKAGE: SchemaInfo(
            kind=EntityKind.COIN_PACKAGE,
            schema=CoinPackageFrameSchema,
            version="1.0.0",
            description="Store coin packages",
        ),
        EntityKind.TRANSACTION: SchemaInfo(
            kind=EntityKind.TRANSACTION,
            schema=TransactionFrameSchema,
            version="1.0.0",
            description="Wallet ledger entries",
        ),
        EntityKind.MESSAGE: SchemaInfo(
            kind=EntityKind.MESSAGE,
            schema=MessageFrameSchema,
            version="1.0.0",
            description="Chat messages",
        ),
        EntityKind.CONVERSATION: SchemaInfo(
            kind=EntityKind.CONVERSATION,
            schema=ConversationFrameSchema,
            version="1.0.0",
            description="Chat list entries",
        ),
    }

    @classmethod
    def registry_version(cls) -> str:
        """Get the registry version."""
        return cls._version

    @classmethod
    def get_info(cls, kind: EntityKind | str) -> SchemaInfo:
        """
        Get schema info for an entity kind.

        Args:
            kind: Entity kind or its string value (e.g. ``"transaction"``).

        Returns:
            SchemaInfo with metadata.

        Raises:
            KeyError: If the kind is unknown.
        """
        try:
            key = EntityKind(kind)
        except ValueError:
            available = ", ".join(k.value for k in cls._schemas)
            msg = f"Unknown entity kind '{kind}'. Available: {available}"
            raise KeyError(msg) from None
        return cls._schemas[key]

    @classmethod
    def get(cls, kind: EntityKind | str) -> type[pa.DataFrameModel]:
        """Get the DataFrameModel class for an entity kind."""
        return cls.get_info(kind).schema

    @classmethod
    def list_kinds(cls) -> list[EntityKind]:
        """List all registered entity kinds."""
        return list(cls._schemas.keys())

    @classmethod
    def validate(cls, df: "pd.DataFrame", kind: EntityKind | str) -> "pd.DataFrame":
        """
        Validate a DataFrame against the schema of an entity kind.

        Raises:
            pandera.errors.SchemaError: If validation fails.
        """
        return cls.get(kind).validate(df)
