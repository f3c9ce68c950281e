"""
Batch normalization of decoded API responses.

Decodes raw record dicts into transfer objects and maps them to domain
entities. Decoding is the only step that can fail (e.g. a user record
without ``id``); such records are skipped and reported, unless strict
mode is requested.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ValidationError

from onlycare.domain.entities import (
    Call,
    ChatConversation,
    CoinPackage,
    Message,
    Transaction,
    User,
)
from onlycare.dto.base import TransferObject
from onlycare.dto.call import CallDto
from onlycare.dto.chat import ConversationDto, MessageDto
from onlycare.dto.envelope import unwrap_records
from onlycare.dto.user import UserDto
from onlycare.dto.wallet import CoinPackageDto, TransactionDto
from onlycare.normalization.mappers import (
    map_call,
    map_coin_package,
    map_conversation,
    map_message,
    map_transaction,
    map_user,
)
from onlycare.normalization.timestamps import Clock, now_ms
from onlycare.utils.logging import get_logger, log_context

log = get_logger(__name__)


class EntityKind(str, Enum):
    """Kinds of records the layer can normalize."""

    USER = "user"
    CALL = "call"
    COIN_PACKAGE = "coin_package"
    TRANSACTION = "transaction"
    MESSAGE = "message"
    CONVERSATION = "conversation"


@dataclass(frozen=True)
class KindSpec:
    """How to decode and map one entity kind."""

    dto: type[TransferObject]
    entity: type
    mapper: Callable[[Any, Clock], Any]
    response_keys: tuple[str, ...]


KIND_SPECS: dict[EntityKind, KindSpec] = {
    EntityKind.USER: KindSpec(UserDto, User, map_user, ("user", "users")),
    EntityKind.CALL: KindSpec(CallDto, Call, map_call, ("call", "calls")),
    EntityKind.COIN_PACKAGE: KindSpec(
        CoinPackageDto, CoinPackage, map_coin_package, ("packages",)
    ),
    EntityKind.TRANSACTION: KindSpec(
        TransactionDto, Transaction, map_transaction, ("transaction", "transactions")
    ),
    EntityKind.MESSAGE: KindSpec(MessageDto, Message, map_message, ("messages",)),
    EntityKind.CONVERSATION: KindSpec(
        ConversationDto, ChatConversation, map_conversation, ("conversations",)
    ),
}


@dataclass(frozen=True)
class RecordError:
    """A record that could not be decoded."""

    index: int
    message: str


@dataclass
class NormalizationResult:
    """
    Outcome of a batch run.

    Attributes:
        kind: Entity kind that was normalized.
        entities: Mapped entities in input order.
        n_input: Number of raw records seen.
        errors: Records skipped because they could not be decoded.
    """

    kind: EntityKind
    entities: list[Any] = field(default_factory=list)
    n_input: int = 0
    errors: list[RecordError] = field(default_factory=list)

    @property
    def n_skipped(self) -> int:
        """Number of records skipped."""
        return len(self.errors)


def normalize_record(
    kind: EntityKind,
    record: dict[str, Any],
    clock: Clock = now_ms,
) -> Any:
    """
    Decode and map a single raw record.

    Raises:
        pydantic.ValidationError: If the record lacks required fields or
            a field has an undecodable value.
    """
    spec = KIND_SPECS[kind]
    dto = spec.dto.model_validate(record)
    return spec.mapper(dto, clock)


def normalize_records(
    kind: EntityKind,
    records: Iterable[dict[str, Any]],
    *,
    strict: bool = False,
    clock: Clock = now_ms,
) -> NormalizationResult:
    """
    Normalize a sequence of raw records of one kind.

    Args:
        kind: Entity kind of every record.
        records: Raw record dicts.
        strict: Re-raise the first decoding error instead of skipping.
        clock: Source of "now" for time-defaulted fields.

    Returns:
        NormalizationResult with entities and skipped-record errors.
    """
    result = NormalizationResult(kind=kind)

    with log_context(kind=kind.value):
        for index, record in enumerate(records):
            result.n_input += 1
            try:
                result.entities.append(normalize_record(kind, record, clock))
            except ValidationError as e:
                if strict:
                    raise
                log.warning(
                    "Skipping undecodable record",
                    index=index,
                    errors=e.error_count(),
                )
                result.errors.append(RecordError(index=index, message=str(e)))

        log.info(
            "Normalized records",
            n_input=result.n_input,
            n_entities=len(result.entities),
            n_skipped=result.n_skipped,
        )

    return result


def normalize_response(
    kind: EntityKind,
    payload: Any,
    *,
    strict: bool = False,
    clock: Clock = now_ms,
) -> NormalizationResult:
    """
    Normalize all records of ``kind`` contained in a decoded response body.

    See ``unwrap_records`` for the response shapes that are understood.
    """
    records = unwrap_records(payload, KIND_SPECS[kind].response_keys)
    return normalize_records(kind, records, strict=strict, clock=clock)
