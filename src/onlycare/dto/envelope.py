"""
Response envelopes wrapping API records.

The backend is not consistent about where records live in a response.
Depending on the endpoint they sit under ``data``, under a resource key
(``packages``, ``conversations``, ``call``, ...) or form the top-level
JSON array. ``unwrap_records`` hides that variation from callers.
"""

from collections.abc import Sequence
from typing import Any

from onlycare.dto.base import TransferObject
from onlycare.utils.logging import get_logger

log = get_logger(__name__)


class ApiError(TransferObject):
    """Error block of a failed response."""

    code: str = ""
    message: str = ""
    details: dict[str, list[str]] | None = None


class Pagination(TransferObject):
    """Pagination block of list endpoints."""

    current_page: int = 1
    total_pages: int = 1
    total_items: int = 0
    per_page: int = 0
    has_next: bool = False
    has_prev: bool = False


class ApiEnvelope(TransferObject):
    """Generic ``{success, message, data, error, pagination}`` wrapper."""

    success: bool = False
    message: str | None = None
    data: Any = None
    error: ApiError | None = None
    pagination: Pagination | None = None


def parse_envelope(payload: Any) -> ApiEnvelope | None:
    """
    Parse the generic wrapper of a response.

    Args:
        payload: Decoded JSON body.

    Returns:
        Envelope, or None if the body is not a JSON object.
    """
    if not isinstance(payload, dict):
        return None
    return ApiEnvelope.model_validate(payload)


def _as_records(value: Any) -> list[dict[str, Any]]:
    """Turn a single record or a list of records into a list of dicts."""
    items = value if isinstance(value, list) else [value]
    records = [item for item in items if isinstance(item, dict)]
    if len(records) != len(items):
        log.warning(
            "Dropped non-object entries from response",
            dropped=len(items) - len(records),
        )
    return records


def unwrap_records(
    payload: Any,
    keys: Sequence[str] = (),
) -> list[dict[str, Any]]:
    """
    Extract raw record dicts from a decoded response body.

    Lookup order: top-level array, then each resource key in ``keys``,
    then ``data`` (itself searched for the resource keys when it is an
    object holding them), then the body itself as a single record.

    Args:
        payload: Decoded JSON body.
        keys: Resource keys for the entity kind, e.g. ``("packages",)``.

    Returns:
        List of record dicts (possibly empty).
    """
    if payload is None:
        return []
    if isinstance(payload, list):
        return _as_records(payload)
    if not isinstance(payload, dict):
        log.warning("Response body is not a JSON object", type=type(payload).__name__)
        return []

    for key in keys:
        if payload.get(key) is not None:
            return _as_records(payload[key])

    if "data" in payload:
        data = payload["data"]
        if data is None:
            return []
        if isinstance(data, dict) and any(data.get(key) is not None for key in keys):
            return unwrap_records(data, keys)
        return _as_records(data)

    envelope_keys = {"success", "message", "error", "pagination"}
    if set(payload) <= envelope_keys:
        return []
    return [payload]
