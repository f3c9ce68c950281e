"""
ISO-8601 timestamp parsing with a current-time fallback.

Parsing never raises. When a timestamp cannot be read the current wall
clock is returned instead, which silently replaces upstream data. Every
such substitution is logged as ``timestamp_parse_fallback`` and counted
so corrupted upstream records remain discoverable.
"""

import threading
import time
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from onlycare.utils.logging import get_logger

log = get_logger(__name__)

Clock = Callable[[], int]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MILLISECOND = timedelta(milliseconds=1)

_fallback_lock = threading.Lock()
_fallback_count = 0


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def fallback_count() -> int:
    """Number of timestamps replaced by the current time since start/reset."""
    with _fallback_lock:
        return _fallback_count


def reset_fallback_count() -> None:
    """Reset the fallback counter to zero."""
    global _fallback_count
    with _fallback_lock:
        _fallback_count = 0


def _record_fallback(value: Any, reason: str) -> None:
    global _fallback_count
    with _fallback_lock:
        _fallback_count += 1
        total = _fallback_count
    log.warning(
        "timestamp_parse_fallback",
        value=value if isinstance(value, str) else repr(value),
        reason=reason,
        fallback_total=total,
    )


def to_epoch_ms(moment: datetime) -> int:
    """
    Convert an offset-aware datetime to epoch milliseconds.

    Sub-millisecond precision is floored.
    """
    return (moment - _EPOCH) // _MILLISECOND


def parse_iso8601(value: str) -> datetime:
    """
    Parse an ISO-8601 date-time that carries a UTC offset.

    Accepts a ``Z`` suffix (UTC) or an explicit ``+HH:MM``/``-HH:MM``
    offset, with optional fractional seconds.

    Raises:
        ValueError: If the string is malformed or has no offset.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    if "T" not in text and "t" not in text:
        msg = f"Missing time component: {value!r}"
        raise ValueError(msg)
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        msg = f"Missing UTC offset: {value!r}"
        raise ValueError(msg)
    return moment


def parse_timestamp(value: str | None, clock: Clock = now_ms) -> int:
    """
    Parse an ISO-8601 timestamp into epoch milliseconds.

    Args:
        value: Timestamp such as ``2024-11-17T13:49:00.000000Z`` or
            ``2024-11-17T13:49:00+05:30``.
        clock: Source of the fallback time.

    Returns:
        Epoch milliseconds of ``value``, or ``clock()`` if it cannot be
        parsed. The result is then not derived from the input.
    """
    if not isinstance(value, str):
        _record_fallback(value, "missing" if value is None else "not a string")
        return clock()
    try:
        return to_epoch_ms(parse_iso8601(value))
    except (ValueError, OverflowError) as e:
        _record_fallback(value, str(e))
        return clock()
