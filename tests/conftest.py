"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

from onlycare.normalization.timestamps import Clock, reset_fallback_count

FIXED_NOW_MS = 1_731_851_340_000  # 2024-11-17T13:49:00Z


@pytest.fixture(autouse=True)
def _reset_state() -> Iterator[None]:
    """Start every test with default logging and a zeroed fallback counter."""
    reset_fallback_count()
    yield
    structlog.reset_defaults()
    reset_fallback_count()


@pytest.fixture
def fixed_now() -> int:
    """Pinned "now" in epoch milliseconds."""
    return FIXED_NOW_MS


@pytest.fixture
def fixed_clock(fixed_now: int) -> Clock:
    """Clock that always returns fixed_now."""
    return lambda: fixed_now


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def raw_user() -> dict[str, Any]:
    """User record as returned by the profile endpoint."""
    return {
        "id": "USR_17",
        "phone": "+919876543210",
        "name": "Priya",
        "username": "priya_k",
        "age": 24,
        "gender": "FEMALE",
        "profile_image": "https://cdn.onlycare.in/avatars/12.png",
        "bio": "Music and long chats",
        "language": "tamil",
        "interests": ["MUSIC", "TRAVEL"],
        "is_online": 1,
        "last_seen": 1_731_850_000_000,
        "rating": 4.6,
        "total_ratings": 112,
        "coin_balance": 0,
        "total_earnings": 1523.75,
        "audio_status": "enabled",
        "video_status": "0",
        "is_verified": True,
        "kyc_status": "APPROVED",
    }


@pytest.fixture
def raw_call() -> dict[str, Any]:
    """Call history record."""
    return {
        "id": "CALL_901",
        "caller_id": "USR_3",
        "caller_name": "Arjun",
        "caller_image": None,
        "receiver_id": "USR_17",
        "receiver_name": "Priya",
        "other_user_id": "USR_17",
        "other_user_name": "Priya",
        "call_type": "VIDEO",
        "status": "ENDED",
        "duration": 185,
        "coins_spent": 60,
        "coins_earned": 0,
        "rating": 5,
        "timestamp": 1_731_849_000_000,
        "channel_name": "call_901",
    }


@pytest.fixture
def raw_transaction() -> dict[str, Any]:
    """Wallet transaction record."""
    return {
        "id": "TXN_55",
        "type": "CALL_SPENT",
        "amount": 0,
        "coins": 60,
        "is_credit": False,
        "status": "SUCCESS",
        "payment_method": None,
        "created_at": "2024-11-17T13:49:00.000000Z",
        "date": "17 Nov 2024",
        "time": "07:19 PM",
    }


@pytest.fixture
def raw_coin_package() -> dict[str, Any]:
    """Store coin package record."""
    return {
        "id": "PKG_2",
        "coins": 500,
        "price": 399.0,
        "original_price": 499.0,
        "discount": 20,
        "is_popular": True,
    }


@pytest.fixture
def raw_message() -> dict[str, Any]:
    """Chat message record."""
    return {
        "id": "MSG_1",
        "sender_id": "USR_3",
        "receiver_id": "USR_17",
        "message": "Hi!",
        "created_at": "2024-11-17T13:49:00Z",
        "is_read": True,
    }


@pytest.fixture
def raw_conversation(raw_user: dict[str, Any]) -> dict[str, Any]:
    """Chat list record."""
    return {
        "user": raw_user,
        "last_message": "See you tomorrow",
        "last_message_time": "2024-11-17T13:49:00Z",
        "unread_count": 2,
    }
