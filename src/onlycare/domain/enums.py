"""
Closed enumerations used by the domain entities.

Values are the canonical upper-case tokens the OnlyCare API emits.
"""

from enum import Enum


class Gender(str, Enum):
    """Account gender. Drives which home screen and call rules apply."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class Language(str, Enum):
    """Preferred app language."""

    ENGLISH = "ENGLISH"
    HINDI = "HINDI"
    TAMIL = "TAMIL"
    TELUGU = "TELUGU"
    KANNADA = "KANNADA"
    MALAYALAM = "MALAYALAM"
    BENGALI = "BENGALI"
    MARATHI = "MARATHI"

    @property
    def display_name(self) -> str:
        """Language name written in its own script."""
        return _LANGUAGE_DISPLAY_NAMES[self]


_LANGUAGE_DISPLAY_NAMES: dict[Language, str] = {
    Language.ENGLISH: "English",
    Language.HINDI: "हिंदी",
    Language.TAMIL: "தமிழ்",
    Language.TELUGU: "తెలుగు",
    Language.KANNADA: "ಕನ್ನಡ",
    Language.MALAYALAM: "മലയാളം",
    Language.BENGALI: "বাংলা",
    Language.MARATHI: "मराठी",
}


class CallType(str, Enum):
    """Media type of a call."""

    AUDIO = "AUDIO"
    VIDEO = "VIDEO"


class CallStatus(str, Enum):
    """Lifecycle state of a call as reported by the backend."""

    PENDING = "PENDING"
    CONNECTING = "CONNECTING"
    ONGOING = "ONGOING"
    ENDED = "ENDED"
    MISSED = "MISSED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class TransactionType(str, Enum):
    """Wallet transaction category."""

    PURCHASE = "PURCHASE"
    CALL = "CALL"
    GIFT = "GIFT"
    WITHDRAWAL = "WITHDRAWAL"
    BONUS = "BONUS"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``Withdrawal``."""
        return self.value.lower().capitalize()


class TransactionStatus(str, Enum):
    """Settlement state of a wallet transaction."""

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
