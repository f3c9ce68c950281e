"""Transfer objects for the wallet: coin packages and transactions."""

from onlycare.dto.base import TransferObject


class CoinPackageDto(TransferObject):
    """Coin package offered in the store."""

    id: str
    coins: int
    price: float
    original_price: float
    discount: int
    is_popular: bool = False
    is_best_value: bool = False


class TransactionDto(TransferObject):
    """
    Wallet transaction.

    ``created_at`` is an ISO-8601 string, e.g. ``2024-11-17T13:49:00.000000Z``.
    ``date``, ``time`` and ``icon_type`` are presentation hints the
    backend adds for the web dashboard.
    """

    id: str
    type: str | None = None
    amount: float = 0.0
    coins: int = 0
    is_credit: bool = True
    status: str | None = None
    payment_method: str | None = None
    created_at: str | None = None
    date: str | None = None
    time: str | None = None
    title: str | None = None
    description: str | None = None
    icon_type: str | None = None
