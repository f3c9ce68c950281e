"""Pandera schemas for exported wallet tables."""

import pandera.pandas as pa
from pandera.typing import Series

from onlycare.domain.enums import TransactionStatus, TransactionType


class CoinPackageFrameSchema(pa.DataFrameModel):
    """Schema for store coin packages."""

    id: Series[str] = pa.Field(unique=True)
    coins: Series[int] = pa.Field(gt=0, description="Coins granted")
    price: Series[float] = pa.Field(ge=0.0, description="Sale price")
    original_price: Series[float] = pa.Field(ge=0.0, description="List price")
    discount: Series[int] = pa.Field(ge=0, description="Advertised discount")
    is_popular: Series[bool]
    is_best_value: Series[bool]

    class Config:
        """Schema configuration."""

        name = "CoinPackageFrameSchema"
        strict = False
        coerce = True


class TransactionFrameSchema(pa.DataFrameModel):
    """Schema for wallet transactions, one row per ledger entry."""

    id: Series[str] = pa.Field(unique=True)
    type: Series[str] = pa.Field(isin=[t.value for t in TransactionType])
    amount: Series[float]
    coins: Series[int]
    is_credit: Series[bool]
    status: Series[str] = pa.Field(isin=[s.value for s in TransactionStatus])
    timestamp: Series[int] = pa.Field(description="Epoch milliseconds")
    title: Series[str]
    payment_method: Series[str]
    description: Series[str]

    class Config:
        """Schema configuration."""

        name = "TransactionFrameSchema"
        strict = False
        coerce = True
