from __future__ import annotations

from datetime import datetime

from pydantic import Field

from cse_portfolio.domain.base import DomainModel
from cse_portfolio.domain.value_objects.enums import TransactionType


class Transaction(DomainModel):
    id: int
    stock_id: int
    symbol: str
    type: TransactionType
    quantity: int = Field(..., ge=0)
    price: float = Field(..., ge=0.0)
    fees: float = Field(default=0.0, ge=0.0)
    date: datetime
    notes: str | None = None
