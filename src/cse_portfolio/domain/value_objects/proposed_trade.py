from __future__ import annotations

from pydantic import Field

from cse_portfolio.domain.base import DomainModel
from cse_portfolio.domain.value_objects.enums import TradeSide


class ProposedTrade(DomainModel):
    stock_id: int
    symbol: str
    side: TradeSide
    quantity: int = Field(..., gt=0)
    price: float = Field(..., gt=0.0)
    fees: float = Field(default=0.0, ge=0.0)
    sector: str | None = None

    def gross_cost(self) -> float:
        return self.quantity * self.price + self.fees
