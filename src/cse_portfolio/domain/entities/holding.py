from __future__ import annotations

from pydantic import Field

from cse_portfolio.domain.base import DomainModel
from cse_portfolio.domain.entities.stock import Stock
from cse_portfolio.domain.value_objects.enums import HoldingStatus


class Holding(DomainModel):
    id: int
    stock_id: int
    stock: Stock
    quantity: int = Field(..., ge=0)
    avg_buy_price: float = Field(..., ge=0.0)
    initial_buy_price: float | None = Field(default=None, ge=0.0)
    last_buy_price: float | None = Field(default=None, ge=0.0)
    total_invested: float = Field(..., ge=0.0)
    status: HoldingStatus = HoldingStatus.ACTIVE
    current_price: float | None = Field(default=None, ge=0.0)
    current_value: float | None = Field(default=None, ge=0.0)
    profit_loss: float | None = None
    profit_loss_percent: float | None = None

    @property
    def symbol(self) -> str:
        return self.stock.symbol

    def market_value(self) -> float:
        # Unpriced (or zero-valued) holdings are carried at cost.
        return self.current_value if self.current_value else self.total_invested
