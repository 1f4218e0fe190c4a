from __future__ import annotations

from pydantic import Field

from cse_portfolio.domain.base import DomainModel


class PortfolioTotals(DomainModel):
    total_invested: float
    total_value: float
    profit_loss: float
    profit_loss_percent: float
    holdings_count: int = Field(..., ge=0)
    total_capital: float = Field(..., ge=0.0)
    cash_balance: float
    cash_percent: float
    net_liquidation_value: float
