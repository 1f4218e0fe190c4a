from __future__ import annotations

from cse_portfolio.domain.base import DomainModel


class Stock(DomainModel):
    id: int
    symbol: str
    name: str = ""
    sector: str | None = None
