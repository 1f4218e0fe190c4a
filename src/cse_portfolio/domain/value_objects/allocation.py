from __future__ import annotations

from pydantic import Field

from cse_portfolio.domain.base import DomainModel


class Tranche(DomainModel):
    """A single price point inside a stock's allocation."""

    id: str
    price: float = Field(..., ge=0.0)
    percent: int = Field(..., ge=0, le=100, description="Share of the stock's allocation")
    label: str | None = None


class StockEntry(DomainModel):
    id: str
    symbol: str
    allocation_percent: float = Field(default=0.0, ge=0.0, le=100.0)
    is_priority: bool = False
    tranches: list[Tranche] = Field(default_factory=list)

    def tranche_percent_total(self) -> int:
        return sum(tranche.percent for tranche in self.tranches)


class StockAllocationRequest(DomainModel):
    symbol: str
    price: float = Field(..., ge=0.0)
    allocation_percent: float = Field(..., ge=0.0, le=100.0)
    tranche_percent: float = Field(default=100.0, ge=0.0, le=100.0)
    is_priority: bool = False
    entry_id: str | None = None
    tranche_id: str | None = None
    label: str | None = None


class AllocationResult(DomainModel):
    symbol: str
    price: float
    entry_id: str | None = None
    tranche_id: str | None = None
    label: str | None = None
    target_amount: float = Field(..., ge=0.0)
    target_shares: float = Field(..., ge=0.0)
    optimized_shares: int = Field(..., ge=0)
    base_cost: float = Field(..., ge=0.0)
    fee_cost: float = Field(..., ge=0.0)
    total_cost: float = Field(..., ge=0.0)
    actual_percent: float = Field(default=0.0, ge=0.0)


class CombinedStockResult(DomainModel):
    symbol: str
    entries: list[AllocationResult] = Field(default_factory=list)
    total_shares: int = Field(..., ge=0)
    total_base_cost: float = Field(..., ge=0.0)
    total_fees: float = Field(..., ge=0.0)
    total_cost: float = Field(..., ge=0.0)
    avg_price: float = Field(..., ge=0.0)


class AllocationPlan(DomainModel):
    results: list[AllocationResult] = Field(default_factory=list)
    combined_results: list[CombinedStockResult] = Field(default_factory=list)
    total_cost: float = 0.0
    total_fees: float = 0.0
    remaining_capital: float = 0.0
    effective_budget: float = 0.0
