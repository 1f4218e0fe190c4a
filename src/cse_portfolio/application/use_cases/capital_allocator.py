from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from cse_portfolio.application.use_cases.tranche_planner import flatten_stock_entries
from cse_portfolio.config import DEFAULT_SHARE_STEP, FEE_RATE
from cse_portfolio.domain.ports.allocation import CapitalAllocator
from cse_portfolio.domain.value_objects.allocation import (
    AllocationPlan,
    AllocationResult,
    CombinedStockResult,
    StockAllocationRequest,
    StockEntry,
)
from cse_portfolio.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class _WorkingEntry:
    index: int
    request: StockAllocationRequest
    target_amount: float
    raw_shares: float
    shares: int
    base_cost: float = 0.0
    fees: float = 0.0
    cost: float = 0.0

    @property
    def price(self) -> float:
        return self.request.price

    @property
    def is_priority(self) -> bool:
        return self.request.is_priority


class GreedyCapitalAllocator(CapitalAllocator):
    """
    Turns a cash budget and percentage targets into whole-lot share counts.

    - Targets are floored to the share step, then the plan is pulled back under the
      effective budget by shrinking the most overshot non-priority entries first.
    - Leftover budget is spent one step at a time, priority entries first, then the
      most underweight entry.

    The adjustment loops are a greedy heuristic, not an optimal packing.
    """

    def __init__(self, fee_rate: float = FEE_RATE) -> None:
        self._fee_rate = fee_rate

    def allocate(
        self,
        total_capital: float,
        entries: Sequence[StockAllocationRequest],
        step: int = DEFAULT_SHARE_STEP,
    ) -> AllocationPlan:
        if step < 1:
            raise ValueError(f"Share step must be a positive integer, got {step}")

        working, effective_budget = self._initial_targets(total_capital, entries, step)
        running_total = sum(item.cost for item in working)

        running_total = self._reduce_over_budget(working, running_total, effective_budget, step)
        running_total = self._fill_under_budget(working, running_total, effective_budget, step)

        results = self._finalize(sorted(working, key=lambda item: item.index))
        total_cost = sum(result.total_cost for result in results)
        total_fees = sum(result.fee_cost for result in results)

        logger.debug(
            "Allocation complete",
            extra={
                "entries": len(results),
                "effective_budget": effective_budget,
                "total_cost": total_cost,
                "running_total": running_total,
            },
        )
        return AllocationPlan(
            results=results,
            combined_results=combine_by_symbol(results),
            total_cost=total_cost,
            total_fees=total_fees,
            remaining_capital=total_capital - total_cost,
            effective_budget=effective_budget,
        )

    def allocate_stock_entries(
        self,
        total_capital: float,
        stocks: Sequence[StockEntry],
        step: int = DEFAULT_SHARE_STEP,
    ) -> AllocationPlan:
        return self.allocate(total_capital, flatten_stock_entries(stocks), step)

    def _initial_targets(
        self,
        total_capital: float,
        entries: Sequence[StockAllocationRequest],
        step: int,
    ) -> tuple[list[_WorkingEntry], float]:
        working: list[_WorkingEntry] = []
        effective_budget = 0.0
        for index, entry in enumerate(entries):
            full_allocation = total_capital * entry.allocation_percent / 100
            target_amount = full_allocation * entry.tranche_percent / 100
            effective_budget += target_amount

            raw_shares = target_amount / entry.price if entry.price > 0 else 0.0
            shares = max(math.floor(raw_shares / step) * step, 0)

            item = _WorkingEntry(
                index=index,
                request=entry,
                target_amount=target_amount,
                raw_shares=raw_shares,
                shares=shares,
            )
            self._recost(item)
            working.append(item)
        return working, effective_budget

    def _reduce_over_budget(
        self,
        working: list[_WorkingEntry],
        running_total: float,
        effective_budget: float,
        step: int,
    ) -> float:
        while running_total > effective_budget:
            # In-place stable sort: ties keep the order left by the previous pass.
            working.sort(key=lambda item: (item.is_priority, -(item.cost - item.target_amount)))
            candidate = next((item for item in working if item.shares >= step), None)
            if candidate is None:
                logger.debug("No shares left to trim", extra={"over_budget": running_total - effective_budget})
                break

            candidate.shares -= step
            self._recost(candidate)
            running_total -= step * candidate.price * (1 + self._fee_rate)
        return running_total

    def _fill_under_budget(
        self,
        working: list[_WorkingEntry],
        running_total: float,
        effective_budget: float,
        step: int,
    ) -> float:
        while True:
            remaining = effective_budget - running_total
            candidates = [
                item
                for item in working
                if item.price > 0 and step * item.price * (1 + self._fee_rate) <= remaining
            ]
            if not candidates:
                break

            candidates.sort(key=lambda item: (not item.is_priority, -(item.target_amount - item.cost)))
            best = candidates[0]
            best.shares += step
            self._recost(best)
            running_total += step * best.price * (1 + self._fee_rate)
        return running_total

    def _recost(self, item: _WorkingEntry) -> None:
        item.base_cost = item.shares * item.price
        item.fees = item.base_cost * self._fee_rate
        item.cost = item.base_cost + item.fees

    def _finalize(self, working: Sequence[_WorkingEntry]) -> list[AllocationResult]:
        invested = sum(item.cost for item in working)
        results: list[AllocationResult] = []
        for item in working:
            request = item.request
            results.append(
                AllocationResult(
                    symbol=request.symbol,
                    price=request.price,
                    entry_id=request.entry_id,
                    tranche_id=request.tranche_id,
                    label=request.label,
                    target_amount=item.target_amount,
                    target_shares=item.raw_shares,
                    optimized_shares=item.shares,
                    base_cost=item.base_cost,
                    fee_cost=item.fees,
                    total_cost=item.cost,
                    actual_percent=item.cost / invested * 100 if invested > 0 else 0.0,
                )
            )
        return results


def combine_by_symbol(results: Sequence[AllocationResult]) -> list[CombinedStockResult]:
    grouped: dict[str, list[AllocationResult]] = {}
    for result in results:
        grouped.setdefault(result.symbol, []).append(result)

    combined: list[CombinedStockResult] = []
    for symbol, entries in grouped.items():
        total_shares = sum(entry.optimized_shares for entry in entries)
        total_base_cost = sum(entry.base_cost for entry in entries)
        combined.append(
            CombinedStockResult(
                symbol=symbol,
                entries=list(entries),
                total_shares=total_shares,
                total_base_cost=total_base_cost,
                total_fees=sum(entry.fee_cost for entry in entries),
                total_cost=sum(entry.total_cost for entry in entries),
                avg_price=total_base_cost / total_shares if total_shares > 0 else 0.0,
            )
        )
    return combined
