from __future__ import annotations

from typing import Sequence
from uuid import uuid4

from cse_portfolio.domain.value_objects.allocation import StockAllocationRequest, StockEntry, Tranche
from cse_portfolio.infrastructure.logging import get_logger

logger = get_logger(__name__)

FULL_ALLOCATION = 100


def create_stock_entry(
    symbol: str,
    price: float,
    allocation_percent: float = 0.0,
    is_priority: bool = False,
) -> StockEntry:
    """Start a stock entry with a single tranche holding the whole allocation."""
    entry_id = _entry_id(symbol)
    return StockEntry(
        id=entry_id,
        symbol=symbol,
        allocation_percent=allocation_percent,
        is_priority=is_priority,
        tranches=[Tranche(id=f"{entry_id}-t1", price=price, percent=FULL_ALLOCATION, label="Initial")],
    )


def add_tranche(stock: StockEntry, price: float | None = None, label: str | None = None) -> StockEntry:
    """
    Append a tranche and spread the allocation evenly again.

    Existing tranches get ``floor(100 / n)`` each and the new tranche takes the
    remainder, so the percentages always add up to exactly 100.
    """
    prior_count = len(stock.tranches)
    tranche_number = prior_count + 1
    even_share = FULL_ALLOCATION // tranche_number
    remainder = FULL_ALLOCATION - even_share * prior_count

    if price is None:
        price = stock.tranches[0].price if stock.tranches else 0.0

    redistributed = [tranche.model_copy(update={"percent": even_share}) for tranche in stock.tranches]
    redistributed.append(
        Tranche(
            id=f"{stock.id}-t{tranche_number}-{uuid4().hex[:8]}",
            price=price,
            percent=remainder,
            label=label or f"Tranche {tranche_number}",
        )
    )
    logger.debug("Tranche added", extra={"symbol": stock.symbol, "tranches": tranche_number})
    return stock.model_copy(update={"tranches": redistributed})


def remove_tranche(stock: StockEntry, tranche_id: str) -> StockEntry | None:
    """
    Drop a tranche and spread the allocation over the ones left.

    Returns ``None`` when the last tranche goes, meaning the stock leaves the plan.
    """
    remaining = [tranche for tranche in stock.tranches if tranche.id != tranche_id]
    if not remaining:
        logger.debug("Last tranche removed", extra={"symbol": stock.symbol})
        return None

    per_tranche = FULL_ALLOCATION // len(remaining)
    last = FULL_ALLOCATION - per_tranche * (len(remaining) - 1)
    redistributed = [
        tranche.model_copy(update={"percent": last if idx == len(remaining) - 1 else per_tranche})
        for idx, tranche in enumerate(remaining)
    ]
    return stock.model_copy(update={"tranches": redistributed})


def flatten_stock_entries(stocks: Sequence[StockEntry]) -> list[StockAllocationRequest]:
    requests: list[StockAllocationRequest] = []
    for stock in stocks:
        for tranche in stock.tranches:
            requests.append(
                StockAllocationRequest(
                    symbol=stock.symbol,
                    price=tranche.price,
                    allocation_percent=stock.allocation_percent,
                    tranche_percent=tranche.percent,
                    is_priority=stock.is_priority,
                    entry_id=stock.id,
                    tranche_id=tranche.id,
                    label=tranche.label,
                )
            )
    return requests


def allocation_percent_total(stocks: Sequence[StockEntry]) -> float:
    return sum(stock.allocation_percent for stock in stocks)


def _entry_id(symbol: str) -> str:
    return f"{symbol}-{uuid4().hex[:8]}"
