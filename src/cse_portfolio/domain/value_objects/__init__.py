from cse_portfolio.domain.value_objects.allocation import (
    AllocationPlan,
    AllocationResult,
    CombinedStockResult,
    StockAllocationRequest,
    StockEntry,
    Tranche,
)
from cse_portfolio.domain.value_objects.enums import (
    HoldingStatus,
    RuleType,
    Severity,
    TradeSide,
    TransactionType,
)
from cse_portfolio.domain.value_objects.portfolio_totals import PortfolioTotals
from cse_portfolio.domain.value_objects.proposed_trade import ProposedTrade
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation

__all__ = [
    "AllocationPlan",
    "AllocationResult",
    "CombinedStockResult",
    "StockAllocationRequest",
    "StockEntry",
    "Tranche",
    "HoldingStatus",
    "RuleType",
    "Severity",
    "TradeSide",
    "TransactionType",
    "PortfolioTotals",
    "ProposedTrade",
    "RuleViolation",
]
