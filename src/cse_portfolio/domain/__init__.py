from cse_portfolio.domain.base import DomainModel
from cse_portfolio.domain.entities import Holding, Settings, Stock, TradingRule, Transaction
from cse_portfolio.domain.ports import CapitalAllocator, RuleCheck, RuleContext
from cse_portfolio.domain.value_objects import (
    AllocationPlan,
    AllocationResult,
    CombinedStockResult,
    HoldingStatus,
    PortfolioTotals,
    ProposedTrade,
    RuleType,
    RuleViolation,
    Severity,
    StockAllocationRequest,
    StockEntry,
    TradeSide,
    Tranche,
    TransactionType,
)

__all__ = [
    "DomainModel",
    "Holding",
    "Settings",
    "Stock",
    "TradingRule",
    "Transaction",
    "CapitalAllocator",
    "RuleCheck",
    "RuleContext",
    "AllocationPlan",
    "AllocationResult",
    "CombinedStockResult",
    "HoldingStatus",
    "PortfolioTotals",
    "ProposedTrade",
    "RuleType",
    "RuleViolation",
    "Severity",
    "StockAllocationRequest",
    "StockEntry",
    "TradeSide",
    "Tranche",
    "TransactionType",
]
