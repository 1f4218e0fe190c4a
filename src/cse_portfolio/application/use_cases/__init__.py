from cse_portfolio.application.use_cases.capital_allocator import GreedyCapitalAllocator, combine_by_symbol
from cse_portfolio.application.use_cases.dashboard_frames import (
    plan_to_frame,
    sector_exposure_frame,
    violations_to_frame,
)
from cse_portfolio.application.use_cases.portfolio_valuation import (
    calculate_portfolio_totals,
    enrich_holdings_with_prices,
    revalue_holding,
)
from cse_portfolio.application.use_cases.rule_checks import RuleCheckFactory
from cse_portfolio.application.use_cases.rule_engine import RuleEngine
from cse_portfolio.application.use_cases.trade_simulator import PreTradeSimulator, TradeSimulationResult
from cse_portfolio.application.use_cases.tranche_planner import (
    add_tranche,
    allocation_percent_total,
    create_stock_entry,
    flatten_stock_entries,
    remove_tranche,
)

__all__ = [
    "GreedyCapitalAllocator",
    "combine_by_symbol",
    "plan_to_frame",
    "sector_exposure_frame",
    "violations_to_frame",
    "calculate_portfolio_totals",
    "enrich_holdings_with_prices",
    "revalue_holding",
    "RuleCheckFactory",
    "RuleEngine",
    "PreTradeSimulator",
    "TradeSimulationResult",
    "add_tranche",
    "allocation_percent_total",
    "create_stock_entry",
    "flatten_stock_entries",
    "remove_tranche",
]
