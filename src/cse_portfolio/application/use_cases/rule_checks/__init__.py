from cse_portfolio.application.use_cases.rule_checks.cash_buffer import CashBufferCheck
from cse_portfolio.application.use_cases.rule_checks.position_size import PositionSizeCheck
from cse_portfolio.application.use_cases.rule_checks.rule_check_factory import RuleCheckFactory
from cse_portfolio.application.use_cases.rule_checks.sector_limit import SectorLimitCheck
from cse_portfolio.application.use_cases.rule_checks.stop_loss import StopLossCheck
from cse_portfolio.application.use_cases.rule_checks.take_profit import TakeProfitCheck
from cse_portfolio.application.use_cases.rule_checks.trade_frequency import TradeFrequencyCheck

__all__ = [
    "CashBufferCheck",
    "PositionSizeCheck",
    "RuleCheckFactory",
    "SectorLimitCheck",
    "StopLossCheck",
    "TakeProfitCheck",
    "TradeFrequencyCheck",
]
