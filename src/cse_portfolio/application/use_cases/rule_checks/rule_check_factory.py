from __future__ import annotations

from typing import Callable

from cse_portfolio.application.use_cases.rule_checks.cash_buffer import CashBufferCheck
from cse_portfolio.application.use_cases.rule_checks.position_size import PositionSizeCheck
from cse_portfolio.application.use_cases.rule_checks.sector_limit import SectorLimitCheck
from cse_portfolio.application.use_cases.rule_checks.stop_loss import StopLossCheck
from cse_portfolio.application.use_cases.rule_checks.take_profit import TakeProfitCheck
from cse_portfolio.application.use_cases.rule_checks.trade_frequency import TradeFrequencyCheck
from cse_portfolio.domain.ports.rule_check import RuleCheck
from cse_portfolio.domain.value_objects.enums import RuleType
from cse_portfolio.infrastructure.logging import get_logger

logger = get_logger(__name__)


RuleCheckBuilder = Callable[[], RuleCheck]


class RuleCheckFactory:
    def __init__(self) -> None:
        self._registry: dict[RuleType, RuleCheckBuilder] = {
            CashBufferCheck.rule_type: CashBufferCheck,
            PositionSizeCheck.rule_type: PositionSizeCheck,
            StopLossCheck.rule_type: StopLossCheck,
            TakeProfitCheck.rule_type: TakeProfitCheck,
            SectorLimitCheck.rule_type: SectorLimitCheck,
            TradeFrequencyCheck.rule_type: TradeFrequencyCheck,
        }

    def available(self) -> list[RuleType]:
        return sorted(self._registry.keys(), key=lambda rule_type: rule_type.value)

    def supports(self, rule_type: RuleType) -> bool:
        return rule_type in self._registry

    def register(self, rule_type: RuleType, builder: RuleCheckBuilder) -> None:
        self._registry[rule_type] = builder

    def create(self, rule_type: RuleType) -> RuleCheck:
        if rule_type not in self._registry:
            logger.error("No check registered for rule type", extra={"rule_type": rule_type.value})
            raise ValueError(f"No check registered for rule type: {rule_type.value}")
        return self._registry[rule_type]()
