from __future__ import annotations

from cse_portfolio.application.use_cases.rule_checks.check_utils import (
    build_violation,
    escalate,
    format_threshold,
)
from cse_portfolio.config import STOP_LOSS_CRITICAL_MULTIPLIER
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.ports.rule_check import RuleCheck, RuleContext
from cse_portfolio.domain.value_objects.enums import RuleType
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


class StopLossCheck(RuleCheck):
    rule_type = RuleType.STOP_LOSS

    def __init__(self, critical_multiplier: float = STOP_LOSS_CRITICAL_MULTIPLIER) -> None:
        self._critical_multiplier = critical_multiplier

    def check(self, rule: TradingRule, context: RuleContext) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for holding in context.holdings:
            change = holding.profit_loss_percent
            if change is None or change >= -rule.threshold:
                continue
            violations.append(
                build_violation(
                    rule,
                    current_value=abs(change),
                    message=(
                        f"{holding.symbol} is down {abs(change):.1f}% "
                        f"(stop-loss: {format_threshold(rule.threshold)}%)"
                    ),
                    severity=escalate(change < -rule.threshold * self._critical_multiplier),
                    related_symbol=holding.symbol,
                    impact="Review the thesis; cutting the loss frees capital for better setups.",
                )
            )
        return violations
