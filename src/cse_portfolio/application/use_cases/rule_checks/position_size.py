from __future__ import annotations

from cse_portfolio.application.use_cases.rule_checks.check_utils import (
    build_violation,
    escalate,
    format_threshold,
)
from cse_portfolio.config import POSITION_SIZE_CRITICAL_MULTIPLIER
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.ports.rule_check import RuleCheck, RuleContext
from cse_portfolio.domain.value_objects.enums import RuleType
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


class PositionSizeCheck(RuleCheck):
    rule_type = RuleType.POSITION_SIZE

    def __init__(self, critical_multiplier: float = POSITION_SIZE_CRITICAL_MULTIPLIER) -> None:
        self._critical_multiplier = critical_multiplier

    def check(self, rule: TradingRule, context: RuleContext) -> list[RuleViolation]:
        net_liquidation = context.totals.net_liquidation_value
        if net_liquidation <= 0:
            return []

        violations: list[RuleViolation] = []
        for holding in context.holdings:
            weight = holding.market_value() / net_liquidation * 100
            if weight <= rule.threshold:
                continue
            violations.append(
                build_violation(
                    rule,
                    current_value=weight,
                    message=(
                        f"{holding.symbol} is {weight:.1f}% of portfolio "
                        f"(limit: {format_threshold(rule.threshold)}%)"
                    ),
                    severity=escalate(weight > rule.threshold * self._critical_multiplier),
                    related_symbol=holding.symbol,
                    impact="A single adverse move in this stock hits the whole portfolio.",
                )
            )
        return violations
