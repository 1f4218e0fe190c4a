from __future__ import annotations

from cse_portfolio.application.use_cases.rule_checks.check_utils import build_violation, format_threshold
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.ports.rule_check import RuleCheck, RuleContext
from cse_portfolio.domain.value_objects.enums import RuleType, Severity
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


class CashBufferCheck(RuleCheck):
    """Cash kept aside must not fall below the threshold share of capital."""

    rule_type = RuleType.CASH_BUFFER

    def check(self, rule: TradingRule, context: RuleContext) -> list[RuleViolation]:
        cash_percent = context.totals.cash_percent
        if cash_percent >= rule.threshold:
            return []
        return [
            build_violation(
                rule,
                current_value=cash_percent,
                message=(
                    f"Cash is {cash_percent:.1f}% of capital "
                    f"(minimum required: {format_threshold(rule.threshold)}%)"
                ),
                severity=Severity.CRITICAL,
                impact="No dry powder left for corrections; new buys should wait.",
            )
        ]
