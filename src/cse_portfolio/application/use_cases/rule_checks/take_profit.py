from __future__ import annotations

from cse_portfolio.application.use_cases.rule_checks.check_utils import build_violation
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.ports.rule_check import RuleCheck, RuleContext
from cse_portfolio.domain.value_objects.enums import RuleType, Severity
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


class TakeProfitCheck(RuleCheck):
    rule_type = RuleType.TAKE_PROFIT

    def check(self, rule: TradingRule, context: RuleContext) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for holding in context.holdings:
            change = holding.profit_loss_percent
            if change is None or change <= rule.threshold:
                continue
            violations.append(
                build_violation(
                    rule,
                    current_value=change,
                    message=f"{holding.symbol} is up {change:.1f}% - consider taking profits",
                    severity=Severity.WARNING,
                    related_symbol=holding.symbol,
                    impact="Locking in part of the gain protects against a reversal.",
                )
            )
        return violations
