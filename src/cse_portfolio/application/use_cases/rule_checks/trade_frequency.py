from __future__ import annotations

from datetime import timedelta

from cse_portfolio.application.use_cases.rule_checks.check_utils import (
    as_utc,
    build_violation,
    escalate,
    format_threshold,
)
from cse_portfolio.config import TRADE_FREQUENCY_CRITICAL_MULTIPLIER, TRADE_FREQUENCY_WINDOW_DAYS
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.ports.rule_check import RuleCheck, RuleContext
from cse_portfolio.domain.value_objects.enums import RuleType, TransactionType
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


class TradeFrequencyCheck(RuleCheck):
    """Caps the number of buys and sells in the trailing window; dividends don't count."""

    rule_type = RuleType.TRADE_FREQUENCY

    def __init__(
        self,
        window_days: int = TRADE_FREQUENCY_WINDOW_DAYS,
        critical_multiplier: float = TRADE_FREQUENCY_CRITICAL_MULTIPLIER,
    ) -> None:
        self._window = timedelta(days=window_days)
        self._critical_multiplier = critical_multiplier

    def check(self, rule: TradingRule, context: RuleContext) -> list[RuleViolation]:
        cutoff = as_utc(context.as_of) - self._window
        recent = [
            tx
            for tx in context.transactions
            if tx.type != TransactionType.DIVIDEND and as_utc(tx.date) >= cutoff
        ]
        count = len(recent)
        if count <= rule.threshold:
            return []
        return [
            build_violation(
                rule,
                current_value=float(count),
                message=f"{count} trades this week (limit: {format_threshold(rule.threshold)})",
                severity=escalate(count > rule.threshold * self._critical_multiplier),
                impact="Frequent trading compounds fees and usually signals reactive decisions.",
            )
        ]
