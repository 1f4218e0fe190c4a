from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Mapping, Sequence

from cse_portfolio.application.use_cases.portfolio_valuation import calculate_portfolio_totals
from cse_portfolio.application.use_cases.rule_checks.rule_check_factory import RuleCheckFactory
from cse_portfolio.domain.entities.holding import Holding
from cse_portfolio.domain.entities.settings import Settings
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.entities.transaction import Transaction
from cse_portfolio.domain.ports.rule_check import RuleContext
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation
from cse_portfolio.infrastructure.logging import get_logger

logger = get_logger(__name__)

ViolationMap = dict[int, list[RuleViolation]]


class RuleEngine:
    """
    Evaluates active trading rules against a portfolio snapshot.

    Only rules with at least one violation appear in the returned mapping; a rule id
    missing from the result means the rule is currently satisfied. Rule types without
    a standing check (buy and sell conditions) are skipped.
    """

    def __init__(self, factory: RuleCheckFactory | None = None) -> None:
        self._factory = factory or RuleCheckFactory()

    def evaluate(
        self,
        rules: Sequence[TradingRule],
        holdings: Sequence[Holding],
        transactions: Sequence[Transaction],
        settings: Settings,
        as_of: datetime | None = None,
    ) -> ViolationMap:
        context = RuleContext(
            holdings=list(holdings),
            transactions=list(transactions),
            totals=calculate_portfolio_totals(holdings, settings),
            as_of=as_of or datetime.now(timezone.utc),
        )

        violations: ViolationMap = {}
        for rule in rules:
            if not rule.is_active:
                continue
            if not self._factory.supports(rule.rule_type):
                logger.debug(
                    "Rule has no standing check",
                    extra={"rule_id": rule.id, "rule_type": rule.rule_type.value},
                )
                continue

            rule_violations = self._factory.create(rule.rule_type).check(rule, context)
            if rule_violations:
                violations[rule.id] = rule_violations

        logger.debug(
            "Rules evaluated",
            extra={"rules": len(rules), "violated": len(violations)},
        )
        return violations

    @staticmethod
    def total_violation_count(violations: Mapping[int, Sequence[RuleViolation]]) -> int:
        return sum(len(rule_violations) for rule_violations in violations.values())

    @staticmethod
    def discipline_score(rules: Sequence[TradingRule], violations: Mapping[int, Sequence[RuleViolation]]) -> int:
        """Percentage of active rules currently satisfied, rounded half up."""
        active_count = sum(1 for rule in rules if rule.is_active)
        if active_count == 0:
            return 100
        compliance = (active_count - len(violations)) / active_count * 100
        return max(0, math.floor(compliance + 0.5))
