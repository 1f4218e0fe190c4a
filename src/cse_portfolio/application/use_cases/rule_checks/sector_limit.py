from __future__ import annotations

from cse_portfolio.application.use_cases.rule_checks.check_utils import (
    build_violation,
    escalate,
    format_threshold,
)
from cse_portfolio.config import SECTOR_LIMIT_CRITICAL_MULTIPLIER, UNKNOWN_SECTOR
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.ports.rule_check import RuleCheck, RuleContext
from cse_portfolio.domain.value_objects.enums import RuleType
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


class SectorLimitCheck(RuleCheck):
    rule_type = RuleType.SECTOR_LIMIT

    def __init__(self, critical_multiplier: float = SECTOR_LIMIT_CRITICAL_MULTIPLIER) -> None:
        self._critical_multiplier = critical_multiplier

    def check(self, rule: TradingRule, context: RuleContext) -> list[RuleViolation]:
        net_liquidation = context.totals.net_liquidation_value
        if net_liquidation <= 0:
            return []

        sector_values: dict[str, float] = {}
        for holding in context.holdings:
            sector = holding.stock.sector or UNKNOWN_SECTOR
            sector_values[sector] = sector_values.get(sector, 0.0) + holding.market_value()

        violations: list[RuleViolation] = []
        for sector, value in sector_values.items():
            weight = value / net_liquidation * 100
            if weight <= rule.threshold:
                continue
            violations.append(
                build_violation(
                    rule,
                    current_value=weight,
                    message=(
                        f"{sector} sector is {weight:.1f}% of portfolio "
                        f"(limit: {format_threshold(rule.threshold)}%)"
                    ),
                    severity=escalate(weight > rule.threshold * self._critical_multiplier),
                    related_sector=sector,
                    impact="Sector-wide news would move most of the portfolio at once.",
                )
            )
        return violations
