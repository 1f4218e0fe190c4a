from __future__ import annotations

from datetime import datetime, timezone

from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.value_objects.enums import Severity
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


def build_violation(
    rule: TradingRule,
    current_value: float,
    message: str,
    severity: Severity,
    related_symbol: str | None = None,
    related_sector: str | None = None,
    impact: str | None = None,
) -> RuleViolation:
    return RuleViolation(
        rule_id=rule.id,
        rule_name=rule.name,
        rule_type=rule.rule_type,
        threshold=rule.threshold,
        current_value=current_value,
        message=message,
        severity=severity,
        related_symbol=related_symbol,
        related_sector=related_sector,
        impact=impact,
    )


def escalate(exceeded: bool) -> Severity:
    return Severity.CRITICAL if exceeded else Severity.WARNING


def format_threshold(value: float) -> str:
    return f"{value:g}"


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
