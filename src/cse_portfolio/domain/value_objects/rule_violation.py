from __future__ import annotations

from cse_portfolio.domain.base import DomainModel
from cse_portfolio.domain.value_objects.enums import RuleType, Severity


class RuleViolation(DomainModel):
    rule_id: int
    rule_name: str
    rule_type: RuleType
    threshold: float
    current_value: float
    message: str
    severity: Severity
    related_symbol: str | None = None
    related_sector: str | None = None
    impact: str | None = None

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.CRITICAL
