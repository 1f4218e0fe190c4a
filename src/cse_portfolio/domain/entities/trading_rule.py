from __future__ import annotations

from cse_portfolio.domain.base import DomainModel
from cse_portfolio.domain.value_objects.enums import RuleType


class TradingRule(DomainModel):
    id: int
    name: str
    rule_type: RuleType
    threshold: float
    is_active: bool = True
    description: str | None = None
