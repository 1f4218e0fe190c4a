from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import Field

from cse_portfolio.domain.base import DomainModel
from cse_portfolio.domain.entities.holding import Holding
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.entities.transaction import Transaction
from cse_portfolio.domain.value_objects.enums import RuleType
from cse_portfolio.domain.value_objects.portfolio_totals import PortfolioTotals
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation


class RuleContext(DomainModel):
    holdings: list[Holding] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)
    totals: PortfolioTotals
    as_of: datetime


class RuleCheck(ABC):
    rule_type: RuleType

    @abstractmethod
    def check(self, rule: TradingRule, context: RuleContext) -> list[RuleViolation]:
        raise NotImplementedError
