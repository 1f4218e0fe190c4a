from cse_portfolio.domain.ports.allocation import CapitalAllocator
from cse_portfolio.domain.ports.rule_check import RuleCheck, RuleContext

__all__ = ["CapitalAllocator", "RuleCheck", "RuleContext"]
