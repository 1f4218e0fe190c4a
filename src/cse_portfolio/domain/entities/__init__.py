from cse_portfolio.domain.entities.holding import Holding
from cse_portfolio.domain.entities.settings import Settings
from cse_portfolio.domain.entities.stock import Stock
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.entities.transaction import Transaction

__all__ = ["Holding", "Settings", "Stock", "TradingRule", "Transaction"]
