from __future__ import annotations

from enum import Enum


class TransactionType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    DIVIDEND = "DIVIDEND"


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class HoldingStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class RuleType(str, Enum):
    POSITION_SIZE = "POSITION_SIZE"
    STOP_LOSS = "STOP_LOSS"
    TAKE_PROFIT = "TAKE_PROFIT"
    SECTOR_LIMIT = "SECTOR_LIMIT"
    TRADE_FREQUENCY = "TRADE_FREQUENCY"
    CASH_BUFFER = "CASH_BUFFER"
    BUY_CONDITION = "BUY_CONDITION"
    SELL_CONDITION = "SELL_CONDITION"


class Severity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"
