from __future__ import annotations

from typing import Final

# Brokerage, CDS and SEC levies charged on every CSE trade.
FEE_RATE: Final[float] = 0.0112

DEFAULT_SHARE_STEP: Final[int] = 10

DEFAULT_BUY_DROP_THRESHOLD: Final[float] = 15.0
BUY_PREMATURE_GUARD_PERCENT: Final[float] = -5.0
BUY_STRENGTH_GUARD_PERCENT: Final[float] = -10.0

POSITION_SIZE_CRITICAL_MULTIPLIER: Final[float] = 1.2
SECTOR_LIMIT_CRITICAL_MULTIPLIER: Final[float] = 1.2
STOP_LOSS_CRITICAL_MULTIPLIER: Final[float] = 1.5
TRADE_FREQUENCY_CRITICAL_MULTIPLIER: Final[float] = 1.5
TRADE_FREQUENCY_WINDOW_DAYS: Final[int] = 7

UNKNOWN_SECTOR: Final[str] = "Unknown"
SIMULATED_HOLDING_ID: Final[int] = -1
SIMULATED_STOCK_NAME: Final[str] = "Simulated Stock"
DISCIPLINED_BUYING_RULE_ID: Final[int] = 999
DISCIPLINED_BUYING_RULE_NAME: Final[str] = "Disciplined Buying"
