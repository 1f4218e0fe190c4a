from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from cse_portfolio.domain.entities.holding import Holding
from cse_portfolio.domain.entities.settings import Settings
from cse_portfolio.domain.entities.stock import Stock
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.entities.transaction import Transaction
from cse_portfolio.domain.value_objects.enums import RuleType, TransactionType


@pytest.fixture
def as_of() -> datetime:
    return datetime(2024, 6, 14, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(capital=100_000.0)


def make_holding(
    holding_id: int,
    symbol: str,
    quantity: int,
    avg_price: float,
    current_price: float | None = None,
    sector: str | None = None,
    last_buy_price: float | None = None,
) -> Holding:
    total_invested = quantity * avg_price
    holding = Holding(
        id=holding_id,
        stock_id=holding_id,
        stock=Stock(id=holding_id, symbol=symbol, name=symbol, sector=sector),
        quantity=quantity,
        avg_buy_price=avg_price,
        initial_buy_price=avg_price,
        last_buy_price=last_buy_price if last_buy_price is not None else avg_price,
        total_invested=total_invested,
    )
    if current_price is None:
        return holding
    current_value = quantity * current_price
    profit_loss = current_value - total_invested
    return holding.model_copy(
        update={
            "current_price": current_price,
            "current_value": current_value,
            "profit_loss": profit_loss,
            "profit_loss_percent": profit_loss / total_invested * 100,
        }
    )


def make_rule(rule_id: int, rule_type: RuleType, threshold: float, is_active: bool = True) -> TradingRule:
    return TradingRule(
        id=rule_id,
        name=rule_type.value.replace("_", " ").title(),
        rule_type=rule_type,
        threshold=threshold,
        is_active=is_active,
    )


def make_transaction(tx_id: int, date: datetime, tx_type: TransactionType = TransactionType.BUY) -> Transaction:
    return Transaction(
        id=tx_id,
        stock_id=1,
        symbol="JKH.N0000",
        type=tx_type,
        quantity=10,
        price=200.0,
        fees=22.4,
        date=date,
    )


@pytest.fixture
def holding_factory() -> Callable[..., Holding]:
    return make_holding


@pytest.fixture
def rule_factory() -> Callable[..., TradingRule]:
    return make_rule


@pytest.fixture
def transaction_factory() -> Callable[..., Transaction]:
    return make_transaction
