from __future__ import annotations

import pytest

from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.value_objects.allocation import StockAllocationRequest, Tranche
from cse_portfolio.domain.value_objects.enums import RuleType, TradeSide
from cse_portfolio.domain.value_objects.proposed_trade import ProposedTrade


def test_allocation_request_rejects_negative_inputs() -> None:
    with pytest.raises(ValueError):
        StockAllocationRequest(symbol="JKH", price=-1.0, allocation_percent=10.0)
    with pytest.raises(ValueError):
        StockAllocationRequest(symbol="JKH", price=10.0, allocation_percent=-5.0)
    with pytest.raises(ValueError):
        StockAllocationRequest(symbol="JKH", price=10.0, allocation_percent=10.0, tranche_percent=120.0)


def test_allocation_request_defaults_and_trimming() -> None:
    request = StockAllocationRequest(symbol="  JKH ", price=0.0, allocation_percent=10.0)
    assert request.symbol == "JKH"
    assert request.tranche_percent == 100.0
    assert request.is_priority is False


def test_models_forbid_unknown_fields() -> None:
    with pytest.raises(ValueError):
        Tranche(id="t1", price=10.0, percent=100, colour="red")


def test_rule_type_is_parsed_from_string() -> None:
    rule = TradingRule(id=1, name="Cash", rule_type="CASH_BUFFER", threshold="20")
    assert rule.rule_type == RuleType.CASH_BUFFER
    assert rule.threshold == 20.0
    assert rule.is_active


def test_proposed_trade_requires_positive_quantity() -> None:
    with pytest.raises(ValueError):
        ProposedTrade(stock_id=1, symbol="JKH", side=TradeSide.BUY, quantity=0, price=10.0)


def test_holding_falls_back_to_cost_when_unpriced(holding_factory) -> None:
    unpriced = holding_factory(1, "JKH", 100, 50.0)
    priced = holding_factory(2, "COMB", 100, 50.0, current_price=60.0)

    assert unpriced.market_value() == 5_000.0
    assert priced.market_value() == 6_000.0
