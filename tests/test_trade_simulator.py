from __future__ import annotations

import pytest

from cse_portfolio.application.use_cases.portfolio_valuation import calculate_portfolio_totals
from cse_portfolio.application.use_cases.trade_simulator import PreTradeSimulator
from cse_portfolio.config import DISCIPLINED_BUYING_RULE_ID, SIMULATED_HOLDING_ID
from cse_portfolio.domain.value_objects.enums import RuleType, Severity, TradeSide
from cse_portfolio.domain.value_objects.proposed_trade import ProposedTrade


@pytest.fixture
def holdings(holding_factory):
    return [
        holding_factory(1, "JKH", 100, 100.0, current_price=100.0, sector="Diversified"),
        holding_factory(2, "COMB", 200, 50.0, current_price=50.0, sector="Banks"),
    ]


def _trade(stock_id: int, symbol: str, side: TradeSide, quantity: int, price: float, fees: float = 0.0) -> ProposedTrade:
    return ProposedTrade(stock_id=stock_id, symbol=symbol, side=side, quantity=quantity, price=price, fees=fees)


def test_full_sell_removes_holding(holdings, settings, as_of) -> None:
    before = calculate_portfolio_totals(holdings, settings)

    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(1, "JKH", TradeSide.SELL, 100, 110.0), as_of=as_of
    )

    assert result.new_totals.holdings_count == before.holdings_count - 1
    assert [holding.symbol for holding in result.holdings] == ["COMB"]
    assert len(holdings) == 2
    assert holdings[0].quantity == 100


def test_partial_sell_keeps_cost_basis_per_share(holdings, settings, as_of) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(1, "JKH", TradeSide.SELL, 40, 110.0), as_of=as_of
    )

    jkh = result.holdings[0]
    assert jkh.quantity == 60
    assert jkh.total_invested == pytest.approx(6_000.0)
    assert jkh.total_invested / jkh.quantity == pytest.approx(100.0)
    assert jkh.current_value == pytest.approx(6_000.0)


def test_sell_of_unknown_stock_is_a_no_op(holdings, settings, as_of) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(77, "XYZ", TradeSide.SELL, 10, 5.0), as_of=as_of
    )

    assert result.is_valid
    assert result.holdings == holdings
    assert result.new_totals == calculate_portfolio_totals(holdings, settings)


def test_buy_of_new_stock_synthesizes_holding(holdings, settings, as_of) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(99, "DIAL", TradeSide.BUY, 100, 12.0, fees=13.44), as_of=as_of
    )

    new_holding = result.holdings[-1]
    assert new_holding.id == SIMULATED_HOLDING_ID
    assert new_holding.symbol == "DIAL"
    assert new_holding.total_invested == pytest.approx(1_213.44)
    assert new_holding.current_value == pytest.approx(1_200.0)
    assert new_holding.profit_loss == pytest.approx(-13.44)
    assert new_holding.profit_loss_percent == 0.0
    assert result.new_totals.holdings_count == 3
    assert result.violations == []


def test_buy_into_existing_holding_averages_cost(holdings, settings, as_of) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(1, "JKH", TradeSide.BUY, 100, 80.0), as_of=as_of
    )

    jkh = result.holdings[0]
    assert jkh.quantity == 200
    assert jkh.total_invested == pytest.approx(18_000.0)
    assert jkh.avg_buy_price == pytest.approx(90.0)
    assert jkh.last_buy_price == 80.0
    assert jkh.initial_buy_price == 100.0
    assert result.violations == []
    assert result.is_valid


def test_premature_averaging_down_warns(holdings, settings, as_of) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(1, "JKH", TradeSide.BUY, 10, 95.0), as_of=as_of
    )

    [violation] = result.violations
    assert violation.rule_id == DISCIPLINED_BUYING_RULE_ID
    assert violation.rule_name == "Disciplined Buying"
    assert violation.rule_type == RuleType.BUY_CONDITION
    assert violation.severity == Severity.WARNING
    assert violation.threshold == 15.0
    assert violation.current_value == pytest.approx(5.0)
    assert result.is_valid


def test_buying_strength_warns(holdings, settings, as_of) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(1, "JKH", TradeSide.BUY, 10, 115.0), as_of=as_of
    )

    [violation] = result.violations
    assert violation.threshold == 0.0
    assert violation.current_value == pytest.approx(-15.0)
    assert "up 15.0%" in violation.message


def test_moderate_rise_falls_between_guard_bands(holdings, settings, as_of) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(1, "JKH", TradeSide.BUY, 10, 107.0), as_of=as_of
    )

    assert result.violations == []


def test_configured_buy_condition_overrides_default(holdings, rule_factory, settings, as_of) -> None:
    rules = [rule_factory(42, RuleType.BUY_CONDITION, 4.0)]
    simulator = PreTradeSimulator()

    deep_enough = simulator.simulate_transaction(
        holdings, [], rules, settings, _trade(1, "JKH", TradeSide.BUY, 10, 95.0), as_of=as_of
    )
    too_shallow = simulator.simulate_transaction(
        holdings, [], rules, settings, _trade(1, "JKH", TradeSide.BUY, 10, 97.0), as_of=as_of
    )

    assert deep_enough.violations == []
    [violation] = too_shallow.violations
    assert violation.rule_id == 42
    assert violation.threshold == 4.0


def test_critical_rule_breach_invalidates_trade(holdings, rule_factory, settings, as_of) -> None:
    rules = [rule_factory(1, RuleType.CASH_BUFFER, 20.0)]

    result = PreTradeSimulator().simulate_transaction(
        holdings, [], rules, settings, _trade(99, "DIAL", TradeSide.BUY, 7_000, 10.0), as_of=as_of
    )

    assert not result.is_valid
    assert [violation.rule_type for violation in result.critical_violations] == [RuleType.CASH_BUFFER]
    assert result.new_totals.cash_percent == pytest.approx(10.0)


def test_buy_after_full_exit_resets_initial_price(holding_factory, settings, as_of) -> None:
    exited = [holding_factory(1, "JKH", 0, 100.0)]

    result = PreTradeSimulator().simulate_transaction(
        exited, [], [], settings, _trade(1, "JKH", TradeSide.BUY, 10, 70.0), as_of=as_of
    )

    [jkh] = result.holdings
    assert jkh.quantity == 10
    assert jkh.initial_buy_price == 70.0
    assert jkh.avg_buy_price == pytest.approx(70.0)
    assert jkh.last_buy_price == 70.0
    assert result.violations == []
    assert exited[0].initial_buy_price == 100.0


@pytest.mark.parametrize(
    ("price", "expected_threshold"),
    [
        (104.0, 15.0),
        (105.0, None),
        (110.0, None),
        (111.0, 0.0),
    ],
)
def test_guard_band_edges(holdings, settings, as_of, price, expected_threshold) -> None:
    result = PreTradeSimulator().simulate_transaction(
        holdings, [], [], settings, _trade(1, "JKH", TradeSide.BUY, 10, price), as_of=as_of
    )

    if expected_threshold is None:
        assert result.violations == []
    else:
        [violation] = result.violations
        assert violation.rule_id == DISCIPLINED_BUYING_RULE_ID
        assert violation.threshold == expected_threshold
