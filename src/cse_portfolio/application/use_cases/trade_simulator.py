from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from cse_portfolio.application.use_cases.portfolio_valuation import calculate_portfolio_totals, revalue_holding
from cse_portfolio.application.use_cases.rule_engine import RuleEngine
from cse_portfolio.config import (
    BUY_PREMATURE_GUARD_PERCENT,
    BUY_STRENGTH_GUARD_PERCENT,
    DEFAULT_BUY_DROP_THRESHOLD,
    DISCIPLINED_BUYING_RULE_ID,
    DISCIPLINED_BUYING_RULE_NAME,
    SIMULATED_HOLDING_ID,
    SIMULATED_STOCK_NAME,
)
from cse_portfolio.domain.entities.holding import Holding
from cse_portfolio.domain.entities.settings import Settings
from cse_portfolio.domain.entities.stock import Stock
from cse_portfolio.domain.entities.trading_rule import TradingRule
from cse_portfolio.domain.entities.transaction import Transaction
from cse_portfolio.domain.value_objects.enums import HoldingStatus, RuleType, Severity, TradeSide
from cse_portfolio.domain.value_objects.portfolio_totals import PortfolioTotals
from cse_portfolio.domain.value_objects.proposed_trade import ProposedTrade
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation
from cse_portfolio.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TradeSimulationResult:
    is_valid: bool
    violations: list[RuleViolation]
    new_totals: PortfolioTotals
    holdings: list[Holding] = field(default_factory=list)

    @property
    def critical_violations(self) -> list[RuleViolation]:
        return [violation for violation in self.violations if violation.is_critical]


class PreTradeSimulator:
    """
    Applies a hypothetical trade to a copy of the holdings and re-runs the rules.

    The caller's holdings are never modified. Buys into an existing position are
    also checked against the averaging-down discipline: the price should have
    fallen far enough below the last buy before adding.
    """

    def __init__(
        self,
        engine: RuleEngine | None = None,
        default_drop_threshold: float = DEFAULT_BUY_DROP_THRESHOLD,
    ) -> None:
        self._engine = engine or RuleEngine()
        self._default_drop_threshold = default_drop_threshold

    def simulate_transaction(
        self,
        holdings: Sequence[Holding],
        transactions: Sequence[Transaction],
        rules: Sequence[TradingRule],
        settings: Settings,
        proposed: ProposedTrade,
        as_of: datetime | None = None,
    ) -> TradeSimulationResult:
        simulated = [holding.model_copy(deep=True) for holding in holdings]
        index = self._find_holding(simulated, proposed.stock_id)
        existing = holdings[index] if index is not None else None

        if proposed.side == TradeSide.BUY:
            self._apply_buy(simulated, index, proposed)
        else:
            self._apply_sell(simulated, index, proposed)

        rule_violations = self._engine.evaluate(rules, simulated, transactions, settings, as_of=as_of)
        violations = [violation for group in rule_violations.values() for violation in group]

        if proposed.side == TradeSide.BUY and existing is not None:
            pre_trade = self._check_disciplined_buying(existing, rules, proposed)
            if pre_trade is not None:
                violations.append(pre_trade)

        is_valid = not any(violation.is_critical for violation in violations)
        logger.debug(
            "Trade simulated",
            extra={
                "symbol": proposed.symbol,
                "side": proposed.side.value,
                "violations": len(violations),
                "is_valid": is_valid,
            },
        )
        return TradeSimulationResult(
            is_valid=is_valid,
            violations=violations,
            new_totals=calculate_portfolio_totals(simulated, settings),
            holdings=simulated,
        )

    def _find_holding(self, holdings: Sequence[Holding], stock_id: int) -> int | None:
        for idx, holding in enumerate(holdings):
            if holding.stock_id == stock_id:
                return idx
        return None

    def _apply_buy(self, holdings: list[Holding], index: int | None, proposed: ProposedTrade) -> None:
        cost = proposed.gross_cost()
        if index is None:
            holdings.append(self._synthesize_holding(proposed, cost))
            return

        holding = holdings[index]
        new_quantity = holding.quantity + proposed.quantity
        new_invested = holding.total_invested + cost
        updated = holding.model_copy(
            update={
                "quantity": new_quantity,
                "total_invested": new_invested,
                "avg_buy_price": new_invested / new_quantity,
                "last_buy_price": proposed.price,
                "initial_buy_price": proposed.price if holding.quantity == 0 else holding.initial_buy_price,
                "status": HoldingStatus.ACTIVE,
            }
        )
        holdings[index] = self._revalue(updated)

    def _apply_sell(self, holdings: list[Holding], index: int | None, proposed: ProposedTrade) -> None:
        if index is None:
            logger.debug("Sell of a stock not held, nothing to simulate", extra={"symbol": proposed.symbol})
            return

        holding = holdings[index]
        new_quantity = holding.quantity - proposed.quantity
        if new_quantity <= 0:
            del holdings[index]
            return

        retained = new_quantity / holding.quantity
        updated = holding.model_copy(
            update={
                "quantity": new_quantity,
                "total_invested": holding.total_invested * retained,
            }
        )
        holdings[index] = self._revalue(updated)

    def _revalue(self, holding: Holding) -> Holding:
        if holding.current_price is None:
            return holding
        return revalue_holding(holding, holding.current_price)

    def _synthesize_holding(self, proposed: ProposedTrade, cost: float) -> Holding:
        return Holding(
            id=SIMULATED_HOLDING_ID,
            stock_id=proposed.stock_id,
            stock=Stock(
                id=proposed.stock_id,
                symbol=proposed.symbol,
                name=SIMULATED_STOCK_NAME,
                sector=proposed.sector,
            ),
            quantity=proposed.quantity,
            avg_buy_price=proposed.price,
            initial_buy_price=proposed.price,
            last_buy_price=proposed.price,
            total_invested=cost,
            status=HoldingStatus.ACTIVE,
            current_price=proposed.price,
            current_value=proposed.quantity * proposed.price,
            profit_loss=-proposed.fees,
            profit_loss_percent=0.0,
        )

    def _check_disciplined_buying(
        self,
        holding: Holding,
        rules: Sequence[TradingRule],
        proposed: ProposedTrade,
    ) -> RuleViolation | None:
        last_price = holding.last_buy_price
        if not last_price:
            return None

        percent_drop = (last_price - proposed.price) / last_price * 100
        buy_rule = next(
            (rule for rule in rules if rule.rule_type == RuleType.BUY_CONDITION and rule.is_active),
            None,
        )
        threshold = buy_rule.threshold if buy_rule is not None else self._default_drop_threshold
        rule_id = buy_rule.id if buy_rule is not None else DISCIPLINED_BUYING_RULE_ID
        rule_name = buy_rule.name if buy_rule is not None else DISCIPLINED_BUYING_RULE_NAME

        # Moves between the two guard bands raise nothing.
        if BUY_PREMATURE_GUARD_PERCENT < percent_drop < threshold:
            return RuleViolation(
                rule_id=rule_id,
                rule_name=rule_name,
                rule_type=RuleType.BUY_CONDITION,
                threshold=threshold,
                current_value=percent_drop,
                message=(
                    f"Price only dropped {percent_drop:.1f}% from last buy "
                    f"(Required: >{threshold:g}%). Don't catch a falling knife too early."
                ),
                severity=Severity.WARNING,
                impact="Waiting for a deeper discount improves safety margin.",
                related_symbol=proposed.symbol,
            )
        if percent_drop < BUY_STRENGTH_GUARD_PERCENT:
            return RuleViolation(
                rule_id=rule_id,
                rule_name=rule_name,
                rule_type=RuleType.BUY_CONDITION,
                threshold=0.0,
                current_value=percent_drop,
                message=(
                    f"Price is up {abs(percent_drop):.1f}% since last buy. "
                    "Ensure fundamentals improved."
                ),
                severity=Severity.WARNING,
                impact="Buying on strength should be justified by earnings growth.",
                related_symbol=proposed.symbol,
            )
        return None
