from __future__ import annotations

from typing import Mapping, Sequence

from cse_portfolio.domain.entities.holding import Holding
from cse_portfolio.domain.entities.settings import Settings
from cse_portfolio.domain.value_objects.portfolio_totals import PortfolioTotals


def enrich_holdings_with_prices(holdings: Sequence[Holding], prices: Mapping[str, float]) -> list[Holding]:
    enriched: list[Holding] = []
    for holding in holdings:
        price = prices.get(holding.symbol)
        if price is None:
            enriched.append(holding)
            continue
        enriched.append(revalue_holding(holding, price))
    return enriched


def revalue_holding(holding: Holding, price: float) -> Holding:
    current_value = holding.quantity * price
    profit_loss = current_value - holding.total_invested
    profit_loss_percent = profit_loss / holding.total_invested * 100 if holding.total_invested > 0 else 0.0
    return holding.model_copy(
        update={
            "current_price": price,
            "current_value": current_value,
            "profit_loss": profit_loss,
            "profit_loss_percent": profit_loss_percent,
        }
    )


def calculate_portfolio_totals(holdings: Sequence[Holding], settings: Settings) -> PortfolioTotals:
    total_invested = sum(holding.total_invested for holding in holdings)
    total_value = sum(holding.market_value() for holding in holdings)
    profit_loss = total_value - total_invested
    profit_loss_percent = profit_loss / total_invested * 100 if total_invested > 0 else 0.0

    total_capital = settings.capital
    cash_balance = total_capital - total_invested
    cash_percent = cash_balance / total_capital * 100 if total_capital > 0 else 0.0

    return PortfolioTotals(
        total_invested=total_invested,
        total_value=total_value,
        profit_loss=profit_loss,
        profit_loss_percent=profit_loss_percent,
        holdings_count=len(holdings),
        total_capital=total_capital,
        cash_balance=cash_balance,
        cash_percent=cash_percent,
        net_liquidation_value=cash_balance + total_value,
    )
