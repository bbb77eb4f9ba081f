"""Position and performance statistics derived from matched lots."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from trade_journal.models import (
    ZERO,
    ClosedTrade,
    OpenLot,
    PortfolioStats,
    Position,
    TradeStats,
)

HUNDRED = Decimal("100")


def build_position(
    symbol: str,
    open_lots: Sequence[OpenLot],
    current_price: Decimal | None = None,
    *,
    include_fees: bool = False,
) -> Position | None:
    """Collapse the open lots of one symbol into a position.

    Returns ``None`` when nothing is held. The average buy price never includes
    fees; ``include_fees`` adds the unmatched share of buy fees to total cost.
    """

    quantity = sum((lot.quantity for lot in open_lots), ZERO)
    if quantity <= 0:
        return None
    average_price = sum((lot.cost for lot in open_lots), ZERO) / quantity
    total_cost = quantity * average_price
    if include_fees:
        total_cost += sum((lot.remaining_fees for lot in open_lots), ZERO)
    if current_price is None:
        return Position(
            symbol=symbol,
            quantity=quantity,
            average_buy_price=average_price,
            total_cost=total_cost,
        )
    market_value = quantity * current_price
    unrealized = market_value - total_cost
    return Position(
        symbol=symbol,
        quantity=quantity,
        average_buy_price=average_price,
        total_cost=total_cost,
        current_price=current_price,
        market_value=market_value,
        unrealized_pnl=unrealized,
        unrealized_pnl_percent=unrealized / total_cost * HUNDRED,
    )


def _mean(values: Sequence[Decimal]) -> Decimal:
    if not values:
        return ZERO
    return sum(values, ZERO) / len(values)


def compute_trade_stats(closed_trades: Iterable[ClosedTrade]) -> TradeStats:
    """Win/loss figures for a set of closed trades.

    A trade that breaks even counts as neither a win nor a loss.
    """

    pnls = [trade.realized_pnl for trade in closed_trades]
    if not pnls:
        return TradeStats()
    gains = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]
    decided = len(gains) + len(losses)
    gross_gain = sum(gains, ZERO)
    gross_loss = -sum(losses, ZERO)
    if gross_loss > 0:
        profit_factor: Decimal | None = gross_gain / gross_loss
    elif gross_gain > 0:
        profit_factor = None
    else:
        profit_factor = ZERO
    return TradeStats(
        total_trades=len(pnls),
        winning_trades=len(gains),
        losing_trades=len(losses),
        win_rate=Decimal(len(gains)) / Decimal(decided) if decided else ZERO,
        profit_factor=profit_factor,
        average_gain=_mean(gains),
        average_loss=_mean(losses),
        largest_win=max(pnls),
        largest_loss=min(pnls),
        total_pnl=sum(pnls, ZERO),
    )


def compute_portfolio_stats(
    closed_trades: Sequence[ClosedTrade],
    positions: Sequence[Position],
    initial_capital: Decimal = ZERO,
) -> PortfolioStats:
    trade_stats = compute_trade_stats(closed_trades)
    realized = trade_stats.total_pnl
    unrealized = sum(
        (p.unrealized_pnl for p in positions if p.unrealized_pnl is not None),
        ZERO,
    )
    total_return = realized / initial_capital * HUNDRED if initial_capital > 0 else ZERO
    return PortfolioStats(
        initial_capital=initial_capital,
        realized_pnl=realized,
        unrealized_pnl=unrealized,
        total_value=initial_capital + realized + unrealized,
        total_return_percent=total_return,
        total_trades=trade_stats.total_trades,
        winning_trades=trade_stats.winning_trades,
        losing_trades=trade_stats.losing_trades,
        win_rate=trade_stats.win_rate,
        profit_factor=trade_stats.profit_factor,
        average_gain=trade_stats.average_gain,
        average_loss=trade_stats.average_loss,
        largest_win=trade_stats.largest_win,
        largest_loss=trade_stats.largest_loss,
        current_positions=list(positions),
    )


__all__ = ["build_position", "compute_trade_stats", "compute_portfolio_stats"]
