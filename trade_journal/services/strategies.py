"""Per-strategy performance over closed trades."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from trade_journal.models import ZERO, ClosedTrade, StrategyStats
from trade_journal.services.stats import compute_trade_stats


def compute_strategy_stats(closed_trades: Sequence[ClosedTrade], strategy_id: str) -> StrategyStats:
    """Stats for the closed trades whose lots were opened under ``strategy_id``."""

    selected = [t for t in closed_trades if t.strategy_id == strategy_id]
    base = compute_trade_stats(selected)
    invested = sum((t.cost_basis for t in selected), ZERO)
    return StrategyStats(
        strategy_id=strategy_id,
        total_trades=base.total_trades,
        winning_trades=base.winning_trades,
        losing_trades=base.losing_trades,
        win_rate=base.win_rate,
        profit_factor=base.profit_factor,
        average_gain=base.average_gain,
        average_loss=base.average_loss,
        largest_win=base.largest_win,
        largest_loss=base.largest_loss,
        total_pnl=base.total_pnl,
        total_pnl_percent=base.total_pnl / invested * Decimal("100") if invested else ZERO,
    )


def compute_all_strategy_stats(closed_trades: Sequence[ClosedTrade]) -> list[StrategyStats]:
    strategy_ids = sorted({t.strategy_id for t in closed_trades if t.strategy_id})
    return [compute_strategy_stats(closed_trades, sid) for sid in strategy_ids]


__all__ = ["compute_strategy_stats", "compute_all_strategy_stats"]
