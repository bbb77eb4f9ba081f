"""Portfolio analytics entry points."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Sequence

from trade_journal.models import (
    ZERO,
    ClosedTrade,
    PortfolioAnalysis,
    Position,
    Transaction,
    TransactionKind,
    normalize_symbol,
)
from trade_journal.services.lots import match_lots, sort_transactions, validate_transactions
from trade_journal.services.stats import build_position, compute_portfolio_stats
from trade_journal.services.strategies import compute_all_strategy_stats

logger = logging.getLogger(__name__)


def _group_by_symbol(transactions: Iterable[Transaction]) -> Dict[str, List[Transaction]]:
    grouped: Dict[str, List[Transaction]] = {}
    for tx in transactions:
        grouped.setdefault(normalize_symbol(tx.symbol), []).append(tx)
    return grouped


def analyze_portfolio(
    transactions: Sequence[Transaction],
    initial_capital: Decimal = ZERO,
    current_prices: Mapping[str, Decimal] | None = None,
    *,
    include_fees_in_cost_basis: bool = False,
) -> PortfolioAnalysis:
    """Compute positions, closed trades and statistics for one portfolio.

    Every transaction is validated before any matching happens, so callers
    either get a complete result or an error.
    """

    validate_transactions(transactions)

    prices = {normalize_symbol(k): v for k, v in (current_prices or {}).items()}
    positions: list[Position] = []
    closed_trades: list[ClosedTrade] = []
    for symbol, symbol_transactions in sorted(_group_by_symbol(transactions).items()):
        result = match_lots(symbol, symbol_transactions)
        closed_trades.extend(result.closed_trades)
        position = build_position(
            symbol,
            result.open_lots,
            prices.get(symbol),
            include_fees=include_fees_in_cost_basis,
        )
        if position is not None:
            positions.append(position)

    stats = compute_portfolio_stats(closed_trades, positions, initial_capital)
    logger.info(
        "Analyzed %d transactions: %d positions, %d closed trades",
        len(transactions),
        len(positions),
        len(closed_trades),
    )
    return PortfolioAnalysis(
        positions=positions,
        closed_trades=closed_trades,
        stats=stats,
        strategy_stats=compute_all_strategy_stats(closed_trades),
    )


def filter_transactions(
    transactions: Iterable[Transaction],
    *,
    symbol: str | None = None,
    kind: TransactionKind | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Transaction]:
    """Select transactions by symbol, kind and an inclusive date window."""

    if start and end and start > end:
        raise ValueError("start cannot be after end")
    selected = list(transactions)
    if symbol:
        wanted = normalize_symbol(symbol)
        selected = [tx for tx in selected if normalize_symbol(tx.symbol) == wanted]
    if kind:
        selected = [tx for tx in selected if tx.kind == kind]
    if start:
        selected = [tx for tx in selected if tx.timestamp >= start]
    if end:
        selected = [tx for tx in selected if tx.timestamp <= end]
    return sort_transactions(selected)


__all__ = ["analyze_portfolio", "filter_transactions"]
