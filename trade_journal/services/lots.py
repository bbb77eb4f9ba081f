"""FIFO lot matching for a single symbol.

Buys open lots at the back of a queue; sells consume the oldest lot first and
emit one closed trade per lot portion consumed. Fees are prorated by the
matched share of each transaction's original quantity.
"""

from __future__ import annotations

import logging
from collections import deque
from decimal import Decimal
from typing import Deque, Iterable

from trade_journal.errors import InvalidTransactionError, OversoldError
from trade_journal.models import (
    ZERO,
    ClosedTrade,
    MatchResult,
    OpenLot,
    Transaction,
    TransactionKind,
    normalize_symbol,
)

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def validate_transaction(tx: Transaction) -> None:
    """Reject transactions the matcher cannot work with."""

    if not tx.symbol or not tx.symbol.strip():
        raise InvalidTransactionError(tx.id, "symbol must not be empty")
    if tx.kind not in (TransactionKind.BUY, TransactionKind.SELL):
        raise InvalidTransactionError(tx.id, f"unsupported kind {tx.kind!r}")
    for name in ("quantity", "price", "fees"):
        if not getattr(tx, name).is_finite():
            raise InvalidTransactionError(tx.id, f"{name} must be a finite number")
    if tx.quantity <= 0:
        raise InvalidTransactionError(tx.id, "quantity must be > 0")
    if tx.price <= 0:
        raise InvalidTransactionError(tx.id, "price must be > 0")
    if tx.fees < 0:
        raise InvalidTransactionError(tx.id, "fees must be >= 0")


def validate_transactions(transactions: Iterable[Transaction]) -> None:
    """Validate every transaction and require ids to be unique."""

    seen: set[str] = set()
    for tx in transactions:
        validate_transaction(tx)
        if tx.id in seen:
            raise InvalidTransactionError(tx.id, "duplicate id")
        seen.add(tx.id)


def sort_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=lambda t: t.sort_key())


def _close_portion(lot: OpenLot, sell: Transaction, take_qty: Decimal) -> ClosedTrade:
    buy_fee = lot.fees * take_qty / lot.original_quantity
    sell_fee = sell.fees * take_qty / sell.quantity
    realized = take_qty * (sell.price - lot.price) - buy_fee - sell_fee
    return ClosedTrade(
        symbol=lot.symbol,
        buy_transaction_id=lot.transaction_id,
        sell_transaction_id=sell.id,
        quantity=take_qty,
        buy_price=lot.price,
        sell_price=sell.price,
        buy_timestamp=lot.timestamp,
        sell_timestamp=sell.timestamp,
        realized_pnl=realized,
        realized_pnl_percent=realized / (take_qty * lot.price) * HUNDRED,
        fees=buy_fee + sell_fee,
        strategy_id=lot.strategy_id or sell.strategy_id,
    )


def match_lots(symbol: str, transactions: Iterable[Transaction]) -> MatchResult:
    """Match every sell of ``symbol`` against its open buy lots, oldest first."""

    transactions = list(transactions)
    validate_transactions(transactions)
    symbol = normalize_symbol(symbol)
    lots: Deque[OpenLot] = deque()
    closed: list[ClosedTrade] = []

    for tx in sort_transactions(transactions):
        if normalize_symbol(tx.symbol) != symbol:
            raise ValueError(f"Transaction {tx.id} is for {tx.symbol}, not {symbol}")
        if tx.kind == TransactionKind.BUY:
            lots.append(
                OpenLot(
                    transaction_id=tx.id,
                    symbol=symbol,
                    quantity=tx.quantity,
                    original_quantity=tx.quantity,
                    price=tx.price,
                    timestamp=tx.timestamp,
                    fees=tx.fees,
                    strategy_id=tx.strategy_id,
                )
            )
            continue

        available = sum((lot.quantity for lot in lots), ZERO)
        if tx.quantity > available:
            raise OversoldError(symbol, tx.id, tx.quantity, available)
        remaining = tx.quantity
        while remaining > 0:
            lot = lots[0]
            take_qty = min(lot.quantity, remaining)
            closed.append(_close_portion(lot, tx, take_qty))
            lot.quantity -= take_qty
            remaining -= take_qty
            if lot.quantity == 0:
                lots.popleft()

    logger.debug("Matched %s: %d closed trades, %d open lots", symbol, len(closed), len(lots))
    return MatchResult(symbol=symbol, closed_trades=closed, open_lots=list(lots))


__all__ = ["match_lots", "sort_transactions", "validate_transaction", "validate_transactions"]
