"""Domain models used by the trade journal analytics engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, getcontext
from typing import Optional

getcontext().prec = 28

ZERO = Decimal("0")


def normalize_symbol(symbol: str) -> str:
    return symbol.strip().upper()


class TransactionKind(str, enum.Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Transaction:
    """A single buy or sell recorded in a portfolio."""

    id: str
    symbol: str
    kind: TransactionKind
    quantity: Decimal
    price: Decimal
    timestamp: datetime
    fees: Decimal = ZERO
    strategy_id: Optional[str] = None
    notes: Optional[str] = None

    def sort_key(self) -> tuple[datetime, str]:
        """Chronological order with the id as a stable tie-break."""

        return (self.timestamp, self.id)


@dataclass
class OpenLot:
    """Quantity acquired by one buy that has not been sold yet."""

    transaction_id: str
    symbol: str
    quantity: Decimal
    original_quantity: Decimal
    price: Decimal
    timestamp: datetime
    fees: Decimal = ZERO
    strategy_id: Optional[str] = None

    @property
    def cost(self) -> Decimal:
        return self.quantity * self.price

    @property
    def remaining_fees(self) -> Decimal:
        return self.fees * self.quantity / self.original_quantity


@dataclass(frozen=True)
class ClosedTrade:
    """A buy portion matched against a sell portion."""

    symbol: str
    buy_transaction_id: str
    sell_transaction_id: str
    quantity: Decimal
    buy_price: Decimal
    sell_price: Decimal
    buy_timestamp: datetime
    sell_timestamp: datetime
    realized_pnl: Decimal
    realized_pnl_percent: Decimal
    fees: Decimal
    strategy_id: Optional[str] = None

    @property
    def cost_basis(self) -> Decimal:
        return self.quantity * self.buy_price


@dataclass
class MatchResult:
    symbol: str
    closed_trades: list[ClosedTrade] = field(default_factory=list)
    open_lots: list[OpenLot] = field(default_factory=list)

    @property
    def open_quantity(self) -> Decimal:
        return sum((lot.quantity for lot in self.open_lots), ZERO)


@dataclass(frozen=True)
class Position:
    """Current holding of one symbol, derived from its open lots."""

    symbol: str
    quantity: Decimal
    average_buy_price: Decimal
    total_cost: Decimal
    current_price: Optional[Decimal] = None
    market_value: Optional[Decimal] = None
    unrealized_pnl: Optional[Decimal] = None
    unrealized_pnl_percent: Optional[Decimal] = None


@dataclass(frozen=True)
class TradeStats:
    """Win/loss figures shared by portfolio and strategy statistics.

    ``profit_factor`` is ``None`` when there are gains but no losses, meaning
    the ratio is unbounded.
    """

    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    win_rate: Decimal = ZERO
    profit_factor: Optional[Decimal] = ZERO
    average_gain: Decimal = ZERO
    average_loss: Decimal = ZERO
    largest_win: Decimal = ZERO
    largest_loss: Decimal = ZERO
    total_pnl: Decimal = ZERO


@dataclass(frozen=True)
class PortfolioStats:
    initial_capital: Decimal = ZERO
    realized_pnl: Decimal = ZERO
    unrealized_pnl: Decimal = ZERO
    total_value: Decimal = ZERO
    total_return_percent: Decimal = ZERO
    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    win_rate: Decimal = ZERO
    profit_factor: Optional[Decimal] = ZERO
    average_gain: Decimal = ZERO
    average_loss: Decimal = ZERO
    largest_win: Decimal = ZERO
    largest_loss: Decimal = ZERO
    current_positions: list[Position] = field(default_factory=list)


@dataclass(frozen=True)
class StrategyStats:
    strategy_id: str
    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    win_rate: Decimal = ZERO
    profit_factor: Optional[Decimal] = ZERO
    average_gain: Decimal = ZERO
    average_loss: Decimal = ZERO
    largest_win: Decimal = ZERO
    largest_loss: Decimal = ZERO
    total_pnl: Decimal = ZERO
    total_pnl_percent: Decimal = ZERO


@dataclass(frozen=True)
class PortfolioAnalysis:
    positions: list[Position]
    closed_trades: list[ClosedTrade]
    stats: PortfolioStats
    strategy_stats: list[StrategyStats] = field(default_factory=list)


__all__ = [
    "ZERO",
    "normalize_symbol",
    "TransactionKind",
    "Transaction",
    "OpenLot",
    "ClosedTrade",
    "MatchResult",
    "Position",
    "TradeStats",
    "PortfolioStats",
    "StrategyStats",
    "PortfolioAnalysis",
]
