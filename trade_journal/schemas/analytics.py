"""Pydantic schemas for the portfolio analytics endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Literal
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field, field_validator

from trade_journal.config import get_settings
from trade_journal.models import (
    ClosedTrade,
    PortfolioAnalysis,
    PortfolioStats,
    Position,
    StrategyStats,
    Transaction,
    TransactionKind,
)


def _num(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


def normalize_timestamp(value: datetime | None) -> datetime | None:
    """Convert to UTC, reading naive values in the configured timezone."""

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=ZoneInfo(get_settings().timezone))
    return value.astimezone(timezone.utc)


class TransactionSchema(BaseModel):
    id: str
    symbol: str = Field(..., examples=["BBCA"])
    type: Literal["BUY", "SELL"]
    quantity: Decimal
    price: Decimal
    date: datetime
    fees: Decimal = Decimal("0")
    strategy_id: str | None = None
    notes: str | None = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return normalize_timestamp(value)

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            symbol=self.symbol,
            kind=TransactionKind(self.type),
            quantity=self.quantity,
            price=self.price,
            timestamp=self.date,
            fees=self.fees,
            strategy_id=self.strategy_id,
            notes=self.notes,
        )

    @classmethod
    def from_domain(cls, tx: Transaction) -> "TransactionSchema":
        return cls(
            id=tx.id,
            symbol=tx.symbol,
            type=tx.kind.value,
            quantity=tx.quantity,
            price=tx.price,
            date=tx.timestamp,
            fees=tx.fees,
            strategy_id=tx.strategy_id,
            notes=tx.notes,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "t1",
                "symbol": "BBCA",
                "type": "BUY",
                "quantity": 100,
                "price": 8500,
                "date": "2024-03-01T09:00:00+07:00",
                "fees": 1500,
                "strategy_id": "breakout",
            }
        }


class AnalyticsRequest(BaseModel):
    transactions: list[TransactionSchema] = Field(default_factory=list)
    initial_capital: Decimal = Field(default=Decimal("0"), ge=0)
    current_prices: dict[str, Decimal] = Field(default_factory=dict)


class PositionSchema(BaseModel):
    symbol: str
    quantity: float
    average_buy_price: float
    total_cost: float
    current_price: float | None = None
    market_value: float | None = None
    unrealized_pnl: float | None = None
    unrealized_pnl_percent: float | None = None

    @classmethod
    def from_domain(cls, position: Position) -> "PositionSchema":
        return cls(
            symbol=position.symbol,
            quantity=float(position.quantity),
            average_buy_price=float(position.average_buy_price),
            total_cost=float(position.total_cost),
            current_price=_num(position.current_price),
            market_value=_num(position.market_value),
            unrealized_pnl=_num(position.unrealized_pnl),
            unrealized_pnl_percent=_num(position.unrealized_pnl_percent),
        )


class ClosedTradeSchema(BaseModel):
    symbol: str
    buy_transaction_id: str
    sell_transaction_id: str
    quantity: float
    buy_price: float
    sell_price: float
    buy_date: datetime
    sell_date: datetime
    realized_pnl: float
    realized_pnl_percent: float
    fees: float
    strategy_id: str | None = None

    @classmethod
    def from_domain(cls, trade: ClosedTrade) -> "ClosedTradeSchema":
        return cls(
            symbol=trade.symbol,
            buy_transaction_id=trade.buy_transaction_id,
            sell_transaction_id=trade.sell_transaction_id,
            quantity=float(trade.quantity),
            buy_price=float(trade.buy_price),
            sell_price=float(trade.sell_price),
            buy_date=trade.buy_timestamp,
            sell_date=trade.sell_timestamp,
            realized_pnl=float(trade.realized_pnl),
            realized_pnl_percent=float(trade.realized_pnl_percent),
            fees=float(trade.fees),
            strategy_id=trade.strategy_id,
        )


class PortfolioStatsSchema(BaseModel):
    initial_capital: float
    realized_pnl: float
    unrealized_pnl: float
    total_value: float
    total_return_percent: float
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    profit_factor: float | None = Field(
        default=None,
        description="Gross gains over gross losses; null when there are gains but no losses.",
    )
    average_gain: float
    average_loss: float
    largest_win: float
    largest_loss: float

    @classmethod
    def from_domain(cls, stats: PortfolioStats) -> "PortfolioStatsSchema":
        return cls(
            initial_capital=float(stats.initial_capital),
            realized_pnl=float(stats.realized_pnl),
            unrealized_pnl=float(stats.unrealized_pnl),
            total_value=float(stats.total_value),
            total_return_percent=float(stats.total_return_percent),
            total_trades=stats.total_trades,
            winning_trades=stats.winning_trades,
            losing_trades=stats.losing_trades,
            win_rate=float(stats.win_rate),
            profit_factor=_num(stats.profit_factor),
            average_gain=float(stats.average_gain),
            average_loss=float(stats.average_loss),
            largest_win=float(stats.largest_win),
            largest_loss=float(stats.largest_loss),
        )


class StrategyStatsSchema(BaseModel):
    strategy_id: str
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    profit_factor: float | None = None
    average_gain: float
    average_loss: float
    largest_win: float
    largest_loss: float
    total_pnl: float
    total_pnl_percent: float

    @classmethod
    def from_domain(cls, stats: StrategyStats) -> "StrategyStatsSchema":
        return cls(
            strategy_id=stats.strategy_id,
            total_trades=stats.total_trades,
            winning_trades=stats.winning_trades,
            losing_trades=stats.losing_trades,
            win_rate=float(stats.win_rate),
            profit_factor=_num(stats.profit_factor),
            average_gain=float(stats.average_gain),
            average_loss=float(stats.average_loss),
            largest_win=float(stats.largest_win),
            largest_loss=float(stats.largest_loss),
            total_pnl=float(stats.total_pnl),
            total_pnl_percent=float(stats.total_pnl_percent),
        )


class AnalyticsResponse(BaseModel):
    positions: list[PositionSchema]
    closed_trades: list[ClosedTradeSchema]
    stats: PortfolioStatsSchema
    strategy_stats: list[StrategyStatsSchema]

    @classmethod
    def from_domain(cls, analysis: PortfolioAnalysis) -> "AnalyticsResponse":
        return cls(
            positions=[PositionSchema.from_domain(p) for p in analysis.positions],
            closed_trades=[ClosedTradeSchema.from_domain(t) for t in analysis.closed_trades],
            stats=PortfolioStatsSchema.from_domain(analysis.stats),
            strategy_stats=[StrategyStatsSchema.from_domain(s) for s in analysis.strategy_stats],
        )


class TransactionFilterRequest(BaseModel):
    transactions: list[TransactionSchema] = Field(default_factory=list)
    symbol: str | None = None
    type: Literal["BUY", "SELL"] | None = None
    start: datetime | None = None
    end: datetime | None = None

    @field_validator("start", "end")
    @classmethod
    def normalize_window(cls, value: datetime | None) -> datetime | None:
        return normalize_timestamp(value)


__all__ = [
    "AnalyticsRequest",
    "AnalyticsResponse",
    "ClosedTradeSchema",
    "PortfolioStatsSchema",
    "PositionSchema",
    "StrategyStatsSchema",
    "TransactionFilterRequest",
    "TransactionSchema",
]
