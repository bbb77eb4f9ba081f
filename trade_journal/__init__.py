"""FIFO lot matching and portfolio statistics for a trading journal."""

from .errors import InvalidTransactionError, LotMatchingError, OversoldError
from .models import (
    ClosedTrade,
    OpenLot,
    PortfolioAnalysis,
    PortfolioStats,
    Position,
    StrategyStats,
    Transaction,
    TransactionKind,
)
from .services.lots import match_lots
from .services.portfolio import analyze_portfolio, filter_transactions

__all__ = [
    "ClosedTrade",
    "InvalidTransactionError",
    "LotMatchingError",
    "OpenLot",
    "OversoldError",
    "PortfolioAnalysis",
    "PortfolioStats",
    "Position",
    "StrategyStats",
    "Transaction",
    "TransactionKind",
    "analyze_portfolio",
    "filter_transactions",
    "match_lots",
]
