"""Analytics services for the trade journal."""

from .daily_plans import review_plan
from .lots import match_lots
from .portfolio import analyze_portfolio, filter_transactions
from .stats import build_position, compute_portfolio_stats, compute_trade_stats
from .strategies import compute_all_strategy_stats, compute_strategy_stats

__all__ = [
    "analyze_portfolio",
    "build_position",
    "compute_all_strategy_stats",
    "compute_portfolio_stats",
    "compute_strategy_stats",
    "compute_trade_stats",
    "filter_transactions",
    "match_lots",
    "review_plan",
]
