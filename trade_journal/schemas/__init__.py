"""Pydantic schema exports."""

from .analytics import (
    AnalyticsRequest,
    AnalyticsResponse,
    ClosedTradeSchema,
    PortfolioStatsSchema,
    PositionSchema,
    StrategyStatsSchema,
    TransactionFilterRequest,
    TransactionSchema,
)
from .plans import (
    ChecklistItemSchema,
    ChecklistProgressSchema,
    PlanReviewRequest,
    PlanReviewResponse,
)

__all__ = [
    "AnalyticsRequest",
    "AnalyticsResponse",
    "ChecklistItemSchema",
    "ChecklistProgressSchema",
    "ClosedTradeSchema",
    "PlanReviewRequest",
    "PlanReviewResponse",
    "PortfolioStatsSchema",
    "PositionSchema",
    "StrategyStatsSchema",
    "TransactionFilterRequest",
    "TransactionSchema",
]
