"""Schemas for daily plan review."""

from __future__ import annotations

from pydantic import BaseModel, Field

from trade_journal.services.daily_plans import WatchlistStatus


class ChecklistItemSchema(BaseModel):
    text: str
    completed: bool = False


class PlanReviewRequest(BaseModel):
    watchlist: list[WatchlistStatus] = Field(default_factory=list)
    checklist: list[ChecklistItemSchema] = Field(default_factory=list)


class ChecklistProgressSchema(BaseModel):
    completed: int
    total: int


class PlanReviewResponse(BaseModel):
    checklist_progress: ChecklistProgressSchema
    adherence_rate: float = Field(..., ge=0.0, le=100.0)


__all__ = [
    "ChecklistItemSchema",
    "ChecklistProgressSchema",
    "PlanReviewRequest",
    "PlanReviewResponse",
]
