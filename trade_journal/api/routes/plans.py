"""Daily plan review endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from trade_journal.schemas import ChecklistProgressSchema, PlanReviewRequest, PlanReviewResponse
from trade_journal.services.daily_plans import ChecklistItem, review_plan

router = APIRouter()


@router.post("/review", response_model=PlanReviewResponse)
async def post_plan_review(payload: PlanReviewRequest) -> PlanReviewResponse:
    review = review_plan(
        payload.watchlist,
        [ChecklistItem(text=item.text, completed=item.completed) for item in payload.checklist],
    )
    return PlanReviewResponse(
        checklist_progress=ChecklistProgressSchema(
            completed=review.checklist_progress.completed,
            total=review.checklist_progress.total,
        ),
        adherence_rate=float(review.adherence_rate),
    )


__all__ = ["router"]
