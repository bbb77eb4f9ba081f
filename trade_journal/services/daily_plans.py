"""Review figures for daily trading plans."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from trade_journal.models import ZERO


class WatchlistStatus(str, enum.Enum):
    PLANNED = "planned"
    EXECUTED = "executed"
    SKIPPED = "skipped"
    MISSED = "missed"


@dataclass(frozen=True)
class ChecklistItem:
    text: str
    completed: bool = False


@dataclass(frozen=True)
class ChecklistProgress:
    completed: int
    total: int


@dataclass(frozen=True)
class PlanReview:
    checklist_progress: ChecklistProgress
    adherence_rate: Decimal


def checklist_progress(items: Sequence[ChecklistItem]) -> ChecklistProgress:
    return ChecklistProgress(completed=sum(1 for item in items if item.completed), total=len(items))


def adherence_rate(statuses: Iterable[WatchlistStatus]) -> Decimal:
    """Percentage of decided watchlist items that were executed.

    Items still ``planned`` are undecided and left out of the denominator.
    """

    statuses = [WatchlistStatus(s) for s in statuses]
    decided = [s for s in statuses if s != WatchlistStatus.PLANNED]
    if not decided:
        return ZERO
    executed = sum(1 for s in decided if s == WatchlistStatus.EXECUTED)
    return Decimal(executed) / Decimal(len(decided)) * Decimal("100")


def review_plan(
    watchlist: Iterable[WatchlistStatus],
    checklist: Sequence[ChecklistItem],
) -> PlanReview:
    return PlanReview(
        checklist_progress=checklist_progress(checklist),
        adherence_rate=adherence_rate(watchlist),
    )


__all__ = [
    "WatchlistStatus",
    "ChecklistItem",
    "ChecklistProgress",
    "PlanReview",
    "checklist_progress",
    "adherence_rate",
    "review_plan",
]
