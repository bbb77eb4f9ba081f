from __future__ import annotations

from decimal import Decimal

from trade_journal.services.daily_plans import (
    ChecklistItem,
    WatchlistStatus,
    adherence_rate,
    checklist_progress,
    review_plan,
)


def test_adherence_ignores_planned_items():
    rate = adherence_rate(
        [
            WatchlistStatus.EXECUTED,
            WatchlistStatus.SKIPPED,
            WatchlistStatus.PLANNED,
            WatchlistStatus.EXECUTED,
            WatchlistStatus.MISSED,
        ]
    )
    assert rate == Decimal("50")


def test_adherence_zero_when_nothing_decided():
    assert adherence_rate([WatchlistStatus.PLANNED]) == 0
    assert adherence_rate([]) == 0


def test_adherence_accepts_raw_status_strings():
    assert adherence_rate(["executed", "executed"]) == Decimal("100")


def test_checklist_progress_counts_completed_items():
    progress = checklist_progress(
        [ChecklistItem("Check IHSG futures", True), ChecklistItem("Review news"), ChecklistItem("Set alerts", True)]
    )
    assert (progress.completed, progress.total) == (2, 3)


def test_review_plan_combines_both():
    review = review_plan([WatchlistStatus.MISSED], [])
    assert review.adherence_rate == 0
    assert (review.checklist_progress.completed, review.checklist_progress.total) == (0, 0)
