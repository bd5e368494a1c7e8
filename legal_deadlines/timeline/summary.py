"""Roll-up of several deadline results (overdue / due soon)."""

from __future__ import annotations

from typing import Iterable

from ..models.deadline_result import DeadlineResult, DeadlineSummary

DEFAULT_WINDOW_DAYS = 7


def summarize_deadlines(results: Iterable[DeadlineResult], window_days: int = DEFAULT_WINDOW_DAYS) -> DeadlineSummary:
    """Count overdue and upcoming deadlines across ``results``.

    A deadline due today counts as upcoming, not overdue.
    """
    results = list(results)
    upcoming = [r for r in results if r.days_remaining >= 0]
    next_deadline = min((r.deadline_date for r in upcoming), default=None)

    return DeadlineSummary(
        total=len(results),
        overdue=sum(1 for r in results if r.days_remaining < 0),
        due_within_window=sum(1 for r in upcoming if r.days_remaining <= window_days),
        urgent=sum(1 for r in results if r.is_urgent),
        window_days=window_days,
        next_deadline=next_deadline,
    )
