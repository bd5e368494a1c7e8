"""Tests for the overdue / due-soon roll-up."""

from datetime import date

from legal_deadlines.timeline import calculate_court_deadline, summarize_deadlines

TODAY = date(2024, 1, 10)


def _results():
    return [
        calculate_court_deadline("2023-12-01", "small_claims_response", today=TODAY),  # overdue
        calculate_court_deadline("2023-12-27", "small_claims_response", today=TODAY),  # due today
        calculate_court_deadline("2024-01-01", "small_claims_response", today=TODAY),  # 5 days
        calculate_court_deadline("2024-01-01", "judicial_review", today=TODAY),  # 81 days
    ]


def test_counts():
    summary = summarize_deadlines(_results())
    assert summary.total == 4
    assert summary.overdue == 1
    assert summary.due_within_window == 2
    assert summary.urgent == 3
    assert summary.window_days == 7


def test_next_deadline_skips_overdue():
    assert summarize_deadlines(_results()).next_deadline == date(2024, 1, 10)


def test_wider_window():
    assert summarize_deadlines(_results(), window_days=90).due_within_window == 3


def test_empty_batch():
    summary = summarize_deadlines([])
    assert summary.total == 0
    assert summary.next_deadline is None
