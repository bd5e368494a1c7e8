"""Deadline computation: date arithmetic, rule catalog, stages, urgency and guidance."""

from .calculator import (
    DeadlineCalculator,
    calculate_benefits_appeal_deadline,
    calculate_court_deadline,
    calculate_employment_tribunal_deadline,
    calculate_housing_deadline,
    parse_request,
)
from .rules import get_rule, list_case_subtypes
from .summary import summarize_deadlines

__all__ = [
    "DeadlineCalculator",
    "calculate_benefits_appeal_deadline",
    "calculate_court_deadline",
    "calculate_employment_tribunal_deadline",
    "calculate_housing_deadline",
    "parse_request",
    "get_rule",
    "list_case_subtypes",
    "summarize_deadlines",
]
