"""UK legal deadline engine."""

from .errors import (
    DeadlineError,
    InconsistentStageInput,
    InvalidDate,
    UnknownCaseSubtype,
    ValidationError,
)
from .models import DeadlineResult
from .timeline import (
    DeadlineCalculator,
    calculate_benefits_appeal_deadline,
    calculate_court_deadline,
    calculate_employment_tribunal_deadline,
    calculate_housing_deadline,
)

__version__ = "1.0.0"

__all__ = [
    "DeadlineError",
    "InconsistentStageInput",
    "InvalidDate",
    "UnknownCaseSubtype",
    "ValidationError",
    "DeadlineResult",
    "DeadlineCalculator",
    "calculate_benefits_appeal_deadline",
    "calculate_court_deadline",
    "calculate_employment_tribunal_deadline",
    "calculate_housing_deadline",
]
