"""DeadlineResult - uniform output shared by every domain."""

from datetime import date
from typing import Optional

from pydantic import Field

from .base import CamelModel
from .case_types import UrgencyTier


class DeadlineResult(CamelModel):
    """Computed deadline with urgency and guidance.

    Created fresh per calculation; the engine never caches or stores it.
    """

    deadline_type: str = Field(..., description="Display label, e.g. 'Employment Tribunal Claim'")
    calculated_deadline: str = Field(..., description="Long-form display date")
    deadline_date: date = Field(..., description="Effective deadline as a calendar date")
    days_remaining: int = Field(..., description="Signed days from today; negative once passed")
    is_urgent: bool
    urgency: UrgencyTier
    stage: str = Field(..., description="Procedural stage the deadline applies to")
    extension: Optional[str] = Field(None, description="Marker when a statutory extension was applied")
    description: str
    warnings: tuple[str, ...] = Field(default=(), description="Ordered, most severe first")
    next_steps: tuple[str, ...] = Field(default=(), description="Ordered next steps")
    relevant_rules: str = Field(..., description="Citation for the governing rules")

    model_config = {
        "json_schema_extra": {
            "example": {
                "deadlineType": "Employment Tribunal Claim",
                "calculatedDeadline": "Wednesday, 15 May 2024",
                "deadlineDate": "2024-05-15",
                "daysRemaining": 12,
                "isUrgent": True,
                "urgency": "urgent",
                "stage": "Employment Tribunal Claim",
                "extension": "Extended by ACAS Early Conciliation period",
                "description": "Based on an event date of Monday, 1 January 2024, ...",
                "warnings": ["⚠️ Limited time remaining - act quickly"],
                "nextSteps": ["Gather evidence: contract, payslips, emails, witness details"],
                "relevantRules": "Employment Tribunals (Constitution and Rules of Procedure) Regulations 2013",
            }
        }
    }


class DeadlineSummary(CamelModel):
    """Counts across a batch of results (overdue / due soon)."""

    total: int
    overdue: int = Field(..., description="Deadlines strictly in the past")
    due_within_window: int = Field(..., description="Deadlines from today up to window_days ahead")
    urgent: int
    window_days: int
    next_deadline: Optional[date] = Field(None, description="Soonest deadline not yet passed")
