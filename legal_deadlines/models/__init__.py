"""Shared Pydantic models - request and result contract for every domain."""

from .case_types import (
    BenefitType,
    CourtDeadlineType,
    Domain,
    EmploymentClaimType,
    HousingNoticeType,
    TenancyType,
    UrgencyTier,
)
from .deadline_request import (
    BenefitsAppealRequest,
    CourtRequest,
    DeadlineRequest,
    EmploymentTribunalRequest,
    HousingRequest,
)
from .deadline_result import DeadlineResult, DeadlineSummary

__all__ = [
    "BenefitType",
    "CourtDeadlineType",
    "Domain",
    "EmploymentClaimType",
    "HousingNoticeType",
    "TenancyType",
    "UrgencyTier",
    "BenefitsAppealRequest",
    "CourtRequest",
    "DeadlineRequest",
    "EmploymentTribunalRequest",
    "HousingRequest",
    "DeadlineResult",
    "DeadlineSummary",
]
