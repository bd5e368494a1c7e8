"""DeadlineRequest - per-domain input models.

Dates stay as ISO strings here; ``DeadlineCalculator.validate`` parses them
so that a bad date is reported as ``InvalidDate`` naming the field.
"""

from datetime import date
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import Field

from .base import CamelModel
from .case_types import (
    BenefitType,
    CourtDeadlineType,
    Domain,
    EmploymentClaimType,
    HousingNoticeType,
    TenancyType,
)

DateInput = Union[str, date]


class EmploymentTribunalRequest(CamelModel):
    """Employment Tribunal claim deadline input."""

    domain: Literal["employment_tribunal"] = "employment_tribunal"
    event_date: DateInput = Field(..., description="Date of the dismissal/act complained of (YYYY-MM-DD)")
    event_type: EmploymentClaimType = Field(..., description="Type of employment claim")
    has_contacted_acas: bool = Field(False, description="ACAS Early Conciliation already started")
    acas_certificate_date: Optional[DateInput] = Field(
        None, description="Date the ACAS certificate was issued (YYYY-MM-DD)"
    )

    reference_date_field: ClassVar[str] = "eventDate"

    @property
    def reference_date(self) -> DateInput:
        return self.event_date

    @property
    def case_subtype(self) -> str:
        return self.event_type.value


class BenefitsAppealRequest(CamelModel):
    """Benefits decision appeal (PIP, UC, ESA, ...) input."""

    domain: Literal["benefits_appeal"] = "benefits_appeal"
    decision_date: DateInput = Field(..., description="Date on the decision letter (YYYY-MM-DD)")
    benefit_type: BenefitType = Field(..., description="Type of benefit")
    has_mandatory_reconsideration: bool = Field(
        False, description="Mandatory Reconsideration already requested"
    )
    mandatory_reconsideration_date: Optional[DateInput] = Field(
        None, description="Date of the MR decision letter (YYYY-MM-DD)"
    )

    reference_date_field: ClassVar[str] = "decisionDate"

    @property
    def reference_date(self) -> DateInput:
        return self.decision_date

    @property
    def case_subtype(self) -> str:
        return self.benefit_type.value


class HousingRequest(CamelModel):
    """Housing notice / eviction deadline input."""

    domain: Literal["housing"] = "housing"
    notice_date: DateInput = Field(..., description="Date the notice was served/received (YYYY-MM-DD)")
    notice_type: HousingNoticeType = Field(..., description="Type of housing notice or deadline")
    tenancy_type: Optional[TenancyType] = Field(None, description="Type of tenancy")
    additional_info: Optional[str] = Field(None, description="Any additional relevant information")

    reference_date_field: ClassVar[str] = "noticeDate"

    @property
    def reference_date(self) -> DateInput:
        return self.notice_date

    @property
    def case_subtype(self) -> str:
        return self.notice_type.value


class CourtRequest(CamelModel):
    """General court/tribunal deadline input."""

    domain: Literal["court"] = "court"
    relevant_date: DateInput = Field(
        ..., description="Claim served, judgment date, etc. (YYYY-MM-DD)"
    )
    deadline_type: CourtDeadlineType = Field(..., description="Type of court deadline")

    reference_date_field: ClassVar[str] = "relevantDate"

    @property
    def reference_date(self) -> DateInput:
        return self.relevant_date

    @property
    def case_subtype(self) -> str:
        return self.deadline_type.value


DeadlineRequest = Annotated[
    Union[EmploymentTribunalRequest, BenefitsAppealRequest, HousingRequest, CourtRequest],
    Field(discriminator="domain"),
]


def request_domain(request: CamelModel) -> Domain:
    """Domain enum for a request instance."""
    return Domain(request.domain)
