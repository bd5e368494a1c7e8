"""Enumerations for legal domains, case subtypes and urgency tiers."""

from enum import Enum


class Domain(str, Enum):
    EMPLOYMENT_TRIBUNAL = "employment_tribunal"
    BENEFITS_APPEAL = "benefits_appeal"
    HOUSING = "housing"
    COURT = "court"


class EmploymentClaimType(str, Enum):
    DISMISSAL = "dismissal"
    DISCRIMINATION = "discrimination"
    UNPAID_WAGES = "unpaid_wages"
    REDUNDANCY_PAYMENT = "redundancy_payment"
    EQUAL_PAY = "equal_pay"
    WHISTLEBLOWING = "whistleblowing"


class BenefitType(str, Enum):
    PIP = "pip"
    UNIVERSAL_CREDIT = "universal_credit"
    ESA = "esa"
    HOUSING_BENEFIT = "housing_benefit"
    COUNCIL_TAX_REDUCTION = "council_tax_reduction"
    CHILD_BENEFIT = "child_benefit"
    STATE_PENSION = "state_pension"
    ATTENDANCE_ALLOWANCE = "attendance_allowance"
    CARERS_ALLOWANCE = "carers_allowance"


class HousingNoticeType(str, Enum):
    SECTION_21 = "section_21"  # no-fault eviction (AST)
    SECTION_8 = "section_8"  # breach of tenancy
    SECTION_21_POST_REFORM = "section_21_post_reform"
    RENT_INCREASE = "rent_increase"
    DISREPAIR_COMPLAINT = "disrepair_complaint"
    HOUSING_BENEFIT_APPEAL = "housing_benefit_appeal"
    HOMELESSNESS_REVIEW = "homelessness_review"


class TenancyType(str, Enum):
    ASSURED_SHORTHOLD = "assured_shorthold"
    ASSURED = "assured"
    REGULATED = "regulated"
    COUNCIL = "council"
    HOUSING_ASSOCIATION = "housing_association"


class CourtDeadlineType(str, Enum):
    SMALL_CLAIMS_RESPONSE = "small_claims_response"
    COUNTY_COURT_RESPONSE = "county_court_response"
    APPEAL_COUNTY_COURT = "appeal_county_court"
    JUDICIAL_REVIEW = "judicial_review"
    PERSONAL_INJURY_CLAIM = "personal_injury_claim"
    CONTRACT_DISPUTE = "contract_dispute"
    IMMIGRATION_APPEAL = "immigration_appeal"
    PARKING_CHARGE_APPEAL = "parking_charge_appeal"


class UrgencyTier(str, Enum):
    """Severity derived purely from days remaining."""

    PASSED = "passed"
    URGENT = "urgent"
    NORMAL = "normal"
