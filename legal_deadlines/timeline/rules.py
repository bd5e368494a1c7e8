"""Closed catalog of statutory and procedural deadline rules.

One RuleEntry per (domain, case subtype). Period overrides such as the
6-month redundancy-payment limit live on the entry itself rather than as
branches in the calculator. The catalog is built once at import and is
read-only afterwards.

Sources: Employment Tribunals Rules 2013, Social Entitlement Chamber Rules
2008, Housing Act 1988, Civil Procedure Rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownCaseSubtype
from ..models.case_types import (
    BenefitType,
    CourtDeadlineType,
    Domain,
    EmploymentClaimType,
    HousingNoticeType,
)
from .dates import OffsetUnit

DEFAULT_URGENT_THRESHOLD_DAYS = 14

_EMPTY: Mapping[str, tuple[str, ...]] = MappingProxyType({})


@dataclass(frozen=True)
class RuleEntry:
    """Deadline rule for one case subtype.

    ``description`` may reference ``{reference_date}``, ``{case_subtype}``
    and ``{time_limit}``. ``stage_next_steps`` / ``stage_descriptions`` are
    keyed by stage key and replace the defaults for multi-stage domains.
    """

    domain: Domain
    case_subtype: str
    deadline_type: str
    offset_amount: int
    offset_unit: OffsetUnit
    time_limit: str
    description: str
    next_steps: tuple[str, ...]
    relevant_rules: str
    less_days: int = 0
    urgent_threshold_days: int = DEFAULT_URGENT_THRESHOLD_DAYS
    stage_next_steps: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    stage_descriptions: Mapping[str, str] = field(default_factory=lambda: _EMPTY)


@dataclass(frozen=True)
class DomainProfile:
    """Per-domain warning wording.

    ``warning_tiers`` pairs a day limit with the warning shown when
    days remaining is at or below it.
    ``standing_notes_first`` lists the standing notes ahead of the
    flag-driven notes.
    """

    domain: Domain
    passed_warning: str
    warning_tiers: tuple[tuple[int, str], ...]
    standing_notes: tuple[str, ...] = ()
    standing_notes_first: bool = False


@dataclass(frozen=True)
class AcasExtensionRule:
    """Minimum time left after an ACAS certificate issued late."""

    extension_days: int
    marker: str


@dataclass(frozen=True)
class BenefitsStageRule:
    """Tribunal-stage periods following Mandatory Reconsideration."""

    tribunal_days: int
    # MR complete but its decision date unknown: count from the original
    # decision and over-estimate rather than understate urgency.
    estimated_tribunal_days: int


ACAS_EXTENSION = AcasExtensionRule(
    extension_days=30,
    marker="Extended by ACAS Early Conciliation period",
)

BENEFITS_STAGES = BenefitsStageRule(tribunal_days=30, estimated_tribunal_days=60)


# --- Domain profiles ---

EMPLOYMENT_PROFILE = DomainProfile(
    domain=Domain.EMPLOYMENT_TRIBUNAL,
    passed_warning="⚠️ DEADLINE MAY HAVE PASSED - Seek urgent legal advice",
    warning_tiers=(
        (7, "🚨 URGENT: Less than 1 week remaining"),
        (14, "⚠️ Limited time remaining - act quickly"),
    ),
)

BENEFITS_PROFILE = DomainProfile(
    domain=Domain.BENEFITS_APPEAL,
    passed_warning=(
        "⚠️ DEADLINE MAY HAVE PASSED - Late appeals are sometimes accepted with good reason"
    ),
    warning_tiers=(
        (7, "🚨 URGENT: Less than 1 week remaining"),
        (14, "⚠️ Limited time remaining - act quickly"),
    ),
    standing_notes=("Keep your benefits claim going while you appeal",),
    standing_notes_first=True,
)

HOUSING_PROFILE = DomainProfile(
    domain=Domain.HOUSING,
    passed_warning="⚠️ DEADLINE MAY HAVE PASSED - Seek urgent advice",
    warning_tiers=((7, "🚨 URGENT: Seek advice immediately"),),
    standing_notes=("Never ignore court papers - always respond",),
)

COURT_PROFILE = DomainProfile(
    domain=Domain.COURT,
    passed_warning="⚠️ DEADLINE MAY HAVE PASSED - Seek urgent legal advice about extensions",
    warning_tiers=(
        (3, "🚨 CRITICAL: Less than 3 days remaining"),
        (7, "⚠️ URGENT: Act immediately"),
    ),
    standing_notes=("Court deadlines are strictly enforced",),
)

_PROFILES: Mapping[Domain, DomainProfile] = MappingProxyType(
    {
        Domain.EMPLOYMENT_TRIBUNAL: EMPLOYMENT_PROFILE,
        Domain.BENEFITS_APPEAL: BENEFITS_PROFILE,
        Domain.HOUSING: HOUSING_PROFILE,
        Domain.COURT: COURT_PROFILE,
    }
)


# --- Employment Tribunal ---

_ET_RULES = "Employment Tribunals (Constitution and Rules of Procedure) Regulations 2013"
_ET_DESCRIPTION = (
    "Based on an event date of {reference_date}, the deadline for your "
    "{case_subtype} claim is {time_limit} from that date."
)
_ET_NEXT_STEPS = (
    "Gather evidence: contract, payslips, emails, witness details",
    "Complete ET1 form online at www.gov.uk/employment-tribunals/make-a-claim",
    "Consider seeking legal advice from a solicitor or Citizens Advice",
    "Check if you qualify for legal aid: www.gov.uk/legal-aid",
)


def _employment(claim: EmploymentClaimType, months: int, less_days: int, time_limit: str) -> RuleEntry:
    return RuleEntry(
        domain=Domain.EMPLOYMENT_TRIBUNAL,
        case_subtype=claim.value,
        deadline_type="Employment Tribunal Claim",
        offset_amount=months,
        offset_unit=OffsetUnit.MONTHS,
        less_days=less_days,
        time_limit=time_limit,
        description=_ET_DESCRIPTION,
        next_steps=_ET_NEXT_STEPS,
        relevant_rules=_ET_RULES,
    )


_EMPLOYMENT = [
    _employment(EmploymentClaimType.DISMISSAL, 3, 1, "3 months minus 1 day"),
    _employment(EmploymentClaimType.DISCRIMINATION, 3, 1, "3 months minus 1 day"),
    _employment(EmploymentClaimType.UNPAID_WAGES, 3, 1, "3 months minus 1 day"),
    _employment(EmploymentClaimType.WHISTLEBLOWING, 3, 1, "3 months minus 1 day"),
    _employment(EmploymentClaimType.REDUNDANCY_PAYMENT, 6, 0, "6 months"),
    _employment(
        EmploymentClaimType.EQUAL_PAY, 6, 0, "6 months (or within 6 months of leaving employment)"
    ),
]


# --- Benefits appeal ---

STAGE_MANDATORY_RECONSIDERATION = "needs_mandatory_reconsideration"
STAGE_AWAITING_MR_DECISION = "awaiting_mr_decision"
STAGE_READY_TO_APPEAL = "ready_to_appeal"

_SSCS_RULES = "Tribunal Procedure (First-tier Tribunal) (Social Entitlement Chamber) Rules 2008"

_MR_NEXT_STEPS = (
    "Write to DWP requesting a Mandatory Reconsideration",
    "Explain why you think the decision is wrong",
    "Include any new medical evidence",
    "Keep a copy of everything you send",
    "Send by recorded delivery or keep proof of posting",
    "Call the benefit helpline to confirm they received it",
)
_TRIBUNAL_NEXT_STEPS = (
    "Complete form SSCS1 to appeal to the tribunal",
    "Submit online at www.gov.uk/appeal-benefit-decision",
    "Include the Mandatory Reconsideration notice",
    "Gather medical evidence to support your appeal",
    "Consider getting help from Citizens Advice or a welfare rights adviser",
    "You can request an oral hearing or paper-based decision",
)


def _benefit(benefit: BenefitType) -> RuleEntry:
    # Mandatory Reconsideration is due one month from the decision,
    # taken as 30 days.
    return RuleEntry(
        domain=Domain.BENEFITS_APPEAL,
        case_subtype=benefit.value,
        deadline_type=benefit.value.replace("_", " ").upper(),
        offset_amount=30,
        offset_unit=OffsetUnit.DAYS,
        time_limit="1 month",
        description=(
            "You must request a Mandatory Reconsideration before you can appeal to a tribunal."
        ),
        next_steps=_MR_NEXT_STEPS,
        relevant_rules=_SSCS_RULES,
        stage_next_steps=MappingProxyType(
            {
                STAGE_READY_TO_APPEAL: _TRIBUNAL_NEXT_STEPS,
                STAGE_AWAITING_MR_DECISION: _TRIBUNAL_NEXT_STEPS,
            }
        ),
        stage_descriptions=MappingProxyType(
            {
                STAGE_READY_TO_APPEAL: (
                    "You can now appeal to the First-tier Tribunal (Social Entitlement Chamber)."
                ),
                STAGE_AWAITING_MR_DECISION: (
                    "Please provide your MR decision date for an accurate deadline."
                ),
            }
        ),
    )


_BENEFITS = [_benefit(b) for b in BenefitType]


# --- Housing ---

_HOUSING_RULES = "Housing Act 1988 (as amended)"
_HOUSING_GENERAL_DESCRIPTION = (
    "General housing deadline. Please specify the notice type for accurate information."
)
_HOUSING_GENERAL_STEPS = ("Contact Shelter or Citizens Advice for specific guidance",)


def _housing(notice: HousingNoticeType, days: int, description: str, next_steps: tuple[str, ...]) -> RuleEntry:
    return RuleEntry(
        domain=Domain.HOUSING,
        case_subtype=notice.value,
        deadline_type=notice.value.replace("_", " ").upper(),
        offset_amount=days,
        offset_unit=OffsetUnit.DAYS,
        time_limit=f"{days} days",
        description=description,
        next_steps=next_steps,
        relevant_rules=_HOUSING_RULES,
        urgent_threshold_days=7,
    )


_HOUSING = [
    _housing(
        HousingNoticeType.SECTION_21,
        60,
        'Section 21 "no-fault" eviction notice. The landlord must give at least 2 months\' '
        "notice. You do not have to leave until a court orders possession.",
        (
            "Check the notice is valid (correct form, deposit protected, etc.)",
            "You do NOT have to leave on the date in the notice",
            "Landlord must get a court order to evict you",
            "Get advice from Shelter: 0808 800 4444",
            "Contact your council about housing options",
            "Check if you can challenge the notice (revenge eviction, disrepair, etc.)",
        ),
    ),
    # Notice period varies by ground; 2 weeks is the rent-arrears case.
    _housing(
        HousingNoticeType.SECTION_8,
        14,
        "Section 8 eviction for breach of tenancy. Notice period varies by ground "
        "(2 weeks to 2 months). Landlord must prove grounds in court.",
        (
            "Check which grounds the landlord is using",
            "Seek legal advice immediately",
            "If rent arrears: try to pay off arrears before court",
            "You have the right to defend the claim in court",
            "Apply for legal aid if eligible",
            "Contact Shelter for advice: 0808 800 4444",
        ),
    ),
    _housing(
        HousingNoticeType.RENT_INCREASE,
        30,
        "Rent increase notice. You may be able to challenge it if it's above market rate.",
        (
            "Check if your tenancy allows rent increases",
            "Compare with local market rents",
            "You can refer to a Tribunal within the notice period",
            "Apply to First-tier Tribunal (Property Chamber)",
            "Get advice from Citizens Advice on challenging increases",
        ),
    ),
    _housing(
        HousingNoticeType.HOMELESSNESS_REVIEW,
        21,
        "You have 21 days to request a review of a homelessness decision.",
        (
            "Write to the council requesting a review within 21 days",
            "Explain why you think the decision is wrong",
            "Get help from Shelter or local advice service",
            "Ask for temporary accommodation while review is pending",
            "Gather evidence to support your case",
        ),
    ),
    _housing(
        HousingNoticeType.SECTION_21_POST_REFORM,
        28,
        _HOUSING_GENERAL_DESCRIPTION,
        _HOUSING_GENERAL_STEPS,
    ),
    _housing(
        HousingNoticeType.DISREPAIR_COMPLAINT,
        28,
        _HOUSING_GENERAL_DESCRIPTION,
        _HOUSING_GENERAL_STEPS,
    ),
    _housing(
        HousingNoticeType.HOUSING_BENEFIT_APPEAL,
        28,
        _HOUSING_GENERAL_DESCRIPTION,
        _HOUSING_GENERAL_STEPS,
    ),
]


# --- General court / tribunal ---

_COURT_RULES = "Civil Procedure Rules / Tribunal Procedure Rules"


def _court(deadline: CourtDeadlineType, days: int, time_limit: str, description: str, next_steps: tuple[str, ...]) -> RuleEntry:
    return RuleEntry(
        domain=Domain.COURT,
        case_subtype=deadline.value,
        deadline_type=deadline.value.replace("_", " ").upper(),
        offset_amount=days,
        offset_unit=OffsetUnit.DAYS,
        time_limit=time_limit,
        description=description,
        next_steps=next_steps,
        relevant_rules=_COURT_RULES,
        urgent_threshold_days=min(7, days // 2),
    )


_COURT = [
    _court(
        CourtDeadlineType.SMALL_CLAIMS_RESPONSE,
        14,
        "14 days",
        "You have 14 days from service to respond to a small claims court claim.",
        (
            "Complete the response form (N9)",
            "State whether you admit, part-admit, or defend the claim",
            "If defending, explain your defence clearly",
            "Send response to the court by the deadline",
            "Keep copies of all documents",
        ),
    ),
    _court(
        CourtDeadlineType.COUNTY_COURT_RESPONSE,
        14,
        "14 days",
        "You have 14 days from service to acknowledge/respond to a County Court claim.",
        (
            "File acknowledgement of service if you need more time (gives extra 14 days)",
            "Complete defence form (N9B)",
            "Consider whether to make a counterclaim",
            "Seek legal advice for complex claims",
            "Consider mediation as an alternative",
        ),
    ),
    _court(
        CourtDeadlineType.APPEAL_COUNTY_COURT,
        21,
        "21 days",
        "You have 21 days from the judgment date to appeal a County Court decision.",
        (
            "You need permission to appeal",
            "Complete form N161 (appeal notice)",
            "Explain grounds for appeal (judge made legal error)",
            "Pay the appeal fee",
            "Consider whether appeal has realistic prospect of success",
        ),
    ),
    _court(
        CourtDeadlineType.JUDICIAL_REVIEW,
        90,
        "3 months",
        "Judicial review claims must normally be filed within 3 months of the decision.",
        (
            "This is a strict deadline - act promptly",
            "Send pre-action letter to public body",
            "Seek specialist public law advice",
            "Check legal aid eligibility",
            "Some cases have shorter time limits (e.g., planning - 6 weeks)",
        ),
    ),
    _court(
        CourtDeadlineType.PERSONAL_INJURY_CLAIM,
        1095,
        "3 years",
        "Personal injury claims must generally be started within 3 years of the injury/knowledge.",
        (
            "See a solicitor - most offer free initial consultation",
            'Many personal injury solicitors work on "no win, no fee"',
            "Gather evidence: medical records, photos, witness details",
            "Keep records of all expenses and losses",
            "Time limits can be extended in some circumstances",
        ),
    ),
    _court(
        CourtDeadlineType.CONTRACT_DISPUTE,
        2190,
        "6 years",
        "Contract disputes must be brought within 6 years of the breach.",
        (
            "Send a letter before action",
            "Consider mediation first",
            "Gather all contract documents and correspondence",
            "Calculate your losses",
            "Consider whether small claims court applies (under £10,000)",
        ),
    ),
    _court(
        CourtDeadlineType.IMMIGRATION_APPEAL,
        14,
        "14 days",
        "Immigration appeals must be lodged within 14 days of the decision (28 days if abroad).",
        (
            "This is a STRICT deadline",
            "Complete the appeal form immediately",
            "Seek immigration legal advice urgently",
            "Check if you qualify for legal aid",
            "Gather supporting evidence",
        ),
    ),
    _court(
        CourtDeadlineType.PARKING_CHARGE_APPEAL,
        28,
        "28 days",
        "You have 28 days to appeal a parking charge notice.",
        (
            "Check which appeals service to use (POPLA or IAS)",
            "Gather evidence: photos, signage, ticket",
            "Common grounds: unclear signage, overstay due to emergency",
            "Appeal is free",
            "See Money Saving Expert guide for templates",
        ),
    ),
]


_CATALOG: Mapping[tuple[Domain, str], RuleEntry] = MappingProxyType(
    {(rule.domain, rule.case_subtype): rule for rule in (*_EMPLOYMENT, *_BENEFITS, *_HOUSING, *_COURT)}
)


def get_rule(domain: Domain, case_subtype: str) -> RuleEntry:
    """Return the rule for ``(domain, case_subtype)``.

    Raises:
        UnknownCaseSubtype: If the catalog has no such entry.
    """
    subtype = str(getattr(case_subtype, "value", case_subtype))
    try:
        return _CATALOG[(Domain(domain), subtype)]
    except (KeyError, ValueError):
        raise UnknownCaseSubtype(str(getattr(domain, "value", domain)), subtype) from None


def get_domain_profile(domain: Domain) -> DomainProfile:
    return _PROFILES[Domain(domain)]


def rules_for_domain(domain: Domain) -> list[RuleEntry]:
    return [rule for (d, _), rule in _CATALOG.items() if d is Domain(domain)]


def list_case_subtypes(domain: Domain) -> list[str]:
    """Return all supported case subtypes for a domain."""
    return [rule.case_subtype for rule in rules_for_domain(domain)]
