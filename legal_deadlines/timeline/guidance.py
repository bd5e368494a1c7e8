"""Warnings, next steps and description text for a resolved deadline.

Output depends only on its arguments, so identical input always gives
identical guidance.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from ..models.case_types import BenefitType, UrgencyTier
from ..models.deadline_request import (
    BenefitsAppealRequest,
    EmploymentTribunalRequest,
    HousingRequest,
)
from .dates import format_date
from .rules import DomainProfile, RuleEntry
from .stages import AnyRequest, StageOutcome

ACAS_REQUIRED_WARNING = "📞 You MUST contact ACAS for Early Conciliation before making a claim"
ACAS_CONTACT_STEP = (
    "Contact ACAS immediately: 0300 123 1100 or www.acas.org.uk/early-conciliation"
)
ASSESSMENT_PHASE_NOTE = "You may be able to get the assessment component while appealing"
POSSESSION_ORDER_NOTE = "🏠 You do NOT have to leave until bailiffs arrive with a court order"

_ASSESSMENT_PHASE_BENEFITS = frozenset({BenefitType.PIP, BenefitType.ESA})


def _clean(entries: Iterable[str]) -> tuple[str, ...]:
    """Drop empty entries and repeats, keeping first-seen order."""
    return tuple(dict.fromkeys(e for e in entries if e))


def situational_notes(request: AnyRequest, outcome: StageOutcome) -> list[str]:
    """Domain notes driven by the request's flags."""
    notes: list[str] = []
    if isinstance(request, EmploymentTribunalRequest):
        if not request.has_contacted_acas:
            notes.append(ACAS_REQUIRED_WARNING)
    elif isinstance(request, BenefitsAppealRequest):
        if request.benefit_type in _ASSESSMENT_PHASE_BENEFITS:
            notes.append(ASSESSMENT_PHASE_NOTE)
    elif isinstance(request, HousingRequest):
        if "section" in request.notice_type.value:
            notes.append(POSSESSION_ORDER_NOTE)
    if outcome.applied_extension:
        notes.append(outcome.applied_extension)
    return notes


def compose_warnings(
    profile: DomainProfile,
    tier: UrgencyTier,
    days_remaining: int,
    notes: Iterable[str] = (),
) -> tuple[str, ...]:
    """Ordered warnings: passed first, then urgency tiers, then notes.

    Every tier whose limit is at or above ``days_remaining`` applies, most
    severe (smallest limit) first.
    """
    warnings: list[str] = []
    if tier is UrgencyTier.PASSED:
        warnings.append(profile.passed_warning)
    for limit, text in sorted(profile.warning_tiers):
        if days_remaining <= limit:
            warnings.append(text)
    if profile.standing_notes_first:
        warnings.extend(profile.standing_notes)
        warnings.extend(notes)
    else:
        warnings.extend(notes)
        warnings.extend(profile.standing_notes)
    return _clean(warnings)


def compose_next_steps(rule: RuleEntry, outcome: StageOutcome, request: AnyRequest) -> tuple[str, ...]:
    steps = list(rule.stage_next_steps.get(outcome.stage_key, rule.next_steps))
    if isinstance(request, EmploymentTribunalRequest) and not request.has_contacted_acas:
        steps.insert(0, ACAS_CONTACT_STEP)
    return _clean(steps)


def compose_description(rule: RuleEntry, outcome: StageOutcome, reference_date: date) -> str:
    template = rule.stage_descriptions.get(outcome.stage_key, rule.description)
    return template.format(
        reference_date=format_date(reference_date),
        case_subtype=rule.case_subtype.replace("_", " "),
        time_limit=rule.time_limit,
    )
