"""Procedural stage resolution.

For domains whose real deadline depends on an intermediate step (Mandatory
Reconsideration for benefits, ACAS Early Conciliation for employment
claims), works out which stage applies and its effective deadline. Every
other domain is the reference date plus the catalog offset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Union

from ..errors import InvalidDate
from ..models.deadline_request import (
    BenefitsAppealRequest,
    CourtRequest,
    EmploymentTribunalRequest,
    HousingRequest,
)
from .dates import add_calendar_days, apply_offset
from .rules import (
    ACAS_EXTENSION,
    BENEFITS_STAGES,
    STAGE_AWAITING_MR_DECISION,
    STAGE_MANDATORY_RECONSIDERATION,
    STAGE_READY_TO_APPEAL,
    RuleEntry,
)

logger = logging.getLogger(__name__)

STAGE_STANDARD = "standard"

AnyRequest = Union[EmploymentTribunalRequest, BenefitsAppealRequest, HousingRequest, CourtRequest]


@dataclass(frozen=True)
class ValidatedRequest:
    """A request whose dates have been parsed.

    Attributes:
        request: The original boundary model.
        reference_date: Event/decision/notice/relevant date.
        stage_date: ACAS certificate or MR decision date, when given.
    """

    request: AnyRequest
    reference_date: date
    stage_date: Optional[date] = None


@dataclass(frozen=True)
class StageOutcome:
    """Effective deadline for the stage that currently applies.

    Attributes:
        effective_deadline: The deadline after any extension.
        stage_label: Human-readable stage name.
        stage_key: Catalog key used to pick stage-specific guidance.
        deadline_type: Display label for the result.
        applied_extension: Marker text when an extension moved the deadline.
        estimated: True when the deadline is a conservative estimate.
    """

    effective_deadline: date
    stage_label: str
    stage_key: str
    deadline_type: str
    applied_extension: Optional[str] = None
    estimated: bool = False


def resolve_generic(reference_date: date, rule: RuleEntry) -> date:
    """Reference date plus the rule's offset in the rule's unit."""
    return apply_offset(reference_date, rule.offset_amount, rule.offset_unit, rule.less_days)


def _shift(start: date, field: str, offset: Callable[[date], date]) -> date:
    """Apply ``offset`` to ``start``, reporting out-of-range results against ``field``."""
    try:
        return offset(start)
    except (OverflowError, ValueError) as exc:
        logger.warning("Deadline from %s %s is beyond the supported date range", field, start.isoformat())
        raise InvalidDate(
            f"{field} is too late to calculate a deadline from: {start.isoformat()}", [field]
        ) from exc


def resolve_stage(validated: ValidatedRequest, rule: RuleEntry) -> StageOutcome:
    """Resolve the applicable stage and its effective deadline."""
    request = validated.request
    if isinstance(request, BenefitsAppealRequest):
        return _resolve_benefits(validated, request, rule)
    if isinstance(request, EmploymentTribunalRequest):
        return _resolve_employment(validated, request, rule)
    if isinstance(request, (HousingRequest, CourtRequest)):
        return StageOutcome(
            effective_deadline=_shift(
                validated.reference_date,
                request.reference_date_field,
                lambda d: resolve_generic(d, rule),
            ),
            stage_label=rule.deadline_type,
            stage_key=STAGE_STANDARD,
            deadline_type=rule.deadline_type,
        )
    raise TypeError(f"Unsupported request type: {type(request).__name__}")


def _resolve_benefits(
    validated: ValidatedRequest, request: BenefitsAppealRequest, rule: RuleEntry
) -> StageOutcome:
    if not request.has_mandatory_reconsideration:
        deadline = _shift(
            validated.reference_date, request.reference_date_field, lambda d: resolve_generic(d, rule)
        )
        label, key, estimated = "Mandatory Reconsideration", STAGE_MANDATORY_RECONSIDERATION, False
    elif validated.stage_date is not None:
        deadline = _shift(
            validated.stage_date,
            "mandatoryReconsiderationDate",
            lambda d: add_calendar_days(d, BENEFITS_STAGES.tribunal_days),
        )
        label, key, estimated = "Tribunal Appeal", STAGE_READY_TO_APPEAL, False
    else:
        deadline = _shift(
            validated.reference_date,
            request.reference_date_field,
            lambda d: add_calendar_days(d, BENEFITS_STAGES.estimated_tribunal_days),
        )
        label, key, estimated = "Tribunal Appeal (estimated)", STAGE_AWAITING_MR_DECISION, True
        logger.info(
            "MR complete without decision date for %s; using %d-day estimate from decision date",
            rule.case_subtype,
            BENEFITS_STAGES.estimated_tribunal_days,
        )

    return StageOutcome(
        effective_deadline=deadline,
        stage_label=label,
        stage_key=key,
        deadline_type=f"{rule.deadline_type} {label}",
        estimated=estimated,
    )


def _resolve_employment(
    validated: ValidatedRequest, request: EmploymentTribunalRequest, rule: RuleEntry
) -> StageOutcome:
    base = _shift(validated.reference_date, request.reference_date_field, lambda d: resolve_generic(d, rule))
    deadline = base
    extension: Optional[str] = None

    certificate = validated.stage_date
    if request.has_contacted_acas and certificate is not None and certificate > base:
        deadline = _shift(
            certificate,
            "acasCertificateDate",
            lambda d: add_calendar_days(d, ACAS_EXTENSION.extension_days),
        )
        extension = ACAS_EXTENSION.marker
        logger.debug("ACAS extension applied: %s -> %s", base.isoformat(), deadline.isoformat())

    return StageOutcome(
        effective_deadline=deadline,
        stage_label=rule.deadline_type,
        stage_key=STAGE_STANDARD,
        deadline_type=rule.deadline_type,
        applied_extension=extension,
    )
