"""Deadline calculator.

Validates a request, then runs catalog lookup -> stage resolution -> days
remaining -> urgency -> guidance and assembles a DeadlineResult.

"Today" is read once per calculation, from the ``today`` argument or the
injected clock, so days remaining and urgency always agree.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Union

import pydantic
from pydantic import TypeAdapter

from ..errors import InconsistentStageInput, InvalidDate, ValidationError
from ..models.deadline_request import (
    BenefitsAppealRequest,
    CourtRequest,
    DeadlineRequest,
    EmploymentTribunalRequest,
    HousingRequest,
    request_domain,
)
from ..models.deadline_result import DeadlineResult
from .dates import Clock, days_until, format_date, parse_iso_date, system_clock
from .guidance import compose_description, compose_next_steps, compose_warnings, situational_notes
from .rules import get_domain_profile, get_rule
from .stages import AnyRequest, ValidatedRequest, resolve_stage
from .urgency import classify, is_urgent

logger = logging.getLogger(__name__)

_REQUEST_ADAPTER: TypeAdapter = TypeAdapter(DeadlineRequest)


def _from_pydantic_error(exc: pydantic.ValidationError) -> ValidationError:
    fields = []
    for err in exc.errors():
        loc = [part for part in err.get("loc", ()) if isinstance(part, str)]
        fields.append(loc[-1] if loc else "domain")
    return ValidationError("Invalid deadline request", dict.fromkeys(fields))


def parse_request(payload: Mapping[str, Any]) -> AnyRequest:
    """Build the domain request model from a camelCase or snake_case dict.

    Raises:
        ValidationError: Naming the fields pydantic rejected.
    """
    try:
        return _REQUEST_ADAPTER.validate_python(dict(payload))
    except pydantic.ValidationError as exc:
        raise _from_pydantic_error(exc) from exc


def _build(model: type, **fields: Any) -> AnyRequest:
    try:
        return model(**fields)
    except pydantic.ValidationError as exc:
        raise _from_pydantic_error(exc) from exc


class DeadlineCalculator:
    """Computes deadlines for every supported domain.

    Holds no per-request state; one instance can serve any number of
    concurrent calls.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or system_clock

    def validate(self, request: AnyRequest) -> ValidatedRequest:
        """Parse dates and check stage flags.

        Raises:
            InvalidDate: If any date is unparsable (all bad fields listed).
            InconsistentStageInput: If a dependent date and its flag disagree.
        """
        bad_dates: list[str] = []
        messages: list[str] = []

        def _parse(value: Any, field: str, required: bool) -> Optional[date]:
            if value is None and not required:
                return None
            try:
                return parse_iso_date(value, field)
            except InvalidDate as exc:
                bad_dates.extend(exc.fields)
                messages.append(exc.message)
                return None

        reference = _parse(request.reference_date, request.reference_date_field, required=True)

        stage_date: Optional[date] = None
        if isinstance(request, EmploymentTribunalRequest):
            stage_date = _parse(request.acas_certificate_date, "acasCertificateDate", required=False)
        elif isinstance(request, BenefitsAppealRequest):
            stage_date = _parse(
                request.mandatory_reconsideration_date, "mandatoryReconsiderationDate", required=False
            )

        if bad_dates:
            logger.warning("Rejected %s request: invalid date(s) %s", request.domain, bad_dates)
            raise InvalidDate("; ".join(messages), bad_dates)

        self._check_stage_flags(request, reference, stage_date)
        return ValidatedRequest(request=request, reference_date=reference, stage_date=stage_date)

    @staticmethod
    def _check_stage_flags(request: AnyRequest, reference: date, stage_date: Optional[date]) -> None:
        error: Optional[InconsistentStageInput] = None
        if isinstance(request, EmploymentTribunalRequest):
            if stage_date is not None and not request.has_contacted_acas:
                error = InconsistentStageInput(
                    "acasCertificateDate given but hasContactedAcas is false",
                    ["acasCertificateDate", "hasContactedAcas"],
                )
        elif isinstance(request, BenefitsAppealRequest):
            if stage_date is not None and not request.has_mandatory_reconsideration:
                error = InconsistentStageInput(
                    "mandatoryReconsiderationDate given but hasMandatoryReconsideration is false",
                    ["mandatoryReconsiderationDate", "hasMandatoryReconsideration"],
                )
            elif stage_date is not None and stage_date < reference:
                error = InconsistentStageInput(
                    "mandatoryReconsiderationDate is before decisionDate",
                    ["mandatoryReconsiderationDate", "decisionDate"],
                )
        if error is not None:
            logger.warning("Rejected %s request: %s", request.domain, error)
            raise error

    def calculate(
        self,
        request: Union[AnyRequest, Mapping[str, Any]],
        today: Optional[date] = None,
    ) -> DeadlineResult:
        """Calculate the deadline for a request.

        Args:
            request: A domain request model, or a dict with a ``domain`` key.
            today: "Now" for days remaining. Defaults to the injected clock.

        Returns:
            A new DeadlineResult.
        """
        if today is None:
            today = self._clock()
        if isinstance(request, Mapping):
            request = parse_request(request)

        validated = self.validate(request)
        domain = request_domain(request)

        rule = get_rule(domain, request.case_subtype)
        outcome = resolve_stage(validated, rule)
        remaining = days_until(outcome.effective_deadline, today)
        tier = classify(remaining, rule.urgent_threshold_days)

        warnings = compose_warnings(
            get_domain_profile(domain),
            tier,
            remaining,
            situational_notes(request, outcome),
        )

        result = DeadlineResult(
            deadline_type=outcome.deadline_type,
            calculated_deadline=format_date(outcome.effective_deadline),
            deadline_date=outcome.effective_deadline,
            days_remaining=remaining,
            is_urgent=is_urgent(tier),
            urgency=tier,
            stage=outcome.stage_label,
            extension=outcome.applied_extension,
            description=compose_description(rule, outcome, validated.reference_date),
            warnings=warnings,
            next_steps=compose_next_steps(rule, outcome, request),
            relevant_rules=rule.relevant_rules,
        )
        logger.debug(
            "%s/%s -> %s (%d days, %s)",
            domain.value,
            rule.case_subtype,
            outcome.effective_deadline.isoformat(),
            remaining,
            tier.value,
        )
        return result


_DEFAULT_CALCULATOR = DeadlineCalculator()


def _calculator(clock: Optional[Clock]) -> DeadlineCalculator:
    return DeadlineCalculator(clock) if clock is not None else _DEFAULT_CALCULATOR


def calculate_employment_tribunal_deadline(
    event_date: Union[str, date],
    event_type: str,
    has_contacted_acas: bool = False,
    acas_certificate_date: Optional[Union[str, date]] = None,
    today: Optional[date] = None,
    clock: Optional[Clock] = None,
) -> DeadlineResult:
    """Employment Tribunal claim deadline (3 months minus 1 day by default)."""
    request = _build(
        EmploymentTribunalRequest,
        event_date=event_date,
        event_type=event_type,
        has_contacted_acas=has_contacted_acas,
        acas_certificate_date=acas_certificate_date,
    )
    return _calculator(clock).calculate(request, today=today)


def calculate_benefits_appeal_deadline(
    decision_date: Union[str, date],
    benefit_type: str,
    has_mandatory_reconsideration: bool = False,
    mandatory_reconsideration_date: Optional[Union[str, date]] = None,
    today: Optional[date] = None,
    clock: Optional[Clock] = None,
) -> DeadlineResult:
    """Mandatory Reconsideration or tribunal appeal deadline for a benefits decision."""
    request = _build(
        BenefitsAppealRequest,
        decision_date=decision_date,
        benefit_type=benefit_type,
        has_mandatory_reconsideration=has_mandatory_reconsideration,
        mandatory_reconsideration_date=mandatory_reconsideration_date,
    )
    return _calculator(clock).calculate(request, today=today)


def calculate_housing_deadline(
    notice_date: Union[str, date],
    notice_type: str,
    tenancy_type: Optional[str] = None,
    additional_info: Optional[str] = None,
    today: Optional[date] = None,
    clock: Optional[Clock] = None,
) -> DeadlineResult:
    """Eviction notice periods and housing response deadlines."""
    request = _build(
        HousingRequest,
        notice_date=notice_date,
        notice_type=notice_type,
        tenancy_type=tenancy_type,
        additional_info=additional_info,
    )
    return _calculator(clock).calculate(request, today=today)


def calculate_court_deadline(
    relevant_date: Union[str, date],
    deadline_type: str,
    today: Optional[date] = None,
    clock: Optional[Clock] = None,
) -> DeadlineResult:
    """General court and tribunal deadlines."""
    request = _build(CourtRequest, relevant_date=relevant_date, deadline_type=deadline_type)
    return _calculator(clock).calculate(request, today=today)
