"""Tests for warning and next-step composition."""

from datetime import date

from legal_deadlines.models import (
    BenefitsAppealRequest,
    Domain,
    EmploymentTribunalRequest,
    HousingRequest,
    UrgencyTier,
)
from legal_deadlines.timeline.guidance import (
    ACAS_CONTACT_STEP,
    ACAS_REQUIRED_WARNING,
    ASSESSMENT_PHASE_NOTE,
    POSSESSION_ORDER_NOTE,
    compose_description,
    compose_next_steps,
    compose_warnings,
    situational_notes,
)
from legal_deadlines.timeline.rules import (
    BENEFITS_PROFILE,
    COURT_PROFILE,
    EMPLOYMENT_PROFILE,
    HOUSING_PROFILE,
    STAGE_READY_TO_APPEAL,
    get_rule,
)
from legal_deadlines.timeline.stages import STAGE_STANDARD, StageOutcome


def _outcome(stage_key: str = STAGE_STANDARD, extension=None) -> StageOutcome:
    return StageOutcome(
        effective_deadline=date(2024, 3, 31),
        stage_label="Employment Tribunal Claim",
        stage_key=stage_key,
        deadline_type="Employment Tribunal Claim",
        applied_extension=extension,
    )


class TestWarningOrder:
    def test_passed_warning_comes_first(self):
        warnings = compose_warnings(EMPLOYMENT_PROFILE, UrgencyTier.PASSED, -3)
        assert warnings[0] == EMPLOYMENT_PROFILE.passed_warning
        assert warnings[1:] == (
            "🚨 URGENT: Less than 1 week remaining",
            "⚠️ Limited time remaining - act quickly",
        )

    def test_tiers_in_descending_severity(self):
        warnings = compose_warnings(COURT_PROFILE, UrgencyTier.URGENT, 2)
        assert warnings == (
            "🚨 CRITICAL: Less than 3 days remaining",
            "⚠️ URGENT: Act immediately",
            "Court deadlines are strictly enforced",
        )

    def test_only_applicable_tiers(self):
        warnings = compose_warnings(EMPLOYMENT_PROFILE, UrgencyTier.URGENT, 10)
        assert warnings == ("⚠️ Limited time remaining - act quickly",)

    def test_normal_tier_has_no_urgency_warnings(self):
        assert compose_warnings(EMPLOYMENT_PROFILE, UrgencyTier.NORMAL, 40) == ()

    def test_notes_follow_urgency_and_empties_are_dropped(self):
        warnings = compose_warnings(HOUSING_PROFILE, UrgencyTier.URGENT, 5, ["", POSSESSION_ORDER_NOTE, ""])
        assert warnings == (
            "🚨 URGENT: Seek advice immediately",
            POSSESSION_ORDER_NOTE,
            "Never ignore court papers - always respond",
        )

    def test_benefits_standing_note_precedes_assessment_note(self):
        warnings = compose_warnings(BENEFITS_PROFILE, UrgencyTier.NORMAL, 20, [ASSESSMENT_PHASE_NOTE])
        assert warnings == (
            "Keep your benefits claim going while you appeal",
            ASSESSMENT_PHASE_NOTE,
        )

    def test_deterministic(self):
        first = compose_warnings(COURT_PROFILE, UrgencyTier.PASSED, 0, ["note"])
        second = compose_warnings(COURT_PROFILE, UrgencyTier.PASSED, 0, ["note"])
        assert first == second


class TestSituationalNotes:
    def test_acas_not_contacted(self):
        request = EmploymentTribunalRequest(event_date="2024-01-01", event_type="dismissal")
        assert situational_notes(request, _outcome()) == [ACAS_REQUIRED_WARNING]

    def test_extension_marker_included(self):
        request = EmploymentTribunalRequest(
            event_date="2024-01-01", event_type="dismissal", has_contacted_acas=True
        )
        notes = situational_notes(request, _outcome(extension="Extended by ACAS Early Conciliation period"))
        assert notes == ["Extended by ACAS Early Conciliation period"]

    def test_assessment_phase_only_for_pip_and_esa(self):
        pip = BenefitsAppealRequest(decision_date="2024-01-01", benefit_type="pip")
        uc = BenefitsAppealRequest(decision_date="2024-01-01", benefit_type="universal_credit")
        assert situational_notes(pip, _outcome()) == [ASSESSMENT_PHASE_NOTE]
        assert situational_notes(uc, _outcome()) == []

    def test_section_notices_get_possession_note(self):
        s8 = HousingRequest(notice_date="2024-01-01", notice_type="section_8")
        rent = HousingRequest(notice_date="2024-01-01", notice_type="rent_increase")
        assert situational_notes(s8, _outcome()) == [POSSESSION_ORDER_NOTE]
        assert situational_notes(rent, _outcome()) == []


class TestNextSteps:
    def test_acas_step_prepended_when_not_contacted(self):
        request = EmploymentTribunalRequest(event_date="2024-01-01", event_type="dismissal")
        rule = get_rule(Domain.EMPLOYMENT_TRIBUNAL, "dismissal")
        steps = compose_next_steps(rule, _outcome(), request)
        assert steps[0] == ACAS_CONTACT_STEP
        assert steps[1:] == rule.next_steps

    def test_benefits_template_follows_stage(self):
        request = BenefitsAppealRequest(decision_date="2024-01-01", benefit_type="pip")
        rule = get_rule(Domain.BENEFITS_APPEAL, "pip")
        mr_steps = compose_next_steps(rule, _outcome("needs_mandatory_reconsideration"), request)
        tribunal_steps = compose_next_steps(rule, _outcome(STAGE_READY_TO_APPEAL), request)
        assert mr_steps[0] == "Write to DWP requesting a Mandatory Reconsideration"
        assert tribunal_steps[0] == "Complete form SSCS1 to appeal to the tribunal"


class TestDescription:
    def test_employment_description_is_filled_in(self):
        rule = get_rule(Domain.EMPLOYMENT_TRIBUNAL, "unpaid_wages")
        text = compose_description(rule, _outcome(), date(2024, 1, 1))
        assert text == (
            "Based on an event date of Monday, 1 January 2024, the deadline for your "
            "unpaid wages claim is 3 months minus 1 day from that date."
        )

    def test_stage_description_overrides_default(self):
        rule = get_rule(Domain.BENEFITS_APPEAL, "esa")
        text = compose_description(rule, _outcome(STAGE_READY_TO_APPEAL), date(2024, 1, 1))
        assert text.startswith("You can now appeal to the First-tier Tribunal")
