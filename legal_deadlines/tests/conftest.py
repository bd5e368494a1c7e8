"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from legal_deadlines.timeline import DeadlineCalculator
from legal_deadlines.timeline.dates import fixed_clock

TODAY = date(2024, 1, 10)


@pytest.fixture
def today() -> date:
    """Fixed "today" used across calculator tests (a Wednesday)."""
    return TODAY


@pytest.fixture
def calculator(today) -> DeadlineCalculator:
    return DeadlineCalculator(clock=fixed_clock(today))


@pytest.fixture
def employment_payload():
    return {
        "domain": "employment_tribunal",
        "eventDate": "2024-01-01",
        "eventType": "dismissal",
        "hasContactedAcas": True,
        "acasCertificateDate": "2024-04-15",
    }


@pytest.fixture
def benefits_payload():
    return {
        "domain": "benefits_appeal",
        "decisionDate": "2024-01-01",
        "benefitType": "pip",
        "hasMandatoryReconsideration": False,
    }
