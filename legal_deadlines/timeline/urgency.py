"""Urgency classification from days remaining."""

from ..models.case_types import UrgencyTier
from .rules import DEFAULT_URGENT_THRESHOLD_DAYS


def classify(days_remaining: int, threshold: int = DEFAULT_URGENT_THRESHOLD_DAYS) -> UrgencyTier:
    """Map signed days remaining to a tier.

    ``<= 0`` is Passed, ``<= threshold`` is Urgent, anything later Normal.
    """
    if days_remaining <= 0:
        return UrgencyTier.PASSED
    if days_remaining <= threshold:
        return UrgencyTier.URGENT
    return UrgencyTier.NORMAL


def is_urgent(tier: UrgencyTier) -> bool:
    return tier is not UrgencyTier.NORMAL
