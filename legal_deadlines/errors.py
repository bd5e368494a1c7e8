"""Error taxonomy for the deadline engine.

Every failure is raised synchronously to the caller; nothing is defaulted.
"""

from __future__ import annotations

from typing import Iterable


class DeadlineError(Exception):
    """Base class for all deadline engine errors."""


class ValidationError(DeadlineError):
    """Request failed validation.

    Attributes:
        fields: Names of the offending request fields (camelCase, as sent
            by the caller).
    """

    def __init__(self, message: str, fields: Iterable[str] = ()):
        self.fields: tuple[str, ...] = tuple(fields)
        self.message = message
        if self.fields:
            message = f"{message} (fields: {', '.join(self.fields)})"
        super().__init__(message)


class InvalidDate(ValidationError):
    """A date could not be parsed as an ISO-8601 calendar date."""


class InconsistentStageInput(ValidationError):
    """A dependent date and its governing flag disagree."""


class UnknownCaseSubtype(DeadlineError):
    """No rule exists for the (domain, case subtype) pair."""

    def __init__(self, domain: str, case_subtype: str):
        self.domain = domain
        self.case_subtype = case_subtype
        super().__init__(f"No deadline rule for {domain}/{case_subtype}")
