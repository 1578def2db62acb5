"""Validation models — rule options, requests, outcomes, and report structure.

All validation is deterministic: same input → same outcome, no hidden state.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from propguard.config import get_settings
from propguard.validators.exceptions import (
    DiagnosticDetail,
    InvalidConfigurationError,
    RuleViolationError,
)


class FailureKind(str, Enum):
    """Why a property failed validation."""

    MISSING_VALUE = "MISSING_VALUE"        # Resolved to None or ""
    PATTERN_MISMATCH = "PATTERN_MISMATCH"  # Present but not a full-string regex match


def compile_pattern(regex: Optional[str]) -> Optional[re.Pattern]:
    """Compile a caller-supplied pattern, rejecting malformed ones up front."""
    if regex is None:
        return None
    try:
        return re.compile(regex)
    except re.error as e:
        raise InvalidConfigurationError(regex, str(e)) from e


def _default_subject_label() -> str:
    return get_settings().DEFAULT_SUBJECT_LABEL


class RuleOptions(BaseModel):
    """Constraints applied to one property. Presence is always checked."""

    model_config = ConfigDict(frozen=True)

    property_name: str = Field(description="Name of the property, used in default messages")
    subject_label: str = Field(
        default_factory=_default_subject_label,
        description="What is being validated, e.g. 'Property' or 'JDK Version'",
    )
    regex: Optional[str] = Field(default=None, description="Full-string pattern; None accepts any value")
    missing_message: Optional[str] = None  # Overrides the default "is required" message
    regex_message: Optional[str] = None    # Overrides the default mismatch message
    cache_default_message: bool = Field(
        default_factory=lambda: get_settings().CACHE_DEFAULT_MESSAGE,
        description="Legacy: reuse the first computed mismatch message for later calls",
    )


class ValidationRequest(RuleOptions):
    """A single value plus the constraints to check it against."""

    value: Optional[str] = None

    def model_post_init(self, __context) -> None:
        # Reject malformed patterns at construction, not at validation time
        compile_pattern(self.regex)

    @property
    def options(self) -> RuleOptions:
        return RuleOptions(**self.model_dump(exclude={"value"}))


class ValidationOutcome(BaseModel):
    """Result of one validation call: a pass, or exactly one failure."""

    model_config = ConfigDict(frozen=True)

    passed: bool
    property_name: str
    value: Optional[str] = None
    kind: Optional[FailureKind] = None
    message: Optional[str] = None
    diagnostic_dump: Optional[str] = Field(
        default=None,
        description="Hex dump of the value's bytes, attached to pattern mismatches",
    )

    @classmethod
    def ok(cls, property_name: str, value: Optional[str]) -> "ValidationOutcome":
        return cls(passed=True, property_name=property_name, value=value)

    @classmethod
    def failure(
        cls,
        kind: FailureKind,
        property_name: str,
        message: str,
        value: Optional[str] = None,
        diagnostic_dump: Optional[str] = None,
    ) -> "ValidationOutcome":
        return cls(
            passed=False,
            property_name=property_name,
            value=value,
            kind=kind,
            message=message,
            diagnostic_dump=diagnostic_dump,
        )

    def raise_for_failure(self) -> None:
        """Raise RuleViolationError if this outcome is a failure.

        The hex dump, when present, is chained as the exception's cause.
        """
        if self.passed:
            return
        error = RuleViolationError(self)
        if self.diagnostic_dump is not None:
            raise error from DiagnosticDetail(self.diagnostic_dump)
        raise error


class ValidationReport(BaseModel):
    """Aggregated outcomes of a validation engine run."""

    passed: bool
    outcomes: list[ValidationOutcome] = Field(default_factory=list)
    summary: dict = Field(
        description="Count of failures by kind",
        default_factory=lambda: {kind.value: 0 for kind in FailureKind},
    )
    verdict: str = ""

    @property
    def failures(self) -> list[ValidationOutcome]:
        return [o for o in self.outcomes if not o.passed]

    @classmethod
    def build(cls, outcomes: list[ValidationOutcome]) -> "ValidationReport":
        """Build a report from outcomes in rule order."""
        summary = {kind.value: 0 for kind in FailureKind}
        for outcome in outcomes:
            if outcome.kind is not None:
                summary[outcome.kind.value] += 1

        failed = sum(summary.values())
        if failed == 0:
            verdict = f"PASS — {len(outcomes)} property rule(s) satisfied."
        else:
            verdict = f"FAIL — {failed} of {len(outcomes)} property rule(s) violated."

        return cls(passed=failed == 0, outcomes=outcomes, summary=summary, verdict=verdict)

    def raise_for_failure(self) -> None:
        """Raise for the first failed outcome, if any."""
        for outcome in self.outcomes:
            outcome.raise_for_failure()
