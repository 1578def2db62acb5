"""Property validation core — presence and regex checks with hex-dump diagnostics.

Usage:
    from propguard.validators import PropertyValidator, RuleOptions, fixed

    validator = PropertyValidator(fixed("1.4"), RuleOptions(property_name="java.version", regex=r"1\\.5.*"))
    outcome = validator.validate()
    if not outcome.passed:
        print(outcome.message)
        print(outcome.diagnostic_dump)
"""

from propguard.validators.engine import PropertyRule, ValidationEngine
from propguard.validators.exceptions import (
    DiagnosticDetail,
    InvalidConfigurationError,
    PropguardError,
    RuleViolationError,
)
from propguard.validators.hexdump import hex_dump
from propguard.validators.models import (
    FailureKind,
    RuleOptions,
    ValidationOutcome,
    ValidationReport,
    ValidationRequest,
)
from propguard.validators.property_validator import PropertyValidator, validate_request
from propguard.validators.resolvers import ValueResolver, fixed, from_mapping

__all__ = [
    "PropertyValidator",
    "validate_request",
    "PropertyRule",
    "ValidationEngine",
    "RuleOptions",
    "ValidationRequest",
    "ValidationOutcome",
    "ValidationReport",
    "FailureKind",
    "hex_dump",
    "ValueResolver",
    "fixed",
    "from_mapping",
    "PropguardError",
    "InvalidConfigurationError",
    "RuleViolationError",
    "DiagnosticDetail",
]
