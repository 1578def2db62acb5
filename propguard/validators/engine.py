"""Validation Engine — runs a set of property rules and produces a report.

Usage:
    engine = ValidationEngine([
        PropertyRule.create(fixed(detected_version), property_name="java.version", regex=r"1\\.8.*"),
    ])
    report = engine.validate()
    if not report.passed:
        report.raise_for_failure()
"""

import time
from typing import Optional

import structlog

from propguard.validators.models import RuleOptions, ValidationOutcome, ValidationReport
from propguard.validators.property_validator import PropertyValidator
from propguard.validators.resolvers import ValueResolver

logger = structlog.get_logger()


class PropertyRule:
    """A named pairing of a resolver with the options it is validated against."""

    def __init__(self, resolver: ValueResolver, options: RuleOptions, name: Optional[str] = None):
        self.validator = PropertyValidator(resolver, options)
        self.name = name or self.validator.name

    @classmethod
    def create(cls, resolver: ValueResolver, name: Optional[str] = None, **options) -> "PropertyRule":
        """Build a rule from keyword options, e.g. ``property_name=..., regex=...``."""
        return cls(resolver, RuleOptions(**options), name=name)

    def validate(self) -> ValidationOutcome:
        return self.validator.validate()


class ValidationEngine:
    """Runs property rules in order and aggregates their outcomes.

    Every rule runs even when an earlier one fails. Resolver errors are not
    caught: they abort the run and reach the caller unchanged.
    """

    def __init__(self, rules: Optional[list[PropertyRule]] = None):
        self.rules = list(rules) if rules else []

    def validate(self) -> ValidationReport:
        start_time = time.perf_counter()

        outcomes: list[ValidationOutcome] = []
        rule_timings: dict[str, float] = {}

        for rule in self.rules:
            r_start = time.perf_counter()
            try:
                outcomes.append(rule.validate())
            finally:
                rule_timings[rule.name] = round((time.perf_counter() - r_start) * 1000, 2)

        report = ValidationReport.build(outcomes)

        logger.info(
            "validation_complete",
            passed=report.passed,
            summary=report.summary,
            total_rules=len(self.rules),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            rule_timings=rule_timings,
        )

        return report

    def add_rule(self, rule: PropertyRule) -> None:
        """Append a rule to the run order."""
        self.rules.append(rule)

    def remove_rule(self, rule_name: str) -> None:
        """Remove every rule with the given name."""
        self.rules = [r for r in self.rules if r.name != rule_name]
