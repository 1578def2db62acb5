import pytest
from structlog.testing import capture_logs

from propguard.validators import (
    FailureKind,
    PropertyRule,
    RuleOptions,
    RuleViolationError,
    ValidationEngine,
    fixed,
    from_mapping,
)


@pytest.fixture
def environment() -> dict:
    return {"JAVA_HOME": "/opt/jdk", "java.version": "1.4"}


@pytest.fixture
def engine(environment) -> ValidationEngine:
    return ValidationEngine([
        PropertyRule.create(from_mapping(environment, "JAVA_HOME"), property_name="JAVA_HOME"),
        PropertyRule.create(
            from_mapping(environment, "java.version"),
            subject_label="JDK Version",
            property_name="java.version",
            regex=r"1\.5.*",
        ),
        PropertyRule.create(from_mapping(environment, "M2_HOME"), property_name="M2_HOME"),
    ])


def test_all_rules_run_and_failures_counted(engine):
    report = engine.validate()

    assert not report.passed
    assert [o.property_name for o in report.outcomes] == ["JAVA_HOME", "java.version", "M2_HOME"]
    assert report.summary == {"MISSING_VALUE": 1, "PATTERN_MISMATCH": 1}
    assert [o.kind for o in report.failures] == [FailureKind.PATTERN_MISMATCH, FailureKind.MISSING_VALUE]
    assert report.verdict.startswith("FAIL — 2 of 3")


def test_passing_report(environment, engine):
    environment["java.version"] = "1.5.0"
    engine.remove_rule("M2_HOME")

    report = engine.validate()

    assert report.passed
    assert report.failures == []
    assert report.verdict.startswith("PASS")


def test_empty_engine_passes():
    report = ValidationEngine().validate()

    assert report.passed
    assert report.outcomes == []


def test_add_rule_appends():
    engine = ValidationEngine()
    engine.add_rule(PropertyRule(fixed("x"), RuleOptions(property_name="a"), name="first"))
    engine.add_rule(PropertyRule.create(fixed(None), property_name="b"))

    assert [r.name for r in engine.rules] == ["first", "b"]
    assert engine.rules[1].validator.name == "b"
    assert engine.validate().summary["MISSING_VALUE"] == 1


def test_report_raises_first_failure(engine):
    report = engine.validate()

    with pytest.raises(RuleViolationError) as exc_info:
        report.raise_for_failure()

    assert exc_info.value.outcome.property_name == "java.version"


def test_resolver_error_aborts_run():
    def broken():
        raise RuntimeError("source unavailable")

    engine = ValidationEngine([
        PropertyRule.create(fixed("ok"), property_name="a"),
        PropertyRule.create(broken, property_name="b"),
    ])

    with pytest.raises(RuntimeError, match="source unavailable"):
        engine.validate()


def test_run_is_logged(engine):
    with capture_logs() as logs:
        engine.validate()

    complete = [e for e in logs if e["event"] == "validation_complete"]
    assert len(complete) == 1
    assert complete[0]["passed"] is False
    assert complete[0]["total_rules"] == 3
    assert set(complete[0]["rule_timings"]) == {"JAVA_HOME", "java.version", "M2_HOME"}
