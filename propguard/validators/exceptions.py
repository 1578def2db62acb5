"""Exceptions raised by the validation core.

Validation failures are returned as outcomes, not raised. These exceptions
cover configuration mistakes and callers that prefer raising over inspecting.
"""


class PropguardError(Exception):
    """Base class for all propguard errors."""


class InvalidConfigurationError(PropguardError):
    """A rule was configured with an unusable setting, e.g. a regex that does not compile."""

    def __init__(self, value: str, reason: str, setting: str = "regular expression"):
        self.value = value
        self.reason = reason
        self.setting = setting
        super().__init__(f"Invalid {setting} \"{value}\": {reason}")


class DiagnosticDetail(Exception):
    """Carries supplementary diagnostic text, e.g. a hex dump, as an exception cause."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class RuleViolationError(PropguardError):
    """A failed validation outcome surfaced as an exception."""

    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(outcome.message)
