"""Property Validator — presence and full-string regex checks on one resolved value.

The validator is parameterized by a resolver (where the value comes from) and
RuleOptions (what it must satisfy). Different property sources are different
resolvers paired with the same validator, never subclasses.
"""

from typing import Any, Optional

import structlog

from propguard.config import get_settings
from propguard.validators.exceptions import InvalidConfigurationError
from propguard.validators.hexdump import hex_dump
from propguard.validators.models import (
    FailureKind,
    RuleOptions,
    ValidationOutcome,
    ValidationRequest,
    compile_pattern,
)
from propguard.validators.resolvers import ValueResolver, fixed

logger = structlog.get_logger()


def default_missing_message(subject_label: str, property_name: str) -> str:
    return f'{subject_label} "{property_name}" is required for this build.'


def default_mismatch_message(subject_label: str, property_name: str, value: str, regex: str) -> str:
    return (
        f'{subject_label} "{property_name}" evaluates to "{value}".  '
        f'This does not match the regular expression "{regex}"'
    )


def _check_encoding(encoding: str) -> str:
    """Reject names that are not text encodings (unknown, or bytes-to-bytes like rot13)."""
    try:
        "".encode(encoding)
    except LookupError as e:
        raise InvalidConfigurationError(encoding, str(e), setting="value encoding") from e
    return encoding


def _as_text(resolved: Any) -> Optional[str]:
    """Normalize a resolver result: None and "" are absent, anything else is text."""
    if resolved is None:
        return None
    text = resolved if isinstance(resolved, str) else str(resolved)
    return text or None


class PropertyValidator:
    """Validates the value produced by ``resolver`` against ``options``.

    Contract:
        - The regex and the dump encoding are checked here; a bad one raises
          InvalidConfigurationError before any value is resolved
        - validate() calls the resolver exactly once and lets its errors propagate
        - Absence is checked before the pattern
        - The pattern must match the whole value (re.fullmatch)

    Instances are reusable across values. The only state kept between calls
    is the legacy cached mismatch message when
    ``options.cache_default_message`` is set.
    """

    def __init__(self, resolver: ValueResolver, options: RuleOptions):
        self.resolver = resolver
        self.options = options
        self._pattern = compile_pattern(options.regex)
        self._encoding = _check_encoding(get_settings().VALUE_ENCODING)
        self._cached_regex_message: Optional[str] = None

    @property
    def name(self) -> str:
        return self.options.property_name

    def validate(self) -> ValidationOutcome:
        """Resolve the value and check it."""
        return self.check(_as_text(self.resolver()))

    def check(self, value: Optional[str]) -> ValidationOutcome:
        """Check an already-resolved value against the configured constraints."""
        opts = self.options

        if not value:
            if opts.missing_message is not None:
                message = opts.missing_message
            else:
                message = default_missing_message(opts.subject_label, opts.property_name)
            logger.info(
                "property_validation_failed",
                property=opts.property_name,
                kind=FailureKind.MISSING_VALUE.value,
            )
            return ValidationOutcome.failure(
                FailureKind.MISSING_VALUE,
                property_name=opts.property_name,
                message=message,
            )

        if self._pattern is not None and self._pattern.fullmatch(value) is None:
            dump = hex_dump(value.encode(self._encoding, errors="backslashreplace"))
            logger.info(
                "property_validation_failed",
                property=opts.property_name,
                kind=FailureKind.PATTERN_MISMATCH.value,
                value=value,
                regex=opts.regex,
            )
            return ValidationOutcome.failure(
                FailureKind.PATTERN_MISMATCH,
                property_name=opts.property_name,
                message=self._mismatch_message(value),
                value=value,
                diagnostic_dump=dump,
            )

        logger.debug("property_validated", property=opts.property_name)
        return ValidationOutcome.ok(opts.property_name, value)

    def _mismatch_message(self, value: str) -> str:
        opts = self.options
        if opts.regex_message is not None:
            return opts.regex_message
        if not opts.cache_default_message:
            return default_mismatch_message(opts.subject_label, opts.property_name, value, opts.regex)
        # Legacy: the first value's message is reused even if later values differ
        if self._cached_regex_message is None:
            self._cached_regex_message = default_mismatch_message(
                opts.subject_label, opts.property_name, value, opts.regex
            )
        return self._cached_regex_message


def validate_request(request: ValidationRequest) -> ValidationOutcome:
    """Validate a self-contained request (value plus constraints)."""
    return PropertyValidator(fixed(request.value), request.options).validate()
