"""propguard command line — validate one value against presence and regex constraints.

Exit codes:
    0  value satisfies the rule
    1  validation failed (message and hex dump on stderr)
    2  invalid configuration or usage
"""

import argparse
import logging
import sys
from typing import Optional

import structlog

from propguard.config import get_settings
from propguard.validators import (
    InvalidConfigurationError,
    PropertyValidator,
    RuleOptions,
    fixed,
)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging to stderr. Safe to call more than once."""
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("propguard")
    except PackageNotFoundError:  # pragma: no cover – not installed as a distribution
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propguard",
        description="Check that a property value is present and fully matches a regular expression.",
    )
    parser.add_argument("value", nargs="?", default=None, help="value to validate; omit to signal an absent value")
    parser.add_argument("--regex", help="pattern the whole value must match")
    parser.add_argument("--property-name", default="value", help="property name used in default messages")
    parser.add_argument("--subject-label", default=None, help="what is being validated, e.g. 'JDK Version'")
    parser.add_argument("--missing-message", default=None, help="message when the value is absent")
    parser.add_argument("--regex-message", default=None, help="message when the value does not match")
    parser.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def cli(argv: Optional[list[str]] = None) -> int:
    """Entry-point for the ``propguard`` command. Returns the exit code."""
    args = build_parser().parse_args(argv)
    configure_logging("warning" if args.quiet else None)

    options = {
        "property_name": args.property_name,
        "regex": args.regex,
        "missing_message": args.missing_message,
        "regex_message": args.regex_message,
    }
    if args.subject_label is not None:
        options["subject_label"] = args.subject_label

    try:
        validator = PropertyValidator(fixed(args.value), RuleOptions(**options))
    except InvalidConfigurationError as e:
        print(f"propguard: {e}", file=sys.stderr)
        return EXIT_CONFIG

    outcome = validator.validate()
    if outcome.passed:
        return EXIT_OK

    print(outcome.message, file=sys.stderr)
    if outcome.diagnostic_dump:
        sys.stderr.write(outcome.diagnostic_dump)
    return EXIT_FAILED


def main() -> None:
    sys.exit(cli())
