"""
Assertion result and error models.

This module defines the verdict a matcher produces and the single
exception type the engine raises, tagged with the category of problem.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rich.pretty import pretty_repr

from ..settings import get_settings

NEGATION_PREFIX = "should not "

class _Unset:
    """Marks "no value supplied" where None is a legitimate value."""

    def __repr__(self) -> str:
        return "<unset>"


UNSET: Any = _Unset()


class ErrorKind(str, Enum):
    """Category of an ExpectationError."""
    ASSERTION = "assertion"  # the matcher verdict did not hold
    USAGE = "usage"  # malformed test: unknown matcher, misapplied modifier


@dataclass
class MatcherResult:
    """
    Verdict of a single matcher evaluation.

    Attributes:
        passed: Whether the matcher's condition holds for the subject
        message: Human-readable description, used verbatim in failures and
            prefixed with "should not " when the assertion was negated
        expected: What the matcher compared against (for display)
        actual: What was actually found (for display)
    """
    passed: bool
    message: str = ""
    expected: Any = UNSET
    actual: Any = UNSET

    @classmethod
    def passed_result(cls, message: str, expected: Any = UNSET, actual: Any = UNSET) -> MatcherResult:
        """Create a passing result."""
        return cls(passed=True, message=message, expected=expected, actual=actual)

    @classmethod
    def failed_result(cls, message: str, expected: Any = UNSET, actual: Any = UNSET) -> MatcherResult:
        """Create a failing result."""
        return cls(passed=False, message=message, expected=expected, actual=actual)

    @classmethod
    def coerce(cls, raw: Any, matcher_name: str) -> MatcherResult:
        """
        Normalise whatever a matcher returned into a MatcherResult.

        Accepts a MatcherResult, a ``(passed, message)`` tuple, or a mapping
        with ``pass``/``passed`` and ``message`` keys.
        """
        if isinstance(raw, MatcherResult):
            return raw
        if isinstance(raw, tuple) and len(raw) == 2:
            passed, message = raw
            return cls(passed=bool(passed), message=str(message))
        if isinstance(raw, dict):
            if "pass" in raw:
                passed = raw["pass"]
            elif "passed" in raw:
                passed = raw["passed"]
            else:
                raise ExpectationError.usage(
                    f"matcher {matcher_name} returned a mapping without a 'pass' key"
                )
            return cls(passed=bool(passed), message=str(raw.get("message", "")))
        raise ExpectationError.usage(
            f"matcher {matcher_name} returned {type(raw).__name__}, expected a MatcherResult"
        )


class ExpectationError(Exception):
    """
    Raised when an expectation cannot be satisfied.

    A single exception type is used for every problem the engine reports;
    ``kind`` tells a broken expectation (``ErrorKind.ASSERTION``) apart
    from a malformed test (``ErrorKind.USAGE``).
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.ASSERTION,
        expected: Any = UNSET,
        actual: Any = UNSET,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.expected = expected
        self.actual = actual

    @classmethod
    def failure(cls, message: str, expected: Any = UNSET, actual: Any = UNSET) -> ExpectationError:
        """Create an assertion failure."""
        return cls(message, ErrorKind.ASSERTION, expected=expected, actual=actual)

    @classmethod
    def usage(cls, message: str) -> ExpectationError:
        """Create a usage error (the test itself is malformed)."""
        return cls(message, ErrorKind.USAGE)

    @property
    def is_assertion_failure(self) -> bool:
        return self.kind == ErrorKind.ASSERTION

    @property
    def is_usage_error(self) -> bool:
        return self.kind == ErrorKind.USAGE

    def __str__(self) -> str:
        """Format as a human-readable string."""
        lines = [self.message]

        if self.expected is not UNSET:
            lines.append(f"   Expected: {format_value(self.expected)}")

        if self.actual is not UNSET:
            lines.append(f"   Actual:   {format_value(self.actual)}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ExpectationError({self.message!r}, kind={self.kind.value!r})"


def format_value(value: Any, max_length: int | None = None) -> str:
    """Format a value for display, truncating if too long."""
    settings = get_settings()
    if max_length is None:
        max_length = settings.max_value_length

    formatted = pretty_repr(value, max_width=10_000, max_depth=settings.max_depth)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def negate_message(message: str) -> str:
    """Render a matcher message for an assertion that should not have held."""
    return NEGATION_PREFIX + message
