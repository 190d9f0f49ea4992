"""Exception matcher."""

from __future__ import annotations

import re
from typing import Any

from ..assertions.models import UNSET, ExpectationError, MatcherResult, format_value
from ..assertions.registry import register_matcher


@register_matcher("to_throw")
def to_throw(subject: Any, expected: Any = UNSET) -> MatcherResult:
    """
    Check that a callable raises, or that an exception was produced.

    The subject is either a zero-argument callable, which is invoked, or an
    exception instance (what ``rejects`` hands to matchers).

    ``expected`` narrows the check:
    - str: substring of the exception message
    - compiled regex: searched in the exception message
    - exception class: isinstance check
    """
    if isinstance(subject, BaseException):
        error: BaseException | None = subject
    elif callable(subject):
        error = None
        try:
            subject()
        except Exception as e:
            error = e
    else:
        raise ExpectationError.usage(
            f"to_throw: expected a callable or an exception, got {type(subject).__name__}"
        )

    if error is None:
        description = "to throw" if expected is UNSET else f"to throw {_describe(expected)}"
        return MatcherResult.failed_result(f"expected function {description}, but it did not throw")

    if expected is UNSET:
        return MatcherResult.passed_result(
            f"expected function to throw, threw {_describe_error(error)}",
            actual=error,
        )

    return MatcherResult(
        _error_matches(error, expected),
        f"expected function to throw {_describe(expected)}, threw {_describe_error(error)}",
        expected=expected,
        actual=error,
    )


def _error_matches(error: BaseException, expected: Any) -> bool:
    if isinstance(expected, type) and issubclass(expected, BaseException):
        return isinstance(error, expected)
    if isinstance(expected, re.Pattern):
        return expected.search(str(error)) is not None
    if isinstance(expected, str):
        return expected in str(error)
    raise ExpectationError.usage(
        f"to_throw: expected must be a str, regex or exception class, got {type(expected).__name__}"
    )


def _describe(expected: Any) -> str:
    if isinstance(expected, type):
        return expected.__name__
    if isinstance(expected, re.Pattern):
        return f"/{expected.pattern}/"
    return format_value(expected)


def _describe_error(error: BaseException) -> str:
    return f"{type(error).__name__}({str(error)!r})"
