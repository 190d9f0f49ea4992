"""Ordering comparison matchers."""

from __future__ import annotations

import operator
from typing import Any, Callable

from ..assertions.models import ExpectationError, MatcherResult, format_value
from ..assertions.registry import register_matcher


def _compare(
    name: str,
    op: Callable[[Any, Any], Any],
    phrase: str,
    subject: Any,
    number: Any,
) -> MatcherResult:
    try:
        passed = bool(op(subject, number))
    except TypeError:
        raise ExpectationError.usage(
            f"{name}: cannot compare {type(subject).__name__} with {type(number).__name__}"
        ) from None

    return MatcherResult(
        passed,
        f"expected {format_value(subject)} to be {phrase} {format_value(number)}",
        expected=number,
        actual=subject,
    )


@register_matcher("to_be_greater_than")
def to_be_greater_than(subject: Any, number: Any) -> MatcherResult:
    return _compare("to_be_greater_than", operator.gt, "greater than", subject, number)


@register_matcher("to_be_greater_than_or_equal")
def to_be_greater_than_or_equal(subject: Any, number: Any) -> MatcherResult:
    return _compare(
        "to_be_greater_than_or_equal", operator.ge, "greater than or equal to", subject, number
    )


@register_matcher("to_be_less_than")
def to_be_less_than(subject: Any, number: Any) -> MatcherResult:
    return _compare("to_be_less_than", operator.lt, "less than", subject, number)


@register_matcher("to_be_less_than_or_equal")
def to_be_less_than_or_equal(subject: Any, number: Any) -> MatcherResult:
    return _compare(
        "to_be_less_than_or_equal", operator.le, "less than or equal to", subject, number
    )
