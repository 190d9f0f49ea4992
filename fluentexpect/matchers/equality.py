"""Identity and equality matchers."""

from __future__ import annotations

import math
from typing import Any

from ..assertions.models import MatcherResult, format_value
from ..assertions.registry import register_matcher

# Immutable scalars compare by value in to_be; everything else by identity
_VALUE_TYPES = (bool, int, float, complex, str, bytes, type(None))


def _same(subject: Any, expected: Any) -> bool:
    if subject is expected:
        return True
    if type(subject) is not type(expected) or not isinstance(subject, _VALUE_TYPES):
        return False
    if isinstance(subject, float) and math.isnan(subject) and math.isnan(expected):
        return True
    return subject == expected


@register_matcher("to_be")
def to_be(subject: Any, expected: Any) -> MatcherResult:
    """Identity for objects, same-type value equality for scalars."""
    message = f"expected {format_value(subject)} to be {format_value(expected)}"
    if _same(subject, expected):
        return MatcherResult.passed_result(message, expected=expected, actual=subject)
    return MatcherResult.failed_result(message, expected=expected, actual=subject)


@register_matcher("to_equal")
def to_equal(subject: Any, expected: Any) -> MatcherResult:
    """Deep equality via ``==``."""
    message = f"expected {format_value(subject)} to equal {format_value(expected)}"
    # 1 == True in Python; a bool only equals a bool
    if isinstance(subject, bool) != isinstance(expected, bool):
        passed = False
    else:
        passed = bool(subject == expected)
    return MatcherResult(passed=passed, message=message, expected=expected, actual=subject)
