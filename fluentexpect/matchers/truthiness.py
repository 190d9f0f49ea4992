"""Truthiness, None and type matchers."""

from __future__ import annotations

import math
from typing import Any

from ..assertions.models import ExpectationError, MatcherResult, format_value
from ..assertions.registry import register_matcher


@register_matcher("to_be_truthy")
def to_be_truthy(subject: Any) -> MatcherResult:
    return MatcherResult(bool(subject), f"expected {format_value(subject)} to be truthy")


@register_matcher("to_be_falsy")
def to_be_falsy(subject: Any) -> MatcherResult:
    return MatcherResult(not subject, f"expected {format_value(subject)} to be falsy")


@register_matcher("to_be_none")
def to_be_none(subject: Any) -> MatcherResult:
    return MatcherResult(subject is None, f"expected {format_value(subject)} to be None")


@register_matcher("to_be_defined")
def to_be_defined(subject: Any) -> MatcherResult:
    """Passes for anything but None."""
    return MatcherResult(subject is not None, f"expected {format_value(subject)} to be defined")


@register_matcher("to_be_nan")
def to_be_nan(subject: Any) -> MatcherResult:
    passed = isinstance(subject, float) and math.isnan(subject)
    return MatcherResult(passed, f"expected {format_value(subject)} to be NaN")


@register_matcher("to_be_instance_of")
def to_be_instance_of(subject: Any, cls: type | tuple[type, ...]) -> MatcherResult:
    try:
        passed = isinstance(subject, cls)
    except TypeError:
        raise ExpectationError.usage(
            f"to_be_instance_of: expected a class, got {format_value(cls)}"
        ) from None

    name = cls.__name__ if isinstance(cls, type) else format_value(cls)
    return MatcherResult(
        passed,
        f"expected {format_value(subject)} to be an instance of {name}",
        expected=cls,
        actual=type(subject),
    )
