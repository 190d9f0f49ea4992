"""
Matchers over a MockFunction's call history.

"Called" matchers consider every call. "Returned" matchers only consider
calls that returned normally; a call that raised never matches them.
"""

from __future__ import annotations

from typing import Any

from ..assertions.models import ExpectationError, MatcherResult, format_value
from ..assertions.registry import register_matcher
from ..mock import MockFunction, is_mock


def _require_mock(matcher_name: str, subject: Any) -> MockFunction:
    if not is_mock(subject):
        raise ExpectationError.usage(
            f"{matcher_name}: expected a mock function, got {type(subject).__name__}"
        )
    return subject


def _format_call(args: tuple, kwargs: dict[str, Any]) -> str:
    parts = [format_value(a) for a in args]
    parts.extend(f"{k}={format_value(v)}" for k, v in kwargs.items())
    return f"({', '.join(parts)})"


def _format_calls(mock: MockFunction) -> str:
    if not mock.called:
        return "no calls"
    return ", ".join(_format_call(r.args, r.kwargs) for r in mock.records)


def _require_index(matcher_name: str, n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ExpectationError.usage(f"{matcher_name}: call index must be a positive integer, got {n!r}")
    return n


@register_matcher("to_have_been_called")
def to_have_been_called(subject: Any) -> MatcherResult:
    mock = _require_mock("to_have_been_called", subject)
    return MatcherResult(
        mock.called,
        f"expected {mock.name} to have been called, was called {mock.call_count} time(s)",
    )


@register_matcher("to_have_been_called_times")
def to_have_been_called_times(subject: Any, times: int) -> MatcherResult:
    mock = _require_mock("to_have_been_called_times", subject)
    return MatcherResult(
        mock.call_count == times,
        f"expected {mock.name} to have been called {times} time(s), was called {mock.call_count} time(s)",
        expected=times,
        actual=mock.call_count,
    )


@register_matcher("to_have_been_called_with")
def to_have_been_called_with(subject: Any, *args: Any, **kwargs: Any) -> MatcherResult:
    mock = _require_mock("to_have_been_called_with", subject)
    return MatcherResult(
        mock.was_called_with(*args, **kwargs),
        f"expected {mock.name} to have been called with {_format_call(args, kwargs)}, "
        f"calls: {_format_calls(mock)}",
    )


@register_matcher("to_have_been_last_called_with")
def to_have_been_last_called_with(subject: Any, *args: Any, **kwargs: Any) -> MatcherResult:
    mock = _require_mock("to_have_been_last_called_with", subject)
    last = mock.last_call
    actual = _format_call(last.args, last.kwargs) if last else "no calls"
    return MatcherResult(
        mock.last_called_with(*args, **kwargs),
        f"expected {mock.name} to have been last called with {_format_call(args, kwargs)}, "
        f"last call: {actual}",
    )


@register_matcher("to_have_been_nth_called_with")
def to_have_been_nth_called_with(subject: Any, n: int, *args: Any, **kwargs: Any) -> MatcherResult:
    mock = _require_mock("to_have_been_nth_called_with", subject)
    n = _require_index("to_have_been_nth_called_with", n)
    if n <= mock.call_count:
        record = mock.call(n)
        actual = _format_call(record.args, record.kwargs)
    else:
        actual = f"only {mock.call_count} call(s)"
    return MatcherResult(
        mock.nth_called_with(n, *args, **kwargs),
        f"expected call #{n} of {mock.name} to have been with {_format_call(args, kwargs)}, "
        f"was: {actual}",
    )


@register_matcher("to_have_returned")
def to_have_returned(subject: Any) -> MatcherResult:
    mock = _require_mock("to_have_returned", subject)
    return MatcherResult(
        mock.has_returned,
        f"expected {mock.name} to have returned, returned {mock.return_count} of "
        f"{mock.call_count} call(s)",
    )


@register_matcher("to_have_returned_times")
def to_have_returned_times(subject: Any, times: int) -> MatcherResult:
    mock = _require_mock("to_have_returned_times", subject)
    return MatcherResult(
        mock.return_count == times,
        f"expected {mock.name} to have returned {times} time(s), returned {mock.return_count} time(s)",
        expected=times,
        actual=mock.return_count,
    )


@register_matcher("to_have_returned_with")
def to_have_returned_with(subject: Any, value: Any) -> MatcherResult:
    mock = _require_mock("to_have_returned_with", subject)
    return MatcherResult(
        mock.returned_with(value),
        f"expected {mock.name} to have returned {format_value(value)}",
        expected=value,
        actual=mock.returned_values,
    )


@register_matcher("to_have_last_returned_with")
def to_have_last_returned_with(subject: Any, value: Any) -> MatcherResult:
    mock = _require_mock("to_have_last_returned_with", subject)
    return MatcherResult(
        mock.last_returned_with(value),
        f"expected last call of {mock.name} to have returned {format_value(value)}",
        expected=value,
        actual=_outcome(mock, mock.call_count),
    )


@register_matcher("to_have_nth_returned_with")
def to_have_nth_returned_with(subject: Any, n: int, value: Any) -> MatcherResult:
    mock = _require_mock("to_have_nth_returned_with", subject)
    n = _require_index("to_have_nth_returned_with", n)
    return MatcherResult(
        mock.nth_returned_with(n, value),
        f"expected call #{n} of {mock.name} to have returned {format_value(value)}",
        expected=value,
        actual=_outcome(mock, n),
    )


def _outcome(mock: MockFunction, n: int) -> str:
    if n < 1 or n > mock.call_count:
        return f"no call #{n}"
    record = mock.call(n)
    if record.threw:
        return f"raised {type(record.error).__name__}"
    return f"returned {format_value(record.value)}"
