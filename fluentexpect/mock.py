"""
Call-tracking mock functions.

``fn()`` wraps an optional implementation in a MockFunction. Every call
appends one CallRecord (arguments plus the returned value or the raised
exception) before control returns to the caller, so the history is in
strict invocation order. Exceptions are re-raised unchanged.

Usage:
    from fluentexpect import expect, fn

    double = fn(lambda x: x * 2)
    double(2)
    double(5)

    expect(double).to_have_been_called_times(2)
    expect(double).to_have_been_nth_called_with(1, 2)
    expect(double).to_have_last_returned_with(10)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class CallOutcome(str, Enum):
    """How a tracked call finished."""
    RETURN = "return"
    THROW = "throw"


@dataclass(frozen=True)
class CallRecord:
    """
    One invocation of a MockFunction.

    Attributes:
        index: 1-based position in the call history
        args: Positional arguments received
        kwargs: Keyword arguments received
        outcome: Whether the call returned or raised
        value: The returned value (None for raised calls)
        error: The raised exception (None for returned calls)
    """
    index: int
    args: tuple
    kwargs: dict[str, Any] = field(default_factory=dict)
    outcome: CallOutcome = CallOutcome.RETURN
    value: Any = None
    error: BaseException | None = None

    @property
    def returned(self) -> bool:
        return self.outcome == CallOutcome.RETURN

    @property
    def threw(self) -> bool:
        return self.outcome == CallOutcome.THROW

    def matches(self, args: tuple, kwargs: dict[str, Any]) -> bool:
        """True if this call received exactly these arguments."""
        return self.args == tuple(args) and self.kwargs == dict(kwargs)

    def returned_value_equals(self, value: Any) -> bool:
        """True if this call returned normally with a value equal to ``value``."""
        return self.returned and self.value == value


class MockFunction:
    """
    Callable wrapper that records every invocation.

    The wrapped implementation is held by reference; the call history is
    owned by the mock and only ever appended to.
    """

    def __init__(self, implementation: Callable[..., Any] | None = None, name: str | None = None):
        if implementation is not None and not callable(implementation):
            raise TypeError(f"implementation must be callable, got {type(implementation).__name__}")
        self._implementation = implementation
        self._records: list[CallRecord] = []
        self.name = name or getattr(implementation, "__name__", None) or "mock"

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._implementation is None:
            self._append(args, kwargs, CallOutcome.RETURN)
            return None

        try:
            value = self._implementation(*args, **kwargs)
        except BaseException as error:
            self._append(args, kwargs, CallOutcome.THROW, error=error)
            raise

        self._append(args, kwargs, CallOutcome.RETURN, value=value)
        return value

    def _append(
        self,
        args: tuple,
        kwargs: dict[str, Any],
        outcome: CallOutcome,
        value: Any = None,
        error: BaseException | None = None,
    ) -> None:
        record = CallRecord(
            index=len(self._records) + 1,
            args=args,
            kwargs=kwargs,
            outcome=outcome,
            value=value,
            error=error,
        )
        self._records.append(record)
        logger.debug(f"{self.name}: call #{record.index} {outcome.value}")

    def __repr__(self) -> str:
        return f"<MockFunction {self.name} calls={self.call_count}>"

    # ── History views ──────────────────────────────────────────────────────

    @property
    def implementation(self) -> Callable[..., Any] | None:
        return self._implementation

    @property
    def records(self) -> tuple[CallRecord, ...]:
        """Every call, in invocation order."""
        return tuple(self._records)

    @property
    def calls(self) -> list[tuple]:
        """Positional argument tuples of every call."""
        return [record.args for record in self._records]

    @property
    def results(self) -> list[CallRecord]:
        """Records of calls that returned normally."""
        return [record for record in self._records if record.returned]

    @property
    def returned_values(self) -> list[Any]:
        return [record.value for record in self._records if record.returned]

    # ── Call queries ───────────────────────────────────────────────────────

    @property
    def call_count(self) -> int:
        return len(self._records)

    @property
    def called(self) -> bool:
        return bool(self._records)

    def call(self, n: int) -> CallRecord:
        """
        The n-th call (1-indexed).

        Raises:
            IndexError: If fewer than ``n`` calls were made or ``n`` < 1
        """
        if n < 1 or n > len(self._records):
            raise IndexError(f"{self.name} has {len(self._records)} call(s), no call #{n}")
        return self._records[n - 1]

    def call_args(self, n: int) -> tuple:
        """Positional arguments of the n-th call (1-indexed)."""
        return self.call(n).args

    @property
    def last_call(self) -> CallRecord | None:
        return self._records[-1] if self._records else None

    def was_called_with(self, *args: Any, **kwargs: Any) -> bool:
        """True if any call received exactly these arguments."""
        return any(record.matches(args, kwargs) for record in self._records)

    def nth_called_with(self, n: int, *args: Any, **kwargs: Any) -> bool:
        """True if the n-th call received exactly these arguments."""
        if n < 1 or n > len(self._records):
            return False
        return self._records[n - 1].matches(args, kwargs)

    def last_called_with(self, *args: Any, **kwargs: Any) -> bool:
        return bool(self._records) and self._records[-1].matches(args, kwargs)

    # ── Return queries (raised calls never count) ──────────────────────────

    @property
    def return_count(self) -> int:
        return sum(1 for record in self._records if record.returned)

    @property
    def has_returned(self) -> bool:
        return any(record.returned for record in self._records)

    def returned_with(self, value: Any) -> bool:
        """True if any call returned normally with ``value``."""
        return any(record.returned_value_equals(value) for record in self._records)

    def nth_returned_with(self, n: int, value: Any) -> bool:
        """True if the n-th call returned normally with ``value``."""
        if n < 1 or n > len(self._records):
            return False
        return self._records[n - 1].returned_value_equals(value)

    def last_returned_with(self, value: Any) -> bool:
        return bool(self._records) and self._records[-1].returned_value_equals(value)


def fn(implementation: Callable[..., Any] | None = None, *, name: str | None = None) -> MockFunction:
    """
    Create a tracked mock function.

    Args:
        implementation: Callable to delegate to (None for a no-op returning None)
        name: Display name used in messages and logs

    Returns:
        A new MockFunction with an empty call history
    """
    return MockFunction(implementation, name=name)


def is_mock(value: Any) -> bool:
    return isinstance(value, MockFunction)
