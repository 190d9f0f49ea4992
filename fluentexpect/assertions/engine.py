"""
Assertion engine for evaluating fluent expectations.

This module provides ``expect()``, which wraps a subject in an
AssertionHandle. The handle carries two pieces of chaining state:

- ``negated``: flipped by every access of ``not_`` (so ``not_.not_`` is a no-op)
- ``deferred``: set by ``resolves``/``rejects``; the subject is awaited
  before the matcher runs and the matcher call returns a coroutine

Any other public attribute is looked up in the matcher registry.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from enum import Enum
from typing import Any, Callable, Coroutine

from .models import ExpectationError, MatcherResult, format_value, negate_message
from .registry import Matcher, MatcherRegistry, default_registry

logger = logging.getLogger(__name__)


class DeferMode(str, Enum):
    """How the subject must be settled before matching."""
    NONE = "none"
    RESOLVE = "resolve"  # await the subject, match against its value
    REJECT = "reject"  # await the subject, match against the raised error


class AssertionHandle:
    """
    State for a single ``expect(subject)`` chain.

    Example:
        expect(2).to_be_greater_than(1)
        expect([]).not_.to_contain(4)
        await expect(fetch()).resolves.to_equal({"ok": True})
        await expect(failing()).rejects.to_throw(ValueError)
    """

    def __init__(self, subject: Any, registry: MatcherRegistry | None = None):
        self._subject = subject
        self._registry = registry if registry is not None else default_registry
        self.negated = False
        self.deferred = DeferMode.NONE
        # Settled once and shared by every deferred matcher call on this handle
        self._pending: asyncio.Future | None = None

    @property
    def subject(self) -> Any:
        return self._subject

    @property
    def not_(self) -> AssertionHandle:
        """Invert the expectation. Each access toggles the flag."""
        self.negated = not self.negated
        return self

    @property
    def resolves(self) -> AssertionHandle:
        """Match against the value the awaitable subject produces."""
        self._require_awaitable("resolves")
        self.deferred = DeferMode.RESOLVE
        return self

    @property
    def rejects(self) -> AssertionHandle:
        """Match against the exception the awaitable subject raises."""
        self._require_awaitable("rejects")
        self.deferred = DeferMode.REJECT
        return self

    def matcher(self, name: str) -> Callable[..., Coroutine[Any, Any, None] | None]:
        """
        Look up a matcher by name and bind it to this handle.

        Returns:
            A callable taking the matcher's arguments. It returns None when
            the subject is evaluated directly, or a coroutine that must be
            awaited when ``resolves``/``rejects`` was applied.

        Raises:
            ExpectationError: (usage) if no matcher is registered under ``name``
        """
        matcher = self._registry.lookup(name)
        if matcher is None:
            raise ExpectationError.usage(f"matcher not found: {name}")

        def invoke(*args: Any, **kwargs: Any) -> Coroutine[Any, Any, None] | None:
            if self.deferred == DeferMode.NONE:
                self._apply(name, matcher, self._subject, args, kwargs)
                return None
            return self._apply_deferred(name, matcher, args, kwargs)

        invoke.__name__ = name
        invoke.__qualname__ = f"{type(self).__name__}.{name}"
        return invoke

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so modifiers win over matchers
        if name.startswith("_"):
            raise AttributeError(name)
        return self.matcher(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._registry.names()))

    def __repr__(self) -> str:
        return (
            f"<AssertionHandle subject={format_value(self._subject)} "
            f"negated={self.negated} deferred={self.deferred.value}>"
        )

    def _require_awaitable(self, modifier: str) -> None:
        if not inspect.isawaitable(self._subject):
            raise ExpectationError.usage(
                f"{modifier}: expected value must be awaitable, "
                f"got {type(self._subject).__name__}"
            )

    async def _apply_deferred(
        self, name: str, matcher: Matcher, args: tuple, kwargs: dict[str, Any]
    ) -> None:
        logger.debug(f"Awaiting subject for {name} ({self.deferred.value})")
        subject = await self._settle()
        self._apply(name, matcher, subject, args, kwargs)

    async def _settle(self) -> Any:
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._subject)

        if self.deferred == DeferMode.RESOLVE:
            return await self._pending

        try:
            value = await self._pending
        except Exception as error:
            return error

        raise ExpectationError.failure(
            f"Awaitable did not reject. resolved to {format_value(value)}",
            actual=value,
        )

    def _apply(
        self,
        name: str,
        matcher: Matcher,
        subject: Any,
        args: tuple,
        kwargs: dict[str, Any],
    ) -> None:
        result = MatcherResult.coerce(matcher(subject, *args, **kwargs), name)
        logger.debug(f"{name}: passed={result.passed} negated={self.negated}")

        if self.negated:
            if result.passed:
                raise ExpectationError.failure(
                    negate_message(result.message),
                    expected=result.expected,
                    actual=result.actual,
                )
        elif not result.passed:
            raise ExpectationError.failure(
                result.message,
                expected=result.expected,
                actual=result.actual,
            )


def expect(subject: Any, *, registry: MatcherRegistry | None = None) -> AssertionHandle:
    """
    Start an expectation about ``subject``.

    Args:
        subject: The value under test (or an awaitable, for resolves/rejects)
        registry: Matcher registry to consult (defaults to the global one)

    Returns:
        A fresh AssertionHandle
    """
    return AssertionHandle(subject, registry)
