"""
Matcher registry.

Maps matcher names to their evaluation functions.

A matcher is any callable ``matcher(subject, *args, **kwargs)`` that
returns a MatcherResult (or a ``(passed, message)`` tuple). Built-in
matchers are registered when ``fluentexpect.matchers`` is imported;
consumers extend the set with ``add_matchers`` or ``register_matcher``.
Entries are never removed, only shadowed by re-registration.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Mapping

from .models import ExpectationError

logger = logging.getLogger(__name__)

# Matcher(subject, *args, **kwargs) -> MatcherResult
Matcher = Callable[..., Any]


class MatcherRegistry:
    """Mutable name -> matcher mapping consulted by the assertion engine."""

    def __init__(self, matchers: Mapping[str, Matcher] | None = None):
        self._matchers: dict[str, Matcher] = {}
        if matchers:
            self.add_matchers(matchers)

    def register(self, name: str, matcher: Matcher) -> Matcher:
        """
        Insert or overwrite a matcher.

        Args:
            name: Name the matcher is looked up by, e.g. "to_be_fancy"
            matcher: Callable taking the subject plus matcher arguments

        Returns:
            The matcher, so this can back a decorator

        Raises:
            ExpectationError: If the name is empty or the matcher is not callable
        """
        if not isinstance(name, str) or not name or name.startswith("_"):
            raise ExpectationError.usage(f"invalid matcher name: {name!r}")
        if not callable(matcher):
            raise ExpectationError.usage(
                f"matcher {name} must be callable, got {type(matcher).__name__}"
            )

        if name in self._matchers:
            logger.info(f"Overwriting matcher: {name}")
        else:
            logger.debug(f"Registered matcher: {name}")
        self._matchers[name] = matcher
        return matcher

    def add_matchers(self, matchers: Mapping[str, Matcher]) -> None:
        """Merge a mapping of matchers, silently overwriting existing names."""
        for name, matcher in matchers.items():
            self.register(name, matcher)

    def lookup(self, name: str) -> Matcher | None:
        """Return the matcher registered under ``name``, or None."""
        return self._matchers.get(name)

    def names(self) -> list[str]:
        """Registered matcher names, sorted."""
        return sorted(self._matchers)

    def copy(self) -> MatcherRegistry:
        """Independent registry holding the same entries."""
        clone = MatcherRegistry()
        clone._matchers = dict(self._matchers)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._matchers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._matchers)


# Global registry shared by every expect() call that does not pass its own
default_registry = MatcherRegistry()


def register_matcher(name: str, registry: MatcherRegistry | None = None):
    """
    Decorator to register a matcher.

    Usage:
        @register_matcher("to_be_fancy")
        def to_be_fancy(subject):
            return MatcherResult(subject == "fancy", f"expected {subject!r} to be fancy")
    """
    target = registry if registry is not None else default_registry

    def decorator(func: Matcher) -> Matcher:
        return target.register(name, func)
    return decorator


def add_matchers(matchers: Mapping[str, Matcher]) -> None:
    """Merge matchers into the default registry, overwriting existing names."""
    default_registry.add_matchers(matchers)
