"""
Assertion engine for fluent expectations.

This package provides ``expect()``, the matcher registry it dispatches
through, and the result/error models matchers and callers share.

Usage:
    from fluentexpect.assertions import expect, ExpectationError, ErrorKind

    expect([1, 2, 3]).to_contain(2)
    expect(0).not_.to_be_truthy()

    try:
        expect(1).to_be(2)
    except ExpectationError as e:
        if e.kind == ErrorKind.USAGE:
            ...  # the test itself is malformed
"""

# Models
from .models import (
    ErrorKind,
    ExpectationError,
    MatcherResult,
    format_value,
)

# Registry
from .registry import (
    Matcher,
    MatcherRegistry,
    add_matchers,
    default_registry,
    register_matcher,
)

# Engine
from .engine import AssertionHandle, DeferMode, expect

__all__ = [
    # Models
    "ErrorKind",
    "ExpectationError",
    "MatcherResult",
    "format_value",
    # Registry
    "Matcher",
    "MatcherRegistry",
    "add_matchers",
    "default_registry",
    "register_matcher",
    # Engine
    "AssertionHandle",
    "DeferMode",
    "expect",
]
