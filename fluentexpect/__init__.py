"""
fluentexpect - Fluent assertions and call-tracking mocks for Python tests

This package provides a chainable ``expect()`` API backed by a registry of
named matchers, plus mock functions that record every call.

Subpackages:
    - assertions: Assertion engine, matcher registry, result/error models
    - matchers: Built-in matchers (registered on import)

Modules:
    - mock: Call-tracking mock functions
    - settings: Rendering/logging settings, loadable from YAML

Usage:
    import asyncio
    from fluentexpect import expect, fn, add_matchers, MatcherResult

    expect(2).to_be_greater_than(1)
    expect({"a": 1}).not_.to_equal({"a": 2})

    async def fetch():
        return 42

    asyncio.run(expect(fetch()).resolves.to_be(42))

    spy = fn(lambda x: x * 2)
    spy(3)
    expect(spy).to_have_been_called_with(3)
    expect(spy).to_have_returned_with(6)

    add_matchers({
        "to_be_fancy": lambda v: MatcherResult(v == "fancy", f"expected {v!r} to be fancy"),
    })
    expect("fancy").to_be_fancy()
"""

__version__ = "0.1.0"

# Re-export settings for convenience
from .settings import (
    ExpectSettings,
    ValidationResult,
    configure,
    get_settings,
    load_settings,
    validate_settings_yaml,
)

# Re-export assertions for convenience
from .assertions import (
    # Models
    ErrorKind,
    ExpectationError,
    MatcherResult,
    format_value,
    # Registry
    Matcher,
    MatcherRegistry,
    add_matchers,
    default_registry,
    register_matcher,
    # Engine
    AssertionHandle,
    DeferMode,
    expect,
)

# Re-export mocks for convenience
from .mock import CallOutcome, CallRecord, MockFunction, fn, is_mock

# Registers the built-in matchers
from . import matchers

__all__ = [
    # Package info
    "__version__",
    # Settings
    "ExpectSettings",
    "ValidationResult",
    "configure",
    "get_settings",
    "load_settings",
    "validate_settings_yaml",
    # Assertions - Models
    "ErrorKind",
    "ExpectationError",
    "MatcherResult",
    "format_value",
    # Assertions - Registry
    "Matcher",
    "MatcherRegistry",
    "add_matchers",
    "default_registry",
    "register_matcher",
    # Assertions - Engine
    "AssertionHandle",
    "DeferMode",
    "expect",
    # Mocks
    "CallOutcome",
    "CallRecord",
    "MockFunction",
    "fn",
    "is_mock",
    # Built-in matchers
    "matchers",
]
