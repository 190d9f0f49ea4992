"""Shared helpers for driving expectations in tests."""

import asyncio

import pytest

from fluentexpect import ExpectationError


def run(awaitable):
    """Drive a deferred assertion to completion."""
    async def _wrap():
        return await awaitable
    return asyncio.run(_wrap())


def assert_passes(fn):
    """Call ``fn`` (awaiting its result if needed) and expect no error."""
    result = fn()
    if asyncio.iscoroutine(result):
        result = run(result)
    assert result is None


def assert_fails(fn, kind=None):
    """Call ``fn`` (awaiting its result if needed) and expect an ExpectationError."""
    with pytest.raises(ExpectationError) as exc_info:
        result = fn()
        if asyncio.iscoroutine(result):
            run(result)
    if kind is not None:
        assert exc_info.value.kind == kind
    return exc_info.value


async def resolved(value):
    return value


async def rejected(error):
    raise error
