"""Tests for the built-in matchers, driven through expect()."""

import math
import re

import pytest

from helpers import assert_fails, assert_passes, rejected, resolved
from fluentexpect import ErrorKind, expect


def assert_all_pass(*fns):
    for f in fns:
        assert_passes(f)


def assert_all_fail(*fns):
    for f in fns:
        assert_fails(f, kind=ErrorKind.ASSERTION)


# --- equality ---


def test_to_be():
    obj = {}
    assert_all_pass(
        lambda: expect(obj).to_be(obj),
        lambda: expect(obj).not_.to_be({}),
        lambda: expect(10**20).to_be(10**20),
        lambda: expect(math.nan).to_be(math.nan),
        lambda: expect(resolved(1)).resolves.to_be(1),
        lambda: expect(rejected(KeyError(1))).rejects.to_be_instance_of(KeyError),
    )
    assert_all_fail(
        lambda: expect(obj).to_be({}),
        lambda: expect(obj).not_.to_be(obj),
        lambda: expect(1).to_be(True),
        lambda: expect(1).to_be(1.0),
    )


def test_to_equal():
    obj = {}
    assert_all_pass(
        lambda: expect(1).to_equal(1),
        lambda: expect(obj).to_equal({}),
        lambda: expect({"a": 1}).to_equal({"a": 1}),
        lambda: expect([1]).to_equal([1]),
        lambda: expect(resolved(1)).resolves.to_equal(1),
    )
    assert_all_fail(
        lambda: expect(1).to_equal(2),
        lambda: expect(1).to_equal(True),
        lambda: expect(True).to_equal(1),
        lambda: expect({}).to_equal(True),
        lambda: expect(1).not_.to_equal(1),
        lambda: expect(True).not_.to_equal(True),
    )


# --- truthiness and type ---


def test_to_be_truthy_and_falsy():
    assert_all_pass(
        lambda: expect(True).to_be_truthy(),
        lambda: expect(False).not_.to_be_truthy(),
        lambda: expect(False).to_be_falsy(),
        lambda: expect([]).to_be_falsy(),
        lambda: expect(resolved(True)).resolves.to_be_truthy(),
    )
    assert_all_fail(
        lambda: expect(False).to_be_truthy(),
        lambda: expect(True).to_be_falsy(),
        lambda: expect(False).not_.to_be_falsy(),
    )


def test_to_be_none_and_defined():
    assert_all_pass(
        lambda: expect(None).to_be_none(),
        lambda: expect(False).not_.to_be_none(),
        lambda: expect(0).to_be_defined(),
        lambda: expect(None).not_.to_be_defined(),
        lambda: expect(resolved(None)).resolves.to_be_none(),
    )
    assert_all_fail(
        lambda: expect({}).to_be_none(),
        lambda: expect(None).not_.to_be_none(),
        lambda: expect(None).to_be_defined(),
    )


def test_to_be_nan():
    assert_all_pass(
        lambda: expect(math.nan).to_be_nan(),
        lambda: expect(10).not_.to_be_nan(),
        lambda: expect(resolved(float("nan"))).resolves.to_be_nan(),
    )
    assert_all_fail(lambda: expect(10).to_be_nan())


def test_to_be_instance_of():
    class A:
        pass

    class B:
        pass

    assert_all_pass(
        lambda: expect(A()).to_be_instance_of(A),
        lambda: expect(A()).not_.to_be_instance_of(B),
        lambda: expect(1).to_be_instance_of((str, int)),
    )
    assert_all_fail(
        lambda: expect({}).to_be_instance_of(A),
        lambda: expect(None).to_be_instance_of(A),
    )
    assert_fails(lambda: expect(1).to_be_instance_of("int"), kind=ErrorKind.USAGE)


# --- numeric ---


def test_greater_and_less_than():
    assert_all_pass(
        lambda: expect(2).to_be_greater_than(1),
        lambda: expect(1).not_.to_be_greater_than(2),
        lambda: expect(1).to_be_less_than(2),
        lambda: expect(2).not_.to_be_less_than(1),
        lambda: expect(resolved(2)).resolves.to_be_greater_than(1),
    )
    assert_all_fail(
        lambda: expect(1).to_be_greater_than(1),
        lambda: expect(1).to_be_greater_than(2),
        lambda: expect(1).to_be_less_than(1),
        lambda: expect(2).not_.to_be_greater_than(1),
    )


def test_or_equal_comparisons():
    assert_all_pass(
        lambda: expect(2).to_be_greater_than_or_equal(1),
        lambda: expect(1).to_be_greater_than_or_equal(1),
        lambda: expect(1).to_be_less_than_or_equal(2),
        lambda: expect(1).to_be_less_than_or_equal(1),
        lambda: expect(2).not_.to_be_less_than_or_equal(1),
    )
    assert_all_fail(
        lambda: expect(1).to_be_greater_than_or_equal(2),
        lambda: expect(2).to_be_less_than_or_equal(1),
        lambda: expect(1).not_.to_be_less_than_or_equal(1),
    )


def test_incomparable_values_are_usage_errors():
    assert_fails(lambda: expect("a").to_be_greater_than(1), kind=ErrorKind.USAGE)


# --- containment ---


def test_to_contain():
    assert_all_pass(
        lambda: expect([1, 2, 3]).to_contain(2),
        lambda: expect([]).not_.to_contain(2),
        lambda: expect("hello").to_contain("ell"),
        lambda: expect({"a": 1}).to_contain("a"),
    )
    assert_all_fail(
        lambda: expect([1, 2, 3]).to_contain(4),
        lambda: expect([]).to_contain(4),
    )
    assert_fails(lambda: expect(5).to_contain(1), kind=ErrorKind.USAGE)


def test_to_have_length():
    class Sized:
        length = 10

    assert_all_pass(
        lambda: expect([1, 2]).to_have_length(2),
        lambda: expect("abc").to_have_length(3),
        lambda: expect(Sized()).to_have_length(10),
    )
    assert_all_fail(lambda: expect([]).to_have_length(10))
    assert_fails(lambda: expect(5).to_have_length(1), kind=ErrorKind.USAGE)


def test_to_have_property():
    class Point:
        def __init__(self):
            self.x = 1
            self.origin = None

    data = {"a": "10", "nested": {"items": [{"id": 7}]}}
    assert_all_pass(
        lambda: expect(data).to_have_property("a"),
        lambda: expect(data).to_have_property("a", "10"),
        lambda: expect(data).to_have_property("nested.items[0].id", 7),
        lambda: expect(data).to_have_property("$.nested.items[0].id"),
        lambda: expect(Point()).to_have_property("x", 1),
        lambda: expect(Point()).to_have_property("origin"),
    )
    assert_all_fail(
        lambda: expect({"a": 1}).to_have_property("b"),
        lambda: expect({"a": 1}).to_have_property("a", 2),
        lambda: expect(data).to_have_property("nested.items[0].name"),
        lambda: expect(Point()).to_have_property("y"),
    )


def test_to_match():
    assert_all_pass(
        lambda: expect("hello").to_match(re.compile(r"^hell")),
        lambda: expect("hello").to_match("hello"),
        lambda: expect("hello").to_match("hell"),
    )
    assert_all_fail(lambda: expect("yo").to_match(re.compile(r"^hell")))
    assert_fails(lambda: expect(5).to_match("5"), kind=ErrorKind.USAGE)


# --- raising ---


def test_to_throw():
    def raises():
        raise ValueError("TEST")

    assert_all_pass(
        lambda: expect(raises).to_throw(),
        lambda: expect(raises).to_throw("TEST"),
        lambda: expect(raises).to_throw(re.compile(r"^TE")),
        lambda: expect(raises).to_throw(ValueError),
        lambda: expect(lambda: True).not_.to_throw(),
        lambda: expect(rejected(ValueError("TEST"))).rejects.to_throw("TEST"),
    )
    assert_all_fail(
        lambda: expect(lambda: True).to_throw(),
        lambda: expect(raises).to_throw("OTHER"),
        lambda: expect(raises).to_throw(KeyError),
    )
    assert_fails(lambda: expect(5).to_throw(), kind=ErrorKind.USAGE)


def test_to_throw_message_names_error():
    def raises():
        raise ValueError("TEST")

    error = assert_fails(lambda: expect(raises).to_throw(KeyError))
    assert "KeyError" in error.message
    assert "ValueError('TEST')" in error.message


@pytest.mark.parametrize(
    "name, args",
    [
        ("to_be_truthy", ()),
        ("to_equal", (1,)),
        ("to_contain", (1,)),
    ],
)
def test_double_negation_matches_plain_for_builtins(name, args):
    subject = [1]
    plain_error = None
    double_error = None
    try:
        expect(subject).matcher(name)(*args)
    except Exception as e:
        plain_error = e
    try:
        expect(subject).not_.not_.matcher(name)(*args)
    except Exception as e:
        double_error = e
    assert (plain_error is None) == (double_error is None)
