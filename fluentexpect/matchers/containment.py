"""
Containment, length, property and pattern matchers.

Property lookups on mappings and lists are evaluated as JSONPath
expressions, so nested keys can be addressed as ``"a.b[0].c"`` or
``"$.a.b[0].c"``. Other objects are walked attribute by attribute.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathParserError

from ..assertions.models import UNSET, ExpectationError, MatcherResult, format_value
from ..assertions.registry import register_matcher


@register_matcher("to_contain")
def to_contain(subject: Any, item: Any) -> MatcherResult:
    """
    Check that ``item`` is in ``subject``.

    Works with:
    - Strings: checks if item is a substring
    - Sequences and sets: checks if item is an element
    - Mappings: checks if item is a key
    """
    try:
        passed = item in subject
    except TypeError:
        raise ExpectationError.usage(
            f"to_contain: cannot check containment of {type(item).__name__} "
            f"in {type(subject).__name__}"
        ) from None

    return MatcherResult(
        bool(passed),
        f"expected {format_value(subject)} to contain {format_value(item)}",
        expected=item,
        actual=subject,
    )


@register_matcher("to_have_length")
def to_have_length(subject: Any, length: int) -> MatcherResult:
    """Check ``len(subject)``, falling back to a ``length`` attribute."""
    try:
        actual_length = len(subject)
    except TypeError:
        if not hasattr(subject, "length"):
            raise ExpectationError.usage(
                f"to_have_length: {type(subject).__name__} has no length"
            ) from None
        actual_length = subject.length

    return MatcherResult(
        actual_length == length,
        f"expected {format_value(subject)} to have length {length}, has length {actual_length}",
        expected=length,
        actual=actual_length,
    )


@register_matcher("to_have_property")
def to_have_property(subject: Any, path: str, value: Any = UNSET) -> MatcherResult:
    """Check that a key/attribute path exists, optionally with a given value."""
    if not isinstance(path, str) or not path:
        raise ExpectationError.usage(f"to_have_property: invalid property path {path!r}")

    found, actual = _resolve_property(subject, path)

    if value is UNSET:
        return MatcherResult(
            found,
            f"expected {format_value(subject)} to have property {path!r}",
            actual=subject,
        )

    return MatcherResult(
        found and actual == value,
        f"expected {format_value(subject)} to have property {path!r} "
        f"with value {format_value(value)}",
        expected=value,
        actual=actual if found else UNSET,
    )


@register_matcher("to_match")
def to_match(subject: Any, pattern: re.Pattern | str) -> MatcherResult:
    """Regex search for compiled patterns, substring test for plain strings."""
    if not isinstance(subject, str):
        raise ExpectationError.usage(
            f"to_match: expected a string subject, got {type(subject).__name__}"
        )

    if isinstance(pattern, re.Pattern):
        passed = pattern.search(subject) is not None
        shown = f"/{pattern.pattern}/"
    elif isinstance(pattern, str):
        passed = pattern in subject
        shown = repr(pattern)
    else:
        raise ExpectationError.usage(
            f"to_match: pattern must be a str or compiled regex, got {type(pattern).__name__}"
        )

    return MatcherResult(
        passed,
        f"expected {format_value(subject)} to match {shown}",
        expected=pattern,
        actual=subject,
    )


def _resolve_property(subject: Any, path: str) -> tuple[bool, Any]:
    """Return (found, value) for a property path."""
    if isinstance(subject, Mapping) and path in subject:
        return True, subject[path]

    if isinstance(subject, (Mapping, list)):
        if not any(c in path for c in "$.["):
            return False, None
        matches = _evaluate_path(subject, path)
        if not matches:
            return False, None
        return True, matches[0].value

    return _walk_attributes(subject, path)


def _evaluate_path(data: Any, path: str) -> list:
    expression = path if path.startswith("$") else f"$.{path}"
    try:
        jsonpath_expr = parse_jsonpath(expression)
    except JsonPathParserError as e:
        raise ExpectationError.usage(f"to_have_property: invalid path {path!r}: {e}") from e
    except Exception as e:
        raise ExpectationError.usage(
            f"to_have_property: failed to parse path {path!r}: {type(e).__name__}: {e}"
        ) from e

    return jsonpath_expr.find(data)


def _walk_attributes(subject: Any, path: str) -> tuple[bool, Any]:
    current = subject
    for part in path.lstrip("$.").split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return False, None
            current = current[part]
        elif hasattr(current, part):
            current = getattr(current, part)
        else:
            return False, None
    return True, current
