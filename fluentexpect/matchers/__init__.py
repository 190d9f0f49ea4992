"""
Built-in matchers.

Importing this package registers every built-in matcher in the default
registry:

    - equality: to_be, to_equal
    - truthiness: to_be_truthy, to_be_falsy, to_be_none, to_be_defined,
      to_be_nan, to_be_instance_of
    - numeric: to_be_greater_than, to_be_greater_than_or_equal,
      to_be_less_than, to_be_less_than_or_equal
    - containment: to_contain, to_have_length, to_have_property, to_match
    - raising: to_throw
    - mocks: to_have_been_called, to_have_been_called_times,
      to_have_been_called_with, to_have_been_last_called_with,
      to_have_been_nth_called_with, to_have_returned,
      to_have_returned_times, to_have_returned_with,
      to_have_last_returned_with, to_have_nth_returned_with
"""

from . import containment, equality, mocks, numeric, raising, truthiness

__all__ = [
    "containment",
    "equality",
    "mocks",
    "numeric",
    "raising",
    "truthiness",
]
