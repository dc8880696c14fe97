"""
Exceptions raised at the library boundary.

A hand that does not win is never an error: the classifiers answer with
False or an empty list. These exceptions only cover malformed input.
"""


class HandParseError(ValueError):
    """Hand notation could not be parsed."""


class InvalidHandError(ValueError):
    """A count array breaks the hand multiset invariants."""
