"""
Custom exception types used across greeter.

Every failure a user can trigger is one of these, so the CLI can turn
them into an error message and exit status without catching unrelated
bugs.
"""

from __future__ import annotations


class GreeterError(Exception):
    """Base class for all greeter specific errors."""


class ParseError(GreeterError):
    """Raised when the positional argument is not a base-10 integer."""


class ArgumentCountError(GreeterError):
    """Raised when the wrong number of arguments is given."""


class ValidationError(GreeterError):
    """Raised when a parsed configuration cannot be executed."""


class MissingInputError(GreeterError):
    """Raised when no name is entered at the prompt."""
