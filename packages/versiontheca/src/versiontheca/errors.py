# SPDX-License-Identifier: MIT
"""Errors raised and recorded by the versiontheca library.

Two kinds of failures exist:

- Recoverable failures (a string that does not parse, a next/previous that
  hits a limit) never raise. They are recorded as a :class:`Diagnostic` in the
  scheme's last error slot and the operation returns ``False``.
- Misuse of the API (out of range positions, too many parts, reading an
  integer from a string part, comparing invalid versions) raises one of the
  exceptions below.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Codes of the recoverable errors recorded by schemes and parts."""

    EMPTY_INPUT = "empty_input"
    EMPTY_VALUE = "empty_value"
    UNEXPECTED_CHARACTER = "unexpected_character"
    INVALID_UNICODE = "invalid_unicode"
    INTEGER_TOO_LARGE = "integer_too_large"
    EPOCH_NOT_INTEGER = "epoch_not_integer"
    POSITIONAL_SYNTAX = "positional_syntax"
    NOT_A_NUMBER = "not_a_number"
    INVALID_FORMAT = "invalid_format"
    NO_PARTS = "no_parts"
    MAXIMUM_LIMIT = "maximum_limit"
    MINIMUM_LIMIT = "minimum_limit"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recoverable error.

    Attributes:
        code: What went wrong
        message: Human readable explanation
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


class VersionthecaError(Exception):
    """Base class of the exceptions raised by versiontheca."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(self.message)


class InvalidParameterError(VersionthecaError):
    """Raised when a position, separator or part count is out of range."""


class WrongTypeError(VersionthecaError):
    """Raised when reading the integer of a string part or vice versa."""


class EmptyVersionError(VersionthecaError):
    """Raised when comparing a version that has no parts."""


class InvalidVersionError(VersionthecaError):
    """Raised when comparing a version that did not parse."""


class LogicError(VersionthecaError):
    """Raised when the parts of a version break an internal invariant."""
