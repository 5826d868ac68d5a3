# SPDX-License-Identifier: MIT
"""A single part of a version.

A version such as ``1.3rc2`` is a list of parts: ``1``, ``3``, ``rc`` and
``2``. Each part is either an unsigned 32 bit integer or a string, and
remembers the separator that preceded it in the source text.
"""

from __future__ import annotations

from typing import Optional

from .errors import (
    Diagnostic,
    ErrorCode,
    InvalidParameterError,
    WrongTypeError,
)

MAX_INTEGER = 2**32 - 1
MAX_WIDTH = 255

ASCII_DIGITS = frozenset("0123456789")


def is_surrogate(c: str) -> bool:
    """Return True if ``c`` is a lone UTF-16 surrogate."""
    return 0xD800 <= ord(c) <= 0xDFFF


def is_control(c: str) -> bool:
    """Return True for C0 controls, DEL and C1 controls."""
    code = ord(c)
    return code < 0x20 or 0x7F <= code <= 0x9F


def is_digits(text: str) -> bool:
    """Return True if ``text`` is made of ASCII digits only."""
    return bool(text) and all(c in ASCII_DIGITS for c in text)


class Part:
    """One integer or string segment of a version.

    Attributes:
        separator: Character that preceded this part, or ``""``
        kind: Role of the part: ``":"`` epoch, ``"-"`` revision,
            ``"~"`` release, ``"R"`` Roman numeral, ``""`` plain
        width: Number of digits found in the source text
    """

    __slots__ = ("_is_integer", "_integer", "_string", "_separator", "_kind", "_width", "_error")

    def __init__(self) -> None:
        self._is_integer = True
        self._integer = 0
        self._string = ""
        self._separator = ""
        self._kind = ""
        self._width = 0
        self._error: Optional[Diagnostic] = None

    def __repr__(self) -> str:
        value = self._integer if self._is_integer else self._string
        return (
            f"Part({value!r}, separator={self._separator!r}, "
            f"kind={self._kind!r}, width={self._width})"
        )

    def __str__(self) -> str:
        return self.to_string()

    def copy(self) -> "Part":
        """Return an independent copy of this part (without its last error)."""
        result = Part()
        result._is_integer = self._is_integer
        result._integer = self._integer
        result._string = self._string
        result._separator = self._separator
        result._kind = self._kind
        result._width = self._width
        return result

    @property
    def separator(self) -> str:
        return self._separator

    @separator.setter
    def separator(self, separator: str) -> None:
        if separator == "\0":
            separator = ""
        if len(separator) > 1 or (
            separator and (is_control(separator) or is_surrogate(separator))
        ):
            raise InvalidParameterError(
                "separator cannot be a control other than U'\\0' or a surrogate."
            )
        self._separator = separator

    @property
    def kind(self) -> str:
        return self._kind

    @kind.setter
    def kind(self, kind: str) -> None:
        if len(kind) > 1:
            raise InvalidParameterError("the kind of a part is one character or none.")
        self._kind = kind

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, width: int) -> None:
        if not 0 <= width <= MAX_WIDTH:
            raise InvalidParameterError(f"width must be between 0 and {MAX_WIDTH}.")
        self._width = width

    @property
    def is_integer(self) -> bool:
        return self._is_integer

    def set_value(self, text: str) -> bool:
        """Set the part from text, choosing integer or string mode.

        An empty string is the integer 0. A string of ASCII digits becomes an
        integer. Anything else is kept as a string.

        Args:
            text: The source text of the part

        Returns:
            False if the digits do not fit in 32 bits; the part is then left
            unchanged and the error is available from :meth:`take_error`
        """
        if not text:
            self.set_integer(0)
            return True

        if is_digits(text):
            value = int(text)
            if value > MAX_INTEGER:
                self._error = Diagnostic(
                    ErrorCode.INTEGER_TOO_LARGE,
                    "integer too large for a valid version.",
                )
                return False
            self.set_integer(value)
            self._width = min(len(text), MAX_WIDTH)
            return True

        self.set_string(text)
        return True

    def set_string(self, text: str) -> None:
        self._is_integer = False
        self._string = text
        self._integer = 0

    def set_integer(self, value: int) -> None:
        if not 0 <= value <= MAX_INTEGER:
            raise InvalidParameterError("integer too large for a valid version.")
        self._is_integer = True
        self._integer = value
        self._string = ""

    def set_to_max_string(self, length: int = 1) -> None:
        self.set_string("z" * length)

    def set_to_max_integer(self) -> None:
        self.set_integer(MAX_INTEGER)

    def get_integer(self) -> int:
        if not self._is_integer:
            raise WrongTypeError("this part is not an integer.")
        return self._integer

    def get_string(self) -> str:
        if self._is_integer:
            raise WrongTypeError("this part is not a string.")
        return self._string

    def take_error(self) -> Optional[Diagnostic]:
        error, self._error = self._error, None
        return error

    def peek_error(self) -> Optional[Diagnostic]:
        return self._error

    def next(self) -> bool:
        """Increment the part by one.

        Integers stop at ``MAX_INTEGER``. Strings count in base 26 over the
        lowercase letters: scanning from the right, ``z`` rolls over to ``a``
        and carries left while any other character is skipped.

        Returns:
            False when the part cannot be incremented; it is then unchanged
        """
        if self._is_integer:
            if self._integer >= MAX_INTEGER:
                return False
            self._integer += 1
            return True

        chars = list(self._string)
        for idx in range(len(chars) - 1, -1, -1):
            c = chars[idx]
            if "a" <= c < "z":
                chars[idx] = chr(ord(c) + 1)
                self._string = "".join(chars)
                return True
            if c == "z":
                chars[idx] = "a"
        return False

    def previous(self) -> bool:
        """Decrement the part by one; mirror of :meth:`next`."""
        if self._is_integer:
            if self._integer <= 0:
                return False
            self._integer -= 1
            return True

        chars = list(self._string)
        for idx in range(len(chars) - 1, -1, -1):
            c = chars[idx]
            if "a" < c <= "z":
                chars[idx] = chr(ord(c) - 1)
                self._string = "".join(chars)
                return True
            if c == "a":
                chars[idx] = "z"
        return False

    def is_zero(self) -> bool:
        """Return True for the integer 0 or a string of ``a`` only."""
        if self._is_integer:
            return self._integer == 0
        return all(c == "a" for c in self._string)

    def compare(self, other: "Part") -> int:
        """Compare two parts.

        Two integers compare numerically. Any other pair compares the text
        of both parts, so the integer 10 sorts before the string ``"2"``.

        Returns:
            -1, 0 or 1
        """
        if self._is_integer and other._is_integer:
            return (self._integer > other._integer) - (self._integer < other._integer)
        left = self.to_string()
        right = other.to_string()
        return (left > right) - (left < right)

    def to_string(self) -> str:
        if self._is_integer:
            return str(self._integer)
        return self._string
