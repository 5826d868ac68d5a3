# SPDX-License-Identifier: MIT
"""Base class of all the version schemes.

A scheme owns the list of parts of one version and knows how to:

- parse a string into parts (a generic tokenizer is provided here),
- render the parts back as a canonical string,
- compare two versions,
- compute the next or previous version at a given position.

Subclasses change the grammar (which characters are accepted, what
separates parts) and the ordering. The next/previous carry engine is shared:
a scheme only describes which range of its parts holds the "upstream"
numbers that may be incremented.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Iterator, Optional, Union

from .errors import (
    Diagnostic,
    EmptyVersionError,
    ErrorCode,
    InvalidParameterError,
    LogicError,
)
from .part import ASCII_DIGITS, Part, is_control, is_surrogate

logger = logging.getLogger(__name__)

MAX_PARTS = 25

INVALID_UNICODE_MESSAGE = (
    "input string includes an invalid code not representing a valid UTF-8 character."
)


def unexpected_character_message(c: str) -> str:
    return f"found unexpected character: \\U{ord(c):06X} in input."


class Scheme:
    """A version made of at most ``MAX_PARTS`` parts.

    The base class accepts any Unicode text except control characters,
    with parts separated by periods. It is used as is by the Unicode scheme.

    Attributes:
        name: Name used to select the scheme from the command line
        no_upstream_message: Error recorded when next()/previous() cannot
            find the parts to work on
    """

    name: ClassVar[str] = "unicode"
    no_upstream_message: ClassVar[str] = "no parts in this version; cannot compute next/previous."

    def __init__(self) -> None:
        self._parts: list[Part] = []
        self._error: Optional[Diagnostic] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parts!r})"

    # Part list

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts)

    def __getitem__(self, index: int) -> Part:
        return self._parts[index]

    def size(self) -> int:
        return len(self._parts)

    def is_empty(self) -> bool:
        return not self._parts

    def clear(self) -> None:
        self._parts.clear()

    def append(self, part: Part) -> None:
        if len(self._parts) >= MAX_PARTS:
            raise InvalidParameterError(
                "trying to append more parts when maximum was already reached."
            )
        self._parts.append(part)

    def insert(self, index: int, part: Part) -> None:
        if len(self._parts) >= MAX_PARTS:
            raise InvalidParameterError(
                "trying to insert more parts when maximum was already reached."
            )
        self._parts.insert(index, part)

    def erase(self, index: int) -> None:
        if not 0 <= index < len(self._parts):
            raise InvalidParameterError("trying to erase a non-existent part.")
        del self._parts[index]

    def resize(self, size: int) -> None:
        """Truncate the list or grow it with integer 0 parts."""
        if size > MAX_PARTS:
            raise InvalidParameterError("requested too many parts.")
        del self._parts[size:]
        while len(self._parts) < size:
            self._parts.append(Part())

    # Errors

    def fail(self, code: ErrorCode, message: str) -> bool:
        """Record a recoverable error and return False."""
        logger.debug("%s: %s", type(self).__name__, message)
        self._error = Diagnostic(code, message)
        return False

    def take_error(self) -> Optional[Diagnostic]:
        """Return the last error and forget it."""
        error, self._error = self._error, None
        return error

    def peek_error(self) -> Optional[Diagnostic]:
        """Return the last error, keeping it."""
        return self._error

    def get_last_error(self, clear: bool = True) -> str:
        """Return the message of the last error, or ``""`` if there is none."""
        error = self.take_error() if clear else self.peek_error()
        return error.message if error is not None else ""

    # Parsing

    def parse(self, text: Union[str, bytes]) -> bool:
        """Parse ``text`` replacing the current parts.

        Args:
            text: The version string; bytes are decoded as UTF-8

        Returns:
            True on success; on failure the reason is available from
            :meth:`take_error` and the parts should be discarded
        """
        decoded = self._start_parse(text)
        if decoded is None:
            return False
        return self.parse_version(decoded, "")

    def _start_parse(self, text: Union[str, bytes]) -> Optional[str]:
        """Reset the version and return ``text`` decoded, or None if empty or invalid."""
        self.clear()
        self._error = None
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError:
                self.fail(ErrorCode.INVALID_UNICODE, INVALID_UNICODE_MESSAGE)
                return None
        if not text:
            self.fail(
                ErrorCode.EMPTY_INPUT,
                "an empty input string cannot represent a valid version.",
            )
            return None
        return text

    def parse_version(self, text: str, separator: str) -> bool:
        """Split ``text`` on separators and parse each value.

        Args:
            text: The text to split
            separator: Separator given to the first part produced

        Returns:
            True if every value parsed
        """
        buffer: list[str] = []
        for c in text:
            if is_surrogate(c):
                return self.fail(ErrorCode.INVALID_UNICODE, INVALID_UNICODE_MESSAGE)
            if self.is_separator(c):
                if not self.parse_value("".join(buffer), separator):
                    return False
                separator = c
                buffer.clear()
            else:
                buffer.append(c)
        return self.parse_value("".join(buffer), separator)

    def parse_value(self, value: str, separator: str) -> bool:
        """Break one value in runs of digits and runs of other characters.

        Each run becomes one part; the first part receives ``separator``.
        """
        if not value:
            # "1..3", or "3:-1" with an empty upstream
            return self.fail(ErrorCode.EMPTY_VALUE, "a version value cannot be an empty string.")

        length = len(value)
        idx = 0
        while idx < length:
            end = idx
            while end < length and value[end] in ASCII_DIGITS:
                end += 1
            if end > idx:
                part = Part()
                if not part.set_value(value[idx:end]):
                    error = part.take_error()
                    return self.fail(error.code, error.message)
                part.separator = separator
                self.append(part)
                separator = ""
                idx = end

            while end < length and value[end] not in ASCII_DIGITS:
                c = value[end]
                if is_surrogate(c):
                    return self.fail(ErrorCode.INVALID_UNICODE, INVALID_UNICODE_MESSAGE)
                if not self.is_valid_character(c):
                    return self.fail(
                        ErrorCode.UNEXPECTED_CHARACTER, unexpected_character_message(c)
                    )
                end += 1
            if end > idx:
                part = Part()
                part.set_string(value[idx:end])
                part.separator = separator
                self.append(part)
                separator = ""
                idx = end

        return True

    def is_valid_character(self, c: str) -> bool:
        return c != "." and not is_control(c) and not is_surrogate(c)

    def is_separator(self, c: str) -> bool:
        return c == "."

    # Output

    def to_string(self) -> str:
        """Return the canonical representation of the version.

        Trailing zero parts are dropped. A version reduced to a single part
        gets ``.0`` appended (``.A`` when its second part was a string).
        """
        if not self._parts:
            self.fail(ErrorCode.NO_PARTS, "no parts to output.")
            return ""

        end = len(self._parts)
        while end > 1 and self._parts[end - 1].is_zero():
            end -= 1
        result = self.join_parts(0, end)
        if end == 1:
            if len(self._parts) >= 2 and not self._parts[1].is_integer:
                result += ".A"
            else:
                result += ".0"
        return result

    def join_parts(self, start: int, end: int, skip_first_separator: bool = False) -> str:
        """Concatenate parts ``start`` to ``end`` with their separators."""
        pieces: list[str] = []
        for idx in range(start, end):
            part = self._parts[idx]
            if part.separator and not (skip_first_separator and idx == start):
                if idx == 0:
                    raise LogicError(
                        "the very first part should not have a separator defined."
                    )
                pieces.append(part.separator)
            pieces.append(self.part_to_string(part))
        return "".join(pieces)

    def part_to_string(self, part: Part) -> str:
        return part.to_string()

    # Comparison

    def compare(self, other: Optional["Scheme"]) -> int:
        """Compare two versions part by part.

        A part missing on one side is equal to a zero part on the other side.

        Returns:
            -1, 0 or 1

        Raises:
            EmptyVersionError: If either version has no parts
        """
        if not self._parts or other is None or not other._parts:
            raise EmptyVersionError("one or both of the input versions are empty.")

        for idx in range(max(len(self._parts), len(other._parts))):
            if idx >= len(self._parts):
                if not other._parts[idx].is_zero():
                    return -1
            elif idx >= len(other._parts):
                if not self._parts[idx].is_zero():
                    return 1
            else:
                r = self._parts[idx].compare(other._parts[idx])
                if r != 0:
                    return r
        return 0

    # Next / previous

    def upstream_range(self) -> Optional[tuple[int, int]]:
        """Return the ``(start, end)`` indexes next() and previous() work on.

        Returns:
            The range, or None if the version has no such parts
        """
        return 0, len(self._parts)

    def default_bound(self, part: Part) -> Part:
        """Return the largest value ``part`` may take when no format says otherwise."""
        bound = Part()
        if part.is_integer:
            bound.set_to_max_integer()
        else:
            bound.set_to_max_string(max(1, len(part.get_string())))
        return bound

    def next(self, pos: int, format: Optional["Scheme"] = None) -> bool:
        """Increment the version at position ``pos``.

        Missing parts up to ``pos`` are added first. A part already at its
        maximum (taken from ``format`` when it has a part at that position)
        is removed and the carry moves to the part on its left. Every part
        after the incremented one is removed, except that incrementing the
        first part keeps a zero second part (``1.3.2`` becomes ``2.0``).

        Args:
            pos: Position relative to the start of the upstream parts
            format: Optional version giving the maximum of each position

        Returns:
            False when the first part is already at its maximum

        Raises:
            InvalidParameterError: If ``pos`` is out of range or the version
                would need more than ``MAX_PARTS`` parts
        """
        self._check_position(pos, "next")
        bounds = self.upstream_range()
        if bounds is None:
            return self.fail(ErrorCode.NO_PARTS, self.no_upstream_message)
        start, end = bounds
        pos += start
        end = self._pad(start, end, pos, format)

        while True:
            part = self._parts[pos]
            bound = self._bound(format, pos - start, part)
            if part.compare(bound) != 0 and part.next():
                break
            if pos <= start:
                return self.fail(
                    ErrorCode.MAXIMUM_LIMIT,
                    "maximum limit reached; cannot increment version any further.",
                )
            self.erase(pos)
            end -= 1
            pos -= 1

        if pos == start and pos + 1 < end and self._parts[pos + 1].is_integer:
            self._parts[pos + 1].set_integer(0)
            pos += 1
        for idx in range(end - 1, pos, -1):
            self.erase(idx)
        return True

    def previous(self, pos: int, format: Optional["Scheme"] = None) -> bool:
        """Decrement the version at position ``pos``.

        Zero parts are reset to their maximum and the borrow moves to the
        part on their left. Zero parts left at the end are then trimmed,
        keeping at least two upstream parts.

        Args:
            pos: Position relative to the start of the upstream parts
            format: Optional version giving the maximum of each position

        Returns:
            False when every part up to ``pos`` is already zero
        """
        self._check_position(pos, "previous")
        bounds = self.upstream_range()
        if bounds is None:
            return self.fail(ErrorCode.NO_PARTS, self.no_upstream_message)
        start, end = bounds
        pos += start
        end = self._pad(start, end, pos, format)

        while True:
            part = self._parts[pos]
            if not part.is_zero() and part.previous():
                break
            if pos <= start:
                return self.fail(
                    ErrorCode.MINIMUM_LIMIT,
                    "minimum limit reached; cannot decrement version any further.",
                )
            bound = self._bound(format, pos - start, part)
            if bound.is_integer:
                part.set_integer(bound.get_integer())
            else:
                part.set_string(bound.get_string())
            pos -= 1

        while pos > start + 1 and pos + 1 == end and self._parts[pos].is_zero():
            self.erase(pos)
            end -= 1
            pos -= 1
        return True

    def _check_position(self, pos: int, function: str) -> None:
        if pos < 0:
            raise InvalidParameterError(
                f"position calling {function}() cannot be a negative number."
            )
        if pos >= MAX_PARTS:
            raise InvalidParameterError(
                f"position calling {function}() cannot be more than {MAX_PARTS}."
            )

    def _format_part(self, format: Optional["Scheme"], offset: int) -> Optional[Part]:
        if format is None:
            return None
        bounds = format.upstream_range()
        if bounds is None:
            return None
        start, end = bounds
        if start + offset < end:
            return format._parts[start + offset]
        return None

    def _bound(self, format: Optional["Scheme"], offset: int, part: Part) -> Part:
        template = self._format_part(format, offset)
        if template is not None:
            return template
        return self.default_bound(part)

    def _pad(self, start: int, end: int, pos: int, format: Optional["Scheme"]) -> int:
        """Insert zero parts until ``pos`` is part of the upstream range."""
        while end <= pos:
            template = self._format_part(format, end - start)
            padding = Part()
            if template is not None and not template.is_integer:
                padding.set_string("a" * len(template.get_string()))
            if end > 0:
                padding.separator = template.separator if template is not None else "."
            self.insert(end, padding)
            end += 1
        return end
