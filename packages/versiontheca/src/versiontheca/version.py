# SPDX-License-Identifier: MIT
"""The Version object: a scheme, its parsed parts and its validity."""

from __future__ import annotations

from typing import Any, Optional, Union

from .errors import Diagnostic, InvalidVersionError
from .part import Part
from .scheme import Scheme
from .schemes import SchemeKind, create_scheme
from .schemes.basic import BasicScheme


class Version:
    """A version string parsed according to a scheme.

    A Version cannot be copied since it owns its scheme; parse the string
    again in a new Version instead::

        copy = Version(DebianScheme(), original.get_version())

    Args:
        scheme: The scheme to parse with (defaults to BasicScheme)
        text: Optional version string to parse immediately
    """

    def __init__(self, scheme: Optional[Scheme] = None, text: str = ""):
        self._scheme = scheme if scheme is not None else BasicScheme()
        self._valid = False
        self._format: Optional[Scheme] = None
        if text:
            self.set_version(text)

    def __repr__(self) -> str:
        text = "" if self._scheme.is_empty() else self._scheme.to_string()
        return f"Version({type(self._scheme).__name__}(), {text!r})"

    def __str__(self) -> str:
        return self.get_version()

    def __copy__(self) -> "Version":
        raise TypeError("a Version cannot be copied; parse its string in a new Version instead.")

    def __deepcopy__(self, memo: dict[int, Any]) -> "Version":
        raise TypeError("a Version cannot be copied; parse its string in a new Version instead.")

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    def get_scheme(self) -> Scheme:
        return self._scheme

    def set_format(self, format: "Version") -> None:
        """Use ``format`` as the per position maximum of next() and previous()."""
        self._format = format._scheme

    def set_version(self, text: str) -> bool:
        """Parse ``text``; on failure the version becomes empty and invalid."""
        self._valid = self._scheme.parse(text)
        if not self._valid:
            self._scheme.clear()
        return self._valid

    def next(self, pos: int) -> bool:
        """Increment the version at ``pos``; on failure it becomes empty and invalid."""
        self._valid = self._scheme.next(pos, self._format)
        if not self._valid:
            self._scheme.clear()
        return self._valid

    def previous(self, pos: int) -> bool:
        """Decrement the version at ``pos``; on failure it becomes empty and invalid."""
        self._valid = self._scheme.previous(pos, self._format)
        if not self._valid:
            self._scheme.clear()
        return self._valid

    def is_valid(self) -> bool:
        return self._valid

    def size(self) -> int:
        return self._scheme.size()

    def get_version(self) -> str:
        """Return the canonical version, or ``""`` (and an error) when empty."""
        return self._scheme.to_string()

    def get_last_error(self, clear: bool = True) -> str:
        return self._scheme.get_last_error(clear)

    def take_error(self) -> Optional[Diagnostic]:
        return self._scheme.take_error()

    def peek_error(self) -> Optional[Diagnostic]:
        return self._scheme.peek_error()

    def _get(self, index: int) -> int:
        if index >= self._scheme.size():
            return 0
        part = self._scheme[index]
        if not part.is_integer:
            return 0
        return part.get_integer()

    def _set(self, index: int, value: int) -> None:
        while self._scheme.size() <= index:
            padding = Part()
            if self._scheme.size() > 0:
                padding.separator = "."
            self._scheme.append(padding)
        self._scheme[index].set_integer(value)
        self._valid = True

    def get_major(self) -> int:
        return self._get(0)

    def get_minor(self) -> int:
        return self._get(1)

    def get_patch(self) -> int:
        return self._get(2)

    def get_build(self) -> int:
        return self._get(3)

    def set_major(self, value: int) -> None:
        self._set(0, value)

    def set_minor(self, value: int) -> None:
        self._set(1, value)

    def set_patch(self, value: int) -> None:
        self._set(2, value)

    def set_build(self, value: int) -> None:
        self._set(3, value)

    def compare(self, other: "Version") -> int:
        """Compare with another version.

        Returns:
            -1, 0 or 1

        Raises:
            InvalidVersionError: If either version is not valid
            EmptyVersionError: If either version has no parts
        """
        if not self._valid or not other._valid:
            raise InvalidVersionError("one or both of the input versions are not valid.")
        return self._scheme.compare(other._scheme)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: "Version") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Version") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Version") -> bool:
        return self.compare(other) >= 0


def new_version(kind: Union[SchemeKind, str], text: str = "") -> Version:
    """Create a Version of the given scheme and parse ``text``.

    Args:
        kind: basic, debian, decimal, roman, rpm or unicode
        text: The version string

    Returns:
        The new Version; check :meth:`Version.is_valid`

    Raises:
        InvalidParameterError: If the scheme is unknown

    Examples:
        >>> new_version("debian", "1:2.0-3").get_version()
        '1:2.0-3'
        >>> new_version("basic", "1.2.3") < new_version("basic", "1.10")
        True
    """
    return Version(create_scheme(kind), text)
