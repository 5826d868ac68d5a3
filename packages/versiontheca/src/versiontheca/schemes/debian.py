# SPDX-License-Identifier: MIT
"""Debian package versions.

Format: ``[epoch:]upstream[~release][-revision]``

- ``epoch`` is an integer; larger epochs always win
- ``upstream`` must start with a digit
- ``~release`` sorts before the same version without it
  (``1.0~rc1 < 1.0``)
- ``revision`` is the Debian packaging revision

The order of non-digit characters: ``~`` sorts before the end of a string,
which sorts before ``+``, then letters, then everything else.
"""

from __future__ import annotations

import string
from typing import Optional, Union

from ..errors import ErrorCode, EmptyVersionError
from ..part import Part
from ..scheme import Scheme

EPOCH_KIND = ":"
REVISION_KIND = "-"
RELEASE_KIND = "~"

_LETTERS = frozenset(string.ascii_letters)
_BASE_CHARACTERS = frozenset(string.ascii_letters + string.digits + "+~")


def compare_characters(a: str, b: str) -> int:
    """Compare two characters in dpkg order; ``""`` is the end of a string."""
    left = _character_order(a)
    right = _character_order(b)
    return (left > right) - (left < right)


def _character_order(c: str) -> int:
    if c == "~":
        return -1
    if not c:
        return 0
    if c == "+":
        return 1
    if c in _LETTERS:
        return ord(c)
    return ord(c) + 0x100


def compare_strings(lhs: str, rhs: str) -> int:
    """Compare two non-digit runs character by character."""
    for idx in range(max(len(lhs), len(rhs))):
        a = lhs[idx] if idx < len(lhs) else ""
        b = rhs[idx] if idx < len(rhs) else ""
        r = compare_characters(a, b)
        if r != 0:
            return r
    return 0


def _pairs(parts: list[Part]) -> list[tuple[str, int]]:
    """Group parts in (non-digit run, number) pairs the way dpkg reads them."""
    pairs: list[tuple[str, int]] = []
    idx = 0
    while idx < len(parts):
        text = ""
        number = 0
        if not parts[idx].is_integer:
            text = parts[idx].get_string()
            idx += 1
        if idx < len(parts) and parts[idx].is_integer:
            number = parts[idx].get_integer()
            idx += 1
        pairs.append((text, number))
    return pairs


def _compare_sections(lhs: list[Part], rhs: list[Part]) -> int:
    left = _pairs(lhs)
    right = _pairs(rhs)
    for idx in range(max(len(left), len(right))):
        ltext, lnumber = left[idx] if idx < len(left) else ("", 0)
        rtext, rnumber = right[idx] if idx < len(right) else ("", 0)
        r = compare_strings(ltext, rtext)
        if r != 0:
            return r
        if lnumber != rnumber:
            return -1 if lnumber < rnumber else 1
    return 0


class DebianScheme(Scheme):
    """Parse, compare and increment Debian versions."""

    name = "debian"
    no_upstream_message = "no parts in this Debian version; cannot compute next/previous."

    def __init__(self) -> None:
        super().__init__()
        self._accepted = _BASE_CHARACTERS

    def parse(self, text: Union[str, bytes]) -> bool:
        decoded = self._start_parse(text)
        if decoded is None:
            return False
        text = decoded

        colon = text.find(":")
        dash = text.rfind("-")
        if (colon != -1 and dash != -1 and colon >= dash) or colon == 0 or dash == 0:
            return self.fail(
                ErrorCode.POSITIONAL_SYNTAX,
                f"invalid ':' and/or '-' positions in \"{text}\".",
            )

        separator = ""
        if colon != -1:
            epoch = Part()
            if not epoch.set_value(text[:colon]):
                error = epoch.take_error()
                return self.fail(error.code, error.message)
            if not epoch.is_integer:
                return self.fail(ErrorCode.EPOCH_NOT_INTEGER, "epoch must be a valid integer.")
            epoch.kind = EPOCH_KIND
            self.append(epoch)
            separator = ":"

        upstream = text[colon + 1 : dash if dash != -1 else len(text)]

        # the upstream may include ':' and '-' only when an epoch and a
        # revision make them unambiguous
        extra = ""
        if colon != -1:
            extra += ":"
        if dash != -1:
            extra += "-"
        self._accepted = _BASE_CHARACTERS | frozenset(extra)
        try:
            start = len(self)
            if not self.parse_version(upstream, separator):
                return False
            if not self[start].is_integer:
                return self.fail(
                    ErrorCode.NOT_A_NUMBER,
                    f'a debian version must always start with a number "{text}".',
                )
            self._tag_release(start)

            self._accepted = _BASE_CHARACTERS
            if dash != -1 and not self._parse_section(text[dash + 1 :], "-", REVISION_KIND):
                return False
        finally:
            self._accepted = _BASE_CHARACTERS

        return True

    def _parse_section(self, text: str, separator: str, kind: str) -> bool:
        start = len(self)
        if not self.parse_version(text, separator):
            return False
        for idx in range(start, len(self)):
            self[idx].kind = kind
        return True

    def _tag_release(self, start: int) -> None:
        """Tag the upstream parts from the first one starting with ``~`` as the release."""
        for idx in range(start, len(self)):
            part = self[idx]
            if not part.is_integer and part.get_string().startswith("~"):
                for release in range(idx, len(self)):
                    self[release].kind = RELEASE_KIND
                return

    def is_valid_character(self, c: str) -> bool:
        return c in self._accepted

    def upstream_range(self) -> Optional[tuple[int, int]]:
        if self.is_empty():
            return None
        start = 1 if self[0].kind == EPOCH_KIND else 0
        end = len(self)
        for idx in range(start, len(self)):
            if self[idx].kind in (REVISION_KIND, RELEASE_KIND):
                end = idx
                break
        return start, end

    def to_string(self) -> str:
        if self.is_empty():
            self.fail(ErrorCode.NO_PARTS, "no parts to output.")
            return ""

        start, end = self.upstream_range()
        # zeros in front of a release are significant: 1.0~rc1 < 1.0.0~rc1
        released = end < len(self) and self[end].kind == RELEASE_KIND
        last = end
        while not released and last > start + 2 and self[last - 1].is_zero():
            last -= 1

        result = ""
        if start == 1:
            epoch = self[0]
            if not epoch.is_zero() or any(
                ":" in part.to_string() for part in self if part.kind != EPOCH_KIND
            ):
                result = epoch.to_string() + ":"
        result += self.join_parts(start, last, skip_first_separator=True)
        if last - start == 1 and not released:
            result += ".0"
        return result + self.join_parts(end, len(self))

    def compare(self, other: Optional[Scheme]) -> int:
        """Compare two Debian versions the way dpkg does.

        The epochs are compared first, then the upstream versions with their
        release, then the revisions. Each section is read as pairs of a
        non-digit run and a number; the runs use the dpkg character order.

        Raises:
            EmptyVersionError: If either version has no parts
        """
        if self.is_empty() or other is None or other.is_empty():
            raise EmptyVersionError("one or both of the input versions are empty.")
        if not isinstance(other, DebianScheme):
            return super().compare(other)

        left = self._sections()
        right = other._sections()
        for lhs, rhs in zip(left, right):
            r = _compare_sections(lhs, rhs)
            if r != 0:
                return r
        return 0

    def _sections(self) -> tuple[list[Part], list[Part], list[Part]]:
        """Split the parts in epoch, upstream (release included) and revision."""
        epoch: list[Part] = []
        upstream: list[Part] = []
        revision: list[Part] = []
        for part in self:
            if part.kind == EPOCH_KIND:
                epoch.append(part)
            elif part.kind == REVISION_KIND:
                revision.append(part)
            else:
                upstream.append(part)
        return epoch, upstream, revision
