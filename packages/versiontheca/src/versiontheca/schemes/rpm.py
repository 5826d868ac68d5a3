# SPDX-License-Identifier: MIT
"""RPM package versions.

Format: ``[epoch:]version[-release]``

Parts of the version are separated by ``.`` or ``+``. Letters, ``~``, ``^``
and ``_`` are accepted; ``_`` is ignored when comparing. The character
order is ``~`` first, then the end of a string, then ``+``, uppercase and
lowercase letters, and ``^`` last, so ``1.1~rc1 < 1.1 < 1.1^post1``.
"""

from __future__ import annotations

import string
from typing import Optional, Union

from ..errors import EmptyVersionError, ErrorCode
from ..part import Part
from ..scheme import Scheme

EPOCH_KIND = ":"
REVISION_KIND = "-"

_ORDER = {c: idx for idx, c in enumerate("~\0+" + string.ascii_uppercase + string.ascii_lowercase + "^")}
_VALID_CHARACTERS = frozenset(string.ascii_letters + string.digits + "~^_")


def compare_characters(a: str, b: str) -> int:
    """Compare two characters in RPM order; ``""`` is the end of a string."""
    left = _ORDER[a or "\0"]
    right = _ORDER[b or "\0"]
    return (left > right) - (left < right)


def compare_strings(lhs: str, rhs: str) -> int:
    """Compare two non-digit runs, ignoring underscores."""
    lhs = lhs.replace("_", "")
    rhs = rhs.replace("_", "")
    for idx in range(max(len(lhs), len(rhs))):
        a = lhs[idx] if idx < len(lhs) else ""
        b = rhs[idx] if idx < len(rhs) else ""
        r = compare_characters(a, b)
        if r != 0:
            return r
    return 0


def _compare_parts(lhs: Optional[Part], rhs: Optional[Part]) -> int:
    lint = lhs is not None and lhs.is_integer
    rint = rhs is not None and rhs.is_integer
    lnumber = lhs.get_integer() if lint else 0
    rnumber = rhs.get_integer() if rint else 0
    ltext = lhs.get_string() if lhs is not None and not lint else ""
    rtext = rhs.get_string() if rhs is not None and not rint else ""

    if lint and rint:
        return (lnumber > rnumber) - (lnumber < rnumber)
    if not lint and not rint:
        return compare_strings(ltext, rtext)
    # a number beats a string, unless it is a 0 facing nothing at all
    if lint:
        return 1 if lnumber != 0 or rtext else 0
    return -1 if rnumber != 0 or ltext else 0


class RpmScheme(Scheme):
    """Parse, compare and increment RPM versions."""

    name = "rpm"
    no_upstream_message = "no parts in this RPM version; cannot compute upstream start/end."

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
                f"position of ':' and/or '-' is invalid in \"{text}\".",
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

        if not self.parse_version(text[colon + 1 : dash if dash != -1 else len(text)], separator):
            return False

        if dash != -1:
            start = len(self)
            if not self.parse_version(text[dash + 1 :], "-"):
                return False
            for idx in range(start, len(self)):
                self[idx].kind = REVISION_KIND

        return True

    def is_valid_character(self, c: str) -> bool:
        return c in _VALID_CHARACTERS

    def is_separator(self, c: str) -> bool:
        return c in "+."

    def upstream_range(self) -> Optional[tuple[int, int]]:
        if self.is_empty():
            return None
        start = 1 if self[0].kind == EPOCH_KIND else 0
        end = len(self)
        for idx in range(start, len(self)):
            if self[idx].kind == REVISION_KIND:
                end = idx
                break
        return start, end

    def to_string(self) -> str:
        if self.is_empty():
            self.fail(ErrorCode.NO_PARTS, "no parts to output.")
            return ""

        start, end = self.upstream_range()
        last = end
        while last > start + 2 and self[last - 1].is_zero():
            last -= 1

        result = ""
        if start == 1 and not self[0].is_zero():
            result = self[0].to_string() + ":"
        result += self.join_parts(start, last, skip_first_separator=True)
        if last - start == 1:
            result += ".0"
        return result + self.join_parts(end, len(self))

    def compare(self, other: Optional[Scheme]) -> int:
        """Compare two RPM versions.

        Epochs are compared first, then the version parts one by one, then
        the release parts. Numbers compare as numbers and strings with the
        RPM character order.

        Raises:
            EmptyVersionError: If either version has no parts
        """
        if self.is_empty() or other is None or other.is_empty():
            raise EmptyVersionError("one or both of the input versions are empty.")
        if not isinstance(other, RpmScheme):
            return super().compare(other)

        lepoch = self[0].get_integer() if self[0].kind == EPOCH_KIND else 0
        repoch = other[0].get_integer() if other[0].kind == EPOCH_KIND else 0
        if lepoch != repoch:
            return -1 if lepoch < repoch else 1

        for kind in ("", REVISION_KIND):
            left = [part for part in self if part.kind == kind]
            right = [part for part in other if part.kind == kind]
            for idx in range(max(len(left), len(right))):
                r = _compare_parts(
                    left[idx] if idx < len(left) else None,
                    right[idx] if idx < len(right) else None,
                )
                if r != 0:
                    return r
        return 0
