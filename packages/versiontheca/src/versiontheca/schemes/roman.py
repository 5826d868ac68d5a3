# SPDX-License-Identifier: MIT
"""Versions written with Roman numerals (``II.IV``).

Any part that decodes as a Roman numeral between 1 and 3999 is handled as
an integer and written back in the normalized subtractive form.
"""

from __future__ import annotations

from typing import Union

from ..part import Part
from ..roman_numerals import MAX_ROMAN, MIN_ROMAN, from_roman, to_roman
from ..scheme import Scheme

ROMAN_KIND = "R"


class RomanScheme(Scheme):
    name = "roman"

    def parse(self, text: Union[str, bytes]) -> bool:
        if not super().parse(text):
            return False
        for part in self:
            if part.is_integer:
                continue
            value = from_roman(part.get_string())
            if MIN_ROMAN <= value <= MAX_ROMAN:
                part.set_integer(value)
                part.kind = ROMAN_KIND
        return True

    def part_to_string(self, part: Part) -> str:
        if part.kind == ROMAN_KIND and part.is_integer:
            # 0 has no Roman numeral
            return to_roman(part.get_integer()) or part.to_string()
        return part.to_string()

    def default_bound(self, part: Part) -> Part:
        if part.kind != ROMAN_KIND:
            return super().default_bound(part)
        bound = Part()
        bound.set_integer(MAX_ROMAN)
        return bound
