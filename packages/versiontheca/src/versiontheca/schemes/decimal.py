# SPDX-License-Identifier: MIT
"""Decimal versions: a number with an optional fraction (``3.14``).

The fraction keeps the number of digits it was written with, so ``3.000``
stays ``3.000``. Parts compare as integers, the same way next() and
previous() count them: ``3.10`` is larger than ``3.9``.
"""

from __future__ import annotations

import math
from typing import Union

from ..errors import ErrorCode
from ..scheme import Scheme


class DecimalScheme(Scheme):
    """One or two integers separated by a period."""

    name = "decimal"

    def parse(self, text: Union[str, bytes]) -> bool:
        if not super().parse(text):
            return False
        if (
            len(self) in (1, 2)
            and self[0].is_integer
            and (len(self) == 1 or (self[1].separator == "." and self[1].is_integer))
        ):
            return True
        return self.fail(
            ErrorCode.INVALID_FORMAT,
            "a decimal version must be one or two integers separated by a period (.).",
        )

    def is_valid_character(self, c: str) -> bool:
        return "0" <= c <= "9"

    def to_string(self) -> str:
        if self.is_empty():
            self.fail(ErrorCode.NO_PARTS, "no parts to output.")
            return ""
        fraction = 0
        width = 1
        # parts added by next() past the fraction are not part of the notation
        if len(self) >= 2:
            fraction = self[1].get_integer()
            width = max(1, self[1].width)
        return f"{self[0].get_integer()}.{fraction:0{width}d}"

    def get_decimal_version(self) -> float:
        """Return the version as a float, or NaN when empty.

        Examples:
            >>> scheme = DecimalScheme()
            >>> scheme.parse("3.05")
            True
            >>> scheme.get_decimal_version()
            3.05
        """
        if self.is_empty():
            return math.nan
        version = float(self[0].get_integer())
        if len(self) >= 2:
            version += self[1].get_integer() / 10 ** max(1, self[1].width)
        return version

