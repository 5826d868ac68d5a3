# SPDX-License-Identifier: MIT
"""Basic versions: integers separated by periods (``1.2.3``)."""

from __future__ import annotations

from typing import Union

from ..errors import ErrorCode
from ..scheme import Scheme


class BasicScheme(Scheme):
    """Only accepts versions made of integers separated by periods."""

    name = "basic"

    def parse(self, text: Union[str, bytes]) -> bool:
        if not super().parse(text):
            return False
        if not all(part.is_integer for part in self):
            return self.fail(
                ErrorCode.INVALID_FORMAT,
                "basic versions only support integers separated by periods (.).",
            )
        return True
