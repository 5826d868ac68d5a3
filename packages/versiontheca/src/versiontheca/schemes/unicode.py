# SPDX-License-Identifier: MIT
"""Unicode versions: any printable text, parts separated by periods."""

from __future__ import annotations

from ..scheme import Scheme


class UnicodeScheme(Scheme):
    """The generic scheme, without restrictions on the characters used."""

    name = "unicode"
