# SPDX-License-Identifier: MIT
"""The version schemes supported by versiontheca."""

from __future__ import annotations

from enum import Enum
from typing import Union

from ..errors import InvalidParameterError
from ..scheme import Scheme
from .basic import BasicScheme
from .debian import DebianScheme
from .decimal import DecimalScheme
from .roman import RomanScheme
from .rpm import RpmScheme
from .unicode import UnicodeScheme


class SchemeKind(str, Enum):
    """Names of the available schemes."""

    BASIC = "basic"
    DEBIAN = "debian"
    DECIMAL = "decimal"
    ROMAN = "roman"
    RPM = "rpm"
    UNICODE = "unicode"


SCHEMES: dict[SchemeKind, type[Scheme]] = {
    SchemeKind.BASIC: BasicScheme,
    SchemeKind.DEBIAN: DebianScheme,
    SchemeKind.DECIMAL: DecimalScheme,
    SchemeKind.ROMAN: RomanScheme,
    SchemeKind.RPM: RpmScheme,
    SchemeKind.UNICODE: UnicodeScheme,
}


def create_scheme(kind: Union[SchemeKind, str]) -> Scheme:
    """Create an empty scheme of the given kind.

    Args:
        kind: A SchemeKind or its name (case insensitive)

    Returns:
        A new scheme instance

    Raises:
        InvalidParameterError: If the kind is unknown
    """
    try:
        scheme_kind = SchemeKind(kind.lower() if isinstance(kind, str) else kind)
    except ValueError:
        names = ", ".join(k.value for k in SchemeKind)
        raise InvalidParameterError(f"unknown version scheme '{kind}'; expected one of {names}.") from None
    return SCHEMES[scheme_kind]()


__all__ = [
    "SchemeKind",
    "SCHEMES",
    "create_scheme",
    "BasicScheme",
    "DebianScheme",
    "DecimalScheme",
    "RomanScheme",
    "RpmScheme",
    "UnicodeScheme",
]
