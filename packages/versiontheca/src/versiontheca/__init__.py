# SPDX-License-Identifier: MIT
"""Parse, canonicalize, compare and increment version strings.

Several schemes are supported: basic (``1.2.3``), Debian
(``1:2.0~rc1-3``), RPM (``1:2.0^post1-3``), decimal (``3.14``), Roman
numerals (``II.IV``) and free form Unicode.

Example:
    >>> from versiontheca import new_version
    >>>
    >>> v = new_version("debian", "1.3.2")
    >>> v.next(4)
    True
    >>> v.get_version()
    '1.3.2.0.1'
    >>>
    >>> new_version("rpm", "1.1~rc1") < new_version("rpm", "1.1")
    True
"""

__version__ = "0.1.0"

from .errors import (
    Diagnostic,
    EmptyVersionError,
    ErrorCode,
    InvalidParameterError,
    InvalidVersionError,
    LogicError,
    VersionthecaError,
    WrongTypeError,
)
from .part import MAX_INTEGER, Part
from .roman_numerals import from_roman, to_roman
from .scheme import MAX_PARTS, Scheme
from .schemes import (
    BasicScheme,
    DebianScheme,
    DecimalScheme,
    RomanScheme,
    RpmScheme,
    SchemeKind,
    UnicodeScheme,
    create_scheme,
)
from .version import Version, new_version

__all__ = [
    # Version objects
    "Version",
    "new_version",
    "Part",
    "MAX_INTEGER",
    "MAX_PARTS",
    # Schemes
    "Scheme",
    "SchemeKind",
    "create_scheme",
    "BasicScheme",
    "DebianScheme",
    "DecimalScheme",
    "RomanScheme",
    "RpmScheme",
    "UnicodeScheme",
    # Roman numerals
    "from_roman",
    "to_roman",
    # Errors
    "Diagnostic",
    "ErrorCode",
    "VersionthecaError",
    "InvalidParameterError",
    "WrongTypeError",
    "EmptyVersionError",
    "InvalidVersionError",
    "LogicError",
]
