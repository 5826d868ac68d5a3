# SPDX-License-Identifier: MIT
"""Conversion between integers and Roman numerals.

Only the range 1 to 3999 can be written with the standard letters
(``I``, ``V``, ``X``, ``L``, ``C``, ``D`` and ``M``).
"""

from __future__ import annotations

MIN_ROMAN = 1
MAX_ROMAN = 3999

ROMAN_DIGITS = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_THOUSANDS = ("", "M", "MM", "MMM")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_UNITS = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")


def from_roman(text: str) -> int:
    """Decode a Roman numeral.

    Letters are case insensitive. Non standard forms are accepted as long as
    each letter is a Roman digit (``IIII`` is 4, ``IL`` is 49).

    Args:
        text: The numeral to decode

    Returns:
        The decoded value, or 0 when ``text`` is empty or includes a
        character that is not a Roman digit

    Examples:
        >>> from_roman("MCMLXXXIV")
        1984
        >>> from_roman("iiii")
        4
        >>> from_roman("1.0")
        0
    """
    digits: list[int] = []
    for c in text:
        value = ROMAN_DIGITS.get(c.upper() if "a" <= c <= "z" else c)
        if value is None:
            return 0
        digits.append(value)
    if not digits:
        return 0

    # walk from the right; a smaller digit before a larger one switches to
    # subtracting until a larger digit shows up again
    result = digits[-1]
    subtract = False
    for idx in range(len(digits) - 2, -1, -1):
        current, following = digits[idx], digits[idx + 1]
        if current == following:
            result += -current if subtract else current
        elif current < following:
            result -= current
            subtract = True
        else:
            result += current
            subtract = False

    return max(result, 0)


def to_roman(value: int) -> str:
    """Encode an integer as a Roman numeral.

    Args:
        value: Number between 1 and 3999

    Returns:
        The numeral in uppercase subtractive form, or ``""`` when ``value``
        is out of range

    Examples:
        >>> to_roman(4)
        'IV'
        >>> to_roman(4000)
        ''
    """
    if value < MIN_ROMAN or value > MAX_ROMAN:
        return ""
    return (
        _THOUSANDS[value // 1000]
        + _HUNDREDS[value // 100 % 10]
        + _TENS[value // 10 % 10]
        + _UNITS[value % 10]
    )
