# SPDX-License-Identifier: MIT
"""Unit tests for RPM versions."""

import pytest

from versiontheca import (
    BasicScheme,
    EmptyVersionError,
    InvalidParameterError,
    InvalidVersionError,
    RpmScheme,
    Version,
)


def rpm(text: str, expected: str = "") -> Version:
    """Parse ``text`` and check its canonical form."""
    v = Version(RpmScheme(), text)
    assert v.is_valid(), v.get_last_error(clear=False)
    assert v.get_version() == (expected or text)
    return v


class TestValidRpmVersions:
    """Tests for parsing and canonicalizing RPM versions."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.0", ""),
            ("3", "3.0"),
            ("1.2.0.0", "1.2"),
            ("1:1.1", ""),
            ("0:1.1", "1.1"),
            ("1.1-rc1", ""),
            ("1.1-alpha", ""),
            ("1.1~before", ""),
            ("1.1^post1", ""),
            ("1.1-_rc1", ""),
            ("2.0+1", ""),
            ("1.3a", "1.3"),
        ],
    )
    def test_canonical(self, text, expected):
        """Test the canonical form of valid versions."""
        rpm(text, expected)

    def test_absolute_accessors(self):
        """Test that the accessors read parts by index and strings as 0."""
        a = rpm("53A2z")
        assert a.get_major() == 53
        assert a.get_minor() == 0
        assert a.get_patch() == 2
        assert a.get_build() == 0


class TestInvalidRpmVersions:
    """Tests for strings that are not RPM versions."""

    @pytest.mark.parametrize(
        "text,message",
        [
            ("3A3:1.2.3-pre55", "epoch must be a valid integer."),
            ("33:-55", "a version value cannot be an empty string."),
            (":", "position of ':' and/or '-' is invalid in \":\"."),
            ("a:", "epoch must be a valid integer."),
            ("-10:", "position of ':' and/or '-' is invalid in \"-10:\"."),
            ("99999999999999999:", "integer too large for a valid version."),
            ("3:", "a version value cannot be an empty string."),
            ("-751", "position of ':' and/or '-' is invalid in \"-751\"."),
            ("-", "position of ':' and/or '-' is invalid in \"-\"."),
            ("--", "found unexpected character: \\U00002D in input."),
            ("+-", "a version value cannot be an empty string."),
            ("#-", "found unexpected character: \\U000023 in input."),
            ("55:435123-", "a version value cannot be an empty string."),
            ("-a", "position of ':' and/or '-' is invalid in \"-a\"."),
            ("-3$7", "position of ':' and/or '-' is invalid in \"-3$7\"."),
            ("32:1.2.55-3:7", "found unexpected character: \\U00003A in input."),
            ("3.7#", "found unexpected character: \\U000023 in input."),
            ("3$7", "found unexpected character: \\U000024 in input."),
            ("3;7", "found unexpected character: \\U00003B in input."),
        ],
    )
    def test_invalid(self, text, message):
        """Test the error reported for each invalid version."""
        v = Version(RpmScheme(), text)
        assert not v.is_valid()
        assert v.get_last_error() == message


class TestNextPrevious:
    """Tests for next and previous on RPM versions."""

    def test_with_letters(self):
        """Test that a format with letters drives string parts."""
        a = rpm("1.3.2")
        f = rpm("9.9.9z.9")
        assert f.size() == 5
        a.set_format(f)

        assert a.next(4)
        assert a.size() == 5
        assert a.get_build() == 0
        assert a.get_version() == "1.3.2a.1"
        for n in range(2, 10):
            assert a.next(4)
            assert a.get_version() == f"1.3.2a.{n}"
        assert a.next(4)
        assert a.get_version() == "1.3.2b"
        assert a.size() == 4

        assert a.previous(4)
        assert a.get_version() == "1.3.2a.9"
        for n in range(8, 0, -1):
            assert a.previous(4)
            assert a.get_version() == f"1.3.2a.{n}"
        assert a.previous(4)
        assert a.get_version() == "1.3.2"
        assert a.size() == 3

        assert a.previous(4)
        assert a.size() == 5
        assert a.get_version() == "1.3.1z.9"
        assert a.previous(4)
        assert a.get_version() == "1.3.1z.8"
        assert a.get_patch() == 1
        assert f.get_version() == "9.9.9z.9"

    def test_trailing_letter(self):
        """Test stepping down a trailing letter."""
        a = rpm("1.3c")
        a.set_format(rpm("9.9"))
        assert a.previous(2)
        assert a.get_version() == "1.3b"
        assert a.previous(2)
        assert a.get_version() == "1.3"
        assert a.size() == 2
        assert a.previous(2)
        assert a.get_version() == "1.2.4294967295"

    def test_zero_letter_borrows(self):
        """Test that a trailing 'a' borrows from the part before it."""
        a = rpm("1.3a", "1.3")
        assert a.size() == 3
        a.set_format(rpm("9.9"))
        assert a.previous(2)
        assert a.get_version() == "1.2z"
        assert a.previous(2)
        assert a.get_version() == "1.2y"

    def test_epoch(self):
        """Test that positions start after the epoch."""
        a = rpm("75:1.5.3")
        assert a.size() == 4
        assert a.next(2)
        assert a.get_version() == "75:1.5.4"
        assert a.previous(2)
        assert a.get_version() == "75:1.5.3"
        assert a.previous(2)
        assert a.get_version() == "75:1.5.2"

    def test_release(self):
        """Test that the release is kept."""
        a = rpm("5:1.5.3-r5")
        assert a.previous(4)
        assert a.get_version() == "5:1.5.2.4294967295.4294967295-r5"
        assert a.next(4)
        assert a.get_version() == "5:1.5.3-r5"
        assert a.next(4)
        assert a.get_version() == "5:1.5.3.0.1-r5"
        assert a.previous(4)
        assert a.get_version() == "5:1.5.3-r5"

    def test_without_version(self):
        """Test next and previous on an empty version."""
        v = Version(RpmScheme())
        assert not v.next(0)
        assert v.get_last_error() == "no parts in this RPM version; cannot compute upstream start/end."
        assert not v.previous(0)
        assert v.get_last_error() == "no parts in this RPM version; cannot compute upstream start/end."

    def test_too_many_parts(self):
        """Test that padding beyond MAX_PARTS raises."""
        a = rpm("103:1.2.3.4.5-r5with6many8release9parts")
        assert a.size() == 15
        with pytest.raises(InvalidParameterError, match="trying to insert more parts"):
            a.next(15)
        assert a.size() == 25

        scheme = a.scheme
        for _ in range(10):
            scheme.erase(15)
        assert a.size() == 15
        with pytest.raises(InvalidParameterError, match="trying to erase a non-existent part."):
            scheme.erase(15)
        with pytest.raises(InvalidParameterError, match="requested too many parts."):
            scheme.resize(26)
        scheme.resize(0)
        assert a.size() == 0


class TestCompare:
    """Tests for the RPM ordering."""

    def test_many_versions(self):
        """Test the relative order of a set of versions."""
        a = rpm("1.2")
        b = rpm("1.1")
        c = rpm("1.2.0.0", "1.2")
        d = rpm("1:1.1")
        e = rpm("1.1-rc1")
        f = rpm("1.1-rc2")
        g = rpm("1.1-alpha")
        h = rpm("1.1~before")
        i = rpm("1.1-_rc1")
        j = rpm("1.1-rc1_")
        k = rpm("1.1q")
        l = rpm("1.1f")  # noqa: E741
        m = rpm("1.1.5")

        assert a > b
        assert a == c
        assert a < d
        assert b < d
        assert b < e
        assert e < f
        assert g < e
        assert g < f
        assert b > h
        assert e == i
        assert e == j
        assert i == j
        assert k > l
        assert c > k
        assert c > l
        assert m > k
        assert m > l

    def test_character_order(self):
        """Test that '~' sorts first and '^' sorts last."""
        assert rpm("1.1~rc1") < rpm("1.1")
        assert rpm("1.1") < rpm("1.1^post1")
        assert rpm("1.1~rc1") < rpm("1.1~rc2")

    def test_case_sensitivity(self):
        """Test that uppercase letters sort before lowercase letters."""
        assert rpm("53A2z") < rpm("53a2z")
        assert rpm("53.2z") > rpm("53.2Z")

    def test_against_basic(self):
        """Test comparing with a version of another scheme."""
        rv = Version(RpmScheme(), "1.2.5")
        bv = Version(BasicScheme(), "1.2.4")
        assert rv != bv
        assert rv > bv

    def test_against_invalid(self):
        """Test that comparing with an invalid version raises."""
        a = rpm("1.2")
        empty = Version(RpmScheme(), "")
        with pytest.raises(InvalidVersionError, match="not valid"):
            a.compare(empty)
        with pytest.raises(InvalidVersionError):
            empty.compare(a)
        with pytest.raises(EmptyVersionError, match="one or both of the input versions are empty."):
            a.scheme.compare(empty.scheme)
        assert empty.get_major() == 0
