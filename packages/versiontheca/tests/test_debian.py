# SPDX-License-Identifier: MIT
"""Unit tests for Debian versions."""

import pytest

from versiontheca import DebianScheme, ErrorCode, InvalidParameterError, Version


def debian(text: str, expected: str = "") -> Version:
    """Parse ``text`` and check its canonical form."""
    v = Version(DebianScheme(), text)
    assert v.is_valid(), v.get_last_error(clear=False)
    assert v.get_version() == (expected or text)
    return v


def invalid(text: str, message: str) -> None:
    v = Version(DebianScheme(), text)
    assert not v.is_valid()
    assert v.get_last_error() == message


class TestValidDebianVersions:
    """Tests for parsing and canonicalizing Debian versions."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.0", ""),
            ("3", "3.0"),
            ("1.0.0", "1.0"),
            ("1.0.0-1", "1.0-1"),
            ("3-1", "3.0-1"),
            ("0:1.0", "1.0"),
            ("1:2.0", ""),
            ("1.0~rc1", ""),
            ("1.0~rc1-3", ""),
            ("1.~rc1", ""),
            ("123.~ab+.45", ""),
            ("1~rc1", ""),
            ("1.0.0~rc1", ""),
            ("1:2.~b-3", ""),
            ("2.0+dfsg1-4", ""),
            ("1.0-a-b", ""),
            ("1:2:3.0", "1:2:3"),
            ("0:2:3", ""),
            ("5:1.5.3-r5", ""),
        ],
    )
    def test_canonical(self, text, expected):
        """Test the canonical form of valid versions."""
        debian(text, expected)

    def test_sections(self):
        """Test that epoch, release and revision parts are tagged."""
        v = debian("2:1.0~rc1-3")
        kinds = [part.kind for part in v.scheme]
        assert kinds == [":", "", "", "~", "~", "-"]
        assert v.get_major() == 2

    def test_release_after_period(self):
        """Test that a release may follow a period."""
        v = debian("123.~ab+.45")
        kinds = [part.kind for part in v.scheme]
        assert kinds == ["", "~", "~"]
        assert v.scheme.upstream_range() == (0, 1)

    def test_long_version(self):
        """Test a version using all the parts available."""
        text = "1:" + ".".join(str(n + 1) for n in range(23)) + "-5"
        debian(text)


class TestInvalidDebianVersions:
    """Tests for strings that are not Debian versions."""

    def test_empty(self):
        """Test that an empty version has no error until it is output."""
        v = Version(DebianScheme(), "")
        assert not v.is_valid()
        assert v.get_last_error() == ""
        assert v.get_version() == ""
        assert v.get_last_error() == "no parts to output."

    @pytest.mark.parametrize(
        "text,message",
        [
            ("3A3:1.2.3-pre55", "epoch must be a valid integer."),
            ("33:-55", "a version value cannot be an empty string."),
            (":", "invalid ':' and/or '-' positions in \":\"."),
            ("a:", "epoch must be a valid integer."),
            ("-10:", "invalid ':' and/or '-' positions in \"-10:\"."),
            ("99999999999999999:", "integer too large for a valid version."),
            ("3:", "a version value cannot be an empty string."),
            ("-", "invalid ':' and/or '-' positions in \"-\"."),
            ("--", "a debian version must always start with a number \"--\"."),
            ("+-", "a debian version must always start with a number \"+-\"."),
            ("#-", "found unexpected character: \\U000023 in input."),
            ("55:435123-", "a version value cannot be an empty string."),
            ("-a", "invalid ':' and/or '-' positions in \"-a\"."),
            ("-0", "invalid ':' and/or '-' positions in \"-0\"."),
            ("-+", "invalid ':' and/or '-' positions in \"-+\"."),
            ("-3$7", "invalid ':' and/or '-' positions in \"-3$7\"."),
            ("32:1.2.55-3:7", "found unexpected character: \\U00003A in input."),
            ("-3.7", "invalid ':' and/or '-' positions in \"-3.7\"."),
            ("3.7#", "found unexpected character: \\U000023 in input."),
            ("3$7", "found unexpected character: \\U000024 in input."),
            ("3;7", "found unexpected character: \\U00003B in input."),
            ("1.2-a:b", "invalid ':' and/or '-' positions in \"1.2-a:b\"."),
            ("a1.0", "a debian version must always start with a number \"a1.0\"."),
        ],
    )
    def test_invalid(self, text, message):
        """Test the error reported for each invalid version."""
        invalid(text, message)

    def test_error_codes(self):
        """Test that the recorded error carries its code."""
        v = Version(DebianScheme(), "a:1.0")
        error = v.take_error()
        assert error.code == ErrorCode.EPOCH_NOT_INTEGER
        assert v.take_error() is None

        v = Version(DebianScheme(), "-1.0")
        assert v.peek_error() is not None
        assert v.peek_error().code == ErrorCode.POSITIONAL_SYNTAX


class TestNextPrevious:
    """Tests for next and previous on Debian versions."""

    def test_upstream_only(self):
        """Test steps on a plain upstream version."""
        a = debian("1.3.2")
        assert a.next(4)
        assert a.get_version() == "1.3.2.0.1"
        assert a.previous(4)
        assert a.get_version() == "1.3.2"
        assert a.next(0)
        assert a.get_version() == "2.0"

    def test_epoch_is_kept(self):
        """Test that positions start after the epoch."""
        a = debian("75:1.5.3")
        assert a.next(2)
        assert a.get_version() == "75:1.5.4"
        assert a.previous(0)
        assert a.get_version() == "75:0.5.4"

    def test_revision_is_kept(self):
        """Test that the revision is not changed by a step."""
        a = debian("5:1.5.3-r5")
        assert a.previous(4)
        assert a.get_version() == "5:1.5.2.4294967295.4294967295-r5"
        assert a.next(4)
        assert a.get_version() == "5:1.5.3-r5"

    def test_release_is_kept(self):
        """Test that the release is not changed by a step."""
        a = debian("1.0~rc1-3")
        assert a.next(1)
        assert a.get_version() == "1.1~rc1-3"

    def test_maximum(self):
        """Test that next fails when the upstream is at its maximum."""
        a = debian("4294967295.4294967295.4294967295")
        assert not a.next(2)
        assert not a.is_valid()
        assert a.get_last_error() == "maximum limit reached; cannot increment version any further."

    def test_minimum(self):
        """Test that previous fails on a zero version."""
        a = debian("0.0")
        assert not a.previous(2)
        assert not a.is_valid()
        assert a.get_last_error() == "minimum limit reached; cannot decrement version any further."

    def test_without_version(self):
        """Test next and previous on an empty version."""
        v = Version(DebianScheme())
        assert not v.next(0)
        assert v.get_last_error() == "no parts in this Debian version; cannot compute next/previous."
        assert not v.previous(0)
        assert v.get_last_error() == "no parts in this Debian version; cannot compute next/previous."

    @pytest.mark.parametrize("pos", [-100, -1, 25, 124])
    def test_out_of_bounds(self, pos):
        """Test that invalid positions raise."""
        a = debian("1.5.3-r5")
        with pytest.raises(InvalidParameterError, match="position calling next\\(\\)"):
            a.next(pos)
        with pytest.raises(InvalidParameterError, match="position calling previous\\(\\)"):
            a.previous(pos)


class TestCompare:
    """Tests for the dpkg ordering."""

    @pytest.mark.parametrize(
        "lower,higher",
        [
            ("1.0", "1.1"),
            ("1.0~rc1", "1.0"),
            ("1.0~rc1", "1.0~rc2"),
            ("1.0~~", "1.0~"),
            ("1.0~alpha", "1.0~beta"),
            ("1.0", "1.0b"),
            ("1.0-1", "1.0-2"),
            ("1.0-1", "1.0.1"),
            ("9.9", "1:0.1"),
            ("1.0-a", "1.0-b"),
            ("1.0-Z", "1.0-a"),
            ("1.0+", "1.0b"),
            ("1.0+", "1.0a1"),
            ("1.0", "1.0+"),
            ("1:1.0b-1", "1:1.0:-1"),
            ("1.~rc1", "1.0~rc1"),
            ("1.0~rc1", "1.0.0~rc1"),
            ("1.0.0~rc1", "1.0"),
            ("1.2", "1.10"),
        ],
    )
    def test_order(self, lower, higher):
        """Test pairs of versions in ascending order."""
        a = debian(lower)
        b = debian(higher)
        assert a < b
        assert b > a
        assert a != b

    @pytest.mark.parametrize(
        "lhs,rhs",
        [
            ("1.0", "1.0.0"),
            ("1.0", "0:1.0"),
            ("1.0", "1.0-0"),
            ("1.0~rc1", "1.0~rc1"),
        ],
    )
    def test_equal(self, lhs, rhs):
        """Test versions that are the same for dpkg."""
        assert Version(DebianScheme(), lhs) == Version(DebianScheme(), rhs)
