"""tests/unit/test_strings.py"""

import pytest

from urlicious.utils.strings import (
    StringBuffer,
    ends_with,
    starts_with,
    trim_end,
    trim_start,
)


class TestStringBuffer:
    """Tests for StringBuffer class."""

    def test_init_empty(self):
        """Test StringBuffer initialization with no arguments."""
        sb = StringBuffer()
        assert len(sb) == 0
        assert str(sb) == ""

    def test_append(self):
        """Test appending returns the buffer and grows it."""
        sb = StringBuffer("/foo")
        assert sb.append("/bar") is sb
        assert str(sb) == "/foo/bar"
        assert len(sb) == 8

    def test_remove(self):
        """Test removing a range in place."""
        sb = StringBuffer("abcdef")
        sb.remove(1, 3)
        assert str(sb) == "aef"

    def test_remove_out_of_range(self):
        """Test that removing past the end raises IndexError."""
        sb = StringBuffer("abc")
        with pytest.raises(IndexError):
            sb.remove(2, 5)

    def test_clear(self):
        """Test clearing the buffer."""
        sb = StringBuffer("abc").clear()
        assert len(sb) == 0

    def test_repr(self):
        """Test repr shows the contents."""
        assert repr(StringBuffer("a/b")) == "StringBuffer('a/b')"

    def test_method_chaining(self):
        """Test that the trim methods return the buffer itself."""
        sb = StringBuffer(";;;;SomeText456/////")
        assert sb.trim_start(";").trim_end("/") is sb
        assert str(sb) == "SomeText456"


class TestMatching:
    """Tests for starts_with and ends_with."""

    def test_starts_and_ends_with_slash(self):
        """Test matching a single character at both ends."""
        sb = StringBuffer("/foo/")
        assert starts_with(sb, "/") is True
        assert ends_with(sb, "/") is True
        assert sb.starts_with("/fo") is True
        assert sb.ends_with("oo/") is True

    def test_mismatch(self):
        """Test non-matching prefixes and suffixes."""
        sb = StringBuffer("/foo/")
        assert starts_with(sb, "foo") is False
        assert ends_with(sb, "foo") is False

    def test_value_longer_than_buffer(self):
        """Test that a value longer than the buffer is simply no match."""
        sb = StringBuffer("ab")
        assert starts_with(sb, "abc") is False
        assert ends_with(sb, "zab") is False

    @pytest.mark.parametrize("sb", [None, StringBuffer()])
    def test_absent_or_empty_buffer(self, sb):
        """Test that None and empty buffers never match."""
        assert starts_with(sb, "") is False
        assert ends_with(sb, "/") is False


class TestTrimming:
    """Tests for trim_start and trim_end."""

    def test_trim_both_ends(self):
        """Test trimming different characters from each end."""
        sb = StringBuffer(";;;;SomeText456/////")
        trim_start(sb, ";")
        trim_end(sb, "/")
        assert str(sb) == "SomeText456"

    def test_trim_start_multiple_chars(self):
        """Test trimming a run made of several characters."""
        sb = StringBuffer("/;/;path;")
        trim_start(sb, "/", ";")
        assert str(sb) == "path;"

    def test_trim_start_whole_buffer(self):
        """Test that trim_start can empty the buffer."""
        sb = StringBuffer("/////")
        trim_start(sb, "/")
        assert str(sb) == ""

    def test_trim_end_keeps_first_character(self):
        """Test that trim_end never removes the first character."""
        sb = StringBuffer("/////")
        trim_end(sb, "/")
        assert str(sb) == "/"

    def test_trim_end_single_character(self):
        """Test that a one-character buffer is left untouched."""
        sb = StringBuffer("/")
        trim_end(sb, "/")
        assert str(sb) == "/"

    def test_trim_without_match(self):
        """Test that trimming unmatched characters is a no-op."""
        sb = StringBuffer("abc")
        trim_start(sb, "/")
        trim_end(sb, "/")
        assert str(sb) == "abc"

    def test_trim_keeps_inner_characters(self):
        """Test that only the leading and trailing runs are affected."""
        sb = StringBuffer("//a//b//")
        trim_start(sb, "/")
        trim_end(sb, "/")
        assert str(sb) == "a//b"

    @pytest.mark.parametrize("func", [trim_start, trim_end])
    def test_absent_buffer(self, func):
        """Test that None is passed through."""
        assert func(None, "/") is None

    @pytest.mark.parametrize("func", [trim_start, trim_end])
    def test_empty_buffer(self, func):
        """Test that an empty buffer is returned untouched."""
        sb = StringBuffer()
        assert func(sb, "/") is sb
        assert len(sb) == 0
