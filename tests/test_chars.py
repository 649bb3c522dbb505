"""Unit tests for the shared character predicates."""

from winsplit.chars import (
    BACKSLASH,
    BACKTICK,
    CARET,
    SINGLE_QUOTE,
    is_escape_leader,
    is_quote,
    is_whitespace,
)


class TestIsWhitespace:
    def test_space_and_tab(self):
        assert is_whitespace(" ")
        assert is_whitespace("\t")

    def test_line_breaks_and_nul_are_not_delimiters(self):
        assert not is_whitespace("\r")
        assert not is_whitespace("\n")
        assert not is_whitespace("\0")

    def test_non_breaking_space_is_not_a_delimiter(self):
        assert not is_whitespace("\u00a0")


class TestIsQuote:
    def test_double_quote_is_default(self):
        assert is_quote('"')
        assert not is_quote("'")

    def test_single_quote_when_asked(self):
        assert is_quote("'", SINGLE_QUOTE)
        assert not is_quote('"', SINGLE_QUOTE)


class TestIsEscapeLeader:
    def test_backslash_is_default(self):
        assert is_escape_leader("\\")
        assert not is_escape_leader("^")

    def test_dialect_leaders(self):
        assert is_escape_leader("^", CARET)
        assert is_escape_leader("`", BACKTICK)
        assert not is_escape_leader("\\", CARET)
        assert BACKSLASH == "\\"
