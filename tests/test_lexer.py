"""
Tests for lexer.py module.

Tests cover:
- split_line: eager whitespace splitting
- iter_words: lazy variant producing the same words
"""

import pytest
from turboshell.lexer import split_line, iter_words


class TestSplitLine:
    """Tests for split_line()."""

    def test_single_word(self):
        assert split_line("ls") == ["ls"]

    def test_multiple_words(self):
        """Test command with arguments."""
        assert split_line("ls -l /tmp") == ["ls", "-l", "/tmp"]

    def test_runs_of_whitespace(self):
        """Test tabs and repeated spaces act as one separator."""
        assert split_line("  echo \t hello   world  ") == ["echo", "hello", "world"]

    def test_trailing_newline_is_ignored(self):
        assert split_line("pwd\n") == ["pwd"]

    @pytest.mark.parametrize("line", ["", " ", "\t", "   \t  \r\n"])
    def test_empty_and_blank_lines(self, line):
        """Test empty or all-whitespace lines produce no words."""
        assert split_line(line) == []

    def test_quotes_are_not_special(self):
        """Test quotes are kept literally and do not group words."""
        assert split_line("echo 'hello world'") == ["echo", "'hello", "world'"]

    def test_no_expansion(self):
        """Test $VAR, globs and backslashes pass through untouched."""
        assert split_line("echo $HOME *.py a\\ b") == ["echo", "$HOME", "*.py", "a\\", "b"]

    def test_pipes_and_redirects_are_plain_words(self):
        assert split_line("cat a|b > c") == ["cat", "a|b", ">", "c"]


class TestIterWords:
    """Tests for iter_words()."""

    def test_is_lazy(self):
        words = iter_words("a b c")
        assert next(words) == "a"
        assert list(words) == ["b", "c"]

    @pytest.mark.parametrize("line", [
        "cd /tmp",
        "   spaced    out   ",
        "",
        "\tone\ttwo\n",
    ])
    def test_matches_split_line(self, line):
        assert list(iter_words(line)) == split_line(line)
