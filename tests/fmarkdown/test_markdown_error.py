"""Tests for error reporting."""

import pytest

from fmarkdown import MarkdownError, MarkdownPosition, MarkdownSyntaxError
from fmarkdown.markdown_error import build_syntax_error_message


class TestSyntaxErrorMessages:
    """Test the short syntax error message."""

    def test_single_expectation(self):
        """Test a message with one expected token."""
        assert build_syntax_error_message(['"a"'], 'x') == 'Expected "a" but "x" found.'

    def test_two_expectations(self):
        """Test a message with two expected tokens."""
        assert build_syntax_error_message(['"b"', '"a"'], None) == 'Expected "a" or "b" but end of input found.'

    def test_many_expectations(self):
        """Test a message with several expected tokens and an escaped newline."""
        message = build_syntax_error_message(['"c"', '"a"', '"b"', '"a"'], '\n')
        assert message == 'Expected "a", "b", or "c" but "\\n" found.'


class TestSyntaxError:
    """Test the structured syntax error."""

    def test_fields(self):
        """Test that the error keeps its structured fields."""
        error = MarkdownSyntaxError(['"#"', 'any character'], None, MarkdownPosition(0, 1, 1))
        assert isinstance(error, MarkdownError)
        assert error.expected == frozenset({'"#"', 'any character'})
        assert error.found is None
        assert error.location == MarkdownPosition(0, 1, 1)
        assert error.message == 'Expected "#" or any character but end of input found.'

    def test_detailed_message(self):
        """Test the multi-line message produced by str()."""
        error = MarkdownSyntaxError(['end of input'], '"', MarkdownPosition(4, 2, 3))
        assert str(error).split("\n") == [
            'Error: Expected end of input but "\\"" found.',
            "Line 2, Column 3",
            'Received: "\\""',
            "Expected: end of input",
        ]

    def test_raised_from_parser(self, parser):
        """Test the error raised for empty input."""
        with pytest.raises(MarkdownSyntaxError) as exc_info:
            parser.parse("")

        assert exc_info.value.found is None
        assert "Line 1, Column 1" in str(exc_info.value)
        assert "Received: end of input" in str(exc_info.value)
