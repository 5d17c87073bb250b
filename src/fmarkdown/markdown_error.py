"""Exception classes for the markdown parser with detailed context."""

from typing import Iterable, List

from fmarkdown.markdown_position import MarkdownPosition


class MarkdownError(Exception):
    """Base exception for markdown parsing errors with detailed context information."""

    def __init__(
        self,
        message: str,
        received: str | None = None,
        expected: str | None = None,
        position: MarkdownPosition | None = None
    ) -> None:
        """
        Initialize detailed error.

        Args:
            message: Core error description
            received: What was actually received
            expected: What was expected
            position: Source position where the error occurred
        """
        self.message = message
        self.received = received
        self.expected_description = expected
        self.position = position

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Line {self.position.line}, Column {self.position.column}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected_description:
            parts.append(f"Expected: {self.expected_description}")

        return "\n".join(parts)


class MarkdownSyntaxError(MarkdownError):
    """
    Raised when the input cannot be parsed at all.

    Attributes:
        expected: Descriptions of the tokens that would have matched
        found: The offending character, or None at end of input
        location: Where the failure happened
    """

    def __init__(self, expected: Iterable[str], found: str | None, location: MarkdownPosition) -> None:
        self.expected = frozenset(expected)
        self.found = found
        self.location = location

        found_description = "end of input" if found is None else _quote(found)
        super().__init__(
            message=build_syntax_error_message(self.expected, found),
            received=found_description,
            expected=", ".join(sorted(self.expected)),
            position=location
        )


def _quote(text: str) -> str:
    escaped = text.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n').replace('\t', '\\t')
    return f'"{escaped}"'


def build_syntax_error_message(expected: Iterable[str], found: str | None) -> str:
    """
    Build a human-readable syntax error message.

    Args:
        expected: Descriptions of the tokens that would have matched
        found: The offending character, or None at end of input

    Returns:
        A message of the form 'Expected "a", "b", or "c" but "d" found.'
    """
    descriptions: List[str] = sorted(set(expected))
    if not descriptions:
        expected_text = "nothing"

    elif len(descriptions) == 1:
        expected_text = descriptions[0]

    elif len(descriptions) == 2:
        expected_text = f"{descriptions[0]} or {descriptions[1]}"

    else:
        expected_text = ", ".join(descriptions[:-1]) + ", or " + descriptions[-1]

    found_text = "end of input" if found is None else _quote(found)
    return f"Expected {expected_text} but {found_text} found."
