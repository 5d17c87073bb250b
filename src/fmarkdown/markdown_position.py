"""Source positions and spans for markdown nodes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkdownPosition:
    """
    A point in the source text.

    Attributes:
        offset: Zero-based character offset from the start of the input
        line: One-based line number
        column: One-based column, counted in characters since the last newline
    """
    offset: int
    line: int
    column: int

    def __repr__(self) -> str:
        return f"MarkdownPosition({self.line}:{self.column}, offset={self.offset})"


@dataclass(frozen=True)
class MarkdownLocation:
    """
    A span of source text.  The end position is exclusive.

    Attributes:
        start: Position of the first character in the span
        end: Position just after the last character in the span
    """
    start: MarkdownPosition
    end: MarkdownPosition


class MarkdownLocationTracker:
    """
    Forward-only line/column tracker.

    The tracker only ever looks at the text it is asked to advance over, so
    the cost of tracking locations is proportional to the size of the input
    rather than the number of nodes times the input size.
    """

    def __init__(self) -> None:
        """Initialize the tracker at the start of the input."""
        self._offset = 0
        self._line = 1
        self._column = 1

    def position(self) -> MarkdownPosition:
        """
        Get a snapshot of the current position.

        Returns:
            The current position
        """
        return MarkdownPosition(self._offset, self._line, self._column)

    def advance(self, consumed: str) -> MarkdownPosition:
        """
        Move the tracker past some consumed text.

        Args:
            consumed: The text that has just been consumed, starting at the current position

        Returns:
            The position after the consumed text
        """
        newlines = consumed.count('\n')
        if newlines:
            self._line += newlines
            self._column = len(consumed) - consumed.rfind('\n')

        else:
            self._column += len(consumed)

        self._offset += len(consumed)
        return self.position()

    def span(self, consumed: str) -> MarkdownLocation:
        """
        Advance past consumed text and return the span it covers.

        Args:
            consumed: The text that has just been consumed

        Returns:
            The location of the consumed text
        """
        start = self.position()
        end = self.advance(consumed)
        return MarkdownLocation(start, end)
