"""Shared fixtures and utilities for markdown parser tests."""

from typing import List

import pytest

from fmarkdown import MarkdownNode, MarkdownParser, MarkdownPosition


@pytest.fixture
def parser():
    """Create a markdown parser with default options."""
    return MarkdownParser()


@pytest.fixture
def parser_no_underscores():
    """Create a markdown parser that ignores underscore delimiters."""
    return MarkdownParser(no_underscores=True)


class MarkdownTestHelpers:
    """Helper utilities for markdown parser testing."""

    @staticmethod
    def position(offset: int, line: int, column: int) -> MarkdownPosition:
        """Shorthand for building a position."""
        return MarkdownPosition(offset, line, column)

    @staticmethod
    def summarize(nodes: List[MarkdownNode]) -> List[tuple]:
        """Reduce nodes to (type, content) pairs."""
        return [(node.type.value, node.content) for node in nodes]

    @staticmethod
    def assert_covers_input(nodes: List[MarkdownNode], text: str) -> None:
        """Assert that nodes cover the whole input with contiguous spans."""
        assert "".join(node.source for node in nodes) == text
        assert nodes[0].loc.start == MarkdownPosition(0, 1, 1)
        assert nodes[-1].loc.end.offset == len(text)
        for previous, current in zip(nodes, nodes[1:]):
            assert previous.loc.end == current.loc.start, f"Gap or overlap between {previous!r} and {current!r}"

        for node in nodes:
            assert text[node.loc.start.offset:node.loc.end.offset] == node.source


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return MarkdownTestHelpers
