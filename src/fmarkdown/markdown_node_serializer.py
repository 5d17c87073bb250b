"""
Visitor class for serializing markdown nodes to plain dictionaries.
"""

from typing import Any, Dict, Iterable, List

from fmarkdown.markdown_node import (
    MarkdownCodeNode, MarkdownHeaderNode, MarkdownLinkNode, MarkdownNode, MarkdownNodeVisitor, MarkdownTextNode
)
from fmarkdown.markdown_position import MarkdownLocation, MarkdownPosition


def _serialize_position(position: MarkdownPosition) -> Dict[str, int]:
    return {
        "offset": position.offset,
        "line": position.line,
        "column": position.column
    }


def serialize_location(loc: MarkdownLocation) -> Dict[str, Dict[str, int]]:
    """
    Serialize a location.

    Args:
        loc: The location to serialize

    Returns:
        A dictionary with "start" and "end" positions
    """
    return {
        "start": _serialize_position(loc.start),
        "end": _serialize_position(loc.end)
    }


class MarkdownNodeSerializer(MarkdownNodeVisitor):
    """Visitor that serializes nodes to JSON-compatible dictionaries."""

    def __init__(self, legacy_text_locations: bool = False) -> None:
        """
        Initialize the serializer.

        Args:
            legacy_text_locations: If True, leave "loc" out of plain text nodes (but not
                newline nodes), matching the output of older versions of this parser
        """
        super().__init__()
        self.legacy_text_locations = legacy_text_locations

    def generic_visit(self, node: MarkdownNode) -> Dict[str, Any]:
        """Serialize the fields shared by all nodes."""
        return {
            "type": node.type.value,
            "content": node.content,
            "loc": serialize_location(node.loc)
        }

    def visit_MarkdownTextNode(self, node: MarkdownTextNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a text node."""
        result = self.generic_visit(node)
        if self.legacy_text_locations and not node.is_newline():
            del result["loc"]

        return result

    def visit_MarkdownHeaderNode(self, node: MarkdownHeaderNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a header node."""
        result = self.generic_visit(node)
        result["level"] = node.level
        return result

    def visit_MarkdownCodeNode(self, node: MarkdownCodeNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a code block node."""
        result = self.generic_visit(node)
        result["language"] = node.language
        return result

    def visit_MarkdownLinkNode(self, node: MarkdownLinkNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a link node."""
        result = self.generic_visit(node)
        result["text"] = node.text
        result["url"] = node.url
        return result


def serialize_nodes(nodes: Iterable[MarkdownNode], legacy_text_locations: bool = False) -> List[Dict[str, Any]]:
    """
    Serialize a sequence of nodes.

    Args:
        nodes: The nodes to serialize
        legacy_text_locations: If True, leave "loc" out of plain text nodes

    Returns:
        A list of dictionaries, one per node
    """
    return MarkdownNodeSerializer(legacy_text_locations).visit_all(nodes)
