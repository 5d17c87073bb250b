"""A flat, location-annotated parser for a small markdown dialect."""

from fmarkdown.markdown_error import MarkdownError, MarkdownSyntaxError
from fmarkdown.markdown_node import (
    MarkdownBoldNode,
    MarkdownCodeNode,
    MarkdownHeaderNode,
    MarkdownItalicNode,
    MarkdownLinkNode,
    MarkdownListNode,
    MarkdownNode,
    MarkdownNodeType,
    MarkdownNodeVisitor,
    MarkdownTextNode
)
from fmarkdown.markdown_node_printer import MarkdownNodePrinter, format_nodes
from fmarkdown.markdown_node_serializer import MarkdownNodeSerializer, serialize_nodes
from fmarkdown.markdown_parser import MarkdownParser, parse
from fmarkdown.markdown_position import MarkdownLocation, MarkdownLocationTracker, MarkdownPosition


__all__ = [
    "MarkdownBoldNode",
    "MarkdownCodeNode",
    "MarkdownError",
    "MarkdownHeaderNode",
    "MarkdownItalicNode",
    "MarkdownLinkNode",
    "MarkdownListNode",
    "MarkdownLocation",
    "MarkdownLocationTracker",
    "MarkdownNode",
    "MarkdownNodePrinter",
    "MarkdownNodeSerializer",
    "MarkdownNodeType",
    "MarkdownNodeVisitor",
    "MarkdownParser",
    "MarkdownPosition",
    "MarkdownSyntaxError",
    "MarkdownTextNode",
    "format_nodes",
    "parse",
    "serialize_nodes"
]
