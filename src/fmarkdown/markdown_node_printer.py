"""
Visitor class to print markdown node sequences for debugging
"""
from typing import Iterable

from fmarkdown.markdown_node import (
    MarkdownCodeNode, MarkdownHeaderNode, MarkdownLinkNode, MarkdownNode, MarkdownNodeVisitor
)


class MarkdownNodePrinter(MarkdownNodeVisitor):
    """Visitor that describes each node on a single line."""

    def generic_visit(self, node: MarkdownNode) -> str:
        """
        Describe a node.

        Args:
            node: The node to describe

        Returns:
            A line such as "bold 1:1-1:9: '**bold**'"
        """
        start = node.loc.start
        end = node.loc.end
        return f"{node.type.value} {start.line}:{start.column}-{end.line}:{end.column}: {node.content!r}"

    def visit_MarkdownHeaderNode(self, node: MarkdownHeaderNode) -> str:  # pylint: disable=invalid-name
        """Describe a header node, including its level."""
        return f"{self.generic_visit(node)} (level {node.level})"

    def visit_MarkdownCodeNode(self, node: MarkdownCodeNode) -> str:  # pylint: disable=invalid-name
        """Describe a code block node, including its language if it has one."""
        if not node.language:
            return self.generic_visit(node)

        return f"{self.generic_visit(node)} (language {node.language})"

    def visit_MarkdownLinkNode(self, node: MarkdownLinkNode) -> str:  # pylint: disable=invalid-name
        """Describe a link node, including its URL."""
        return f"{self.generic_visit(node)} (url {node.url!r})"


def format_nodes(nodes: Iterable[MarkdownNode]) -> str:
    """
    Format nodes for debugging, one per line.

    Args:
        nodes: The nodes to format

    Returns:
        The formatted nodes
    """
    return "\n".join(MarkdownNodePrinter().visit_all(nodes))
