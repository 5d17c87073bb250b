"""
Node types produced by the markdown parser.

The parser output is flat: every node is a sibling of every other node and
there is no document root.  Nodes are immutable once constructed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, List

from fmarkdown.markdown_position import MarkdownLocation


class MarkdownNodeType(Enum):
    """Type tag of a markdown node."""
    TEXT = "text"
    HEADER = "header"
    BOLD = "bold"
    ITALIC = "italic"
    LINK = "link"
    CODE = "code"
    LIST = "list"


@dataclass(frozen=True)
class MarkdownNode:
    """
    Base class for all markdown nodes.

    Attributes:
        content: The source text this node covers, including any delimiters
        loc: The source span of this node
    """
    node_type: ClassVar[MarkdownNodeType]

    content: str
    loc: MarkdownLocation

    @property
    def type(self) -> MarkdownNodeType:
        """The type tag of this node."""
        return self.node_type

    @property
    def source(self) -> str:
        """The exact source text spanned by this node's location."""
        return self.content


@dataclass(frozen=True)
class MarkdownTextNode(MarkdownNode):
    """Node representing plain text, or a single newline."""
    node_type: ClassVar[MarkdownNodeType] = MarkdownNodeType.TEXT

    def is_newline(self) -> bool:
        """
        Check if this node is a standalone newline.

        Returns:
            True if the node holds exactly one newline character
        """
        return self.content == '\n'


@dataclass(frozen=True)
class MarkdownHeaderNode(MarkdownNode):
    """Node representing a header line such as `## Title`."""
    node_type: ClassVar[MarkdownNodeType] = MarkdownNodeType.HEADER

    level: int


@dataclass(frozen=True)
class MarkdownBoldNode(MarkdownNode):
    """Node representing bold text, delimiters included."""
    node_type: ClassVar[MarkdownNodeType] = MarkdownNodeType.BOLD


@dataclass(frozen=True)
class MarkdownItalicNode(MarkdownNode):
    """Node representing italic text, delimiters included."""
    node_type: ClassVar[MarkdownNodeType] = MarkdownNodeType.ITALIC


@dataclass(frozen=True)
class MarkdownLinkNode(MarkdownNode):
    """
    Node representing an inline link.

    Attributes:
        text: The text between the square brackets
        url: The text between the parentheses
    """
    node_type: ClassVar[MarkdownNodeType] = MarkdownNodeType.LINK

    text: str
    url: str


@dataclass(frozen=True)
class MarkdownCodeNode(MarkdownNode):
    """
    Node representing a fenced code block.

    The content excludes both fence lines but keeps the newline that ends the
    opening fence line, so "```py\\nx = 1\\n```" has content "\\nx = 1".

    Attributes:
        language: The language tag on the opening fence, or an empty string
    """
    node_type: ClassVar[MarkdownNodeType] = MarkdownNodeType.CODE

    language: str

    @property
    def source(self) -> str:
        """The complete fenced block, both fences included."""
        return f"```{self.language}{self.content}\n```"


@dataclass(frozen=True)
class MarkdownListNode(MarkdownNode):
    """Node representing a `* ` list item line."""
    node_type: ClassVar[MarkdownNodeType] = MarkdownNodeType.LIST


class MarkdownNodeVisitor:
    """
    Base visitor class for markdown node traversal.

    Subclasses define `visit_<NodeClassName>` methods; nodes without a
    matching method are passed to `generic_visit`.
    """

    def visit(self, node: MarkdownNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def visit_all(self, nodes: Iterable[MarkdownNode]) -> List[Any]:
        """
        Visit a sequence of nodes in order.

        Args:
            nodes: The nodes to visit

        Returns:
            A list of results, one per node
        """
        return [self.visit(node) for node in nodes]

    def generic_visit(self, node: MarkdownNode) -> Any:  # pylint: disable=unused-argument
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            None
        """
        return None
