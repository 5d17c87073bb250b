"""
Grammar rules for the flat markdown parser.

Each rule is built from a handful of matcher combinators.  A matcher takes
the input string and a start offset and returns the offset just after the
text it matched, or -1 if it does not match.  Matchers never consume input
on failure, so a failed rule leaves the cursor where it was.

The rules are kept in a literal, ordered tuple: at any position the parser
tries them in that order and commits to the first one that matches.
"""

from dataclasses import dataclass
import re
from typing import Callable, FrozenSet, Tuple

from fmarkdown.markdown_node import (
    MarkdownBoldNode, MarkdownCodeNode, MarkdownHeaderNode, MarkdownItalicNode,
    MarkdownLinkNode, MarkdownListNode, MarkdownNode, MarkdownTextNode
)
from fmarkdown.markdown_position import MarkdownLocation


MarkdownMatcher = Callable[[str, int], int]
MarkdownNodeBuilder = Callable[[str, int, int, MarkdownLocation], MarkdownNode]

NO_MATCH = -1

DOCUMENT_RULE = "document"


def literal(expected: str) -> MarkdownMatcher:
    """
    Match an exact string.

    Args:
        expected: The string to match

    Returns:
        A matcher for the string
    """
    length = len(expected)

    def match(text: str, pos: int) -> int:
        return pos + length if text.startswith(expected, pos) else NO_MATCH

    return match


def run_excluding(excluded: str, min_count: int = 0) -> MarkdownMatcher:
    """
    Match a greedy run of characters that are not in `excluded`.

    Args:
        excluded: Characters that end the run
        min_count: The minimum number of characters the run must contain

    Returns:
        A matcher for the run
    """
    pattern = re.compile(f"[^{re.escape(excluded)}]*")

    def match(text: str, pos: int) -> int:
        end = pattern.match(text, pos).end()  # type: ignore[union-attr]
        return end if end - pos >= min_count else NO_MATCH

    return match


def repeat(matcher: MarkdownMatcher, min_count: int, max_count: int) -> MarkdownMatcher:
    """
    Match another matcher greedily between `min_count` and `max_count` times.

    There is no backtracking: once the repetition has taken as many matches
    as it can, the surrounding sequence has to work with that.

    Args:
        matcher: The matcher to repeat
        min_count: Minimum number of repetitions
        max_count: Maximum number of repetitions

    Returns:
        A matcher for the repetition
    """
    def match(text: str, pos: int) -> int:
        count = 0
        while count < max_count:
            end = matcher(text, pos)
            if end == NO_MATCH or end == pos:
                break

            pos = end
            count += 1

        return pos if count >= min_count else NO_MATCH

    return match


def sequence(*matchers: MarkdownMatcher) -> MarkdownMatcher:
    """
    Match each matcher in turn, each starting where the last one ended.

    Args:
        matchers: The matchers to apply in order

    Returns:
        A matcher that succeeds only if all of them succeed
    """
    def match(text: str, pos: int) -> int:
        for matcher in matchers:
            pos = matcher(text, pos)
            if pos == NO_MATCH:
                return NO_MATCH

        return pos

    return match


def choice(*matchers: MarkdownMatcher) -> MarkdownMatcher:
    """
    Match the first of several alternatives that succeeds.

    Args:
        matchers: The alternatives, highest priority first

    Returns:
        A matcher for the ordered choice
    """
    def match(text: str, pos: int) -> int:
        for matcher in matchers:
            end = matcher(text, pos)
            if end != NO_MATCH:
                return end

        return NO_MATCH

    return match


def followed_by(matcher: MarkdownMatcher) -> MarkdownMatcher:
    """Positive lookahead: succeed without consuming if `matcher` matches."""
    def match(text: str, pos: int) -> int:
        return pos if matcher(text, pos) != NO_MATCH else NO_MATCH

    return match


def not_followed_by(matcher: MarkdownMatcher) -> MarkdownMatcher:
    """Negative lookahead: succeed without consuming if `matcher` does not match."""
    def match(text: str, pos: int) -> int:
        return pos if matcher(text, pos) == NO_MATCH else NO_MATCH

    return match


def at_line_start(text: str, pos: int) -> int:
    """Succeed without consuming at offset 0 or just after a newline."""
    return pos if pos == 0 or text[pos - 1] == '\n' else NO_MATCH


def until_closing_fence(text: str, pos: int) -> int:
    """
    Match everything up to and including a closing code fence.

    The closing fence is a line that is exactly three backticks, so the match
    ends either at the end of the input or just before the newline that ends
    the fence line.
    """
    search = pos
    while True:
        fence = text.find('\n```', search)
        if fence == -1:
            return NO_MATCH

        end = fence + 4
        if end == len(text) or text[end] == '\n':
            return end

        search = fence + 1


@dataclass(frozen=True)
class MarkdownRule:
    """
    A named grammar rule.

    Attributes:
        name: The rule name, usable as a start rule
        expected: Descriptions of what this rule expects to see, for error messages
        first_chars: Characters a match of this rule can start with, empty for any character
        matcher: Matcher for the rule's syntax
        build: Builds a node from the input, the match bounds and the match location
    """
    name: str
    expected: Tuple[str, ...]
    first_chars: FrozenSet[str]
    matcher: MarkdownMatcher
    build: MarkdownNodeBuilder

    def match(self, text: str, pos: int) -> int:
        """
        Try this rule at a position.

        Args:
            text: The input
            pos: Offset to try the rule at

        Returns:
            The offset just after the match, or NO_MATCH
        """
        if pos >= len(text):
            return NO_MATCH

        if self.first_chars and text[pos] not in self.first_chars:
            return NO_MATCH

        return self.matcher(text, pos)


def _build_header(text: str, start: int, end: int, loc: MarkdownLocation) -> MarkdownNode:
    content = text[start:end]
    level = len(content) - len(content.lstrip('#'))
    return MarkdownHeaderNode(content=content, loc=loc, level=level)


def _build_code(text: str, start: int, end: int, loc: MarkdownLocation) -> MarkdownNode:
    # The opening fence line always ends in a newline, and the match always
    # ends with "\n```".
    newline = text.index('\n', start)
    return MarkdownCodeNode(content=text[newline:end - 4], loc=loc, language=text[start + 3:newline])


def _build_bold(text: str, start: int, end: int, loc: MarkdownLocation) -> MarkdownNode:
    return MarkdownBoldNode(content=text[start:end], loc=loc)


def _build_italic(text: str, start: int, end: int, loc: MarkdownLocation) -> MarkdownNode:
    return MarkdownItalicNode(content=text[start:end], loc=loc)


def _build_link(text: str, start: int, end: int, loc: MarkdownLocation) -> MarkdownNode:
    # Link text cannot contain ']', so the first one ends it.
    bracket_end = text.index(']', start)
    return MarkdownLinkNode(
        content=text[start:end],
        loc=loc,
        text=text[start + 1:bracket_end],
        url=text[bracket_end + 2:end - 1]
    )


def _build_list(text: str, start: int, end: int, loc: MarkdownLocation) -> MarkdownNode:
    return MarkdownListNode(content=text[start:end], loc=loc)


def _build_text(text: str, start: int, end: int, loc: MarkdownLocation) -> MarkdownNode:
    return MarkdownTextNode(content=text[start:end], loc=loc)


def _delimited(delimiter: str) -> MarkdownMatcher:
    """Match `delimiter`, a non-empty single-line body without the delimiter character, then `delimiter`."""
    return sequence(literal(delimiter), run_excluding(delimiter[0] + '\n', 1), literal(delimiter))


HEADER_RULE = MarkdownRule(
    name="header",
    expected=('"#"',),
    first_chars=frozenset('#'),
    matcher=sequence(at_line_start, repeat(literal('#'), 1, 6), literal(' '), run_excluding('\n')),
    build=_build_header
)

CODE_BLOCK_RULE = MarkdownRule(
    name="code_block",
    expected=('"```"',),
    first_chars=frozenset('`'),
    matcher=sequence(
        at_line_start,
        literal('```'),
        run_excluding('`\n'),
        followed_by(literal('\n')),
        until_closing_fence
    ),
    build=_build_code
)

LINK_RULE = MarkdownRule(
    name="link",
    expected=('"["',),
    first_chars=frozenset('['),
    matcher=sequence(literal('['), run_excluding(']'), literal(']('), run_excluding(')'), literal(')')),
    build=_build_link
)

LIST_ITEM_RULE = MarkdownRule(
    name="list_item",
    expected=('"* "',),
    first_chars=frozenset('*'),
    matcher=sequence(at_line_start, literal('* '), run_excluding('\n')),
    build=_build_list
)

NEWLINE_RULE = MarkdownRule(
    name="newline",
    expected=('"\\n"',),
    first_chars=frozenset('\n'),
    matcher=literal('\n'),
    build=_build_text
)

# Only used when parsing starts from the "text" rule.  Inside a document, text
# is whatever the other rules leave unclaimed.
TEXT_RULE = MarkdownRule(
    name="text",
    expected=("any character",),
    first_chars=frozenset(),
    matcher=run_excluding('\n', 1),
    build=_build_text
)


def bold_rule(no_underscores: bool = False) -> MarkdownRule:
    """
    Create the bold rule.

    Args:
        no_underscores: If True, only `**` delimits bold text

    Returns:
        The bold rule
    """
    if no_underscores:
        return MarkdownRule("bold", ('"**"',), frozenset('*'), _delimited('**'), _build_bold)

    return MarkdownRule(
        "bold", ('"**"', '"__"'), frozenset('*_'), choice(_delimited('**'), _delimited('__')), _build_bold
    )


def italic_rule(no_underscores: bool = False) -> MarkdownRule:
    """
    Create the italic rule.

    A `*` followed by a space is a list marker, never an italic opener.

    Args:
        no_underscores: If True, only `*` delimits italic text

    Returns:
        The italic rule
    """
    asterisk = sequence(not_followed_by(literal('* ')), _delimited('*'))
    if no_underscores:
        return MarkdownRule("italic", ('"*"',), frozenset('*'), asterisk, _build_italic)

    return MarkdownRule(
        "italic", ('"*"', '"_"'), frozenset('*_'), choice(asterisk, _delimited('_')), _build_italic
    )


def build_rules(no_underscores: bool = False) -> Tuple[MarkdownRule, ...]:
    """
    Build the ordered rule table, highest priority first.

    Args:
        no_underscores: If True, underscores never delimit bold or italic text

    Returns:
        The rules in the order they must be tried
    """
    return (
        HEADER_RULE,
        CODE_BLOCK_RULE,
        bold_rule(no_underscores),
        italic_rule(no_underscores),
        LINK_RULE,
        LIST_ITEM_RULE,
        NEWLINE_RULE,
    )
