"""
Parser that converts markdown into a flat list of location-annotated nodes.
"""

import logging
import re
from typing import Dict, List, Set, Tuple

from fmarkdown.markdown_error import MarkdownSyntaxError
from fmarkdown.markdown_node import MarkdownNode, MarkdownTextNode
from fmarkdown.markdown_position import MarkdownLocationTracker, MarkdownPosition
from fmarkdown.markdown_rules import DOCUMENT_RULE, NO_MATCH, TEXT_RULE, MarkdownRule, build_rules


class MarkdownParser:
    """
    Flat markdown parser.

    At each position the parser tries its rules in priority order and commits
    to the first one that matches.  Characters that no rule claims are
    gathered up and emitted as a single text node when the next rule matches,
    at a newline, or at the end of the input.

    A parser instance holds no per-parse state, so one instance can be shared
    between callers.
    """

    def __init__(self, no_underscores: bool = False) -> None:
        """
        Initialize the parser.

        Args:
            no_underscores: If True, underscores never delimit bold or italic text
        """
        self._no_underscores = no_underscores
        self._rules = build_rules(no_underscores)
        self._start_rules: Dict[str, MarkdownRule] = {rule.name: rule for rule in self._rules}
        self._start_rules[TEXT_RULE.name] = TEXT_RULE

        # Any character that can begin a rule match.  Runs of other characters
        # are always plain text and can be consumed in one step.
        trigger_chars: Set[str] = set()
        for rule in self._rules:
            trigger_chars.update(rule.first_chars)

        self._trigger_chars = frozenset(trigger_chars)
        self._plain_text_pattern = re.compile(f"[^{re.escape(''.join(sorted(trigger_chars)))}]+")

        self._logger = logging.getLogger("MarkdownParser")

    @property
    def rules(self) -> Tuple[MarkdownRule, ...]:
        """The rules in the order they are tried, excluding the text fallback."""
        return self._rules

    def start_rule_names(self) -> List[str]:
        """
        Get the names that can be passed as a start rule.

        Returns:
            The default document rule name followed by each rule name
        """
        return [DOCUMENT_RULE] + list(self._start_rules)

    def parse(self, text: str, start_rule: str | None = None) -> List[MarkdownNode]:
        """
        Parse markdown text into a flat list of nodes.

        Args:
            text: The markdown text to parse
            start_rule: Name of the rule to start from, or None for the whole-document rule

        Returns:
            The nodes, in source order, covering the whole input

        Raises:
            MarkdownSyntaxError: If the input is empty, or does not match the start rule
            ValueError: If the start rule is unknown
        """
        if start_rule is None or start_rule == DOCUMENT_RULE:
            return self._parse_document(text)

        rule = self._start_rules.get(start_rule)
        if rule is None:
            raise ValueError(f'Can\'t start parsing from rule "{start_rule}".')

        return self._parse_rule(text, rule)

    def _expected(self) -> Set[str]:
        expected: Set[str] = set(TEXT_RULE.expected)
        for rule in self._rules:
            expected.update(rule.expected)

        return expected

    def _match_rules(self, text: str, pos: int) -> Tuple[MarkdownRule, int] | None:
        """
        Find the highest priority rule that matches at a position.

        Args:
            text: The input
            pos: The position to match at

        Returns:
            The matching rule and the end of its match, or None if no rule matches
        """
        for rule in self._rules:
            end = rule.match(text, pos)
            if end != NO_MATCH:
                return rule, end

        return None

    def _parse_document(self, text: str) -> List[MarkdownNode]:
        if not text:
            raise MarkdownSyntaxError(self._expected(), None, MarkdownPosition(0, 1, 1))

        self._logger.debug("Parsing %d characters", len(text))

        nodes: List[MarkdownNode] = []
        tracker = MarkdownLocationTracker()
        text_len = len(text)
        pos = 0

        # Unclaimed text accumulates from here up to the cursor
        pending_start = 0

        while pos < text_len:
            ch = text[pos]
            if ch not in self._trigger_chars:
                pos = self._plain_text_pattern.match(text, pos).end()  # type: ignore[union-attr]
                continue

            rule_match = self._match_rules(text, pos)
            if rule_match is None:
                pos += 1
                continue

            rule, end = rule_match
            # The tracker only moves when nodes are emitted, so it is still at pending_start
            if end <= pos:
                raise MarkdownSyntaxError(self._expected(), ch, tracker.advance(text[pending_start:pos]))

            if pending_start < pos:
                chunk = text[pending_start:pos]
                nodes.append(MarkdownTextNode(content=chunk, loc=tracker.span(chunk)))

            nodes.append(rule.build(text, pos, end, tracker.span(text[pos:end])))
            pos = end
            pending_start = end

        if pending_start < text_len:
            chunk = text[pending_start:]
            nodes.append(MarkdownTextNode(content=chunk, loc=tracker.span(chunk)))

        self._logger.debug("Parsed %d characters into %d nodes", text_len, len(nodes))
        return nodes

    def _parse_rule(self, text: str, rule: MarkdownRule) -> List[MarkdownNode]:
        """
        Parse the whole input as a single match of one rule.

        Args:
            text: The input
            rule: The rule that must match all of the input

        Returns:
            A list holding the one node the rule produced

        Raises:
            MarkdownSyntaxError: If the rule does not match, or leaves input unconsumed
        """
        tracker = MarkdownLocationTracker()
        end = rule.match(text, 0)
        if end == NO_MATCH:
            found = text[0] if text else None
            self._logger.debug("Start rule '%s' does not match", rule.name)
            raise MarkdownSyntaxError(rule.expected, found, tracker.position())

        if end < len(text):
            self._logger.debug("Start rule '%s' stopped at offset %d of %d", rule.name, end, len(text))
            raise MarkdownSyntaxError(("end of input",), text[end], tracker.advance(text[:end]))

        return [rule.build(text, 0, end, tracker.span(text))]


_default_parser = MarkdownParser()


def parse(text: str, start_rule: str | None = None) -> List[MarkdownNode]:
    """
    Parse markdown text into a flat list of location-annotated nodes.

    Args:
        text: The markdown text to parse
        start_rule: Name of the rule to start from, or None for the whole-document rule

    Returns:
        The nodes, in source order, covering the whole input

    Raises:
        MarkdownSyntaxError: If the input is empty, or does not match the start rule
        ValueError: If the start rule is unknown
    """
    return _default_parser.parse(text, start_rule)
