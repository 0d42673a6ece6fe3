"""Label-level trie over reversed PSL rules.

Rules are inserted top-level label first: "*.kobe.jp" becomes the path
jp -> kobe -> <wildcard>. Sharing the top labels keeps the ~10k rules of
the real list in a shallow structure (depth is single digits), and lets
a lookup walk right-to-left through a hostname in O(labels).

Each node has one dict edge per distinct label plus one reserved
wildcard edge standing for "any single label". Keeping the wildcard out
of the dict means a hostname label spelled "*" cannot collide with it.

The index is filled once by from_rules() and never mutated afterwards,
so any number of threads may read it without locking.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from publicsuffix_lite.rules.types import WILDCARD, Rule, Terminal

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TrieNode:
    """A node in the rule trie.

    children maps a literal label to the next node.
    wildcard is the "any single label" edge, if some rule uses it here.
    terminal is set when a rule ends at this node.
    """
    children: dict[str, TrieNode] = field(default_factory=dict)
    wildcard: TrieNode | None = None
    terminal: Terminal | None = None


class RuleIndex:
    """Immutable trie built from parsed rules.

    Usage:
        index = RuleIndex.from_rules(parse_rules(text).rules)
        index.rule_count
        index.terminal_at(("uk", "co"))
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._rule_count = 0
        self._max_depth = 0

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleIndex:
        index = cls()
        for rule in rules:
            index._insert(rule)
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "built rule index: %d rules, %d nodes, max depth %d",
                index._rule_count, index.node_count(), index._max_depth,
            )
        return index

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def rule_count(self) -> int:
        return self._rule_count

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def is_empty(self) -> bool:
        return self._rule_count == 0

    def _insert(self, rule: Rule) -> None:
        # A repeated rule overwrites the earlier terminal; well-formed
        # lists carry no conflicting duplicates.
        node = self._root
        for label in rule.labels:
            if label == WILDCARD:
                if node.wildcard is None:
                    node.wildcard = TrieNode()
                node = node.wildcard
            else:
                child = node.children.get(label)
                if child is None:
                    child = node.children[label] = TrieNode()
                node = child
        node.terminal = Terminal(rule.section, rule.is_exception)
        self._rule_count += 1
        self._max_depth = max(self._max_depth, rule.depth)

    def terminal_at(self, labels: Sequence[str]) -> Terminal | None:
        """Return the terminal stored at the exact rule path, if any.

        labels are reversed rule labels; "*" follows the wildcard edge.
        """
        node: TrieNode | None = self._root
        for label in labels:
            if label == WILDCARD:
                node = node.wildcard
            else:
                node = node.children.get(label)
            if node is None:
                return None
        return node.terminal

    def node_count(self) -> int:
        """Count total nodes in the trie (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
            if node.wildcard is not None:
                stack.append(node.wildcard)
        return count
