"""Longest-match walk over the rule trie.

Given a hostname's labels reversed ("www.city.kobe.jp" ->
["jp", "kobe", "city", "www"]), the matcher explores every trie path
the hostname can follow: at each node both the exact-label child and
the wildcard child. Every visited node carrying a rule that passes the
section filter is a candidate. The winner is:

  1. the candidate consuming the most labels, across both branches
     (a deep terminal under the wildcard branch beats a shallower one
     on the exact branch, and vice versa);
  2. at equal depth, an exception rule ("!www.ck" beats "*.ck").

With no candidate, the implicit "*" rule applies: the top label alone
is the public suffix.

Thread safety: Matcher holds only a reference to an immutable
RuleIndex. lookup() is a pure function of its arguments.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from publicsuffix_lite.matching.trie import RuleIndex, TrieNode
from publicsuffix_lite.rules.types import TypeFilter


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a lookup.

    depth is the number of labels the winning rule consumed.
    implicit is True when no listed rule matched.
    """
    depth: int
    is_exception: bool = False
    implicit: bool = False

    @property
    def suffix_length(self) -> int:
        """Labels in the public suffix. An exception names the label
        that is not itself a suffix, so it drops out."""
        if self.is_exception:
            return self.depth - 1
        return self.depth

    def outranks(self, other: MatchResult) -> bool:
        if self.depth != other.depth:
            return self.depth > other.depth
        return self.is_exception and not other.is_exception


IMPLICIT_MATCH = MatchResult(depth=1, implicit=True)


class Matcher:
    """Runs lookups against one RuleIndex.

    Usage:
        matcher = Matcher(index)
        matcher.lookup(["jp", "kobe", "city", "www"])
        # MatchResult(depth=3, is_exception=True, implicit=False)
    """

    def __init__(self, index: RuleIndex) -> None:
        self._index = index

    @property
    def index(self) -> RuleIndex:
        return self._index

    def lookup(
        self,
        reversed_labels: Sequence[str],
        type_filter: TypeFilter = TypeFilter.ALL,
        wildcard: bool = True,
    ) -> MatchResult:
        """Return the winning rule for the reversed label sequence.

        wildcard=False ignores every wildcard edge.
        """
        best = self._walk(
            self._index.root, reversed_labels, 0, type_filter, wildcard, None
        )
        return best if best is not None else IMPLICIT_MATCH

    def _walk(
        self,
        node: TrieNode,
        labels: Sequence[str],
        depth: int,
        type_filter: TypeFilter,
        wildcard: bool,
        best: MatchResult | None,
    ) -> MatchResult | None:
        """Recursive DFS, branching on exact label and wildcard."""
        terminal = node.terminal
        if terminal is not None and type_filter.accepts(terminal.section):
            candidate = MatchResult(depth, terminal.is_exception)
            if best is None or candidate.outranks(best):
                best = candidate

        if depth == len(labels):
            return best

        child = node.children.get(labels[depth])
        if child is not None:
            best = self._walk(child, labels, depth + 1, type_filter, wildcard, best)

        if wildcard and node.wildcard is not None:
            best = self._walk(
                node.wildcard, labels, depth + 1, type_filter, wildcard, best
            )
        return best
