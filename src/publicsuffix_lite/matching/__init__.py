"""Rule trie and longest-match lookup."""

from publicsuffix_lite.matching.matcher import IMPLICIT_MATCH, Matcher, MatchResult
from publicsuffix_lite.matching.trie import RuleIndex, TrieNode

__all__ = [
    "IMPLICIT_MATCH",
    "MatchResult",
    "Matcher",
    "RuleIndex",
    "TrieNode",
]
