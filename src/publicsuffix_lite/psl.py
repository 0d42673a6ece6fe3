"""PublicSuffixList: the query facade over a compiled rule trie.

Construction (once per list):
    text -> RuleParser -> rules -> RuleIndex

Per query:
    hostname -> Normalizer -> labels -> Matcher -> suffix length N
    -> result strings built from the normalized labels

Results are always normalized (lowercase, ACE labels when conversion
is on). A hostname that fails normalization never raises; the query
returns None.

Thread safety: nothing is mutated after __init__. Share one instance
across all threads.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from publicsuffix_lite.errors import InvalidLabelError
from publicsuffix_lite.matching.matcher import Matcher
from publicsuffix_lite.matching.trie import RuleIndex
from publicsuffix_lite.normalizer import Normalizer
from publicsuffix_lite.options import DEFAULT_MATCH_OPTIONS, MatchOptions
from publicsuffix_lite.rules.parser import (
    DEFAULT_LOAD_OPTIONS,
    LoadOptions,
    ParseWarning,
    RuleParser,
)
from publicsuffix_lite.rules.types import Rule

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DomainParts:
    """A hostname split around its public suffix.

    "a.b.example.co.uk" -> prefix="a.b", sll="example",
                           sld="example.co.uk", tld="co.uk"
    """
    prefix: str | None
    sll: str | None
    sld: str | None
    tld: str | None


class PublicSuffixList:
    """A compiled Public Suffix List.

    Usage:
        psl = PublicSuffixList.parse(text)
        psl.tld("www.example.co.uk")    # "co.uk"
        psl.sld("www.example.co.uk")    # "example.co.uk"
        psl.split("www.example.co.uk")  # DomainParts(prefix="www", ...)
    """

    def __init__(
        self, index: RuleIndex, warnings: Sequence[ParseWarning] = ()
    ) -> None:
        self._index = index
        self._matcher = Matcher(index)
        self._warnings = tuple(warnings)

    @classmethod
    def parse(
        cls, text: str, options: LoadOptions = DEFAULT_LOAD_OPTIONS
    ) -> PublicSuffixList:
        """Build a list from raw PSL text.

        Raises ParseError (EmptyListError when no usable rule remains).
        """
        result = RuleParser(options).parse(text)
        return cls(RuleIndex.from_rules(result.rules), result.warnings)

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> PublicSuffixList:
        return cls(RuleIndex.from_rules(rules))

    @property
    def index(self) -> RuleIndex:
        return self._index

    @property
    def rule_count(self) -> int:
        return self._index.rule_count

    @property
    def warnings(self) -> tuple[ParseWarning, ...]:
        return self._warnings

    def __repr__(self) -> str:
        return f"PublicSuffixList(rules={self._index.rule_count})"

    def tld(
        self, hostname: str, options: MatchOptions = DEFAULT_MATCH_OPTIONS
    ) -> str | None:
        """Public suffix of hostname, or None."""
        match = self._match(hostname, options)
        if match is None:
            return None
        labels, n = match
        return ".".join(labels[-n:])

    def sld(
        self, hostname: str, options: MatchOptions = DEFAULT_MATCH_OPTIONS
    ) -> str | None:
        """Registrable domain (public suffix plus one label), or None.

        A hostname that is itself a public suffix is its own
        registrable domain.
        """
        match = self._match(hostname, options)
        if match is None:
            return None
        labels, n = match
        return ".".join(labels[-(n + 1):])

    def split(
        self, hostname: str, options: MatchOptions = DEFAULT_MATCH_OPTIONS
    ) -> DomainParts | None:
        """Split hostname into prefix / sll / sld / tld with one lookup."""
        match = self._match(hostname, options)
        if match is None:
            return None
        labels, n = match
        tld = ".".join(labels[-n:])
        if len(labels) == n:
            return DomainParts(prefix=None, sll=None, sld=tld, tld=tld)
        return DomainParts(
            prefix=".".join(labels[:-(n + 1)]) or None,
            sll=labels[-(n + 1)],
            sld=".".join(labels[-(n + 1):]),
            tld=tld,
        )

    def _match(
        self, hostname: str, options: MatchOptions
    ) -> tuple[list[str], int] | None:
        """Normalize and look up hostname.

        Returns (labels, N) where N is the suffix length in labels and
        len(labels) >= N >= 1, or None when there is no result.
        """
        try:
            labels = Normalizer(options.normalizer).labels(hostname)
        except InvalidLabelError as exc:
            log.debug("no match for %r: %s", hostname, exc)
            return None

        result = self._matcher.lookup(
            labels[::-1], options.type_filter, options.wildcard
        )
        if result.implicit and options.strict:
            return None
        n = result.suffix_length
        if n < 1 or len(labels) < n:
            return None
        return labels, n
