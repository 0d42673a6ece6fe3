"""Rule records produced by the parser and consumed by the trie builder."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

# Reserved label standing for "any single label" in a wildcard rule.
WILDCARD = "*"


class Section(Enum):
    ICANN = auto()
    PRIVATE = auto()


class TypeFilter(Enum):
    """Which list sections are eligible during a lookup."""
    ALL = auto()
    ICANN_ONLY = auto()
    PRIVATE_ONLY = auto()

    def accepts(self, section: Section | None) -> bool:
        """Unclassified rules (section None) only pass ALL."""
        if self is TypeFilter.ALL:
            return True
        if self is TypeFilter.ICANN_ONLY:
            return section is Section.ICANN
        return section is Section.PRIVATE


class RuleKind(Enum):
    NORMAL = auto()
    WILDCARD = auto()
    EXCEPTION = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    """One parsed PSL rule.

    labels are stored right-to-left, top-level label first:
    "*.kobe.jp" becomes ("jp", "kobe", "*").
    """
    labels: tuple[str, ...]
    is_wildcard: bool = False
    is_exception: bool = False
    section: Section | None = None

    @property
    def kind(self) -> RuleKind:
        if self.is_exception:
            return RuleKind.EXCEPTION
        if self.is_wildcard:
            return RuleKind.WILDCARD
        return RuleKind.NORMAL

    @property
    def depth(self) -> int:
        return len(self.labels)

    @property
    def pattern(self) -> str:
        """The rule as it would appear in the list, e.g. "!city.kobe.jp"."""
        text = ".".join(reversed(self.labels))
        return "!" + text if self.is_exception else text


@dataclass(frozen=True, slots=True)
class Terminal:
    """Marker on a trie node recording the rule that ends there."""
    section: Section | None
    is_exception: bool
