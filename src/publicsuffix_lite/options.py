"""Match-time options passed to every PublicSuffixList query.

Options are frozen values; derive variants with dataclasses.replace or
the preset classmethods instead of mutating a shared instance.
"""
from __future__ import annotations

from dataclasses import dataclass

from publicsuffix_lite.normalizer import DEFAULT_NORMALIZER, NormalizerConfig
from publicsuffix_lite.rules.types import TypeFilter


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """How one hostname is interpreted during a lookup.

    type_filter: which list sections may match.
    normalizer: hostname canonicalization switches.
    wildcard: follow wildcard rules ("*.ck"); False ignores them.
    strict: require a listed rule; False falls back to "top label is
        the suffix" when nothing matches.
    """
    type_filter: TypeFilter = TypeFilter.ALL
    normalizer: NormalizerConfig = DEFAULT_NORMALIZER
    wildcard: bool = True
    strict: bool = False

    @classmethod
    def icann_only(cls) -> MatchOptions:
        return cls(type_filter=TypeFilter.ICANN_ONLY)

    @classmethod
    def private_only(cls) -> MatchOptions:
        return cls(type_filter=TypeFilter.PRIVATE_ONLY)

    @classmethod
    def raw(cls) -> MatchOptions:
        """Default matching with no trailing-dot stripping or ASCII conversion."""
        return cls(normalizer=NormalizerConfig.raw())


DEFAULT_MATCH_OPTIONS = MatchOptions()
