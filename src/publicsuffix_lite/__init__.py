"""publicsuffix-lite: Public Suffix List matching in pure Python.

Re-exports the public API for convenient access:
    from publicsuffix_lite import PublicSuffixList, MatchOptions, TypeFilter
"""
from publicsuffix_lite.errors import (
    EmptyListError,
    IdnaConversionError,
    InvalidLabelError,
    InvalidRuleError,
    MissingSectionsError,
    ParseError,
    PublicSuffixError,
    RuleSyntax,
)
from publicsuffix_lite.normalizer import (
    DEFAULT_NORMALIZER,
    Normalizer,
    NormalizerConfig,
    normalize_hostname,
)
from publicsuffix_lite.options import DEFAULT_MATCH_OPTIONS, MatchOptions
from publicsuffix_lite.psl import DomainParts, PublicSuffixList
from publicsuffix_lite.rules import (
    CommentPolicy,
    LoadOptions,
    ParseWarning,
    Section,
    SectionPolicy,
    TypeFilter,
    WarningKind,
)

__all__ = [
    "CommentPolicy",
    "DEFAULT_MATCH_OPTIONS",
    "DEFAULT_NORMALIZER",
    "DomainParts",
    "EmptyListError",
    "IdnaConversionError",
    "InvalidLabelError",
    "InvalidRuleError",
    "LoadOptions",
    "MatchOptions",
    "MissingSectionsError",
    "Normalizer",
    "NormalizerConfig",
    "ParseError",
    "ParseWarning",
    "PublicSuffixError",
    "PublicSuffixList",
    "RuleSyntax",
    "Section",
    "SectionPolicy",
    "TypeFilter",
    "WarningKind",
    "normalize_hostname",
]
