"""Rule records and the PSL text parser."""

from publicsuffix_lite.rules.parser import (
    DEFAULT_LOAD_OPTIONS,
    CommentPolicy,
    LoadOptions,
    ParseResult,
    ParseWarning,
    RuleParser,
    SectionPolicy,
    WarningKind,
    parse_rules,
)
from publicsuffix_lite.rules.types import (
    WILDCARD,
    Rule,
    RuleKind,
    Section,
    Terminal,
    TypeFilter,
)

__all__ = [
    "CommentPolicy",
    "DEFAULT_LOAD_OPTIONS",
    "LoadOptions",
    "ParseResult",
    "ParseWarning",
    "Rule",
    "RuleKind",
    "RuleParser",
    "Section",
    "SectionPolicy",
    "Terminal",
    "TypeFilter",
    "WILDCARD",
    "WarningKind",
    "parse_rules",
]
