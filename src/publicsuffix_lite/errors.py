"""Exceptions raised while building a suffix list or normalizing a hostname.

Construction-time errors (ParseError and subclasses) are fatal for the
input that produced them. Query-time errors (InvalidLabelError and
IdnaConversionError) never escape PublicSuffixList: the facade turns
them into a "no match" result, since malformed hostnames are an
ordinary input class.
"""
from __future__ import annotations

from enum import Enum, auto


class RuleSyntax(Enum):
    """Why a rule line was rejected."""
    EMPTY = auto()
    HAS_EMPTY_LABEL = auto()
    MISPLACED_WILDCARD = auto()
    CONTAINS_ILLEGAL_CHAR = auto()


class PublicSuffixError(Exception):
    """Base class for every error raised by publicsuffix_lite."""


class ParseError(PublicSuffixError):
    """Raised when raw rule text cannot produce a usable list."""


class EmptyListError(ParseError):
    """Raised when the text yields zero usable rules."""

    def __init__(self, message: str = "rule list contains no usable rules") -> None:
        super().__init__(message)


class MissingSectionsError(ParseError):
    """Raised when section markers are required but absent."""

    def __init__(self) -> None:
        super().__init__(
            "rule list has no ICANN or PRIVATE section markers"
        )


class InvalidRuleError(ParseError):
    """Raised for a malformed rule when strict rule parsing is enabled."""

    def __init__(self, rule: str, reason: RuleSyntax, line_number: int) -> None:
        self.rule = rule
        self.reason = reason
        self.line_number = line_number
        super().__init__(
            f"line {line_number}: invalid rule {rule!r} ({reason.name.lower()})"
        )


class InvalidLabelError(PublicSuffixError):
    """Raised when a hostname label fails syntax checks."""

    def __init__(self, label: str, message: str) -> None:
        self.label = label
        super().__init__(message)


class IdnaConversionError(InvalidLabelError):
    """Raised when a Unicode label cannot be converted to its ACE form."""
