"""Line-oriented parser for Public Suffix List text.

Input format (https://publicsuffix.org/list/):

    // ===BEGIN ICANN DOMAINS===
    com
    *.ck
    !www.ck
    // ===END ICANN DOMAINS===
    // ===BEGIN PRIVATE DOMAINS===
    blogspot.com
    // ===END PRIVATE DOMAINS===

Each rule line contributes one Rule (two for an internationalized rule,
which is also emitted in ACE form). Only the first whitespace-separated
token of a line is the rule; the rest is ignored, as the list format
specifies.

Section handling depends on SectionPolicy:
    AUTO     -- markers present: rules outside both sections are skipped.
                No markers at all: every rule is kept, unclassified.
    REQUIRE  -- like AUTO with markers; no markers is an error.
    IGNORE   -- markers are ordinary comments; every rule is unclassified.

Malformed rule lines are skipped (or raise, with strict_rules). The only
unconditional failure is a text with zero usable rules.
"""
from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from enum import Enum, auto

from publicsuffix_lite.errors import (
    EmptyListError,
    IdnaConversionError,
    InvalidRuleError,
    MissingSectionsError,
    RuleSyntax,
)
from publicsuffix_lite.normalizer import ascii_lower, to_ascii_label
from publicsuffix_lite.rules.types import WILDCARD, Rule, Section

log = logging.getLogger(__name__)

ICANN_BEGIN = "===BEGIN ICANN DOMAINS==="
ICANN_END = "===END ICANN DOMAINS==="
PRIVATE_BEGIN = "===BEGIN PRIVATE DOMAINS==="
PRIVATE_END = "===END PRIVATE DOMAINS==="

_MARKER_HINTS = ("===BEGIN ", "===END ")
_RULE_ASCII_CHARS = frozenset(string.ascii_lowercase + string.digits + "-_")


class SectionPolicy(Enum):
    AUTO = auto()
    IGNORE = auto()
    REQUIRE = auto()


class CommentPolicy(Enum):
    """COMMON accepts "//", "#" and ";" comments; OFFICIAL_ONLY only "//"."""
    COMMON = auto()
    OFFICIAL_ONLY = auto()

    def is_comment(self, line: str) -> bool:
        if line.startswith("//"):
            return True
        if self is CommentPolicy.COMMON:
            return line.startswith(("#", ";"))
        return False


@dataclass(frozen=True, slots=True)
class LoadOptions:
    """Parse-time options. They never change how lookups behave."""
    sections: SectionPolicy = SectionPolicy.AUTO
    comments: CommentPolicy = CommentPolicy.COMMON
    strict_rules: bool = False       # raise on malformed rules instead of skipping
    collect_warnings: bool = False   # keep ParseWarning records on the result
    idna_rules: bool = True          # also emit ACE forms of Unicode rules


DEFAULT_LOAD_OPTIONS = LoadOptions()


class WarningKind(Enum):
    DUPLICATE_RULE = auto()
    UNKNOWN_MARKER = auto()
    TRAILING_DOT_RULE = auto()


@dataclass(frozen=True, slots=True)
class ParseWarning:
    """A non-fatal oddity found while parsing."""
    kind: WarningKind
    line_number: int
    text: str


@dataclass(slots=True)
class ParseResult:
    rules: list[Rule]
    warnings: list[ParseWarning] = field(default_factory=list)


class RuleParser:
    """Converts raw list text into Rule records.

    The parser keeps no state between parse() calls, so one instance can
    be reused for several texts.

    Usage:
        result = RuleParser().parse(text)
        result.rules  # [Rule(labels=("com",), ...), ...]
    """

    def __init__(self, options: LoadOptions = DEFAULT_LOAD_OPTIONS) -> None:
        self._options = options

    @property
    def options(self) -> LoadOptions:
        return self._options

    def parse(self, text: str) -> ParseResult:
        """Parse text into rules.

        Raises EmptyListError when nothing usable remains,
        MissingSectionsError under SectionPolicy.REQUIRE without markers,
        and InvalidRuleError for a malformed rule when strict_rules is set.
        """
        policy = self._options.sections
        section: Section | None = None
        saw_marker = False
        inside: list[Rule] = []
        outside: list[Rule] = []
        warnings: list[ParseWarning] = []
        seen: set[tuple[tuple[str, ...], bool]] = set()
        malformed = 0

        for line_number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue

            if self._options.comments.is_comment(line):
                if policy is SectionPolicy.IGNORE or not line.startswith("//"):
                    continue
                if ICANN_BEGIN in line:
                    section, saw_marker = Section.ICANN, True
                elif PRIVATE_BEGIN in line:
                    section, saw_marker = Section.PRIVATE, True
                elif ICANN_END in line or PRIVATE_END in line:
                    section = None
                elif any(hint in line for hint in _MARKER_HINTS):
                    self._warn(warnings, WarningKind.UNKNOWN_MARKER, line_number, line)
                continue

            try:
                parsed = self._parse_rule(line, line_number, section, warnings)
            except InvalidRuleError as exc:
                if self._options.strict_rules:
                    raise
                malformed += 1
                log.debug("skipping malformed rule: %s", exc)
                continue

            for rule in parsed:
                key = (rule.labels, rule.is_exception)
                if key in seen:
                    self._warn(
                        warnings, WarningKind.DUPLICATE_RULE, line_number, rule.pattern
                    )
                seen.add(key)
            if section is None and policy is not SectionPolicy.IGNORE:
                outside.extend(parsed)
            else:
                inside.extend(parsed)

        if policy is SectionPolicy.REQUIRE and not saw_marker:
            raise MissingSectionsError()

        if policy is SectionPolicy.AUTO and not saw_marker:
            rules = outside
        else:
            rules = inside
            if outside:
                log.debug(
                    "skipped %d rules outside ICANN/PRIVATE sections", len(outside)
                )

        if not rules:
            raise EmptyListError()

        log.debug(
            "parsed %d rules (icann=%d, private=%d, unclassified=%d, malformed=%d)",
            len(rules),
            sum(1 for r in rules if r.section is Section.ICANN),
            sum(1 for r in rules if r.section is Section.PRIVATE),
            sum(1 for r in rules if r.section is None),
            malformed,
        )
        if not self._options.collect_warnings:
            warnings = []
        return ParseResult(rules=rules, warnings=warnings)

    def _parse_rule(
        self,
        line: str,
        line_number: int,
        section: Section | None,
        warnings: list[ParseWarning],
    ) -> list[Rule]:
        """Parse one rule line into its Rule (plus the ACE twin, if any)."""
        token = line.split()[0]
        is_exception = token.startswith("!")
        body = token[1:] if is_exception else token

        if body.endswith(".") and len(body) > 1:
            self._warn(warnings, WarningKind.TRAILING_DOT_RULE, line_number, token)
            body = body[:-1]
        if not body:
            raise InvalidRuleError(token, RuleSyntax.EMPTY, line_number)

        labels = ascii_lower(body).split(".")
        for label in labels:
            self._check_label(label, token, is_exception, line_number)

        is_wildcard = WILDCARD in labels
        rules = [Rule(tuple(reversed(labels)), is_wildcard, is_exception, section)]

        if self._options.idna_rules and not body.isascii():
            try:
                ace = [
                    label if label.isascii() else to_ascii_label(label)
                    for label in labels
                ]
            except IdnaConversionError as exc:
                log.debug("line %d: no ASCII form for %r: %s", line_number, token, exc)
            else:
                rules.append(
                    Rule(tuple(reversed(ace)), is_wildcard, is_exception, section)
                )
        return rules

    @staticmethod
    def _check_label(
        label: str, token: str, is_exception: bool, line_number: int
    ) -> None:
        if not label:
            raise InvalidRuleError(token, RuleSyntax.HAS_EMPTY_LABEL, line_number)
        if label == WILDCARD:
            if is_exception:
                raise InvalidRuleError(token, RuleSyntax.MISPLACED_WILDCARD, line_number)
            return
        if WILDCARD in label:
            raise InvalidRuleError(token, RuleSyntax.MISPLACED_WILDCARD, line_number)
        if any(ch.isascii() and ch not in _RULE_ASCII_CHARS for ch in label):
            raise InvalidRuleError(token, RuleSyntax.CONTAINS_ILLEGAL_CHAR, line_number)

    @staticmethod
    def _warn(
        warnings: list[ParseWarning], kind: WarningKind, line_number: int, text: str
    ) -> None:
        log.debug("line %d: %s: %s", line_number, kind.name.lower(), text)
        warnings.append(ParseWarning(kind, line_number, text))


def parse_rules(text: str, options: LoadOptions = DEFAULT_LOAD_OPTIONS) -> ParseResult:
    """Shortcut for RuleParser(options).parse(text)."""
    return RuleParser(options).parse(text)
