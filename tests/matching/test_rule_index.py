"""Tests for the RuleIndex trie."""

from publicsuffix_lite.matching.trie import RuleIndex
from publicsuffix_lite.rules.parser import parse_rules
from publicsuffix_lite.rules.types import Rule, Section, Terminal


def _index(text: str) -> RuleIndex:
    return RuleIndex.from_rules(parse_rules(text).rules)


class TestRuleIndexBasics:

    def test_empty_index(self):
        idx = RuleIndex.from_rules([])
        assert idx.is_empty
        assert idx.rule_count == 0
        assert idx.node_count() == 1

    def test_rule_count_and_depth(self):
        idx = _index("com\nco.uk\n*.sch.uk")
        assert idx.rule_count == 3
        assert idx.max_depth == 3

    def test_shared_suffix(self):
        """Rules sharing a top label share trie nodes."""
        idx = _index("uk\nco.uk\nac.uk")
        # root -> uk -> co, ac = 4 nodes
        assert idx.node_count() == 4

    def test_wildcard_uses_reserved_edge(self):
        idx = _index("*.ck")
        ck = idx.root.children["ck"]
        assert "*" not in ck.children
        assert ck.wildcard is not None
        assert ck.wildcard.terminal == Terminal(None, False)
        # root -> ck -> <wildcard> = 3 nodes
        assert idx.node_count() == 3

    def test_intermediate_nodes_have_no_terminal(self):
        idx = _index("k12.ak.us")
        assert idx.terminal_at(("us",)) is None
        assert idx.terminal_at(("us", "ak")) is None
        assert idx.terminal_at(("us", "ak", "k12")) == Terminal(None, False)


class TestRuleIndexTerminals:

    def test_terminal_records_section_and_exception(self):
        rules = [
            Rule(("ck", "*"), is_wildcard=True, section=Section.ICANN),
            Rule(("ck", "www"), is_exception=True, section=Section.ICANN),
            Rule(("com", "blogspot"), section=Section.PRIVATE),
        ]
        idx = RuleIndex.from_rules(rules)
        assert idx.terminal_at(("ck", "*")) == Terminal(Section.ICANN, False)
        assert idx.terminal_at(("ck", "www")) == Terminal(Section.ICANN, True)
        assert idx.terminal_at(("com", "blogspot")) == Terminal(Section.PRIVATE, False)

    def test_missing_path(self):
        idx = _index("com")
        assert idx.terminal_at(("org",)) is None
        assert idx.terminal_at(("com", "example")) is None
        assert idx.terminal_at(("com", "*")) is None

    def test_later_duplicate_overwrites(self):
        rules = [
            Rule(("com",), section=Section.ICANN),
            Rule(("com",), section=Section.PRIVATE),
        ]
        idx = RuleIndex.from_rules(rules)
        assert idx.terminal_at(("com",)) == Terminal(Section.PRIVATE, False)

    def test_many_rules(self):
        rules = [Rule(("com", f"host-{i}")) for i in range(1000)]
        idx = RuleIndex.from_rules(rules)
        assert idx.rule_count == 1000
        assert idx.terminal_at(("com", "host-500")) is not None
        assert idx.terminal_at(("com", "host-9999")) is None
