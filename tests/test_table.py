"""Tests for prettyurl.rules.table — ordered, freezable rule table."""

import pytest

from prettyurl.rules.rule import Rule
from prettyurl.rules.table import DEFAULT_RULE_SPECS, RuleTable, default_rules, default_table


def _rule(pattern: str, target: str) -> Rule:
    return Rule.from_strings(pattern, target)


class TestDefaultRules:
    def test_priority_order(self) -> None:
        assert [r.pattern for r in default_rules()] == [
            "sd={id:digits}",
            "detail/{id:digits}",
            "{p}/{action}/{id}",
            "{p}/{action}",
            "{p}",
        ]

    def test_specs_and_rules_agree(self) -> None:
        assert len(default_rules()) == len(DEFAULT_RULE_SPECS)

    def test_every_default_is_named(self) -> None:
        assert all(r.name for r in default_rules())


class TestRuleTable:
    def test_add_and_list(self) -> None:
        table = RuleTable()
        first = _rule("a", "p=a")
        second = _rule("{p}", "p={p}")
        table.add(first)
        table.add(second)
        assert table.rules == (first, second)
        assert len(table) == 2
        assert list(table) == [first, second]

    def test_add_after_compile_raises(self) -> None:
        table = RuleTable()
        table.compile()
        with pytest.raises(RuntimeError, match="after compilation"):
            table.add(_rule("{p}", "p={p}"))

    def test_resolve_compiles(self) -> None:
        table = RuleTable(default_rules())
        assert table.compiled is False
        table.resolve("/libinfo")
        assert table.compiled is True

    def test_compile_is_idempotent(self) -> None:
        table = RuleTable()
        table.compile()
        table.compile()
        assert table.compiled is True

    def test_empty_table_falls_back(self) -> None:
        table = RuleTable()
        assert table.resolve("/libinfo").fallback is True


class TestDefaultTable:
    def test_compiled(self) -> None:
        assert default_table().compiled is True

    def test_custom_first(self) -> None:
        custom = _rule("search/{type}", "p=search&type={type}")
        table = default_table([custom])
        assert table.rules[0] is custom
        assert len(table) == len(DEFAULT_RULE_SPECS) + 1
        assert table.resolve("/search/books").to_query_string() == "p=search&type=books"

    def test_custom_overrides_generic(self) -> None:
        custom = _rule("{p}/{action}", "p={p}&do={action}")
        table = default_table([custom])
        assert table.resolve("/member/logout").as_dict() == {"p": "member", "do": "logout"}

    def test_without_custom_generic_two_segment(self) -> None:
        assert default_table().resolve("/search/books").to_query_string() == (
            "p=search&action=books"
        )
