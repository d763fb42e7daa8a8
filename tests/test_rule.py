"""Tests for prettyurl.rules.rule — Rule and ResolvedQuery."""

import pytest

from prettyurl.errors import PatternError
from prettyurl.rules.rule import ResolvedQuery, Rule


class TestRuleFromStrings:
    def test_builds_rule(self) -> None:
        rule = Rule.from_strings("detail/{id:digits}", "p=show_detail&id={id}", name="detail")
        assert rule.pattern == "detail/{id:digits}"
        assert rule.name == "detail"
        assert rule.captures == ("id",)
        assert str(rule) == "detail/{id:digits} -> p=show_detail&id={id}"

    def test_frozen(self) -> None:
        rule = Rule.from_strings("{p}", "p={p}")
        with pytest.raises(AttributeError):
            rule.pattern = "x"  # type: ignore[misc]

    def test_unused_capture(self) -> None:
        with pytest.raises(PatternError, match="'action' is not used"):
            Rule.from_strings("{p}/{action}", "p={p}")

    def test_unknown_placeholder(self) -> None:
        with pytest.raises(PatternError, match="unknown capture 'id'"):
            Rule.from_strings("{p}", "p={p}&id={id}")

    def test_repeated_placeholder(self) -> None:
        with pytest.raises(PatternError, match="used more than once"):
            Rule.from_strings("{p}", "p={p}&q={p}")

    def test_literal_only_rule(self) -> None:
        rule = Rule.from_strings("opac", "p=libinfo")
        assert rule.captures == ()
        assert rule.render(rule.match("opac") or {}) == (("p", "libinfo"),)


class TestRuleMatch:
    def test_match_returns_captures(self) -> None:
        rule = Rule.from_strings("{p}/{action}", "p={p}&action={action}")
        assert rule.match("member/profile") == {"p": "member", "action": "profile"}

    def test_converter_failure_is_no_match(self) -> None:
        rule = Rule.from_strings("sd={id:digits}", "p=show_detail&id={id}")
        assert rule.match("sd=abc") is None

    def test_render_in_target_order(self) -> None:
        rule = Rule.from_strings("{a}/{b}", "second={b}&first={a}")
        assert rule.render({"a": "1", "b": "2"}) == (("second", "2"), ("first", "1"))


class TestResolvedQuery:
    def test_query_string(self) -> None:
        query = ResolvedQuery(params=(("p", "member"), ("action", "profile"), ("id", "123")))
        assert query.to_query_string() == "p=member&action=profile&id=123"
        assert str(query) == "p=member&action=profile&id=123"

    def test_as_dict_and_get(self) -> None:
        query = ResolvedQuery(params=(("p", "show_detail"), ("id", "9")))
        assert query.as_dict() == {"p": "show_detail", "id": "9"}
        assert query.get("id") == "9"
        assert query.get("action") is None
        assert query.get("action", "view") == "view"

    def test_values_are_encoded(self) -> None:
        query = ResolvedQuery(params=(("p", "sd=abc"), ("q", "a b&c")))
        assert query.to_query_string() == "p=sd%3Dabc&q=a%20b%26c"

    def test_slashes_kept(self) -> None:
        query = ResolvedQuery(params=(("p", "a/b/c/d"),), fallback=True)
        assert query.to_query_string() == "p=a/b/c/d"

    def test_original_query_appended(self) -> None:
        query = ResolvedQuery(params=(("p", "libinfo"),))
        assert query.to_query_string("lang=en") == "p=libinfo&lang=en"

    def test_original_query_alone_when_empty(self) -> None:
        assert ResolvedQuery(params=()).to_query_string("lang=en") == "lang=en"
        assert ResolvedQuery(params=()).to_query_string() == ""
