"""Rule table — ordered, freezable collection of rewrite rules.

Custom rules are registered ahead of the defaults so site-specific
patterns win over the generic segment rules.
"""

import logging
from collections.abc import Iterable, Iterator

from prettyurl.rules.resolver import resolve
from prettyurl.rules.rule import ResolvedQuery, Rule

logger = logging.getLogger("prettyurl.rewrite")

# (pattern, target, name), highest priority first. Longer patterns precede
# shorter ones so a three-segment path never lands on the two-segment rule.
DEFAULT_RULE_SPECS: tuple[tuple[str, str, str], ...] = (
    ("sd={id:digits}", "p=show_detail&id={id}", "short-detail"),
    ("detail/{id:digits}", "p=show_detail&id={id}", "detail"),
    ("{p}/{action}/{id}", "p={p}&action={action}&id={id}", "page-action-id"),
    ("{p}/{action}", "p={p}&action={action}", "page-action"),
    ("{p}", "p={p}", "page"),
)


def default_rules() -> list[Rule]:
    """Build the default rules in priority order."""
    return [Rule.from_strings(pattern, target, name) for pattern, target, name in DEFAULT_RULE_SPECS]


class RuleTable:
    """Ordered rewrite rules with first-match-wins resolution.

    Usage::

        table = RuleTable()
        table.add(Rule.from_strings("search/{type}", "p=search&type={type}"))
        table.extend(default_rules())
        table.compile()
        table.resolve("/search/books").to_query_string()  # "p=search&type=books"

    The catch-all fallback is implicit and always last.
    """

    __slots__ = ("_compiled", "_rules")

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = []
        self._compiled = False
        self.extend(rules)

    def add(self, rule: Rule) -> None:
        """Append a rule at the lowest priority. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add rules after compilation."
            raise RuntimeError(msg)
        self._rules.append(rule)

    def extend(self, rules: Iterable[Rule]) -> None:
        for rule in rules:
            self.add(rule)

    def compile(self) -> None:
        """Freeze the table. No more rules can be added."""
        if not self._compiled:
            logger.info("Compiled rewrite table with %d rule(s)", len(self._rules))
        self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def rules(self) -> tuple[Rule, ...]:
        """All registered rules in priority order."""
        return tuple(self._rules)

    def resolve(self, path: str) -> ResolvedQuery:
        """Resolve *path*. Compiles the table on first use."""
        if not self._compiled:
            self.compile()
        return resolve(path, self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def default_table(custom: Iterable[Rule] = ()) -> RuleTable:
    """Compiled table: *custom* rules first, then the defaults."""
    table = RuleTable(custom)
    table.extend(default_rules())
    table.compile()
    return table
