"""Rule, TargetParam, and ResolvedQuery frozen dataclasses."""

import re
from dataclasses import dataclass
from urllib.parse import quote, urlencode

from prettyurl.rules.pattern import compile_pattern, parse_pattern, parse_target, validate_rule


@dataclass(frozen=True, slots=True)
class PatternPart:
    """A parsed piece of a rule pattern.

    Literal:  ``detail/``  (is_capture=False)
    Capture:  ``{id}``     (is_capture=True, name="id", converter="seg")
    Typed:    ``{id:digits}`` (is_capture=True, name="id", converter="digits")
    """

    value: str
    is_capture: bool = False
    name: str | None = None
    converter: str = "seg"


@dataclass(frozen=True, slots=True)
class TargetParam:
    """One ``name=value`` pair of a target template.

    ``value`` may embed ``{capture}`` placeholders, listed in ``placeholders``.
    """

    name: str
    value: str
    placeholders: tuple[str, ...] = ()

    def render(self, captures: dict[str, str]) -> str:
        if not self.placeholders:
            return self.value
        return _PLACEHOLDER.sub(lambda m: captures[m.group(1)], self.value)


_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True, slots=True)
class Rule:
    """A frozen rewrite rule: path pattern plus target parameter template.

    Build with :meth:`from_strings`, which parses and validates both halves::

        Rule.from_strings("detail/{id:digits}", "p=show_detail&id={id}")
    """

    pattern: str
    target: str
    parts: tuple[PatternPart, ...]
    params: tuple[TargetParam, ...]
    regex: re.Pattern[str]
    name: str | None = None

    @classmethod
    def from_strings(cls, pattern: str, target: str, name: str | None = None) -> "Rule":
        """Parse *pattern* and *target* into a validated rule.

        Raises ``PatternError`` if either half is malformed or the capture
        names do not line up with the template placeholders.
        """
        parts = parse_pattern(pattern)
        params = parse_target(target)
        validate_rule(pattern, parts, params)
        return cls(
            pattern=pattern,
            target=target,
            parts=tuple(parts),
            params=tuple(params),
            regex=compile_pattern(parts),
            name=name,
        )

    @property
    def captures(self) -> tuple[str, ...]:
        """Capture names in pattern order."""
        return tuple(p.name for p in self.parts if p.is_capture and p.name)

    def match(self, path: str) -> dict[str, str] | None:
        """Match a normalized path (no leading slash). Returns captures or None."""
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return m.groupdict()

    def render(self, captures: dict[str, str]) -> tuple[tuple[str, str], ...]:
        """Build the resolved parameter pairs from a successful match."""
        return tuple((param.name, param.render(captures)) for param in self.params)

    def __str__(self) -> str:
        return f"{self.pattern} -> {self.target}"


@dataclass(frozen=True, slots=True)
class ResolvedQuery:
    """Result of resolving a request path.

    ``rule`` is the rule that matched, or None when the catch-all fallback
    produced the result (``fallback=True``).
    """

    params: tuple[tuple[str, str], ...]
    rule: Rule | None = None
    fallback: bool = False

    def get(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.params:
            if key == name:
                return value
        return default

    def as_dict(self) -> dict[str, str]:
        return dict(self.params)

    def to_query_string(self, original: str = "") -> str:
        """Encode the params as a query string.

        A non-empty *original* query string is appended after the
        rewritten params, so request arguments survive the rewrite.
        """
        encoded = urlencode(self.params, quote_via=quote, safe="/")
        if not original:
            return encoded
        if not encoded:
            return original
        return f"{encoded}&{original}"

    def __str__(self) -> str:
        return self.to_query_string()
