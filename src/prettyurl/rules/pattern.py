"""Pattern and target template parsing.

Patterns are matched against the request path with its leading slash
removed. Literal text matches itself; ``{name}`` and ``{name:converter}``
capture a value. Targets are ``name=value`` pairs joined by ``&`` whose
values may embed ``{name}`` placeholders.
"""

import re
from collections import Counter
from typing import TYPE_CHECKING

from prettyurl.errors import PatternError
from prettyurl.rules.params import CONVERTERS, DEFAULT_CONVERTER

if TYPE_CHECKING:
    from prettyurl.rules.rule import PatternPart, TargetParam

_CAPTURE = re.compile(r"\{([^{}]*)\}")
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def parse_pattern(pattern: str) -> list["PatternPart"]:
    """Parse a rule pattern into literal and capture parts.

    Examples::

        "{p}"                -> [PatternPart("{p}", is_capture=True, name="p")]
        "sd={id:digits}"     -> [PatternPart("sd="), PatternPart("{id:digits}", ...)]
        "detail/{id:digits}" -> [PatternPart("detail/"), PatternPart("{id:digits}", ...)]
    """
    from prettyurl.rules.rule import PatternPart

    if "<" in pattern or ">" in pattern:
        raise PatternError(pattern, "Use {name} captures, not <name>")

    body = pattern.strip("/")
    parts: list[PatternPart] = []
    pos = 0
    for m in _CAPTURE.finditer(body):
        if m.start() > pos:
            parts.append(_literal(body[pos : m.start()], pattern))
        inner = m.group(1)
        if ":" in inner:
            name, converter = inner.split(":", 1)
        else:
            name, converter = inner, DEFAULT_CONVERTER
        if not _IDENTIFIER.match(name):
            raise PatternError(pattern, f"Invalid capture name {name!r}")
        if converter not in CONVERTERS:
            raise PatternError(pattern, f"Unknown converter {converter!r}")
        parts.append(
            PatternPart(value=m.group(0), is_capture=True, name=name, converter=converter)
        )
        pos = m.end()
    if pos < len(body):
        parts.append(_literal(body[pos:], pattern))

    names = [p.name for p in parts if p.is_capture]
    duplicates = sorted(n for n, count in Counter(names).items() if count > 1)
    if duplicates:
        raise PatternError(pattern, f"Duplicate capture {duplicates[0]!r}")
    for i, part in enumerate(parts):
        if part.converter == "path" and part.is_capture and i != len(parts) - 1:
            raise PatternError(pattern, "A path capture must come last")
    return parts


def _literal(text: str, pattern: str) -> "PatternPart":
    from prettyurl.rules.rule import PatternPart

    if "{" in text or "}" in text:
        raise PatternError(pattern, "Unbalanced brace")
    return PatternPart(value=text)


def compile_pattern(parts: list["PatternPart"]) -> re.Pattern[str]:
    """Compile parsed parts into an anchored regex with named groups."""
    chunks: list[str] = []
    for part in parts:
        if part.is_capture:
            chunks.append(f"(?P<{part.name}>{CONVERTERS[part.converter]})")
        else:
            chunks.append(re.escape(part.value))
    return re.compile("^" + "".join(chunks) + "$")


def parse_target(target: str) -> list["TargetParam"]:
    """Parse a target template such as ``p=show_detail&id={id}``."""
    from prettyurl.rules.rule import TargetParam

    params: list[TargetParam] = []
    for pair in target.split("&"):
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise PatternError(target, f"Expected name=value, got {pair!r}")
        if "{" in name or "}" in name:
            raise PatternError(target, f"Placeholder in parameter name {name!r}")
        placeholders = tuple(m.group(1) for m in _CAPTURE.finditer(value))
        for placeholder in placeholders:
            if not _IDENTIFIER.match(placeholder):
                raise PatternError(target, f"Invalid placeholder {placeholder!r}")
        if "{" in _CAPTURE.sub("", value) or "}" in _CAPTURE.sub("", value):
            raise PatternError(target, "Unbalanced brace")
        params.append(TargetParam(name=name, value=value, placeholders=placeholders))
    return params


def validate_rule(
    pattern: str, parts: list["PatternPart"], params: list["TargetParam"]
) -> None:
    """Check that every capture is used exactly once by the target.

    Raises ``PatternError`` on a missing, unknown, or repeated placeholder.
    """
    captures = Counter(p.name for p in parts if p.is_capture)
    placeholders = Counter(name for param in params for name in param.placeholders)
    if captures == placeholders:
        return
    unknown = sorted(set(placeholders) - set(captures))
    if unknown:
        raise PatternError(pattern, f"Target uses unknown capture {unknown[0]!r}")
    unused = sorted(set(captures) - set(placeholders))
    if unused:
        raise PatternError(pattern, f"Capture {unused[0]!r} is not used by the target")
    repeated = sorted(n for n, count in placeholders.items() if count > 1)
    raise PatternError(pattern, f"Capture {repeated[0]!r} is used more than once")
