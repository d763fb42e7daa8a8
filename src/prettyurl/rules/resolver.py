"""First-match-wins resolution of a request path against ordered rules."""

import logging
from collections.abc import Iterable

from prettyurl.rules.rule import ResolvedQuery, Rule

logger = logging.getLogger("prettyurl.rewrite")


def normalize_path(path: str) -> str:
    """Strip one leading and one trailing slash. Empty input means ``/``."""
    if not path:
        path = "/"
    body = path[1:] if path.startswith("/") else path
    if body.endswith("/"):
        body = body[:-1]
    return body


def fallback_query(path: str) -> ResolvedQuery:
    """The catch-all result: ``p`` carries the entire path, unrewritten.

    The root path resolves to an empty query.
    """
    body = path[1:] if path.startswith("/") else path
    params = (("p", body),) if body else ()
    return ResolvedQuery(params=params, rule=None, fallback=True)


def resolve(path: str, rules: Iterable[Rule]) -> ResolvedQuery:
    """Resolve *path* against *rules* in order. The first full match wins.

    Never raises: a capture that fails its converter only fails that rule,
    and a path no rule matches resolves through :func:`fallback_query`.
    """
    body = normalize_path(path)
    for rule in rules:
        captures = rule.match(body)
        if captures is None:
            continue
        result = ResolvedQuery(params=rule.render(captures), rule=rule)
        logger.debug("Rewrote %r via %s -> %s", path, rule.pattern, result)
        return result

    result = fallback_query(path or "/")
    logger.debug("No rule matched %r, falling back to %s", path, result)
    return result
