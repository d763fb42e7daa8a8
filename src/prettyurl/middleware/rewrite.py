"""Pretty-URL rewrite middleware.

Wraps an ASGI application. Request paths under the configured base path
are resolved against the rule table; the wrapped app sees the entry path
with the resolved parameters as its query string.

Falls through unchanged for non-http scopes, passthrough prefixes, and
(by default) paths only the catch-all matched.
"""

import logging
from urllib.parse import quote

from prettyurl._internal.asgi import EXTENSION_KEY, ASGIApp, Receive, Scope, Send
from prettyurl.config import RewriteConfig
from prettyurl.rules.table import RuleTable

logger = logging.getLogger("prettyurl.rewrite")


def _normalize_prefix(prefix: str) -> str:
    # "/" normalizes to "" so every path is under it
    stripped = "/" + prefix.strip("/")
    return stripped if stripped != "/" else ""


class RewriteMiddleware:
    """ASGI middleware that rewrites pretty paths into query strings.

    Usage::

        app = RewriteMiddleware(catalogue_app)

        # Mounted below a prefix, with static files left alone
        app = RewriteMiddleware(
            catalogue_app,
            config=RewriteConfig(base_path="/catalog", passthrough_prefixes=("/catalog/static",)),
        )

    ``/catalog/member/profile/123`` reaches the wrapped app as
    ``/catalog/`` with ``p=member&action=profile&id=123``.
    """

    __slots__ = ("_app", "_base", "_config", "_entry", "_passthrough", "_raw_entry", "_table")

    def __init__(
        self,
        app: ASGIApp,
        table: RuleTable | None = None,
        *,
        config: RewriteConfig | None = None,
    ) -> None:
        self._app = app
        self._config = config or RewriteConfig()
        self._table = table if table is not None else self._config.build_table()
        self._table.compile()
        self._base = _normalize_prefix(self._config.base_path)
        self._passthrough = tuple(_normalize_prefix(p) for p in self._config.passthrough_prefixes)
        entry = "/" + self._config.entry_path.lstrip("/")
        self._entry = self._base + entry
        self._raw_entry = quote(self._entry).encode("ascii")

    @property
    def table(self) -> RuleTable:
        return self._table

    def _passes_through(self, path: str) -> bool:
        for prefix in self._passthrough:
            if not prefix or path == prefix or path.startswith(prefix + "/"):
                return True
        return False

    def _relative(self, path: str) -> str | None:
        """Path relative to the base, or None when outside it."""
        if not self._base:
            return path
        if path == self._base:
            return "/"
        if path.startswith(self._base + "/"):
            return path[len(self._base) :]
        return None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Rewrite the scope (on a copy) or fall through."""
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        path: str = scope["path"]
        relative = self._relative(path)
        if relative is None or self._passes_through(path):
            await self._app(scope, receive, send)
            return

        result = self._table.resolve(relative)
        if result.fallback and not self._config.rewrite_unmatched:
            logger.debug("Passing %r through unrewritten", path)
            await self._app(scope, receive, send)
            return

        original_qs = scope.get("query_string", b"").decode("latin-1")
        if not self._config.append_query_string:
            original_qs = ""
        query_string = result.to_query_string(original_qs)

        rewritten = dict(scope)
        rewritten["path"] = self._entry
        rewritten["raw_path"] = self._raw_entry
        rewritten["query_string"] = query_string.encode("latin-1")
        rewritten["extensions"] = {
            **(scope.get("extensions") or {}),
            EXTENSION_KEY: {
                "original_path": path,
                "original_query_string": scope.get("query_string", b"").decode("latin-1"),
                "rule": result.rule.pattern if result.rule else None,
                "fallback": result.fallback,
            },
        }
        logger.debug("%s %r -> %s?%s", scope.get("method", "GET"), path, self._entry, query_string)
        await self._app(rewritten, receive, send)
