"""Diagnostic echo application.

An inert ASGI app that reports what it received: method, path, query
string, parsed parameters, and the rewrite details the middleware left
in the scope. Mount it behind ``RewriteMiddleware`` to check that a
deployment rewrites the way you expect::

    app = RewriteMiddleware(EchoApp())

Responds with ``text/plain`` lines, or JSON when the client sends
``Accept: application/json``.
"""

import json
from typing import Any
from urllib.parse import parse_qsl

from prettyurl._internal.asgi import HTTPScope, Receive, Scope, Send


def _body_allowed(method: str) -> bool:
    return method != "HEAD"


class EchoApp:
    """Echo request variables back to the client."""

    __slots__ = ()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        request = HTTPScope.from_scope(scope)
        report = build_report(request)
        if "application/json" in request.header("accept"):
            content_type = "application/json"
            body = json.dumps(report, indent=2).encode("utf-8")
        else:
            content_type = "text/plain; charset=utf-8"
            body = render_text(report).encode("utf-8")

        await send(
            {
                "type": "http.response.start",
                "status": 200,
                "headers": [
                    (b"content-type", content_type.encode("latin-1")),
                    (b"content-length", str(len(body)).encode("latin-1")),
                    (b"cache-control", b"no-store"),
                ],
            }
        )
        await send(
            {
                "type": "http.response.body",
                "body": body if _body_allowed(request.method) else b"",
            }
        )


def build_report(request: HTTPScope) -> dict[str, Any]:
    """Collect the request variables worth showing."""
    query_string = request.query_string.decode("latin-1")
    rewrite = request.rewrite or {}
    return {
        "method": request.method,
        "path": request.path,
        "query_string": query_string,
        # Repeated keys kept, in order: the app sees every value
        "params": [
            [name, value] for name, value in parse_qsl(query_string, keep_blank_values=True)
        ],
        "original_path": rewrite.get("original_path", request.path),
        "rule": rewrite.get("rule"),
        "fallback": rewrite.get("fallback", False),
        "rewritten": bool(rewrite),
    }


def render_text(report: dict[str, Any]) -> str:
    """One ``NAME: value`` line per report entry, params indented below."""
    lines: list[str] = []
    for key, value in report.items():
        if key == "params":
            lines.append("PARAMS:")
            lines.extend(f"  {name} = {param}" for name, param in value)
            continue
        lines.append(f"{key.upper()}: {'' if value is None else value}")
    return "\n".join(lines) + "\n"
