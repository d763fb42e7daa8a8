"""Async test client for ASGI applications wrapped by prettyurl.

Sends requests through the ASGI interface directly — no HTTP involved.
"""

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from prettyurl._internal.asgi import ASGIApp, Receive, Scope, Send


@dataclass(frozen=True, slots=True)
class TestResponse:
    """Status, headers, and body captured from ``send()``."""

    __test__ = False  # Tell pytest this is not a test class

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        return json.loads(self.body)


class RecordingApp:
    """ASGI app that records every scope it receives and answers 204."""

    __slots__ = ("scopes",)

    def __init__(self) -> None:
        self.scopes: list[Scope] = []

    @property
    def last(self) -> Scope:
        return self.scopes[-1]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self.scopes.append(scope)
        if scope["type"] != "http":
            return
        await send({"type": "http.response.start", "status": 204, "headers": []})
        await send({"type": "http.response.body", "body": b""})


class TestClient:
    """Async test client for ASGI applications.

    Usage::

        client = TestClient(RewriteMiddleware(EchoApp()))
        response = await client.get("/member/profile/123")
        assert response.status == 200
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("app",)

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def get(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> TestResponse:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> TestResponse:
        """Send an arbitrary request through the ASGI app."""
        # Split path and query string
        if "?" in path:
            path_part, query_string = path.split("?", 1)
        else:
            path_part = path
            query_string = ""

        raw_headers: list[tuple[bytes, bytes]] = []
        for name, value in (headers or {}).items():
            raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path_part,
            "raw_path": quote(path_part).encode("ascii"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        request_body = body or b""
        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            return {"type": "http.disconnect"}

        response_status = 500
        response_headers: dict[str, str] = {}
        response_body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal response_status
            if message["type"] == "http.response.start":
                response_status = message["status"]
                for name_b, value_b in message.get("headers", []):
                    response_headers[name_b.decode("latin-1")] = value_b.decode("latin-1")
            elif message["type"] == "http.response.body":
                response_body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        return TestResponse(
            status=response_status,
            headers=response_headers,
            body=b"".join(response_body_parts),
        )
