"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI types (matching the spec)
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

# Scope extension key carrying the pre-rewrite request details
EXTENSION_KEY = "prettyurl"


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict."""

    method: str
    path: str
    query_string: bytes
    root_path: str
    headers: tuple[tuple[bytes, bytes], ...]
    rewrite: dict[str, Any] | None

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        extensions = scope.get("extensions") or {}
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
            root_path=scope.get("root_path", ""),
            headers=tuple(scope.get("headers", ())),
            rewrite=extensions.get(EXTENSION_KEY),
        )

    def header(self, name: str, default: str = "") -> str:
        """First value of header *name* (case-insensitive), latin-1 decoded."""
        raw_name = name.lower().encode("latin-1")
        for key, value in self.headers:
            if key.lower() == raw_name:
                return value.decode("latin-1")
        return default
